import base64
import json

import httpx
import pytest

from arizeclient.config import Config
from arizeclient.datasets import (
    AnnotateExamplesRequest,
    AnnotateRecordInput,
    AnnotationInput,
    AppendExamplesRequest,
    CreateRequest,
    DatasetsClient,
    DeleteRequest,
    GetRequest,
    ListExamplesRequest,
    ListRequest,
    NoExamplesError,
    UpdateRequest,
)
from arizeclient.errors import BadRequestError, NotFoundError
from arizeclient.transport import Transport


def _test_id(prefix, suffix):
    return base64.b64encode(f"{prefix}:1:{suffix}".encode()).decode()


def dataset_id(suffix):
    return _test_id("Dataset", suffix)


def space_id(suffix):
    return _test_id("Space", suffix)


DS_ID = dataset_id("ds-1")


def make_client(handler):
    seen = []

    def record(request):
        seen.append(request)
        return handler(request)

    http_client = httpx.Client(transport=httpx.MockTransport(record))
    config = Config(api_key="placeholder", api_host="testserver", api_scheme="http")
    return DatasetsClient(Transport(config, http_client=http_client)), seen


def not_found(request):
    return httpx.Response(404, json={"title": "not found", "status": 404})


def test_list():
    def handler(request):
        return httpx.Response(
            200,
            json={
                "datasets": [{"id": "ds-1", "name": "my-dataset"}],
                "pagination": {"has_more": False},
            },
        )

    client, seen = make_client(handler)
    result = client.list(ListRequest(limit=10))
    assert len(result["datasets"]) == 1
    assert seen[0].url.path == "/v2/datasets"
    assert seen[0].url.params["limit"] == "10"
    assert seen[0].headers["authorization"] == "placeholder"


def test_list_filters_space_id():
    client, seen = make_client(
        lambda r: httpx.Response(200, json={"pagination": {"has_more": False}})
    )
    client.list(
        ListRequest(space=space_id("sp-1"), name="eval", limit=25, cursor="cursor-abc")
    )
    params = seen[0].url.params
    assert params["space_id"] == space_id("sp-1")
    assert "space_name" not in params
    assert params["name"] == "eval"
    assert params["limit"] == "25"
    assert params["cursor"] == "cursor-abc"


def test_list_filters_space_name():
    client, seen = make_client(
        lambda r: httpx.Response(200, json={"pagination": {"has_more": False}})
    )
    client.list(ListRequest(space="demo"))
    params = seen[0].url.params
    assert params["space_name"] == "demo"
    assert "space_id" not in params


def test_get():
    client, seen = make_client(
        lambda r: httpx.Response(200, json={"id": DS_ID, "name": "my-dataset"})
    )
    result = client.get(GetRequest(dataset=DS_ID))
    assert result["name"] == "my-dataset"
    assert seen[0].url.path == "/v2/datasets/" + DS_ID


def test_get_resolves_by_name():
    def handler(request):
        if request.method == "GET" and request.url.path == "/v2/datasets":
            assert request.url.params["name"] == "my-dataset"
            assert request.url.params["space_id"] == space_id("sp-1")
            return httpx.Response(
                200,
                json={
                    "datasets": [{"id": DS_ID, "name": "my-dataset"}],
                    "pagination": {"has_more": False},
                },
            )
        if request.method == "GET" and request.url.path.endswith("/" + DS_ID):
            return httpx.Response(200, json={"id": DS_ID, "name": "my-dataset"})
        return httpx.Response(500)

    client, seen = make_client(handler)
    result = client.get(GetRequest(dataset="my-dataset", space=space_id("sp-1")))
    assert result["name"] == "my-dataset"
    assert [r.url.path for r in seen] == ["/v2/datasets", "/v2/datasets/" + DS_ID]


def test_get_not_found():
    client, _ = make_client(not_found)
    with pytest.raises(NotFoundError) as info:
        client.get(GetRequest(dataset=dataset_id("missing")))
    assert info.value.status_code == 404


def test_create():
    def handler(request):
        body = json.loads(request.content)
        assert body["name"] == "new-ds"
        assert body["space_id"] == space_id("space-1")
        assert body["examples"] == [{"input": "hello"}]
        return httpx.Response(201, json={"id": "ds-new", "name": "new-ds"})

    client, seen = make_client(handler)
    result = client.create(
        CreateRequest(space=space_id("space-1"), name="new-ds", examples=[{"input": "hello"}])
    )
    assert result["id"] == "ds-new"
    assert seen[0].method == "POST"


def test_create_resolves_by_name():
    def handler(request):
        if request.method == "GET" and request.url.path == "/v2/spaces":
            return httpx.Response(
                200,
                json={
                    "spaces": [
                        {"id": space_id("sp-1"), "name": "demo", "created_at": "2026-01-01T00:00:00Z"}
                    ],
                    "pagination": {"has_more": False},
                },
            )
        if request.method == "POST" and request.url.path == "/v2/datasets":
            return httpx.Response(201, json={"id": "ds-new", "name": "new-ds"})
        return httpx.Response(500)

    client, seen = make_client(handler)
    result = client.create(
        CreateRequest(space="demo", name="new-ds", examples=[{"input": "hello"}])
    )
    assert result["id"] == "ds-new"
    assert json.loads(seen[1].content)["space_id"] == space_id("sp-1")


def test_delete():
    client, seen = make_client(lambda r: httpx.Response(204))
    assert client.delete(DeleteRequest(dataset=DS_ID)) is None
    assert seen[0].method == "DELETE"
    assert seen[0].url.path == "/v2/datasets/" + DS_ID


def test_delete_not_found():
    client, _ = make_client(not_found)
    with pytest.raises(NotFoundError):
        client.delete(DeleteRequest(dataset=dataset_id("missing")))


def test_list_examples():
    def handler(request):
        return httpx.Response(
            200,
            json={"examples": [{"id": "ex-1"}], "pagination": {"has_more": False}},
        )

    client, seen = make_client(handler)
    result = client.list_examples(
        ListExamplesRequest(dataset=DS_ID, limit=10, dataset_version_id="v-1")
    )
    assert len(result["examples"]) == 1
    assert seen[0].method == "GET"
    assert seen[0].url.path == "/v2/datasets/" + DS_ID + "/examples"
    assert seen[0].url.params["dataset_version_id"] == "v-1"
    assert seen[0].url.params["limit"] == "10"


def test_update():
    def handler(request):
        assert json.loads(request.content) == {"name": "renamed-ds"}
        return httpx.Response(200, json={"id": DS_ID, "name": "renamed-ds"})

    client, seen = make_client(handler)
    result = client.update(UpdateRequest(dataset=DS_ID, name="renamed-ds"))
    assert result["name"] == "renamed-ds"
    assert seen[0].method == "PATCH"
    assert seen[0].url.path == "/v2/datasets/" + DS_ID


def test_append_examples():
    def handler(request):
        body = json.loads(request.content)
        assert len(body["examples"]) == 1
        assert body["examples"][0]["input"] == "hello"
        return httpx.Response(
            201, json={"dataset_version_id": "v-1", "example_ids": ["ex-new"]}
        )

    client, seen = make_client(handler)
    result = client.append_examples(
        AppendExamplesRequest(
            dataset=DS_ID,
            dataset_version_id="v-1",
            examples=[{"input": "hello", "output": "world"}],
        )
    )
    assert result["dataset_version_id"] == "v-1"
    assert result["example_ids"] == ["ex-new"]
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/v2/datasets/" + DS_ID + "/examples"
    assert seen[0].url.params["dataset_version_id"] == "v-1"


def test_append_examples_server_error():
    client, _ = make_client(
        lambda r: httpx.Response(400, content=b'{"title":"invalid example"}')
    )
    with pytest.raises(BadRequestError) as info:
        client.append_examples(
            AppendExamplesRequest(dataset=dataset_id("ds-1"), examples=[{"input": "x"}])
        )
    assert info.value.title == "invalid example"


def test_annotate_examples():
    client, seen = make_client(lambda r: httpx.Response(202))
    result = client.annotate_examples(
        AnnotateExamplesRequest(
            dataset=DS_ID,
            annotations=[
                AnnotateRecordInput(
                    record_id="ex-1", values=[AnnotationInput(name="quality", score=0.9)]
                )
            ],
        )
    )
    assert result is None
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/v2/datasets/" + DS_ID + "/examples/annotate"
    body = json.loads(seen[0].content)
    assert body == {
        "annotations": [{"record_id": "ex-1", "values": [{"name": "quality", "score": 0.9}]}]
    }


def test_create_no_examples_sends_nothing():
    client, seen = make_client(lambda r: httpx.Response(500))
    with pytest.raises(NoExamplesError):
        client.create(CreateRequest(space=space_id("space-1"), name="empty-ds"))
    assert seen == []


def test_annotation_input_omits_unset_fields():
    assert AnnotationInput(name="tone", label="calm").to_dict() == {
        "name": "tone",
        "label": "calm",
    }