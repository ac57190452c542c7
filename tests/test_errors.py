import pytest

from arizeclient.errors import (
    AmbiguousNameError,
    APIError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ResourceNotFoundError,
    ServerError,
    UnauthorizedError,
    UnprocessableEntityError,
    check_response,
)


@pytest.mark.parametrize(
    "error_type, status, title",
    [
        (NotFoundError, 404, "not found"),
        (BadRequestError, 400, "bad request"),
        (UnauthorizedError, 401, "unauthorized"),
        (ForbiddenError, 403, "forbidden"),
        (ConflictError, 409, "conflict"),
        (RateLimitError, 429, "rate limit"),
        (ServerError, 500, "server error"),
    ],
)
def test_typed_errors(error_type, status, title):
    err = error_type(status, title)
    assert str(err) != ""
    assert isinstance(err, error_type)
    assert isinstance(err, APIError)
    assert err.status_code == status
    assert str(err) == f"arize API error {status}: {title}"


def test_check_response_200_returns_none():
    assert check_response(200, b"{}") is None


@pytest.mark.parametrize(
    "status, body, error_type",
    [
        (401, b'{"title":"unauthorized"}', UnauthorizedError),
        (403, b'{"title":"forbidden"}', ForbiddenError),
        (404, b'{"title":"not found","status":404}', NotFoundError),
        (409, b'{"title":"conflict"}', ConflictError),
        (422, b'{"title":"validation failed"}', UnprocessableEntityError),
        (429, b'{"title":"rate limited"}', RateLimitError),
        (500, b'{"title":"internal error"}', ServerError),
    ],
)
def test_check_response_status_code_mapping(status, body, error_type):
    with pytest.raises(error_type) as info:
        check_response(status, body)
    assert info.value.status_code == status


def test_check_response_not_found_status_code():
    with pytest.raises(NotFoundError) as info:
        check_response(404, b'{"title":"not found","status":404}')
    assert info.value.status_code == 404
    assert info.value.title == "not found"


def test_non_json_body_falls_back_to_status_text():
    body = b"<html><body>Bad Gateway</body></html>"
    with pytest.raises(ServerError) as info:
        check_response(502, body)
    assert info.value.title == "Bad Gateway"
    assert info.value.body == body.decode()


def test_json_without_title_falls_back_to_status_text():
    body = b'{"detail":"missing field"}'
    with pytest.raises(BadRequestError) as info:
        check_response(400, body)
    assert info.value.title == "Bad Request"
    assert info.value.body == body.decode()


def test_long_body_is_preserved():
    body = b"a" * 500
    with pytest.raises(ServerError) as info:
        check_response(500, body)
    assert info.value.title == "Internal Server Error"
    assert info.value.body == body.decode()


def test_check_response_parses_title():
    with pytest.raises(BadRequestError) as info:
        check_response(400, b'{"title":"invalid input"}')
    assert info.value.title == "invalid input"


def test_other_4xx_is_plain_api_error():
    with pytest.raises(APIError) as info:
        check_response(418, b"")
    assert type(info.value) is APIError
    assert info.value.status_code == 418


def test_resource_not_found_format():
    err = ResourceNotFoundError(
        resource_type="dataset", name="missing", available=["a", "b", "c"]
    )
    msg = str(err)
    assert "dataset" in msg
    assert '"missing"' in msg
    assert "Available" in msg
    assert "a, b, c" in msg
    assert not isinstance(err, APIError)


def test_resource_not_found_with_hint():
    err = ResourceNotFoundError(
        resource_type="dataset", name="missing", hint="Provide 'space'."
    )
    assert "Provide 'space'." in str(err)
    assert err.available == []


def test_ambiguous_name_format():
    err = AmbiguousNameError(
        resource_type="space", name="shared-space", matching_ids=["id1", "id2"]
    )
    msg = str(err)
    assert "space" in msg
    assert '"shared-space"' in msg
    assert "ID" in msg
    assert "id1, id2" in msg