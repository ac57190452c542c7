"""Datasets API: list, fetch, create, rename and delete datasets and their examples."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

from . import optfields
from .prerelease import Stage, warn
from .resolve import find_dataset_id, find_space_id, resolve_space_filter
from .transport import Transport

_DATASETS_PATH = "/v2/datasets"


class NoExamplesError(ValueError):
    """Raised by :meth:`DatasetsClient.create` when no examples are given."""

    def __init__(self, message: str = "cannot create a dataset without examples") -> None:
        super().__init__(message)


@dataclass
class AnnotationInput:
    """One annotation value: a required name plus an optional score, label or text."""

    name: str
    score: Optional[float] = None
    label: Optional[str] = None
    text: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Wire form; unset optional values are left out."""
        data: dict[str, Any] = {"name": self.name}
        for key in ("score", "label", "text"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        return data


@dataclass
class AnnotateRecordInput:
    """A dataset example to annotate, identified by its example ID."""

    record_id: str
    values: list[AnnotationInput] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Wire form of the record and its annotation values."""
        return {
            "record_id": self.record_id,
            "values": [
                v.to_dict() if isinstance(v, AnnotationInput) else dict(v)
                for v in self.values
            ],
        }


@dataclass
class ListRequest:
    """Optional filters for listing datasets.

    ``space`` is a space name or ID; ``limit`` of 0 leaves the page size to
    the server (max 100); ``cursor`` continues from a previous page.
    """

    space: str = ""
    name: str = ""
    limit: int = 0
    cursor: str = ""


@dataclass
class GetRequest:
    """Identifies a dataset by name or ID; ``space`` is needed for a name."""

    dataset: str = ""
    space: str = ""


@dataclass
class CreateRequest:
    """A new dataset in ``space`` (name or ID) with at least one example."""

    space: str = ""
    name: str = ""
    examples: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class UpdateRequest:
    """Renames a dataset given by name or ID."""

    dataset: str = ""
    space: str = ""
    name: str = ""


@dataclass
class DeleteRequest:
    """Identifies the dataset to delete."""

    dataset: str = ""
    space: str = ""


@dataclass
class ListExamplesRequest:
    """Dataset and paging options for listing examples.

    ``limit`` of 0 leaves the page size to the server (max 500); an empty
    ``dataset_version_id`` means the latest version.
    """

    dataset: str = ""
    space: str = ""
    limit: int = 0
    dataset_version_id: str = ""


@dataclass
class AppendExamplesRequest:
    """Examples to append to a dataset version (latest when unset)."""

    dataset: str = ""
    space: str = ""
    dataset_version_id: str = ""
    examples: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class AnnotateExamplesRequest:
    """Per-example annotations to upsert (up to 1000 per request)."""

    dataset: str = ""
    space: str = ""
    annotations: list[Union[AnnotateRecordInput, Mapping[str, Any]]] = field(
        default_factory=list
    )


def _dataset_path(dataset_id: str, *parts: str) -> str:
    return "/".join((_DATASETS_PATH, quote(dataset_id, safe=""), *parts))


class DatasetsClient:
    """Access to the datasets API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self, request: Optional[ListRequest] = None) -> Any:
        """Return one page of datasets, optionally filtered by space and name."""
        warn("datasets.list", Stage.ALPHA)
        request = request or ListRequest()
        space_id, space_name = resolve_space_filter(request.space)
        params = {
            "name": optfields.if_set(request.name),
            "limit": optfields.if_set(request.limit),
            "cursor": optfields.if_set(request.cursor),
            "space_id": space_id,
            "space_name": space_name,
        }
        return self._transport.request("GET", _DATASETS_PATH, params=params)

    def get(self, request: GetRequest) -> Any:
        """Return a single dataset."""
        warn("datasets.get", Stage.ALPHA)
        dataset_id = find_dataset_id(self._transport, request.dataset, request.space)
        return self._transport.request("GET", _dataset_path(dataset_id))

    def create(self, request: CreateRequest) -> Any:
        """Create a dataset with its initial examples and return it."""
        warn("datasets.create", Stage.ALPHA)
        if not request.examples:
            raise NoExamplesError()
        space_id = find_space_id(self._transport, request.space)
        body = {
            "space_id": space_id,
            "name": request.name,
            "examples": [dict(example) for example in request.examples],
        }
        return self._transport.request("POST", _DATASETS_PATH, body=body)

    def update(self, request: UpdateRequest) -> Any:
        """Rename a dataset and return it."""
        warn("datasets.update", Stage.ALPHA)
        dataset_id = find_dataset_id(self._transport, request.dataset, request.space)
        return self._transport.request(
            "PATCH", _dataset_path(dataset_id), body={"name": request.name}
        )

    def delete(self, request: DeleteRequest) -> None:
        """Irreversibly remove a dataset."""
        warn("datasets.delete", Stage.ALPHA)
        dataset_id = find_dataset_id(self._transport, request.dataset, request.space)
        self._transport.request("DELETE", _dataset_path(dataset_id))

    def list_examples(self, request: ListExamplesRequest) -> Any:
        """Return one page of a dataset's examples."""
        warn("datasets.list_examples", Stage.ALPHA)
        dataset_id = find_dataset_id(self._transport, request.dataset, request.space)
        params = {
            "limit": optfields.if_set(request.limit),
            "dataset_version_id": optfields.if_set(request.dataset_version_id),
        }
        return self._transport.request(
            "GET", _dataset_path(dataset_id, "examples"), params=params
        )

    def append_examples(self, request: AppendExamplesRequest) -> Any:
        """Append examples and return the version written to and the new IDs."""
        warn("datasets.append_examples", Stage.ALPHA)
        dataset_id = find_dataset_id(self._transport, request.dataset, request.space)
        params = {"dataset_version_id": optfields.if_set(request.dataset_version_id)}
        body = {"examples": [dict(example) for example in request.examples]}
        return self._transport.request(
            "POST", _dataset_path(dataset_id, "examples"), params=params, body=body
        )

    def annotate_examples(self, request: AnnotateExamplesRequest) -> None:
        """Upsert annotations, keyed by annotation config name, on examples."""
        warn("datasets.annotate_examples", Stage.ALPHA)
        dataset_id = find_dataset_id(self._transport, request.dataset, request.space)
        body = {
            "annotations": [
                a.to_dict() if isinstance(a, AnnotateRecordInput) else dict(a)
                for a in request.annotations
            ]
        }
        self._transport.request(
            "POST", _dataset_path(dataset_id, "examples", "annotate"), body=body
        )