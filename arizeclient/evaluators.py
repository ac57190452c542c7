"""Evaluators API: evaluators and their versioned configurations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional
from urllib.parse import quote

from . import optfields
from .prerelease import Stage, warn
from .resolve import find_evaluator_id, find_space_id, resolve_space_filter
from .transport import Transport

_EVALUATORS_PATH = "/v2/evaluators"
_EVALUATOR_VERSIONS_PATH = "/v2/evaluator-versions"
_DEFAULT_PAGE_SIZE = 50


class NoUpdateFieldsError(ValueError):
    """Raised by :meth:`EvaluatorsClient.update` when no patch field is set."""

    def __init__(
        self, message: str = "evaluators: at least one patch field must be provided"
    ) -> None:
        super().__init__(message)


class ConflictingVersionConfigError(ValueError):
    """Raised when both a template and a code configuration are given."""

    def __init__(
        self,
        message: str = (
            "evaluators: VersionConfig.template and VersionConfig.code are "
            "mutually exclusive; set exactly one"
        ),
    ) -> None:
        super().__init__(message)


class ConflictingCodeConfigError(ValueError):
    """Raised when both a managed and a custom code configuration are given."""

    def __init__(
        self,
        message: str = (
            "evaluators: CodeConfig.managed and CodeConfig.custom are "
            "mutually exclusive; set exactly one"
        ),
    ) -> None:
        super().__init__(message)


class EvaluatorType(str, Enum):
    """Kind of evaluator."""

    TEMPLATE = "template"
    CODE = "code"

    def __str__(self) -> str:
        return self.value


@dataclass
class CodeConfig:
    """Code configuration of a version: set exactly one of ``managed`` or ``custom``.

    The inner ``type`` discriminator is filled in automatically.
    """

    managed: Optional[Mapping[str, Any]] = None
    custom: Optional[Mapping[str, Any]] = None


@dataclass
class VersionConfig:
    """Configuration of a new evaluator version.

    Set exactly one of ``template`` (an LLM template configuration) or
    ``code``; the evaluator's type follows from which one is set.
    """

    commit_message: str = ""
    template: Optional[Mapping[str, Any]] = None
    code: Optional[CodeConfig] = None


@dataclass
class ListRequest:
    """Optional filters for listing evaluators; ``limit`` of 0 means 50."""

    space: str = ""
    name: str = ""
    limit: int = 0
    cursor: str = ""


@dataclass
class GetRequest:
    """Identifies an evaluator; an empty ``version_id`` means the latest version."""

    evaluator: str = ""
    space: str = ""
    version_id: str = ""


@dataclass
class CreateRequest:
    """A new evaluator with its initial version."""

    space: str = ""
    name: str = ""
    description: str = ""
    version: VersionConfig = field(default_factory=VersionConfig)


@dataclass
class UpdateRequest:
    """Patch of an evaluator's metadata; fields left as None are unchanged."""

    evaluator: str = ""
    space: str = ""
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass
class DeleteRequest:
    """Identifies the evaluator to delete."""

    evaluator: str = ""
    space: str = ""


@dataclass
class ListVersionsRequest:
    """Evaluator and paging options for listing versions; ``limit`` of 0 means 50."""

    evaluator: str = ""
    space: str = ""
    limit: int = 0
    cursor: str = ""


@dataclass
class CreateVersionRequest:
    """A new version for an existing evaluator; its kind must match the evaluator's."""

    evaluator: str = ""
    space: str = ""
    version: VersionConfig = field(default_factory=VersionConfig)


@dataclass
class GetVersionRequest:
    """Identifies an evaluator version by its ID."""

    version_id: str = ""


def _variant(version: Any, kind: EvaluatorType) -> Optional[dict[str, Any]]:
    if not isinstance(version, Mapping) or version.get("type") != kind.value:
        return None
    return dict(version)


def as_template(version: Any) -> Optional[dict[str, Any]]:
    """Return the version as its template variant, or None if it is not one."""
    return _variant(version, EvaluatorType.TEMPLATE)


def as_code(version: Any) -> Optional[dict[str, Any]]:
    """Return the version as its code variant, or None if it is not one."""
    return _variant(version, EvaluatorType.CODE)


def build_code_config(config: CodeConfig) -> dict[str, Any]:
    """Build the wire form of a code configuration with its type discriminator."""
    if config.managed is not None and config.custom is not None:
        raise ConflictingCodeConfigError()
    if config.managed is not None:
        return {**config.managed, "type": "managed"}
    if config.custom is not None:
        return {**config.custom, "type": "custom"}
    raise ValueError("evaluators: CodeConfig requires exactly one of managed or custom")


def build_version_create(config: VersionConfig) -> tuple[dict[str, Any], EvaluatorType]:
    """Build the wire form of a version and report the evaluator type it implies."""
    if config.template is not None and config.code is not None:
        raise ConflictingVersionConfigError()
    if config.template is not None:
        return (
            {
                "commit_message": config.commit_message,
                "template_config": dict(config.template),
            },
            EvaluatorType.TEMPLATE,
        )
    if config.code is not None:
        return (
            {
                "commit_message": config.commit_message,
                "code_config": build_code_config(config.code),
            },
            EvaluatorType.CODE,
        )
    raise ValueError(
        "evaluators: VersionConfig requires exactly one of template or code"
    )


def _evaluator_path(evaluator_id: str, *parts: str) -> str:
    return "/".join((_EVALUATORS_PATH, quote(evaluator_id, safe=""), *parts))


class EvaluatorsClient:
    """Access to the evaluators API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self, request: Optional[ListRequest] = None) -> Any:
        """Return one page of evaluators (50 per page unless a limit is given)."""
        warn("evaluators.list", Stage.ALPHA)
        request = request or ListRequest()
        space_id, space_name = resolve_space_filter(request.space)
        params = {
            "name": optfields.if_set(request.name),
            "limit": optfields.with_default(request.limit, _DEFAULT_PAGE_SIZE),
            "cursor": optfields.if_set(request.cursor),
            "space_id": space_id,
            "space_name": space_name,
        }
        return self._transport.request("GET", _EVALUATORS_PATH, params=params)

    def get(self, request: GetRequest) -> Any:
        """Return an evaluator with its latest or requested version."""
        warn("evaluators.get", Stage.ALPHA)
        evaluator_id = find_evaluator_id(
            self._transport, request.evaluator, request.space
        )
        params = {"version_id": optfields.if_set(request.version_id)}
        return self._transport.request(
            "GET", _evaluator_path(evaluator_id), params=params
        )

    def create(self, request: CreateRequest) -> Any:
        """Create an evaluator with its initial version and return it."""
        warn("evaluators.create", Stage.ALPHA)
        space_id = find_space_id(self._transport, request.space)
        version, evaluator_type = build_version_create(request.version)
        body: dict[str, Any] = {
            "name": request.name,
            "space_id": space_id,
            "type": evaluator_type.value,
            "version": version,
        }
        description = optfields.if_set(request.description)
        if description is not None:
            body["description"] = description
        return self._transport.request("POST", _EVALUATORS_PATH, body=body)

    def update(self, request: UpdateRequest) -> Any:
        """Patch an evaluator's name and/or description and return it."""
        warn("evaluators.update", Stage.ALPHA)
        if request.name is None and request.description is None:
            raise NoUpdateFieldsError()
        evaluator_id = find_evaluator_id(
            self._transport, request.evaluator, request.space
        )
        body = {
            key: value
            for key, value in (
                ("name", request.name),
                ("description", request.description),
            )
            if value is not None
        }
        return self._transport.request("PATCH", _evaluator_path(evaluator_id), body=body)

    def delete(self, request: DeleteRequest) -> None:
        """Remove an evaluator."""
        warn("evaluators.delete", Stage.ALPHA)
        evaluator_id = find_evaluator_id(
            self._transport, request.evaluator, request.space
        )
        self._transport.request("DELETE", _evaluator_path(evaluator_id))

    def list_versions(self, request: ListVersionsRequest) -> Any:
        """Return one page of an evaluator's versions (50 per page by default)."""
        warn("evaluators.list_versions", Stage.ALPHA)
        evaluator_id = find_evaluator_id(
            self._transport, request.evaluator, request.space
        )
        params = {
            "limit": optfields.with_default(request.limit, _DEFAULT_PAGE_SIZE),
            "cursor": optfields.if_set(request.cursor),
        }
        return self._transport.request(
            "GET", _evaluator_path(evaluator_id, "versions"), params=params
        )

    def create_version(self, request: CreateVersionRequest) -> Any:
        """Append a new version to an evaluator and return it."""
        warn("evaluators.create_version", Stage.ALPHA)
        evaluator_id = find_evaluator_id(
            self._transport, request.evaluator, request.space
        )
        version, _ = build_version_create(request.version)
        return self._transport.request(
            "POST", _evaluator_path(evaluator_id, "versions"), body=version
        )

    def get_version(self, request: GetVersionRequest) -> Any:
        """Return a single evaluator version by its ID."""
        warn("evaluators.get_version", Stage.ALPHA)
        return self._transport.request(
            "GET", f"{_EVALUATOR_VERSIONS_PATH}/{quote(request.version_id, safe='')}"
        )