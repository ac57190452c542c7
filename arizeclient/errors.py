"""Errors raised by the client: HTTP API errors and name-resolution errors."""

from __future__ import annotations

import json
from http import HTTPStatus

# Phrases that differ between Python versions are pinned here.
_STATUS_TEXT_OVERRIDES = {422: "Unprocessable Entity"}


def _quote(value: object) -> str:
    return json.dumps(str(value), ensure_ascii=False)


def _status_text(status_code: int) -> str:
    if status_code in _STATUS_TEXT_OVERRIDES:
        return _STATUS_TEXT_OVERRIDES[status_code]
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


class APIError(Exception):
    """Base class of all HTTP API errors."""

    def __init__(self, status_code: int, title: str = "", body: str = "") -> None:
        super().__init__(status_code, title, body)
        self.status_code = status_code
        self.title = title
        self.body = body

    def __str__(self) -> str:
        return f"arize API error {self.status_code}: {self.title}"


class BadRequestError(APIError):
    """HTTP 400."""


class UnauthorizedError(APIError):
    """HTTP 401."""


class ForbiddenError(APIError):
    """HTTP 403."""


class NotFoundError(APIError):
    """HTTP 404."""


class ConflictError(APIError):
    """HTTP 409."""


class UnprocessableEntityError(APIError):
    """HTTP 422."""


class RateLimitError(APIError):
    """HTTP 429."""


class ServerError(APIError):
    """HTTP 5xx."""


_ERRORS_BY_STATUS: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def _problem_title(body: str) -> str:
    try:
        problem = json.loads(body)
    except ValueError:
        return ""
    if isinstance(problem, dict):
        title = problem.get("title")
        if isinstance(title, str):
            return title
    return ""


def check_response(status_code: int, body: bytes | str | None) -> None:
    """Raise the typed :class:`APIError` for a status of 400 or above."""
    if status_code < 400:
        return None
    if body is None:
        text = ""
    elif isinstance(body, bytes):
        text = body.decode("utf-8", errors="replace")
    else:
        text = body
    title = _problem_title(text) or _status_text(status_code)

    error_type = _ERRORS_BY_STATUS.get(status_code)
    if error_type is None:
        error_type = ServerError if status_code >= 500 else APIError
    raise error_type(status_code, title, text)


class ResourceNotFoundError(LookupError):
    """A resource name could not be resolved to an ID.

    Distinct from :class:`NotFoundError`, which is an HTTP 404 from the server.
    """

    def __init__(
        self,
        resource_type: str,
        name: str,
        available: list[str] | None = None,
        hint: str = "",
    ) -> None:
        super().__init__(resource_type, name)
        self.resource_type = resource_type
        self.name = name
        self.available = list(available or [])
        self.hint = hint

    def __str__(self) -> str:
        message = f"{self.resource_type} {_quote(self.name)} not found"
        if self.available:
            message += (
                f". Available {self.resource_type}s: {', '.join(self.available)}"
            )
        if self.hint:
            message += f". {self.hint}"
        return message


class AmbiguousNameError(LookupError):
    """A resource name matched more than one resource; pass an ID instead."""

    def __init__(
        self, resource_type: str, name: str, matching_ids: list[str] | None = None
    ) -> None:
        super().__init__(resource_type, name)
        self.resource_type = resource_type
        self.name = name
        self.matching_ids = list(matching_ids or [])

    def __str__(self) -> str:
        return (
            f"Multiple {self.resource_type}s named {_quote(self.name)} found. "
            f"Use a {self.resource_type} ID to disambiguate. "
            f"Matching IDs: {', '.join(self.matching_ids)}"
        )