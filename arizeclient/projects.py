"""Projects API: list, fetch, create, rename and delete projects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import quote

from . import optfields
from .prerelease import Stage, warn
from .resolve import find_project_id, find_space_id, resolve_space_filter
from .transport import Transport

_PROJECTS_PATH = "/v2/projects"


@dataclass
class ListRequest:
    """Optional filters for listing projects.

    ``space`` given as an ID filters exactly; given as a name it is a
    case-insensitive substring filter. ``limit`` of 0 leaves the page size
    to the server (max 100).
    """

    space: str = ""
    name: str = ""
    limit: int = 0
    cursor: str = ""


@dataclass
class GetRequest:
    """Identifies a project by name or ID; ``space`` is needed for a name."""

    project: str = ""
    space: str = ""


@dataclass
class CreateRequest:
    """A new project in ``space`` (name or ID)."""

    name: str = ""
    space: str = ""


@dataclass
class DeleteRequest:
    """Identifies the project to delete."""

    project: str = ""
    space: str = ""


@dataclass
class UpdateRequest:
    """Renames a project given by name or ID."""

    project: str = ""
    space: str = ""
    name: str = ""


def _project_path(project_id: str) -> str:
    return f"{_PROJECTS_PATH}/{quote(project_id, safe='')}"


class ProjectsClient:
    """Access to the projects API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self, request: Optional[ListRequest] = None) -> Any:
        """Return one page of projects, optionally filtered by space and name."""
        warn("projects.list", Stage.BETA)
        request = request or ListRequest()
        space_id, space_name = resolve_space_filter(request.space)
        params = {
            "name": optfields.if_set(request.name),
            "limit": optfields.if_set(request.limit),
            "cursor": optfields.if_set(request.cursor),
            "space_id": space_id,
            "space_name": space_name,
        }
        return self._transport.request("GET", _PROJECTS_PATH, params=params)

    def get(self, request: GetRequest) -> Any:
        """Return a single project."""
        warn("projects.get", Stage.BETA)
        project_id = find_project_id(self._transport, request.project, request.space)
        return self._transport.request("GET", _project_path(project_id))

    def create(self, request: CreateRequest) -> Any:
        """Create a project and return it."""
        warn("projects.create", Stage.BETA)
        space_id = find_space_id(self._transport, request.space)
        body = {"name": request.name, "space_id": space_id}
        return self._transport.request("POST", _PROJECTS_PATH, body=body)

    def delete(self, request: DeleteRequest) -> None:
        """Remove a project."""
        warn("projects.delete", Stage.BETA)
        project_id = find_project_id(self._transport, request.project, request.space)
        self._transport.request("DELETE", _project_path(project_id))

    def update(self, request: UpdateRequest) -> Any:
        """Rename a project and return it."""
        warn("projects.update", Stage.ALPHA)
        project_id = find_project_id(self._transport, request.project, request.space)
        return self._transport.request(
            "PATCH", _project_path(project_id), body={"name": request.name}
        )