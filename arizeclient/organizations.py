"""Organizations API: organizations and their members."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Union
from urllib.parse import quote

from . import optfields
from .prerelease import Stage, warn
from .resolve import find_organization_id
from .transport import Transport

_ORGANIZATIONS_PATH = "/v2/organizations"


class OrganizationRole(str, Enum):
    """Predefined organization roles."""

    ADMIN = "admin"
    MEMBER = "member"
    READ_ONLY = "read-only"
    ANNOTATOR = "annotator"

    def __str__(self) -> str:
        return self.value


class RoleAssignmentType(str, Enum):
    """Discriminator of a role assignment."""

    PREDEFINED = "predefined"
    CUSTOM = "custom"

    def __str__(self) -> str:
        return self.value


def predefined_role(name: Union[OrganizationRole, str]) -> dict[str, Any]:
    """Build a predefined role assignment for the role ``name``."""
    return {"type": RoleAssignmentType.PREDEFINED.value, "name": str(name)}


def custom_role(role_id: str) -> dict[str, Any]:
    """Build a custom role assignment referring to the role ``role_id``."""
    return {"type": RoleAssignmentType.CUSTOM.value, "id": role_id}


def _variant(role: Any, kind: RoleAssignmentType) -> Optional[dict[str, Any]]:
    if not isinstance(role, Mapping) or role.get("type") != kind.value:
        return None
    return dict(role)


def as_predefined(role: Any) -> Optional[dict[str, Any]]:
    """Return the assignment if it is a predefined role, else None."""
    return _variant(role, RoleAssignmentType.PREDEFINED)


def as_custom(role: Any) -> Optional[dict[str, Any]]:
    """Return the assignment if it is a custom role, else None."""
    return _variant(role, RoleAssignmentType.CUSTOM)


@dataclass
class ListRequest:
    """Optional filters for listing organizations.

    ``limit`` of 0 leaves the page size to the server (max 100).
    """

    name: str = ""
    limit: int = 0
    cursor: str = ""


@dataclass
class GetRequest:
    """Identifies an organization by name or ID."""

    organization: str = ""


@dataclass
class CreateRequest:
    """A new organization; an empty description is left out."""

    name: str = ""
    description: str = ""


@dataclass
class UpdateRequest:
    """Patch of an organization; fields left as None keep their value.

    An empty ``description`` string clears the existing description.
    """

    organization: str = ""
    name: Optional[str] = None
    description: Optional[str] = None


@dataclass
class DeleteRequest:
    """Identifies the organization to delete."""

    organization: str = ""


@dataclass
class AddUserRequest:
    """Adds a user to an organization, or updates the user's role.

    ``role`` is a predefined role, given as an :class:`OrganizationRole` or
    as a mapping with a ``name`` (see :func:`predefined_role`).
    """

    organization: str = ""
    user_id: str = ""
    role: Union[OrganizationRole, str, Mapping[str, Any]] = OrganizationRole.MEMBER


@dataclass
class RemoveUserRequest:
    """Removes a user from an organization."""

    organization: str = ""
    user_id: str = ""


def _organization_path(organization_id: str, *parts: str) -> str:
    return "/".join(
        (_ORGANIZATIONS_PATH, quote(organization_id, safe=""), *parts)
    )


def _role_assignment(
    role: Union[OrganizationRole, str, Mapping[str, Any]]
) -> dict[str, Any]:
    if isinstance(role, Mapping):
        assignment = dict(role)
    else:
        assignment = {"name": str(role)}
    assignment["type"] = RoleAssignmentType.PREDEFINED.value
    return assignment


class OrganizationsClient:
    """Access to the organizations API."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def list(self, request: Optional[ListRequest] = None) -> Any:
        """Return one page of organizations, optionally filtered by name."""
        warn("organizations.list", Stage.BETA)
        request = request or ListRequest()
        params = {
            "name": optfields.if_set(request.name),
            "limit": optfields.if_set(request.limit),
            "cursor": optfields.if_set(request.cursor),
        }
        return self._transport.request("GET", _ORGANIZATIONS_PATH, params=params)

    def get(self, request: GetRequest) -> Any:
        """Return a single organization."""
        warn("organizations.get", Stage.BETA)
        org_id = find_organization_id(self._transport, request.organization)
        return self._transport.request("GET", _organization_path(org_id))

    def create(self, request: CreateRequest) -> Any:
        """Create an organization and return it."""
        warn("organizations.create", Stage.BETA)
        body: dict[str, Any] = {"name": request.name}
        description = optfields.if_set(request.description)
        if description is not None:
            body["description"] = description
        return self._transport.request("POST", _ORGANIZATIONS_PATH, body=body)

    def update(self, request: UpdateRequest) -> Any:
        """Patch an organization's name and/or description and return it."""
        warn("organizations.update", Stage.BETA)
        org_id = find_organization_id(self._transport, request.organization)
        body = {
            key: value
            for key, value in (
                ("name", request.name),
                ("description", request.description),
            )
            if value is not None
        }
        return self._transport.request("PATCH", _organization_path(org_id), body=body)

    def delete(self, request: DeleteRequest) -> None:
        """Irreversibly remove an organization and everything under it."""
        warn("organizations.delete", Stage.BETA)
        org_id = find_organization_id(self._transport, request.organization)
        self._transport.request("DELETE", _organization_path(org_id))

    def add_user(self, request: AddUserRequest) -> Any:
        """Add a user with a predefined role, or update the user's role."""
        warn("organizations.add_user", Stage.ALPHA)
        org_id = find_organization_id(self._transport, request.organization)
        body = {"user_id": request.user_id, "role": _role_assignment(request.role)}
        return self._transport.request(
            "POST", _organization_path(org_id, "users"), body=body
        )

    def remove_user(self, request: RemoveUserRequest) -> None:
        """Remove a user from an organization and all its spaces."""
        warn("organizations.remove_user", Stage.ALPHA)
        org_id = find_organization_id(self._transport, request.organization)
        self._transport.request(
            "DELETE",
            _organization_path(org_id, "users", quote(request.user_id, safe="")),
        )