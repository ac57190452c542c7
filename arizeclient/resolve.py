"""Name-or-ID lookup for resources.

Each ``find_*_id`` helper accepts either a base64-encoded resource ID, which
is returned as is, or a human-readable name. A name is resolved by paging
through the matching list endpoint, filtered by name and parent, until an
item with exactly that name turns up. Names that cannot be resolved raise
:class:`~arizeclient.errors.ResourceNotFoundError`.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Callable, Iterator, Mapping, Optional

from .errors import AmbiguousNameError, ResourceNotFoundError
from .transport import Transport

_LIST_PAGE_SIZE = 100

_Extractor = Callable[[Any], Optional[tuple[str, str]]]


def is_resource_id(value: str) -> bool:
    """Report whether ``value`` looks like a base64 resource ID.

    A resource ID decodes (standard base64) to text containing a colon.
    """
    if not value:
        return False
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return b":" in decoded


def resolve_space_filter(space: str) -> tuple[Optional[str], Optional[str]]:
    """Split a space given as ID or name into ``(space_id, space_name)`` filters.

    Both are None for an empty input; exactly one is set otherwise.
    """
    if not space:
        return None, None
    if is_resource_id(space):
        return space, None
    return None, space


def _space_params(space: str) -> dict[str, Optional[str]]:
    space_id, space_name = resolve_space_filter(space)
    return {"space_id": space_id, "space_name": space_name}


def _require_parent(resource_type: str, name: str, parent: str) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        resource_type,
        name,
        hint=(
            f"Provide '{parent}' so the {resource_type} name can be resolved, "
            f"or provide the {resource_type} ID instead of the name."
        ),
    )


def _iter_items(
    transport: Transport, path: str, key: str, params: Mapping[str, Any]
) -> Iterator[Any]:
    """Yield every item of a cursor-paginated list endpoint."""
    cursor = ""
    while True:
        query = dict(params, limit=_LIST_PAGE_SIZE)
        if cursor:
            query["cursor"] = cursor
        page = transport.request("GET", path, params=query) or {}
        yield from page.get(key) or []
        pagination = page.get("pagination") or {}
        next_cursor = pagination.get("next_cursor")
        if not pagination.get("has_more") or next_cursor is None:
            return
        cursor = next_cursor


def _id_and_name(item: Any) -> Optional[tuple[str, str]]:
    if not isinstance(item, Mapping):
        return None
    return str(item.get("id") or ""), str(item.get("name") or "")


def _find_named(
    transport: Transport,
    resource_type: str,
    path: str,
    key: str,
    name: str,
    params: Mapping[str, Any],
    extract: _Extractor = _id_and_name,
) -> str:
    available: list[str] = []
    for item in _iter_items(transport, path, key, params):
        pair = extract(item)
        if pair is None:
            continue
        item_id, item_name = pair
        if item_name == name:
            return item_id
        available.append(item_name)
    raise ResourceNotFoundError(resource_type, name, available)


def find_space_id(transport: Transport, space: str) -> str:
    """Resolve a space ID or name to an ID.

    Raises :class:`AmbiguousNameError` when several spaces share the name.
    """
    if is_resource_id(space):
        return space
    matches = [
        pair[0]
        for pair in map(
            _id_and_name,
            _iter_items(transport, "/v2/spaces", "spaces", {"name": space}),
        )
        if pair is not None and pair[1] == space
    ]
    if len(matches) > 1:
        raise AmbiguousNameError("space", space, matches)
    if matches:
        return matches[0]
    raise ResourceNotFoundError("space", space)


def find_organization_id(transport: Transport, organization: str) -> str:
    """Resolve an organization ID or name to an ID."""
    if is_resource_id(organization):
        return organization
    return _find_named(
        transport,
        "organization",
        "/v2/organizations",
        "organizations",
        organization,
        {"name": organization},
    )


def find_role_id(transport: Transport, role: str) -> str:
    """Resolve a role ID or name to an ID."""
    if is_resource_id(role):
        return role
    return _find_named(transport, "role", "/v2/roles", "roles", role, {})


def _find_in_space(
    transport: Transport,
    resource_type: str,
    path: str,
    key: str,
    name: str,
    space: str,
    extract: _Extractor = _id_and_name,
) -> str:
    if is_resource_id(name):
        return name
    if not space:
        raise _require_parent(resource_type, name, "space")
    params = {"name": name, **_space_params(space)}
    return _find_named(transport, resource_type, path, key, name, params, extract)


def find_project_id(transport: Transport, project: str, space: str) -> str:
    """Resolve a project ID or name; ``space`` is needed for a name."""
    return _find_in_space(
        transport, "project", "/v2/projects", "projects", project, space
    )


def find_dataset_id(transport: Transport, dataset: str, space: str) -> str:
    """Resolve a dataset ID or name; ``space`` is needed for a name."""
    return _find_in_space(
        transport, "dataset", "/v2/datasets", "datasets", dataset, space
    )


def find_experiment_id(
    transport: Transport, experiment: str, dataset: str, space: str
) -> str:
    """Resolve an experiment ID or name.

    ``dataset`` is needed for an experiment name, and ``space`` when the
    dataset is itself given by name.
    """
    if is_resource_id(experiment):
        return experiment
    if not dataset:
        raise _require_parent("experiment", experiment, "dataset")
    if not is_resource_id(dataset) and not space:
        raise ResourceNotFoundError(
            "experiment",
            experiment,
            hint=(
                "Provide 'space' so the dataset name can be resolved, "
                "which is needed to resolve the experiment name. Alternatively, "
                "provide the experiment ID, or the dataset ID instead of the name."
            ),
        )
    dataset_id = find_dataset_id(transport, dataset, space)
    return _find_named(
        transport,
        "experiment",
        "/v2/experiments",
        "experiments",
        experiment,
        {"dataset_id": dataset_id},
    )


def find_prompt_id(transport: Transport, prompt: str, space: str) -> str:
    """Resolve a prompt ID or name; ``space`` is needed for a name."""
    return _find_in_space(transport, "prompt", "/v2/prompts", "prompts", prompt, space)


def find_evaluator_id(transport: Transport, evaluator: str, space: str) -> str:
    """Resolve an evaluator ID or name; ``space`` is needed for a name."""
    return _find_in_space(
        transport, "evaluator", "/v2/evaluators", "evaluators", evaluator, space
    )


def find_annotation_config_id(
    transport: Transport, annotation_config: str, space: str
) -> str:
    """Resolve an annotation config ID or name; ``space`` is needed for a name.

    Entries of any annotation-config variant are matched on their shared
    ``id`` and ``name`` fields; entries that are not objects are skipped.
    """
    return _find_in_space(
        transport,
        "annotation config",
        "/v2/annotation-configs",
        "annotation_configs",
        annotation_config,
        space,
    )


def find_annotation_queue_id(
    transport: Transport, annotation_queue: str, space: str
) -> str:
    """Resolve an annotation queue ID or name; ``space`` is needed for a name."""
    return _find_in_space(
        transport,
        "annotation queue",
        "/v2/annotation-queues",
        "annotation_queues",
        annotation_queue,
        space,
    )


def find_ai_integration_id(transport: Transport, integration: str, space: str) -> str:
    """Resolve an AI integration ID or name; ``space`` is needed for a name."""
    return _find_in_space(
        transport,
        "AI integration",
        "/v2/ai-integrations",
        "ai_integrations",
        integration,
        space,
    )


def find_task_id(transport: Transport, task: str, space: str) -> str:
    """Resolve a task ID or name; ``space`` is needed for a name."""
    return _find_in_space(transport, "task", "/v2/tasks", "tasks", task, space)