# arizeclient

A Python client for the Arize REST API. It covers datasets, projects,
evaluators and organizations. You can address a resource by ID or by
name. Names are resolved to IDs for you.

Responses come back as the decoded JSON: plain dicts and lists.

## Installation

```
pip install arizeclient
```

## Configuration

`arizeclient.config.Config` is a frozen dataclass. It holds:

- the API key
- the hosts and schemes
- the endpoint overrides
- the timeout (`http_timeout`, in seconds)
- the limits

`Config.resolve()` returns a copy with the gaps filled in. Each field left
at its empty value is taken from the environment first, then from a
default. The environment variables are:

- `ARIZE_API_KEY`
- `ARIZE_API_HOST`, `ARIZE_API_SCHEME`
- `ARIZE_OTLP_HOST`, `ARIZE_OTLP_SCHEME`
- `ARIZE_FLIGHT_HOST`, `ARIZE_FLIGHT_PORT`, `ARIZE_FLIGHT_SCHEME`
- `ARIZE_REGION`, `ARIZE_SINGLE_HOST`, `ARIZE_SINGLE_PORT`, `ARIZE_BASE_DOMAIN`
- `ARIZE_REQUEST_VERIFY`, `ARIZE_MAX_HTTP_PAYLOAD_SIZE_MB`, `ARIZE_DIRECTORY`
- `ARIZE_ENABLE_CACHING`, `ARIZE_MAX_PAST_YEARS`

`resolve()` then applies the endpoint override, if one is set, and
rewrites the hosts from it. The overrides are a `Region`, a single host
(and port), or a base domain.

`Config.validate()` raises a `ConfigError` (a `ValueError`) when the
result is unusable. Two cases have their own subclass:

- `MissingAPIKeyError` when there is no API key.
- `MultipleEndpointOverridesError` when more than one override is set.

`validate()` also raises `ConfigError` in these cases:

- a port lies outside 1–65535.
- a scheme is not `http` or `https`.
- the region is unknown.
- the payload limit is below 1.
- `max_past_years` is below 1.

```python
from arizeclient.config import Config, Region

config = Config(api_key="placeholder", region=Region.EU_WEST).resolve()
config.validate()
print(config.api_url())   # https://api.eu-west-1a.arize.com
print(config)             # the API key is masked
```

Other helpers in the module:

- `is_valid_region`
- `region_endpoints_for`, which returns a `RegionEndpoints` or `None`
- `mask_secret`
- `Config.headers()`, the headers sent with every request

## Making requests

`arizeclient.transport.Transport` resolves and validates the `Config` it
is given. It then sends JSON requests with the configured headers.

You may pass your own `httpx.Client`. Otherwise the transport creates
one, with the configured timeout and TLS verification, and `close()`
closes it. The transport is also a context manager.

Each resource client is built on a transport:

```python
from arizeclient.config import Config
from arizeclient.transport import Transport
from arizeclient import datasets, projects

with Transport(Config(api_key="placeholder")) as transport:
    ds = datasets.DatasetsClient(transport)
    page = ds.list(datasets.ListRequest(space="demo", limit=10))

    created = ds.create(datasets.CreateRequest(
        space="demo",
        name="qa-examples",
        examples=[{"input": "hello", "output": "world"}],
    ))

    pr = projects.ProjectsClient(transport)
    project = pr.get(projects.GetRequest(project="my-project", space="demo"))
```

### Datasets

`DatasetsClient` has these methods:

- `list`
- `get`
- `create`
- `update` (renames a dataset)
- `delete`
- `list_examples`
- `append_examples`
- `annotate_examples`

`create` raises `NoExamplesError` when no examples are given, before any
request is sent.

For `annotate_examples`, each annotation is an `AnnotateRecordInput`
holding a list of `AnnotationInput` values. A value has a `name` and an
optional `score`, `label` or `text`:

```python
ds.annotate_examples(datasets.AnnotateExamplesRequest(
    dataset="qa-examples",
    space="demo",
    annotations=[datasets.AnnotateRecordInput(
        record_id="ex-1",
        values=[datasets.AnnotationInput(name="quality", score=0.9)],
    )],
))
```

### Projects

`ProjectsClient` has these methods:

- `list`
- `get`
- `create`
- `update` (renames a project)
- `delete`

### Name or ID

Some request fields take either a resource ID or a name: `space`,
`dataset`, `project`, `evaluator` and `organization`.

A value counts as an ID when it is standard base64 that decodes to text
containing a colon. Any other value is treated as a name. A name is
looked up by paging through the matching list endpoint until an exact
match turns up. A name lookup for a dataset, project or evaluator also
needs the parent `space`.

In the `list` methods, `space` works differently. An ID becomes the
`space_id` filter. A name becomes the `space_name` filter, with no lookup.

The lookup helpers are in `arizeclient.resolve`:

- `find_space_id`
- `find_organization_id`
- `find_role_id`
- `find_project_id`
- `find_dataset_id`
- `find_experiment_id`
- `find_prompt_id`
- `find_evaluator_id`
- `find_annotation_config_id`
- `find_annotation_queue_id`
- `find_ai_integration_id`
- `find_task_id`

The module also has `is_resource_id` and `resolve_space_filter`.

### Evaluators

Each evaluator version is a template version or a code version. A code
version is either managed or custom. The `type` discriminators are filled
in for you.

```python
from arizeclient import evaluators

ev = evaluators.EvaluatorsClient(transport)
ev.create(evaluators.CreateRequest(
    space="demo",
    name="relevance",
    version=evaluators.VersionConfig(
        commit_message="initial",
        template={"name": "score", "template": "{{input}}"},
    ),
))
ev.create_version(evaluators.CreateVersionRequest(
    evaluator="relevance",
    space="demo",
    version=evaluators.VersionConfig(
        commit_message="use a managed check",
        code=evaluators.CodeConfig(managed={
            "name": "hallucination",
            "managed_evaluator": "hallucination",
            "variables": ["input"],
        }),
    ),
))
```

`EvaluatorsClient` has these methods:

- `list`
- `get` (optionally for a given `version_id`)
- `create`
- `update`
- `delete`
- `list_versions`
- `create_version`
- `get_version`

`list` and `list_versions` ask for 50 items per page unless you give a
limit.

`as_template` and `as_code` return a version as the matching variant, or
`None` when it is the other kind. The client raises these errors before
it sends any request:

- `ConflictingVersionConfigError` when a version config sets both template and code.
- `ConflictingCodeConfigError` when a code config sets both managed and custom.
- `ValueError` when neither is set.
- `NoUpdateFieldsError` when an update has nothing to change.

### Organizations

```python
from arizeclient import organizations

orgs = organizations.OrganizationsClient(transport)
orgs.add_user(organizations.AddUserRequest(
    organization="acme",
    user_id="user-1",
    role=organizations.predefined_role(organizations.OrganizationRole.ADMIN),
))
```

`OrganizationsClient` has these methods:

- `list`
- `get`
- `create`
- `update`
- `delete`
- `add_user`
- `remove_user`

`add_user` always sends a predefined role assignment. Role assignments
can be built and read with these helpers:

- `predefined_role` and `custom_role` build one.
- `as_predefined` and `as_custom` read one back, or return `None`.

## Errors

HTTP failures raise subclasses of `arizeclient.errors.APIError`:

| Class | Raised for |
| --- | --- |
| `BadRequestError` | 400 |
| `UnauthorizedError` | 401 |
| `ForbiddenError` | 403 |
| `NotFoundError` | 404 |
| `ConflictError` | 409 |
| `UnprocessableEntityError` | 422 |
| `RateLimitError` | 429 |
| `ServerError` | 5xx |

Any other status of 400 or above raises `APIError` itself.

Each error carries `status_code`, `title` and the raw `body`. The title
is taken from the JSON body's `title` when there is one. Otherwise it is
the standard status text.

Name lookups fail in two other ways:

- `ResourceNotFoundError` when a name cannot be resolved. Its `available` lists the names that were seen.
- `AmbiguousNameError` when a space name matches more than one space. Its `matching_ids` lists them.

```python
from arizeclient.errors import NotFoundError, ResourceNotFoundError

try:
    ds.get(datasets.GetRequest(dataset="missing", space="demo"))
except ResourceNotFoundError as exc:
    print(exc.available)
except NotFoundError as exc:
    print(exc.status_code, exc.title)
```

## Pre-release endpoints

Every client method is marked alpha or beta. The first call to each
method logs a single warning through the standard `logging` module.
`arizeclient.prerelease.reset_warnings()` lets the warnings be logged
again.

## What this package does not do

- There is no single client object that bundles the resource clients. Build each one on a `Transport`.
- There are no clients for spaces, roles, experiments, prompts, annotation configs, annotation queues, AI integrations or tasks. These resources can only be looked up by name, through `arizeclient.resolve`.
- There is no command-line tool.
- The OTLP and flight settings in `Config` are resolved and validated, but nothing sends traces or flight data.
- `max_http_payload_size_mb`, `arize_directory` and `disable_caching` are configuration only. Nothing in the package enforces a payload limit or writes a local cache.

## Running the tests

```
pip install -e ".[test]"
pytest
```