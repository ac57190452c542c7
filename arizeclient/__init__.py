"""Client library for the Arize REST API: configuration, transport, name
resolution and clients for datasets, projects, evaluators and organizations."""

__version__ = "0.8.0"

__all__ = [
    "config",
    "datasets",
    "errors",
    "evaluators",
    "optfields",
    "organizations",
    "prerelease",
    "projects",
    "resolve",
    "transport",
]