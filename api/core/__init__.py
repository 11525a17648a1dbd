"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring,
settings, error types, request middleware). Feature-specific SQL and
business rules stay in the feature package (e.g. `posts/`).
"""
