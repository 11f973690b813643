"""
Shared, cross-cutting code for the API.

`core/` holds the pieces every feature package uses: the database gateway,
settings, logging setup, error handlers and validation helpers. SQL and
business rules stay in the feature packages (`questions/`, `answers/`,
`votes/`).
"""
