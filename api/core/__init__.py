"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that both feature packages use (DB wiring,
settings, logging, payload validation, the error envelope). Keep table-specific
SQL and response mapping in the feature packages (`candidates/`, `parties/`).
"""
