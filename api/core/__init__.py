"""
Shared, cross-cutting code for the API.

`core/` holds small building blocks that multiple features use
(DB wiring, schema, settings, errors, hypermedia links). Feature-specific SQL
and business logic live in the corresponding feature package (e.g. `games/`).
"""
