"""
Error taxonomy shared by every feature.

- NotFoundError: an id or unique-field lookup missed (404).
- ConflictError: the store rejected a write, e.g. a duplicate unique field,
  or the write contradicts existing state (409).

Role mismatches are raised as plain 403 HTTPExceptions by the access guard.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    def __init__(self, kind: str, identifier: Any) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Could not find {kind} {identifier}.",
        )
        self.kind = kind
        self.identifier = identifier


class ConflictError(RuntimeError):
    pass


def duplicate(kind: str, field: str, value: Any) -> ConflictError:
    return ConflictError(f"{kind} with {field} '{value}' already exists.")
