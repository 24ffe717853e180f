"""
crud_orchestrator.domain.exceptions

Error taxonomy for CRUD operations.

Responsibilities:
- Signal a missing record (`NotFoundError`) and a uniqueness violation
  (`DuplicationError`) with structured fields.
- Give callers one base class (`CrudError`) to map onto their transport.
"""

from __future__ import annotations

from typing import Any


class CrudError(Exception):
    """Base class for errors raised by data-access ports."""


class NotFoundError(CrudError):
    """
    Raised by a port when an identifier does not resolve to a stored record.
    """

    def __init__(self, entity_type: type, id: Any) -> None:
        self.entity_type = entity_type
        self.id = id
        super().__init__(f"{entity_type.__name__} with ID {id} does not exist.")


class DuplicationError(CrudError):
    """
    Raised by a port when persisting an entity would violate a uniqueness constraint.
    """

    def __init__(self, entity_type: type, field: str, cause: str) -> None:
        self.entity_type = entity_type
        self.field = field
        self.cause = cause
        super().__init__(f"{entity_type.__name__} with duplicate {field}: {cause}")


# --- Module Notes -----------------------------------------------------------
# The service layer never raises or wraps these; ports raise them and callers handle them.
