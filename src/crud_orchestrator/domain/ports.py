"""
crud_orchestrator.domain.ports

Data-access port consumed by `CrudService`.

Responsibilities:
- Define the five persistence operations for one entity/identifier pair.
- Document which errors each operation may raise.
"""

from __future__ import annotations

from typing import Generic, Protocol

from crud_orchestrator.domain.model import IdT, T


class CrudDataService(Protocol, Generic[T, IdT]):
    """
    Persistence-facing interface. Implementations own storage, transactions
    and uniqueness enforcement.
    """

    def get_all(self) -> list[T]: ...

    def get_by_id(self, id: IdT) -> T:
        """Return the stored entity; raise `NotFoundError` if it is absent."""
        ...

    def upsert(self, entity: T) -> T:
        """
        Persist `entity` and return the stored version, with `id` populated
        for new records. Raise `DuplicationError` on a uniqueness violation.
        """
        ...

    def delete(self, id: IdT) -> None: ...

    def clear(self) -> None: ...


# --- Module Notes -----------------------------------------------------------
# Ports are matched structurally; test doubles only need these five methods.
