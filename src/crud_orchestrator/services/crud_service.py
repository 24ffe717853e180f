"""
crud_orchestrator.services.crud_service

Generic CRUD service over an injected data-access port.

Responsibilities:
- Pass read/delete/clear operations straight through to the port.
- Branch upserts on identifier presence: create directly, or check existence
  before updating.
- Propagate every port error unchanged.
"""

from __future__ import annotations

from typing import Generic

from crud_orchestrator.domain.model import IdT, T
from crud_orchestrator.domain.ports import CrudDataService
from crud_orchestrator.observability.logging import get_logger


class CrudService(Generic[T, IdT]):
    """
    Stateless orchestrator for one entity type.

    The port is the only dependency and must be supplied by the caller;
    `entity_type` is used for log context only.
    """

    def __init__(
        self,
        data_service: CrudDataService[T, IdT],
        *,
        entity_type: type[T] | None = None,
    ) -> None:
        self._data_service = data_service
        self._entity_name = entity_type.__name__ if entity_type is not None else "entity"
        self._log = get_logger(__name__, entity=self._entity_name)

    @property
    def data_service(self) -> CrudDataService[T, IdT]:
        return self._data_service

    def get_all(self) -> list[T]:
        self._log.debug("crud.get_all")
        return self._data_service.get_all()

    def get_by_id(self, id: IdT) -> T:
        self._log.debug("crud.get_by_id", id=id)
        return self._data_service.get_by_id(id)

    def upsert(self, entity: T) -> T:
        """
        Create `entity` when it has no identifier, otherwise update it.

        The update path looks the record up first so a missing identifier
        surfaces as the port's not-found error before any write happens.
        Duplicate-entry errors from the port reach the caller as raised.
        """
        entity_id = entity.id
        if entity_id is None:
            self._log.debug("crud.upsert.create")
            return self._data_service.upsert(entity)

        self._log.debug("crud.upsert.update", id=entity_id)
        # Existence check only; the stored version is not used.
        self._data_service.get_by_id(entity_id)
        return self._data_service.upsert(entity)

    def delete(self, id: IdT) -> None:
        self._log.debug("crud.delete", id=id)
        self._data_service.delete(id)

    def clear(self) -> None:
        # Wipes every record of this entity type; meant for tests and admin resets.
        self._log.debug("crud.clear")
        self._data_service.clear()


# --- Module Notes -----------------------------------------------------------
# The update path's get-then-write is not atomic; ports that need isolation must
# provide it (e.g. by locking inside their own `upsert`).
