"""
crud_orchestrator.bootstrap

Composition helpers for processes that embed the orchestration layer.

Responsibilities:
- Configure structured logging from settings once at startup.
- Build `CrudService` instances around caller-supplied ports.
"""

from __future__ import annotations

from crud_orchestrator.domain.model import IdT, T
from crud_orchestrator.domain.ports import CrudDataService
from crud_orchestrator.observability.logging import configure_logging, get_logger
from crud_orchestrator.services.crud_service import CrudService
from crud_orchestrator.settings import Settings, get_settings

log = get_logger(__name__)


def configure(settings: Settings | None = None) -> Settings:
    settings = settings or get_settings()
    configure_logging(settings)
    log.info("startup", env=settings.env)
    return settings


def build_crud_service(
    data_service: CrudDataService[T, IdT],
    *,
    entity_type: type[T] | None = None,
) -> CrudService[T, IdT]:
    return CrudService(data_service, entity_type=entity_type)


# --- Module Notes -----------------------------------------------------------
# Ports are never constructed here; whoever owns persistence passes them in.
