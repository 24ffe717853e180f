"""
tests.conftest

Shared fixtures. `fakes.py` sits beside this file and is imported as a
top-level module (pytest puts `tests/` on `sys.path`).
"""

from __future__ import annotations

import pytest
import structlog

from crud_orchestrator.services.crud_service import CrudService
from crud_orchestrator.settings import get_settings
from fakes import Pos, RecordingDataService


@pytest.fixture(autouse=True)
def _reset_global_config():
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()
    # configure_logging is process-wide; undo it so later tests start unconfigured.
    structlog.reset_defaults()


@pytest.fixture
def data_service() -> RecordingDataService:
    return RecordingDataService()


@pytest.fixture
def crud_service(data_service: RecordingDataService) -> CrudService[Pos, int]:
    return CrudService(data_service, entity_type=Pos)
