"""
crud_orchestrator

Top-level package for the generic CRUD orchestration layer.

Responsibilities:
- Expose package version metadata.
- Re-export the public surface (service, port, entity contract, errors).
"""

from crud_orchestrator.domain.exceptions import CrudError, DuplicationError, NotFoundError
from crud_orchestrator.domain.model import DomainModel
from crud_orchestrator.domain.ports import CrudDataService
from crud_orchestrator.services.crud_service import CrudService

__all__ = [
    "CrudDataService",
    "CrudError",
    "CrudService",
    "DomainModel",
    "DuplicationError",
    "NotFoundError",
    "__version__",
]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file free of configuration side effects; logging is set up by `bootstrap`.
