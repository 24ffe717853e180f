"""
crud_orchestrator.domain

Domain contracts shared by the service layer and data-access ports.

Responsibilities:
- Entity contract (`DomainModel`) and generic type variables.
- Data-access port contract (`CrudDataService`).
- Error taxonomy raised by ports and surfaced to callers.
"""

# Package marker; contracts are imported directly from submodules.
