"""
crud_orchestrator.services

Service-layer package.

Responsibilities:
- Sit between callers (API controllers, jobs) and data-access ports.
- Decide which port calls an operation needs, and in which order.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake ports.
