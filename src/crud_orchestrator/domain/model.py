"""
crud_orchestrator.domain.model

Entity contract for anything the orchestration layer can upsert.

Responsibilities:
- Describe the identifier capability (`id`, nullable until persisted).
- Provide the type variables the generic service and port are written against.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Protocol, TypeVar

IdT = TypeVar("IdT", bound=Hashable)


class DomainModel(Protocol[IdT]):
    """
    Structural contract: any object with a read/write `id` attribute.
    `None` marks an entity that has not been persisted yet.
    """

    id: IdT | None


T = TypeVar("T", bound=DomainModel[Any])


# --- Module Notes -----------------------------------------------------------
# Dataclasses, pydantic models and ORM rows all satisfy the protocol without inheriting from it.
