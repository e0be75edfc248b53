from __future__ import annotations

from .base import CRMStore, EntityStore
from .memory import InMemoryCRMStore, InMemoryEntityStore, uuid_id
from .seed import build_demo_store

__all__ = [
    "CRMStore",
    "EntityStore",
    "InMemoryCRMStore",
    "InMemoryEntityStore",
    "build_demo_store",
    "uuid_id",
]
