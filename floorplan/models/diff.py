"""Plan comparison output models."""

from __future__ import annotations
from enum import Enum

from pydantic import BaseModel


class ElementKind(str, Enum):
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"
    ROOM = "room"


class DiffStatus(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    MODIFIED = "modified"


class ElementDiff(BaseModel):
    id: str
    status: DiffStatus
    kind: ElementKind


class FloorPlanDiff(BaseModel):
    """Element-level changes between a baseline plan and the current one."""
    elements: list[ElementDiff] = []
    added_ids: set[str] = set()
    removed_ids: set[str] = set()
    modified_ids: set[str] = set()

    @property
    def is_empty(self) -> bool:
        return not self.elements
