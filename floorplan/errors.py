"""Exceptions raised for requests that reference missing plan elements.

Geometry passes never raise on bad topology; these only cover lookups.
"""


class FloorPlanError(Exception):
    """Base class for floor plan errors."""


class WallNotFoundError(FloorPlanError, KeyError):
    def __init__(self, wall_id: str) -> None:
        super().__init__(wall_id)
        self.wall_id = wall_id

    def __str__(self) -> str:
        return f"wall {self.wall_id!r} not found"


class OpeningNotFoundError(FloorPlanError, KeyError):
    def __init__(self, opening_id: str) -> None:
        super().__init__(opening_id)
        self.opening_id = opening_id

    def __str__(self) -> str:
        return f"opening {self.opening_id!r} not found"
