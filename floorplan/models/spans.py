"""Wall span models — the solid pieces left once openings are cut out."""

from __future__ import annotations
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class SpanType(str, Enum):
    WALL = "wall"     # Full height
    ABOVE = "above"   # Lintel, from opening top to wall top
    BELOW = "below"   # Sill, from floor to window bottom


class WallSpan(BaseModel):
    """A solid rectangle along the wall's local axis."""
    start: float      # Distance from wall start (meters)
    end: float
    type: SpanType
    bottom_y: float   # Height above floor of the span's lower edge
    top_y: float
    opening_id: Optional[str] = None  # Set for lintel and sill pieces

    @property
    def length(self) -> float:
        return self.end - self.start

    @property
    def height(self) -> float:
        return self.top_y - self.bottom_y
