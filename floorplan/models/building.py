"""Building element models — walls, openings and detected rooms."""

from __future__ import annotations
import math
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .geometry import Point2D, Segment


DEGENERATE_LENGTH = 0.01  # Walls shorter than this are ignored by geometry passes

DOOR_HEIGHT = 2.1
WINDOW_HEIGHT = 1.2
WINDOW_SILL_HEIGHT = 0.9


class WallStyle(str, Enum):
    STANDARD = "standard"
    BARRIER = "barrier"
    LOAD_BEARING = "load-bearing"


class OpeningType(str, Enum):
    WINDOW = "window"
    DOOR = "door"


class DoorStyle(str, Enum):
    STANDARD = "standard"
    SLIDING = "sliding"
    FRENCH = "french"
    SLIDING_GLASS = "sliding-glass"
    ARCADE = "arcade"


class WindowStyle(str, Enum):
    STANDARD = "standard"
    BAIE_VITREE = "baie-vitree"


class Wall(BaseModel):
    """A wall segment defined by two plan endpoints."""
    id: str
    x1: float
    y1: float
    x2: float
    y2: float
    thickness: float = Field(default=0.15, gt=0)   # Meters
    height: float = Field(default=2.8, gt=0)       # Meters
    style: WallStyle = WallStyle.STANDARD
    label: Optional[str] = None

    @model_validator(mode="after")
    def check_endpoints(self) -> Wall:
        if self.x1 == self.x2 and self.y1 == self.y2:
            raise ValueError(f"wall {self.id!r} has identical endpoints")
        return self

    @property
    def start(self) -> Point2D:
        return Point2D(x=self.x1, y=self.y1)

    @property
    def end(self) -> Point2D:
        return Point2D(x=self.x2, y=self.y2)

    @property
    def length(self) -> float:
        return math.sqrt((self.x2 - self.x1) ** 2 + (self.y2 - self.y1) ** 2)

    @property
    def is_degenerate(self) -> bool:
        return self.length < DEGENERATE_LENGTH

    def point_at(self, t: float) -> Point2D:
        """Point at parametric position t along the wall."""
        return self.start.lerp(self.end, t)

    def as_segment(self) -> Segment:
        return Segment(x1=self.x1, y1=self.y1, x2=self.x2, y2=self.y2, wall_id=self.id)


class Opening(BaseModel):
    """A door or window attached to a wall at a parametric position."""
    id: str
    type: OpeningType
    wall_id: str
    position: float = Field(ge=0.0, le=1.0)   # 0..1 along the wall, center of the opening
    width: float = Field(gt=0)                # Meters
    height: Optional[float] = Field(default=None, gt=0)
    sill_height: Optional[float] = Field(default=None, ge=0)  # Windows only
    door_style: Optional[DoorStyle] = None
    window_style: Optional[WindowStyle] = None
    flip_door: bool = False   # Hinge on the other side
    swing_out: bool = False   # Swing to the other side of the wall

    @model_validator(mode="after")
    def fill_type_defaults(self) -> Opening:
        if self.height is None:
            self.height = DOOR_HEIGHT if self.type == OpeningType.DOOR else WINDOW_HEIGHT
        if self.sill_height is None:
            self.sill_height = WINDOW_SILL_HEIGHT if self.type == OpeningType.WINDOW else 0.0
        return self

    @property
    def is_door(self) -> bool:
        return self.type == OpeningType.DOOR

    @property
    def top(self) -> float:
        """Height of the top of the void above the floor."""
        if self.is_door:
            return self.height
        return self.sill_height + self.height


class Room(BaseModel):
    """A detected enclosed face. Recomputed wholesale on every detection run."""
    id: str
    name: str = ""
    cx: float
    cy: float
    area: float                 # m², rounded to centimetres
    polygon: list[Point2D] = []
