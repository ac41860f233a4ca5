"""Floor plan snapshot — the wall/opening/room collections handed to the engine.

Edits never mutate a snapshot in place: each helper returns a new FloorPlan,
so a detection pass always works on a frozen view of the geometry.
"""

from __future__ import annotations
import math
from typing import Any

from pydantic import BaseModel

from floorplan.errors import OpeningNotFoundError, WallNotFoundError
from floorplan.ids import new_id
from .building import Opening, Room, Wall
from .geometry import SNAP_SIZE, snap


class FloorPlan(BaseModel):
    walls: list[Wall] = []
    openings: list[Opening] = []
    rooms: list[Room] = []

    # --- Lookup ---------------------------------------------------------

    def get_wall(self, wall_id: str) -> Wall | None:
        for w in self.walls:
            if w.id == wall_id:
                return w
        return None

    def require_wall(self, wall_id: str) -> Wall:
        wall = self.get_wall(wall_id)
        if wall is None:
            raise WallNotFoundError(wall_id)
        return wall

    def get_opening(self, opening_id: str) -> Opening | None:
        for o in self.openings:
            if o.id == opening_id:
                return o
        return None

    def openings_for(self, wall_id: str) -> list[Opening]:
        return [o for o in self.openings if o.wall_id == wall_id]

    # --- Edits ----------------------------------------------------------

    def add_wall(self, wall: Wall) -> FloorPlan:
        return self.model_copy(update={"walls": [*self.walls, wall]})

    def add_opening(self, opening: Opening) -> FloorPlan:
        if self.get_wall(opening.wall_id) is None:
            raise WallNotFoundError(opening.wall_id)
        return self.model_copy(update={"openings": [*self.openings, opening]})

    def update_wall(self, wall_id: str, **updates: Any) -> FloorPlan:
        wall = self.require_wall(wall_id)
        # Revalidate so the endpoint invariant still holds after the edit
        updated = Wall.model_validate({**wall.model_dump(), **updates})
        return self.model_copy(update={
            "walls": [updated if w.id == wall_id else w for w in self.walls],
        })

    def update_opening(self, opening_id: str, **updates: Any) -> FloorPlan:
        opening = self.get_opening(opening_id)
        if opening is None:
            raise OpeningNotFoundError(opening_id)
        updated = Opening.model_validate({**opening.model_dump(), **updates})
        return self.model_copy(update={
            "openings": [updated if o.id == opening_id else o for o in self.openings],
        })

    def move_wall(
        self, wall_id: str, x1: float, y1: float, x2: float, y2: float,
        snap_size: float = SNAP_SIZE,
    ) -> FloorPlan:
        """Drag a wall to new endpoints, re-snapping both to the positioning grid."""
        return self.update_wall(
            wall_id,
            x1=snap(x1, snap_size), y1=snap(y1, snap_size),
            x2=snap(x2, snap_size), y2=snap(y2, snap_size),
        )

    def delete_item(self, item_id: str) -> FloorPlan:
        """Delete a wall (and its openings), an opening, or a room by id.

        Unknown ids leave the plan unchanged.
        """
        if self.get_wall(item_id) is not None:
            return self.model_copy(update={
                "walls": [w for w in self.walls if w.id != item_id],
                "openings": [o for o in self.openings if o.wall_id != item_id],
            })
        if self.get_opening(item_id) is not None:
            return self.model_copy(update={
                "openings": [o for o in self.openings if o.id != item_id],
            })
        return self.model_copy(update={
            "rooms": [r for r in self.rooms if r.id != item_id],
        })

    def make_corridor(
        self, wall_id: str, width: float, snap_size: float = SNAP_SIZE,
    ) -> tuple[FloorPlan, list[str]]:
        """Replace a wall with a closed corridor of the given width.

        Two snapped walls run parallel to the original at +/- width/2, and two
        end caps close them. The original wall and its openings are removed.
        Returns the new plan and the ids of the four created walls.
        """
        wall = self.require_wall(wall_id)
        length = wall.length
        if length == 0:
            return self, []

        nx = -(wall.y2 - wall.y1) / length
        ny = (wall.x2 - wall.x1) / length
        half = width / 2

        def offset(x: float, y: float, sign: int) -> tuple[float, float]:
            return snap(x + sign * nx * half, snap_size), snap(y + sign * ny * half, snap_size)

        a1, a2 = offset(wall.x1, wall.y1, 1), offset(wall.x2, wall.y2, 1)
        b1, b2 = offset(wall.x1, wall.y1, -1), offset(wall.x2, wall.y2, -1)

        created: list[Wall] = []
        for p, q in ((a1, a2), (b1, b2), (a1, b1), (a2, b2)):
            if math.isclose(p[0], q[0]) and math.isclose(p[1], q[1]):
                continue
            created.append(Wall(
                id=new_id("w"),
                x1=p[0], y1=p[1], x2=q[0], y2=q[1],
                thickness=wall.thickness,
                height=wall.height,
            ))

        plan = self.model_copy(update={
            "walls": [w for w in self.walls if w.id != wall_id] + created,
            "openings": [o for o in self.openings if o.wall_id != wall_id],
        })
        return plan, [w.id for w in created]

    def with_rooms(self, rooms: list[Room]) -> FloorPlan:
        return self.model_copy(update={"rooms": list(rooms)})
