"""Element factories with the editor's default dimensions, plus sample plans."""

from __future__ import annotations
from typing import Optional

from floorplan.ids import new_id
from floorplan.models import (
    DoorStyle, FloorPlan, Opening, OpeningType, Wall,
)


def create_wall(
    x1: float, y1: float, x2: float, y2: float, label: Optional[str] = None,
) -> Wall:
    return Wall(id=new_id("w"), x1=x1, y1=y1, x2=x2, y2=y2, label=label)


def create_door(
    wall_id: str,
    position: float = 0.5,
    width: float = 0.9,
    door_style: DoorStyle = DoorStyle.STANDARD,
) -> Opening:
    return Opening(
        id=new_id("d"),
        type=OpeningType.DOOR,
        wall_id=wall_id,
        position=position,
        width=width,
        door_style=door_style,
    )


def create_window(wall_id: str, position: float = 0.5, width: float = 1.2) -> Opening:
    return Opening(
        id=new_id("win"),
        type=OpeningType.WINDOW,
        wall_id=wall_id,
        position=position,
        width=width,
    )


def default_apartment() -> FloorPlan:
    """8m x 6m shell with a bedroom carved out of one corner."""
    walls = [
        create_wall(0, 0, 8, 0),
        create_wall(8, 0, 8, 6),
        create_wall(8, 6, 0, 6),
        create_wall(0, 6, 0, 0),
        create_wall(4, 0, 4, 4),
        create_wall(4, 4, 8, 4),
    ]
    return FloorPlan(
        walls=walls,
        openings=[
            create_door(walls[0].id, 0.25),
            create_window(walls[1].id, 0.3),
            create_window(walls[2].id, 0.5),
            create_door(walls[4].id, 0.7),
            create_window(walls[1].id, 0.75),
        ],
    )


def reference_apartment() -> FloorPlan:
    """Full apartment with balcony, bathrooms and T-junctions everywhere."""
    layout = [
        # Balcony
        (1.5, 0, 8, 0, "balc-top"),
        (8, 0, 8, 2.5, "balc-right"),
        (1.5, 0, 1.5, 2.5, "balc-left"),
        # Main building shell
        (0, 2.5, 14, 2.5, "main-top"),
        (14, 2.5, 14, 10.5, "right"),
        (14, 10.5, 10, 10.5, "bottom-right"),
        (10, 10.5, 10, 13.5, "addition-right"),
        (10, 13.5, 0, 13.5, "bottom"),
        (0, 13.5, 0, 2.5, "left"),
        # Vertical dividers
        (7, 2.5, 7, 5.5, "div-v1-top"),
        (7, 5.5, 7, 10.5, "div-v1-bot"),
        (10.5, 2.5, 10.5, 5.5, "div-v2-top"),
        (10.5, 5.5, 10.5, 10.5, "div-v2-right"),
        # Horizontal dividers
        (7, 5.5, 10.5, 5.5, "div-h1"),
        (10.5, 5.5, 14, 5.5, "div-h1-right"),
        (0, 8, 7, 8, "div-h-living"),
        (7, 9, 10.5, 9, "div-h-bath-bot"),
        (10.5, 9, 14, 9, "div-h-right-bot"),
        # Bathrooms
        (8, 5.5, 8, 9, "bath-left"),
        (9.5, 5.5, 9.5, 9, "bath-right"),
        (8, 7, 9.5, 7, "bath-divider"),
        # Entry / kitchen
        (1.5, 8, 1.5, 9.5, "entry-right"),
        (0, 9.5, 3.5, 9.5, "kitchen-bot"),
        (3.5, 8, 3.5, 10.5, "kitchen-right"),
        # Bottom dividers
        (0, 10.5, 10, 10.5, "div-h-bottom"),
        (4.5, 10.5, 4.5, 13.5, "safe-room-div"),
        # Storage
        (7, 9, 7, 10.5, "small-left"),
        (9, 9, 9, 10.5, "small-right"),
    ]
    w = [create_wall(x1, y1, x2, y2, label) for x1, y1, x2, y2, label in layout]

    doors = [
        create_door(w[0].id, 0.5, 1.2),
        create_door(w[3].id, 0.12, 0.9),
        create_door(w[9].id, 0.6, 0.9),
        create_door(w[11].id, 0.6, 0.9),
        create_door(w[14].id, 0.3, 0.8),
        create_door(w[21].id, 0.4, 0.8),
        create_door(w[21].id, 0.8, 0.8),
        create_door(w[10].id, 0.25, 0.9),
        create_door(w[12].id, 0.3, 0.9),
        create_door(w[18].id, 0.5, 0.9),
        create_door(w[16].id, 0.3, 0.8),
        create_door(w[25].id, 0.5, 0.9),
        create_door(w[26].id, 0.5, 0.9),
    ]
    windows = [
        create_window(w[0].id, 0.2, 1.5),
        create_window(w[0].id, 0.8, 1.5),
        create_window(w[1].id, 0.5, 1.0),
        create_window(w[2].id, 0.5, 1.0),
        create_window(w[3].id, 0.6, 1.2),
        create_window(w[3].id, 0.85, 1.2),
        create_window(w[4].id, 0.25, 1.2),
        create_window(w[4].id, 0.65, 1.2),
        create_window(w[4].id, 0.9, 1.0),
        create_window(w[8].id, 0.3, 1.0),
        create_window(w[7].id, 0.7, 1.2),
        create_window(w[5].id, 0.5, 1.0),
    ]
    return FloorPlan(walls=w, openings=doors + windows)
