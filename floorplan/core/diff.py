"""Element-level comparison of two floor plan snapshots."""

from __future__ import annotations
from typing import Union

from floorplan.models import (
    DiffStatus, ElementDiff, ElementKind, FloorPlan, FloorPlanDiff,
    Opening, OpeningType, Room, Wall,
)

Element = Union[Wall, Opening, Room]


def _kind(el: Element) -> ElementKind:
    if isinstance(el, Wall):
        return ElementKind.WALL
    if isinstance(el, Opening):
        return ElementKind.DOOR if el.type == OpeningType.DOOR else ElementKind.WINDOW
    return ElementKind.ROOM


def _wall_changed(a: Wall, b: Wall) -> bool:
    return (
        (a.x1, a.y1, a.x2, a.y2) != (b.x1, b.y1, b.x2, b.y2)
        or a.thickness != b.thickness
        or a.height != b.height
        or a.style != b.style
    )


def _opening_changed(a: Opening, b: Opening) -> bool:
    fields = (
        "type", "wall_id", "position", "width", "height", "sill_height",
        "door_style", "window_style", "flip_door", "swing_out",
    )
    return any(getattr(a, f) != getattr(b, f) for f in fields)


def _room_changed(a: Room, b: Room) -> bool:
    return a.name != b.name or a.cx != b.cx or a.cy != b.cy or a.area != b.area


def _has_changed(a: Element, b: Element) -> bool:
    if isinstance(a, Wall) and isinstance(b, Wall):
        return _wall_changed(a, b)
    if isinstance(a, Opening) and isinstance(b, Opening):
        return _opening_changed(a, b)
    if isinstance(a, Room) and isinstance(b, Room):
        return _room_changed(a, b)
    return True  # Same id reused for a different kind of element


def _elements(plan: FloorPlan) -> dict[str, Element]:
    out: dict[str, Element] = {}
    for w in plan.walls:
        out[w.id] = w
    for o in plan.openings:
        out[o.id] = o
    for r in plan.rooms:
        out[r.id] = r
    return out


def diff_floor_plans(baseline: FloorPlan, current: FloorPlan) -> FloorPlanDiff:
    """List elements added, removed or modified between two snapshots."""
    base = _elements(baseline)
    curr = _elements(current)
    diff = FloorPlanDiff()

    for el_id, el in curr.items():
        old = base.get(el_id)
        if old is None:
            diff.added_ids.add(el_id)
            diff.elements.append(ElementDiff(id=el_id, status=DiffStatus.ADDED, kind=_kind(el)))
        elif _has_changed(old, el):
            diff.modified_ids.add(el_id)
            diff.elements.append(ElementDiff(id=el_id, status=DiffStatus.MODIFIED, kind=_kind(el)))

    for el_id, el in base.items():
        if el_id not in curr:
            diff.removed_ids.add(el_id)
            diff.elements.append(ElementDiff(id=el_id, status=DiffStatus.REMOVED, kind=_kind(el)))

    return diff
