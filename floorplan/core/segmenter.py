"""Wall segmentation — cut door and window voids out of a wall.

Renderers and exporters extrude the returned spans as-is; they never cut
openings themselves.
"""

from __future__ import annotations

import structlog

from floorplan.models import EngineParams, Opening, SpanType, Wall, WallSpan

logger = structlog.get_logger(__name__)


def project_opening(opening: Opening, wall_length: float) -> tuple[float, float]:
    """Opening extent along the wall axis, clamped to [0, wall_length]."""
    center = opening.position * wall_length
    half = opening.width / 2
    return max(0.0, center - half), min(wall_length, center + half)


def split_wall_by_openings(
    wall_length: float,
    wall_height: float,
    openings: list[Opening],
    params: EngineParams | None = None,
) -> list[WallSpan]:
    """
    Return the solid spans of a wall, left to right.

    - ``wall`` spans fill gaps between openings at full height.
    - ``above`` spans sit over an opening whose top is below the wall top.
    - ``below`` spans sit under windows with a positive sill.

    Overlapping openings are processed independently in order of their
    projected start, so their lintels and sills may overlap.
    """
    p = params or EngineParams()

    projected = sorted(
        ((*project_opening(o, wall_length), o) for o in openings),
        key=lambda item: (item[0], item[1]),
    )

    spans: list[WallSpan] = []
    cursor = 0.0

    for start, end, o in projected:
        if start - cursor >= p.min_span_length:
            spans.append(WallSpan(
                start=cursor, end=start, type=SpanType.WALL,
                bottom_y=0.0, top_y=wall_height,
            ))

        top = o.top
        if top < wall_height:
            spans.append(WallSpan(
                start=start, end=end, type=SpanType.ABOVE,
                bottom_y=top, top_y=wall_height, opening_id=o.id,
            ))

        if not o.is_door and o.sill_height > 0:
            spans.append(WallSpan(
                start=start, end=end, type=SpanType.BELOW,
                bottom_y=0.0, top_y=min(o.sill_height, wall_height), opening_id=o.id,
            ))

        cursor = max(cursor, end)

    if wall_length - cursor >= p.min_span_length:
        spans.append(WallSpan(
            start=cursor, end=wall_length, type=SpanType.WALL,
            bottom_y=0.0, top_y=wall_height,
        ))

    logger.debug(
        "wall_segmented",
        length=wall_length,
        openings=len(openings),
        spans=len(spans),
    )
    return spans


def segment_wall(
    wall: Wall, openings: list[Opening], params: EngineParams | None = None,
) -> list[WallSpan]:
    """Segment a wall using the openings that belong to it."""
    own = [o for o in openings if o.wall_id == wall.id]
    return split_wall_by_openings(wall.length, wall.height, own, params)
