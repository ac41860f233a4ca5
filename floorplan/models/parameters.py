"""Engine tolerances and thresholds."""

from __future__ import annotations
from pydantic import BaseModel

from .building import DEGENERATE_LENGTH
from .geometry import SNAP_SIZE


class EngineParams(BaseModel):
    """Tolerances shared by the geometry passes. All lengths in meters."""
    degenerate_length: float = DEGENERATE_LENGTH  # Walls shorter than this are ignored
    junction_tolerance: float = 0.05    # Max perpendicular distance for a T-junction hit
    junction_t_margin: float = 0.01     # Hits with t outside (margin, 1 - margin) are corners
    split_t_merge: float = 0.01         # Hits closer than this in t are the same split point
    min_segment_length: float = 0.05    # Shorter split pieces are dropped
    min_room_area: float = 0.5          # m²; smaller faces are slivers
    exterior_area_ratio: float = 0.8    # Faces above this share of the bbox are the exterior
    min_span_length: float = 0.05       # Shorter solid wall spans are not emitted
    snap_size: float = SNAP_SIZE        # Positioning grid (10cm)
