"""
Planar angle helpers shared by every posture measurement.
"""
from typing import Optional

import numpy as np

from ..core.constants import Constants
from .landmarks import Landmark


def angle_between(a: Optional[Landmark], b: Optional[Landmark], c: Optional[Landmark]) -> float:
    """
    Unsigned angle a-b-c in degrees, b being the vertex. Range [0, 180].

    Returns 0.0 when any point is missing; callers must treat that as
    indeterminate unless they checked the points themselves.
    """
    if a is None or b is None or c is None:
        return 0.0

    radians = np.arctan2(c.y - b.y, c.x - b.x) - np.arctan2(a.y - b.y, a.x - b.x)
    angle = float(np.abs(np.degrees(radians)))
    if angle > 180.0:
        angle = 360.0 - angle
    return angle


def vertical_tilt(top: Optional[Landmark], bottom: Optional[Landmark]) -> float:
    """
    Angle in degrees between bottom->top and straight up from bottom.

    0 means top sits directly above bottom. Lean direction is not reported,
    only its magnitude.
    """
    if top is None or bottom is None:
        return 0.0

    virtual_top = Landmark(x=bottom.x, y=bottom.y - Constants.VIRTUAL_VERTICAL_OFFSET)
    return angle_between(top, bottom, virtual_top)


def round_angle(value: float) -> int:
    """Round half up to a whole degree for display."""
    return int(np.floor(value + 0.5))
