# simlogbook/geo/vectors.py
"""
Planar helpers for turning a heading into a unit vector. Headings follow the
aviation convention: 0 is north, angles grow clockwise.
"""
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Vec2:
    x: float
    y: float

    @classmethod
    def zero(cls) -> "Vec2":
        return cls(0.0, 0.0)


def rotate_point(origin: Vec2, point: Vec2, angle: float) -> Vec2:
    """Rotate a point by an angle (in radians) around an origin, clockwise."""
    cos = np.cos(angle)
    sin = np.sin(angle)
    dx = point.x - origin.x
    dy = point.y - origin.y
    return Vec2(
        float(dx * cos + dy * sin + origin.x),
        float(dy * cos - dx * sin + origin.y),
    )


def heading_to_point(heading: float) -> Vec2:
    """Unit vector pointing along a heading given in degrees."""
    return rotate_point(Vec2.zero(), Vec2(0.0, 1.0), np.radians(heading))

