"""
Geometric Primitives for particle motion.
"""
from __future__ import annotations
from dataclasses import dataclass
import math


@dataclass
class Vector:
    """
    A vector in the 2D canvas plane (y axis pointing down).
    """
    x: float
    y: float

    @classmethod
    def from_angle(cls, angle_rad: float, length: float = 1.0) -> Vector:
        return cls(math.cos(angle_rad) * length, math.sin(angle_rad) * length)

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def heading(self) -> float:
        """Angle of the vector in radians."""
        return math.atan2(self.y, self.x)
