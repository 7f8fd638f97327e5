"""Decorative chain between two wheels."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from wheelsoffortune.model.element import Wheel
from wheelsoffortune.utils import dist, lerp


@dataclass(frozen=True)
class Connector:
    """
    Links two wheels by index into the artwork's wheel list.
    Connectors never own or mutate the wheels they link.
    """
    first: int
    second: int
    color: str

    def endpoints(self, wheels: Sequence[Wheel]) -> tuple[tuple[float, float], tuple[float, float]]:
        """Points on the rims of both wheels, facing each other."""
        w1 = wheels[self.first]
        w2 = wheels[self.second]
        angle = math.atan2(w2.y - w1.y, w2.x - w1.x)
        start = (w1.x + math.cos(angle) * w1.radius, w1.y + math.sin(angle) * w1.radius)
        end = (w2.x + math.cos(angle + math.pi) * w2.radius, w2.y + math.sin(angle + math.pi) * w2.radius)
        return start, end

    def midpoint(self, wheels: Sequence[Wheel]) -> tuple[float, float]:
        (x1, y1), (x2, y2) = self.endpoints(wheels)
        return (x1 + x2) / 2, (y1 + y2) / 2

    def link_positions(self, wheels: Sequence[Wheel], link_spacing: float) -> list[tuple[float, float]]:
        """
        Positions of the chain links along the connector, both ends included.
        Empty when the connector is shorter than one spacing.
        """
        (x1, y1), (x2, y2) = self.endpoints(wheels)
        n_links = math.floor(dist(x1, y1, x2, y2) / link_spacing)
        if n_links <= 0:
            return []
        return [(lerp(x1, x2, i / n_links), lerp(y1, y2, i / n_links)) for i in range(n_links + 1)]


def should_connect(w1: Wheel, w2: Wheel, factor: float) -> bool:
    """Wheels are linked when their centers are closer than factor * (r1 + r2)."""
    return dist(w1.x, w1.y, w2.x, w2.y) < (w1.radius + w2.radius) * factor
