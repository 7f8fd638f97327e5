from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt


def ring_angles(count: int) -> npt.NDArray[np.float64]:
    """
    Angles of ``count`` points evenly distributed around a circle.

    Index i maps to 2*pi*i/count, so the first point sits at angle 0.
    """
    return np.linspace(0.0, 2.0 * np.pi, count, endpoint=False)


def ring_points(
    center_x: float,
    center_y: float,
    radius: float,
    count: int
) -> npt.NDArray[np.float64]:
    """
    Points evenly distributed on a circle (open ring, no closing point).

    Args:
        center_x: X coordinate of the ring center.
        center_y: Y coordinate of the ring center.
        radius: Ring radius.
        count: Number of points.

    Returns:
        An array of shape (count, 2) containing the (x, y) coordinates.
    """
    theta = ring_angles(count)
    return np.c_[center_x + radius * np.cos(theta), center_y + radius * np.sin(theta)]


def point_on_ring(center_x: float, center_y: float, radius: float, angle: float) -> tuple[float, float]:
    """Point at ``angle`` on a circle of ``radius`` around the center."""
    return center_x + radius * float(np.cos(angle)), center_y + radius * float(np.sin(angle))


def project_on_ring(
    center_x: float,
    center_y: float,
    radius: float,
    x: float,
    y: float
) -> tuple[float, float]:
    """Closest point of a circle to (x, y), taken along the ray from the center."""
    angle = float(np.arctan2(y - center_y, x - center_x))
    return point_on_ring(center_x, center_y, radius, angle)
