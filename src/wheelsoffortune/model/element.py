"""
Wheel (Element)
===============
The static circular motif of the artwork.

A wheel has two independent pieces of state:
    - ``dispersed``: whether its inner pattern (spokes and outer dots) has been
      blown away into particles.
    - ``inner_fade``: the opacity of that inner pattern. It is pinned to 0
      while dispersed and rises towards 255 by a fixed step per frame once the
      wheel is intact again.

Classes:
    Wheel: The element data class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from wheelsoffortune.config import MAX_ALPHA, ArtworkConfig
from wheelsoffortune.model.geometry_utils import ring_points
from wheelsoffortune.model.palettes import Palette
from wheelsoffortune.utils import clamp, dist

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(eq=False)
class Wheel:
    """
    One wheel of the artwork. Identity is the ``id`` (its index in the artwork
    state); wheels compare by identity, not by value.
    """
    id: int
    x: float
    y: float
    radius: float
    palette: Palette
    stem_angle: float = 0.0

    dispersed: bool = False
    inner_fade: float = 0.0
    target_fade: float = field(default=MAX_ALPHA, repr=False)

    @property
    def base_color(self) -> str:
        return self.palette.base

    def contains(self, px: float, py: float) -> bool:
        """Check if the point lies inside the wheel (boundary included)."""
        return dist(px, py, self.x, self.y) <= self.radius

    # --- State transitions ---

    def disperse(self) -> None:
        """Hide the inner pattern immediately."""
        self.dispersed = True
        self.inner_fade = 0.0

    def restore(self) -> None:
        """Show the inner pattern again, fading in from transparent."""
        self.dispersed = False
        self.inner_fade = 0.0

    def update_fade(self, step: float) -> None:
        """Advance the fade-in by one frame."""
        if self.dispersed:
            self.inner_fade = 0.0
            return
        if self.inner_fade < self.target_fade:
            self.inner_fade = min(self.inner_fade + step, self.target_fade)
        self.inner_fade = clamp(self.inner_fade, 0.0, MAX_ALPHA)

    @property
    def is_formed(self) -> bool:
        return not self.dispersed and self.inner_fade >= self.target_fade

    # --- Ring geometry ---

    def spoke_ring_radius(self, config: ArtworkConfig) -> float:
        return self.radius * config.spoke_outer_fraction

    def outer_dot_ring_radius(self, config: ArtworkConfig) -> float:
        return self.radius * config.outer_dot_fraction

    def spoke_positions(self, config: ArtworkConfig) -> npt.NDArray[np.float64]:
        """Outer end of every spoke, in canvas coordinates."""
        return ring_points(self.x, self.y, self.spoke_ring_radius(config), config.spoke_count)

    def outer_dot_positions(self, config: ArtworkConfig) -> npt.NDArray[np.float64]:
        """Center of every outer dot, in canvas coordinates."""
        return ring_points(self.x, self.y, self.outer_dot_ring_radius(config), config.outer_dot_count)
