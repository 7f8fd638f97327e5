"""
Artwork Renderer
================
Display logic for connectors, wheels and particles.

The renderer only reads the model and issues Canvas primitives, so it can draw
onto a QPainter (on screen) or onto any other Canvas implementation.
"""
from __future__ import annotations

import math
from typing import Sequence

from wheelsoffortune.config import ArtworkConfig
from wheelsoffortune.model.connector import Connector
from wheelsoffortune.model.element import Wheel
from wheelsoffortune.model.geometry_utils import ring_angles
from wheelsoffortune.model.palettes import BACKGROUND_COLOR
from wheelsoffortune.model.particle import Particle, ParticleKind
from wheelsoffortune.view.canvas import Canvas, rgba

# --- Connector decoration ---
CONNECTOR_WIDTH = 5.0
LINK_SIZE = 10.0
LINK_SPACING = LINK_SIZE * 1.5
LINK_FILL = (255, 200, 100)
LINK_CORE = (0, 0, 0)
BLOB_FILL = (255, 255, 255)
BLOB_SIZE = 20.0
BLOB_CORE_SIZE = 10.0
BLOB_STROKE = 3.0
RADIATING_DOTS = 8
RADIATING_RADIUS = 15.0
RADIATING_SIZE = 4.0

# --- Wheel inner layers ---
INNER_DOT_COUNT = 20
INNER_DOT_RING = 0.4
INNER_DOT_SIZE = 0.06


class ArtworkRenderer:
    """Draws the artwork through a Canvas, in the order the frame driver dictates."""

    def __init__(self, canvas: Canvas, config: ArtworkConfig) -> None:
        self.canvas = canvas
        self.config = config

    def draw_background(self) -> None:
        self.canvas.clear(rgba(BACKGROUND_COLOR))

    # ------------------------------------------------------------------------------
    # Connectors
    # ------------------------------------------------------------------------------

    def draw_connector(self, connector: Connector, wheels: Sequence[Wheel]) -> None:
        c = self.canvas
        color = rgba(connector.color)
        (x1, y1), (x2, y2) = connector.endpoints(wheels)
        c.line(x1, y1, x2, y2, color, CONNECTOR_WIDTH)

        # Chain links along the line
        for lx, ly in connector.link_positions(wheels, LINK_SPACING):
            c.circle(lx, ly, LINK_SIZE, fill=rgba(LINK_FILL), stroke=color, stroke_width=1.0)
            c.circle(lx, ly, LINK_SIZE * 0.4, fill=rgba(LINK_CORE))

        # Central blob with radiating dots
        mx, my = connector.midpoint(wheels)
        c.circle(mx, my, BLOB_SIZE, fill=rgba(BLOB_FILL), stroke=color, stroke_width=BLOB_STROKE)
        c.circle(mx, my, BLOB_CORE_SIZE, fill=color)
        for angle in ring_angles(RADIATING_DOTS):
            c.circle(
                mx + math.cos(angle) * RADIATING_RADIUS,
                my + math.sin(angle) * RADIATING_RADIUS,
                RADIATING_SIZE,
                fill=rgba(LINK_FILL),
            )

    # ------------------------------------------------------------------------------
    # Wheels
    # ------------------------------------------------------------------------------

    def draw_wheel(self, wheel: Wheel) -> None:
        c = self.canvas
        c.save()
        c.translate(wheel.x, wheel.y)

        c.circle(0.0, 0.0, wheel.radius * 2, fill=rgba(wheel.palette.base))
        # The inner pattern is hidden while dispersed; it fades in afterwards.
        if not wheel.dispersed:
            self._draw_outer_dots(wheel)
            self._draw_spokes(wheel)
        self._draw_inner_circles(wheel)
        self._draw_stem(wheel)

        c.restore()

    def _draw_outer_dots(self, wheel: Wheel) -> None:
        cfg = self.config
        ring = wheel.outer_dot_ring_radius(cfg)
        size = wheel.radius * cfg.outer_dot_size_fraction
        fill = rgba(wheel.palette.outer_accent, wheel.inner_fade)
        for angle in ring_angles(cfg.outer_dot_count):
            self.canvas.circle(math.cos(angle) * ring, math.sin(angle) * ring, size, fill=fill)

    def _draw_spokes(self, wheel: Wheel) -> None:
        cfg = self.config
        inner = wheel.radius * cfg.spoke_inner_fraction
        outer = wheel.spoke_ring_radius(cfg)
        stroke = rgba(wheel.palette.spoke_accent, wheel.inner_fade)
        width = wheel.radius * cfg.spoke_width_fraction
        for angle in ring_angles(cfg.spoke_count):
            cos_a, sin_a = math.cos(angle), math.sin(angle)
            self.canvas.line(cos_a * inner, sin_a * inner, cos_a * outer, sin_a * outer, stroke, width)

    def _draw_inner_circles(self, wheel: Wheel) -> None:
        c = self.canvas
        r = wheel.radius
        palette = wheel.palette

        c.circle(0.0, 0.0, r * 0.6, fill=rgba(palette.inner_accent))

        ring = r * INNER_DOT_RING
        dot_fill = rgba(palette.spoke_accent)
        for angle in ring_angles(INNER_DOT_COUNT):
            c.circle(math.cos(angle) * ring, math.sin(angle) * ring, r * INNER_DOT_SIZE, fill=dot_fill)

        c.circle(0.0, 0.0, r * 0.3, fill=rgba(palette.center))
        c.circle(0.0, 0.0, r * 0.15, fill=rgba(palette.base))

    def _draw_stem(self, wheel: Wheel) -> None:
        """Curved accent from the center, ending in a small dot."""
        r = wheel.radius
        a = wheel.stem_angle
        color = rgba(wheel.palette.outer_accent)

        start = (math.cos(a) * r * 0.075, math.sin(a) * r * 0.075)
        end = (math.cos(a) * r * 0.5, math.sin(a) * r * 0.5)
        control = (math.cos(a + 0.5) * r * 0.4, math.sin(a + 0.5) * r * 0.4)

        self.canvas.quad_curve(*start, *control, *end, color, r * 0.04)
        self.canvas.circle(*end, r * 0.08, fill=color)

    # ------------------------------------------------------------------------------
    # Particles
    # ------------------------------------------------------------------------------

    def draw_particle(self, particle: Particle) -> None:
        c = self.canvas
        color = rgba(particle.color, particle.alpha)
        c.save()
        c.translate(particle.x, particle.y)
        if particle.kind == ParticleKind.SPOKE:
            c.rotate(particle.rotation)
            c.line(0.0, 0.0, particle.size, 0.0, color, particle.size * 0.3)
        else:
            c.circle(0.0, 0.0, particle.size, fill=color)
        c.restore()
