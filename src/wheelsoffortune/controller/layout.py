"""
Layout (Wheel Packing)
======================
Places the wheels on the canvas and links neighbours with connectors.

Why is this file needed?
------------------------
1. Initialization: It builds the static composition the engine animates.
2. Reset: On every viewport change the whole artwork is rebuilt here.

The packing is a best-effort random placement with a bounded attempt budget.
If the budget runs out the artwork simply has fewer wheels than requested.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from wheelsoffortune.config import ArtworkConfig
from wheelsoffortune.model.connector import Connector, should_connect
from wheelsoffortune.model.element import Wheel
from wheelsoffortune.model.palettes import PALETTES, Palette
from wheelsoffortune.model.state import ArtworkState
from wheelsoffortune.utils import dist

logger = logging.getLogger(__name__)


@dataclass
class LayoutResult:
    """Outcome of one packing run."""
    wheels: List[Wheel]
    connectors: List[Connector]
    requested: int
    attempts: int

    @property
    def complete(self) -> bool:
        return len(self.wheels) >= self.requested


def _choose_palette(
    rng: np.random.Generator,
    palettes: Sequence[Palette],
    previous: Optional[Palette]
) -> Palette:
    """Pick a random palette, avoiding the one used by the previous wheel."""
    palette = palettes[int(rng.integers(len(palettes)))]
    if previous is not None and palette == previous and len(palettes) > 1:
        others = [p for p in palettes if p != previous]
        palette = others[int(rng.integers(len(others)))]
    return palette


def _fits(
    x: float,
    y: float,
    radius: float,
    placed: Sequence[Wheel],
    config: ArtworkConfig
) -> bool:
    """
    A candidate fits when it does not overlap any wheel too much and, unless it
    is the first wheel, has at least one neighbour close enough to connect.
    """
    if not placed:
        return True

    has_neighbour = False
    for other in placed:
        d = dist(x, y, other.x, other.y)
        combined = radius + other.radius
        overlap_threshold = min(radius, other.radius) * config.overlap_fraction
        if d < combined - overlap_threshold:
            return False
        if d < combined * config.neighbour_factor:
            has_neighbour = True
    return has_neighbour


def place_wheels(
    width: float,
    height: float,
    config: ArtworkConfig,
    rng: np.random.Generator,
    palettes: Sequence[Palette] = PALETTES
) -> tuple[List[Wheel], int]:
    """
    Randomly pack wheels into the viewport.

    Returns:
        The placed wheels (ids are their list indices) and the number of
        attempts used.
    """
    wheels: List[Wheel] = []
    attempts = 0
    if width <= 0 or height <= 0:
        return wheels, attempts

    min_radius = width * config.min_radius_fraction
    max_radius = width * config.max_radius_fraction

    while len(wheels) < config.wheel_count and attempts < config.max_attempts:
        attempts += 1
        radius = float(rng.uniform(min_radius, max_radius))
        if 2 * radius > width or 2 * radius > height:
            continue
        x = float(rng.uniform(radius, width - radius))
        y = float(rng.uniform(radius, height - radius))

        if not _fits(x, y, radius, wheels, config):
            continue

        previous = wheels[-1].palette if wheels else None
        wheels.append(Wheel(
            id=len(wheels),
            x=x,
            y=y,
            radius=radius,
            palette=_choose_palette(rng, palettes, previous),
            stem_angle=float(rng.uniform(0.0, 2.0 * math.pi)),
        ))

    return wheels, attempts


def connect_wheels(
    wheels: Sequence[Wheel],
    config: ArtworkConfig,
    rng: np.random.Generator,
    palettes: Sequence[Palette] = PALETTES
) -> List[Connector]:
    """Create one connector for every pair of nearby wheels."""
    connectors: List[Connector] = []
    for i in range(len(wheels)):
        for j in range(i + 1, len(wheels)):
            if should_connect(wheels[i], wheels[j], config.connect_factor):
                color = palettes[int(rng.integers(len(palettes)))].base
                connectors.append(Connector(first=i, second=j, color=color))
    return connectors


def build_layout(
    width: float,
    height: float,
    config: ArtworkConfig,
    rng: np.random.Generator
) -> LayoutResult:
    wheels, attempts = place_wheels(width, height, config, rng)
    if len(wheels) < config.wheel_count:
        logger.warning(
            f"Could not place all wheels within limits: "
            f"{len(wheels)}/{config.wheel_count} after {attempts} attempts."
        )
    connectors = connect_wheels(wheels, config, rng)
    return LayoutResult(wheels=wheels, connectors=connectors, requested=config.wheel_count, attempts=attempts)


def initialize_artwork(state: ArtworkState, width: float, height: float) -> LayoutResult:
    """
    Reset the state and populate it with a fresh composition for the viewport.
    This is the only teardown path: pending animations and history are dropped.
    """
    state.reset()
    state.width = float(width)
    state.height = float(height)

    result = build_layout(state.width, state.height, state.config, state.rng)
    state.wheels = result.wheels
    state.connectors = result.connectors

    logger.info(
        f"Artwork initialized ({width:.0f}x{height:.0f}): "
        f"{len(state.wheels)} wheels, {len(state.connectors)} connectors."
    )
    return result
