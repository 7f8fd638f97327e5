"""
Dispersal Controller
====================
Handles a selection at a canvas point: the clicked wheel and every intact
wheel sharing its base color lose their inner pattern, which is replaced by a
burst of drifting particles. The affected wheels are recorded as one undo
batch.

Functions:
    hit_test: Find the topmost intact wheel under a point.
    spawn_particles: Build the particles of one wheel.
    disperse_at: Full dispersal step for one input event.
"""
from __future__ import annotations

import logging
import math
from typing import List, Optional

import numpy as np

from wheelsoffortune.config import ArtworkConfig
from wheelsoffortune.model.element import Wheel
from wheelsoffortune.model.geometry_primitives import Vector
from wheelsoffortune.model.geometry_utils import ring_angles
from wheelsoffortune.model.particle import Particle, ParticleKind, SpokeSpin
from wheelsoffortune.model.state import ArtworkState, Batch

logger = logging.getLogger(__name__)

# Initial heading range of the burst: up-left on a y-down canvas.
BURST_ANGLE_RANGE = (math.pi + math.pi / 4, math.pi + math.pi / 2)


def hit_test(state: ArtworkState, x: float, y: float) -> Optional[Wheel]:
    """
    Return the topmost (last drawn) intact wheel containing the point.
    Dispersed wheels are transparent to selection.
    """
    for wheel in reversed(state.wheels):
        if wheel.contains(x, y) and not wheel.dispersed:
            return wheel
    return None


def _random_motion(rng: np.random.Generator, config: ArtworkConfig) -> tuple[Vector, Vector]:
    heading = float(rng.uniform(*BURST_ANGLE_RANGE))
    speed = float(rng.uniform(config.min_speed, config.max_speed))
    wind = Vector(float(rng.uniform(*config.wind_x_range)), float(rng.uniform(*config.wind_y_range)))
    return Vector.from_angle(heading, speed), wind


def spawn_particles(wheel: Wheel, config: ArtworkConfig, rng: np.random.Generator) -> List[Particle]:
    """
    One particle per spoke and per outer dot of the wheel. Each particle starts
    on the ring point it represents, which is also its return target.
    """
    particles: List[Particle] = []

    spoke_size = wheel.radius * config.spoke_width_fraction * config.spoke_size_multiplier
    for angle, (px, py) in zip(ring_angles(config.spoke_count), wheel.spoke_positions(config)):
        velocity, wind = _random_motion(rng, config)
        spin = SpokeSpin(
            ring_angle=float(angle),
            rotation=float(angle),
            rotation_speed=float(rng.uniform(-config.max_rotation_speed, config.max_rotation_speed)),
        )
        particles.append(Particle(
            kind=ParticleKind.SPOKE,
            x=float(px), y=float(py),
            target_x=float(px), target_y=float(py),
            color=wheel.palette.spoke_accent,
            size=spoke_size,
            velocity=velocity,
            wind=wind,
            owner_id=wheel.id,
            spin=spin,
        ))

    dot_size = wheel.radius * config.outer_dot_size_fraction
    for px, py in wheel.outer_dot_positions(config):
        velocity, wind = _random_motion(rng, config)
        particles.append(Particle(
            kind=ParticleKind.OUTER_DOT,
            x=float(px), y=float(py),
            target_x=float(px), target_y=float(py),
            color=wheel.palette.outer_accent,
            size=dot_size,
            velocity=velocity,
            wind=wind,
            owner_id=wheel.id,
        ))

    return particles


def disperse_at(state: ArtworkState, x: float, y: float) -> Optional[Batch]:
    """
    Process one selection event.

    Returns:
        The recorded batch of wheel ids, or None when nothing happened
        (no intact wheel under the point).
    """
    wheel = hit_test(state, x, y)
    if wheel is None:
        logger.debug(f"Selection at ({x:.1f}, {y:.1f}) hit no intact wheel.")
        return None

    color = wheel.base_color
    affected = [w for w in state.wheels if w.base_color == color and not w.dispersed]
    if not affected:
        return None

    batch = state.history.push([w.id for w in affected])
    for w in affected:
        w.disperse()
    for w in affected:
        state.particles.extend(spawn_particles(w, state.config, state.rng))

    logger.debug(
        f"Dispersed {len(affected)} wheel(s) of color {color}; "
        f"{len(state.particles)} live particles, history depth {state.history.depth}."
    )
    return batch
