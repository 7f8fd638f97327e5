"""
Restoration Controller
======================
Undoes the most recent dispersal: the wheels of the last batch get their inner
pattern back (fading in from transparent) and the particles that came from
them turn around and ease back onto their ring points.

Particle membership is decided by ``ArtworkConfig.matching``:
    - PROXIMITY: a particle belongs to a wheel when its return target lies
      within ``match_tolerance`` of that wheel's spoke or outer-dot ring. This
      is a heuristic: with wheels close together it can claim particles of a
      neighbour, or miss some when the tolerance is too small.
    - OWNER: a particle belongs to the wheel whose id it was spawned with.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from wheelsoffortune.config import ArtworkConfig, MatchingStrategy
from wheelsoffortune.model.element import Wheel
from wheelsoffortune.model.geometry_utils import point_on_ring, project_on_ring
from wheelsoffortune.model.particle import Particle, ParticleKind
from wheelsoffortune.model.state import ArtworkState, Batch
from wheelsoffortune.utils import dist

logger = logging.getLogger(__name__)


def _near_ring(particle: Particle, wheel: Wheel, config: ArtworkConfig) -> bool:
    """Recompute the ring point the particle would have departed from and compare."""
    if particle.kind == ParticleKind.SPOKE:
        angle = particle.spin.ring_angle if particle.spin is not None else 0.0
        rx, ry = point_on_ring(wheel.x, wheel.y, wheel.spoke_ring_radius(config), angle)
    else:
        rx, ry = project_on_ring(
            wheel.x, wheel.y, wheel.outer_dot_ring_radius(config),
            particle.target_x, particle.target_y
        )
    return dist(particle.target_x, particle.target_y, rx, ry) < config.match_tolerance


def belongs_to(particle: Particle, wheel: Wheel, config: ArtworkConfig) -> bool:
    if config.matching == MatchingStrategy.OWNER:
        return particle.owner_id == wheel.id
    return _near_ring(particle, wheel, config)


def particles_of(state: ArtworkState, wheel: Wheel) -> List[Particle]:
    """Live particles attributed to the wheel by the configured strategy."""
    return [p for p in state.particles if belongs_to(p, wheel, state.config)]


def restore_last(state: ArtworkState) -> Optional[Batch]:
    """
    Pop the most recent dispersal batch and reverse it.

    Returns:
        The restored batch, or None if the history was empty.
    """
    batch = state.history.pop()
    if batch is None:
        logger.debug("Nothing to restore: history is empty.")
        return None

    returning = 0
    for wheel_id in batch:
        wheel = state.wheel(wheel_id)
        wheel.restore()
        for particle in particles_of(state, wheel):
            particle.start_return(state.config)
            returning += 1

    logger.debug(
        f"Restored {len(batch)} wheel(s); {returning} particle(s) returning, "
        f"history depth {state.history.depth}."
    )
    return batch
