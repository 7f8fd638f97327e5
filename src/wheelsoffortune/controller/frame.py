"""
Frame Driver
============
Advances the artwork by one frame and, when a renderer is given, draws it.

Order of operations per tick:
    1. Background and connectors (static).
    2. Wheels: drawn, then their fade-in advanced.
    3. Particles, by descending index: updated, drawn, and removed in place
       once finished.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from wheelsoffortune.model.connector import Connector
from wheelsoffortune.model.element import Wheel
from wheelsoffortune.model.particle import Particle
from wheelsoffortune.model.state import ArtworkState

logger = logging.getLogger(__name__)


class FrameRenderer(Protocol):
    """Drawing hooks the frame driver calls, in draw order."""
    def draw_background(self) -> None: ...
    def draw_connector(self, connector: Connector, wheels: Sequence[Wheel]) -> None: ...
    def draw_wheel(self, wheel: Wheel) -> None: ...
    def draw_particle(self, particle: Particle) -> None: ...


@dataclass
class FrameStats:
    """What happened during one tick."""
    live_particles: int = 0
    removed_particles: int = 0


def advance_wheels(state: ArtworkState, renderer: Optional[FrameRenderer] = None) -> None:
    step = state.config.fade_step
    for wheel in state.wheels:
        if renderer is not None:
            renderer.draw_wheel(wheel)
        wheel.update_fade(step)


def advance_particles(state: ArtworkState, renderer: Optional[FrameRenderer] = None) -> int:
    """Update, draw and reap particles. Returns the number removed."""
    config = state.config
    particles = state.particles
    removed = 0
    for i in range(len(particles) - 1, -1, -1):
        particle = particles[i]
        particle.update(config)
        if renderer is not None:
            renderer.draw_particle(particle)
        if particle.is_finished(config):
            del particles[i]
            removed += 1
    return removed


def tick(state: ArtworkState, renderer: Optional[FrameRenderer] = None) -> FrameStats:
    """Run one frame. Without a renderer only the state is advanced."""
    if renderer is not None:
        renderer.draw_background()
        for connector in state.connectors:
            renderer.draw_connector(connector, state.wheels)

    advance_wheels(state, renderer)
    removed = advance_particles(state, renderer)

    if removed:
        logger.debug(f"Removed {removed} finished particle(s); {len(state.particles)} left.")
    return FrameStats(live_particles=len(state.particles), removed_particles=removed)
