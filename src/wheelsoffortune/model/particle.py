"""
Dandelion Particles
===================
A particle is one fragment of a dispersed wheel's inner pattern (a spoke or an
outer dot). It has two mutually exclusive motion modes:

    - Drifting: moves under its velocity and a constant wind, fades out and
      shrinks. Alpha strictly decreases every frame.
    - Returning: eases back towards its return target, fading to nothing.
      Entered only by the restoration controller, never left.

Spoke particles additionally carry a ``SpokeSpin`` payload (ring angle,
rotation, rotation speed); dot particles do not rotate.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional

from wheelsoffortune.config import MAX_ALPHA, ArtworkConfig
from wheelsoffortune.model.geometry_primitives import Vector
from wheelsoffortune.utils import clamp, dist, lerp


class ParticleKind(StrEnum):
    SPOKE = "spoke"
    OUTER_DOT = "outer_dot"


@dataclass
class SpokeSpin:
    """Payload only spoke particles have."""
    ring_angle: float  # angular position on the wheel the spoke departed from
    rotation: float
    rotation_speed: float


@dataclass(eq=False)
class Particle:
    kind: ParticleKind
    x: float
    y: float
    target_x: float
    target_y: float
    color: str
    size: float
    velocity: Vector
    wind: Vector
    owner_id: int
    spin: Optional[SpokeSpin] = None

    alpha: float = MAX_ALPHA
    returning: bool = False
    rest_size: Optional[float] = None

    # Starting point of the current animation (spawn point, or the position at
    # which the return animation began).
    origin_x: float = field(init=False)
    origin_y: float = field(init=False)

    def __post_init__(self) -> None:
        self.origin_x = self.x
        self.origin_y = self.y
        if self.kind == ParticleKind.SPOKE and self.spin is None:
            raise ValueError("Spoke particles need a SpokeSpin payload.")

    @property
    def rotation(self) -> float:
        return self.spin.rotation if self.spin is not None else 0.0

    def distance_to_target(self) -> float:
        return dist(self.x, self.y, self.target_x, self.target_y)

    # --- Mode switch ---

    def start_return(self, config: ArtworkConfig) -> None:
        """Switch to the returning mode, animating from the current position."""
        self.returning = True
        self.origin_x = self.x
        self.origin_y = self.y
        if self.rest_size is None:
            divisor = config.spoke_rest_divisor if self.kind == ParticleKind.SPOKE else 1.0
            self.rest_size = self.size / divisor

    # --- Per-frame update ---

    def update(self, config: ArtworkConfig) -> None:
        if self.returning:
            self._update_returning(config)
        else:
            self._update_drifting(config)

    def _update_drifting(self, config: ArtworkConfig) -> None:
        self.x += self.velocity.x
        self.y += self.velocity.y
        self.velocity = self.velocity + self.wind

        if self.spin is not None:
            self.spin.rotation += self.spin.rotation_speed

        self.alpha = clamp(self.alpha - config.alpha_step, 0.0, MAX_ALPHA)
        self.size *= config.shrink_factor

    def _update_returning(self, config: ArtworkConfig) -> None:
        speed = config.return_speed
        self.x = lerp(self.x, self.target_x, speed)
        self.y = lerp(self.y, self.target_y, speed)

        self.alpha = lerp(self.alpha, 0.0, speed * 2)
        if self.alpha < config.alpha_snap:
            self.alpha = 0.0
        self.alpha = clamp(self.alpha, 0.0, MAX_ALPHA)

        rest = self.rest_size if self.rest_size is not None else self.size
        self.size = lerp(self.size, rest, speed * 2)

        if self.spin is not None:
            # the angle is held; only the spin is damped
            self.spin.rotation_speed = lerp(self.spin.rotation_speed, 0.0, config.rotation_damping)

    # --- Lifecycle ---

    def is_finished(self, config: ArtworkConfig) -> bool:
        """True once the particle should be removed from the live set."""
        if self.alpha > 0.0:
            return False
        if not self.returning:
            return True
        return self.distance_to_target() < config.arrival_epsilon
