"""
Artwork State (Data Model)
==========================
This module defines the central data structure for the running artwork.

Why is this file needed?
------------------------
1. State Management: It holds the wheels, connectors, live particles and the
   undo history in one place.
2. Decoupling: Controllers receive this object explicitly and mutate it; the
   view only reads from it. There are no module-level globals, so each test
   can build its own isolated state.

Classes:
    DispersalHistory: LIFO stack of dispersal batches.
    ArtworkState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, Optional, Sequence

import numpy as np

from wheelsoffortune.config import DEFAULT_HEIGHT, DEFAULT_WIDTH, ArtworkConfig
from wheelsoffortune.model.connector import Connector
from wheelsoffortune.model.element import Wheel
from wheelsoffortune.model.particle import Particle

logger = logging.getLogger(__name__)

# A batch is the ids of the wheels dispersed together by one user action.
Batch = tuple[int, ...]


class DispersalHistory:
    """
    Undo stack of dispersal batches.
    Entries keep wheel ids only, not snapshots: any other change made to a
    wheel between its dispersal and its restoration stays visible.
    """

    def __init__(self) -> None:
        self._batches: List[Batch] = []

    def push(self, wheel_ids: Sequence[int]) -> Batch:
        if not wheel_ids:
            raise ValueError("Cannot record an empty dispersal batch.")
        batch = tuple(wheel_ids)
        self._batches.append(batch)
        return batch

    def pop(self) -> Optional[Batch]:
        """Return the most recent batch, or None if the history is empty."""
        if not self._batches:
            return None
        return self._batches.pop()

    def clear(self) -> None:
        self._batches.clear()

    @property
    def depth(self) -> int:
        return len(self._batches)

    def __len__(self) -> int:
        return len(self._batches)

    def __bool__(self) -> bool:
        return bool(self._batches)


@dataclass
class ArtworkState:
    """
    Holds the entire state of the artwork for one session.
    Pass this instance to the controllers and the view.
    """
    config: ArtworkConfig = field(default_factory=ArtworkConfig)
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    width: float = float(DEFAULT_WIDTH)
    height: float = float(DEFAULT_HEIGHT)

    wheels: List[Wheel] = field(default_factory=list)
    connectors: List[Connector] = field(default_factory=list)
    particles: List[Particle] = field(default_factory=list)
    history: DispersalHistory = field(default_factory=DispersalHistory)

    def wheel(self, wheel_id: int) -> Wheel:
        return self.wheels[wheel_id]

    def reset(self) -> None:
        """Discard all wheels, connectors, particles and history."""
        self.wheels = []
        self.connectors = []
        self.particles = []
        self.history.clear()
        logger.info("Artwork state has been reset.")
