"""
Shared fixtures: isolated artwork states, a wheel factory and a canvas that
records the primitives it is asked to draw.
"""
import os

# Qt widgets are exercised without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from typing import Any, Callable, List, Optional, Tuple

import numpy as np
import pytest

from wheelsoffortune.config import ArtworkConfig
from wheelsoffortune.model.element import Wheel
from wheelsoffortune.model.palettes import PALETTES, Palette
from wheelsoffortune.model.state import ArtworkState

PALETTE_A: Palette = PALETTES[0]
PALETTE_B: Palette = PALETTES[1]


class RecordingCanvas:
    """Canvas double that stores every call as (name, args)."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))

    def names(self) -> List[str]:
        return [name for name, _ in self.calls]

    def of(self, name: str) -> List[Tuple[Any, ...]]:
        return [args for n, args in self.calls if n == name]

    def clear(self, color):
        self._record("clear", color)

    def save(self):
        self._record("save")

    def restore(self):
        self._record("restore")

    def translate(self, dx, dy):
        self._record("translate", dx, dy)

    def rotate(self, angle_rad):
        self._record("rotate", angle_rad)

    def circle(self, x, y, diameter, fill=None, stroke=None, stroke_width=1.0):
        self._record("circle", x, y, diameter, fill, stroke, stroke_width)

    def line(self, x1, y1, x2, y2, stroke, width):
        self._record("line", x1, y1, x2, y2, stroke, width)

    def quad_curve(self, x0, y0, cx, cy, x1, y1, stroke, width):
        self._record("quad_curve", x0, y0, cx, cy, x1, y1, stroke, width)


@pytest.fixture
def config() -> ArtworkConfig:
    return ArtworkConfig()


@pytest.fixture
def state(config: ArtworkConfig) -> ArtworkState:
    return ArtworkState(config=config, rng=np.random.default_rng(1234), width=1000.0, height=800.0)


@pytest.fixture
def add_wheel(state: ArtworkState) -> Callable[..., Wheel]:
    """Append a wheel to the state; its id is its index."""

    def _add(x: float, y: float, radius: float = 50.0, palette: Optional[Palette] = None) -> Wheel:
        wheel = Wheel(
            id=len(state.wheels),
            x=x,
            y=y,
            radius=radius,
            palette=palette or PALETTE_A,
        )
        state.wheels.append(wheel)
        return wheel

    return _add


@pytest.fixture
def scenario_state(state: ArtworkState, add_wheel) -> ArtworkState:
    """Three wheels of palette A and two of palette B, well apart from each other."""
    add_wheel(100.0, 100.0, palette=PALETTE_A)
    add_wheel(300.0, 100.0, palette=PALETTE_B)
    add_wheel(500.0, 100.0, palette=PALETTE_A)
    add_wheel(100.0, 400.0, palette=PALETTE_B)
    add_wheel(300.0, 400.0, palette=PALETTE_A)
    return state


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
