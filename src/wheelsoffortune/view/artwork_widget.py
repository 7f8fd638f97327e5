"""
Artwork Widget
==============
The canvas widget hosting the animation.

Why is this file needed?
------------------------
1. Frame loop: A QTimer schedules a repaint at the configured frame rate; each
   paint runs exactly one frame tick of the engine.
2. Input routing: Mouse clicks go to the dispersal controller, the space key
   to the restoration controller, and viewport changes rebuild the artwork.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QKeyEvent, QMouseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QWidget

from wheelsoffortune.config import DEFAULT_FPS, RESIZE_DEBOUNCE_MS
from wheelsoffortune.controller.dispersal import disperse_at
from wheelsoffortune.controller.frame import tick
from wheelsoffortune.controller.layout import initialize_artwork
from wheelsoffortune.controller.restoration import restore_last
from wheelsoffortune.model.state import ArtworkState
from wheelsoffortune.view.canvas import QPainterCanvas
from wheelsoffortune.view.renderers import ArtworkRenderer

logger = logging.getLogger(__name__)


class ArtworkWidget(QWidget):
    # Emitted whenever wheels or history change (dispersal, restoration, reset)
    state_changed = Signal()

    def __init__(self, state: ArtworkState, fps: int = DEFAULT_FPS, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.state = state
        self._initialized = bool(state.wheels)

        self.setFocusPolicy(Qt.FocusPolicy.StrongFocus)
        self.setMinimumSize(200, 150)

        # Animation Timer
        self.timer = QTimer(self)
        self.timer.setInterval(max(1, round(1000 / max(1, fps))))
        self.timer.timeout.connect(self.update)

        # Debounce timer for viewport changes
        self._reset_timer = QTimer(self)
        self._reset_timer.setSingleShot(True)
        self._reset_timer.setInterval(RESIZE_DEBOUNCE_MS)
        self._reset_timer.timeout.connect(self.regenerate)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def start(self) -> None:
        self.timer.start()

    def stop(self) -> None:
        self.timer.stop()

    def select_at(self, x: float, y: float) -> bool:
        """Disperse the wheel under (x, y). Returns True if anything changed."""
        batch = disperse_at(self.state, x, y)
        if batch is None:
            return False
        self.state_changed.emit()
        return True

    def restore(self) -> bool:
        """Undo the latest dispersal. Returns True if anything changed."""
        batch = restore_last(self.state)
        if batch is None:
            return False
        self.state_changed.emit()
        return True

    def regenerate(self) -> None:
        """Discard everything and build a new composition for the current size."""
        initialize_artwork(self.state, self.width(), self.height())
        self._initialized = True
        self.state_changed.emit()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            renderer = ArtworkRenderer(QPainterCanvas(painter), self.state.config)
            tick(self.state, renderer)
        except Exception:
            logger.exception("Frame rendering failed; stopping the animation.")
            self.timer.stop()
        finally:
            painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.select_at(pos.x(), pos.y())
        super().mousePressEvent(event)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key.Key_Space:
            self.restore()
            return
        super().keyPressEvent(event)

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        if not self._initialized:
            self.regenerate()
        else:
            self._reset_timer.start()
