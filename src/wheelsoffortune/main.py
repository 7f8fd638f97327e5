"""
Application Initialization
==========================
This module wires the Model, Controllers and View together and starts the Qt
Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the Artwork State (config + random generator).
2. Instantiates the Main Window (View), passing the state in.
3. Prevents circular import errors by being the orchestrator.
"""
import logging
from typing import Optional

import numpy as np

from wheelsoffortune.application import create_app
from wheelsoffortune.config import DEFAULT_FPS, DEFAULT_HEIGHT, DEFAULT_WIDTH, ArtworkConfig
from wheelsoffortune.model.state import ArtworkState
from wheelsoffortune.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def run(
    config: Optional[ArtworkConfig] = None,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    fps: int = DEFAULT_FPS,
    seed: Optional[int] = None,
) -> int:
    """Build the application and block in the event loop. Returns the exit code."""
    # 1. Create the Qt Application
    app = create_app()

    # 2. Initialize the Data Model
    state = ArtworkState(
        config=config or ArtworkConfig(),
        rng=np.random.default_rng(seed),
    )

    # 3. Initialize the Main Window, passing the model
    window = MainWindow(state, fps=fps)
    window.resize(width, height)
    window.show()

    logger.info(f"Starting event loop ({width}x{height} @ {fps} fps).")

    # 4. Start Event Loop
    return app.exec()
