from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import os
import sys
from typing import Sequence

from wheelsoffortune.config import VISIBLE_APP_NAME

APP_ID = "wheels-of-fortune"


def create_app(argv: Sequence[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (or reuse the running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    existing = QApplication.instance()
    if existing is not None:
        return existing

    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(list(argv) if argv is not None else sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app
