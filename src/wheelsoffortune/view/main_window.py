"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the artwork canvas and the
Status Bar.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects global actions (New Artwork, Undo) to the artwork
   widget.
"""
from PySide6.QtWidgets import QMainWindow, QLabel
from PySide6.QtGui import QAction

from wheelsoffortune.config import DEFAULT_FPS, DEFAULT_HEIGHT, DEFAULT_WIDTH, VISIBLE_APP_NAME
from wheelsoffortune.model.state import ArtworkState
from wheelsoffortune.view.artwork_widget import ArtworkWidget


class MainWindow(QMainWindow):
    def __init__(self, state: ArtworkState, fps: int = DEFAULT_FPS) -> None:
        super().__init__()
        self.state: ArtworkState = state

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(DEFAULT_WIDTH, DEFAULT_HEIGHT)

        # --- CENTRAL CANVAS ---
        self.artwork = ArtworkWidget(self.state, fps=fps)
        self.setCentralWidget(self.artwork)

        # --- STATUS BAR ---
        self.lbl_stats = QLabel()
        self.statusBar().addPermanentWidget(self.lbl_stats)
        self.statusBar().showMessage("Click a wheel to blow it away, press Space to bring it back.")

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # --- SIGNAL CONNECTIONS ---
        self.artwork.state_changed.connect(self.update_status)

        self.update_status()
        self.artwork.setFocus()
        self.artwork.start()

    def _create_actions(self) -> None:
        self.act_new = QAction("New Artwork", self)
        self.act_new.setShortcut("Ctrl+N")
        self.act_new.triggered.connect(self.artwork.regenerate)

        self.act_undo = QAction("Undo Dispersal", self)
        self.act_undo.setShortcut("Ctrl+Z")
        self.act_undo.triggered.connect(self.artwork.restore)

        self.act_exit = QAction("Exit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        artwork_menu = menu_bar.addMenu("&Artwork")
        artwork_menu.addAction(self.act_new)
        artwork_menu.addAction(self.act_undo)
        artwork_menu.addSeparator()
        artwork_menu.addAction(self.act_exit)

    # --- HELPER METHODS ---
    def update_status(self) -> None:
        """Refresh the wheel count and undo depth in the status bar."""
        self.lbl_stats.setText(
            f"Wheels: {len(self.state.wheels)}  |  Undo depth: {self.state.history.depth}"
        )
        self.act_undo.setEnabled(bool(self.state.history))

    def closeEvent(self, event) -> None:
        self.artwork.stop()
        super().closeEvent(event)
