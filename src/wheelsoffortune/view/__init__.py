"""
The VIEW layer draws the ArtworkState with Qt (PySide6) and forwards user
input to the controllers.
"""
