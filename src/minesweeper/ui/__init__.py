"""
Front-end helpers: click geometry and text rendering.

The renderer is imported from ``minesweeper.ui.renderer`` directly, since it
depends on the game package.
"""
from .layout import ScreenLayout

__all__ = ["ScreenLayout"]
