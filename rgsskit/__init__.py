"""Rectangles, tones, tile tables, key codes and frame-based input tracking for 2D game engines."""

__version__ = "0.1.0"
__all__ = ["errors", "rect", "tone", "table", "keys", "input"]