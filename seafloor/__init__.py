"""A tile-based sea-floor puzzle game, with map checking, an XPM reader and X11 colour names."""

__version__ = "0.1.0"

__all__ = ["colors", "display", "game", "image", "mapfile", "visual", "xpm"]