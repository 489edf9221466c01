"""Desktop pet with frame animations and a small side-scrolling runner game."""

__version__ = "0.1.0"

__all__ = ["__version__"]