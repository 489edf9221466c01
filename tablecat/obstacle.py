"""Obstacles that scroll from right to left across the game field."""

from __future__ import annotations

from dataclasses import dataclass

SPEED = 5.0


@dataclass
class Obstacle:
    """An obstacle of a given width moving left at a fixed speed."""

    x: float = 800.0
    y: float = 500.0
    width: float = 0.0

    def move(self) -> bool:
        """Move one frame to the left; return whether it has left the screen."""
        self.x -= SPEED
        return self.is_offscreen()

    def is_offscreen(self) -> bool:
        """Whether the obstacle's right edge has passed the left screen edge."""
        return self.x + self.width < 0