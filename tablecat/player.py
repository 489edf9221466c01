"""The runner the player controls in the side-scrolling game."""

from __future__ import annotations

import os
from dataclasses import dataclass

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

GROUND_Y = 500.0
GRAVITY = 0.5
JUMP_VELOCITY = -15.0


@dataclass
class Player:
    """A runner that can jump and falls back to the ground under gravity."""

    x: float = 0.0
    y: float = 0.0
    velocity_y: float = 0.0
    is_jumping: bool = False

    def move(self) -> None:
        """Advance one frame of the jump; does nothing while on the ground."""
        if not self.is_jumping:
            return
        self.velocity_y += GRAVITY
        self.y += self.velocity_y
        if self.y >= GROUND_Y:
            self.y = GROUND_Y
            self.is_jumping = False
            self.velocity_y = 0.0

    def jump(self) -> bool:
        """Start a jump unless one is already under way; return whether it started."""
        if self.is_jumping:
            return False
        self.is_jumping = True
        self.velocity_y = JUMP_VELOCITY
        return True

    def key_press(self, key: int) -> bool:
        """Handle a key press; the space bar jumps. Return whether a jump started."""
        if key == pygame.K_SPACE:
            return self.jump()
        return False