"""The side-scrolling runner game: a jumping player and incoming obstacles."""

from __future__ import annotations

import os
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .obstacle import Obstacle  # noqa: E402
from .player import Player  # noqa: E402

SCENE_WIDTH = 800
SCENE_HEIGHT = 600
FRAME_MS = 16
SPAWN_INTERVAL = 100
PLAYER_START = (100.0, 500.0)
OBSTACLE_START = (800.0, 500.0)
GAME_TITLE = "跑酷游戏"
BACKGROUND = (255, 255, 255)


class Game:
    """State of one game: the player, the obstacles on the field and the spawn clock."""

    def __init__(self, obstacle_width: float = 0.0) -> None:
        self.player = Player(*PLAYER_START)
        self.obstacles: list[Obstacle] = []
        self.obstacle_width = obstacle_width
        self.running = True
        self._spawn_counter = 0

    def update(self) -> None:
        """Advance the game by one frame."""
        self.player.move()
        self.obstacles = [obstacle for obstacle in self.obstacles if not obstacle.move()]
        self.spawn_obstacle()

    def spawn_obstacle(self) -> Obstacle | None:
        """Count one frame and add a new obstacle every SPAWN_INTERVAL frames."""
        due = self._spawn_counter % SPAWN_INTERVAL == 0
        self._spawn_counter += 1
        if not due:
            return None
        obstacle = Obstacle(*OBSTACLE_START, width=self.obstacle_width)
        self.obstacles.append(obstacle)
        return obstacle

    def key_press(self, key: int) -> bool:
        """Pass a key press to the player; return whether a jump started."""
        return self.player.key_press(key)


def _load_image(path: Path) -> pygame.Surface:
    try:
        return pygame.image.load(str(path)).convert_alpha()
    except (pygame.error, FileNotFoundError):
        return pygame.Surface((0, 0), pygame.SRCALPHA)


def run_game(resource_dir) -> Game:
    """Open the game window and play until it is closed; return the final state."""
    images = Path(resource_dir) / "images"
    pygame.init()
    try:
        screen = pygame.display.set_mode((SCENE_WIDTH, SCENE_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)
        player_image = _load_image(images / "player.png")
        obstacle_image = _load_image(images / "obstacle.png")
        game = Game(obstacle_width=obstacle_image.get_width())
        clock = pygame.time.Clock()
        while game.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.running = False
                elif event.type == pygame.KEYDOWN:
                    game.key_press(event.key)
            game.update()
            screen.fill(BACKGROUND)
            for obstacle in game.obstacles:
                screen.blit(obstacle_image, (obstacle.x, obstacle.y))
            screen.blit(player_image, (game.player.x, game.player.y))
            pygame.display.flip()
            clock.tick(1000 // FRAME_MS)
    finally:
        pygame.quit()
    return game