import pygame

from tablecat.game import (
    OBSTACLE_START,
    PLAYER_START,
    SPAWN_INTERVAL,
    Game,
)


def test_initial_state():
    game = Game()
    assert (game.player.x, game.player.y) == PLAYER_START
    assert game.obstacles == []
    assert game.running is True


def test_first_spawn_places_obstacle_at_start():
    game = Game(obstacle_width=30)
    obstacle = game.spawn_obstacle()
    assert (obstacle.x, obstacle.y) == OBSTACLE_START
    assert obstacle.width == 30
    assert game.obstacles == [obstacle]


def test_spawn_happens_once_per_interval():
    game = Game()
    results = [game.spawn_obstacle() for _ in range(SPAWN_INTERVAL)]
    assert sum(r is not None for r in results) == 1
    assert game.spawn_obstacle() is not None
    assert len(game.obstacles) == 2


def test_update_moves_obstacles_left():
    game = Game()
    game.update()
    first = game.obstacles[0]
    assert first.x == OBSTACLE_START[0]
    game.update()
    assert first.x < OBSTACLE_START[0]


def test_offscreen_obstacles_are_removed():
    game = Game(obstacle_width=10)
    for _ in range(1000):
        game.update()
        assert all(not o.is_offscreen() for o in game.obstacles)
    assert 1 <= len(game.obstacles) <= 2


def test_space_starts_a_single_jump():
    game = Game()
    assert game.key_press(pygame.K_SPACE) is True
    assert game.player.is_jumping is True
    assert game.key_press(pygame.K_SPACE) is False


def test_other_key_does_not_jump():
    game = Game()
    assert game.key_press(pygame.K_a) is False
    assert game.player.is_jumping is False


def test_jump_rises_and_lands_back_on_ground():
    game = Game()
    game.key_press(pygame.K_SPACE)
    game.update()
    assert game.player.y < PLAYER_START[1]
    for _ in range(200):
        game.update()
    assert game.player.y == PLAYER_START[1]
    assert game.player.is_jumping is False