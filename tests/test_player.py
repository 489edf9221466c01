import pygame
import pytest

from tablecat.player import GROUND_Y, JUMP_VELOCITY, Player


@pytest.fixture
def grounded():
    return Player(x=100.0, y=GROUND_Y)


def test_jump_sets_initial_velocity(grounded):
    assert grounded.jump() is True
    assert grounded.is_jumping is True
    assert grounded.velocity_y == -15


def test_jump_while_airborne_is_ignored(grounded):
    grounded.jump()
    grounded.move()
    velocity = grounded.velocity_y
    assert grounded.jump() is False
    assert grounded.velocity_y == velocity


def test_space_key_jumps(grounded):
    assert grounded.key_press(pygame.K_SPACE) is True
    assert grounded.velocity_y == JUMP_VELOCITY


def test_other_key_does_not_jump(grounded):
    assert grounded.key_press(pygame.K_a) is False
    assert grounded.is_jumping is False
    assert grounded.velocity_y == 0.0


def test_move_on_ground_does_nothing(grounded):
    grounded.move()
    assert (grounded.x, grounded.y, grounded.velocity_y) == (100.0, GROUND_Y, 0.0)


def test_player_rises_then_lands(grounded):
    grounded.jump()
    grounded.move()
    assert grounded.y < GROUND_Y
    for _ in range(1000):
        if not grounded.is_jumping:
            break
        assert grounded.y <= GROUND_Y
        grounded.move()
    assert grounded.is_jumping is False
    assert grounded.y == GROUND_Y
    assert grounded.velocity_y == 0.0
    assert grounded.x == 100.0


def test_velocity_grows_each_frame(grounded):
    grounded.jump()
    previous = grounded.velocity_y
    grounded.move()
    assert grounded.velocity_y > previous


def test_can_jump_again_after_landing(grounded):
    grounded.jump()
    while grounded.is_jumping:
        grounded.move()
    assert grounded.jump() is True