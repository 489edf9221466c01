from tablecat.game import Game
from tablecat.menu import MainMenu, Page


def test_starts_on_main_page_visible():
    menu = MainMenu()
    assert menu.page is Page.MAIN
    assert menu.visible is True
    assert menu.game is None
    assert menu.closed is False


def test_rules_and_back():
    menu = MainMenu()
    menu.show_rules()
    assert menu.page is Page.RULES
    menu.back()
    assert menu.page is Page.MAIN


def test_start_creates_game_and_hides_menu():
    menu = MainMenu()
    game = menu.start()
    assert isinstance(game, Game)
    assert menu.game is game
    assert game.running is True
    assert menu.visible is False


def test_start_again_replaces_running_game():
    menu = MainMenu()
    old = menu.start()
    new = menu.start()
    assert old.running is False
    assert new.running is True
    assert menu.game is new


def test_start_uses_factory():
    made = []

    def factory():
        game = Game(obstacle_width=7)
        made.append(game)
        return game

    menu = MainMenu(game_factory=factory)
    game = menu.start()
    assert made == [game]
    assert game.obstacle_width == 7


def test_quit_closes_menu():
    menu = MainMenu()
    menu.quit()
    assert menu.closed is True
    assert menu.visible is False