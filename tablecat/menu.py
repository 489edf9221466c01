"""The game's start menu: a main page, a rules page and the running game."""

from __future__ import annotations

from enum import Enum
from typing import Callable

from .game import Game


class Page(Enum):
    """The pages of the start menu."""

    MAIN = "page"
    RULES = "page_2"


class MainMenu:
    """Start menu state: which page is shown, the current game and visibility."""

    def __init__(self, game_factory: Callable[[], Game] = Game) -> None:
        self._game_factory = game_factory
        self.page = Page.MAIN
        self.game: Game | None = None
        self.visible = True
        self.closed = False

    def show_rules(self) -> None:
        """Show the rules page."""
        self.page = Page.RULES

    def back(self) -> None:
        """Return to the main page."""
        self.page = Page.MAIN

    def start(self) -> Game:
        """Stop any running game, start a new one and hide the menu."""
        if self.game is not None:
            self.game.running = False
        self.game = self._game_factory()
        self.visible = False
        return self.game

    def quit(self) -> None:
        """Close the menu."""
        self.closed = True
        self.visible = False