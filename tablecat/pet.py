"""The desktop pet: an animated character with a right-click menu that can be dragged."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .actions import FRAME_INTERVAL_MS, Animation, RoleAct, draw_position  # noqa: E402
from .game import run_game  # noqa: E402
from .menu import MainMenu, Page  # noqa: E402

GAME_LABEL = "跑酷游戏"
HIDE_LABEL = "Hide"
WINDOW_SIZE = (400, 400)
_FONT_NAMES = "microsoftyahei,simhei,notosanscjksc,notosanscjk,wenquanyimicrohei"
_ENTRY_HEIGHT = 24
_ENTRY_WIDTH = 140
_MENU_BG = (240, 240, 240)
_MENU_FG = (20, 20, 20)
_BACKGROUND = (0, 0, 0)


@dataclass(frozen=True)
class MenuEntry:
    """One entry of the right-click menu; act is None for the game and hide entries."""

    label: str
    act: RoleAct | None = None


def menu_entries() -> list[MenuEntry]:
    """The right-click menu entries in display order."""
    acts = [
        RoleAct.COLD,
        RoleAct.FLY,
        RoleAct.HAPPY,
        RoleAct.JUMP,
        RoleAct.LIEDOWN,
        RoleAct.OIOIOI,
        RoleAct.SAYHELLO,
    ]
    return [
        MenuEntry(GAME_LABEL),
        *(MenuEntry(act.name.lower(), act) for act in acts),
        MenuEntry(HIDE_LABEL),
    ]


class DragTracker:
    """Tracks where a window was grabbed so it can follow the mouse."""

    def __init__(self) -> None:
        self.grab = (0, 0)

    def press(self, pos: tuple[int, int]) -> None:
        """Remember the grab point, relative to the window."""
        self.grab = (pos[0], pos[1])

    def move(self, global_pos: tuple[int, int], left_down: bool) -> tuple[int, int] | None:
        """The new window position while the left button is held, else None."""
        if not left_down:
            return None
        return global_pos[0] - self.grab[0], global_pos[1] - self.grab[1]


def _sdl_window():
    try:
        from pygame._sdl2.video import Window

        return Window.from_display_module()
    except (ImportError, AttributeError, pygame.error):
        return None


class _FrameCache:
    def __init__(self, resource_dir: Path) -> None:
        self._dir = resource_dir
        self._images: dict[str, pygame.Surface] = {}

    def get(self, path: str) -> pygame.Surface:
        image = self._images.get(path)
        if image is None:
            try:
                image = pygame.image.load(str(self._dir / path)).convert_alpha()
            except (pygame.error, FileNotFoundError):
                image = pygame.Surface((0, 0), pygame.SRCALPHA)
            self._images[path] = image
        return image


def _draw_list(screen, font, origin, labels) -> list[pygame.Rect]:
    rects = []
    x, y = origin
    for index, label in enumerate(labels):
        rect = pygame.Rect(x, y + index * _ENTRY_HEIGHT, _ENTRY_WIDTH, _ENTRY_HEIGHT)
        pygame.draw.rect(screen, _MENU_BG, rect)
        screen.blit(font.render(label, True, _MENU_FG), (rect.x + 6, rect.y + 3))
        rects.append(rect)
    return rects


def _run_pet(screen, font, resource_dir: Path) -> str:
    """Show the pet until it is hidden or sent to the game; return which."""
    animation = Animation(RoleAct.SAYHELLO)
    frames = _FrameCache(resource_dir)
    tracker = DragTracker()
    window = _sdl_window()
    entries = menu_entries()
    popup_at: tuple[int, int] | None = None
    popup_rects: list[pygame.Rect] = []
    tick_event = pygame.USEREVENT + 1
    pygame.time.set_timer(tick_event, FRAME_INTERVAL_MS)
    animation.tick()
    clock = pygame.time.Clock()
    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return "hide"
                if event.type == tick_event:
                    animation.tick()
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 3:
                    width, height = screen.get_size()
                    popup_at = (
                        min(event.pos[0], width - _ENTRY_WIDTH),
                        min(event.pos[1], height - _ENTRY_HEIGHT * len(entries)),
                    )
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    if popup_at is not None:
                        chosen = next(
                            (e for e, r in zip(entries, popup_rects) if r.collidepoint(event.pos)),
                            None,
                        )
                        popup_at = None
                        if chosen is None:
                            continue
                        if chosen.label == GAME_LABEL:
                            return "game"
                        if chosen.label == HIDE_LABEL:
                            return "hide"
                        animation.show(chosen.act)
                    else:
                        tracker.press(event.pos)
                elif event.type == pygame.MOUSEMOTION and window is not None:
                    wx, wy = window.position
                    target = tracker.move(
                        (wx + event.pos[0], wy + event.pos[1]), bool(event.buttons[0])
                    )
                    if target is not None:
                        window.position = target
            screen.fill(_BACKGROUND)
            image = frames.get(animation.current_frame)
            screen.blit(
                image,
                draw_position(animation.act, image.get_height(), screen.get_height()),
            )
            popup_rects = (
                _draw_list(screen, font, popup_at, [e.label for e in entries])
                if popup_at is not None
                else []
            )
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.time.set_timer(tick_event, 0)


def _run_menu(screen, font, menu: MainMenu) -> bool:
    """Show the start menu; return whether a game was started."""
    clock = pygame.time.Clock()
    while menu.game is None and not menu.closed:
        if menu.page is Page.MAIN:
            buttons = [("开始", menu.start), ("查看规则", menu.show_rules), ("退出", menu.quit)]
        else:
            buttons = [("返回", menu.back)]
        screen.fill(_BACKGROUND)
        rects = _draw_list(screen, font, (20, 20), [label for label, _ in buttons])
        pygame.display.flip()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                menu.quit()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                for (_, action), rect in zip(buttons, rects):
                    if rect.collidepoint(event.pos):
                        action()
                        break
        clock.tick(30)
    return menu.game is not None


def main(argv=None) -> int:
    """Run the desktop pet; the optional argument is the resource directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    resource_dir = Path(args[0]) if args else Path("resources")
    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.NOFRAME)
        pygame.display.set_caption("tablecat")
        font = pygame.font.SysFont(_FONT_NAMES, 18)
        if _run_pet(screen, font, resource_dir) == "game":
            screen = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(GAME_LABEL)
            if _run_menu(screen, font, MainMenu()):
                run_game(resource_dir)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())