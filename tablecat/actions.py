"""The desktop pet's animated actions and how their frames are laid out."""

from __future__ import annotations

from enum import Enum, IntEnum

FRAME_INTERVAL_MS = 70
TOP_LEFT_OFFSET = (100, 100)


class RoleAct(IntEnum):
    """The actions the pet can perform."""

    COLD = 0
    FLY = 1
    HAPPY = 2
    JUMP = 3
    LIEDOWN = 4
    OIOIOI = 5
    SAYHELLO = 6


class Alignment(str, Enum):
    """Where an action's frames are drawn inside the window."""

    BOTTOM = "bottom"
    TOP_LEFT = "top-left"


_FRAME_COUNTS = {
    RoleAct.COLD: 20,
    RoleAct.FLY: 16,
    RoleAct.HAPPY: 8,
    RoleAct.JUMP: 8,
    RoleAct.LIEDOWN: 57,
    RoleAct.OIOIOI: 6,
    RoleAct.SAYHELLO: 12,
}

_ALIGNMENTS = {
    RoleAct.SAYHELLO: Alignment.BOTTOM,
    RoleAct.FLY: Alignment.BOTTOM,
    RoleAct.HAPPY: Alignment.BOTTOM,
    RoleAct.COLD: Alignment.BOTTOM,
    RoleAct.LIEDOWN: Alignment.BOTTOM,
    RoleAct.OIOIOI: Alignment.BOTTOM,
    RoleAct.JUMP: Alignment.TOP_LEFT,
}


def frame_paths(act: RoleAct) -> list[str]:
    """The resource-relative image paths of an action's frames, in order."""
    act = RoleAct(act)
    name = act.name.lower()
    return [
        f"{name}/image/{name}.png/{name}({index}).png"
        for index in range(_FRAME_COUNTS[act])
    ]


def alignment(act: RoleAct) -> Alignment:
    """How the frames of an action are aligned; top-left if none is set."""
    return _ALIGNMENTS.get(RoleAct(act), Alignment.TOP_LEFT)


def draw_position(act: RoleAct, frame_height: int, window_height: int) -> tuple[int, int]:
    """The top-left corner at which a frame of the given height is drawn."""
    if alignment(act) is Alignment.BOTTOM:
        return 0, max(0, window_height - frame_height)
    return TOP_LEFT_OFFSET


class Animation:
    """Cycles through the frames of the current action.

    The frame counter runs on across action changes, so switching actions
    continues at the same counter position modulo the new frame count.
    """

    def __init__(self, act: RoleAct = RoleAct.SAYHELLO) -> None:
        self._frames = {a: frame_paths(a) for a in RoleAct}
        self._counter = 0
        self.act = RoleAct(act)
        self.current_frame: str | None = None

    def show(self, act: RoleAct) -> None:
        """Switch to another action."""
        self.act = RoleAct(act)

    def tick(self) -> str:
        """Advance to the next frame and return its path."""
        paths = self._frames[self.act]
        self.current_frame = paths[self._counter % len(paths)]
        self._counter += 1
        return self.current_frame