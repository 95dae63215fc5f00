"""Collisions of Glenn in the arena town square."""

from __future__ import annotations

from .barriers import Barrier, block, gate
from .state import GameState

ARENA_EXIT_SCENE = 5
ARENA_EXIT_POSITION = (240.5, 159.5)


def _row(side: str, x_min: float, x_max: float, y: float) -> Barrier:
    return Barrier(side, x_min, x_max, y, y)


def _col(side: str, y_min: float, y_max: float, x: float) -> Barrier:
    return Barrier(side, x, x, y_min, y_max)


_WOMAN = (
    _col("right", 79, 107.5, 435.5),
    _col("left", 79, 107.5, 506),
    _row("up", 437, 504.5, 107.5),
)
_EXIT = _row("down", 442, 497, 764.5)

_END = (
    _col("left", 160, 202, 455),
    _col("right", 160, 202, 485),
    _row("down", 435.5, 455, 160),
    _row("down", 485, 506, 160),
    _col("left", 79, 160, 435.5),
    _col("right", 79, 160, 506),
    _row("up", 435.5, 506, 79),
)

_ENTER_RIGHT = (
    _row("down", 539, 588.5, 680.5),
    _col("right", 643, 680.5, 588.5),
    _row("down", 588.5, 839, 643),
    _col("right", 602.5, 643, 839),
    _row("up", 654, 839, 602.5),
    _col("left", 602.5, 625, 654.5),
    _row("up", 483.5, 654, 625),
)

_ENTER_LEFT = (
    _row("down", 345.5, 392, 680.5),
    _col("left", 643, 680.5, 345.5),
    _row("down", 96.5, 345.5, 643),
    _col("left", 602.5, 643, 96.5),
    _row("up", 96.5, 300, 602.5),
    _col("right", 602.5, 625, 288.5),
    _col("left", 575.5, 625, 447.5),
)

_INIT = (
    _row("down", 392, 539, 767.5),
    _col("left", 680.5, 767.5, 392),
    _col("right", 680.5, 767.5, 539),
    _row("up", 297.5, 447.5, 625),
)

_CENTER = (
    _col("right", 575.5, 625, 483.5),
    _row("down", 350, 432.5, 575.5),
    _col("left", 548.5, 575.5, 350),
    _row("down", 314, 350, 548.5),
    _col("left", 521.5, 548.5, 314),
    _row("down", 273.5, 314, 521.5),
)

_CENTER2 = (
    _col("left", 491.5, 521.5, 273.5),
    _row("down", 239, 273.5, 491.5),
    _col("left", 293.5, 491.5, 239),
    _row("up", 239, 273.5, 293.5),
    _col("left", 263.5, 293.5, 273.5),
    _row("up", 273.5, 314, 263.5),
    _col("left", 233.5, 264.5, 314),
)

_CENTER3 = (
    _row("up", 314, 351.5, 233.5),
    _col("left", 202, 233.5, 351.5),
    _row("up", 351, 455, 202),
    _row("up", 485, 590, 202),
    _col("right", 202, 232, 590),
    _row("up", 590, 630.5, 232),
    _col("right", 232, 257.5, 630.5),
)

_CENTER4 = (
    _row("up", 630.5, 668, 257.5),
    _col("right", 257.5, 289, 668),
    _row("up", 668, 702.5, 289),
    _col("right", 289, 493, 702.5),
    _row("down", 663.5, 702.5, 493),
    _col("right", 493, 524.5, 663.5),
    _row("down", 627.5, 663.5, 524.5),
)

_CENTER5 = (
    _col("right", 524.5, 550, 627.5),
    _row("down", 593, 627.5, 550),
    _col("right", 550, 578.5, 593),
    _row("down", 483.5, 593, 578.5),
)


def collision_woman_glenn(state: GameState) -> None:
    """Block Glenn at the woman and leave the arena through the south gate."""
    block(state.glenn, _WOMAN)
    if _EXIT.touches(state.glenn):
        state.play_sound("dor")
        state.scene = ARENA_EXIT_SCENE
        state.glenn2.x, state.glenn2.y = ARENA_EXIT_POSITION


def collision_end_glenn(state: GameState) -> None:
    """Block Glenn in the northern alcove of the arena."""
    block(state.glenn, _END)


def collision_enter_glenn_right(state: GameState) -> None:
    """Block Glenn along the right side of the arena entrance."""
    block(state.glenn, _ENTER_RIGHT)


def collision_enter_glenn_left(state: GameState) -> None:
    """Block Glenn along the left side of the arena entrance."""
    block(state.glenn, _ENTER_LEFT)


def collision_init_glenn(state: GameState) -> None:
    """Reset Glenn's stop flags from the walls of the entrance corridor."""
    gate(state.glenn, _INIT)


def collision_center_glenn(state: GameState) -> None:
    """Block Glenn along the south-west edge of the central ring."""
    block(state.glenn, _CENTER)


def collision_center_glenn2(state: GameState) -> None:
    """Block Glenn along the west edge of the central ring."""
    block(state.glenn, _CENTER2)


def collision_center_glenn3(state: GameState) -> None:
    """Block Glenn along the north edge of the central ring."""
    block(state.glenn, _CENTER3)


def collision_center_glenn4(state: GameState) -> None:
    """Block Glenn along the east edge of the central ring."""
    block(state.glenn, _CENTER4)


def collision_center_glenn5(state: GameState) -> None:
    """Block Glenn along the south-east edge of the central ring."""
    block(state.glenn, _CENTER5)