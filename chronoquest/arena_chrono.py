"""Collisions of Chrono in the arena town square."""

from __future__ import annotations

from .barriers import Barrier, block, gate
from .state import GameState

ARENA_EXIT_SCENE = 5
ARENA_EXIT_POSITION = (237, 150)


def _row(side: str, x_min: float, x_max: float, y: float) -> Barrier:
    return Barrier(side, x_min, x_max, y, y)


def _col(side: str, y_min: float, y_max: float, x: float) -> Barrier:
    return Barrier(side, x, x, y_min, y_max)


_WOMAN = (
    _col("right", 46, 80, 432),
    _col("left", 46, 80, 506),
    _row("up", 433, 505, 80),
)
_EXIT = _row("down", 442, 594, 742)

_END = (
    _col("left", 136, 176, 456),
    _col("right", 136, 176, 484),
    _row("down", 432, 456, 136),
    _row("down", 484, 506, 136),
    _col("left", 46, 136, 432),
    _col("right", 46, 136, 506),
    _row("up", 432, 506, 46),
)

_ENTER_RIGHT = (
    _row("down", 542, 586, 658),
    _col("right", 620, 658, 586),
    _row("down", 586, 840, 620),
    _col("right", 580, 620, 840),
    _row("up", 654, 840, 580),
    _col("left", 580, 604, 654),
    _row("up", 488, 654, 604),
)

_ENTER_LEFT = (
    _row("down", 346, 394, 656),
    _col("left", 620, 656, 346),
    _row("down", 96, 346, 620),
    _col("left", 576, 620, 96),
    _row("up", 96, 288, 576),
    _col("right", 576, 604, 288),
    _col("left", 552, 604, 452),
)

_INIT = (
    _row("down", 394, 542, 742),
    _col("left", 658, 742, 394),
    _col("right", 658, 742, 542),
    _row("up", 288, 452, 604),
)

_CENTER = (
    _col("right", 552, 604, 488),
    _row("down", 288, 452, 552),
    _col("left", 526, 552, 350),
    _row("down", 312, 350, 526),
    _col("left", 496, 526, 312),
    _row("down", 274, 312, 496),
)

_CENTER2 = (
    _col("left", 464, 496, 274),
    _row("down", 236, 274, 464),
    _col("left", 266, 464, 240),
    _row("up", 240, 272, 266),
    _col("left", 236, 266, 272),
    _row("up", 272, 310, 236),
    _col("left", 208, 236, 310),
)

_CENTER3 = (
    _row("up", 310, 350, 208),
    _col("left", 176, 208, 350),
    _row("up", 350, 456, 176),
    _row("up", 484, 586, 176),
    _col("right", 176, 208, 586),
    _row("up", 586, 624, 208),
    _col("right", 208, 236, 624),
)

_CENTER4 = (
    _row("up", 624, 664, 236),
    _col("right", 236, 266, 664),
    _row("up", 664, 702, 266),
    _col("right", 266, 464, 702),
    _row("down", 664, 702, 464),
    _col("right", 464, 496, 664),
    _row("down", 624, 664, 496),
)

_CENTER5 = (
    _col("right", 496, 526, 624),
    _row("down", 586, 624, 526),
    _col("right", 526, 552, 586),
    _row("down", 488, 586, 552),
)


def collision_woman_chrono(state: GameState) -> None:
    """Block Chrono at the woman and leave the arena through the south gate."""
    block(state.chrono, _WOMAN)
    if _EXIT.touches(state.chrono):
        state.play_sound("dor")
        state.scene = ARENA_EXIT_SCENE
        state.chrono2.x, state.chrono2.y = ARENA_EXIT_POSITION


def collision_end_chrono(state: GameState) -> None:
    """Block Chrono in the northern alcove of the arena."""
    block(state.chrono, _END)


def collision_enter_chrono_right(state: GameState) -> None:
    """Block Chrono along the right side of the arena entrance."""
    block(state.chrono, _ENTER_RIGHT)


def collision_enter_chrono_left(state: GameState) -> None:
    """Block Chrono along the left side of the arena entrance."""
    block(state.chrono, _ENTER_LEFT)


def collision_init_chrono(state: GameState) -> None:
    """Reset Chrono's stop flags from the walls of the entrance corridor."""
    gate(state.chrono, _INIT)


def collision_center_chrono(state: GameState) -> None:
    """Block Chrono along the south-west edge of the central ring."""
    block(state.chrono, _CENTER)


def collision_center_chrono2(state: GameState) -> None:
    """Block Chrono along the west edge of the central ring."""
    block(state.chrono, _CENTER2)


def collision_center_chrono3(state: GameState) -> None:
    """Block Chrono along the north edge of the central ring."""
    block(state.chrono, _CENTER3)


def collision_center_chrono4(state: GameState) -> None:
    """Block Chrono along the east edge of the central ring."""
    block(state.chrono, _CENTER4)


def collision_center_chrono5(state: GameState) -> None:
    """Block Chrono along the south-east edge of the central ring."""
    block(state.chrono, _CENTER5)