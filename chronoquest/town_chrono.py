"""Collisions of Chrono in the town, plus the shared town edges for Glenn."""

from __future__ import annotations

from .barriers import Barrier, block, gate
from .state import GameState

BOSS_PATH_SCENE = 9
ARENA_SCENE = 5
BOSS_PATH_POSITION = (729, 748)
ARENA_POSITION = (625, 2)
BOSS_UNLOCKED = 3
BOSS_LOCKED = 0


def _row(side: str, x_min: float, x_max: float, y: float) -> Barrier:
    return Barrier(side, x_min, x_max, y, y)


def _col(side: str, y_min: float, y_max: float, x: float) -> Barrier:
    return Barrier(side, x, x, y_min, y_max)


_POKESTOP2 = (
    _col("right", 410, 508, 467),
    _row("up", 467, 597, 508),
    _col("left", 410, 508, 597),
    _row("down", 467, 597, 410),
)

_SHOP_CHRONO = (
    _col("right", 282, 366, 673),
    _row("up", 673, 785, 366),
    _col("left", 282, 366, 785),
)
_SHOP_GLENN = (
    _col("right", 294, 379.5, 670.5),
    _row("up", 670.5, 784.5, 379.5),
    _col("left", 294, 379.5, 784.5),
)

_HOUSE2 = (
    _row("down", 443, 843, 256),
    _col("right", 256, 362, 443),
    _row("up", 433, 577, 362),
    _col("left", 282, 362, 577),
    _row("up", 577, 843, 282),
)

_POKESTOP = (
    _row("up", 655, 805, 174),
    _col("left", 68, 174, 805),
    _row("down", 653, 805, 68),
    _col("right", 68, 140, 653),
    _row("down", 631, 653, 140),
    _col("right", 140, 174, 653),
)

_HOUSE = (
    _row("up", 445, 597, 214),
    _col("right", 124, 214, 445),
    _row("down", 445, 597, 124),
    _col("left", 124, 214, 597),
)

_ROCK = (
    _col("left", 356, 632, 137),
    _row("down", -7, 137, 356),
    _row("up", -7, 113, 280),
    _col("left", 260, 280, 113),
    _row("up", 113, 155, 260),
    _col("left", 48, 260, 155),
)

_NORTH_EXIT = _row("up", 389, 467, 0)
_SOUTH_EXIT = _row("down", 449, 509, 774)
_WEST_EDGE = _col("left", 278, 356, -7)

_BUSH_TOP = (
    _row("up", 581, 843, 32),
    _col("left", 32, 48, 581),
    _row("up", 467, 581, 48),
    _col("right", 0, 48, 467),
)

_BUSH = (
    _col("right", 32, 680, 843),
    _row("down", 509, 843, 674),
    _col("right", 674, 776, 509),
    _col("left", 674, 776, 449),
    _row("down", 285, 449, 674),
    _col("left", 632, 674, 285),
    _row("down", 137, 285, 632),
)

_STOPPER_CHRONO = (
    _row("up", 597, 847, 214),
    _row("up", 443, 843, 592),
    _row("up", 133, 385, 592),
)
_STOPPER_GLENN = (
    _row("up", 594, 844.5, 231),
    _row("up", 444, 844.5, 609),
    _row("up", 132, 400.5, 609),
)

_FENCING2 = (
    _row("up", 179, 409, 300),
    _col("left", 68, 300, 409),
    _row("down", 155, 409, 68),
    _col("right", 68, 300, 155),
)

_FENCING_CHRONO = (
    _row("up", 155, 389, 48),
    _col("left", 0, 48, 389),
)
_FENCING_GLENN = (
    _row("up", 154.5, 387, 63),
    _col("left", 1.5, 63, 387),
)

_WATER = (
    _row("down", 137, 219, 402),
    _col("left", 402, 424, 219),
    _row("down", 219, 281, 424),
    _col("left", 424, 482, 281),
    _row("down", 281, 343, 482),
    _col("left", 482, 576, 343),
)


def pokestop_collision_chrono2(state: GameState) -> None:
    """Block Chrono around the lower pokestop."""
    block(state.chrono2, _POKESTOP2)


def shop_collision(state: GameState) -> None:
    """Block both heroes at the shop."""
    block(state.chrono2, _SHOP_CHRONO)
    block(state.glenn2, _SHOP_GLENN)


def house_collision_chrono2(state: GameState) -> None:
    """Block Chrono along the row of houses on the right."""
    block(state.chrono2, _HOUSE2)


def pokestop_collision_chrono(state: GameState) -> None:
    """Block Chrono around the upper pokestop."""
    block(state.chrono2, _POKESTOP)


def house_collision_chrono(state: GameState) -> None:
    """Reset Chrono's stop flags from the walls of the hero's house."""
    gate(state.chrono2, _HOUSE)


def rock_collision_chrono(state: GameState) -> None:
    """Block Chrono at the rocks on the western side."""
    block(state.chrono2, _ROCK)


def limit_map_chrono(state: GameState) -> None:
    """Handle the town's north exit, south exit and western edge for Chrono."""
    chrono = state.chrono2
    if _NORTH_EXIT.touches(chrono) and state.lose == BOSS_LOCKED:
        chrono.stop_up = True
    if _NORTH_EXIT.touches(chrono) and state.lose == BOSS_UNLOCKED:
        chrono.x, chrono.y = BOSS_PATH_POSITION
        state.scene = BOSS_PATH_SCENE
    if _SOUTH_EXIT.touches(chrono):
        state.scene = ARENA_SCENE
        chrono.x, chrono.y = ARENA_POSITION
    _WEST_EDGE.apply(chrono)


def bush_top_collision_chrono(state: GameState) -> None:
    """Block Chrono at the bushes along the top of the town."""
    block(state.chrono2, _BUSH_TOP)


def bush_chrono_collision(state: GameState) -> None:
    """Block Chrono at the bushes along the right and bottom of the town."""
    block(state.chrono2, _BUSH)


def stopper_collision(state: GameState) -> None:
    """Block both heroes at the fences they may only pass downwards."""
    block(state.chrono2, _STOPPER_CHRONO)
    block(state.glenn2, _STOPPER_GLENN)


def bush_fencing_collision2_chrono(state: GameState) -> None:
    """Block Chrono around the fenced garden."""
    block(state.chrono2, _FENCING2)


def bush_fencing_collision(state: GameState) -> None:
    """Block both heroes at the hedge beside the north exit."""
    block(state.chrono2, _FENCING_CHRONO)
    block(state.glenn2, _FENCING_GLENN)


def water_collision_chrono(state: GameState) -> None:
    """Block Chrono along the pond shore."""
    block(state.chrono2, _WATER)