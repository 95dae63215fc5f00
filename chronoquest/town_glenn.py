"""Collisions of Glenn in the town."""

from __future__ import annotations

from .barriers import Barrier, block, gate
from .state import GameState

BOSS_PATH_SCENE = 9
ARENA_SCENE = 5
BOSS_PATH_POSITION = (729, 762)
ARENA_POSITION = (620, 5)


def _row(side: str, x_min: float, x_max: float, y: float) -> Barrier:
    return Barrier(side, x_min, x_max, y, y)


def _col(side: str, y_min: float, y_max: float, x: float) -> Barrier:
    return Barrier(side, x, x, y_min, y_max)


_NORTH_EXIT = _row("up", 385.5, 466.5, 1.5)
_SOUTH_EXIT = _row("down", 448.5, 501, 787.5)
_WEST_EDGE = _col("left", 295.5, 370.5, -6)

_POKESTOP2 = (
    _col("right", 424.5, 525, 462),
    _row("up", 462, 597, 525),
    _col("left", 410, 525, 597),
    _row("down", 462, 597, 424.5),
)

_HOUSE2 = (
    _row("down", 441, 838.5, 270),
    _col("right", 270, 376.5, 441),
    _row("up", 441, 576, 376.5),
    _col("left", 294, 376.5, 576),
    _row("up", 576, 838.5, 294),
)

_POKESTOP = (
    _row("up", 628.5, 805.5, 187.5),
    _col("left", 82.5, 187.5, 805.5),
    _row("down", 649.5, 805.5, 82.5),
    _col("right", 82.5, 154.5, 649.5),
    _row("down", 630, 649.5, 154.5),
    _col("right", 154.5, 187.5, 630),
)

_HOUSE = (
    _row("up", 441, 594, 231),
    _col("right", 133.5, 231, 441),
    _row("down", 441, 594, 133.5),
    _col("left", 133.5, 231, 594),
)

_FENCING2 = (
    _row("up", 151.5, 408, 315),
    _col("left", 82.5, 315, 408),
    _row("down", 156, 400.5, 82.5),
    _col("right", 82.5, 315, 156),
)

_WATER = (
    _row("down", 132, 216, 415.5),
    _col("left", 415.5, 436.5, 216),
    _row("down", 216, 277.5, 436.5),
    _col("left", 436.5, 495, 277.5),
    _row("down", 277.5, 342, 495),
    _col("left", 495, 606, 342),
)

_ROCK = (
    _col("left", 370.5, 646.5, 132),
    _row("down", -7, 137, 370.5),
    _row("up", -6, 111, 297),
    _col("left", 274.5, 297, 111),
    _row("up", 111, 154.5, 274.5),
    _col("left", 63, 274.5, 154.5),
)

_BUSH_TOP = (
    _row("up", 576, 838.5, 48),
    _col("left", 48, 63, 576),
    _row("up", 466.5, 576, 63),
    _col("right", 1.5, 63, 466.5),
)

_BUSH = (
    _col("right", 48, 685.5, 838.5),
    _row("down", 501, 838.5, 685.5),
    _col("right", 685.5, 787.5, 501),
    _col("left", 685.5, 787.5, 448.5),
    _row("down", 280.5, 448.5, 685.5),
    _col("left", 646.5, 685.5, 280.5),
    _row("down", 132, 280.5, 646.5),
)


def limit_map_gleen(state: GameState) -> None:
    """Handle the town's north exit, south exit and western edge for Glenn."""
    glenn = state.glenn2
    if _NORTH_EXIT.touches(glenn):
        glenn.stop_up = True
        glenn.x, glenn.y = BOSS_PATH_POSITION
        state.scene = BOSS_PATH_SCENE
    if _SOUTH_EXIT.touches(glenn):
        glenn.x, glenn.y = ARENA_POSITION
        state.scene = ARENA_SCENE
    _WEST_EDGE.apply(glenn)


def pokestop_collision_glenn2(state: GameState) -> None:
    """Block Glenn around the lower pokestop."""
    block(state.glenn2, _POKESTOP2)


def house_collision_glenn2(state: GameState) -> None:
    """Block Glenn along the row of houses on the right."""
    block(state.glenn2, _HOUSE2)


def pokestop_collision_glenn(state: GameState) -> None:
    """Block Glenn around the upper pokestop."""
    block(state.glenn2, _POKESTOP)


def house_collision_glenn(state: GameState) -> None:
    """Reset Glenn's stop flags from the walls of the hero's house."""
    gate(state.glenn2, _HOUSE)


def bush_fencing_collision2_glenn(state: GameState) -> None:
    """Block Glenn around the fenced garden."""
    block(state.glenn2, _FENCING2)


def water_collision_glenn(state: GameState) -> None:
    """Block Glenn along the pond shore."""
    block(state.glenn2, _WATER)


def rock_collision_glenn(state: GameState) -> None:
    """Block Glenn at the rocks on the western side."""
    block(state.glenn2, _ROCK)


def bush_top_glenn_collision(state: GameState) -> None:
    """Block Glenn at the bushes along the top of the town."""
    block(state.glenn2, _BUSH_TOP)


def bush_glenn_collision(state: GameState) -> None:
    """Block Glenn at the bushes along the right and bottom of the town."""
    block(state.glenn2, _BUSH)