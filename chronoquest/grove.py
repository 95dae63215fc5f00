"""Collisions of both heroes on the second outdoor map."""

from __future__ import annotations

from .barriers import Barrier, block, gate
from .state import GameState

GROVE_EXIT_SCENE = 3
GROVE_DOOR_SCENE = 6
CHRONO_RETURN_POSITION = (479, 770)
GLENN_RETURN_POSITION = (477, 775.5)


def _row(side: str, x_min: float, x_max: float, y: float) -> Barrier:
    return Barrier(side, x_min, x_max, y, y)


def _col(side: str, y_min: float, y_max: float, x: float) -> Barrier:
    return Barrier(side, x, x, y_min, y_max)


_WATER_TREE_CHRONO = (
    _row("down", 141, 341, 308),
    _col("left", 176, 308, 141),
    _row("up", 141, 201, 176),
    _col("left", 136, 176, 201),
    _row("up", 201, 299, 136),
    _col("right", 136, 176, 299),
    _row("up", 299, 387, 176),
)

_ROCK_CHRONO = (
    _row("down", 555, 655, 402),
    _col("left", 218, 402, 555),
    _col("right", 218, 333, 341),
)
_ROCK_GLENN = (
    _col("left", 233, 416, 552.5),
    _col("right", 233, 323, 333.5),
)

_ENTER_CHRONO = (
    _col("left", 0, 106, 617),
    _col("right", 0, 86, 633),
    _row("up", 633, 655, 86),
)
_ENTER_GLENN = (
    _col("left", 0.5, 120.5, 615.5),
    _col("right", 0.5, 101, 629),
    _row("up", 629, 650, 101),
)

_EXIT_CHRONO = _row("up", 617, 633, 0)
_DOOR_CHRONO = _row("up", 231, 249, 136)
_EXIT_GLENN = _row("up", 615.5, 629, 0.5)
_DOOR_GLENN = _row("up", 233, 243, 147.5)

_GATE_CHRONO = (
    _row("up", 387, 617, 106),
    _col("right", 86, 402, 655),
    _row("down", 341, 551, 218),
    _col("left", 106, 176, 387),
)

_WATER_TREE_GLENN = (
    _row("down", 138.5, 333.5, 323),
    _col("left", 194, 323, 138.5),
    _row("up", 138.5, 198.5, 194),
    _col("left", 147.5, 194, 198.5),
    _row("up", 198.5, 296, 147.5),
    _col("right", 147.5, 189.5, 296),
    _row("up", 296, 384.5, 189.5),
)

_GATE_GLENN = (
    _row("up", 384.5, 615.5, 120.5),
    _col("right", 99.5, 416, 650),
    _row("down", 333.5, 552.5, 233),
    _col("left", 120.5, 189.5, 384.5),
)


def water_tree_chrono_map2(state: GameState) -> None:
    """Block Chrono at the pond and the trees around the hut."""
    block(state.chrono2, _WATER_TREE_CHRONO)


def rock_map2(state: GameState) -> None:
    """Block both heroes at the rocks in the middle of the map."""
    block(state.chrono2, _ROCK_CHRONO)
    # The lower edge for Glenn checks Chrono's x as its upper bound.
    if state.glenn2.x >= 552.5 and state.chrono2.x <= 650 and state.glenn2.y == 416:
        state.glenn2.stop_down = True
    block(state.glenn2, _ROCK_GLENN)


def enter_map2(state: GameState) -> None:
    """Block both heroes along the northern entrance path."""
    block(state.chrono2, _ENTER_CHRONO)
    block(state.glenn2, _ENTER_GLENN)


def limit_map2(state: GameState) -> None:
    """Leave the map northwards or enter the hut's door."""
    chrono = state.chrono2
    if _EXIT_CHRONO.touches(chrono):
        chrono.x, chrono.y = CHRONO_RETURN_POSITION
        state.scene = GROVE_EXIT_SCENE
    if _DOOR_CHRONO.touches(chrono):
        state.play_sound("dor")
        state.scene = GROVE_DOOR_SCENE
    glenn = state.glenn2
    if _EXIT_GLENN.touches(glenn):
        glenn.x, glenn.y = GLENN_RETURN_POSITION
        state.scene = GROVE_EXIT_SCENE
    if _DOOR_GLENN.touches(glenn):
        state.play_sound("dor")
        state.scene = GROVE_DOOR_SCENE


def collision_map2_chrono(state: GameState) -> None:
    """Reset Chrono's stop flags from the outer edges of the map."""
    gate(state.chrono2, _GATE_CHRONO)


def water_tree_glenn_map2(state: GameState) -> None:
    """Block Glenn at the pond and the trees around the hut."""
    block(state.glenn2, _WATER_TREE_GLENN)


def collision_map2_glenn(state: GameState) -> None:
    """Reset Glenn's stop flags from the outer edges of the map."""
    gate(state.glenn2, _GATE_GLENN)