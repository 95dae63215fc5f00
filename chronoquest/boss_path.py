"""Collisions of both heroes on the path leading to the boss."""

from __future__ import annotations

from .barriers import Barrier, block, gate
from .state import Actor, GameState

TOWN_SCENE = 3
FIGHT_SCENE = 8
CHRONO_TOWN_POSITION = (425, 4)
GLENN_TOWN_POSITION = (426, 19.5)
CHRONO_FIGHT_Y = 220
GLENN_FIGHT_Y = 216


def _row(side: str, x_min: float, x_max: float, y: float) -> Barrier:
    return Barrier(side, x_min, x_max, y, y)


def _col(side: str, y_min: float, y_max: float, x: float) -> Barrier:
    return Barrier(side, x, x, y_min, y_max)


_HALL_CHRONO = (
    _col("right", 52, 266, 879),
    _col("left", 52, 266, 79),
    _row("up", 79, 521, 222),
    _row("up", 567, 879, 222),
    _col("left", 186, 222, 521),
    _col("right", 186, 222, 567),
    _row("up", 79, 879, 52),
)
_EXIT_CHRONO = _row("down", 701, 749, 754)
_CORRIDOR_CHRONO = (
    _col("left", 266, 422, 237),
    _col("right", 266, 382, 283),
    _row("down", 79, 237, 266),
    _row("down", 283, 879, 266),
)
_GATE_CHRONO = (
    _row("up", 283, 749, 382),
    _col("right", 382, 754, 749),
    _row("down", 237, 701, 422),
    _col("left", 422, 754, 701),
)

_HALL_GLENN = (
    _col("right", 67.5, 280.5, 879),
    _col("left", 67.5, 280.5, 76.5),
    _row("up", 76.5, 525, 237),
    _row("up", 570, 879, 237),
    _col("left", 199.5, 237, 525),
    _col("right", 199.5, 237, 570),
    _row("up", 76.5, 879, 67.5),
)
_EXIT_GLENN = _row("down", 708, 748.5, 775.5)
_CORRIDOR_GLENN = (
    _col("left", 276, 433.5, 240),
    _col("right", 276, 402, 280.5),
    _row("down", 76.5, 240, 276),
    _row("down", 280.5, 879, 276),
)
_GATE_GLENN = (
    _row("up", 280.5, 748.5, 402),
    _col("right", 402, 775.5, 748.5),
    _row("down", 240, 708, 433.5),
    _col("left", 433.5, 775.5, 708),
)


def _corridor(
    state: GameState,
    actor: Actor,
    exit_: Barrier,
    town_position: tuple[float, float],
    corridor: tuple[Barrier, ...],
    fight_y: float,
) -> None:
    if exit_.touches(actor):
        state.scene = TOWN_SCENE
        actor.x, actor.y = town_position
    block(actor, corridor)
    if actor.y == fight_y:
        state.scene = FIGHT_SCENE
        state.play_fight_music()


def collision_map3_chrono3(state: GameState) -> None:
    """Block Chrono in the boss hall."""
    block(state.chrono2, _HALL_CHRONO)


def collision_map3_chrono2(state: GameState) -> None:
    """Return Chrono to town, block him in the corridor, or start the fight."""
    _corridor(
        state, state.chrono2, _EXIT_CHRONO, CHRONO_TOWN_POSITION,
        _CORRIDOR_CHRONO, CHRONO_FIGHT_Y,
    )


def collision_map3_chrono(state: GameState) -> None:
    """Reset Chrono's stop flags from the walls of the entrance path."""
    gate(state.chrono2, _GATE_CHRONO)


def collision_map3_glenn3(state: GameState) -> None:
    """Block Glenn in the boss hall."""
    block(state.glenn2, _HALL_GLENN)


def collision_map3_glenn2(state: GameState) -> None:
    """Return Glenn to town, block him in the corridor, or start the fight."""
    _corridor(
        state, state.glenn2, _EXIT_GLENN, GLENN_TOWN_POSITION,
        _CORRIDOR_GLENN, GLENN_FIGHT_Y,
    )


def collision_map3_glenn(state: GameState) -> None:
    """Reset Glenn's stop flags from the walls of the entrance path."""
    gate(state.glenn2, _GATE_GLENN)