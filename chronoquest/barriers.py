"""Collision barriers and the house wall checks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from .state import Actor, GameState

SIDES = ("up", "down", "left", "right")


@dataclass(frozen=True)
class Barrier:
    """A closed box of positions; an actor inside it may not move towards side."""

    side: str
    x_min: float = -math.inf
    x_max: float = math.inf
    y_min: float = -math.inf
    y_max: float = math.inf

    def __post_init__(self) -> None:
        if self.side not in SIDES:
            raise ValueError(f"unknown side: {self.side!r}")
        if self.x_min > self.x_max or self.y_min > self.y_max:
            raise ValueError("barrier bounds are reversed")

    def touches(self, actor: Actor) -> bool:
        """Whether the actor stands inside the barrier's box."""
        return (
            self.x_min <= actor.x <= self.x_max
            and self.y_min <= actor.y <= self.y_max
        )

    def apply(self, actor: Actor) -> bool:
        """Set the actor's stop flag if it touches; return whether it did."""
        hit = self.touches(actor)
        if hit:
            setattr(actor, f"stop_{self.side}", True)
        return hit


def block(actor: Actor, barriers: Iterable[Barrier]) -> None:
    """Raise the stop flag of every barrier the actor touches."""
    for barrier in barriers:
        barrier.apply(actor)


def gate(actor: Actor, barriers: Iterable[Barrier]) -> None:
    """Set each barrier's stop flag to whether the actor touches it."""
    for barrier in barriers:
        setattr(actor, f"stop_{barrier.side}", barrier.touches(actor))


def _row(side: str, x_min: float, x_max: float, y: float) -> Barrier:
    return Barrier(side, x_min, x_max, y, y)


def _col(side: str, y_min: float, y_max: float, x: float) -> Barrier:
    return Barrier(side, x, x, y_min, y_max)


def _below(value: float) -> float:
    return math.nextafter(value, -math.inf)


_WALL_GLENN = (
    _col("left", 187, 308.5, 629),
    _row("up", 498.5, 629, 308.5),
    _col("right", 139, 308.5, 498.5),
)

_WALL_CHRONO = (
    _col("left", 162, 290, 636),
    _row("up", 500, 636, 290),
    _col("right", 130, 290, 500),
)

_INNER_WALL_GLENN = (
    Barrier("down", x_min=551, y_min=431, y_max=530),
    _col("right", 431, 563, 548),
    Barrier("up", x_min=551, y_min=450, y_max=563),
    Barrier("down", x_max=386, y_min=431, y_max=530),
    _col("left", 431, 563, 386),
    Barrier("up", x_max=_below(386), y_min=450, y_max=563),
)

_INNER_WALL_CHRONO = (
    Barrier("down", x_min=551, y_min=412, y_max=530),
    _col("right", 414, 542, 548),
    Barrier("up", x_min=551, y_min=450, y_max=542),
    Barrier("down", x_max=386, y_min=412, y_max=530),
    _col("left", 414, 542, 390),
    Barrier("up", x_max=386, y_min=450, y_max=542),
)


def wall_collision(state: GameState) -> None:
    """Block both heroes at the partition wall next to the dresser."""
    block(state.glenn, _WALL_GLENN)
    block(state.chrono, _WALL_CHRONO)


def wall_collision_glenn(state: GameState) -> None:
    """Block Glenn at the wall splitting the house in two."""
    block(state.glenn, _INNER_WALL_GLENN)


def wall_collision_chrono(state: GameState) -> None:
    """Block Chrono at the wall splitting the house in two."""
    block(state.chrono, _INNER_WALL_CHRONO)


def wall_x_collision(state: GameState) -> None:
    """Keep both heroes between the side walls of the house."""
    left = state.chrono.x <= 134 or state.glenn.x <= 134
    right = state.chrono.x >= 803 or state.glenn.x >= 803
    for actor in (state.chrono, state.glenn):
        actor.stop_left = left
        actor.stop_right = right


def wall_y_collision(state: GameState) -> None:
    """Keep both heroes between the top and bottom walls of the house."""
    up = state.chrono.y <= 130 or state.glenn.y <= 140
    down = state.chrono.y >= 700 or state.glenn.y >= 725
    for actor in (state.chrono, state.glenn):
        actor.stop_up = up
        actor.stop_down = down