"""Collisions with the furniture of the house, the mother and the front door."""

from __future__ import annotations

from .barriers import Barrier, block
from .state import Actor, GameState

ASK = "Parfait, \nes-tu pret pour \nle combat ?"
ADVICE = "Je sais que tu es\npret.\nVa au Sud\nde la Ville\nchercher des affaires."

HOUSE_EXIT_SCENE = 3


def _row(side: str, x_min: float, x_max: float, y: float) -> Barrier:
    return Barrier(side, x_min, x_max, y, y)


def _col(side: str, y_min: float, y_max: float, x: float) -> Barrier:
    return Barrier(side, x, x, y_min, y_max)


_TABLE_GLENN = (
    _col("left", 139, 349, 431),
    _row("up", 204.5, 393.5, 349),
    _col("right", 139, 349, 204.5),
)
_TABLE_CHRONO = (
    _col("left", 130, 332, 430),
    _row("up", 206, 430, 332),
    _col("right", 130, 332, 206),
)

_BED_GLENN = (
    _col("right", 139, 247, 684.5),
    _row("up", 714, 795, 247),
    _col("left", 139, 247, 795.5),
)
_BED_CHRONO = (
    _col("right", 130, 222, 690),
    _row("up", 718, 802, 222),
    _col("left", 130, 222, 802),
)

_DRESSER_GLENN = (
    _col("left", 139, 190, 680),
    _row("up", 629, 679, 187),
)
_DRESSER_CHRONO = (
    _col("left", 130, 162, 688),
    _row("up", 636, 688, 162),
)

_MOTHER_CHRONO = (
    _col("right", 322, 402, 222),
    _row("up", 222, 304, 402),
    _col("left", 322, 402, 304),
)
_MOTHER_GLENN = (
    _col("right", 349, 422, 216.5),
    _row("up", 216, 302, 422.5),
    _col("left", 349, 422, 302),
)

_PLANTS_CHRONO = (
    _row("down", 716, 804, 646),
    _col("right", 646, 700, 716),
    _row("down", 134, 222, 646),
    _col("left", 646, 700, 222),
)
_PLANTS_GLENN = (
    _row("down", 714.5, 803, 670),
    _col("right", 670, 725.5, 714.5),
    _row("down", 134, 218, 670),
    _col("left", 670, 725.5, 218),
)

_SPEAK_ZONE = Barrier("up", 300, 400, 375, 430)
_CARPET_GLENN = _row("down", 441.5, 488, 725.5)
_CARPET_CHRONO = _row("down", 441.5, 488, 700)


def collision_table(state: GameState) -> None:
    """Block both heroes at the dining table."""
    block(state.glenn, _TABLE_GLENN)
    block(state.chrono, _TABLE_CHRONO)


def collision_bed(state: GameState) -> None:
    """Block both heroes at the bed."""
    block(state.glenn, _BED_GLENN)
    block(state.chrono, _BED_CHRONO)


def collision_dresser(state: GameState) -> None:
    """Block both heroes at the dresser."""
    block(state.glenn, _DRESSER_GLENN)
    block(state.chrono, _DRESSER_CHRONO)


def _speak(state: GameState, actor: Actor, space_pressed: bool) -> tuple[str, ...]:
    shown: list[str] = []
    if _SPEAK_ZONE.touches(actor) and state.text_numb != 2:
        shown.append(ASK)
        state.text_numb = 1
    if space_pressed:
        state.text_numb = 2
    if state.text_numb == 2:
        shown.append(ADVICE)
    return tuple(shown)


def speak_collision_glenn(state: GameState, space_pressed: bool) -> tuple[str, ...]:
    """Run the mother's dialogue for Glenn; return the lines shown this frame."""
    return _speak(state, state.glenn, space_pressed)


def speak_collision_chrono(state: GameState, space_pressed: bool) -> tuple[str, ...]:
    """Run the mother's dialogue for Chrono; return the lines shown this frame."""
    return _speak(state, state.chrono, space_pressed)


def mother_collision(state: GameState) -> None:
    """Block both heroes around the mother."""
    block(state.chrono, _MOTHER_CHRONO)
    block(state.glenn, _MOTHER_GLENN)


def plant_collision_chrono(state: GameState) -> None:
    """Block Chrono at the two potted plants."""
    block(state.chrono, _PLANTS_CHRONO)


def carpet_collision(state: GameState) -> None:
    """Leave the house when a hero steps on the door carpet."""
    for actor, carpet in ((state.glenn, _CARPET_GLENN), (state.chrono, _CARPET_CHRONO)):
        if carpet.touches(actor):
            state.play_sound("dor")
            state.scene = HOUSE_EXIT_SCENE


def plant_collision_glenn(state: GameState) -> None:
    """Block Glenn at the two potted plants."""
    block(state.glenn, _PLANTS_GLENN)