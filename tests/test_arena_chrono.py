import pytest

from chronoquest import arena_chrono as arena
from chronoquest.state import GameState


def _flags(actor):
    return {
        "up": actor.stop_up,
        "down": actor.stop_down,
        "left": actor.stop_left,
        "right": actor.stop_right,
    }


def _at(x, y):
    state = GameState()
    state.chrono.x, state.chrono.y = x, y
    return state


@pytest.mark.parametrize(
    "func, x, y, side",
    [
        (arena.collision_woman_chrono, 432, 60, "right"),
        (arena.collision_woman_chrono, 470, 80, "up"),
        (arena.collision_end_chrono, 456, 150, "left"),
        (arena.collision_end_chrono, 470, 46, "up"),
        (arena.collision_enter_chrono_right, 700, 620, "down"),
        (arena.collision_enter_chrono_right, 840, 600, "right"),
        (arena.collision_enter_chrono_left, 200, 620, "down"),
        (arena.collision_enter_chrono_left, 452, 560, "left"),
        (arena.collision_center_chrono, 488, 580, "right"),
        (arena.collision_center_chrono, 400, 552, "down"),
        (arena.collision_center_chrono2, 240, 300, "left"),
        (arena.collision_center_chrono3, 400, 176, "up"),
        (arena.collision_center_chrono4, 702, 300, "right"),
        (arena.collision_center_chrono5, 500, 552, "down"),
    ],
)
def test_single_side_blocked(func, x, y, side):
    state = _at(x, y)
    func(state)
    flags = _flags(state.chrono)
    assert [s for s, v in flags.items() if v] == [side]


def test_gap_in_north_wall_is_open():
    state = _at(470, 176)
    arena.collision_center_chrono3(state)
    assert state.chrono.stop_up is False


def test_woman_door_leaves_arena():
    state = _at(500, 742)
    arena.collision_woman_chrono(state)
    assert state.scene == arena.ARENA_EXIT_SCENE
    assert (state.chrono2.x, state.chrono2.y) == arena.ARENA_EXIT_POSITION
    assert state.sounds_played == ["dor"]


def test_woman_elsewhere_keeps_scene():
    state = _at(500, 700)
    arena.collision_woman_chrono(state)
    assert state.scene == 0
    assert state.sounds_played == []


def test_init_clears_flags_away_from_walls():
    state = _at(10, 10)
    state.chrono.stop_up = state.chrono.stop_down = True
    state.chrono.stop_left = state.chrono.stop_right = True
    arena.collision_init_chrono(state)
    assert _flags(state.chrono) == {"up": False, "down": False, "left": False, "right": False}


def test_init_corner_sets_down_and_left():
    state = _at(394, 742)
    arena.collision_init_chrono(state)
    assert _flags(state.chrono) == {"up": False, "down": True, "left": True, "right": False}


def test_init_then_block_accumulates():
    state = _at(542, 658)
    arena.collision_init_chrono(state)
    arena.collision_enter_chrono_right(state)
    assert state.chrono.stop_right is True
    assert state.chrono.stop_down is True


def test_block_keeps_existing_flags():
    state = _at(10, 10)
    state.chrono.stop_left = True
    arena.collision_center_chrono4(state)
    assert state.chrono.stop_left is True
    assert state.chrono.stop_right is False