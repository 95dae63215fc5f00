import pytest

from chronoquest import town_glenn
from chronoquest.state import Actor, GameState


def _state_at(x, y):
    state = GameState()
    state.glenn2 = Actor(x, y)
    return state


def _stops(actor):
    return (actor.stop_up, actor.stop_down, actor.stop_left, actor.stop_right)


def test_north_exit_moves_to_boss_path():
    state = _state_at(400, 1.5)
    town_glenn.limit_map_gleen(state)
    assert state.scene == town_glenn.BOSS_PATH_SCENE
    assert (state.glenn2.x, state.glenn2.y) == town_glenn.BOSS_PATH_POSITION
    assert state.glenn2.stop_up is True


def test_south_exit_moves_to_arena():
    state = _state_at(480, 787.5)
    town_glenn.limit_map_gleen(state)
    assert state.scene == town_glenn.ARENA_SCENE
    assert (state.glenn2.x, state.glenn2.y) == town_glenn.ARENA_POSITION


def test_west_edge_blocks_left():
    state = _state_at(-6, 300)
    town_glenn.limit_map_gleen(state)
    assert state.glenn2.stop_left is True
    assert state.scene == 0


def test_limit_map_away_from_exits_changes_nothing():
    state = _state_at(700, 500)
    town_glenn.limit_map_gleen(state)
    assert state.scene == 0
    assert (state.glenn2.x, state.glenn2.y) == (700, 500)
    assert _stops(state.glenn2) == (False, False, False, False)


@pytest.mark.parametrize(
    "func, x, y, flag",
    [
        (town_glenn.pokestop_collision_glenn2, 462, 450, "stop_right"),
        (town_glenn.pokestop_collision_glenn2, 500, 525, "stop_up"),
        (town_glenn.pokestop_collision_glenn2, 500, 424.5, "stop_down"),
        (town_glenn.house_collision_glenn2, 600, 270, "stop_down"),
        (town_glenn.house_collision_glenn2, 576, 300, "stop_left"),
        (town_glenn.pokestop_collision_glenn, 805.5, 100, "stop_left"),
        (town_glenn.pokestop_collision_glenn, 640, 154.5, "stop_down"),
        (town_glenn.bush_fencing_collision2_glenn, 408, 200, "stop_left"),
        (town_glenn.bush_fencing_collision2_glenn, 156, 200, "stop_right"),
        (town_glenn.water_collision_glenn, 342, 550, "stop_left"),
        (town_glenn.water_collision_glenn, 150, 415.5, "stop_down"),
        (town_glenn.rock_collision_glenn, 0, 370.5, "stop_down"),
        (town_glenn.rock_collision_glenn, 154.5, 100, "stop_left"),
        (town_glenn.bush_top_glenn_collision, 466.5, 30, "stop_right"),
        (town_glenn.bush_top_glenn_collision, 700, 48, "stop_up"),
        (town_glenn.bush_glenn_collision, 838.5, 300, "stop_right"),
        (town_glenn.bush_glenn_collision, 448.5, 700, "stop_left"),
    ],
)
def test_barrier_raises_flag(func, x, y, flag):
    state = _state_at(x, y)
    func(state)
    assert getattr(state.glenn2, flag) is True


@pytest.mark.parametrize(
    "func",
    [
        town_glenn.pokestop_collision_glenn2,
        town_glenn.house_collision_glenn2,
        town_glenn.pokestop_collision_glenn,
        town_glenn.bush_fencing_collision2_glenn,
        town_glenn.water_collision_glenn,
        town_glenn.rock_collision_glenn,
        town_glenn.bush_top_glenn_collision,
        town_glenn.bush_glenn_collision,
    ],
)
def test_block_never_clears_flags(func):
    state = _state_at(10000, 10000)
    state.glenn2.stop_up = state.glenn2.stop_down = True
    state.glenn2.stop_left = state.glenn2.stop_right = True
    func(state)
    assert _stops(state.glenn2) == (True, True, True, True)


def test_house_gate_sets_and_clears():
    state = _state_at(500, 231)
    state.glenn2.stop_down = True
    town_glenn.house_collision_glenn(state)
    assert _stops(state.glenn2) == (True, False, False, False)
    state.glenn2.x, state.glenn2.y = 10000, 10000
    town_glenn.house_collision_glenn(state)
    assert _stops(state.glenn2) == (False, False, False, False)


def test_house_gate_corner_sets_two_flags():
    state = _state_at(441, 133.5)
    town_glenn.house_collision_glenn(state)
    assert state.glenn2.stop_right is True
    assert state.glenn2.stop_down is True
    assert state.glenn2.stop_left is False


def test_other_actors_untouched():
    state = _state_at(462, 450)
    town_glenn.pokestop_collision_glenn2(state)
    assert _stops(state.chrono2) == (False, False, False, False)