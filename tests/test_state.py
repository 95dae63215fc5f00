import pytest

from chronoquest.state import Actor, GameState, init_txt_hud


def test_init_txt_hud_values():
    hud = init_txt_hud()
    assert (hud.att1, hud.att2) == (10, 8)
    assert (hud.hp1, hud.hp2) == (15, 20)
    assert (hud.ms1, hud.ms2, hud.niv) == (8, 6, 1)


def test_clear_stops_resets_every_flag():
    actor = Actor(1, 2, True, True, True, True)
    actor.clear_stops()
    assert not any(
        (actor.stop_up, actor.stop_down, actor.stop_left, actor.stop_right)
    )
    assert (actor.x, actor.y) == (1, 2)


def test_default_positions():
    state = GameState()
    assert (state.chrono.x, state.chrono.y) == (680, 190)
    assert (state.glenn.x, state.glenn.y) == (680, 190)
    assert (state.chrono2.x, state.chrono2.y) == (495, 220)
    assert (state.glenn2.x, state.glenn2.y) == (495, 231)


def test_states_do_not_share_actors():
    first, second = GameState(), GameState()
    first.chrono.x = 0
    assert second.chrono.x == 680


def test_play_sound_records_in_order():
    state = GameState()
    state.play_sound("dor")
    state.play_sound("hit")
    assert state.sounds_played == ["dor", "hit"]


def test_play_sound_unknown_raises():
    with pytest.raises(ValueError):
        GameState().play_sound("trumpet")


def test_play_fight_music_switches_theme():
    state = GameState(music_playing={"music2"})
    state.play_fight_music()
    assert state.music_playing == {"musicf"}