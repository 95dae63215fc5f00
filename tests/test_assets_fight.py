from chronoquest import assets_fight
from chronoquest.catalog import FONT, MusicSpec, SoundSpec, SpriteSpec, TextSpec
from chronoquest.state import MUSIC_NAMES, SOUND_NAMES


def test_text_labels_use_pixel_font():
    groups = [
        assets_fight.create_text_arena(),
        assets_fight.create_text_arena2(),
        assets_fight.create_text_arena3(),
        assets_fight.create_text_fight(),
        assets_fight.create_text_hud(),
        assets_fight.create_inventory_text(),
    ]
    for texts in groups:
        assert len(texts) > 0
        assert all(isinstance(t, TextSpec) and t.font == FONT for t in texts.values())
        assert all(t.size > 0 for t in texts.values())


def test_sprite_files_live_in_file_directory():
    groups = [
        assets_fight.create_arena(),
        assets_fight.create_fight_hud(),
        assets_fight.create_icone_player(),
        assets_fight.create_icone_hud(),
        assets_fight.create_inventory(),
    ]
    for sprites in groups:
        assert len(sprites) > 0
        assert all(s.texture.startswith("File/") for s in sprites.values())


def test_arena_text_labels_do_not_overlap():
    names = [
        set(assets_fight.create_text_arena()),
        set(assets_fight.create_text_arena2()),
        set(assets_fight.create_text_arena3()),
    ]
    assert sum(len(n) for n in names) == len(set().union(*names))


def test_arena_digits_read_left_to_right():
    arena = assets_fight.create_arena()
    assert arena["arena"].texture == "File/fight.png"
    xs = [arena[d].position[0] for d in ("1", "2", "3")]
    assert xs == sorted(xs)
    assert len({arena[d].position[1] for d in ("1", "2", "3")}) == 1


def test_fight_boss_sprite():
    fight = assets_fight.create_fight()
    boss = fight["boss"]
    assert boss.texture == "File/boss.png"
    assert boss.rect[0] == 2280
    assert isinstance(fight["map_boss"], SpriteSpec)


def test_fight_music_loops_and_waits():
    music = assets_fight.create_fight()["musicf"]
    assert isinstance(music, MusicSpec)
    assert music.file == "File/music_fight2.ogg"
    assert music.loop and not music.autoplay


def test_sound_names_match_state():
    sounds = {**assets_fight.create_sound_fight()}
    for group in (assets_fight.create_fight(), assets_fight.create_sound()):
        sounds.update({k: v for k, v in group.items() if isinstance(v, SoundSpec)})
    assert set(sounds) == set(SOUND_NAMES)


def test_music_names_match_state():
    music = {
        k: v
        for group in (assets_fight.create_fight(), assets_fight.create_sound())
        for k, v in group.items()
        if isinstance(v, MusicSpec)
    }
    assert set(music) == set(MUSIC_NAMES)
    assert [k for k, v in music.items() if v.autoplay] == ["music"]


def test_death_sound_is_wav():
    assert assets_fight.create_sound_fight()["death"].file == "File/dead.wav"


def test_player_icons_share_a_spot():
    icons = assets_fight.create_icone_player()
    assert icons["icop1"].position == icons["icop2"].position
    assert icons["icop1"].texture != icons["icop2"].texture


def test_inventory_markers_share_texture():
    inv = assets_fight.create_inventory()
    markers = [inv[k] for k in ("right", "right2", "right3")]
    assert {m.texture for m in markers} == {"File/touch.png"}
    assert len({m.position for m in markers}) == 3


def test_factories_return_fresh_dicts():
    first = assets_fight.create_inventory()
    first.clear()
    assert len(assets_fight.create_inventory()) > 0