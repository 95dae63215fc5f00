"""Asset descriptions for the arena, the fights, the HUD and the inventory."""

from __future__ import annotations

from .catalog import FONT, MusicSpec, SoundSpec, SpriteSpec, TextSpec


def _texts(sizes: dict[str, int]) -> dict[str, TextSpec]:
    return {name: TextSpec(FONT, size) for name, size in sizes.items()}


def create_text_arena() -> dict[str, TextSpec]:
    """First set of arena text labels."""
    return _texts({"text4": 30, "text5": 30, "text6": 30, "text7": 20})


def create_text_arena2() -> dict[str, TextSpec]:
    """Second set of arena text labels."""
    return _texts({"text8": 30, "text9": 30, "text10": 30, "text11": 20})


def create_text_arena3() -> dict[str, TextSpec]:
    """Third set of arena text labels."""
    return _texts({"text12": 20, "text13": 20})


def create_arena() -> dict[str, SpriteSpec]:
    """The arena background and its three countdown digits."""
    return {
        "arena": SpriteSpec("File/fight.png", (100, 0)),
        "1": SpriteSpec("File/1.png", (650, 90)),
        "2": SpriteSpec("File/2.png", (718, 90)),
        "3": SpriteSpec("File/3.png", (800, 90)),
    }


def create_fight_hud() -> dict[str, SpriteSpec]:
    """The attack and heal buttons of the fight screen."""
    return {
        "atack": SpriteSpec("File/atack.png", (60, 135), (0, 0, 176, 40)),
        "care": SpriteSpec("File/care.png", (320, 135), (0, 0, 92, 32)),
    }


def create_text_fight() -> dict[str, TextSpec]:
    """Large labels shown during a fight."""
    return _texts({"text18": 50, "text19": 50})


def create_fight() -> dict[str, SpriteSpec | MusicSpec | SoundSpec]:
    """The boss map, the boss, the fight theme and the attack sound."""
    return {
        "map_boss": SpriteSpec("File/m_boss.png", (-250, -150)),
        "boss": SpriteSpec("File/boss.png", (750, 580), (2280, 0, 220, 272)),
        "musicf": MusicSpec("File/music_fight2.ogg", 1, loop=True),
        "att": SoundSpec("File/att.ogg", 8),
    }


def create_sound_fight() -> dict[str, SoundSpec]:
    """Sound effects heard in a fight."""
    return {
        "death": SoundSpec("File/dead.wav", 15),
        "health": SoundSpec("File/health.ogg", 15),
        "hit": SoundSpec("File/hit.ogg", 15),
        "crak": SoundSpec("File/crack.ogg", 15),
    }


def create_icone_player() -> dict[str, SpriteSpec]:
    """Portraits of the two heroes in the HUD."""
    return {
        "icop1": SpriteSpec("File/pic-ninja.png", (25, 750)),
        "icop2": SpriteSpec("File/pic-tort.png", (25, 750)),
    }


def create_icone_hud() -> dict[str, SpriteSpec]:
    """Attack, health and speed icons of the HUD."""
    return {
        "icoa": SpriteSpec("File/attack.jpg", (80, 768)),
        "icohp": SpriteSpec("File/hp.jpg", (80, 750)),
        "icos": SpriteSpec("File/speed.jpg", (80, 783)),
    }


def create_text_hud() -> dict[str, TextSpec]:
    """Text labels of the HUD figures."""
    return _texts({"hp": 15, "a": 15, "ms": 15, "lvl1": 15, "lvl2": 15})


def create_sound() -> dict[str, MusicSpec | SoundSpec]:
    """The music tracks and the door sound; the title theme starts at once."""
    return {
        "music": MusicSpec("File/music.ogg", 0.3, loop=True, autoplay=True),
        "music2": MusicSpec("File/music2.ogg", 0.5, loop=True),
        "dor": SoundSpec("File/dor.ogg", 15),
        "musicw": MusicSpec("File/win_final.ogg", 0.6, loop=True),
    }


def create_inventory() -> dict[str, SpriteSpec]:
    """Inventory screens of both heroes and their selection markers."""
    return {
        "invc": SpriteSpec("File/Invc.png"),
        "invg": SpriteSpec("File/Invg.png"),
        "right": SpriteSpec("File/touch.png", (712, 180)),
        "right2": SpriteSpec("File/touch.png", (880, 255)),
        "right3": SpriteSpec("File/touch.png", (832, 338)),
    }


def create_inventory_text() -> dict[str, TextSpec]:
    """Text labels of the inventory screen."""
    return _texts({"text14": 60, "text15": 60, "text16": 60, "text17": 40})