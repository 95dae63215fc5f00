"""Asset descriptions for the menus, the house, the maps and the ending."""

from __future__ import annotations

from dataclasses import dataclass

FONT = "File/Pixel.ttf"


@dataclass(frozen=True)
class SpriteSpec:
    """A sprite: its texture file, position and optional texture rectangle."""

    texture: str
    position: tuple[float, float] = (0, 0)
    rect: tuple[int, int, int, int] | None = None


@dataclass(frozen=True)
class TextSpec:
    """A text label: its font file and character size."""

    font: str
    size: int


@dataclass(frozen=True)
class SoundSpec:
    """A short sound effect and its volume."""

    file: str
    volume: float


@dataclass(frozen=True)
class MusicSpec:
    """A streamed music track."""

    file: str
    volume: float
    loop: bool = True
    autoplay: bool = False


def create_tutorial() -> dict[str, SpriteSpec]:
    """Sprites of the tutorial screen."""
    return {
        "tut": SpriteSpec("File/tuto.jpg"),
        "tuto": SpriteSpec("File/Tuto.png", (270, 370), (0, 0, 450, 80)),
        "retry": SpriteSpec("File/Retry.png", (400, 550), (0, 0, 210, 66)),
    }


def create_choose_player() -> dict[str, SpriteSpec]:
    """Sprites of the character selection screen."""
    return {
        "home2": SpriteSpec("File/home2.jpg"),
        "name": SpriteSpec("File/name.png", (80, 260), (0, 0, 205, 40)),
        "name2": SpriteSpec("File/name2.png", (715, 260), (0, 0, 150, 40)),
    }


def create_background() -> dict[str, SpriteSpec]:
    """Sprites of the title screen."""
    return {
        "home": SpriteSpec("File/home.jpg"),
        "start": SpriteSpec("File/Start.png", (100, 600), (0, 0, 330, 88)),
        "exit": SpriteSpec("File/Exit.png", (637, 600), (0, 0, 250, 96)),
    }


def create_text() -> dict[str, TextSpec]:
    """Dialogue text labels used in the house."""
    return {name: TextSpec(FONT, 20) for name in ("text", "text2", "text3", "text4")}


def create_house() -> dict[str, SpriteSpec]:
    """Sprites of the house interior."""
    return {
        "house": SpriteSpec("File/house.png"),
        "rec": SpriteSpec("File/rec.png", (100, 140)),
    }


def create_character() -> dict[str, SpriteSpec]:
    """The two heroes as drawn inside the house."""
    return {
        "chro": SpriteSpec("File/chrono.png", (680, 190), (0, 0, 60, 96)),
        "glenn": SpriteSpec("File/glenn.png", (680, 190), (0, 0, 60, 70)),
    }


def create_end_game() -> dict[str, SpriteSpec]:
    """Screens shown when the game ends."""
    return {
        "endc": SpriteSpec("File/finish.png"),
        "endg": SpriteSpec("File/finish2.png"),
        "credi": SpriteSpec("File/credit.png"),
        "lose": SpriteSpec("File/lose.png"),
    }


def create_first_map() -> dict[str, SpriteSpec]:
    """The town map and the heroes as drawn on the outdoor maps."""
    return {
        "map1": SpriteSpec("File/map.png"),
        "chro2": SpriteSpec("File/chrono2.png", (495, 220), (0, 0, 40, 65)),
        "glen2": SpriteSpec("File/glenn2.png", (495, 231), (0, 0, 40, 47)),
    }


def create_second_map() -> dict[str, SpriteSpec]:
    """The second outdoor map."""
    return {"map2": SpriteSpec("File/map2.png")}


def create_third_map() -> dict[str, SpriteSpec]:
    """The path to the boss and the boss standing on it."""
    return {
        "map3": SpriteSpec("File/map3.png"),
        "boss2": SpriteSpec("File/pb_fight.png", (450, 90)),
    }