"""Mutable game state shared by the scenes: actors, HUD figures, audio."""

from __future__ import annotations

from dataclasses import dataclass, field

SOUND_NAMES = ("dor", "att", "death", "hit", "health", "crak")
MUSIC_NAMES = ("music", "music2", "musicf", "musicw")


@dataclass
class Actor:
    """A walking character: its position and the directions it may not move."""

    x: float
    y: float
    stop_up: bool = False
    stop_down: bool = False
    stop_left: bool = False
    stop_right: bool = False

    def clear_stops(self) -> None:
        """Allow movement in every direction again."""
        self.stop_up = False
        self.stop_down = False
        self.stop_left = False
        self.stop_right = False


@dataclass
class HudStats:
    """Figures shown in the heads-up display for both heroes."""

    att1: int
    att2: int
    hp1: int
    hp2: int
    ms1: int
    ms2: int
    niv: int


def init_txt_hud() -> HudStats:
    """Return the HUD figures a new game starts with."""
    return HudStats(att1=10, att2=8, hp1=15, hp2=20, ms1=8, ms2=6, niv=1)


@dataclass
class GameState:
    """Everything the collision and scene logic reads and changes."""

    scene: int = 0
    chrono: Actor = field(default_factory=lambda: Actor(680, 190))
    glenn: Actor = field(default_factory=lambda: Actor(680, 190))
    chrono2: Actor = field(default_factory=lambda: Actor(495, 220))
    glenn2: Actor = field(default_factory=lambda: Actor(495, 231))
    hud: HudStats = field(default_factory=init_txt_hud)
    text_numb: int = 0
    lose: int = 0
    sounds_played: list[str] = field(default_factory=list)
    music_playing: set[str] = field(default_factory=set)

    def play_sound(self, name: str) -> None:
        """Trigger the named sound effect."""
        if name not in SOUND_NAMES:
            raise ValueError(f"unknown sound: {name!r}")
        self.sounds_played.append(name)

    def play_fight_music(self) -> None:
        """Stop the overworld theme and start the fight theme."""
        self.music_playing.discard("music2")
        self.music_playing.add("musicf")