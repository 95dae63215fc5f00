"""Window settings, the full asset set and the start of a new game."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any

from . import assets_fight, catalog
from .catalog import MusicSpec
from .state import GameState, init_txt_hud


@dataclass(frozen=True)
class WindowConfig:
    """Size, colour depth and title of the game window."""

    width: int = 1000
    height: int = 833
    bits_per_pixel: int = 64
    title: str = "My_RPG"


def create_my_windows() -> WindowConfig:
    """Return the settings of the main window."""
    return WindowConfig(width=1000, height=833, bits_per_pixel=64, title="My_RPG")


def create_sprite_bis() -> dict[str, Any]:
    """Arena texts, inventory, town map and the fight assets; later keys win."""
    assets: dict[str, Any] = {}
    for builder in (
        assets_fight.create_text_arena,
        assets_fight.create_text_arena2,
        assets_fight.create_text_arena3,
        assets_fight.create_inventory,
        assets_fight.create_inventory_text,
        catalog.create_first_map,
        assets_fight.create_fight,
    ):
        assets.update(builder())
    return assets


def create_sprite() -> dict[str, Any]:
    """Every asset of the game by name, built in loading order."""
    assets: dict[str, Any] = {}
    for builder in (
        assets_fight.create_sound,
        catalog.create_background,
        catalog.create_choose_player,
        catalog.create_house,
        catalog.create_character,
        catalog.create_text,
        catalog.create_tutorial,
        catalog.create_first_map,
        assets_fight.create_icone_player,
        assets_fight.create_icone_hud,
        assets_fight.create_text_hud,
        catalog.create_second_map,
        assets_fight.create_arena,
        catalog.create_third_map,
        assets_fight.create_fight_hud,
        assets_fight.create_text_fight,
        catalog.create_end_game,
        assets_fight.create_sound_fight,
        create_sprite_bis,
    ):
        assets.update(builder())
    return assets


def new_game() -> tuple[WindowConfig, dict[str, Any], GameState]:
    """Seed the random generator and build the window, assets and start state."""
    random.seed()
    window = create_my_windows()
    assets = create_sprite()
    state = GameState(hud=init_txt_hud())
    state.music_playing.update(
        name
        for name, spec in assets.items()
        if isinstance(spec, MusicSpec) and spec.autoplay
    )
    return window, assets, state