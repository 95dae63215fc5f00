# chronoquest

The game logic of a small top-down role-playing game with two playable
heroes, Chrono and Glenn. The package holds the world state, a catalogue
of every sprite, text, sound and music track the game uses, and the
collision rules for each scene: the house, the town, the grove, the arena
and the path to the boss.

## Install

    pip install .

For the tests:

    pip install .[test]
    pytest

## Starting a game

`chronoquest.game.new_game()` seeds the random generator and returns a
tuple `(window, assets, state)`:

- `window` is a `WindowConfig` (1000 × 833, 64 bits per pixel, title
  `"My_RPG"`), the same value `create_my_windows()` returns;
- `assets` is the dictionary built by `create_sprite()`, mapping each
  asset name to its description;
- `state` is a `GameState` with the heroes in their starting places, the
  HUD figures from `chronoquest.state.init_txt_hud()`, and the title
  music marked as playing.

```python
from chronoquest.game import new_game
from chronoquest.barriers import wall_x_collision, wall_y_collision

window, assets, state = new_game()
wall_x_collision(state)
wall_y_collision(state)
print(state.chrono.stop_left, state.scene)
```

## The state

`chronoquest.state.GameState` holds:

- `scene`, the current scene number;
- four `Actor` values: `chrono` and `glenn` as they walk inside the
  house and the arena, `chrono2` and `glenn2` on the outdoor maps. Each
  has `x`, `y` and the flags `stop_up`, `stop_down`, `stop_left`,
  `stop_right`; `Actor.clear_stops()` lowers them all;
- `hud`, a `HudStats` with attack, health and speed for both heroes and
  the level;
- `text_numb`, the step reached in the mother's dialogue, and `lose`;
- `sounds_played`, the sound effects triggered so far, in order, and
  `music_playing`, the set of music tracks now playing.

`GameState.play_sound(name)` records a sound effect and raises
`ValueError` for an unknown name. `GameState.play_fight_music()` stops
the overworld theme and starts the fight theme.

## Collisions

Each collision function takes the state and changes it in place. It sets
an actor's stop flags where a wall is in the way, and where a door or a
map edge is reached it moves the actor, changes `scene`, and may play the
door sound or start the fight music.

- `chronoquest.barriers`: the `Barrier` type (a box of positions and the
  side it blocks, with `touches()` and `apply()`), the helpers `block()`,
  which only raises flags, and `gate()`, which sets each flag to whether
  the actor touches its barrier; and the house walls:
  `wall_collision`, `wall_collision_glenn`, `wall_collision_chrono`,
  `wall_x_collision`, `wall_y_collision`.
- `chronoquest.house`: table, bed, dresser, mother, plants, and the door
  carpet that leads out (`carpet_collision`). `speak_collision_glenn` and
  `speak_collision_chrono` take the state and whether the space key is
  pressed, and return the dialogue lines to show this frame.
- `chronoquest.town_chrono` and `chronoquest.town_glenn`: the town. The
  north exit for Chrono (`limit_map_chrono`) opens only when `lose` is 3.
- `chronoquest.grove`: the second map.
- `chronoquest.arena_chrono` and `chronoquest.arena_glenn`: the arena.
- `chronoquest.boss_path`: the road to the boss; reaching the fight line
  switches to the fight scene and its music.

## Assets

`chronoquest.catalog` and `chronoquest.assets_fight` describe the assets
as frozen `SpriteSpec`, `TextSpec`, `SoundSpec` and `MusicSpec` values:
file, position, texture rectangle, character size, volume, looping and
whether a track starts at once. Each `create_*` function returns a
dictionary of them by name; `chronoquest.game.create_sprite()` merges all
of them in loading order, later names replacing earlier ones.

## What the package does not do

It does no drawing, loads no files and plays no audio: the asset
catalogue only names files and settings, and sounds and music are only
recorded in the state. There is no window, no event loop, no keyboard
handling and no command to run. Nothing here moves the heroes frame by
frame, chooses which collision functions apply to which scene, or runs
the fights and the inventory; a front end has to supply all of that.