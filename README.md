# jetpac

An arcade game in the spirit of the 1983 classic, built on pygame. You are a
jetpack-wearing astronaut on a planet surface with three floating platforms.
Collect the two loose pieces of your rocket and drop them onto its base, carry
six fuel cells to it, then walk in to lift off to the next level. Aliens drift
across the screen; shoot them with your laser for points, and grab the
treasures that fall from the sky for 250 points each.

## Installing

```
pip install .
```

## Playing

```
jetpac
```

The same entry point is `jetpac.game.main`, so `python -m jetpac.game` works
too. Options:

| Option | Meaning |
| --- | --- |
| `--sheet PATH` | sprite sheet image (default `recursos/sprites/jetpac_spritesheet.png`) |
| `--font PATH` | font file (default `recursos/font/zx-spectrum-7/zx_spectrum-7.ttf`; pygame's default font is used if it cannot be loaded) |
| `--frames N` | stop after N frames |

The sprite sheet is required; the paths are relative to the working directory.

On the selection screen:

| Key | Action |
| --- | --- |
| `1` / `2` | one or two players |
| `3` / `4` | keyboard or joystick |
| `5` | start the game |

In the game:

| Key | Action |
| --- | --- |
| Left / Right | walk or fly sideways (the screen wraps around) |
| Up | fire the jetpack |
| Space (hold) | shoot |
| `S` | save the game to `SaveGame.dat` |
| `L` | load `SaveGame.dat`, if it exists |
| Escape | quit |

Each player starts with four lives. Touching an alien costs a life and kills
every alien on screen; in a two-player game the turn passes to the other
player while they still have lives, and when nobody has any left the game
returns to the selection screen. The kind of alien changes with the level.
The rocket's look changes every four levels, and on levels 1, 5, 9 and 13 of
its cycle it starts in pieces. After level 16 the levels start over and more
aliens may be on screen at once.

## Using it as a library

The game is driven one frame at a time:

- `jetpac.state.GameState` holds everything that changes during play;
  `jetpac.state.Keys` is the snapshot of keys held (`is_pressed`) and keys that
  went down (`is_down`) in a frame.
- `jetpac.sprites.SpriteSet.load(path)` cuts every image out of the sprite
  sheet.
- `jetpac.interface.run_frame(state, keys, surface, font, sprites, rng, now)`
  runs and draws one frame of whichever screen the game is on.
- `jetpac.savegame.save_game` / `load_game` write and read a snapshot as JSON.

## Limitations

- Joystick control is not supported: choosing it shows a notice, and Space
  goes back to the menu with the keyboard selected.
- There is no sound.
- High scores are not kept between runs; the "HI" figure is only the higher
  of the two current scores.
- Loading a saved game restores positions, lives, level, mode and the rocket,
  but not whose turn it is or the aliens on screen.

## Running the tests

```
pip install .[test]
pytest
```