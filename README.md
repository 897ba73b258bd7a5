# mahasiswa-ambis

A small side-scrolling platformer built on pygame. You steer an ambitious
student across a campus map. Books add to your score and coins go into your
purse. If you have at least two coins, a fried snack trades them for an extra
life. Cats and a rival student cost you lives. You can stomp the rival
student by landing on them.

Dropping into a gap in the ground ends the game. Losing your last life to a
cat ends it too. Running past the end of level one completes the stage and
opens level two, where two bosses patrol back and forth. Finishing level two
shows a "GAME COMPLETED!" screen and then returns to the main menu.

## Installing

```
pip install .
```

This installs `pygame`, which handles the window, drawing, keyboard input
and sound.

## Playing

```
mahasiswa-ambis [--assets DIR] [--save FILE] [--mute]
```

- `--assets DIR`: the directory that holds the game's images, GIF
  animations, `font.ttf` and sound files. The default is the current
  directory.
- `--save FILE`: the file that keeps the highscore. The default is
  `savedata.txt`.
- `--mute`: play without opening the audio mixer.

Controls in the level:

- Right / Left: run forward or back
- Up: jump (only while standing on the ground)
- Space: a higher jump (only while standing on the ground)
- Escape: open the pause menu (New Game, Resume Game, Exit)

Controls in the menus:

- Up / Down: move the selection
- Enter: choose the selected entry
- Escape: go from the Credits or Highscore screen back to the main menu

Each time a stage is completed, the save file is updated. It gets the total
score (score + coins + 2 × lives) if that beats the stored value. The
Highscore entry of the main menu shows the stored value.

## What the package does not include

The package contains no game assets: no images, animations, font or sounds.
You have to supply them in the `--assets` directory. When an asset is
missing, play continues without it:

- images and animations that cannot be found are not drawn;
- the text falls back to pygame's default font;
- sounds that cannot be loaded are silent.

The tile-map functions in `mahasiswa_ambis.maps` are not used by the game
itself. The levels are fixed in code.

## Using the pieces

The modules can also be used on their own:

- `mahasiswa_ambis.gif.load_raw(stream)` reads a GIF87a/GIF89a file into a
  `GifAnimation` of indexed `Frame`s. It raises `GifError` on malformed
  data.
- `mahasiswa_ambis.lzw.lzw_decode(stream, bitmap)` decodes GIF image data
  into a `mahasiswa_ambis.gifbitmap.IndexedBitmap`. It raises
  `DecodeError` on bad data.
- `mahasiswa_ambis.animation.load_animation(path)` and
  `load_animation_from(stream)` return a `RenderedAnimation` of RGBA frames.
  Its methods are `frame(index)`, `frame_duration(index)` and
  `frame_at(seconds)`.
- `mahasiswa_ambis.saveload.HighscoreStore(path)` is the persisted high
  score. Use `load()` to read it and `save(score)` to store a new one.
- `mahasiswa_ambis.maps` provides:
  - `parse_map(text)` and `load_map(path)`, which read space-separated tile
    grids;
  - `tile_regions(tiles)` and `draw_map(surface, tiles, tile_image)`, which
    draw them from a tile sheet.
- `mahasiswa_ambis.screen` provides:
  - `camera_update(x, y, width, height, level)`, the camera offset for a
    player position;
  - `object_positions(level)`, where every object of a level is placed.
- `mahasiswa_ambis.app.Game` runs the game loop. `tick(keys)` and
  `animate()` advance it without opening a window.

## Running the tests

```
pip install .[test]
pytest
```