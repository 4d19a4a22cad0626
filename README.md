# cubscene

Tools for loading the pieces of a small raycaster's world: `.cub` scene
files, XPM textures, fixed-size 32-bit pixel images and the classic X11
colour names.

## Installation

```
pip install .
```

## Command line

```
cubscene path/to/map.cub
```

The command reads the scene file, checks it, and prints the three floor
colour components followed by the three ceiling colour components, one
number per line. It exits with status 0 on success. With a wrong number of
arguments it prints a usage line to standard error and exits with status 1;
if the scene file cannot be read or is invalid it prints `Error: ...` to
standard error and exits with status 1.

## Scene files

`cubscene.scene.parse_scene(path)` returns a frozen `SceneConfig` with
`path`, `lines`, `textures`, `floor` and `ceiling`, or raises `SceneError`.

- The file must have at least seven lines, blank ones included
  (`read_scene_lines`); blank lines are then dropped and line endings
  removed. `count_lines` returns the raw line count.
- A texture line is one whose fifth character is `/` and which contains
  `.xpm` (`load_textures`, `has_extension`). For `NO ./north.xpm` the stored
  path is `north.xpm`, everything from the sixth character on. Exactly four
  texture lines are required.
- The floor colour is the first line starting with `F`; the line right after
  it is read as the ceiling colour (`parse_colors`). Each is `r,g,b` starting
  at the third character, e.g. `F 220,100,0`. A line whose third character
  is not a digit leaves its colour as `(0, 0, 0)`.

```python
from cubscene.scene import parse_scene

config = parse_scene("maps/level.cub")
print(config.textures, config.floor, config.ceiling)
```

## XPM textures

`cubscene.xpm` reads XPM data into an `Image`:

- `xpm_file_to_image(path)` reads a file, blanks out C comments outside
  quoted strings, and takes the contents of the quoted strings as the XPM
  lines.
- `xpm_to_image(lines)` and `parse_xpm(lines)` take the lines directly; the
  latter returns rows of 0xRRGGBB values.

Colours may be `#RRGGBB` values or colour names. The colour `None` becomes
`TRANSPARENT` (`0xFF000000`); undefined pixel codes give 0. Malformed or
truncated data raises `XpmError` (a `ValueError`).

```python
from cubscene.xpm import xpm_to_image

image = xpm_to_image([
    "2 1 2 1",
    "a c #FF0000",
    "b c blue",
    "ab",
])
assert image.get_pixel(0, 0) == 0xFF0000
assert image.get_pixel(1, 0) == 0x0000FF
```

## Images and colours

- `cubscene.image.Image(width, height, endian=0)` holds 32-bit pixels in a
  `bytearray` (`data`, `line_length`, `bits_per_pixel`). `set_pixel(x, y,
  color)` and `get_pixel(x, y)` raise `IndexError` outside the image.
  `new_image(width, height)` makes a black little-endian image.
- `cubscene.colors.lookup_color(name, suffix=None)` resolves a colour name,
  case-insensitively, joining `name` and `suffix` with a space; unknown
  names give 0 and `none` gives -1.
- `cubscene.visual.channel_shifts` and `to_visual_pixel` map 0xRRGGBB values
  to the pixel layout of a visual with the given channel masks and depth.
- `cubscene.textscan` holds the small text helpers used by the XPM reader:
  `find`, `find_unquoted`, `split_words`, `strip_comments`.

```python
from cubscene.image import new_image
from cubscene.colors import lookup_color

canvas = new_image(64, 64)
canvas.set_pixel(3, 4, lookup_color("sky", "blue"))
```

## What this package does not do

It opens no window and draws nothing on screen, and it does no raycasting.
Scene loading checks textures and colours only: the map grid is kept as
plain lines in `SceneConfig.lines` and is not parsed or validated, and the
texture files named in a scene are not opened.

## Tests

```
pip install .[test]
pytest
```