# fdf

Shows a height map as a white wireframe in a 1920×1080 window. You can
rotate it, zoom it, move it around, change the height scale and switch to
an isometric view.

## Installing

```
pip install .
```

The window is drawn with pygame.

## Map files

A map is a plain text file. Each line is one row of whole-number heights,
separated by spaces or tabs:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Every row must have the same number of values.

## Running

```
fdf path/to/map.fdf
```

The program prints `Error` and stops when it is given no map or more than
one, when the file cannot be read, when its rows differ in length, or when
the map is empty.

## Keys

| Key                  | Action                                             |
|----------------------|----------------------------------------------------|
| Esc                  | quit (closing the window quits as well)            |
| keypad `+` / `-`     | zoom in / out (the zoom never drops below 1)       |
| arrow keys           | move the picture by 5 pixels                       |
| A / Z                | rotate about the x axis                            |
| S / X                | rotate about the y axis                            |
| D / C                | rotate about the z axis                            |
| `=` / `-`            | raise / flatten the heights (scale kept near 0.1 to 10) |
| 1                    | reset the rotation and switch to the isometric view |

Each rotation step is 0.02 radians and each height step is 0.1.

## Using it as a library

```python
from fdf.mapfile import parse_map
from fdf.render import Scene

heights = parse_map("0 0 0\n0 3 0\n0 0 0\n")
scene = Scene(heights, 1920, 1080)
scene.draw()
pixels = scene.image.to_rgb_bytes()
```

- `fdf.mapfile`: `read_map`, `parse_map`, `row_length`; errors raise `MapError`.
- `fdf.projection`: `Camera`, `Point`, `rotate_x`, `rotate_y`, `rotate_z`,
  `isometric` and `project`.
- `fdf.render`: `Scene`, `line_points` (Bresenham line, end point excluded)
  and `draw_line`.
- `fdf.controls`: `Key` codes, `key_press` and the single controls (`zoom`,
  `move`, `rotate`, `rise`, `choose_projection`); Esc raises `Quit`.
- `fdf.image`: `Image`, a 32-bit (or 8/16/24-bit) pixel buffer, and
  `color_value` for converting `0xRRGGBB` colours to shallower displays.
- `fdf.xpm`: `xpm_file_to_image` and `xpm_to_image` load XPM pictures into
  an `Image`; malformed data raises `XpmError`. Transparent (`None`) pixels
  are left at zero.
- `fdf.colors.lookup_color` turns X11 colour names into `0xRRGGBB` values
  (`"none"` gives -1).
- `fdf.text`: `split_words`, `find`, `find_unquoted`.

## What it does not do

- Lines are always drawn in white; heights are not coloured.
- Once the isometric view is chosen there is no key to go back to the flat
  view.
- The window size is fixed at 1920×1080 when started from the command line.