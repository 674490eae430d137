# wirefdf

A small viewer that draws `.fdf` height maps as wireframes, in an isometric
view or in one of three orthographic views (top, front, side), and lets you
pan, zoom, rotate and reshape the map from the keyboard.

## Installing

```
pip install .
```

The window is drawn with pygame.

## Running

```
wirefdf path/to/map.fdf
```

`python -m wirefdf.app path/to/map.fdf` does the same.

The command takes exactly one argument; otherwise it prints a usage message
and exits with status 1. If the file cannot be opened it prints
`fdf: error opening file: ...`, and if the map is not valid it prints
`fdf: invalid map`; both exit with status 1. When the window is closed it
prints `fdf: program exited successfully` and exits with status 0.

The window is 1980 x 1080 pixels.

## Map format

A map is a text file of rows of space-separated integer heights. A height
may start with `-`. Every row must have the same number of points, and an
empty file is not a valid map. A point may carry a colour in hexadecimal
after `,0x`:

```
0 0 0 0
0 10,0xFF0000 10 0
0 0 0 0
```

Points without a colour get one derived from a random base colour plus 500
times the point's height.

## Keys

| Key                          | Action                                           |
|------------------------------|--------------------------------------------------|
| `=` / `-`, keypad `+` / `-`  | zoom in / out by 5                               |
| arrow keys                   | move the map by 5 pixels                         |
| `1`                          | isometric view, rotation reset to zero           |
| `2`, `3`, `4`                | top, front and side orthographic views           |
| `W` / `S`                    | rotate around the X axis                         |
| `Q` / `E`                    | rotate around the Y axis                         |
| `A` / `D`                    | rotate around the Z axis                         |
| `Z` / `X`                    | raise / lower every non-zero height by 1         |
| `Esc` or closing the window  | quit                                             |

Rotation steps are 0.02 radians and affect only the isometric view; the
orthographic views ignore the rotation angles. Heights changed with `Z` and
`X` skip over zero, so a point that starts at zero stays flat and no other
point becomes flat.

## Using it from Python

```python
from wirefdf.app import load, run

viewer = load("map.fdf")
run(viewer)
```

Without opening a window:

```python
from wirefdf.geometry import Camera, ViewMode
from wirefdf.heightmap import parse_map
from wirefdf.raster import Canvas, render

hmap = parse_map("map.fdf", default_color=0xFFFFFF)
canvas = Canvas(800, 600)
render(canvas, Camera(position_x=400, position_y=300, mode=ViewMode.TOP), hmap)
print(hex(canvas.get_pixel(400, 300)))
```

- `wirefdf.heightmap` — `validate_file`, `parse_map`, `count_points`,
  `HeightMap` (with `shift_heights`) and `MapError`.
- `wirefdf.geometry` — `Camera`, `ViewMode`, `Point`, the rotations,
  `isometric`, `orthographic`, `project` and `edges`.
- `wirefdf.raster` — `Canvas` (an RGB byte buffer), `line_pixels`,
  `draw_line` and `render`.
- `wirefdf.viewer` — `Viewer`, which holds a map, a camera and a canvas and
  handles `Key` presses.
- `wirefdf.app` — `load`, `run`, `translate_key` and the `main` command.

## What it does not do

The viewer only displays maps: it does not save the rendered image, write
changed heights back to the file, or let the window be resized.