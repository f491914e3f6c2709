# pinhole-tracer

A small path tracer. It places a pinhole camera in a scene of spheres,
triangles and cuboids, fires a number of rays through every pixel, bounces
them off the surfaces they hit and blends the colour and emitted light they
pick up on the way. The result is written as a 32-bit top-down BMP image.

It has no dependencies beyond the Python standard library (3.10 or later).

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
pinhole-tracer [directory]
```

`directory` (default: the current directory) must hold the three scene files
`scene_config.ini`, `colour_data.ini` and `object_config.ini`; the image is
also saved there. The same entry point can be run as
`python -m pinhole_tracer.cli`.

The scene settings are printed first, then the progress of the render, and
finally how long the ray simulation, the writing of the image and the whole
run took. If any of the files is missing, or a value in them is missing or
invalid, every problem found is reported and the command exits with status 1.
A failure to write the image also gives status 1.

## The scene files

In all three files, lines starting with `[` are section headers and are
ignored, as are empty lines.

### scene_config.ini

`key = value` pairs; surrounding whitespace is trimmed and a later key
overrides an earlier one. Numbers are read from the start of the value, so
trailing text after a number is ignored. Required keys:

| Key | Meaning |
| --- | --- |
| `Width` | image width in pixels (integer) |
| `AspectRatio` | width divided by height; the height is `Width / AspectRatio`, truncated |
| `NumRays` | rays traced per pixel |
| `NumBounces` | bounces per ray |
| `ContributionPerBounce` | how much each surface colour tints the ray |
| `FieldOfView` | horizontal field of view in degrees (integer) |
| `HorizontalRotation` | camera yaw in radians |
| `VerticalRotation` | camera pitch in radians |
| `CameraRotation` | camera roll in radians |
| `CameraOffset_X`, `CameraOffset_Y`, `CameraOffset_Z` | camera position |
| `PrintPercentStatusEvery` | progress is printed every this many percent |
| `StoreResultToFile` | `true` or `false` |
| `PreviewEnabled` | `true` or `false` (read, but see below) |

Optional keys (a value that cannot be converted is ignored):

| Key | Meaning |
| --- | --- |
| `NumThreads` | worker threads; `0` or absent uses one per CPU |
| `RandomSeed` | seed for a repeatable render |
| `FileName` | output name, without the `.bmp` extension |
| `ColourGamma` | gamma applied to the final colour (default `0.4545`) |

Without `FileName` the image is saved as `OutputScene_<n>.bmp`, with `n` a
random number from 1 to 999999.

### colour_data.ini

Each line names a colour and gives exactly eight numbers:

```
[Colours]
white = 1 1 1 0 0 0 0 0
lamp  = 1 1 1 1 1 1 4 0
mirror = 0.9 0.9 0.9 0 0 0 0 1
```

The numbers are: red, green, blue, emitted red, emitted green, emitted blue,
emission strength and glossiness (0 is fully diffuse, 1 a perfect mirror).
A value that is not a number is taken as `-1`; a line without eight values is
an error.

### object_config.ini

A sphere takes one line: the word `sphere`, the centre, the radius and a
colour name.

```
sphere 0 0 10 2 white
```

A triangle takes five lines: the word `triangle`, three corners and one
colour name.

```
triangle
-5 3 8
5 3 8
0 3 14
lamp
```

A cuboid takes fifteen lines: the word `cuboid`, its eight corners
(left-down-back, right-down-back, right-down-front, left-down-front,
left-up-back, right-up-back, right-up-front, left-up-front) and six lines of
two colour names each, in the order down, left, right, back, front, up. The
cuboid is built from twelve triangles; its bottom face is coloured with the
back pair, so the down pair must name existing colours but is not used.

Every colour named must be defined in `colour_data.ini`.

## What is not included

`PreviewEnabled` is read and stored, but there is no interactive preview
window: the command always goes straight to the full render. There is also
no output format other than BMP.

## Using it from Python

```python
from pinhole_tracer.loader import load_scene_config
from pinhole_tracer.raytracer import Raytracer

config = load_scene_config(".")
saved = Raytracer(config, output_dir=".").run()  # Path of the image, or None
```

`load_scene_config` raises `pinhole_tracer.file_reader.ConfigError` listing
every problem it found.

The building blocks can also be used on their own:

- `pinhole_tracer.vectors` — vector maths on tuples (`add`, `subtract`,
  `dot`, `cross`, `normalise`, …) and the `Line` and `Plane` types with
  intersection and distance helpers.
- `pinhole_tracer.geometry` — the `Sphere` and `Triangle` shapes and the
  `IntersectionData` they return from `check_intersection`.
- `pinhole_tracer.camera` — the `Camera`, which gives a ray direction per
  pixel after `populate_pixel_directions()`.
- `pinhole_tracer.scene_objects` — the `SceneObjects` container with
  `add_sphere`, `add_triangle` and `add_cuboid`.
- `pinhole_tracer.colour` — `ColourData` and `get_average_of_colours`.
- `pinhole_tracer.image` — `render`, which returns RGBA bytes, and
  `save_image`.
- `pinhole_tracer.bmp` — the `write_bmp` writer.
- `pinhole_tracer.scene_config` — the `SceneConfig` dataclass.
- `pinhole_tracer.timer` — `Timer`, usable as a context manager.