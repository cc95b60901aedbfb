# prismtrace

prismtrace is a small path tracer written in pure Python. It reads a scene from a
JSON file and builds the world the file describes. It then renders that world with
a perspective camera. A scene can hold spheres, planes, triangles, cones, cylinders
and smooth-shaded meshes loaded from Wavefront OBJ files. The image is written to
disk, or refined progressively in a window.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Rendering a scene

```
prismtrace scene.json
```

This renders `scene.json` and writes the image to `output.bmp`.

Options:

- `-o FILE` or `-out FILE` sets the output file. If both are given, `-o` wins.
  The extension chooses the format, and it must be written in lower case:
  - `ppm` gives an ASCII P3 file.
  - `bmp` gives a 24-bit, bottom-up BMP. Rows are not padded, so the result is only
    a standard BMP when the width times 3 is a multiple of 4.
  - `png`, `tga` and `jpg` are written through Pillow.

  Any other extension is an error.
- `-gui` opens a window that renders the scene progressively. With `-gui` alone,
  nothing is written to disk. With `-gui -o FILE`, the image is saved when the
  window is closed.
- `-h` or `-help` prints the usage text.

An option takes the next argument as its value unless that argument starts with
`-`. Put the scene file first, or after an option that takes a value. For example,
`prismtrace scene.json -gui` works, but in `prismtrace -gui scene.json` the file
name is read as the value of `-gui`.

The program returns 0 on success. On any error, and also for `-h`, it prints a
message to standard error and returns 84. Progress (`Rendering: NN.NN%`) is written
to standard error.

### Window controls

| Key | Action |
| --- | --- |
| Z / Up, S / Down | move forward / back |
| Q / Left, D / Right | move left / right |
| Space, Left Shift | move up / down |
| I, K, J, L | shift the look-at point up, down, left, right |
| Keypad + / Keypad - | narrow / widen the field of view |
| Escape, or closing the window | quit |

The window can be resized. The text overlay shows render time, samples, depth and
the camera position. It uses `assets/font/BebasNeue-Regular.ttf` when that file
exists in the working directory, and pygame's default font when it does not.

While the window is open, every scene file that was read is watched. When one
changes, the world and the camera are reloaded and the image starts again.

## Scene format

A scene file is a JSON object with these keys. All of them are required unless
marked optional.

- `camera`:
  - `resolution.width`, `RayPerPixel`, `MaxBounces`, `fieldOfView`, `DefocusAngle`.
  - `BackgroundColor` with `r`, `g`, `b`.
  - `position` with `x`, `y`, `z`.
  - `rotation` with `x`, `y`, `z`. This is the point the camera looks at.
  - optional `brightness` (default 1).

  The aspect ratio is always 16:9.
- `scenes`: a list of `{"path": ...}` entries. Each one names another scene file
  whose primitives are added to this one. A file is read only once. Paths are
  opened relative to the working directory.
- `primitives`: holds six lists, each of which must be present (they may be empty):
  - `spheres`: `position`, `radius`.
  - `triangles`: `vertices`, a list of three `{x, y, z}` objects.
  - `planes`: `position`, `normal`.
  - `objects`: `filename` (an OBJ file), `position`, `scale`.
  - `cones`: `tip`, `direction`, `height`, `angle` (half-angle in degrees). Cones
    open along the Y axis.
  - `cylinders`: `position`, `direction`, `radius`, `height`.

  For cones and cylinders, a height of zero or less leaves the shape unbounded.

Each primitive has a `material` object. Its `material` key is one of:

- `BaseMaterial`: a diffuse surface.
- `MetalMaterial`: a reflective surface. It takes a `fuzz` value, capped at 1.
- `LightMaterial`: an emitter. It takes an optional `intensity` (default 1).

An unknown name gives a surface with no material, which renders black. The colour
comes from a `color` object (`r`, `g`, `b`), or from a `texture` object. A texture's
`type` is `color` or `checker`. A checker texture takes `scale`, `oddTexture` and
`evenTexture`, and each of those has its own `color` or `texture`.

A primitive may have a `transformations` object:

- `translation` (`x`, `y`, `z`) works for every primitive except OBJ objects.
- `rotation` (degrees about X, then Y, then Z) applies to triangles, planes and
  cylinders. Spheres ignore it, and on cones it has no effect.

OBJ files must contain `v`, `vn` and `f` lines. In each face, the leading integer
of every vertex entry (as in `12//12`) indexes both the vertex list and the normal
list. Indices start at 1.

## Using the library

```python
from prismtrace.camera import Camera
from prismtrace.color import Color
from prismtrace.image import Image
from prismtrace.materials import BaseMaterial
from prismtrace.sphere import Sphere
from prismtrace.vector import Vector3D
from prismtrace.world import World

world = World()
world.add_primitive(Sphere(Vector3D(0, 0, -1), 0.5, BaseMaterial(Color(0.8, 0.3, 0.3))))

camera = Camera()
camera.background = Color(0.7, 0.8, 1.0)

image = Image()
camera.render(world, image, show_progress=False)
image.save("sphere.png")
```

`IncrementalImage` averages successive renders, weighted by samples per pixel; the
window uses it.

You can also work from scene files:

- `prismtrace.scene_file.load_scene` reads a scene file.
- `prismtrace.world_creator.WorldCreator.create_world` fills a `World` from it.
- `prismtrace.factories.create_camera` builds the camera from the `camera` node.

Random sampling uses a xoshiro128+ generator for each thread, with a fixed default
seed. This makes renders repeatable. Call `prismtrace.rng.seed` to change the seed.

## Limitations

- Rendering runs on a single thread in pure Python. Expect large images or high
  sample counts to be slow.
- Cones and cylinders report an empty bounding box, and cones cannot be rotated.
- The BVH is used only inside OBJ meshes. The world tests every primitive in turn.