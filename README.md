# glidemesh

A small pure-Python toolkit for two related jobs:

- loading Wavefront `.obj` meshes and `.mtl` material libraries into plain
  Python objects (vertices, faces with per-corner normals, named scene
  objects and materials), and
- describing the display hardware of the Voodoo2 era: register bit fields,
  colour lookup table entries, DAC programming steps, standard video
  timings and the pixel-clock synthesiser formula.

It has no runtime dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Loading a mesh

```python
from glidemesh.objfile import Obj

mesh = Obj("cube.obj")
mesh.load_materials("cube.mtl")
mesh.apply_materials()

for name, scene_object in mesh.objects.items():
    print(name, len(scene_object.faces), scene_object.material.shininess)
```

`Obj` keeps every vertex it reads in `mesh.vertices`, every named object in
`mesh.objects` and every material in `mesh.materials`. Faces refer to shared
`Vertex` instances and hold their own list of normals.

What the loader reads:

- `v` and `vn` lines give vertex positions and normals; `o` starts a named
  object, `usemtl` names the current object's material, and `f` adds a
  face to the current object.
- Every face corner must carry a normal index (`v//vn` or `v/vt/vn`), and
  faces must come after an `o` line; otherwise `ValueError` is raised, as
  it is for indices out of range and malformed numbers.
- Texture coordinates (`vt`) are not read.
- When a name repeats, the first object or material of that name is kept.

`load_materials` pairs the `Kd`, `Ks`, `Ka` and `Ns` lines with the
`newmtl` names in the order they appear, and raises `ValueError` if any of
them is missing for a material. `apply_materials` copies each object's
named material onto it, rescaling the specular exponent from 0–900 into
1–128; `apply_material(scene_object, material)` copies a material as is.

Meshes can also be built by hand:

```python
from glidemesh.model import SceneObject
from glidemesh.objfile import Obj

mesh = Obj()
a = mesh.create_vertex(0, 0, 0)
b = mesh.create_vertex(1, 0, 0)
c = mesh.create_vertex(0, 1, 0)
face = mesh.create_face(a, b, c)
triangle = SceneObject()
mesh.add_face(triangle, face)
print(mesh.format_vertex(b))   # >[1.000000 0.000000 0.000000 1.000000]
```

Vertices count their references: `add_vertex_to_face` adds one,
`release_face` takes one away from each of a face's vertices (never below
zero), and `prune_unreferenced_vertices` removes and returns the vertices
left with none. `create_face` does not change the counts.

`glidemesh.model` also provides `Color` (with `WHITE`, `RED` and other
presets), `Material` (with presets such as `BRONZE`, `JADE` and `CHROME`),
`Vec4`, `Vertex.coord`, `Light` and `to_radian`.

## Display hardware helpers

- `glidemesh.registers` — `bit`, `field_mask`, `extract_field`,
  `insert_field`, named bit fields of the init registers, and
  `clut_entry` / `decode_clut_entry` for packing colour lookup table words.
- `glidemesh.dac` — `DacDescription` with its video, memory-clock and
  video-mode step lists (`find_video`, `find_mem_clock`, `find_video_mode`),
  built from `DacRdWr` steps of a `DacOperation` kind, and
  `EnvironmentTable` for name/value settings (`set`, `get`).
- `glidemesh.videotiming` — `VideoTiming` records for the standard modes,
  `available_timings()`, `find_video_timing(width, height, refresh)` and
  `VideoTiming.clock_frequency(16 or 24)`.
- `glidemesh.clocks` — `clock_frequency(m, n, p)` gives the synthesised
  frequency in MHz from a 14.318 MHz reference, and
  `compute_clock_params(frequency)` finds the `ClockTiming` closest to a
  target frequency within the synthesiser's limits.

```python
from glidemesh.videotiming import find_video_timing
from glidemesh.clocks import compute_clock_params

timing = find_video_timing(640, 480, 60)
params = compute_clock_params(timing.clock_frequency(16))
print(params.m, params.n, params.p, params.frequency())
```

## What it does not do

glidemesh only holds data and computes values. It does not render meshes,
open a window or talk to a graphics board: nothing here reads or writes
hardware registers or runs DAC steps. There is no parser for board
configuration files; `DacDescription` and `EnvironmentTable` are filled in
by your own code. There is no command-line program.