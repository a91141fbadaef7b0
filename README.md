# terraingen

terraingen generates procedural terrain height maps from Perlin fractal
Brownian motion (fBm) noise. It splits a map into square tactical zones
(spawn, arena, choke, flank, high ground and objective) and exports the
result as PNG images. It can also build a triangle mesh with smooth
per-vertex normals from a height map, and compute camera view and
projection matrices for it.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
pytest
```

## Command line

```
terraingen
```

With no options, the command builds 256×256 maps with 16×16 zones, using the
basic zone strategy. It makes one map for each noise frequency from
`--min-frequency`, stepping by `--frequency-step`, for
`int((max - min) / step)` runs. The defaults (0.011, 0.02, 0.005) give a
single run at frequency 0.011. For each run it writes three images into the
output directory, which it creates if needed, and prints the paths:

- `zone_map_<n>.png`: the zone colours
- `terrain_map_<n>.png`: the height map in greyscale
- `overlay_map_<n>.png`: 70% terrain grey blended with 30% zone colour

Options:

| Option             | Default | Meaning                              |
|--------------------|---------|--------------------------------------|
| `--output-dir`     | `dump`  | directory for the images             |
| `--width`          | 256     | map width in tiles                   |
| `--height`         | 256     | map height in tiles                  |
| `--zone-size`      | 16      | side length of a square zone         |
| `--strategy`       | `basic` | `basic` or `full`                    |
| `--min-frequency`  | 0.011   | first noise frequency                |
| `--max-frequency`  | 0.02    | upper bound of the frequency range   |
| `--frequency-step` | 0.005   | step between frequencies             |

## Library use

```python
from terraingen.tilemap import TileMap
from terraingen.zone_planner import ZonePlanner
from terraingen.cli import make_full_strategy

tile_map = TileMap(256, 256)
tile_map.generate_height_map(0.02, 4, 0.5)

planner = ZonePlanner(256, 256, 16)
zones = planner.plan_zones(tile_map, make_full_strategy(256, 256))
tile_map.apply_zones(zones)

mean, stddev = tile_map.compute_global_stats()
tile_map.export_overlay_map("overlay.png")
```

`TileMap.zone_image()`, `terrain_image()` and `overlay_image()` return the
images as numpy arrays without writing a file. `generate_raw_height_map()`
fills the heights with a single octave of noise instead of fBm.

A zone strategy is any callable that takes `(avg_height, stddev, x, y)` and
returns a `ZoneType`. `make_basic_strategy` and `make_full_strategy` build
the two strategies the command uses; you can pass your own instead.
`ZonePlanner.plan_rotating_zones()` covers the map with whole zones only and
cycles through the zone types, without looking at the terrain.

Noise comes from `terraingen.noise`: `PerlinNoise(seed, frequency)` (seed
1337 by default), whose `get_noise(x, y)` takes scalars or arrays, and
`fbm_noise(noise, x, y, octaves, persistence)`.

Zone colours (`zone_to_color`):

| Zone        | Colour |
|-------------|--------|
| SPAWN       | yellow |
| ARENA       | green  |
| CHOKE       | red    |
| FLANK       | blue   |
| HIGH_GROUND | purple |
| OBJECTIVE   | orange |
| UNASSIGNED  | grey   |

### Meshes and cameras

`TerrainMesh(tile_map, height_scale=20.0)` turns a `TileMap` into a list of
`Vertex` objects and a numpy array of triangle indices, with smooth
per-vertex normals. `TerrainMesh.update(fbm)` regenerates the heights from
an `FBMParams` value and rebuilds the mesh. The building blocks,
`compute_triangle_indices` and `compute_normals`, are in
`terraingen.geometry`.

`terraingen.camera` holds `Camera`, with `view_matrix()` and
`projection_matrix(aspect_ratio)`, the `look_at` and `perspective` matrix
functions, and the `Material`, `Light` and `FBMParams` records.

`ViewNavigator` in `terraingen.navigator` moves its camera in response to
mouse events: `handle_mouse_button(button, action, cursor)` starts or stops
a drag with the middle button, `handle_cursor(x, y)` pans while dragging,
and `handle_scroll(yoffset)` moves the camera along its viewing direction.

## What it does not do

terraingen opens no window and draws nothing on screen. There is no
interactive 3D viewer, no GPU upload and no shaders: the mesh, matrices,
material and light values are data to hand to a renderer of your own, and
`ViewNavigator` must be fed mouse events by whatever windowing code you use.