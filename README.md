# planetgen

Generate procedural planet meshes in pure Python, with no third-party
dependencies. A planet starts as an icosahedron, is subdivided into an
icosphere, displaced by layered simplex noise and coloured per vertex by
biomes chosen from height, temperature and moisture.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Quick start

```python
from planetgen.library import add_noise_layer, create_planet, regenerate_planet
from planetgen.noise import set_noise_seed
from planetgen.vector import Quat, Vec3

set_noise_seed(1337)
planet = create_planet(Vec3(0.0, 0.0, 0.0), Quat(), radius=1000.0, resolution=3)
add_noise_layer(planet, 0.5, 6, 2.0, 2.0, 0.5)
mesh = regenerate_planet(planet)

print(len(mesh.vertices), "vertices")
print(len(mesh.triangles), "triangles")
```

`Planet.generate()` (which `create_planet` and `regenerate_planet` call)
returns a `PlanetMesh` with local-space `vertices`, `triangles` (index
triples), `normals`, `uvs`, `tangents` and per-vertex `colors`.

## Modules

- `planetgen.noise` — `SimplexNoise`, a seeded generator with `noise1d`,
  `noise2d`, `noise3d`, `noise4d` and `fbm` (fractal Brownian motion over 3D
  noise; raises `ValueError` for fewer than one octave). The module-level
  functions `simplex_noise1d`, `simplex_noise2d`, `simplex_noise3d`,
  `simplex_noise4d` and `simplex_noise_fbm` use one shared generator, seeded
  with `DEFAULT_SEED` (1337) and reseeded with `set_noise_seed()`.
- `planetgen.vector` — `Vec3`, `Quat` and `Transform` (location, rotation,
  scale; `transform_position()` and `add_local_rotation()`).
- `planetgen.icosphere` — `create_icosahedron()` returns the twelve unit
  vertices and twenty faces; `subdivide(vertices, triangles, subdivisions)`
  splits every triangle into four per step, sharing midpoints, and returns
  new lists.
- `planetgen.settings` — `BiomeType`, `LinearColor`, `BiomeSettings`
  (with `matches(height, temperature, moisture)`), `NoiseLayer` and
  `default_biomes()` (ocean, beach, plains, desert, forest, mountains,
  snow-capped, tundra, in that order).
- `planetgen.planet` — `Planet`, `PlanetMesh` and `TileSelection`.
- `planetgen.library` — `create_planet`, `add_noise_layer` (random centre
  within 100 units of the origin; pass `rng` for reproducibility),
  `set_noise_parameters` (raises `IndexError` for a missing layer),
  `set_climate_parameters`, `add_biome` (updates the first biome of that
  type or appends one) and `regenerate_planet`.
- `planetgen.materials` — `Material` records and `create_planet_material`,
  `create_ocean_material`, `create_biome_material`, which fill in named
  vector and scalar parameters.
- `planetgen.example` — `PlanetGeneratorExample`, a preset with three noise
  layers, the example biome table, auto-rotation and tile selection, and
  the `main()` command.

## The planet

A `Planet` holds its settings (`radius`, `resolution`, `noise_layers`,
`biomes`, climate values, rotation and selection options, `transform`) and,
after `generate()`, its `mesh`. Give it a `SimplexNoise` in `noise` to use
its own generator instead of the shared one.

- `evaluate_noise(point)` and `point_on_planet(point)` give the elevation
  and displaced position of a unit-sphere point. Layers after the first are
  masked by the first layer's value, and each layer weighs half the one
  before.
- `temperature(point)` falls from `equator_temperature` to
  `pole_temperature` with a little noise; `moisture(point)` is noise-driven
  and lower towards the poles. Both are clamped to [0, 1].
- `determine_biome(height, temperature, moisture)` returns the first biome
  whose inclusive ranges hold all three values, or `BiomeType.PLAINS`.
  Heights are normalised so 0 is the base radius and 1 is 20% above it.
- `biome_color(biome_type)` returns that biome's colour, or grey.
- `find_triangle_index(hit_location)` returns the triangle whose
  world-space centre is nearest; it raises `RuntimeError` before the planet
  is generated.
- `select_tile_at_location(hit_location)` picks that triangle, records a
  `TileSelection` with its biome, colours its three vertices with
  `selected_tile_color` scaled by `selected_tile_highlight_intensity`, and
  calls `on_tile_selected(index, location, biome)` if set. It returns
  `None` when `enable_tile_selection` is off.
- `clear_selected_tile()` drops the selection and restores the colours.
- `tick(delta_time)` rotates the planet about `rotation_axis` by
  `rotation_speed` degrees per second when `auto_rotate` is on.

## Command line

```
planetgen [--radius R] [--resolution N] [--seed S]
          [--equator-temperature T] [--pole-temperature T] [--moisture-scale M]
```

builds the example planet and prints its vertex and triangle counts and
how many vertices each biome colours.

## What it does not do

planetgen produces mesh data only. It does not render, open a window, or
write mesh or image files. Tile selection takes a world-space hit point;
there is no camera or screen-space picking. Materials are plain parameter
records for a renderer to interpret.