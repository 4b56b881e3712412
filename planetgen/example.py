"""A ready-made planet setup and a command that generates and summarises it."""

from __future__ import annotations

import argparse
import random
from collections import Counter
from dataclasses import dataclass, field

from planetgen.library import (
    add_biome,
    add_noise_layer,
    create_planet,
    regenerate_planet,
    set_climate_parameters,
)
from planetgen.materials import Material, create_ocean_material, create_planet_material
from planetgen.noise import DEFAULT_SEED, set_noise_seed
from planetgen.planet import Planet
from planetgen.settings import BiomeType, LinearColor
from planetgen.vector import ZERO, Quat, Vec3

_DEFAULT_BIOMES = (
    (BiomeType.OCEAN, LinearColor(0.0, 0.1, 0.4), 0.0, 0.3, 0.0, 1.0, 0.0, 1.0),
    (BiomeType.BEACH, LinearColor(0.95, 0.95, 0.8), 0.3, 0.35, 0.0, 1.0, 0.0, 1.0),
    (BiomeType.DESERT, LinearColor(0.85, 0.8, 0.5), 0.35, 0.6, 0.6, 1.0, 0.0, 0.3),
    (BiomeType.PLAINS, LinearColor(0.2, 0.6, 0.2), 0.35, 0.6, 0.3, 0.7, 0.3, 0.6),
    (BiomeType.FOREST, LinearColor(0.1, 0.4, 0.1), 0.4, 0.7, 0.3, 0.7, 0.6, 1.0),
    (BiomeType.MOUNTAINS, LinearColor(0.5, 0.5, 0.5), 0.7, 0.9, 0.0, 1.0, 0.0, 1.0),
    (BiomeType.SNOW_CAPPED, LinearColor(0.95, 0.95, 0.95), 0.9, 1.0, 0.0, 1.0, 0.0, 1.0),
    (BiomeType.TUNDRA, LinearColor(0.8, 0.8, 0.9), 0.35, 0.7, 0.0, 0.3, 0.0, 1.0),
)


@dataclass
class PlanetGeneratorExample:
    """Builds a rotating, selectable planet with three noise layers and a full biome table."""

    generate_on_begin_play: bool = True
    planet_radius: float = 1000.0
    resolution: int = 4
    has_ocean: bool = True
    ocean_level: float = 0.3
    seed: int = DEFAULT_SEED
    equator_temperature: float = 1.0
    pole_temperature: float = 0.0
    moisture_scale: float = 1.0
    location: Vec3 = ZERO
    rotation: Quat = field(default_factory=Quat)
    planet: Planet | None = field(default=None, init=False)
    ocean_material: Material | None = field(default=None, init=False)

    def generate_planet(self) -> Planet:
        """Replace any existing planet with a freshly generated one."""
        self.planet = None
        set_noise_seed(self.seed)
        rng = random.Random(self.seed)

        planet = create_planet(self.location, self.rotation, self.planet_radius, self.resolution)
        self.planet = planet

        set_climate_parameters(
            planet, self.equator_temperature, self.pole_temperature, self.moisture_scale
        )

        add_noise_layer(planet, 1.0, 4, 1.0, 2.0, 0.5, rng=rng)
        add_noise_layer(planet, 0.5, 6, 2.0, 2.0, 0.5, rng=rng)
        add_noise_layer(planet, 0.25, 2, 4.0, 2.0, 0.5, rng=rng)

        self.ocean_material = create_ocean_material(
            LinearColor(0.0, 0.3, 0.6, 0.7), 0.2, 0.1, 0.7, True
        )
        planet.material = create_planet_material(
            LinearColor(0.2, 0.5, 0.2, 1.0), 0.8, 0.0, True, 0.5, 0.0
        )

        self.add_default_biomes()

        planet.auto_rotate = True
        planet.rotation_speed = 2.0
        planet.rotation_axis = Vec3(0.0, 0.0, 1.0)
        planet.enable_tile_selection = True
        planet.selected_tile_color = LinearColor(1.0, 0.3, 0.3, 1.0)
        planet.selected_tile_highlight_intensity = 1.5

        regenerate_planet(planet)
        return planet

    def add_default_biomes(self) -> None:
        """Install the example's biome table on the current planet."""
        if self.planet is None:
            raise RuntimeError("no planet has been created")
        for entry in _DEFAULT_BIOMES:
            add_biome(self.planet, *entry)


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError("must not be negative")
    return value


def _biome_census(planet: Planet) -> Counter[str]:
    names: dict[LinearColor, str] = {}
    for biome in planet.biomes:
        names.setdefault(biome.color, biome.biome_type.display_name)
    assert planet.mesh is not None
    return Counter(names.get(color, "Unknown") for color in planet.mesh.colors)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="planetgen", description="Generate a procedural planet and summarise its surface."
    )
    parser.add_argument("--radius", type=float, default=1000.0)
    parser.add_argument("--resolution", type=_non_negative_int, default=4)
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--equator-temperature", type=float, default=1.0)
    parser.add_argument("--pole-temperature", type=float, default=0.0)
    parser.add_argument("--moisture-scale", type=float, default=1.0)
    args = parser.parse_args(argv)

    example = PlanetGeneratorExample(
        planet_radius=args.radius,
        resolution=args.resolution,
        seed=args.seed,
        equator_temperature=args.equator_temperature,
        pole_temperature=args.pole_temperature,
        moisture_scale=args.moisture_scale,
    )
    planet = example.generate_planet()
    assert planet.mesh is not None

    print(
        f"Planet with {len(planet.mesh.vertices)} vertices "
        f"and {len(planet.mesh.triangles)} triangles"
    )
    for name, count in sorted(_biome_census(planet).items()):
        print(f"  {name}: {count}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())