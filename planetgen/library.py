"""Convenience operations for creating and configuring planets."""

from __future__ import annotations

import random

from planetgen.planet import Planet, PlanetMesh
from planetgen.settings import BiomeSettings, BiomeType, LinearColor, NoiseLayer
from planetgen.vector import ZERO, Quat, Transform, Vec3


def create_planet(
    location: Vec3 = ZERO,
    rotation: Quat = Quat(),
    radius: float = 1000.0,
    resolution: int = 4,
) -> Planet:
    """Place a new planet at ``location`` with ``rotation`` and generate its mesh."""
    planet = Planet(
        radius=radius,
        resolution=resolution,
        transform=Transform(location=location, rotation=rotation),
    )
    planet.generate()
    return planet


def add_noise_layer(
    planet: Planet,
    strength: float = 1.0,
    num_layers: int = 4,
    base_roughness: float = 1.0,
    roughness: float = 2.0,
    persistence: float = 0.5,
    rng: random.Random | None = None,
) -> NoiseLayer:
    """Append an enabled noise layer centred at a random point within 100 units of the origin."""
    source = rng if rng is not None else random
    center = Vec3(*(source.random() * 2.0 - 1.0 for _ in range(3))) * 100.0
    layer = NoiseLayer(
        enabled=True,
        strength=strength,
        num_layers=num_layers,
        base_roughness=base_roughness,
        roughness=roughness,
        persistence=persistence,
        center=center,
    )
    planet.noise_layers.append(layer)
    return layer


def set_noise_parameters(
    planet: Planet,
    index: int,
    strength: float,
    num_layers: int,
    base_roughness: float,
    roughness: float,
    persistence: float,
) -> NoiseLayer:
    """Change the shape parameters of the noise layer at ``index``."""
    if not 0 <= index < len(planet.noise_layers):
        raise IndexError(f"no noise layer at index {index}")
    layer = planet.noise_layers[index]
    layer.strength = strength
    layer.num_layers = num_layers
    layer.base_roughness = base_roughness
    layer.roughness = roughness
    layer.persistence = persistence
    return layer


def set_climate_parameters(
    planet: Planet,
    equator_temperature: float = 1.0,
    pole_temperature: float = 0.0,
    moisture_scale: float = 1.0,
) -> None:
    """Set the temperature gradient and moisture scale of ``planet``."""
    planet.equator_temperature = equator_temperature
    planet.pole_temperature = pole_temperature
    planet.moisture_scale = moisture_scale


def add_biome(
    planet: Planet,
    biome_type: BiomeType,
    biome_color: LinearColor,
    min_height: float = 0.0,
    max_height: float = 1.0,
    min_temperature: float = 0.0,
    max_temperature: float = 1.0,
    min_moisture: float = 0.0,
    max_moisture: float = 1.0,
) -> BiomeSettings:
    """Update the first biome of ``biome_type``, or append a new one if there is none."""
    for biome in planet.biomes:
        if biome.biome_type == biome_type:
            break
    else:
        biome = BiomeSettings(biome_type)
        planet.biomes.append(biome)

    biome.color = biome_color
    biome.min_height = min_height
    biome.max_height = max_height
    biome.min_temperature = min_temperature
    biome.max_temperature = max_temperature
    biome.min_moisture = min_moisture
    biome.max_moisture = max_moisture
    return biome


def regenerate_planet(planet: Planet) -> PlanetMesh:
    """Rebuild the planet's mesh from its current settings."""
    return planet.generate()