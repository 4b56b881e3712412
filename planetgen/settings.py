"""Biome and noise-layer settings for planet generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from planetgen.vector import Vec3


class BiomeType(Enum):
    OCEAN = 0
    BEACH = 1
    DESERT = 2
    PLAINS = 3
    FOREST = 4
    MOUNTAINS = 5
    SNOW_CAPPED = 6
    TUNDRA = 7

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").title()


@dataclass(frozen=True, slots=True)
class LinearColor:
    """A linear RGBA colour."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def scaled(self, factor: float) -> LinearColor:
        """Multiply every channel, alpha included, by ``factor``."""
        return LinearColor(self.r * factor, self.g * factor, self.b * factor, self.a * factor)

    def with_alpha(self, alpha: float) -> LinearColor:
        return LinearColor(self.r, self.g, self.b, alpha)


WHITE = LinearColor(1.0, 1.0, 1.0, 1.0)
GREY = LinearColor(0.5, 0.5, 0.5, 1.0)


@dataclass
class BiomeSettings:
    """The height, temperature and moisture ranges a biome occupies."""

    biome_type: BiomeType
    color: LinearColor = WHITE
    min_height: float = 0.0
    max_height: float = 1.0
    min_temperature: float = 0.0
    max_temperature: float = 1.0
    min_moisture: float = 0.0
    max_moisture: float = 1.0
    material: Any = None

    def matches(self, height: float, temperature: float, moisture: float) -> bool:
        """True when all three values lie within this biome's inclusive ranges."""
        return (
            self.min_height <= height <= self.max_height
            and self.min_temperature <= temperature <= self.max_temperature
            and self.min_moisture <= moisture <= self.max_moisture
        )


@dataclass
class NoiseLayer:
    """One layer of fractal noise that shapes the terrain."""

    enabled: bool = True
    strength: float = 1.0
    num_layers: int = 4
    base_roughness: float = 1.0
    roughness: float = 2.0
    persistence: float = 0.5
    center: Vec3 = field(default_factory=Vec3)
    min_value: float = 1.0


def default_biomes() -> list[BiomeSettings]:
    """The biome table a new planet starts with, in matching order."""
    return [
        BiomeSettings(BiomeType.OCEAN, LinearColor(0.0, 0.1, 0.4), min_height=0.0, max_height=0.3),
        BiomeSettings(BiomeType.BEACH, LinearColor(0.95, 0.95, 0.8), min_height=0.3, max_height=0.35),
        BiomeSettings(
            BiomeType.PLAINS,
            LinearColor(0.2, 0.6, 0.2),
            min_height=0.35,
            max_height=0.6,
            min_moisture=0.3,
        ),
        BiomeSettings(
            BiomeType.DESERT,
            LinearColor(0.85, 0.8, 0.5),
            min_height=0.35,
            max_height=0.6,
            max_moisture=0.3,
            min_temperature=0.6,
        ),
        BiomeSettings(
            BiomeType.FOREST,
            LinearColor(0.1, 0.4, 0.1),
            min_height=0.4,
            max_height=0.7,
            min_moisture=0.5,
            min_temperature=0.3,
            max_temperature=0.7,
        ),
        BiomeSettings(BiomeType.MOUNTAINS, LinearColor(0.5, 0.5, 0.5), min_height=0.7, max_height=0.9),
        BiomeSettings(BiomeType.SNOW_CAPPED, LinearColor(0.95, 0.95, 0.95), min_height=0.9, max_height=1.0),
        BiomeSettings(
            BiomeType.TUNDRA,
            LinearColor(0.8, 0.8, 0.9),
            min_height=0.35,
            max_height=0.7,
            max_temperature=0.3,
        ),
    ]