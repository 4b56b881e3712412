"""Material descriptions for planet surfaces, oceans and biomes."""

from __future__ import annotations

from dataclasses import dataclass, field

from planetgen.settings import LinearColor

PLANET_BASE_MATERIAL = "M_PlanetBase"
OCEAN_BASE_MATERIAL = "M_OceanBase"


@dataclass
class Material:
    """A material instance: a base material plus the parameter values set on it."""

    base: str
    vector_parameters: dict[str, LinearColor] = field(default_factory=dict)
    scalar_parameters: dict[str, float] = field(default_factory=dict)
    two_sided: bool = False


def create_planet_material(
    base_color: LinearColor = LinearColor(0.2, 0.5, 0.2, 1.0),
    roughness: float = 0.8,
    metallic: float = 0.0,
    two_sided: bool = True,
    ambient_occlusion: float = 0.5,
    emissive_strength: float = 0.0,
) -> Material:
    """An opaque surface material for the planet body."""
    return Material(
        base=PLANET_BASE_MATERIAL,
        vector_parameters={"BaseColor": base_color},
        scalar_parameters={
            "Roughness": roughness,
            "Metallic": metallic,
            "TwoSided": 1.0 if two_sided else 0.0,
            "AmbientOcclusion": ambient_occlusion,
            "EmissiveStrength": emissive_strength,
        },
        two_sided=two_sided,
    )


def create_ocean_material(
    water_color: LinearColor = LinearColor(0.0, 0.3, 0.6, 0.7),
    roughness: float = 0.2,
    metallic: float = 0.1,
    opacity: float = 0.7,
    two_sided: bool = True,
) -> Material:
    """A translucent water material."""
    return Material(
        base=OCEAN_BASE_MATERIAL,
        vector_parameters={"BaseColor": water_color},
        scalar_parameters={
            "Roughness": roughness,
            "Metallic": metallic,
            "Opacity": opacity,
            "TwoSided": 1.0 if two_sided else 0.0,
        },
        two_sided=two_sided,
    )


def create_biome_material(
    base_color: LinearColor,
    roughness: float = 0.8,
    metallic: float = 0.0,
    two_sided: bool = True,
    ambient_occlusion: float = 0.5,
    emissive_strength: float = 0.0,
) -> Material:
    """A biome material; built the same way as the planet material."""
    return create_planet_material(
        base_color, roughness, metallic, two_sided, ambient_occlusion, emissive_strength
    )