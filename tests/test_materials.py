from planetgen.materials import (
    OCEAN_BASE_MATERIAL,
    PLANET_BASE_MATERIAL,
    Material,
    create_biome_material,
    create_ocean_material,
    create_planet_material,
)
from planetgen.settings import LinearColor


def test_planet_material_defaults():
    material = create_planet_material()
    assert material.base == PLANET_BASE_MATERIAL
    assert material.vector_parameters["BaseColor"] == LinearColor(0.2, 0.5, 0.2, 1.0)
    assert material.scalar_parameters["Roughness"] == 0.8
    assert material.scalar_parameters["Metallic"] == 0.0
    assert material.scalar_parameters["TwoSided"] == 1.0
    assert material.scalar_parameters["AmbientOcclusion"] == 0.5
    assert material.scalar_parameters["EmissiveStrength"] == 0.0
    assert material.two_sided is True


def test_planet_material_one_sided():
    material = create_planet_material(two_sided=False)
    assert material.scalar_parameters["TwoSided"] == 0.0
    assert material.two_sided is False


def test_planet_material_custom_values():
    color = LinearColor(0.9, 0.1, 0.1)
    material = create_planet_material(color, 0.3, 0.6, True, 0.2, 4.0)
    assert material.vector_parameters == {"BaseColor": color}
    assert material.scalar_parameters["Roughness"] == 0.3
    assert material.scalar_parameters["Metallic"] == 0.6
    assert material.scalar_parameters["AmbientOcclusion"] == 0.2
    assert material.scalar_parameters["EmissiveStrength"] == 4.0


def test_ocean_material_defaults():
    material = create_ocean_material()
    assert material.base == OCEAN_BASE_MATERIAL
    assert material.vector_parameters["BaseColor"] == LinearColor(0.0, 0.3, 0.6, 0.7)
    assert material.scalar_parameters == {
        "Roughness": 0.2,
        "Metallic": 0.1,
        "Opacity": 0.7,
        "TwoSided": 1.0,
    }
    assert material.two_sided is True


def test_ocean_material_one_sided():
    material = create_ocean_material(opacity=0.4, two_sided=False)
    assert material.scalar_parameters["Opacity"] == 0.4
    assert material.scalar_parameters["TwoSided"] == 0.0
    assert material.two_sided is False


def test_biome_material_matches_planet_material():
    color = LinearColor(0.4, 0.4, 0.1)
    biome = create_biome_material(color, 0.5, 0.2, False, 0.7, 1.0)
    planet = create_planet_material(color, 0.5, 0.2, False, 0.7, 1.0)
    assert biome == planet


def test_material_default_is_empty_and_one_sided():
    material = Material("Custom")
    assert material.vector_parameters == {}
    assert material.scalar_parameters == {}
    assert material.two_sided is False