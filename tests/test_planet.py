import math

import pytest

from planetgen.noise import SimplexNoise
from planetgen.planet import Planet, PlanetMesh, TileSelection
from planetgen.settings import BiomeSettings, BiomeType, LinearColor, NoiseLayer
from planetgen.vector import Vec3


def make_planet(**kwargs):
    kwargs.setdefault("resolution", 1)
    kwargs.setdefault("radius", 100.0)
    kwargs.setdefault("noise", SimplexNoise(1337))
    return Planet(**kwargs)


@pytest.fixture
def planet():
    p = make_planet()
    p.generate()
    return p


def world_centroid(planet, index):
    corners = [planet.transform.transform_position(v) for v in planet.mesh.triangle_vertices(index)]
    return (corners[0] + corners[1] + corners[2]) / 3.0


def test_resolution_zero_is_icosahedron():
    mesh = make_planet(resolution=0).generate()
    assert len(mesh.vertices) == 12
    assert mesh.triangle_count == 20


def test_subdivision_quadruples_triangles():
    coarse = make_planet(resolution=0).generate()
    fine = make_planet(resolution=1).generate()
    assert fine.triangle_count == 4 * coarse.triangle_count
    assert all(0 <= k < len(fine.vertices) for tri in fine.triangles for k in tri)


def test_attribute_lists_match_vertex_count(planet):
    mesh = planet.mesh
    n = len(mesh.vertices)
    assert len(mesh.normals) == n
    assert len(mesh.uvs) == n
    assert len(mesh.colors) == n
    assert len(mesh.tangents) == n


def test_normals_and_tangents_are_unit_and_outward(planet):
    for vertex, normal, tangent in zip(planet.mesh.vertices, planet.mesh.normals, planet.mesh.tangents):
        assert normal.length() == pytest.approx(1.0)
        assert tangent.length() == pytest.approx(1.0)
        assert normal.dot(vertex) > 0
        assert normal.dot(tangent) == pytest.approx(0.0, abs=1e-9)


def test_vertices_never_below_radius(planet):
    for vertex in planet.mesh.vertices:
        assert vertex.length() >= planet.radius - 1e-9
        assert vertex.length() <= planet.radius * 1.2 * 2


def test_uvs_in_unit_square(planet):
    for u, v in planet.mesh.uvs:
        assert 0.0 <= u <= 1.0
        assert 0.0 <= v <= 1.0


def test_colors_come_from_biome_table(planet):
    allowed = {b.color for b in planet.biomes} | {LinearColor(0.5, 0.5, 0.5, 1.0)}
    assert set(planet.mesh.colors) <= allowed


def test_generation_is_deterministic():
    a = make_planet().generate()
    b = make_planet().generate()
    assert a.vertices == b.vertices
    assert a.colors == b.colors


def test_evaluate_noise_without_layers_is_zero():
    p = make_planet(noise_layers=[])
    point = Vec3(0.0, 0.6, 0.8)
    assert p.evaluate_noise(point) == 0.0
    assert p.point_on_planet(point) == point * p.radius


def test_disabled_layer_contributes_nothing():
    p = make_planet(noise_layers=[NoiseLayer(enabled=False)])
    assert p.evaluate_noise(Vec3(1.0, 0.0, 0.0)) == 0.0


def test_large_min_value_flattens_terrain():
    p = make_planet(noise_layers=[NoiseLayer(min_value=100.0)])
    assert p.evaluate_noise(Vec3(0.0, 0.0, 1.0)) == 0.0


def test_masked_layer_vanishes_when_first_layer_is_flat():
    base = NoiseLayer(min_value=100.0)
    detail = NoiseLayer(min_value=0.0, strength=5.0)
    p = make_planet(noise_layers=[base, detail])
    assert p.evaluate_noise(Vec3(0.0, 1.0, 0.0)) == 0.0


def test_strength_scales_single_layer():
    point = Vec3(0.0, 0.6, 0.8)
    one = make_planet(noise_layers=[NoiseLayer(min_value=0.0, strength=1.0)])
    two = make_planet(noise_layers=[NoiseLayer(min_value=0.0, strength=2.0)])
    assert two.evaluate_noise(point) == pytest.approx(2 * one.evaluate_noise(point))


def test_temperature_and_moisture_in_range(planet):
    for vertex in planet.mesh.vertices:
        unit = vertex.normalized()
        assert 0.0 <= planet.temperature(unit) <= 1.0
        assert 0.0 <= planet.moisture(unit) <= 1.0


def test_uniform_climate_stays_near_base():
    p = make_planet(equator_temperature=0.5, pole_temperature=0.5)
    for point in (Vec3(1.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0), Vec3(0.0, 0.6, 0.8)):
        assert 0.4 - 1e-9 <= p.temperature(point) <= 0.6 + 1e-9


def test_determine_biome_matches_table():
    p = make_planet()
    assert p.determine_biome(0.1, 0.5, 0.5) is BiomeType.OCEAN
    assert p.determine_biome(0.95, 0.5, 0.5) is BiomeType.SNOW_CAPPED
    assert p.determine_biome(0.5, 0.8, 0.1) is BiomeType.DESERT
    assert p.determine_biome(0.5, 0.2, 0.1) is BiomeType.TUNDRA


def test_determine_biome_defaults_to_plains():
    p = make_planet()
    assert p.determine_biome(0.5, 0.5, 0.1) is BiomeType.PLAINS
    assert make_planet(biomes=[]).determine_biome(0.1, 0.1, 0.1) is BiomeType.PLAINS


def test_biome_color_lookup_and_fallback():
    custom = LinearColor(0.1, 0.2, 0.3)
    p = make_planet(biomes=[BiomeSettings(BiomeType.FOREST, custom)])
    assert p.biome_color(BiomeType.FOREST) == custom
    assert p.biome_color(BiomeType.OCEAN) == LinearColor(0.5, 0.5, 0.5, 1.0)


def test_find_triangle_requires_mesh():
    with pytest.raises(RuntimeError):
        make_planet().find_triangle_index(Vec3(100.0, 0.0, 0.0))


def test_find_triangle_at_centroid(planet):
    for index in (0, 7, planet.mesh.triangle_count - 1):
        assert planet.find_triangle_index(world_centroid(planet, index)) == index


def test_select_highlights_and_reports(planet):
    calls = []
    planet.on_tile_selected = lambda i, loc, biome: calls.append((i, loc, biome))
    original = list(planet.mesh.colors)
    hit = world_centroid(planet, 5)

    selection = planet.select_tile_at_location(hit)

    assert isinstance(selection, TileSelection) and selection.index == 5
    assert planet.selection == selection
    assert calls == [(5, hit, selection.biome)]
    assert selection.vertices == planet.mesh.triangle_vertices(5)
    for k in planet.mesh.triangles[5]:
        assert planet.mesh.colors[k] == LinearColor(3.0, 0.0, 0.0, 1.0)
    untouched = set(range(len(original))) - set(planet.mesh.triangles[5])
    assert all(planet.mesh.colors[k] == original[k] for k in untouched)


def test_selected_biome_follows_climate(planet):
    hit = world_centroid(planet, 3)
    selection = planet.select_tile_at_location(hit)
    unit = hit.normalized()
    height = min(1.0, max(0.0, (hit.length() / planet.radius - 1.0) * 5.0))
    expected = planet.determine_biome(height, planet.temperature(unit), planet.moisture(unit))
    assert selection.biome is expected


def test_clear_selection_restores_colors(planet):
    original = list(planet.mesh.colors)
    planet.select_tile_at_location(world_centroid(planet, 2))
    planet.select_tile_at_location(world_centroid(planet, 9))
    planet.clear_selected_tile()
    assert planet.selection is None
    assert planet.mesh.colors == original


def test_disabled_selection_returns_none(planet):
    planet.enable_tile_selection = False
    original = list(planet.mesh.colors)
    assert planet.select_tile_at_location(world_centroid(planet, 0)) is None
    assert planet.mesh.colors == original


def test_select_before_generate_raises():
    with pytest.raises(RuntimeError):
        make_planet().select_tile_at_location(Vec3(100.0, 0.0, 0.0))


def test_clear_mesh_drops_mesh_and_selection(planet):
    planet.select_tile_at_location(world_centroid(planet, 1))
    planet.clear_mesh()
    assert planet.mesh is None
    assert planet.selection is None
    with pytest.raises(RuntimeError):
        planet.find_triangle_index(Vec3())


def test_tick_without_auto_rotate_keeps_transform(planet):
    before = planet.transform.rotation
    planet.tick(10.0)
    assert planet.transform.rotation == before


def test_tick_rotates_about_axis():
    p = make_planet(auto_rotate=True, rotation_speed=90.0)
    p.tick(1.0)
    moved = p.transform.transform_position(Vec3(1.0, 0.0, 0.0))
    assert moved.x == pytest.approx(0.0, abs=1e-9)
    assert moved.y == pytest.approx(1.0)
    assert moved.z == pytest.approx(0.0, abs=1e-9)


def test_selection_follows_rotation():
    p = make_planet(auto_rotate=True, rotation_speed=30.0)
    p.generate()
    p.tick(1.5)
    hit = world_centroid(p, 11)
    assert p.find_triangle_index(hit) == 11
    assert math.isclose(hit.length(), (sum(p.mesh.triangle_vertices(11), Vec3()) / 3.0).length())


def test_mesh_triangle_vertices():
    mesh = PlanetMesh(
        vertices=[Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 1.0)],
        triangles=[(2, 0, 1)],
        normals=[],
        uvs=[],
        colors=[],
        tangents=[],
    )
    assert mesh.triangle_count == 1
    assert mesh.triangle_vertices(0) == (Vec3(0.0, 0.0, 1.0), Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))