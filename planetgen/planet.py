"""Procedural planet: a noise-displaced icosphere coloured by climate-driven biomes."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from planetgen.icosphere import Triangle, create_icosahedron, subdivide
from planetgen.noise import SimplexNoise, simplex_noise3d
from planetgen.settings import (
    GREY,
    BiomeSettings,
    BiomeType,
    LinearColor,
    NoiseLayer,
    default_biomes,
)
from planetgen.vector import FORWARD, SMALL_NUMBER, UP, Quat, Transform, Vec3

logger = logging.getLogger(__name__)

TileSelectedCallback = Callable[[int, Vec3, BiomeType], None]


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _lerp(a: float, b: float, alpha: float) -> float:
    return a + (b - a) * alpha


@dataclass
class PlanetMesh:
    """The generated surface: positions in local space plus per-vertex attributes."""

    vertices: list[Vec3]
    triangles: list[Triangle]
    normals: list[Vec3]
    uvs: list[tuple[float, float]]
    colors: list[LinearColor]
    tangents: list[Vec3]

    @property
    def triangle_count(self) -> int:
        return len(self.triangles)

    def triangle_vertices(self, index: int) -> tuple[Vec3, Vec3, Vec3]:
        """Local-space corners of triangle ``index``."""
        a, b, c = self.triangles[index]
        return self.vertices[a], self.vertices[b], self.vertices[c]


@dataclass(frozen=True)
class TileSelection:
    """A selected triangle of the planet surface."""

    index: int
    location: Vec3
    biome: BiomeType
    vertices: tuple[Vec3, ...]


@dataclass
class Planet:
    """Planet settings together with the mesh generated from them."""

    radius: float = 1000.0
    resolution: int = 4
    noise_layers: list[NoiseLayer] = field(default_factory=lambda: [NoiseLayer()])
    biomes: list[BiomeSettings] = field(default_factory=default_biomes)
    equator_temperature: float = 1.0
    pole_temperature: float = 0.0
    moisture_scale: float = 1.0
    material: Any = None
    auto_rotate: bool = False
    rotation_speed: float = 1.0
    rotation_axis: Vec3 = UP
    enable_tile_selection: bool = True
    selected_tile_color: LinearColor = LinearColor(1.0, 0.0, 0.0, 1.0)
    selected_tile_highlight_intensity: float = 3.0
    transform: Transform = field(default_factory=Transform)
    noise: SimplexNoise | None = None
    on_tile_selected: TileSelectedCallback | None = None
    mesh: PlanetMesh | None = field(default=None, init=False)
    selection: TileSelection | None = field(default=None, init=False)
    _original_colors: list[LinearColor] = field(default_factory=list, init=False, repr=False)

    def _noise3d(self, point: Vec3) -> float:
        if self.noise is None:
            return simplex_noise3d(point.x, point.y, point.z)
        return self.noise.noise3d(point.x, point.y, point.z)

    def generate(self) -> PlanetMesh:
        """Build the mesh from the current settings, replacing any previous one."""
        self.clear_mesh()
        base_vertices, base_triangles = create_icosahedron()
        unit_vertices, triangles = subdivide(base_vertices, base_triangles, self.resolution)

        positions: list[Vec3] = []
        normals: list[Vec3] = []
        uvs: list[tuple[float, float]] = []
        colors: list[LinearColor] = []
        tangents: list[Vec3] = []

        for vertex in unit_vertices:
            unit = vertex.normalized()
            point = self.point_on_planet(unit)
            positions.append(point)

            normal = (point - self.transform.location).normalized()
            normals.append(normal)

            u = 0.5 + math.atan2(unit.y, unit.x) / (2.0 * math.pi)
            v = 0.5 - math.asin(_clamp(unit.z, -1.0, 1.0)) / math.pi
            uvs.append((u, v))

            height = _clamp((point.length() - self.radius) / (self.radius * 0.2), 0.0, 1.0)
            biome = self.determine_biome(height, self.temperature(unit), self.moisture(unit))
            colors.append(self.biome_color(biome))

            tangent = normal.cross(UP)
            if tangent.length_squared() < SMALL_NUMBER:
                tangent = normal.cross(FORWARD)
            tangents.append(tangent.normalized())

        self.mesh = PlanetMesh(positions, triangles, normals, uvs, colors, tangents)
        logger.info(
            "Planet generated with %d vertices and %d triangles", len(positions), len(triangles)
        )
        return self.mesh

    def clear_mesh(self) -> None:
        """Discard the generated mesh and any selection made on it."""
        self.mesh = None
        self.selection = None
        self._original_colors = []

    def evaluate_noise(self, point: Vec3) -> float:
        """Elevation above the base radius, as a fraction, at a unit-sphere point."""
        first_layer_value = 0.0
        elevation = 0.0
        weight = 1.0

        for i, layer in enumerate(self.noise_layers):
            if not layer.enabled:
                continue

            amplitude = 1.0
            frequency = layer.base_roughness
            value = 0.0
            for _ in range(layer.num_layers):
                sample = point * frequency + layer.center
                value += (self._noise3d(sample) + 1.0) * 0.5 * amplitude
                frequency *= layer.roughness
                amplitude *= layer.persistence

            if layer.min_value > 0:
                value = max(0.0, value - layer.min_value)
            value *= layer.strength

            if i == 0:
                first_layer_value = value
            else:
                value *= first_layer_value

            elevation += value * weight
            weight *= 0.5

        return elevation

    def point_on_planet(self, point: Vec3) -> Vec3:
        """Displace a unit-sphere point to the planet surface."""
        elevation = self.evaluate_noise(point)
        return point * (self.radius * (1.0 + elevation * 0.2))

    def temperature(self, point: Vec3) -> float:
        """Temperature in [0, 1], warmest at the equator, with some noise."""
        latitude_factor = 1.0 - abs(point.z)
        base = _lerp(self.pole_temperature, self.equator_temperature, latitude_factor)
        variation = self._noise3d(point * 3.7) * 0.1
        return _clamp(base + variation, 0.0, 1.0)

    def moisture(self, point: Vec3) -> float:
        """Moisture in [0, 1], drier towards the poles."""
        sample = point * (5.3 * self.moisture_scale)
        value = (self._noise3d(sample) + 1.0) * 0.5
        latitude_factor = 1.0 - abs(point.z)
        value *= _lerp(0.7, 1.0, latitude_factor)
        return _clamp(value, 0.0, 1.0)

    def determine_biome(self, height: float, temperature: float, moisture: float) -> BiomeType:
        """The first biome whose ranges hold the values, or plains."""
        for biome in self.biomes:
            if biome.matches(height, temperature, moisture):
                return biome.biome_type
        return BiomeType.PLAINS

    def biome_color(self, biome_type: BiomeType) -> LinearColor:
        """Colour of the first biome of ``biome_type``, or grey if none is configured."""
        for biome in self.biomes:
            if biome.biome_type == biome_type:
                return biome.color
        return GREY

    def find_triangle_index(self, hit_location: Vec3) -> int | None:
        """Index of the triangle whose world-space centre is nearest ``hit_location``."""
        if self.mesh is None or not self.mesh.triangles:
            raise RuntimeError("planet has not been generated")

        vertices = self.mesh.vertices
        count = len(vertices)
        closest_distance = math.inf
        closest_index: int | None = None

        for index, (a, b, c) in enumerate(self.mesh.triangles):
            if a >= count or b >= count or c >= count:
                continue
            world = [self.transform.transform_position(vertices[k]) for k in (a, b, c)]
            center = (world[0] + world[1] + world[2]) / 3.0
            distance = hit_location.dist_squared(center)
            if distance < closest_distance:
                closest_distance = distance
                closest_index = index

        if closest_index is None:
            logger.warning("No valid triangle found near %s", hit_location)
        return closest_index

    def select_tile_at_location(self, hit_location: Vec3) -> TileSelection | None:
        """Select and highlight the triangle under a world-space hit point.

        Returns ``None`` when tile selection is disabled or no triangle is found.
        """
        if not self.enable_tile_selection:
            logger.warning("Tile selection is disabled")
            return None
        if self.mesh is None:
            raise RuntimeError("planet has not been generated")

        self.clear_selected_tile()

        index = self.find_triangle_index(hit_location)
        if index is None:
            return None

        offset = hit_location - self.transform.location
        unit = offset.normalized()
        height = _clamp((offset.length() / self.radius - 1.0) * 5.0, 0.0, 1.0)
        biome = self.determine_biome(height, self.temperature(unit), self.moisture(unit))

        corners = self._highlight(index)
        selection = TileSelection(index, hit_location, biome, corners)
        self.selection = selection
        logger.info("Selected triangle %d (%s)", index, biome.display_name)

        if self.on_tile_selected is not None:
            self.on_tile_selected(index, hit_location, biome)
        return selection

    def _highlight(self, index: int) -> tuple[Vec3, ...]:
        mesh = self.mesh
        assert mesh is not None
        if not self._original_colors:
            self._original_colors = list(mesh.colors)

        corners = mesh.triangles[index]
        if any(k >= len(mesh.colors) for k in corners):
            logger.error("Vertex indices of triangle %d are out of range", index)
            return ()

        highlight = self.selected_tile_color.scaled(self.selected_tile_highlight_intensity)
        highlight = highlight.with_alpha(1.0)
        colors = list(mesh.colors)
        for k in corners:
            colors[k] = highlight
        mesh.colors = colors
        return tuple(mesh.vertices[k] for k in corners)

    def clear_selected_tile(self) -> None:
        """Drop the current selection and restore the original vertex colours."""
        if self.selection is None:
            return
        self.selection = None
        if (
            self._original_colors
            and self.mesh is not None
            and len(self.mesh.colors) == len(self._original_colors)
        ):
            self.mesh.colors = list(self._original_colors)
            self._original_colors = []

    def tick(self, delta_time: float) -> None:
        """Advance the planet by ``delta_time`` seconds, spinning it if auto-rotate is on."""
        if not self.auto_rotate:
            return
        angle = math.radians(self.rotation_speed * delta_time)
        self.transform.add_local_rotation(Quat.from_axis_angle(self.rotation_axis, angle))