"""Icosahedron construction and midpoint subdivision onto the unit sphere."""

from __future__ import annotations

import math

from planetgen.vector import Vec3

Triangle = tuple[int, int, int]

_T = (1.0 + math.sqrt(5.0)) / 2.0

_ICOSAHEDRON_VERTICES = (
    (-1.0, _T, 0.0), (1.0, _T, 0.0), (-1.0, -_T, 0.0), (1.0, -_T, 0.0),
    (0.0, -1.0, _T), (0.0, 1.0, _T), (0.0, -1.0, -_T), (0.0, 1.0, -_T),
    (_T, 0.0, -1.0), (_T, 0.0, 1.0), (-_T, 0.0, -1.0), (-_T, 0.0, 1.0),
)

_ICOSAHEDRON_TRIANGLES: tuple[Triangle, ...] = (
    # five faces around vertex 0
    (0, 5, 11), (0, 1, 5), (0, 7, 1), (0, 10, 7), (0, 11, 10),
    # five adjacent faces
    (1, 9, 5), (5, 4, 11), (11, 2, 10), (10, 6, 7), (7, 8, 1),
    # five faces around vertex 3
    (3, 4, 9), (3, 2, 4), (3, 6, 2), (3, 8, 6), (3, 9, 8),
    # five adjacent faces
    (4, 5, 9), (2, 11, 4), (6, 10, 2), (8, 7, 6), (9, 1, 8),
)


def create_icosahedron() -> tuple[list[Vec3], list[Triangle]]:
    """Return the twelve unit-sphere vertices and twenty faces of an icosahedron."""
    vertices = [Vec3(*coords).normalized() for coords in _ICOSAHEDRON_VERTICES]
    return vertices, list(_ICOSAHEDRON_TRIANGLES)


def subdivide(
    vertices: list[Vec3],
    triangles: list[Triangle],
    subdivisions: int,
) -> tuple[list[Vec3], list[Triangle]]:
    """Split every triangle into four, ``subdivisions`` times, projecting new points to the sphere.

    The inputs are left untouched; new vertex and triangle lists are returned.
    """
    vertices = list(vertices)
    triangles = list(triangles)
    if subdivisions <= 0:
        return vertices, triangles

    midpoints: dict[tuple[int, int], int] = {}

    def middle(p1: int, p2: int) -> int:
        key = (p1, p2) if p1 < p2 else (p2, p1)
        index = midpoints.get(key)
        if index is None:
            point = (vertices[p1] + vertices[p2]) * 0.5
            vertices.append(point.normalized())
            index = len(vertices) - 1
            midpoints[key] = index
        return index

    for _ in range(subdivisions):
        refined: list[Triangle] = []
        for v1, v2, v3 in triangles:
            a = middle(v1, v2)
            b = middle(v2, v3)
            c = middle(v3, v1)
            refined.extend(((v1, a, c), (v2, b, a), (v3, c, b), (a, b, c)))
        triangles = refined

    return vertices, triangles