"""Small 3D vector, quaternion and rigid-transform types used by the planet mesh."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

SMALL_NUMBER = 1e-8


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec3:
        return Vec3(self.x / divisor, self.y / divisor, self.z / divisor)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def normalized(self) -> Vec3:
        """Unit vector in the same direction, or the zero vector if too short."""
        square = self.length_squared()
        if square == 1.0:
            return self
        if square < SMALL_NUMBER:
            return Vec3()
        return self / math.sqrt(square)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dist_squared(self, other: Vec3) -> float:
        return (self - other).length_squared()


ZERO = Vec3(0.0, 0.0, 0.0)
UP = Vec3(0.0, 0.0, 1.0)
FORWARD = Vec3(1.0, 0.0, 0.0)
ONE = Vec3(1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class Quat:
    """A rotation quaternion; the default is the identity."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @staticmethod
    def from_axis_angle(axis: Vec3, angle: float) -> Quat:
        """Rotation of ``angle`` radians about ``axis``."""
        unit = axis.normalized()
        half = angle * 0.5
        s = math.sin(half)
        return Quat(unit.x * s, unit.y * s, unit.z * s, math.cos(half))

    def __mul__(self, other: Quat) -> Quat:
        a, b = self, other
        return Quat(
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y - a.x * b.z + a.y * b.w + a.z * b.x,
            a.w * b.z + a.x * b.y - a.y * b.x + a.z * b.w,
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
        )

    def conjugate(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, self.w)

    def normalized(self) -> Quat:
        size = math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)
        if size < SMALL_NUMBER:
            return Quat()
        return Quat(self.x / size, self.y / size, self.z / size, self.w / size)

    def rotate(self, v: Vec3) -> Vec3:
        """Apply this rotation to ``v``."""
        q = Vec3(self.x, self.y, self.z)
        t = q.cross(v) * 2.0
        return v + t * self.w + q.cross(t)


@dataclass
class Transform:
    """Location, rotation and per-axis scale of an object in the world."""

    location: Vec3 = field(default_factory=Vec3)
    rotation: Quat = field(default_factory=Quat)
    scale: Vec3 = ONE

    def transform_position(self, v: Vec3) -> Vec3:
        """Map a local-space point into world space."""
        scaled = Vec3(v.x * self.scale.x, v.y * self.scale.y, v.z * self.scale.z)
        return self.rotation.rotate(scaled) + self.location

    def add_local_rotation(self, rotation: Quat) -> None:
        """Rotate the object about its own local axes."""
        self.rotation = (self.rotation * rotation).normalized()