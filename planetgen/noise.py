"""Seeded simplex noise in one to four dimensions, plus fractal Brownian motion."""

from __future__ import annotations

import math
import random

DEFAULT_SEED = 1337

_F2 = 0.366025403  # (sqrt(3) - 1) / 2
_G2 = 0.211324865  # (3 - sqrt(3)) / 6
_F3 = 1.0 / 3.0
_G3 = 1.0 / 6.0
_F4 = (math.sqrt(5.0) - 1.0) / 4.0
_G4 = (5.0 - math.sqrt(5.0)) / 20.0

# Ranks of the x, y, z, w offsets for each of the 64 possible orderings.
_SIMPLEX4 = (
    (0, 1, 2, 3), (0, 1, 3, 2), (0, 0, 0, 0), (0, 2, 3, 1), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (1, 2, 3, 0),
    (0, 2, 1, 3), (0, 0, 0, 0), (0, 3, 1, 2), (0, 3, 2, 1), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (1, 3, 2, 0),
    (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0),
    (1, 2, 0, 3), (0, 0, 0, 0), (1, 3, 0, 2), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (2, 3, 0, 1), (2, 3, 1, 0),
    (1, 0, 2, 3), (1, 0, 3, 2), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (2, 0, 3, 1), (0, 0, 0, 0), (2, 1, 3, 0),
    (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0),
    (2, 0, 1, 3), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (3, 0, 1, 2), (3, 0, 2, 1), (0, 0, 0, 0), (3, 1, 2, 0),
    (2, 1, 0, 3), (0, 0, 0, 0), (0, 0, 0, 0), (0, 0, 0, 0), (3, 1, 0, 2), (0, 0, 0, 0), (3, 2, 0, 1), (3, 2, 1, 0),
)


def _grad1(hash_: int, x: float) -> float:
    h = hash_ & 15
    grad = 1.0 + (h & 7)
    if h & 8:
        grad = -grad
    return grad * x


def _grad2(hash_: int, x: float, y: float) -> float:
    h = hash_ & 7
    u, v = (x, y) if h < 4 else (y, x)
    return (-u if h & 1 else u) + (-2.0 * v if h & 2 else 2.0 * v)


def _grad3(hash_: int, x: float, y: float, z: float) -> float:
    h = hash_ & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h in (12, 14):
        v = x
    else:
        v = z
    return (-u if h & 1 else u) + (-v if h & 2 else v)


def _grad4(hash_: int, x: float, y: float, z: float, w: float) -> float:
    h = hash_ & 31
    u = x if h < 24 else y
    v = y if h < 16 else z
    t = z if h < 8 else w
    return (-u if h & 1 else u) + (-v if h & 2 else v) + (-t if h & 4 else t)


def _corner(t: float, grad: float) -> float:
    if t < 0.0:
        return 0.0
    t *= t
    return t * t * grad


class SimplexNoise:
    """Simplex noise driven by a permutation table shuffled from a seed."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._perm: tuple[int, ...] = ()
        self.seed = seed
        self.reseed(seed)

    def reseed(self, seed: int) -> None:
        """Rebuild the permutation table from ``seed``."""
        table = list(range(256))
        random.Random(seed).shuffle(table)
        self._perm = tuple(table + table)
        self.seed = seed

    @property
    def permutation(self) -> tuple[int, ...]:
        """The 256-entry permutation in use."""
        return self._perm[:256]

    def noise1d(self, x: float) -> float:
        perm = self._perm
        i0 = math.floor(x)
        i1 = i0 + 1
        x0 = x - i0
        x1 = x0 - 1.0

        t0 = 1.0 - x0 * x0
        t0 *= t0
        n0 = t0 * t0 * _grad1(perm[i0 & 0xFF], x0)

        t1 = 1.0 - x1 * x1
        t1 *= t1
        n1 = t1 * t1 * _grad1(perm[i1 & 0xFF], x1)

        return 0.395 * (n0 + n1)

    def noise2d(self, x: float, y: float) -> float:
        perm = self._perm
        s = (x + y) * _F2
        i = math.floor(x + s)
        j = math.floor(y + s)
        t = (i + j) * _G2
        x0 = x - (i - t)
        y0 = y - (j - t)

        i1, j1 = (1, 0) if x0 > y0 else (0, 1)

        x1 = x0 - i1 + _G2
        y1 = y0 - j1 + _G2
        x2 = x0 - 1.0 + 2.0 * _G2
        y2 = y0 - 1.0 + 2.0 * _G2

        ii = i & 0xFF
        jj = j & 0xFF

        n0 = _corner(0.5 - x0 * x0 - y0 * y0, _grad2(perm[ii + perm[jj]], x0, y0))
        n1 = _corner(0.5 - x1 * x1 - y1 * y1, _grad2(perm[ii + i1 + perm[jj + j1]], x1, y1))
        n2 = _corner(0.5 - x2 * x2 - y2 * y2, _grad2(perm[ii + 1 + perm[jj + 1]], x2, y2))

        return 40.0 * (n0 + n1 + n2)

    def noise3d(self, x: float, y: float, z: float) -> float:
        perm = self._perm
        s = (x + y + z) * _F3
        i = math.floor(x + s)
        j = math.floor(y + s)
        k = math.floor(z + s)
        t = (i + j + k) * _G3
        x0 = x - (i - t)
        y0 = y - (j - t)
        z0 = z - (k - t)

        if x0 >= y0:
            if y0 >= z0:
                i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 1, 0
            elif x0 >= z0:
                i1, j1, k1, i2, j2, k2 = 1, 0, 0, 1, 0, 1
            else:
                i1, j1, k1, i2, j2, k2 = 0, 0, 1, 1, 0, 1
        else:
            if y0 < z0:
                i1, j1, k1, i2, j2, k2 = 0, 0, 1, 0, 1, 1
            elif x0 < z0:
                i1, j1, k1, i2, j2, k2 = 0, 1, 0, 0, 1, 1
            else:
                i1, j1, k1, i2, j2, k2 = 0, 1, 0, 1, 1, 0

        x1, y1, z1 = x0 - i1 + _G3, y0 - j1 + _G3, z0 - k1 + _G3
        x2, y2, z2 = x0 - i2 + 2.0 * _G3, y0 - j2 + 2.0 * _G3, z0 - k2 + 2.0 * _G3
        x3, y3, z3 = x0 - 1.0 + 3.0 * _G3, y0 - 1.0 + 3.0 * _G3, z0 - 1.0 + 3.0 * _G3

        ii = i & 0xFF
        jj = j & 0xFF
        kk = k & 0xFF

        n0 = _corner(
            0.6 - x0 * x0 - y0 * y0 - z0 * z0,
            _grad3(perm[ii + perm[jj + perm[kk]]], x0, y0, z0),
        )
        n1 = _corner(
            0.6 - x1 * x1 - y1 * y1 - z1 * z1,
            _grad3(perm[ii + i1 + perm[jj + j1 + perm[kk + k1]]], x1, y1, z1),
        )
        n2 = _corner(
            0.6 - x2 * x2 - y2 * y2 - z2 * z2,
            _grad3(perm[ii + i2 + perm[jj + j2 + perm[kk + k2]]], x2, y2, z2),
        )
        n3 = _corner(
            0.6 - x3 * x3 - y3 * y3 - z3 * z3,
            _grad3(perm[ii + 1 + perm[jj + 1 + perm[kk + 1]]], x3, y3, z3),
        )

        return 32.0 * (n0 + n1 + n2 + n3)

    def noise4d(self, x: float, y: float, z: float, w: float) -> float:
        perm = self._perm
        s = (x + y + z + w) * _F4
        i = math.floor(x + s)
        j = math.floor(y + s)
        k = math.floor(z + s)
        l = math.floor(w + s)  # noqa: E741
        t = (i + j + k + l) * _G4
        x0 = x - (i - t)
        y0 = y - (j - t)
        z0 = z - (k - t)
        w0 = w - (l - t)

        c = (
            (32 if x0 > y0 else 0)
            + (16 if x0 > z0 else 0)
            + (8 if y0 > z0 else 0)
            + (4 if x0 > w0 else 0)
            + (2 if y0 > w0 else 0)
            + (1 if z0 > w0 else 0)
        )
        ranks = _SIMPLEX4[c]
        o1 = [1 if r >= 3 else 0 for r in ranks]
        o2 = [1 if r >= 2 else 0 for r in ranks]
        o3 = [1 if r >= 1 else 0 for r in ranks]

        origin = (x0, y0, z0, w0)
        offsets = [
            ((0, 0, 0, 0), 0.0),
            (tuple(o1), _G4),
            (tuple(o2), 2.0 * _G4),
            (tuple(o3), 3.0 * _G4),
            ((1, 1, 1, 1), 4.0 * _G4),
        ]
        ii, jj, kk, ll = i & 0xFF, j & 0xFF, k & 0xFF, l & 0xFF

        total = 0.0
        for (a, b, cc, d), shift in offsets:
            px, py, pz, pw = (coord - off + shift for coord, off in zip(origin, (a, b, cc, d)))
            hash_ = perm[ii + a + perm[jj + b + perm[kk + cc + perm[ll + d]]]]
            total += _corner(
                0.6 - px * px - py * py - pz * pz - pw * pw,
                _grad4(hash_, px, py, pz, pw),
            )

        return 27.0 * total

    def fbm(
        self,
        x: float,
        y: float,
        z: float,
        octaves: int,
        persistence: float,
        lacunarity: float,
    ) -> float:
        """Sum ``octaves`` layers of 3D noise, normalised by the total amplitude."""
        if octaves < 1:
            raise ValueError("octaves must be at least 1")
        total = 0.0
        frequency = 1.0
        amplitude = 1.0
        max_value = 0.0
        for _ in range(octaves):
            total += self.noise3d(x * frequency, y * frequency, z * frequency) * amplitude
            max_value += amplitude
            amplitude *= persistence
            frequency *= lacunarity
        if max_value == 0.0:
            raise ValueError("total amplitude is zero")
        return total / max_value


_default = SimplexNoise(DEFAULT_SEED)


def set_noise_seed(seed: int) -> None:
    """Reseed the shared noise generator used by the module-level functions."""
    _default.reseed(seed)


def simplex_noise1d(x: float) -> float:
    return _default.noise1d(x)


def simplex_noise2d(x: float, y: float) -> float:
    return _default.noise2d(x, y)


def simplex_noise3d(x: float, y: float, z: float) -> float:
    return _default.noise3d(x, y, z)


def simplex_noise4d(x: float, y: float, z: float, w: float) -> float:
    return _default.noise4d(x, y, z, w)


def simplex_noise_fbm(
    x: float,
    y: float,
    z: float,
    octaves: int,
    persistence: float,
    lacunarity: float,
) -> float:
    return _default.fbm(x, y, z, octaves, persistence, lacunarity)