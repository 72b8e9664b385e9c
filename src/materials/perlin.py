# materials/perlin.py
import math
from typing import Optional
import numpy as np
from numba import njit
from core.utils import RandomSource, get_rng
from core.vector import Point3

POINT_COUNT = 256


@njit
def _noise(ranvec, perm_x, perm_y, perm_z, x, y, z):
    fx = math.floor(x)
    fy = math.floor(y)
    fz = math.floor(z)
    u = x - fx
    v = y - fy
    w = z - fz
    i = int(fx)
    j = int(fy)
    k = int(fz)

    # Hermite smoothing of the fractional offsets.
    uu = u * u * (3.0 - 2.0 * u)
    vv = v * v * (3.0 - 2.0 * v)
    ww = w * w * (3.0 - 2.0 * w)

    accum = 0.0
    for di in range(2):
        for dj in range(2):
            for dk in range(2):
                idx = (perm_x[(i + di) & 255]
                       ^ perm_y[(j + dj) & 255]
                       ^ perm_z[(k + dk) & 255])
                dot = (ranvec[idx, 0] * (u - di)
                       + ranvec[idx, 1] * (v - dj)
                       + ranvec[idx, 2] * (w - dk))
                accum += ((di * uu + (1 - di) * (1.0 - uu))
                          * (dj * vv + (1 - dj) * (1.0 - vv))
                          * (dk * ww + (1 - dk) * (1.0 - ww))
                          * dot)
    return accum


@njit
def _turbulence(ranvec, perm_x, perm_y, perm_z, x, y, z, depth):
    accum = 0.0
    weight = 1.0
    for _ in range(depth):
        accum += weight * _noise(ranvec, perm_x, perm_y, perm_z, x, y, z)
        weight *= 0.5
        x *= 2.0
        y *= 2.0
        z *= 2.0
    return abs(accum)


class Perlin:
    """
    Gradient noise over a 256-entry lattice of random unit vectors, hashed by
    three independent permutation tables.
    """
    def __init__(self, rng: Optional[RandomSource] = None):
        rng = get_rng(rng)
        self.ranvec = np.empty((POINT_COUNT, 3), dtype=np.float64)
        for i in range(POINT_COUNT):
            while True:
                g = np.array([rng.random_range(-1.0, 1.0) for _ in range(3)])
                length = np.linalg.norm(g)
                if length > 1e-8:
                    break
            self.ranvec[i] = g / length
        self.perm_x = self._generate_perm(rng)
        self.perm_y = self._generate_perm(rng)
        self.perm_z = self._generate_perm(rng)

    @staticmethod
    def _generate_perm(rng: RandomSource) -> np.ndarray:
        p = np.arange(POINT_COUNT, dtype=np.int64)
        # Fisher-Yates shuffle driven by the caller's random source.
        for i in range(POINT_COUNT - 1, 0, -1):
            target = rng.random_int(0, i)
            p[i], p[target] = p[target], p[i]
        return p

    def noise(self, p: Point3) -> float:
        """Noise value in roughly [-1, 1]; continuous across lattice cells."""
        return float(_noise(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                            float(p.x), float(p.y), float(p.z)))

    def turb(self, p: Point3, depth: int = 7) -> float:
        """Absolute sum of depth octaves, doubling frequency and halving weight."""
        return float(_turbulence(self.ranvec, self.perm_x, self.perm_y, self.perm_z,
                                 float(p.x), float(p.y), float(p.z), int(depth)))
