# core/utils.py
import math
import random
import threading
from typing import Optional
from core.vector import Vector3


class RandomSource(random.Random):
    """
    Uniform random source handed to every sampling routine.

    Each render task should own one; sharing a single instance across threads
    makes results depend on scheduling.
    """
    def random_range(self, low: float, high: float) -> float:
        """Uniform float in [low, high)."""
        return low + (high - low) * self.random()

    def random_int(self, low: int, high: int) -> int:
        """Uniform integer in [low, high], both ends inclusive."""
        return self.randint(low, high)


_thread_state = threading.local()


def get_rng(rng: Optional[RandomSource] = None) -> RandomSource:
    """
    Returns rng if given, otherwise a generator private to the calling thread.
    """
    if rng is not None:
        return rng
    local = getattr(_thread_state, "rng", None)
    if local is None:
        local = RandomSource()
        _thread_state.rng = local
    return local


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def random_vector(rng: RandomSource, low: float = 0.0, high: float = 1.0) -> Vector3:
    return Vector3(rng.random_range(low, high),
                   rng.random_range(low, high),
                   rng.random_range(low, high))


def random_in_unit_sphere(rng: RandomSource) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        p = random_vector(rng, -1.0, 1.0)
        if p.dot(p) < 1.0:
            return p


def random_unit_vector(rng: RandomSource) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Points too close to the center lose precision when normalized.
        if p.dot(p) > 1e-160:
            return p.normalize()


def random_in_unit_disk(rng: RandomSource) -> Vector3:
    """Random point in the z=0 unit disk, used for defocus sampling."""
    while True:
        p = Vector3(rng.random_range(-1, 1), rng.random_range(-1, 1), 0)
        if p.dot(p) < 1:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Snell refraction of the unit vector uv through a surface with unit normal n.
    The result is unit length whenever refraction is physically possible.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel
