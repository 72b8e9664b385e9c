# core/interval.py
import math

INFINITY = math.inf


class Interval:
    """
    A closed real interval [min, max]. An interval with min > max is empty.
    Used for ray parameter ranges and for the extents of bounding boxes.
    """
    def __init__(self, min: float = INFINITY, max: float = -INFINITY):
        self.min = min
        self.max = max

    @staticmethod
    def enclosing(a: "Interval", b: "Interval") -> "Interval":
        """The tightest interval containing both a and b."""
        return Interval(a.min if a.min <= b.min else b.min,
                        a.max if a.max >= b.max else b.max)

    def size(self) -> float:
        return self.max - self.min

    def is_empty(self) -> bool:
        return self.min > self.max

    def contains(self, x: float) -> bool:
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        if x < self.min:
            return self.min
        if x > self.max:
            return self.max
        return x

    def expand(self, delta: float) -> "Interval":
        """Grow by delta in total, half on each side."""
        padding = delta / 2
        return Interval(self.min - padding, self.max + padding)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    __hash__ = None

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


EMPTY = Interval(INFINITY, -INFINITY)
UNIVERSE = Interval(-INFINITY, INFINITY)
