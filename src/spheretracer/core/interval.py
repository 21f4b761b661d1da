# core/interval.py
import math


class Interval:
    """
    A scalar range [min, max]. The default interval is empty.
    """
    EMPTY: "Interval"
    UNIVERSE: "Interval"

    def __init__(self, lo: float = math.inf, hi: float = -math.inf):
        self.min = lo
        self.max = hi

    def size(self) -> float:
        return self.max - self.min

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

    def __repr__(self) -> str:
        return f"Interval({self.min}, {self.max})"


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)
