"""
Deterministic pseudo-random numbers for village generation.

Uses a linear congruential generator so the same seed gives the same
sequence on every run and platform. Villages rely on this: re-opening a
vault with the same seed must rebuild the same world.
"""

import math
from typing import MutableSequence, Optional, Sequence, TypeVar, Union

from .geometry import Vector2D

T = TypeVar("T")

# LCG constants (same multiplier/increment as the classic C rand())
LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MODULUS = 2 ** 31


def hash_seed(text: str) -> int:
    """
    Hash a string into a non-negative 32-bit seed.

    Polynomial rolling hash ``h * 31 + ch``, wrapped to a signed 32-bit
    integer at every step and returned as its magnitude.
    """
    h = 0
    for ch in text:
        h = ((h << 5) - h + ord(ch)) & 0xFFFFFFFF
    if h >= 0x80000000:
        h -= 0x100000000
    return abs(h)


class SeededRandom:
    """Seeded LCG with helpers for ints, floats, picks, shuffles and points."""

    def __init__(self, seed: Union[int, str]):
        self._seed = hash_seed(seed) if isinstance(seed, str) else int(seed)

    def next(self) -> float:
        """Advance the generator and return a float in [0, 1)."""
        self._seed = (LCG_MULTIPLIER * self._seed + LCG_INCREMENT) % LCG_MODULUS
        return self._seed / LCG_MODULUS

    def next_int(self, min_value: int, max_value: int) -> int:
        """Random integer in [min_value, max_value], both inclusive."""
        return math.floor(self.next() * (max_value - min_value + 1)) + min_value

    def next_float(self, min_value: float, max_value: float) -> float:
        """Random float in [min_value, max_value)."""
        return self.next() * (max_value - min_value) + min_value

    def next_bool(self, probability: float = 0.5) -> bool:
        """True with the given probability."""
        return self.next() < probability

    def pick(self, items: Sequence[T]) -> Optional[T]:
        """Pick a random element, or None for an empty sequence."""
        if len(items) == 0:
            return None
        return items[self.next_int(0, len(items) - 1)]

    def shuffle(self, items: MutableSequence[T]) -> MutableSequence[T]:
        """Shuffle in place (Fisher-Yates) and return the same object."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(0, i)
            items[i], items[j] = items[j], items[i]
        return items

    def next_point_in_circle(self, center_x: float, center_y: float, radius: float) -> Vector2D:
        """Uniform point inside a disk."""
        angle = self.next() * math.pi * 2
        r = math.sqrt(self.next()) * radius
        return Vector2D(center_x + r * math.cos(angle), center_y + r * math.sin(angle))

    def next_point_in_ring(
        self,
        center_x: float,
        center_y: float,
        inner_radius: float,
        outer_radius: float,
    ) -> Vector2D:
        """Uniform point inside an annulus."""
        angle = self.next() * math.pi * 2
        r = self._ring_radius(inner_radius, outer_radius)
        return Vector2D(center_x + r * math.cos(angle), center_y + r * math.sin(angle))

    def next_point_in_wedge(
        self,
        center_x: float,
        center_y: float,
        inner_radius: float,
        outer_radius: float,
        start_angle: float,
        end_angle: float,
    ) -> Vector2D:
        """Uniform point inside an angular sector of an annulus (angles in radians)."""
        angle = self.next_float(start_angle, end_angle)
        r = self._ring_radius(inner_radius, outer_radius)
        return Vector2D(center_x + r * math.cos(angle), center_y + r * math.sin(angle))

    def next_point_in_rect(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        padding: float = 0,
    ) -> Vector2D:
        """
        Uniform point inside a rectangle shrunk by ``padding`` on every side.

        Each axis is half-open like next_float: x lies in
        [x + padding, x + width - padding), and likewise for y.
        """
        return Vector2D(
            self.next_float(x + padding, x + width - padding),
            self.next_float(y + padding, y + height - padding),
        )

    def get_seed(self) -> int:
        """Current internal state (for checkpointing)."""
        return self._seed

    def set_seed(self, seed: int) -> None:
        """Restore a state previously returned by get_seed()."""
        self._seed = seed

    def _ring_radius(self, inner_radius: float, outer_radius: float) -> float:
        # Area-weighted so points are uniform over the ring, not bunched at the centre
        inner_sq = inner_radius * inner_radius
        return math.sqrt(self.next() * (outer_radius * outer_radius - inner_sq) + inner_sq)

