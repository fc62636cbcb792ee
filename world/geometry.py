"""
2D geometry helpers: points, axis-aligned rectangles and overlap tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Vector2D:
    """A point in world space."""
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def distance_to(self, other: Vector2D) -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle, top-left origin."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def centered(cls, center: Vector2D, width: float, height: float) -> Rect:
        """Build a rectangle of the given size centred on a point."""
        return cls(center.x - width / 2, center.y - height / 2, width, height)

    @property
    def right(self) -> float:
        """Right edge (exclusive)."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge (exclusive)."""
        return self.y + self.height

    @property
    def center(self) -> Vector2D:
        return Vector2D(self.x + self.width / 2, self.y + self.height / 2)

    def intersects(self, other: Rect) -> bool:
        """Check if this rectangle overlaps another (touching edges do not count)."""
        return (
            self.x < other.right
            and self.right > other.x
            and self.y < other.bottom
            and self.bottom > other.y
        )

    def contains_point(self, point: Vector2D) -> bool:
        """Check if a point lies strictly inside this rectangle."""
        return self.x < point.x < self.right and self.y < point.y < self.bottom

    def contains_rect(self, other: Rect) -> bool:
        return (
            self.x <= other.x
            and self.y <= other.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def inflate(self, padding: float) -> Rect:
        """Grow the rectangle by ``padding`` on every side."""
        return Rect(
            self.x - padding,
            self.y - padding,
            self.width + 2 * padding,
            self.height + 2 * padding,
        )

    def inset(self, padding: float) -> Rect:
        return self.inflate(-padding)


def boxes_overlap(candidate: Rect, obstacles: Iterable[Rect], spacing: float = 0.0) -> bool:
    """
    Check a candidate box against a set of placed boxes.

    The candidate is inflated by ``spacing`` before testing, so placed items
    keep at least that much room between them.
    """
    padded = candidate.inflate(spacing) if spacing else candidate
    return any(padded.intersects(box) for box in obstacles)


def clamp_center(center: Vector2D, width: float, height: float, bounds: Rect) -> Vector2D:
    """
    Move a centre point so a ``width`` x ``height`` footprint fits inside ``bounds``.

    If the footprint is larger than the bounds it is centred on them.
    """
    half_w = width / 2
    half_h = height / 2
    if width >= bounds.width:
        x = bounds.center.x
    else:
        x = min(max(center.x, bounds.x + half_w), bounds.right - half_w)
    if height >= bounds.height:
        y = bounds.center.y
    else:
        y = min(max(center.y, bounds.y + half_h), bounds.bottom - half_h)
    return Vector2D(x, y)
