"""
Bounded placement search for houses and decorations.

Each search makes a fixed number of attempts and returns None when no
free spot turns up; callers simply skip the item.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from settings import STRUCTURE_SPACING
from ..geometry import Rect, Vector2D, boxes_overlap, clamp_center
from ..seeded_random import SeededRandom

# Produces a candidate centre for attempt number ``attempt``
PointSampler = Callable[[int], Vector2D]


class Obstacles:
    """Footprints of everything placed so far."""

    def __init__(self) -> None:
        self.boxes: List[Rect] = []

    def add(self, box: Rect) -> None:
        self.boxes.append(box)

    def is_free(self, box: Rect, spacing: float = STRUCTURE_SPACING) -> bool:
        return not boxes_overlap(box, self.boxes, spacing)

    def __len__(self) -> int:
        return len(self.boxes)


def find_free_position_with(
    sampler: PointSampler,
    width: float,
    height: float,
    bounds: Rect,
    obstacles: Obstacles,
    max_attempts: int,
) -> Optional[Vector2D]:
    """
    Try up to ``max_attempts`` sampled positions.

    Each sample is clamped so the whole footprint stays inside ``bounds``.

    Returns:
        Centre of the first collision-free footprint, or None
    """
    attempt = 0
    while attempt < max_attempts:
        center = clamp_center(sampler(attempt), width, height, bounds)
        if obstacles.is_free(Rect.centered(center, width, height)):
            return center
        attempt += 1
    return None


def expanding_radius(base_radius: float, radius_step: float) -> Callable[[int], float]:
    """Search radius for each attempt: base, base + step, base + 2*step, ..."""
    return lambda attempt: base_radius + attempt * radius_step


def find_free_position(
    rng: SeededRandom,
    origin: Vector2D,
    width: float,
    height: float,
    bounds: Rect,
    obstacles: Obstacles,
    max_attempts: int,
    base_radius: float,
    radius_step: float,
) -> Optional[Vector2D]:
    """
    Search for a free spot near ``origin`` with a growing search radius.

    Attempt k samples a uniform point within base_radius + k * radius_step
    of the origin.
    """
    radius = expanding_radius(base_radius, radius_step)

    def sample(attempt: int) -> Vector2D:
        return rng.next_point_in_circle(origin.x, origin.y, radius(attempt))

    return find_free_position_with(sample, width, height, bounds, obstacles, max_attempts)
