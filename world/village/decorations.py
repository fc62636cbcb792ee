"""
Decorations: flower beds around the plaza and a small menu per zone.
"""

import logging
from typing import List, Sequence, Tuple

from settings import (
    DECORATION_MAX_ATTEMPTS,
    DECORATION_EDGE_BAND,
    NEAR_HOUSE_RADIUS,
)
from ..geometry import Rect, Vector2D
from ..seeded_random import SeededRandom
from .models import StructureData, Zone
from .placement import Obstacles, PointSampler, find_free_position_with
from .structures import STRUCTURE_SIZES, make_structure

logger = logging.getLogger("note_village.decorations")

# Fractional (x, y) positions of flower beds inside the plaza, mirrored on both axes
PLAZA_FLOWER_BEDS = [
    (0.38, 0.1), (0.62, 0.1),
    (0.38, 0.9), (0.62, 0.9),
    (0.1, 0.38), (0.1, 0.62),
    (0.9, 0.38), (0.9, 0.62),
]

# (type, placement, count at density 0.1) for each zone
ZONE_DECORATIONS = [
    ("bush", "edge", 4),
    ("rock", "edge", 3),
    ("tall_grass", "edge", 5),
    ("barrel", "near_house", 2),
    ("crate", "near_house", 2),
    ("flower_bed", "uniform", 2),
]

REFERENCE_DENSITY = 0.1
DECORATION_VARIANTS = 3


def decoration_count(base_count: int, density: float) -> int:
    """Scale a menu count by density (0.1 gives the base count)."""
    return int(round(base_count * density / REFERENCE_DENSITY))


def place_plaza_flower_beds(plaza: Rect, obstacles: Obstacles) -> List[StructureData]:
    """Flower beds at fixed spots around the plaza edge; skipped if they collide."""
    width, height = STRUCTURE_SIZES["flower_bed"]
    beds: List[StructureData] = []
    for i, (fx, fy) in enumerate(PLAZA_FLOWER_BEDS):
        center = Vector2D(plaza.x + plaza.width * fx, plaza.y + plaza.height * fy)
        box = Rect.centered(center, width, height)
        if not plaza.contains_rect(box) or not obstacles.is_free(box):
            continue
        bed = make_structure(f"flower_bed-plaza-{i}", "flower_bed", center)
        obstacles.add(bed.bounds)
        beds.append(bed)
    return beds


def edge_sampler(rng: SeededRandom, zone: Rect) -> PointSampler:
    """Points within DECORATION_EDGE_BAND of a random zone edge."""
    band = min(DECORATION_EDGE_BAND, zone.width / 2, zone.height / 2)

    def sample(_attempt: int) -> Vector2D:
        side = rng.next_int(0, 3)
        if side == 0:  # top
            return rng.next_point_in_rect(zone.x, zone.y, zone.width, band)
        if side == 1:  # bottom
            return rng.next_point_in_rect(zone.x, zone.bottom - band, zone.width, band)
        if side == 2:  # left
            return rng.next_point_in_rect(zone.x, zone.y, band, zone.height)
        return rng.next_point_in_rect(zone.right - band, zone.y, band, zone.height)

    return sample


def near_house_sampler(rng: SeededRandom, houses: Sequence[StructureData]) -> PointSampler:
    """Points within NEAR_HOUSE_RADIUS of a random house."""
    def sample(_attempt: int) -> Vector2D:
        house = rng.pick(houses)
        return rng.next_point_in_circle(house.position.x, house.position.y, NEAR_HOUSE_RADIUS)

    return sample


def uniform_sampler(rng: SeededRandom, zone: Rect) -> PointSampler:
    def sample(_attempt: int) -> Vector2D:
        return rng.next_point_in_rect(zone.x, zone.y, zone.width, zone.height)

    return sample


def place_zone_decorations(
    zone: Zone,
    houses: Sequence[StructureData],
    density: float,
    obstacles: Obstacles,
    rng: SeededRandom,
) -> Tuple[List[StructureData], int]:
    """
    Place the decoration menu inside one zone.

    Near-house items are skipped when the zone has no houses.

    Returns:
        (decorations placed, number skipped for lack of space)
    """
    bounds = zone.rect
    zone_houses = [h for h in houses if h.zone_id == zone.id]
    placed: List[StructureData] = []
    skipped = 0
    index = 0

    for decoration_type, placement, base_count in ZONE_DECORATIONS:
        if placement == "near_house" and not zone_houses:
            continue

        if placement == "edge":
            sampler = edge_sampler(rng, bounds)
        elif placement == "near_house":
            sampler = near_house_sampler(rng, zone_houses)
        else:
            sampler = uniform_sampler(rng, bounds)

        width, height = STRUCTURE_SIZES[decoration_type]
        for _ in range(decoration_count(base_count, density)):
            position = find_free_position_with(
                sampler, width, height, bounds, obstacles, DECORATION_MAX_ATTEMPTS
            )
            if position is None:
                skipped += 1
                continue

            decoration = make_structure(
                f"{decoration_type}-{zone.id}-{index}",
                decoration_type,
                position,
                zone_id=zone.id,
                variant=rng.next_int(0, DECORATION_VARIANTS - 1),
            )
            obstacles.add(decoration.bounds)
            placed.append(decoration)
            index += 1

    if skipped:
        logger.debug(f"Skipped {skipped} decorations in {zone.id}")
    return placed, skipped
