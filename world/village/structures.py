"""
Plaza furniture, zone signs and houses.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from settings import (
    BENCH_INSET,
    SIGN_OFFSET,
    HOUSE_SIZE,
    HOUSE_MAX_ATTEMPTS,
    HOUSE_BASE_RADIUS,
    HOUSE_RADIUS_STEP,
)
from ..geometry import Rect, Vector2D
from ..seeded_random import SeededRandom
from .models import StructureData, VillagerData, Zone
from .placement import Obstacles, find_free_position

logger = logging.getLogger("note_village.structures")

# Footprint (width, height) per structure type
STRUCTURE_SIZES: Dict[str, Tuple[float, float]] = {
    "fountain": (48, 48),
    "bench": (32, 16),
    "sign": (24, 24),
    "house": (HOUSE_SIZE, HOUSE_SIZE),
    "flower_bed": (32, 32),
    "bush": (24, 24),
    "rock": (20, 20),
    "tall_grass": (16, 16),
    "barrel": (16, 16),
    "crate": (16, 16),
    "tree": (32, 32),
}

HOUSE_VARIANTS = 3


def make_structure(structure_id: str, structure_type: str, position: Vector2D, **extra) -> StructureData:
    """Build a StructureData with the standard footprint for its type."""
    width, height = STRUCTURE_SIZES[structure_type]
    return StructureData(
        id=structure_id,
        type=structure_type,
        position=position,
        width=width,
        height=height,
        **extra,
    )


def plaza_structures(plaza: Rect) -> List[StructureData]:
    """Fountain in the middle of the plaza and a bench near each corner."""
    structures = [make_structure("fountain-central", "fountain", plaza.center)]

    corners = [
        (plaza.x + BENCH_INSET, plaza.y + BENCH_INSET),
        (plaza.right - BENCH_INSET, plaza.y + BENCH_INSET),
        (plaza.right - BENCH_INSET, plaza.bottom - BENCH_INSET),
        (plaza.x + BENCH_INSET, plaza.bottom - BENCH_INSET),
    ]
    for i, (x, y) in enumerate(corners):
        structures.append(make_structure(f"bench-{i}", "bench", Vector2D(x, y)))

    return structures


def zone_signs(zones: Sequence[Zone]) -> List[StructureData]:
    """One labelled sign at the top-centre of each zone."""
    return [
        make_structure(
            f"sign-{zone.id}",
            "sign",
            Vector2D(zone.x + zone.width / 2, zone.y + SIGN_OFFSET),
            zone_id=zone.id,
            label=zone.name,
        )
        for zone in zones
    ]


def place_houses(
    villagers: Sequence[VillagerData],
    zones: Sequence[Zone],
    houses_per_villager: float,
    obstacles: Obstacles,
    rng: SeededRandom,
) -> Tuple[List[StructureData], int]:
    """
    Give a random subset of villagers a house near their home.

    Each villager is picked independently with probability
    ``houses_per_villager``. Placed houses are added to ``obstacles``.

    Returns:
        (houses placed, number of houses skipped for lack of space)
    """
    zone_map = {zone.id: zone for zone in zones}
    housed = [v for v in villagers if rng.next_bool(houses_per_villager)]
    width, height = STRUCTURE_SIZES["house"]

    houses: List[StructureData] = []
    skipped = 0
    for villager in housed:
        zone = zone_map.get(villager.zone_id)
        if zone is None:
            continue

        position = find_free_position(
            rng,
            villager.home_position,
            width,
            height,
            zone.rect,
            obstacles,
            max_attempts=HOUSE_MAX_ATTEMPTS,
            base_radius=HOUSE_BASE_RADIUS,
            radius_step=HOUSE_RADIUS_STEP,
        )
        if position is None:
            skipped += 1
            logger.debug(f"No room for house of {villager.id} in {zone.id}")
            continue

        house = make_structure(
            f"house-{villager.id}",
            "house",
            position,
            zone_id=zone.id,
            blocking=True,
            variant=rng.next_int(0, HOUSE_VARIANTS - 1),
        )
        obstacles.add(house.bounds)
        houses.append(house)

    return houses, skipped
