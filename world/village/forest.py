"""
Forest border: a band of blocking trees around the playable area.
"""

from typing import List

from settings import TREE_SPACING, TREE_JITTER, TREE_VARIANTS
from ..geometry import Rect, Vector2D
from ..seeded_random import SeededRandom
from .models import StructureData
from .structures import make_structure


def generate_forest(
    world_width: float,
    world_height: float,
    playable_area: Rect,
    rng: SeededRandom,
) -> List[StructureData]:
    """
    Tile trees over every grid point between the world edge and the playable area.

    Trees sit on a TREE_SPACING grid, each nudged by up to TREE_JITTER.
    """
    trees: List[StructureData] = []
    half = TREE_SPACING / 2

    y = half
    while y < world_height:
        x = half
        while x < world_width:
            if not playable_area.contains_point(Vector2D(x, y)):
                jittered = Vector2D(
                    x + rng.next_float(-TREE_JITTER, TREE_JITTER),
                    y + rng.next_float(-TREE_JITTER, TREE_JITTER),
                )
                trees.append(make_structure(
                    f"tree-{len(trees)}",
                    "tree",
                    jittered,
                    blocking=True,
                    variant=rng.next_int(0, TREE_VARIANTS - 1),
                ))
            x += TREE_SPACING
        y += TREE_SPACING

    return trees
