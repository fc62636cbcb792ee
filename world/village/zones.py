"""
Zone layout: a near-square grid of fixed-size zones around a central plaza.
"""

import math
import re
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from settings import FOREST_BORDER_WIDTH, ZONE_GAP
from vault.notes import TagCount
from ..geometry import Rect
from .models import Zone


# Zone color palette - earthy, village-like colors
ZONE_COLORS = [
    "#8B4513",  # Saddle brown
    "#6B8E23",  # Olive drab
    "#2E8B57",  # Sea green
    "#4682B4",  # Steel blue
    "#CD853F",  # Peru
    "#708090",  # Slate gray
    "#9ACD32",  # Yellow green
    "#BC8F8F",  # Rosy brown
    "#8FBC8F",  # Dark sea green
    "#DEB887",  # Burlywood
    "#5F9EA0",  # Cadet blue
    "#D2691E",  # Chocolate
    "#6495ED",  # Cornflower blue
    "#DC143C",  # Crimson
    "#00CED1",  # Dark turquoise
    "#9932CC",  # Dark orchid
    "#FF8C00",  # Dark orange
    "#556B2F",  # Dark olive green
    "#8B008B",  # Dark magenta
    "#483D8B",  # Dark slate blue
]


@dataclass(frozen=True)
class ZoneLayout:
    """Result of laying out the grid."""
    zones: Tuple[Zone, ...]
    plaza: Rect
    world_width: float
    world_height: float
    playable_area: Rect


def format_tag_as_zone_name(tag: str) -> str:
    """'#side-projects' -> 'Side Projects'."""
    words = [w for w in re.split(r"[-_]+", tag.lstrip("#")) if w]
    return " ".join(w[:1].upper() + w[1:] for w in words)


def grid_dimensions(cell_count: int) -> Tuple[int, int]:
    """Columns and rows of the smallest near-square grid holding ``cell_count`` cells."""
    cols = max(1, math.ceil(math.sqrt(cell_count)))
    rows = max(1, math.ceil(cell_count / cols))
    return cols, rows


def plaza_cell(cols: int, rows: int) -> Tuple[int, int]:
    """
    The cell nearest the grid centre, as (col, row).

    Ties go to the first cell in row-major order.
    """
    center_col = (cols - 1) / 2
    center_row = (rows - 1) / 2
    best = (0, 0)
    best_dist = math.inf
    for row in range(rows):
        for col in range(cols):
            dist = (col - center_col) ** 2 + (row - center_row) ** 2
            if dist < best_dist:
                best_dist = dist
                best = (col, row)
    return best


def layout_zones(
    top_tags: Sequence[TagCount],
    zone_size: float,
    plaza_size: float,
    margin: float,
) -> ZoneLayout:
    """
    Lay out one zone per tag on a grid with the plaza in the middle cell.

    Args:
        top_tags: Tags in rank order; zone i gets tag i
        zone_size: Side of every (square) zone
        plaza_size: Side of the (square) plaza
        margin: Extra space between the grid and the forest border

    Returns:
        ZoneLayout with zones, plaza bounds and world/playable dimensions
    """
    cols, rows = grid_dimensions(len(top_tags) + 1)
    plaza_col, plaza_row = plaza_cell(cols, rows)

    # Every cell has the same pitch so the plaza cell can hold the plaza
    cell_size = max(zone_size, plaza_size)
    pitch = cell_size + ZONE_GAP
    origin = FOREST_BORDER_WIDTH + margin

    def cell_rect(col: int, row: int, size: float) -> Rect:
        # Centre a square of ``size`` inside the cell
        inset = (cell_size - size) / 2
        return Rect(origin + col * pitch + inset, origin + row * pitch + inset, size, size)

    zones: List[Zone] = []
    tag_index = 0
    for row in range(rows):
        for col in range(cols):
            if (col, row) == (plaza_col, plaza_row):
                continue
            if tag_index >= len(top_tags):
                break
            tag = top_tags[tag_index]
            rect = cell_rect(col, row, zone_size)
            zones.append(Zone(
                id=f"zone-{tag_index}",
                name=format_tag_as_zone_name(tag.tag),
                tag=tag.tag,
                color=ZONE_COLORS[tag_index % len(ZONE_COLORS)],
                x=rect.x,
                y=rect.y,
                width=rect.width,
                height=rect.height,
                note_count=tag.count,
            ))
            tag_index += 1

    plaza = cell_rect(plaza_col, plaza_row, plaza_size)

    grid_width = cols * pitch - ZONE_GAP
    grid_height = rows * pitch - ZONE_GAP
    world_width = grid_width + 2 * margin + 2 * FOREST_BORDER_WIDTH
    world_height = grid_height + 2 * margin + 2 * FOREST_BORDER_WIDTH
    playable = Rect(
        FOREST_BORDER_WIDTH,
        FOREST_BORDER_WIDTH,
        world_width - 2 * FOREST_BORDER_WIDTH,
        world_height - 2 * FOREST_BORDER_WIDTH,
    )

    return ZoneLayout(
        zones=tuple(zones),
        plaza=plaza,
        world_width=world_width,
        world_height=world_height,
        playable_area=playable,
    )
