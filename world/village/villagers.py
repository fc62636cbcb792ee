"""
Villager allocation and creation.

The villager cap is shared between zones in proportion to how many notes
each zone has. Within a zone the stalest notes are picked first.
"""

import logging
import math
from typing import Dict, List, Mapping, Sequence

from settings import VILLAGER_PADDING, VILLAGER_PALETTES
from vault.notes import ScannedNote
from ..seeded_random import SeededRandom
from .models import VillagerAppearance, VillagerData, Zone

logger = logging.getLogger("note_village.villagers")

MIN_SCALE = 1.0
MAX_SCALE = 1.5
SCALE_FACTOR = 0.0003


def villager_scale(content_length: int) -> float:
    """Larger notes make slightly larger villagers, between 1.0 and 1.5."""
    scale = MIN_SCALE + math.sqrt(max(0, content_length)) * SCALE_FACTOR
    return min(MAX_SCALE, max(MIN_SCALE, scale))


def villager_id(note_path: str) -> str:
    return f"villager-{note_path}"


def allocate_slots(available: Sequence[int], cap: int) -> List[int]:
    """
    Split ``cap`` villager slots across zones (weighted round-robin).

    Each zone first gets floor(cap * share) slots, never more than it has
    notes. Leftover slots go out one at a time, round-robin, to zones that
    still have unallocated notes. Zones with more notes come first in each
    round (ties keep zone order), so a larger zone never ends up with fewer
    slots than a smaller one.

    Args:
        available: Number of notes per zone, in zone order
        cap: Maximum total villagers

    Returns:
        Slots per zone, in zone order; sums to min(cap, sum(available))
    """
    total = sum(available)
    if total == 0 or cap <= 0:
        return [0] * len(available)

    slots = [min(count, math.floor(cap * count / total)) for count in available]
    remaining = cap - sum(slots)

    order = sorted(range(len(available)), key=lambda i: -available[i])
    while remaining > 0:
        progressed = False
        for i in order:
            if remaining == 0:
                break
            if slots[i] < available[i]:
                slots[i] += 1
                remaining -= 1
                progressed = True
        if not progressed:
            # Every zone is out of notes
            break

    return slots


def sort_notes_for_allocation(notes: Sequence[ScannedNote], stale_first: bool = True) -> List[ScannedNote]:
    """Order notes oldest first (or newest first); path breaks ties."""
    if stale_first:
        return sorted(notes, key=lambda n: (n.sort_time, n.path))
    return sorted(notes, key=lambda n: (-n.sort_time, n.path))


def create_villager(note: ScannedNote, zone: Zone, rng: SeededRandom) -> VillagerData:
    """
    Create a villager for a note, living somewhere inside its zone.

    The home position is uniform over the zone shrunk by VILLAGER_PADDING.
    """
    position = rng.next_point_in_rect(zone.x, zone.y, zone.width, zone.height, VILLAGER_PADDING)
    return VillagerData(
        id=villager_id(note.path),
        note_path=note.path,
        note_name=note.name,
        note_length=note.content_length,
        home_position=position,
        zone_id=zone.id,
        appearance=VillagerAppearance(
            sprite_index=rng.next_int(0, VILLAGER_PALETTES - 1),
            scale=villager_scale(note.content_length),
        ),
    )


def generate_villagers(
    zones: Sequence[Zone],
    notes_by_tag: Mapping[str, Sequence[ScannedNote]],
    max_villagers: int,
    rng: SeededRandom,
    stale_first: bool = True,
) -> List[VillagerData]:
    """
    Allocate villager slots and create one villager per chosen note.

    Returns an empty list when no zone has notes.
    """
    sorted_notes: Dict[str, List[ScannedNote]] = {
        zone.id: sort_notes_for_allocation(notes_by_tag.get(zone.tag, []), stale_first)
        for zone in zones
    }
    slots = allocate_slots([len(sorted_notes[zone.id]) for zone in zones], max_villagers)

    villagers: List[VillagerData] = []
    seen_paths = set()
    for zone, count in zip(zones, slots):
        for note in sorted_notes[zone.id][:count]:
            if note.path in seen_paths:
                logger.debug(f"Note {note.path} already has a villager, skipping")
                continue
            seen_paths.add(note.path)
            villagers.append(create_villager(note, zone, rng))

    logger.debug(
        f"Allocated {len(villagers)} villagers across {len(zones)} zones "
        f"(cap {max_villagers}, slots {slots})"
    )
    return villagers
