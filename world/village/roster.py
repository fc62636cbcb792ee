"""
Live villager roster.

The renderer keeps villagers in sync with vault edits (note created,
deleted, resized) without regenerating the world. The roster works on its
own copy, so the VillageData it was built from never changes.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterator, List, Optional

from .models import VillageData, VillagerData
from .villagers import villager_scale

logger = logging.getLogger("note_village.roster")


class VillageRoster:
    """Id-keyed villagers that can be added, removed and resized one at a time."""

    def __init__(self, village: VillageData):
        self.village = village
        self._villagers: Dict[str, VillagerData] = {v.id: v for v in village.villagers}

    def add_villager(self, villager: VillagerData) -> None:
        """Add a villager, replacing any villager with the same id."""
        if self.village.zone_by_id(villager.zone_id) is None:
            logger.warning(f"Villager {villager.id} belongs to unknown zone {villager.zone_id}")
        self._villagers[villager.id] = villager

    def remove_villager(self, villager_id: str) -> bool:
        """Remove a villager. Returns True if it existed."""
        return self._villagers.pop(villager_id, None) is not None

    def update_villager_size(self, villager_id: str, new_content_length: int) -> Optional[VillagerData]:
        """
        Record a note's new length and rescale its villager.

        Returns:
            The updated villager, or None if the id is unknown
        """
        villager = self._villagers.get(villager_id)
        if villager is None:
            return None
        updated = replace(
            villager,
            note_length=new_content_length,
            appearance=replace(villager.appearance, scale=villager_scale(new_content_length)),
        )
        self._villagers[villager_id] = updated
        return updated

    def get(self, villager_id: str) -> Optional[VillagerData]:
        return self._villagers.get(villager_id)

    def villagers(self) -> List[VillagerData]:
        return list(self._villagers.values())

    def snapshot(self) -> VillageData:
        """A new VillageData with the current villagers."""
        return replace(self.village, villagers=tuple(self._villagers.values()))

    def __len__(self) -> int:
        return len(self._villagers)

    def __contains__(self, villager_id: object) -> bool:
        return villager_id in self._villagers

    def __iter__(self) -> Iterator[VillagerData]:
        return iter(list(self._villagers.values()))
