"""
Village system: layout generation, villagers, structures and the live roster.
"""

from .generation import VillageGenerator
from .models import (
    Zone,
    VillagerAppearance,
    VillagerData,
    StructureData,
    VillageData,
)
from .roster import VillageRoster
from .villagers import allocate_slots, create_villager, villager_scale
from .zones import ZONE_COLORS, format_tag_as_zone_name

__all__ = [
    # Generation
    "VillageGenerator",
    # Data
    "Zone",
    "VillagerAppearance",
    "VillagerData",
    "StructureData",
    "VillageData",
    # Villagers
    "VillageRoster",
    "allocate_slots",
    "create_villager",
    "villager_scale",
    # Zones
    "ZONE_COLORS",
    "format_tag_as_zone_name",
]
