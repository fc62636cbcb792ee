"""
Village generation.

Turns tag and note statistics from a vault into a complete, deterministic
VillageData: zones, villagers, structures, decorations and forest.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from vault.sources import NoteSource, TagSource
from ..generation.config import VillageGeneratorOptions
from ..seeded_random import SeededRandom
from .decorations import place_plaza_flower_beds, place_zone_decorations
from .forest import generate_forest
from .models import VillageData
from .placement import Obstacles
from .structures import place_houses, plaza_structures, zone_signs
from .villagers import generate_villagers
from .zones import layout_zones

logger = logging.getLogger("note_village.generator")


class VillageGenerator:
    """
    Generates a village layout from vault data.

    The generator keeps no state between calls: every generate() starts a
    fresh SeededRandom from the seed, so repeated calls with unchanged vault
    data return identical villages.
    """

    def __init__(
        self,
        tag_source: TagSource,
        note_source: NoteSource,
        options: Union[VillageGeneratorOptions, Mapping[str, Any]],
    ):
        """
        Args:
            tag_source: Ranks tags by frequency
            note_source: Groups notes by tag
            options: Generator options (validated here)

        Raises:
            ConfigurationError: if any option is out of range
        """
        # Own copy; the caller's object may change afterwards
        if isinstance(options, VillageGeneratorOptions):
            options = options.to_dict()
        self.options = VillageGeneratorOptions.from_dict(options)
        self.tag_source = tag_source
        self.note_source = note_source

    def generate(self) -> VillageData:
        """Generate complete village data."""
        options = self.options
        logger.debug(f"Generating village: {options.to_dict()}")
        rng = SeededRandom(options.seed)

        # Tag ranking
        self.tag_source.set_excluded_folders(options.excluded_folders)
        self.tag_source.set_excluded_tags(options.excluded_tags)
        self.note_source.set_excluded_folders(options.excluded_folders)

        top_tags = self.tag_source.get_top_tags(options.top_tag_count)
        notes_by_tag = self.note_source.get_notes_grouped_by_tag([t.tag for t in top_tags])

        # Zone layout
        layout = layout_zones(
            top_tags,
            zone_size=options.zone_width,
            plaza_size=options.plaza_radius * 2,
            margin=options.zone_inner_radius - options.plaza_radius,
        )
        zones = layout.zones

        # Villagers
        villagers = generate_villagers(
            zones,
            notes_by_tag,
            options.max_villagers,
            rng,
            stale_first=options.prioritize_stale_notes,
        )

        # Fixed structures, then houses tested against everything before them
        obstacles = Obstacles()
        fixed = plaza_structures(layout.plaza) + zone_signs(zones)
        for structure in fixed:
            obstacles.add(structure.bounds)

        houses, skipped_houses = place_houses(
            villagers, zones, options.houses_per_villager, obstacles, rng
        )

        # Decorations
        decorations = place_plaza_flower_beds(layout.plaza, obstacles)
        skipped_decorations = 0
        for zone in zones:
            placed, skipped = place_zone_decorations(
                zone, houses, options.decoration_density, obstacles, rng
            )
            decorations.extend(placed)
            skipped_decorations += skipped

        # Forest border
        trees = generate_forest(layout.world_width, layout.world_height, layout.playable_area, rng)

        structures = fixed + houses + decorations + trees

        logger.info(
            f"Village '{options.seed}': {len(zones)} zones, {len(villagers)} villagers, "
            f"{len(structures)} structures ({len(houses)} houses, {len(decorations)} decorations, "
            f"{len(trees)} trees); skipped {skipped_houses} houses, {skipped_decorations} decorations"
        )

        return VillageData(
            seed=options.seed,
            zones=tuple(zones),
            villagers=tuple(villagers),
            structures=tuple(structures),
            spawn_point=layout.plaza.center,
            world_size=(layout.world_width, layout.world_height),
            playable_area=layout.playable_area,
            plaza_bounds=layout.plaza,
        )
