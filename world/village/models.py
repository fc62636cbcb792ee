"""
Village data model.

Everything here is a frozen value type. A generated VillageData is a
snapshot: the renderer reads it, nothing writes to it.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Tuple

from ..geometry import Rect, Vector2D


@dataclass(frozen=True)
class Zone:
    """Rectangular region of the world tied to one vault tag."""
    id: str
    name: str
    tag: str
    color: str
    x: float
    y: float
    width: float
    height: float
    note_count: int

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class VillagerAppearance:
    sprite_index: int  # Palette index 0..7
    scale: float = 1.0


@dataclass(frozen=True)
class VillagerData:
    """One villager per note."""
    id: str
    note_path: str
    note_name: str
    note_length: int
    home_position: Vector2D
    zone_id: str
    appearance: VillagerAppearance


@dataclass(frozen=True)
class StructureData:
    """A non-interactive world object: fountain, bench, sign, house, decoration or tree."""
    id: str
    type: str
    position: Vector2D  # Centre of the footprint
    width: float
    height: float
    zone_id: Optional[str] = None
    label: Optional[str] = None
    blocking: bool = False
    variant: Optional[int] = None

    @property
    def bounds(self) -> Rect:
        return Rect.centered(self.position, self.width, self.height)


@dataclass(frozen=True)
class VillageData:
    """Complete result of one generation run."""
    seed: str
    zones: Tuple[Zone, ...]
    villagers: Tuple[VillagerData, ...]
    structures: Tuple[StructureData, ...]
    spawn_point: Vector2D
    world_size: Tuple[float, float]  # (width, height)
    playable_area: Rect  # Inside the forest border
    plaza_bounds: Rect

    def zone_by_id(self, zone_id: str) -> Optional[Zone]:
        for zone in self.zones:
            if zone.id == zone_id:
                return zone
        return None

    def structures_of_type(self, structure_type: str) -> Tuple[StructureData, ...]:
        return tuple(s for s in self.structures if s.type == structure_type)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict for JSON export."""
        data = asdict(self)
        data["world_size"] = {"width": self.world_size[0], "height": self.world_size[1]}
        return data
