"""
Minimap: the whole village in a small square, with villager and player dots.
"""

from typing import Dict, Optional

import pygame

from settings import COLOR_PLAYER, COLOR_VILLAGER
from world.geometry import Vector2D
from world.village.models import VillageData

BACKGROUND_COLOR = (0, 0, 0, 153)
BORDER_COLOR = (255, 255, 255, 77)
FOREST_COLOR = (30, 80, 30, 128)
ZONE_ALPHA = 77


class Minimap:
    """Renders a fixed-size overview of a village."""

    def __init__(self, size: int = 150, padding: int = 8):
        self.size = size
        self.padding = padding

    def scale_for(self, data: VillageData) -> float:
        world_w, world_h = data.world_size
        inner = self.size - self.padding * 2
        return min(inner / world_w, inner / world_h)

    def render(
        self,
        data: VillageData,
        villager_positions: Optional[Dict[str, Vector2D]] = None,
        player_position: Optional[Vector2D] = None,
    ) -> pygame.Surface:
        """
        Draw the minimap.

        Args:
            data: Village snapshot
            villager_positions: Live positions by id (defaults to home positions)
            player_position: Player position in world coordinates, if any

        Returns:
            A size x size surface with per-pixel alpha
        """
        surface = pygame.Surface((self.size, self.size), pygame.SRCALPHA)
        world_w, world_h = data.world_size
        scale = self.scale_for(data)
        scaled_w = world_w * scale
        scaled_h = world_h * scale
        offset_x = (self.size - scaled_w) / 2
        offset_y = (self.size - scaled_h) / 2

        pygame.draw.rect(surface, BACKGROUND_COLOR, (0, 0, self.size, self.size), border_radius=8)
        pygame.draw.rect(surface, BORDER_COLOR, (0, 0, self.size, self.size), 1, border_radius=8)

        # Forest strips around the playable area
        playable = data.playable_area
        top = playable.y * scale
        bottom = playable.bottom * scale
        left = playable.x * scale
        right = playable.right * scale
        strips = [
            (offset_x, offset_y, scaled_w, top),
            (offset_x, offset_y + bottom, scaled_w, scaled_h - bottom),
            (offset_x, offset_y + top, left, bottom - top),
            (offset_x + right, offset_y + top, scaled_w - right, bottom - top),
        ]
        for rect in strips:
            pygame.draw.rect(surface, FOREST_COLOR, _int_rect(*rect))

        for zone in data.zones:
            color = pygame.Color(zone.color)
            color.a = ZONE_ALPHA
            pygame.draw.rect(surface, color, _int_rect(
                offset_x + zone.x * scale,
                offset_y + zone.y * scale,
                zone.width * scale,
                zone.height * scale,
            ))

        positions = villager_positions or {}
        for villager in data.villagers:
            pos = positions.get(villager.id, villager.home_position)
            center = (round(offset_x + pos.x * scale), round(offset_y + pos.y * scale))
            pygame.draw.circle(surface, COLOR_VILLAGER, center, 2)

        if player_position is not None:
            center = (round(offset_x + player_position.x * scale), round(offset_y + player_position.y * scale))
            pygame.draw.circle(surface, COLOR_PLAYER, center, 4)
            pygame.draw.circle(surface, (255, 255, 255), center, 4, 1)

        return surface


def _int_rect(x: float, y: float, w: float, h: float) -> pygame.Rect:
    return pygame.Rect(round(x), round(y), max(0, round(w)), max(0, round(h)))
