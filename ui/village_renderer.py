"""
Village rendering.

Draws a VillageData snapshot onto a pygame surface through a camera. The
snapshot is only read; live villager positions can be passed in separately.
"""

from typing import Dict, Optional, Tuple

import pygame

from settings import COLOR_BG, COLOR_FOREST, COLOR_GRASS, COLOR_PLAZA
from engine.sprites.sprite_cache import SpriteCache
from world.geometry import Rect, Vector2D
from world.village.models import VillageData

ZONE_ALPHA = 90


class VillageRenderer:
    """Renders zones, plaza, structures and villagers."""

    def __init__(self, sprite_cache: SpriteCache):
        self.sprite_cache = sprite_cache
        self._font: Optional[pygame.font.Font] = None

    def _label_font(self) -> Optional[pygame.font.Font]:
        if self._font is None and pygame.font.get_init():
            self._font = pygame.font.Font(None, 18)
        return self._font

    def render(
        self,
        data: VillageData,
        surface: pygame.Surface,
        camera: Tuple[float, float] = (0.0, 0.0),
        zoom: float = 1.0,
        villager_positions: Optional[Dict[str, Vector2D]] = None,
    ) -> None:
        """
        Draw the village.

        Args:
            data: Village snapshot
            surface: Target surface
            camera: World coordinate shown at the surface's top-left corner
            zoom: Pixels per world unit
            villager_positions: Current positions by villager id (defaults to home)
        """
        cam_x, cam_y = camera

        def to_screen(rect: Rect) -> pygame.Rect:
            return pygame.Rect(
                round((rect.x - cam_x) * zoom),
                round((rect.y - cam_y) * zoom),
                max(1, round(rect.width * zoom)),
                max(1, round(rect.height * zoom)),
            )

        surface.fill(COLOR_BG)
        world_w, world_h = data.world_size
        pygame.draw.rect(surface, COLOR_FOREST, to_screen(Rect(0, 0, world_w, world_h)))
        pygame.draw.rect(surface, COLOR_GRASS, to_screen(data.playable_area))

        # Zones as translucent colored squares
        for zone in data.zones:
            screen_rect = to_screen(zone.rect)
            overlay = pygame.Surface(screen_rect.size, pygame.SRCALPHA)
            color = pygame.Color(zone.color)
            color.a = ZONE_ALPHA
            overlay.fill(color)
            surface.blit(overlay, screen_rect.topleft)

        pygame.draw.rect(surface, COLOR_PLAZA, to_screen(data.plaza_bounds))

        font = self._label_font()
        for structure in data.structures:
            screen_rect = to_screen(structure.bounds)
            if not surface.get_rect().colliderect(screen_rect):
                continue
            sprite = self.sprite_cache.structure(structure.type, screen_rect.size, structure.variant)
            surface.blit(sprite, screen_rect.topleft)
            if structure.label and font is not None and zoom >= 0.5:
                text = font.render(structure.label, True, (255, 255, 255))
                surface.blit(text, text.get_rect(midbottom=screen_rect.midtop))

        positions = villager_positions or {}
        for villager in data.villagers:
            pos = positions.get(villager.id, villager.home_position)
            sprite = self.sprite_cache.villager(
                villager.appearance.sprite_index, villager.appearance.scale * zoom
            )
            center = (round((pos.x - cam_x) * zoom), round((pos.y - cam_y) * zoom))
            surface.blit(sprite, sprite.get_rect(center=center))

    def render_overview(self, data: VillageData, max_size: Tuple[int, int]) -> pygame.Surface:
        """Whole village scaled to fit inside ``max_size``."""
        world_w, world_h = data.world_size
        zoom = min(max_size[0] / world_w, max_size[1] / world_h)
        surface = pygame.Surface((max(1, int(world_w * zoom)), max(1, int(world_h * zoom))))
        self.render(data, surface, (0.0, 0.0), zoom)
        return surface
