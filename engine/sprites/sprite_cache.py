"""
Procedural sprite cache for the village renderer.

Sprites are small pixel-art surfaces drawn with pygame primitives and
built once per key. The cache is a plain object owned by whoever renders
(pass it by reference); there is no global instance.
"""

from typing import Dict, Optional, Tuple

import pygame

Color = Tuple[int, int, int]

# (shirt, hair, skin) per villager palette index 0..7
VILLAGER_PALETTES = [
    ((200, 60, 60), (70, 40, 20), (240, 200, 160)),
    ((60, 120, 200), (30, 20, 10), (225, 185, 145)),
    ((70, 160, 80), (200, 160, 60), (245, 210, 175)),
    ((190, 150, 50), (110, 60, 30), (200, 150, 110)),
    ((140, 80, 170), (20, 20, 20), (235, 195, 155)),
    ((220, 130, 40), (150, 40, 30), (250, 220, 190)),
    ((80, 170, 170), (90, 90, 90), (180, 130, 90)),
    ((170, 170, 170), (240, 230, 200), (230, 190, 150)),
]

STRUCTURE_COLORS: Dict[str, Color] = {
    "fountain": (65, 105, 225),
    "bench": (139, 115, 85),
    "sign": (222, 184, 135),
    "house": (139, 69, 19),
    "flower_bed": (200, 90, 140),
    "bush": (50, 130, 50),
    "rock": (130, 130, 130),
    "tall_grass": (110, 160, 70),
    "barrel": (150, 95, 50),
    "crate": (180, 140, 80),
    "tree": (34, 139, 34),
}
FALLBACK_COLOR: Color = (128, 128, 128)

VILLAGER_BASE_SIZE = (16, 24)


def shade(color: Color, amount: float) -> Color:
    """Lighten (amount > 0) or darken (amount < 0) a color."""
    if amount >= 0:
        return tuple(int(c + (255 - c) * amount) for c in color)  # type: ignore[return-value]
    return tuple(int(c * (1 + amount)) for c in color)  # type: ignore[return-value]


class SpriteCache:
    """Builds and memoises villager and structure surfaces."""

    def __init__(self) -> None:
        self._villagers: Dict[Tuple[int, int], pygame.Surface] = {}
        self._structures: Dict[Tuple[str, int, int, int], pygame.Surface] = {}
        self.hits = 0
        self.misses = 0

    def villager(self, palette_index: int, scale: float = 1.0) -> pygame.Surface:
        """Villager sprite for a palette, scaled (cached per 0.1 scale step)."""
        palette_index %= len(VILLAGER_PALETTES)
        scale_key = int(round(scale * 10))
        key = (palette_index, scale_key)
        cached = self._villagers.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        surface = self._draw_villager(VILLAGER_PALETTES[palette_index])
        if scale_key != 10:
            w, h = VILLAGER_BASE_SIZE
            surface = pygame.transform.scale(
                surface, (max(1, round(w * scale_key / 10)), max(1, round(h * scale_key / 10)))
            )
        self._villagers[key] = surface
        return surface

    def structure(self, structure_type: str, size: Tuple[int, int], variant: Optional[int] = None) -> pygame.Surface:
        """Sprite for a structure type at a footprint size."""
        key = (structure_type, size[0], size[1], variant or 0)
        cached = self._structures.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        surface = self._draw_structure(structure_type, size, variant or 0)
        self._structures[key] = surface
        return surface

    def clear(self) -> None:
        self._villagers.clear()
        self._structures.clear()

    def __len__(self) -> int:
        return len(self._villagers) + len(self._structures)

    def _draw_villager(self, palette: Tuple[Color, Color, Color]) -> pygame.Surface:
        shirt, hair, skin = palette
        surface = pygame.Surface(VILLAGER_BASE_SIZE, pygame.SRCALPHA)
        # Head, hair, body, legs
        pygame.draw.rect(surface, skin, (4, 2, 8, 8))
        pygame.draw.rect(surface, hair, (4, 1, 8, 3))
        pygame.draw.rect(surface, shirt, (3, 10, 10, 8))
        pygame.draw.rect(surface, shade(shirt, -0.4), (4, 18, 3, 5))
        pygame.draw.rect(surface, shade(shirt, -0.4), (9, 18, 3, 5))
        return surface

    def _draw_structure(self, structure_type: str, size: Tuple[int, int], variant: int) -> pygame.Surface:
        w, h = size
        base = STRUCTURE_COLORS.get(structure_type, FALLBACK_COLOR)
        # Variants are slightly lighter/darker takes on the same sprite
        color = shade(base, (variant - 1) * 0.15)
        surface = pygame.Surface((w, h), pygame.SRCALPHA)

        if structure_type == "house":
            roof = shade(color, -0.3)
            pygame.draw.rect(surface, color, (0, h // 3, w, h - h // 3))
            pygame.draw.polygon(surface, roof, [(0, h // 3), (w // 2, 0), (w - 1, h // 3)])
            pygame.draw.rect(surface, (60, 40, 20), (w // 2 - 4, h - 12, 8, 12))
        elif structure_type in ("tree", "bush"):
            if structure_type == "tree":
                pygame.draw.rect(surface, (101, 67, 33), (w // 2 - 3, h // 2, 6, h // 2))
            pygame.draw.circle(surface, color, (w // 2, h // 2 - (4 if structure_type == "tree" else 0)), min(w, h) // 2 - 1)
        elif structure_type == "fountain":
            pygame.draw.circle(surface, (160, 160, 160), (w // 2, h // 2), min(w, h) // 2)
            pygame.draw.circle(surface, color, (w // 2, h // 2), min(w, h) // 2 - 5)
        elif structure_type in ("rock", "flower_bed"):
            pygame.draw.ellipse(surface, color, (0, 0, w, h))
        elif structure_type == "sign":
            pygame.draw.rect(surface, (101, 67, 33), (w // 2 - 2, h // 2, 4, h // 2))
            pygame.draw.rect(surface, color, (0, 0, w, h // 2 + 2))
        else:
            pygame.draw.rect(surface, color, (0, 0, w, h))
            pygame.draw.rect(surface, shade(color, -0.3), (0, 0, w, h), 1)

        return surface
