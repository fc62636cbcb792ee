"""
Unit tests for the sprite cache.
"""

import pygame
import pytest
from engine.sprites.sprite_cache import SpriteCache, VILLAGER_BASE_SIZE, VILLAGER_PALETTES, shade


class TestShade:
    """Tests for the shade helper."""

    def test_lighten_and_darken(self):
        assert shade((100, 100, 100), 0) == (100, 100, 100)
        assert shade((100, 100, 100), 1.0) == (255, 255, 255)
        assert shade((100, 100, 100), -0.5) == (50, 50, 50)


class TestSpriteCache:
    """Tests for SpriteCache."""

    def test_villager_sprite_cached(self):
        cache = SpriteCache()
        first = cache.villager(3, 1.0)
        second = cache.villager(3, 1.0)
        assert first is second
        assert cache.misses == 1
        assert cache.hits == 1
        assert first.get_size() == VILLAGER_BASE_SIZE

    def test_villager_scale_buckets(self):
        cache = SpriteCache()
        assert cache.villager(0, 1.21) is cache.villager(0, 1.19)
        assert cache.villager(0, 1.5).get_size() == (24, 36)

    def test_palette_index_wraps(self):
        cache = SpriteCache()
        assert cache.villager(len(VILLAGER_PALETTES)) is cache.villager(0)

    def test_structure_sprite_per_size_and_variant(self):
        cache = SpriteCache()
        a = cache.structure("house", (48, 48), 0)
        assert cache.structure("house", (48, 48), 0) is a
        assert cache.structure("house", (48, 48), 1) is not a
        assert cache.structure("house", (24, 24), 0).get_size() == (24, 24)

    @pytest.mark.parametrize("structure_type", [
        "fountain", "bench", "sign", "house", "flower_bed", "bush",
        "rock", "tall_grass", "barrel", "crate", "tree", "unknown",
    ])
    def test_every_structure_type_draws(self, structure_type):
        sprite = SpriteCache().structure(structure_type, (32, 32))
        assert isinstance(sprite, pygame.Surface)
        assert sprite.get_size() == (32, 32)

    def test_clear(self):
        cache = SpriteCache()
        cache.villager(0)
        cache.structure("rock", (20, 20))
        assert len(cache) == 2
        cache.clear()
        assert len(cache) == 0
