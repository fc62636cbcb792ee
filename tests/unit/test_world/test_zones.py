"""
Unit tests for the zone grid layout.
"""

import pytest
from settings import FOREST_BORDER_WIDTH, ZONE_GAP
from vault.notes import TagCount
from world.village.zones import (
    ZONE_COLORS,
    format_tag_as_zone_name,
    grid_dimensions,
    layout_zones,
    plaza_cell,
)


def _tags(count):
    return [TagCount(f"tag-{i}", 100 - i) for i in range(count)]


class TestZoneNames:
    """Tests for zone name formatting."""

    @pytest.mark.parametrize("tag,expected", [
        ("#side-projects", "Side Projects"),
        ("daily_notes", "Daily Notes"),
        ("project", "Project"),
        ("a--b__c", "A B C"),
    ])
    def test_format_tag_as_zone_name(self, tag, expected):
        assert format_tag_as_zone_name(tag) == expected


class TestGrid:
    """Tests for grid sizing and plaza cell choice."""

    @pytest.mark.parametrize("cells,expected", [
        (1, (1, 1)),
        (2, (2, 1)),
        (4, (2, 2)),
        (5, (3, 2)),
        (11, (4, 3)),
        (21, (5, 5)),
    ])
    def test_grid_dimensions(self, cells, expected):
        assert grid_dimensions(cells) == expected

    def test_plaza_cell_is_centre(self):
        assert plaza_cell(3, 3) == (1, 1)
        assert plaza_cell(5, 5) == (2, 2)

    def test_plaza_cell_tie_goes_to_first(self):
        assert plaza_cell(2, 1) == (0, 0)
        assert plaza_cell(2, 2) == (0, 0)


class TestLayoutZones:
    """Tests for layout_zones."""

    def test_one_zone_per_tag_in_rank_order(self):
        layout = layout_zones(_tags(10), zone_size=300, plaza_size=200, margin=50)
        assert len(layout.zones) == 10
        assert [z.tag for z in layout.zones] == [f"tag-{i}" for i in range(10)]
        assert [z.id for z in layout.zones] == [f"zone-{i}" for i in range(10)]
        assert [z.color for z in layout.zones] == ZONE_COLORS[:10]
        assert [z.note_count for z in layout.zones] == [100 - i for i in range(10)]

    def test_zones_are_disjoint_and_clear_of_plaza(self):
        layout = layout_zones(_tags(20), zone_size=300, plaza_size=200, margin=50)
        rects = [z.rect for z in layout.zones]
        for i, a in enumerate(rects):
            assert not a.intersects(layout.plaza)
            for b in rects[i + 1:]:
                assert not a.intersects(b)

    def test_zones_and_plaza_inside_playable_area(self):
        layout = layout_zones(_tags(7), zone_size=300, plaza_size=200, margin=50)
        for zone in layout.zones:
            assert layout.playable_area.contains_rect(zone.rect)
        assert layout.playable_area.contains_rect(layout.plaza)

    def test_world_size(self):
        # 3 tags + plaza -> 2x2 grid
        layout = layout_zones(_tags(3), zone_size=300, plaza_size=200, margin=50)
        expected = 2 * (300 + ZONE_GAP) - ZONE_GAP + 2 * 50 + 2 * FOREST_BORDER_WIDTH
        assert layout.world_width == expected
        assert layout.world_height == expected
        assert layout.playable_area.x == FOREST_BORDER_WIDTH
        assert layout.playable_area.right == expected - FOREST_BORDER_WIDTH

    def test_plaza_larger_than_zone_widens_cells(self):
        layout = layout_zones(_tags(3), zone_size=100, plaza_size=400, margin=0)
        rects = [z.rect for z in layout.zones] + [layout.plaza]
        for i, a in enumerate(rects):
            for b in rects[i + 1:]:
                assert not a.intersects(b)

    def test_no_tags_gives_plaza_only(self):
        layout = layout_zones([], zone_size=300, plaza_size=200, margin=50)
        assert layout.zones == ()
        assert layout.playable_area.contains_rect(layout.plaza)
