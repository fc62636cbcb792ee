"""
Unit tests for note parsing and tag analysis.
"""

import pytest
from engine.error_handler import VaultError
from vault import TagAnalyzer, TagCount
from vault.notes import (
    frontmatter_tags,
    inline_tags,
    is_in_folder,
    normalize_tag,
    parse_markdown,
    parse_timestamp,
)


class TestTagParsing:
    """Tests for tag extraction helpers."""

    def test_normalize_tag(self):
        assert normalize_tag("#Project") == "project"
        assert normalize_tag("  work ") == "work"

    def test_inline_tags(self):
        body = "See #project and #side-project, also #nested/tag.\nNot a #123 tag or a# tag."
        assert inline_tags(body) == ["project", "side-project", "nested/tag"]

    def test_inline_tags_skip_headings_and_code(self):
        body = "# Heading\n## Sub\n```\n#notatag\n```\nreal #tag"
        assert inline_tags(body) == ["tag"]

    def test_inline_tags_skip_html_entities_and_anchors(self):
        assert inline_tags("&#39; and page#section") == []

    def test_frontmatter_tags_list_and_string(self):
        assert frontmatter_tags({"tags": ["a", "b"]}) == ["a", "b"]
        assert frontmatter_tags({"tags": "a, b ,c"}) == ["a", "b", "c"]
        assert frontmatter_tags({"tag": "solo"}) == ["solo"]
        assert frontmatter_tags({"tags": ["a"], "tag": "b"}) == ["a", "b"]
        assert frontmatter_tags({}) == []

    def test_parse_markdown(self):
        metadata, body = parse_markdown("---\ntags: [a]\n---\nHello\n")
        assert metadata == {"tags": ["a"]}
        assert body.strip() == "Hello"

    def test_parse_markdown_broken_frontmatter(self):
        text = "---\ntags: [a\n---\nHello\n"
        metadata, body = parse_markdown(text)
        assert metadata == {}
        assert body == text

    def test_parse_timestamp(self):
        assert parse_timestamp(1234) == 1234.0
        assert parse_timestamp("not a date") is None
        assert parse_timestamp(None) is None
        assert parse_timestamp("2023-05-01T00:00:00") == parse_timestamp("2023-05-01")

    def test_is_in_folder(self):
        assert is_in_folder("archive/old.md", ["archive"])
        assert is_in_folder("archive/deep/old.md", ["archive/"])
        assert not is_in_folder("archived.md", ["archive"])
        assert not is_in_folder("notes/a.md", [""])


class TestTagAnalyzer:
    """Tests for TagAnalyzer over a vault on disk."""

    def test_counts_and_order(self, sample_vault):
        result = TagAnalyzer(sample_vault).analyze_all_tags()
        assert result.tags == [TagCount("project", 3), TagCount("idea", 2), TagCount("work", 2)]
        assert result.total_notes == 5
        assert result.total_tags == 7

    def test_dot_folders_are_skipped(self, sample_vault):
        tags = [t.tag for t in TagAnalyzer(sample_vault).analyze_all_tags().tags]
        assert "hidden" not in tags

    def test_top_tags_limit(self, sample_vault):
        assert TagAnalyzer(sample_vault).get_top_tags(1) == [TagCount("project", 3)]

    def test_excluded_folders(self, sample_vault):
        analyzer = TagAnalyzer(sample_vault)
        analyzer.set_excluded_folders(["archive"])
        assert analyzer.get_top_tags(10) == [
            TagCount("project", 3), TagCount("idea", 1), TagCount("work", 1),
        ]

    def test_excluded_tags_are_normalized(self, sample_vault):
        analyzer = TagAnalyzer(sample_vault)
        analyzer.set_excluded_tags(["#Project"])
        assert [t.tag for t in analyzer.get_top_tags(10)] == ["idea", "work"]

    def test_missing_vault(self, tmp_path):
        with pytest.raises(VaultError):
            TagAnalyzer(tmp_path / "nope").analyze_all_tags()
