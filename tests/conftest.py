"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import os

# Headless pygame: must be set before pygame initializes a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest
import pygame
from pathlib import Path
from typing import Callable, Dict, Generator, List, Sequence, Union

from vault.notes import ScannedNote, TagCount
from world.village import VillageGenerator


@pytest.fixture(scope="session", autouse=True)
def pygame_init() -> Generator[None, None, None]:
    """
    Initialize pygame for the test session.
    This runs once before all tests and cleans up after.
    """
    pygame.init()
    yield
    pygame.quit()


class FakeTagSource:
    """In-memory tag ranking source that records how it was called."""

    def __init__(self, tags: Sequence[TagCount]):
        self.tags = list(tags)
        self.excluded_folders: List[str] = []
        self.excluded_tags: List[str] = []
        self.calls: List[int] = []

    def set_excluded_folders(self, folders):
        self.excluded_folders = list(folders)

    def set_excluded_tags(self, tags):
        self.excluded_tags = list(tags)

    def get_top_tags(self, count: int) -> List[TagCount]:
        self.calls.append(count)
        return [t for t in self.tags if t.tag not in self.excluded_tags][:count]


class FakeNoteSource:
    """In-memory note source keyed by tag."""

    def __init__(self, notes_by_tag: Dict[str, List[ScannedNote]]):
        self.notes_by_tag = notes_by_tag
        self.excluded_folders: List[str] = []
        self.calls: List[List[str]] = []

    def set_excluded_folders(self, folders):
        self.excluded_folders = list(folders)

    def get_notes_grouped_by_tag(self, tags) -> Dict[str, List[ScannedNote]]:
        self.calls.append(list(tags))
        return {tag: list(self.notes_by_tag.get(tag, [])) for tag in tags}


@pytest.fixture
def make_note() -> Callable[..., ScannedNote]:
    """
    Factory for ScannedNote objects.
    """
    def _make(
        name: str,
        tag: str = "test",
        size: int = 1000,
        modified_time: float = 1_700_000_000.0,
        updated: float = None,
    ) -> ScannedNote:
        return ScannedNote(
            path=f"notes/{name}.md",
            name=name,
            tags=[tag],
            primary_tag=tag,
            content_length=size,
            created_time=modified_time,
            modified_time=modified_time,
            updated=updated,
        )
    return _make


@pytest.fixture
def build_generator(make_note) -> Callable[..., VillageGenerator]:
    """
    Build a VillageGenerator over fake sources.

    ``notes`` maps tag -> note count or tag -> list of notes. Tags are ranked
    in the order given.
    """
    def _build(notes: Dict[str, Union[int, List[ScannedNote]]], **options) -> VillageGenerator:
        notes_by_tag: Dict[str, List[ScannedNote]] = {}
        for tag, value in notes.items():
            if isinstance(value, int):
                notes_by_tag[tag] = [make_note(f"{tag}-note{i}", tag) for i in range(value)]
            else:
                notes_by_tag[tag] = list(value)
        tags = [TagCount(tag, len(group)) for tag, group in notes_by_tag.items()]
        options.setdefault("seed", "test")
        return VillageGenerator(FakeTagSource(tags), FakeNoteSource(notes_by_tag), options)
    return _build


@pytest.fixture
def fake_sources():
    """The fake source classes, for tests that need to inspect calls."""
    return FakeTagSource, FakeNoteSource


@pytest.fixture
def sample_vault(tmp_path: Path) -> Path:
    """
    Create a small markdown vault on disk.

    Tags: project x3, idea x2, work x2 (one of each of idea/work is in archive/).
    """
    files = {
        "a.md": "---\ntags: [project]\n---\nBody mentions #work here.\n",
        "b.md": "---\ntags: project, idea\n---\nPlain text.\n",
        "c.md": "---\ntag: project\nupdated: 2023-05-01\n---\nSome notes.\n",
        "archive/d.md": "Old stuff #work and #idea\n",
        ".obsidian/e.md": "#hidden\n",
        "f.md": "# Heading\nNo tags here #123\n",
    }
    for rel, text in files.items():
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return tmp_path
