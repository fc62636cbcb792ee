"""
Collaborator contracts consumed by the village generator.
"""

from typing import Dict, List, Protocol, Sequence

from .notes import ScannedNote, TagCount


class TagSource(Protocol):
    """Ranks tags by how many notes carry them."""

    def set_excluded_folders(self, folders: Sequence[str]) -> None:
        ...

    def set_excluded_tags(self, tags: Sequence[str]) -> None:
        ...

    def get_top_tags(self, count: int) -> List[TagCount]:
        """Top ``count`` tags, descending by count, exclusions applied."""
        ...


class NoteSource(Protocol):
    """Groups notes by tag."""

    def set_excluded_folders(self, folders: Sequence[str]) -> None:
        ...

    def get_notes_grouped_by_tag(self, tags: Sequence[str]) -> Dict[str, List[ScannedNote]]:
        """Every requested tag is a key, even when its list is empty."""
        ...
