"""
Note scanning over a markdown vault.
"""

import logging
from pathlib import Path
from typing import Dict, List, Sequence

from .notes import ScannedNote, normalize_tag
from .tag_analyzer import scan_vault

logger = logging.getLogger("note_village.vault")


class NoteScanner:
    """Scans the vault for notes carrying given tags."""

    def __init__(self, root: Path):
        self.root = Path(root)
        self.excluded_folders: List[str] = []

    def set_excluded_folders(self, folders: Sequence[str]) -> None:
        self.excluded_folders = list(folders)

    def get_all_notes(self) -> List[ScannedNote]:
        notes = [note for note, _ in scan_vault(self.root, self.excluded_folders)]
        logger.debug(f"Found {len(notes)} total notes")
        return notes

    def get_notes_with_tags(self, tags: Sequence[str]) -> List[ScannedNote]:
        """
        Notes that carry at least one of ``tags``.

        Each note's primary tag becomes the first of its tags that is in
        ``tags``, so a note lands in exactly one group.
        """
        targets = {normalize_tag(t) for t in tags}
        matching: List[ScannedNote] = []

        for note, note_tags in scan_vault(self.root, self.excluded_folders):
            hits = [t for t in note_tags if t in targets]
            if not hits:
                continue
            note.primary_tag = hits[0]
            matching.append(note)

        logger.debug(f"Found {len(matching)} notes with tags: {', '.join(sorted(targets))}")
        return matching

    def get_notes_grouped_by_tag(self, tags: Sequence[str]) -> Dict[str, List[ScannedNote]]:
        """Group matching notes by primary tag; every requested tag is present."""
        grouped: Dict[str, List[ScannedNote]] = {normalize_tag(t): [] for t in tags}
        for note in self.get_notes_with_tags(tags):
            grouped[note.primary_tag].append(note)
        return grouped
