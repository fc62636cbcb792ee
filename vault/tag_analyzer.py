"""
Tag frequency analysis over a markdown vault.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Sequence, Tuple

from engine.error_handler import VaultError
from .notes import ScannedNote, TagCount, is_in_folder, normalize_tag, read_note

logger = logging.getLogger("note_village.vault")


@dataclass
class TagAnalysisResult:
    """All tags with counts, plus totals."""
    tags: List[TagCount]
    total_notes: int
    total_tags: int


def iter_markdown_files(root: Path) -> Iterator[Path]:
    """Yield markdown files under ``root`` in a stable order, skipping dot folders."""
    if not root.is_dir():
        raise VaultError(f"Vault root not found: {root}", "The vault folder does not exist.")
    for path in sorted(root.rglob("*.md")):
        rel_parts = path.relative_to(root).parts
        if any(part.startswith(".") for part in rel_parts):
            continue
        yield path


def scan_vault(root: Path, excluded_folders: Sequence[str] = ()) -> List[Tuple[ScannedNote, List[str]]]:
    """Read every note outside the excluded folders."""
    results = []
    for path in iter_markdown_files(root):
        rel = path.relative_to(root).as_posix()
        if is_in_folder(rel, list(excluded_folders)):
            continue
        try:
            results.append(read_note(root, path))
        except OSError as e:
            logger.warning(f"Skipping unreadable note {rel}: {e}")
    return results


class TagAnalyzer:
    """Analyzes tags in the vault to determine zone distribution."""

    def __init__(self, root: Path):
        self.root = Path(root)
        self.excluded_folders: List[str] = []
        self.excluded_tags: List[str] = []

    def set_excluded_folders(self, folders: Sequence[str]) -> None:
        self.excluded_folders = list(folders)
        logger.debug(f"TagAnalyzer: Excluding folders: {', '.join(self.excluded_folders)}")

    def set_excluded_tags(self, tags: Sequence[str]) -> None:
        self.excluded_tags = [normalize_tag(t) for t in tags]
        logger.debug(f"TagAnalyzer: Excluding tags: {', '.join(self.excluded_tags)}")

    def analyze_all_tags(self) -> TagAnalysisResult:
        """Count every tag in the vault, sorted by frequency then name."""
        counts: Dict[str, int] = {}
        total_tags = 0
        notes = scan_vault(self.root, self.excluded_folders)

        for _, tags in notes:
            for tag in tags:
                counts[tag] = counts.get(tag, 0) + 1
                total_tags += 1

        ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
        logger.debug(f"Found {len(ranked)} unique tags in {len(notes)} files")

        return TagAnalysisResult(
            tags=[TagCount(tag, count) for tag, count in ranked],
            total_notes=len(notes),
            total_tags=total_tags,
        )

    def get_top_tags(self, count: int) -> List[TagCount]:
        """Top ``count`` tags by frequency, skipping excluded tags."""
        result = self.analyze_all_tags()
        excluded = set(self.excluded_tags)
        return [t for t in result.tags if t.tag not in excluded][:count]
