"""
Note and tag records read from a markdown vault.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import frontmatter
import yaml

# Inline tags: '#' not preceded by a word char, at least one non-digit char
INLINE_TAG_RE = re.compile(r"(?<![\w#&])#([\w/\-]*[^\W\d][\w/\-]*)")
FENCED_CODE_RE = re.compile(r"```.*?```", re.DOTALL)


@dataclass(frozen=True)
class TagCount:
    """A tag and how many notes carry it."""
    tag: str
    count: int


@dataclass
class ScannedNote:
    """Metadata for one markdown note."""
    path: str  # Vault-relative POSIX path, e.g. "projects/alpha.md"
    name: str  # File name without extension
    tags: List[str] = field(default_factory=list)
    primary_tag: str = "untagged"
    content_length: int = 0
    created_time: float = 0.0
    modified_time: float = 0.0
    updated: Optional[float] = None  # 'updated' frontmatter value, if any

    @property
    def sort_time(self) -> float:
        """Timestamp used to order notes: frontmatter 'updated' wins over mtime."""
        return self.updated if self.updated is not None else self.modified_time


def normalize_tag(tag: str) -> str:
    """Strip a leading '#' and lower-case."""
    return tag.strip().lstrip("#").lower()


def is_in_folder(path: str, folders: List[str]) -> bool:
    """Check if a vault path is one of ``folders`` or lies beneath one."""
    for folder in folders:
        folder = folder.strip("/")
        if not folder:
            continue
        if path == folder or path.startswith(folder + "/"):
            return True
    return False


def frontmatter_tags(metadata: Dict[str, Any]) -> List[str]:
    """
    Extract tags from frontmatter.

    'tags' may be a list or a comma-separated string; 'tag' is a single tag.
    """
    tags: List[str] = []
    fm_tags = metadata.get("tags")
    if isinstance(fm_tags, list):
        tags.extend(str(t) for t in fm_tags if isinstance(t, (str, int)))
    elif isinstance(fm_tags, str):
        tags.extend(t.strip() for t in fm_tags.split(",") if t.strip())

    fm_tag = metadata.get("tag")
    if isinstance(fm_tag, str) and fm_tag.strip():
        tags.append(fm_tag.strip())

    return tags


def inline_tags(body: str) -> List[str]:
    """Find '#tag' references in a note body, ignoring fenced code blocks."""
    return INLINE_TAG_RE.findall(FENCED_CODE_RE.sub("", body))


def parse_timestamp(value: Any) -> Optional[float]:
    """Convert a frontmatter date/datetime/number/ISO string to epoch seconds."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.timestamp()
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day).timestamp()
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).timestamp()
        except ValueError:
            return None
    return None


def parse_markdown(text: str) -> Tuple[Dict[str, Any], str]:
    """
    Split a markdown document into (frontmatter metadata, body).

    Broken frontmatter is treated as absent.
    """
    try:
        post = frontmatter.loads(text)
    except (yaml.YAMLError, ValueError):
        return {}, text
    metadata = post.metadata if isinstance(post.metadata, dict) else {}
    return metadata, post.content


def read_note(root: Path, file_path: Path) -> Tuple[ScannedNote, List[str]]:
    """
    Read one note from disk.

    Args:
        root: Vault root directory
        file_path: Absolute path of a markdown file under ``root``

    Returns:
        (note, normalised tags in order of appearance, deduplicated)
    """
    stat = file_path.stat()
    text = file_path.read_text(encoding="utf-8", errors="replace")
    metadata, body = parse_markdown(text)

    tags: List[str] = []
    for raw in inline_tags(body) + frontmatter_tags(metadata):
        tag = normalize_tag(raw)
        if tag and tag not in tags:
            tags.append(tag)

    note = ScannedNote(
        path=file_path.relative_to(root).as_posix(),
        name=file_path.stem,
        tags=tags,
        primary_tag=tags[0] if tags else "untagged",
        content_length=stat.st_size,
        created_time=stat.st_ctime,
        modified_time=stat.st_mtime,
        updated=parse_timestamp(metadata.get("updated")),
    )
    return note, tags
