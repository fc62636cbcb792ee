"""
Vault access: tag ranking and note scanning over a folder of markdown files.
"""

from .notes import ScannedNote, TagCount, normalize_tag
from .sources import NoteSource, TagSource
from .tag_analyzer import TagAnalyzer, TagAnalysisResult
from .note_scanner import NoteScanner

__all__ = [
    "ScannedNote",
    "TagCount",
    "normalize_tag",
    "NoteSource",
    "TagSource",
    "TagAnalyzer",
    "TagAnalysisResult",
    "NoteScanner",
]
