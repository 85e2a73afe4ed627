"""
Markdown section parser.

Splits an API reference document on its level-2 headings. The text before the
first heading is the preamble; every heading block (title line plus body) is
stored under its title so documents can be rebuilt byte-for-byte.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

logger = logging.getLogger(__name__)

HEADING_MARKER = "## "


@dataclass
class ParsedDocument:
    """A Markdown document split into preamble and heading blocks."""
    preamble: str
    sections: Dict[str, str] = field(default_factory=dict)
    duplicates: List[str] = field(default_factory=list)

    def titles(self) -> List[str]:
        return list(self.sections)

    def render(self, titles: List[str]) -> str:
        """Rebuild the document with only `titles`, in the given order."""
        return HEADING_MARKER.join([self.preamble] + [self.sections[title] for title in titles])


def parse_sections(content: str) -> ParsedDocument:
    """
    Parse raw Markdown into a ParsedDocument.

    A later heading with an already seen title replaces the earlier block in
    the mapping; the title is recorded in `duplicates` so callers can warn.

    Args:
        content: Raw document text

    Returns:
        ParsedDocument with preamble and title -> heading block mapping
    """
    fragments = content.split(HEADING_MARKER)
    document = ParsedDocument(preamble=fragments[0])

    for fragment in fragments[1:]:
        title = fragment.split('\n', 1)[0]
        if title in document.sections:
            logger.debug(f"Duplicate heading '{title}' replaces an earlier section")
            document.duplicates.append(title)
        document.sections[title] = fragment

    return document
