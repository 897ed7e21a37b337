"""
Page scanning for exported discussion threads.

Each document starts with front matter (title, author, navigation noise).
Content begins after a line that reads exactly "Page". From there on,
every line is split on "." and fragments long enough to be meaningful
sentences are emitted.

Functions provided:
- split_fragments: split one body line into candidate sentence fragments
- scan_lines: run the header/body scanner over one document
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List

DEFAULT_PAGE_MARKER = "Page"
DEFAULT_DELIMITER = "."
DEFAULT_MIN_LENGTH = 40


class Mode(str, Enum):
    header = "header"
    text_body = "text_body"


@dataclass(frozen=True)
class Fragment:
    """One candidate sentence, tagged with the source it came from."""
    source: str
    text: str


def split_fragments(
    line: str,
    *,
    delimiter: str = DEFAULT_DELIMITER,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> List[str]:
    """Split a body line on the delimiter; keep fragments longer than min_length."""
    return [frag for frag in line.split(delimiter) if len(frag) > min_length]


class PageScanner:
    """
    Two-state scanner for a single document.

    HEADER: lines are ignored until one equals the page marker (consumed).
    TEXT_BODY: lines are split into fragments.
    """

    def __init__(
        self,
        source: str,
        *,
        page_marker: str = DEFAULT_PAGE_MARKER,
        delimiter: str = DEFAULT_DELIMITER,
        min_length: int = DEFAULT_MIN_LENGTH,
    ) -> None:
        self.source = source
        self.page_marker = page_marker
        self.delimiter = delimiter
        self.min_length = int(min_length)
        self.mode = Mode.header

    def feed(self, line: str) -> List[Fragment]:
        if self.mode is Mode.header:
            if line == self.page_marker:
                self.mode = Mode.text_body
            return []
        return [
            Fragment(source=self.source, text=frag)
            for frag in split_fragments(line, delimiter=self.delimiter, min_length=self.min_length)
        ]

    def scan(self, lines: Iterable[str]) -> Iterator[Fragment]:
        for line in lines:
            yield from self.feed(line)


def scan_lines(
    source: str,
    lines: Iterable[str],
    *,
    page_marker: str = DEFAULT_PAGE_MARKER,
    delimiter: str = DEFAULT_DELIMITER,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> Iterator[Fragment]:
    """Scan one document's lines with a fresh scanner (initial state HEADER)."""
    scanner = PageScanner(
        source,
        page_marker=page_marker,
        delimiter=delimiter,
        min_length=min_length,
    )
    return scanner.scan(lines)
