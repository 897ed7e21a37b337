"""
Interactive input: pages pasted into the console.

A page ends at a line equal to the sentinel (default "END"). A sentinel
with nothing pasted since the previous one ends the session, as does
end of input. Blank lines alone do not make a page. Pages are named
page1, page2, ...
"""

from __future__ import annotations

from typing import Iterator, List, TextIO, Tuple


def _has_content(buf: List[str]) -> bool:
    return any(line.strip() for line in buf)


def read_pasted_pages(stream: TextIO, *, sentinel: str = "END") -> Iterator[Tuple[str, List[str]]]:
    page_no = 0
    buf: List[str] = []
    for raw in stream:
        line = raw.rstrip("\r\n")
        if line == sentinel:
            if not _has_content(buf):
                return
            page_no += 1
            yield f"page{page_no}", buf
            buf = []
        else:
            buf.append(line)
    if _has_content(buf):
        page_no += 1
        yield f"page{page_no}", buf
