"""
HTML loader.

Strips scripts/styles and extracts visible text via BeautifulSoup, one line
per block element, so saved thread pages keep their "Page" marker line and
inline markup (<b>, <a>, ...) does not cut sentences apart.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from bs4 import BeautifulSoup

_BLOCK_TAGS = [
    "p", "div", "li", "ul", "ol", "dl", "dt", "dd", "tr", "table",
    "h1", "h2", "h3", "h4", "h5", "h6", "blockquote", "pre",
    "article", "section", "header", "footer", "nav", "aside",
]


def soup_to_lines(soup: BeautifulSoup) -> List[str]:
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.insert_before("\n")
        tag.insert_after("\n")
    text = soup.get_text()
    lines = [line.strip() for line in text.splitlines()]
    return [ln for ln in lines if ln]


def html_to_lines(html: str) -> List[str]:
    return soup_to_lines(BeautifulSoup(html, "lxml"))


def load_html_lines(path: str | Path) -> List[str]:
    p = Path(path)
    if p.suffix.lower() not in (".html", ".htm"):
        raise ValueError(f"Expected an .html/.htm file, got: {path}")
    html = p.read_text(encoding="utf-8", errors="ignore")
    return html_to_lines(html)
