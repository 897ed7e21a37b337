"""
Markdown loader.

Strip YAML front matter and fenced code blocks, render to HTML with
Python-Markdown, then extract readable text via BeautifulSoup.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

import markdown as md
from bs4 import BeautifulSoup

from redundant.loaders.html_loader import soup_to_lines
from redundant.utils.text import normalize_text


_FRONT_MATTER_RE = re.compile(r"^---\s*\n(.*?)\n---\s*\n?", re.DOTALL)
# Match fenced code blocks using ``` or ~~~
_FENCED_CODE_RE = re.compile(
    r"(^|\n)```.*?\n.*?\n```|(^|\n)~~~.*?\n.*?\n~~~",
    re.DOTALL,
)


def _strip_front_matter(text: str) -> str:
    m = _FRONT_MATTER_RE.match(text)
    if m:
        return text[m.end() :]
    return text


def _strip_fenced_code(text: str) -> str:
    return _FENCED_CODE_RE.sub("\n", text)


def markdown_to_lines(raw: str) -> List[str]:
    cleaned = _strip_front_matter(raw)
    cleaned = _strip_fenced_code(cleaned)

    html = md.markdown(
        cleaned,
        extensions=["tables", "sane_lists"],
        output_format="html5",
    )

    soup = BeautifulSoup(html, "lxml")
    for tag in soup(["code", "pre"]):
        tag.decompose()
    # Images keep their alt text
    for img in soup.find_all("img"):
        alt = (img.get("alt") or "").strip()
        img.replace_with(alt)

    return [normalize_text(ln) for ln in soup_to_lines(soup)]


def load_md_lines(path: str | Path) -> List[str]:
    p = Path(path)
    if p.suffix.lower() not in (".md", ".markdown"):
        raise ValueError(f"Expected an .md/.markdown file, got: {path}")
    raw = p.read_text(encoding="utf-8", errors="ignore")
    return markdown_to_lines(raw)
