"""
Unified loader interface.

Public:
    infer_doc_type_from_path(path) -> str
    load_lines_by_type(path, doc_type=None) -> list[str]

This module implements loaders for:
    - txt (line by line, the classic input)
    - md  (rendered, visible text only)
    - html (visible text only)

Notes
- All loaders return the document as an ordered list of lines; the page
  scanner decides which of them are content.
- OSError from reading propagates; discovery turns it into a source problem.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .html_loader import load_html_lines
from .md_loader import load_md_lines


# -----------------------
# Type inference
# -----------------------

def infer_doc_type_from_path(path: str | Path) -> str:
    ext = Path(path).suffix.lower().lstrip(".")
    if ext in {"txt", "text"}:
        return "txt"
    if ext in {"md", "markdown"}:
        return "md"
    if ext in {"htm", "html"}:
        return "html"
    return "other"


# -----------------------
# Primitive loaders
# -----------------------

def _load_txt(path: Path) -> List[str]:
    txt = path.read_text(encoding="utf-8", errors="ignore")
    lines = txt.split("\n")
    # A final newline terminates the last line; it does not start a new one.
    if lines and lines[-1] == "":
        lines.pop()
    return lines


# -----------------------
# Unified entrypoint
# -----------------------

def load_lines_by_type(path: str | Path, doc_type: Optional[str] = None) -> List[str]:
    """
    Route to the specific loader based on doc_type (string).
    Unknown types are read as plain text.
    """
    p = Path(path).expanduser()
    t = (doc_type or infer_doc_type_from_path(p)).lower()

    if t == "md":
        return load_md_lines(p)
    if t == "html":
        return load_html_lines(p)
    return _load_txt(p)
