"""
Lightweight text normalization helpers.
"""

from __future__ import annotations

import re


_WS_RE = re.compile(r"[ \t]+")
_NL_RE = re.compile(r"\n{3,}")


def normalize_key(fragment: str, *, fold_case: bool = True) -> str:
    """
    Canonical key used to group sentence fragments:
      - lower-case (unless fold_case is off)
      - keep only alphanumeric characters (whitespace and punctuation dropped)

    "Hello, World" and "hello world!" share the key "helloworld".
    """
    if not fragment:
        return ""
    if fold_case:
        fragment = fragment.lower()
    return "".join(ch for ch in fragment if ch.isalnum())


def normalize_text(text: str) -> str:
    """
    Normalize whitespace:
      - collapse consecutive spaces/tabs
      - trim lines
      - collapse 3+ blank lines to 2
      - strip leading/trailing whitespace
    """
    if not text:
        return ""
    lines = []
    for line in text.splitlines():
        line = _WS_RE.sub(" ", line).strip()
        lines.append(line)
    out = "\n".join(lines)
    # Collapse excessive blank lines
    out = _NL_RE.sub("\n\n", out)
    return out.strip()
