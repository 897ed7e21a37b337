"""
Expose page scanning utilities.

Includes:
- Mode: header / text_body scanner states
- Fragment: data class for a candidate sentence and its source
- PageScanner: per-document two-state scanner
- split_fragments: split a body line into long-enough fragments
- scan_lines: scan a whole document
"""

from .scanner import (
    Mode,
    Fragment,
    PageScanner,
    split_fragments,
    scan_lines,
)

__all__ = [
    "Mode",
    "Fragment",
    "PageScanner",
    "split_fragments",
    "scan_lines",
]
