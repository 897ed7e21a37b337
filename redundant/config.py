"""
redundant-sentences configuration loader.

- Reads environment variables and .env without failing on import.
- Provides a typed Config object with sensible defaults.
- Defaults reproduce the classic behavior: txt files in ./input, report in
  ./report.txt, case-insensitive matching, provenance tracked, all nontrivial
  sentences reported.

Usage:
    from redundant.config import load_config
    cfg = load_config()
    # CLI flags are layered on top through redundant.options.validation
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


def _getenv_str(name: str, default: Optional[str] = None) -> Optional[str]:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    return val


def _getenv_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    try:
        return int(val)
    except ValueError:
        return default


def _getenv_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None or val == "":
        return default
    return str(val).strip().lower() in ("1", "true", "yes", "y", "on")


def _getenv_list(name: str, default: Tuple[str, ...], sep: str = ",") -> Tuple[str, ...]:
    val = os.getenv(name)
    if val is None or val.strip() == "":
        return default
    items = tuple(v.strip() for v in val.split(sep) if v.strip())
    return items or default


@dataclass(frozen=True)
class Config:
    # Locations
    input_dir: Path = Path("./input")
    report_path: Path = Path("./report.txt")
    input_extensions: Tuple[str, ...] = ("txt",)

    # Page scanning
    page_marker: str = "Page"
    sentence_delimiter: str = "."
    min_fragment_length: int = 40

    # Matching / reporting policies
    fold_case: bool = True
    track_provenance: bool = True
    only_show_repeated: bool = False
    ignore_prefixes: Tuple[str, ...] = ("Collapse Subdiscussion",)

    # Interactive paste sessions
    paste_sentinel: str = "END"

    # Logging
    log_level: str = "INFO"

    def validate_for_scan(self) -> None:
        """
        Validate the settings the page scanner depends on.
        Called by runtime code, never on import.
        """
        if not self.page_marker:
            raise RuntimeError("PAGE_MARKER is not set.")
        if not self.sentence_delimiter:
            raise RuntimeError("SENTENCE_DELIMITER is not set.")
        if self.min_fragment_length < 0:
            raise RuntimeError("MIN_FRAGMENT_LENGTH must be >= 0.")


# Single, cached instance after first load
__CONFIG_SINGLETON: Optional[Config] = None


def load_config(reload: bool = False) -> Config:
    """
    Load configuration from environment and .env (once) with defaults.
    Use reload=True to force re-reading.
    """
    global __CONFIG_SINGLETON
    if __CONFIG_SINGLETON is not None and not reload:
        return __CONFIG_SINGLETON

    # Load .env only once; do not override already-set env vars.
    load_dotenv(override=False)

    cfg = Config(
        input_dir=Path(_getenv_str("INPUT_DIR", "./input") or "./input"),
        report_path=Path(_getenv_str("REPORT_PATH", "./report.txt") or "./report.txt"),
        input_extensions=_getenv_list("INPUT_EXTENSIONS", ("txt",)),
        page_marker=_getenv_str("PAGE_MARKER", "Page") or "Page",
        sentence_delimiter=_getenv_str("SENTENCE_DELIMITER", ".") or ".",
        min_fragment_length=_getenv_int("MIN_FRAGMENT_LENGTH", 40),
        fold_case=_getenv_bool("FOLD_CASE", True),
        track_provenance=_getenv_bool("TRACK_PROVENANCE", True),
        only_show_repeated=_getenv_bool("ONLY_SHOW_REPEATED", False),
        ignore_prefixes=_getenv_list("IGNORE_PREFIXES", ("Collapse Subdiscussion",), sep="|"),
        paste_sentinel=_getenv_str("PASTE_SENTINEL", "END") or "END",
        log_level=_getenv_str("LOG_LEVEL", "INFO") or "INFO",
    )

    __CONFIG_SINGLETON = cfg
    return cfg

