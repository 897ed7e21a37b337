"""
Pydantic-based option validation for redundant-sentences (CLI boundary).

Goals
- Enforce allowed types (strings for paths/markers, int for the length cut).
- Disallow empty strings (convert to None so the configured default applies).
- Normalize file extensions ("TXT", ".txt", " txt " -> "txt").
- Reject a negative minimum fragment length.

Usage
- validate_cli_options(raw: dict, *, fixup: bool = False) -> dict
  Returns a clean dict compatible with normalize_cli_options().

Notes
- Without fixup, invalid values raise ValueError (pydantic.ValidationError is a
  subclass). With fixup, values are repaired where a sensible repair exists.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


# ---- helpers ----

_EXT_RE = re.compile(r"[A-Za-z0-9]+")
_slug_re = re.compile(r"[^a-z0-9]+")


def _slug_ext(e: str) -> str:
    s = (e or "").lower().strip()
    return _slug_re.sub("", s)


def _clean_str(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v2 = str(v).strip()
    return v2 or None


def _split_list(v: Any, sep: str = ",") -> Optional[List[str]]:
    if v is None:
        return None
    if isinstance(v, str):
        arr = [p.strip() for p in v.split(sep)]
    else:
        arr = [str(x).strip() for x in list(v)]
    arr = [x for x in arr if x]
    return arr or None


def _norm_ext(e: str) -> str:
    return e.strip().lower().lstrip(".")


# ---- models ----

class _OptionsInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    input_dir: Optional[str] = None
    report_path: Optional[str] = None
    extensions: Optional[List[str]] = None
    page_marker: Optional[str] = None
    delimiter: Optional[str] = None
    min_length: Optional[int] = None
    fold_case: Optional[bool] = None
    track_provenance: Optional[bool] = None
    only_show_repeated: Optional[bool] = None
    ignore_prefixes: Optional[List[str]] = None

    @field_validator("input_dir", "report_path", mode="before")
    @classmethod
    def _trim_or_none(cls, v):
        return _clean_str(v)

    @field_validator("extensions", mode="before")
    @classmethod
    def _extensions_norm(cls, v):
        arr = _split_list(v)
        if arr is None:
            return None
        out: List[str] = []
        for e in arr:
            e2 = _norm_ext(e)
            if not _EXT_RE.fullmatch(e2):
                raise ValueError(f"invalid extension '{e}'; use letters and numbers only (or pass --fixup)")
            if e2 not in out:
                out.append(e2)
        return out

    @field_validator("page_marker", "delimiter", mode="before")
    @classmethod
    def _non_empty(cls, v):
        # Markers are matched verbatim: do not strip, only reject emptiness.
        if v is None:
            return None
        if str(v) == "":
            raise ValueError("value cannot be empty")
        return str(v)

    @field_validator("min_length")
    @classmethod
    def _min_length_range(cls, v):
        if v is not None and v < 0:
            raise ValueError(f"min_length must be >= 0, got {v}")
        return v

    @field_validator("ignore_prefixes", mode="before")
    @classmethod
    def _prefixes_list(cls, v):
        if v is None:
            return None
        if isinstance(v, str):
            return [v] if v else []
        return [str(x) for x in v if str(x)]


def validate_cli_options(raw: Dict[str, Any], *, fixup: bool = False) -> Dict[str, Any]:
    """
    Validate and normalize a CLI options dict.

    Behavior:
    - Missing or empty values -> None (normalize_cli_options keeps the configured default).
    - Invalid values:
        * fixup=False -> raise ValueError
        * fixup=True  -> extensions are slugged, negative min_length becomes 0,
                         empty marker/delimiter fall back to the configured default.
    """
    try:
        return _OptionsInput(**raw).model_dump()
    except ValueError:
        if not fixup:
            raise

    data: Dict[str, Any] = {
        "input_dir": _clean_str(raw.get("input_dir")),
        "report_path": _clean_str(raw.get("report_path")),
        "extensions": None,
        "page_marker": raw.get("page_marker") or None,
        "delimiter": raw.get("delimiter") or None,
        "min_length": None,
        "fold_case": raw.get("fold_case"),
        "track_provenance": raw.get("track_provenance"),
        "only_show_repeated": raw.get("only_show_repeated"),
        "ignore_prefixes": None,
    }

    exts = _split_list(raw.get("extensions"))
    if exts:
        out: List[str] = []
        for e in exts:
            s = _slug_ext(e)
            if s and s not in out:
                out.append(s)
        data["extensions"] = out or None

    ml = raw.get("min_length")
    if ml is not None:
        try:
            data["min_length"] = max(0, int(ml))
        except (TypeError, ValueError):
            data["min_length"] = None

    prefixes = raw.get("ignore_prefixes")
    if prefixes is not None:
        if isinstance(prefixes, str):
            prefixes = [prefixes]
        data["ignore_prefixes"] = [str(p) for p in prefixes if str(p)]

    return data
