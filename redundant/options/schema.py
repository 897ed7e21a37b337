"""
Run options for redundant-sentences.

Defines:
- frozen dataclasses for source, scan and report options,
- the merge of validated CLI values over the loaded Config.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from redundant.config import Config, load_config


@dataclass(frozen=True)
class SourceOptions:
    input_dir: Path = Path("./input")
    report_path: Path = Path("./report.txt")
    extensions: Tuple[str, ...] = ("txt",)


@dataclass(frozen=True)
class ScanOptions:
    page_marker: str = "Page"
    delimiter: str = "."
    min_length: int = 40
    fold_case: bool = True
    track_provenance: bool = True


@dataclass(frozen=True)
class ReportOptions:
    only_show_repeated: bool = False
    ignore_prefixes: Tuple[str, ...] = ("Collapse Subdiscussion",)


@dataclass(frozen=True)
class RunOptions:
    sources: SourceOptions
    scan: ScanOptions
    report: ReportOptions


def options_from_config(cfg: Optional[Config] = None) -> RunOptions:
    c = cfg or load_config()
    return RunOptions(
        sources=SourceOptions(
            input_dir=c.input_dir,
            report_path=c.report_path,
            extensions=tuple(e.strip().lower().lstrip(".") for e in c.input_extensions if e.strip()),
        ),
        scan=ScanOptions(
            page_marker=c.page_marker,
            delimiter=c.sentence_delimiter,
            min_length=c.min_fragment_length,
            fold_case=c.fold_case,
            track_provenance=c.track_provenance,
        ),
        report=ReportOptions(
            only_show_repeated=c.only_show_repeated,
            ignore_prefixes=tuple(c.ignore_prefixes),
        ),
    )


def normalize_cli_options(
    *,
    cfg: Optional[Config] = None,
    input_dir: Optional[str] = None,
    report_path: Optional[str] = None,
    extensions: Optional[Tuple[str, ...]] = None,
    page_marker: Optional[str] = None,
    delimiter: Optional[str] = None,
    min_length: Optional[int] = None,
    fold_case: Optional[bool] = None,
    track_provenance: Optional[bool] = None,
    only_show_repeated: Optional[bool] = None,
    ignore_prefixes: Optional[Tuple[str, ...]] = None,
) -> RunOptions:
    """
    Layer CLI values (already validated) over the configured defaults.
    None means "not given on the command line".
    """
    base = options_from_config(cfg)

    def pick(value, default):
        return default if value is None else value

    return RunOptions(
        sources=SourceOptions(
            input_dir=Path(input_dir) if input_dir else base.sources.input_dir,
            report_path=Path(report_path) if report_path else base.sources.report_path,
            extensions=tuple(extensions) if extensions else base.sources.extensions,
        ),
        scan=ScanOptions(
            page_marker=pick(page_marker, base.scan.page_marker),
            delimiter=pick(delimiter, base.scan.delimiter),
            min_length=int(pick(min_length, base.scan.min_length)),
            fold_case=bool(pick(fold_case, base.scan.fold_case)),
            track_provenance=bool(pick(track_provenance, base.scan.track_provenance)),
        ),
        report=ReportOptions(
            only_show_repeated=bool(pick(only_show_repeated, base.report.only_show_repeated)),
            ignore_prefixes=tuple(ignore_prefixes) if ignore_prefixes is not None else base.report.ignore_prefixes,
        ),
    )
