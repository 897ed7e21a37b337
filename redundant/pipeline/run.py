# redundant/pipeline/run.py
"""
End-to-end redundant-sentence pipeline used by the CLI.

What lives here:
- ingest_lines(): one document's lines -> page scanner -> aggregation table.
- scan_pages(): fold any sequence of (source, lines) pairs into a fresh table.
- scan_directory(): discover sources in the input directory and scan them,
  stopping at the first problem.
- run_scan(): create the report file, scan the directory, write the report.
- run_paste(): the interactive variant, fed by pasted pages.

Design notes
- One AggregationTable per run, created here and handed to the reporter.
- Problems are returned in ScanOutcome.problem, never raised; a run with a
  problem produces no report lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Tuple

from redundant.aggregation import AggregationTable
from redundant.options import RunOptions, ScanOptions
from redundant.pipeline.discovery import (
    OUTPUT,
    RunProblem,
    ensure_input_dir,
    list_entries,
    open_source,
)
from redundant.pipeline.paste import read_pasted_pages
from redundant.report import render_report
from redundant.scanning import scan_lines

logger = logging.getLogger(__name__)


# =============================================================================
# Data models returned by the pipeline
# =============================================================================

@dataclass
class ScanOutcome:
    """Summary returned by the run functions."""
    sources: List[str] = field(default_factory=list)
    fragments: int = 0
    total_sentences: int = 0
    report_lines: List[str] = field(default_factory=list)
    report_path: Optional[str] = None
    written: int = 0
    problem: Optional[RunProblem] = None

    @property
    def ok(self) -> bool:
        return self.problem is None


# =============================================================================
# Core
# =============================================================================

def new_table(scan: ScanOptions) -> AggregationTable:
    return AggregationTable(fold_case=scan.fold_case, track_provenance=scan.track_provenance)


def ingest_lines(table: AggregationTable, source: str, lines: Iterable[str], scan: ScanOptions) -> int:
    """Scan one document and fold its fragments into table; return the fragment count."""
    fragments = scan_lines(
        source,
        lines,
        page_marker=scan.page_marker,
        delimiter=scan.delimiter,
        min_length=scan.min_length,
    )
    n = table.ingest_fragments(fragments)
    logger.debug("source %s: %d fragments", source, n)
    return n


def scan_pages(
    pages: Iterable[Tuple[str, Iterable[str]]],
    scan: ScanOptions,
) -> Tuple[AggregationTable, List[str], int]:
    """Fold every (source, lines) pair into a fresh table, in order."""
    table = new_table(scan)
    seen: List[str] = []
    total = 0
    for source, lines in pages:
        total += ingest_lines(table, source, lines, scan)
        seen.append(source)
    return table, seen, total


def scan_directory(options: RunOptions) -> Tuple[Optional[AggregationTable], ScanOutcome]:
    """
    Discover and scan every entry of the input directory.
    Any bad entry stops the whole run: (None, outcome-with-problem).
    """
    input_dir = Path(options.sources.input_dir)
    exts = options.sources.extensions
    outcome = ScanOutcome()

    problem = ensure_input_dir(input_dir, exts)
    if problem is not None:
        outcome.problem = problem
        return None, outcome

    entries, problem = list_entries(input_dir, exts)
    if problem is not None:
        outcome.problem = problem
        return None, outcome

    table = new_table(options.scan)
    for entry in entries:
        source, problem = open_source(entry, input_dir=input_dir, extensions=exts)
        if problem is not None:
            logger.warning("aborting run: %s", problem.message)
            outcome.problem = problem
            return None, outcome
        outcome.fragments += ingest_lines(table, source.identifier, source.lines, options.scan)
        outcome.sources.append(source.identifier)

    outcome.total_sentences = len(table)
    return table, outcome


def write_report(path: Path, lines: List[str]) -> Optional[RunProblem]:
    try:
        with path.open("w", encoding="utf-8") as fh:
            for line in lines:
                fh.write(line + "\n")
    except OSError as e:
        return RunProblem(OUTPUT, f"Could not write {path}:\n{e}", "Please review this problem and try again.")
    return None


# =============================================================================
# Runs
# =============================================================================

def run_scan(options: RunOptions) -> ScanOutcome:
    """
    Directory run:
      1) create the report file (stop before reading anything if that fails)
      2) scan the input directory (stop at the first problem)
      3) render and write the report
    """
    report_path = Path(options.sources.report_path)
    try:
        report_path.open("w", encoding="utf-8").close()
    except OSError as e:
        return ScanOutcome(
            report_path=str(report_path),
            problem=RunProblem(
                OUTPUT,
                f"Could not create {report_path}: {e}",
                "Please review this problem. Make sure the report location is writable.",
            ),
        )

    table, outcome = scan_directory(options)
    outcome.report_path = str(report_path)
    if table is None:
        return outcome

    outcome.report_lines = render_report(table, options.report)
    problem = write_report(report_path, outcome.report_lines)
    if problem is not None:
        outcome.problem = problem
        return outcome

    outcome.written = len(outcome.report_lines)
    logger.info(
        "scanned %d sources, %d fragments, %d distinct sentences -> %s",
        len(outcome.sources), outcome.fragments, outcome.total_sentences, report_path,
    )
    return outcome


def run_paste(
    stream: TextIO,
    options: RunOptions,
    *,
    sentinel: str = "END",
    report_path: Optional[Path] = None,
) -> ScanOutcome:
    """
    Interactive run: each pasted page is one source ("page1", "page2", ...).
    The report is always returned; it is also written when report_path is given.
    """
    table, seen, n = scan_pages(read_pasted_pages(stream, sentinel=sentinel), options.scan)
    outcome = ScanOutcome(
        sources=seen,
        fragments=n,
        total_sentences=len(table),
        report_lines=render_report(table, options.report),
    )
    if report_path is not None:
        outcome.report_path = str(report_path)
        problem = write_report(Path(report_path), outcome.report_lines)
        if problem is not None:
            outcome.problem = problem
            return outcome
        outcome.written = len(outcome.report_lines)
    logger.info("pasted %d pages, %d distinct sentences", len(seen), outcome.total_sentences)
    return outcome
