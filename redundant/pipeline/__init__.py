"""
Pipeline facade for redundant-sentences.

Callers (the CLI, tools) import the run entrypoints from here:

    from redundant.pipeline import run_scan, run_paste, scan_pages

- run_scan       : directory run (discover -> scan -> aggregate -> report file)
- run_paste      : interactive run fed by pasted pages
- scan_pages     : fold (source, lines) pairs into a fresh AggregationTable
- ScanOutcome    : run summary; .problem is set when the run stopped early
- RunProblem     : message + remedy for an aborted run
"""

from .discovery import RunProblem, Source
from .paste import read_pasted_pages
from .run import (
    ScanOutcome,
    ingest_lines,
    scan_pages,
    scan_directory,
    run_scan,
    run_paste,
)

__all__ = [
    "RunProblem",
    "Source",
    "read_pasted_pages",
    "ScanOutcome",
    "ingest_lines",
    "scan_pages",
    "scan_directory",
    "run_scan",
    "run_paste",
]
