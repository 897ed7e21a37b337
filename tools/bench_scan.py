"""
Quick scan benchmark.

Examples:
    python -m tools.bench_scan ./input/*.txt
    python -m tools.bench_scan --repeat 3 ./input/thread1.txt ./input/thread2.txt
"""

from __future__ import annotations

import argparse
import glob
import time
from pathlib import Path
from typing import List

from redundant.loaders import load_lines_by_type
from redundant.options import options_from_config
from redundant.pipeline import scan_pages
from redundant.pipeline.discovery import source_identifier


def run(paths: List[str], repeat: int = 1) -> None:
    files: List[Path] = []
    for p in paths:
        if any(ch in p for ch in "*?[]"):
            files.extend(Path(f) for f in glob.glob(p))
        else:
            files.append(Path(p))
    files = [f.resolve() for f in files if f.is_file()]
    if not files:
        print("No files found.")
        return

    pages = [(source_identifier(f.name), load_lines_by_type(f)) for f in files]
    scan = options_from_config().scan
    t0 = time.perf_counter()
    frags = 0
    distinct = 0
    for _ in range(repeat):
        table, _seen, n = scan_pages(pages, scan)
        frags += n
        distinct = len(table)
    dt = time.perf_counter() - t0
    fps = frags / dt if dt > 0 else 0.0
    print(f"Scanned fragments: {frags} ({distinct} distinct) in {dt:.2f}s  ->  {fps:.1f} fragments/sec")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("paths", nargs="+", help="Files or globs")
    ap.add_argument("--repeat", type=int, default=1, help="Repeat count")
    args = ap.parse_args(argv)

    run(args.paths, repeat=int(args.repeat))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
