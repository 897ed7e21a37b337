"""
redundant-sentences CLI

Command-line interface for finding sentences that recur across (or within)
exported discussion threads.

Commands:

  - scan [--input DIR] [--report PATH] [policy flags]
      Read every document in the input directory (txt by default), count
      sentences that repeat ignoring case and punctuation, and write the
      ranked report (default: report.txt). Any unusable entry in the input
      directory stops the run with a message saying what to fix.

  - paste [--sentinel END] [--report PATH] [--all]
      Interactive variant. Paste a page, then a line reading END; paste the
      next page, and so on. A second END in a row finishes the session and
      prints the report. Only repeated sentences are shown unless --all.

  - key "<text>" [--no-fold-case]
      Print the canonical key a fragment is grouped under (diagnostic).

Environment:
- `.env` is loaded at startup; see redundant.config for the variables
  (INPUT_DIR, REPORT_PATH, FOLD_CASE, ONLY_SHOW_REPEATED, LOG_LEVEL, ...).
  Command-line flags win over the environment.

Implementation map:
- Parsing: argparse
- Option validation: redundant.options.validation (pydantic)
- Pipeline: redundant.pipeline.{run_scan, run_paste}
"""

from __future__ import annotations

# --- LOAD .env EARLY -----------------------------------------------------------
from pathlib import Path as _PathLike

from dotenv import load_dotenv

load_dotenv(dotenv_path=_PathLike.cwd() / ".env", override=False)
# -----------------------------------------------------------------------------


import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from redundant.config import load_config
from redundant.logging_setup import setup_logging
from redundant.options import RunOptions, normalize_cli_options
from redundant.options.validation import validate_cli_options
from redundant.pipeline import ScanOutcome, run_paste, run_scan
from redundant.utils.text import normalize_key


# -----------------------------------------------------------------------------
# Small helpers
# -----------------------------------------------------------------------------

def _options_from_args(args: argparse.Namespace, **overrides) -> RunOptions:
    """
    Build RunOptions by:
      1) collecting raw values from argparse (None = not given)
      2) validating + normalizing them (pydantic, optional fixup)
      3) layering them over the loaded Config
    """
    raw = {
        "input_dir": getattr(args, "input", None),
        "report_path": getattr(args, "report", None),
        "extensions": getattr(args, "ext", None),
        "page_marker": getattr(args, "marker", None),
        "delimiter": getattr(args, "delimiter", None),
        "min_length": getattr(args, "min_length", None),
        "fold_case": getattr(args, "fold_case", None),
        "track_provenance": getattr(args, "track_provenance", None),
        "only_show_repeated": getattr(args, "only_repeated", None),
        "ignore_prefixes": getattr(args, "ignore_prefix", None),
    }
    raw.update(overrides)
    cfg = load_config()
    cfg.validate_for_scan()
    clean = validate_cli_options(raw, fixup=bool(getattr(args, "fixup", False)))
    return normalize_cli_options(cfg=cfg, **clean)


def _print_problem(outcome: ScanOutcome) -> None:
    print(outcome.problem.describe(), file=sys.stderr)


# -----------------------------------------------------------------------------
# Command implementations
# -----------------------------------------------------------------------------

def cmd_scan(args: argparse.Namespace) -> int:
    """
    Directory run.
    Side effects:
      - Creates the input directory if it is missing (and stops, asking for files)
      - Creates/overwrites the report file
    """
    try:
        options = _options_from_args(args)
    except (ValueError, RuntimeError) as e:
        print(f"ERROR: invalid options: {e}", file=sys.stderr)
        return 2

    outcome = run_scan(options)
    if not outcome.ok:
        _print_problem(outcome)
        return 1

    # Compact JSON summary for users/automation
    print(json.dumps({
        "action": "scan",
        "input_dir": str(options.sources.input_dir),
        "report": outcome.report_path,
        "sources": len(outcome.sources),
        "fragments": outcome.fragments,
        "total_sentences": outcome.total_sentences,
        "written": outcome.written,
    }, ensure_ascii=False, indent=2))
    print(f"{outcome.report_path} is ready.")
    return 0


def cmd_paste(args: argparse.Namespace) -> int:
    """
    Interactive run from stdin. The report goes to stdout (and to --report
    when given); prompts go to stderr.
    """
    cfg = load_config()
    try:
        options = _options_from_args(args, only_show_repeated=not args.all)
    except (ValueError, RuntimeError) as e:
        print(f"ERROR: invalid options: {e}", file=sys.stderr)
        return 2

    sentinel = args.sentinel or cfg.paste_sentinel
    print(
        f"Paste a page of text, then a line with {sentinel}. "
        f"Enter {sentinel} again to finish.",
        file=sys.stderr,
    )
    report_path = Path(args.report) if args.report else None
    outcome = run_paste(sys.stdin, options, sentinel=sentinel, report_path=report_path)
    for line in outcome.report_lines:
        print(line)
    if not outcome.ok:
        _print_problem(outcome)
        return 1
    return 0


def cmd_key(args: argparse.Namespace) -> int:
    """Print the canonical grouping key for a piece of text."""
    cfg = load_config()
    fold = cfg.fold_case if args.fold_case is None else args.fold_case
    print(normalize_key(args.text, fold_case=fold))
    return 0


# -----------------------------------------------------------------------------
# Argument parser construction
# -----------------------------------------------------------------------------

def _add_policy_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument("--no-fold-case", dest="fold_case", action="store_false", default=None,
                   help="Match sentences case-sensitively")
    p.add_argument("--no-provenance", dest="track_provenance", action="store_false", default=None,
                   help="Do not list the sources of each sentence")
    p.add_argument("--min-length", type=int, help="Fragments must be longer than this many characters (default 40)")
    p.add_argument("--marker", type=str, help="Line that starts the text body (default 'Page')")
    p.add_argument("--delimiter", type=str, help="Sentence delimiter (default '.')")
    p.add_argument("--ignore-prefix", action="append",
                   help="Drop sentences starting with this text (repeatable; replaces the default)")
    p.add_argument("--fixup", action="store_true", help="Repair invalid option values instead of failing")


def build_parser() -> argparse.ArgumentParser:
    """
    Define CLI structure, flags, choices, defaults, and handlers.
    Each subparser sets .set_defaults(func=...), which is called by main().
    """
    p = argparse.ArgumentParser(prog="redundant", description="Count redundant sentences in text")
    p.add_argument("--log-level", type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Override LOG_LEVEL")
    sub = p.add_subparsers(dest="command", required=True)

    # --- scan ---
    ps = sub.add_parser("scan", help="Scan the input directory and write the report")
    ps.add_argument("--input", type=str, help="Input directory (default: input/)")
    ps.add_argument("--report", type=str, help="Report file (default: report.txt)")
    ps.add_argument("--ext", nargs="+", help="Accepted file extensions (default: txt)")
    ps.add_argument("--only-repeated", dest="only_repeated", action="store_true", default=None,
                    help="Show only sentences seen more than once (when there are any)")
    _add_policy_flags(ps)
    ps.set_defaults(func=cmd_scan)

    # --- paste ---
    pp = sub.add_parser("paste", help="Paste pages interactively and print the report")
    pp.add_argument("--sentinel", type=str, help="Line that ends a page (default: END)")
    pp.add_argument("--report", type=str, help="Also write the report to this file")
    pp.add_argument("--all", action="store_true", help="Show all sentences, not only repeated ones")
    _add_policy_flags(pp)
    pp.set_defaults(func=cmd_paste)

    # --- key ---
    pk = sub.add_parser("key", help="Print the canonical key of a text fragment")
    pk.add_argument("text", help="Fragment text (use quotes)")
    pk.add_argument("--no-fold-case", dest="fold_case", action="store_false", default=None,
                    help="Keep case when building the key")
    pk.set_defaults(func=cmd_key)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entrypoint for module execution:
      - Parse CLI args
      - Configure logging
      - Dispatch to subcommand handler
      - Return handler's exit code as process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(load_config(), level=args.log_level)
    return args.func(args)


if __name__ == "__main__":
    # Allow executing this file directly: `python cli/main.py ...`
    raise SystemExit(main())
