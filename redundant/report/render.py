"""
Render the ranked redundant-sentence report.

What this does:
- Rank records by descending occurrence count (stable: ties keep first-seen order).
- Emit a "Total sentences: N" header counting every distinct sentence.
- Drop boilerplate records (text starting with an ignored prefix).
- Optionally keep only sentences seen more than once.
- Format each record as "count[ source...]<TAB>text".
"""

from __future__ import annotations

from typing import Iterable, List, Sequence

from redundant.aggregation import AggregationTable, SentenceRecord
from redundant.options import ReportOptions


def _is_nontrivial(rec: SentenceRecord, ignore_prefixes: Sequence[str]) -> bool:
    return not any(rec.text.startswith(p) for p in ignore_prefixes)


def rank_records(records: Iterable[SentenceRecord]) -> List[SentenceRecord]:
    """Sort by descending count; sorted() is stable so ties keep their order."""
    return sorted(records, key=lambda r: -r.count)


def format_record(rec: SentenceRecord) -> str:
    """
    One report line: the count, each provenance entry preceded by a space,
    then a tab and the sentence text.
    """
    parts = [str(rec.count)]
    parts.extend(rec.provenance)
    return " ".join(parts) + "\t" + rec.text


def select_records(
    ranked: Sequence[SentenceRecord],
    options: ReportOptions,
) -> List[SentenceRecord]:
    """
    Apply the boilerplate filter and, when only_show_repeated is on, keep the
    repeated sentences if there are any (all nontrivial ones otherwise).
    """
    nontrivial = [r for r in ranked if _is_nontrivial(r, options.ignore_prefixes)]
    if options.only_show_repeated:
        repeated = [r for r in nontrivial if r.count > 1]
        if repeated:
            return repeated
    return nontrivial


def render_report(
    table: AggregationTable | Iterable[SentenceRecord],
    options: ReportOptions | None = None,
) -> List[str]:
    """
    Build the report lines for a finished run.

    Args:
        table: the run's AggregationTable (or any iterable of records)
        options: filtering policy; defaults to ReportOptions()

    Returns:
        ["Total sentences: N", "<count> <sources>\\t<text>", ...]
    """
    opts = options or ReportOptions()
    ranked = rank_records(table)
    lines = [f"Total sentences: {len(ranked)}"]
    lines.extend(format_record(r) for r in select_records(ranked, opts))
    return lines
