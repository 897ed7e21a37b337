"""
Exact-duplicate sentence aggregation.

Fragments are grouped by their canonical key (see redundant.utils.normalize_key).
Each group keeps the first-seen text, an occurrence count and the list of
sources that contributed to it.

Public API:
    SentenceRecord
    AggregationTable(fold_case=True, track_provenance=True)
        .ingest(source, raw_text) -> SentenceRecord
        .ingest_fragments(fragments) -> int
        .records() -> list[SentenceRecord]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional

from redundant.scanning import Fragment
from redundant.utils.text import normalize_key


@dataclass
class SentenceRecord:
    """One distinct sentence: display text, occurrence count and provenance."""
    text: str
    count: int = 0
    provenance: List[str] = field(default_factory=list)

    def push(self, source: Optional[str]) -> None:
        # Consecutive occurrences from the same source are recorded once.
        if source is not None and (not self.provenance or self.provenance[-1] != source):
            self.provenance.append(source)
        self.count += 1


class AggregationTable:
    """
    Mapping from canonical key to SentenceRecord for a single run.
    Build one per run and hand it to the reporter when all sources are in.
    """

    def __init__(self, *, fold_case: bool = True, track_provenance: bool = True) -> None:
        self.fold_case = bool(fold_case)
        self.track_provenance = bool(track_provenance)
        self._records: Dict[str, SentenceRecord] = {}

    def key_for(self, raw_text: str) -> str:
        return normalize_key(raw_text, fold_case=self.fold_case)

    def ingest(self, source: str, raw_text: str) -> SentenceRecord:
        key = self.key_for(raw_text)
        rec = self._records.get(key)
        if rec is None:
            rec = SentenceRecord(text=raw_text.strip())
            self._records[key] = rec
        rec.push(source if self.track_provenance else None)
        return rec

    def ingest_fragments(self, fragments: Iterable[Fragment]) -> int:
        """Fold every fragment into the table; return how many were ingested."""
        n = 0
        for frag in fragments:
            self.ingest(frag.source, frag.text)
            n += 1
        return n

    def get(self, raw_text: str) -> Optional[SentenceRecord]:
        """Look up the record a fragment would be folded into."""
        return self._records.get(self.key_for(raw_text))

    def records(self) -> List[SentenceRecord]:
        """All records in first-seen order."""
        return list(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[SentenceRecord]:
        return iter(self._records.values())

    def __contains__(self, raw_text: object) -> bool:
        return isinstance(raw_text, str) and self.key_for(raw_text) in self._records
