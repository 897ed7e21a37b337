import unittest

from redundant.aggregation import AggregationTable, SentenceRecord
from redundant.options import ReportOptions
from redundant.report import format_record, rank_records, render_report, select_records


def _table(*items):
    """items: (source, text) pairs ingested in order."""
    table = AggregationTable()
    for src, text in items:
        table.ingest(src, text)
    return table


class TestFormatRecord(unittest.TestCase):
    def test_with_provenance(self):
        rec = SentenceRecord(text="Some sentence", count=3, provenance=["a", "b"])
        self.assertEqual(format_record(rec), "3 a b\tSome sentence")

    def test_without_provenance(self):
        rec = SentenceRecord(text="Some sentence", count=1)
        self.assertEqual(format_record(rec), "1\tSome sentence")


class TestRanking(unittest.TestCase):
    def test_descending_and_stable(self):
        recs = [
            SentenceRecord("one", 1),
            SentenceRecord("three", 3),
            SentenceRecord("also one", 1),
            SentenceRecord("two", 2),
        ]
        ranked = rank_records(recs)
        self.assertEqual([r.text for r in ranked], ["three", "two", "one", "also one"])
        for a, b in zip(ranked, ranked[1:]):
            self.assertGreaterEqual(a.count, b.count)


class TestRenderReport(unittest.TestCase):
    def test_header_counts_all_distinct_records(self):
        table = _table(
            ("A", "Collapse Subdiscussion and move on"),
            ("B", "Collapse Subdiscussion and move on"),
            ("A", "A perfectly ordinary sentence"),
        )
        lines = render_report(table)
        self.assertEqual(lines[0], "Total sentences: 2")
        self.assertEqual(lines[1:], ["1 A\tA perfectly ordinary sentence"])

    def test_boilerplate_excluded_even_when_highest(self):
        table = _table(*[("A", "Collapse Subdiscussion and move on")] * 5, ("B", "Something else"))
        lines = render_report(table)
        self.assertFalse(any("Collapse Subdiscussion" in ln for ln in lines[1:]))

    def test_custom_ignore_prefixes(self):
        table = _table(("A", "Reply to this thread"), ("A", "Keep me"))
        lines = render_report(table, ReportOptions(ignore_prefixes=("Reply",)))
        self.assertEqual(lines[1:], ["1 A\tKeep me"])

    def test_only_show_repeated(self):
        table = _table(("A", "Said twice"), ("B", "Said twice"), ("A", "Said once"))
        lines = render_report(table, ReportOptions(only_show_repeated=True))
        self.assertEqual(lines, ["Total sentences: 2", "2 A B\tSaid twice"])

    def test_only_show_repeated_falls_back_to_all(self):
        table = _table(("A", "First"), ("B", "Second"))
        lines = render_report(table, ReportOptions(only_show_repeated=True))
        self.assertEqual(lines[1:], ["1 A\tFirst", "1 B\tSecond"])

    def test_repeated_boilerplate_does_not_block_fallback(self):
        recs = [
            SentenceRecord("Collapse Subdiscussion", 4, ["A"]),
            SentenceRecord("Only once", 1, ["A"]),
        ]
        kept = select_records(rank_records(recs), ReportOptions(only_show_repeated=True))
        self.assertEqual([r.text for r in kept], ["Only once"])

    def test_empty_table(self):
        self.assertEqual(render_report(AggregationTable()), ["Total sentences: 0"])


if __name__ == "__main__":
    unittest.main()
