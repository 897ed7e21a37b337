import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from tools.bench_scan import run


LONG = "This is a moderately long example sentence for testing"


class TestBenchScan(unittest.TestCase):
    def test_absolute_glob_pattern(self):
        with tempfile.TemporaryDirectory() as td:
            td = Path(td).resolve()
            (td / "a.txt").write_text(f"Page\n{LONG}.\n", encoding="utf-8")
            (td / "b.txt").write_text(f"Page\n{LONG}.\n", encoding="utf-8")
            out = io.StringIO()
            with contextlib.redirect_stdout(out):
                run([str(td / "*.txt")], repeat=2)
            self.assertIn("Scanned fragments: 4 (1 distinct)", out.getvalue())

    def test_no_match(self):
        with tempfile.TemporaryDirectory() as td:
            out = io.StringIO()
            with contextlib.redirect_stdout(out):
                run([str(Path(td) / "*.txt")])
            self.assertEqual(out.getvalue().strip(), "No files found.")


if __name__ == "__main__":
    unittest.main()
