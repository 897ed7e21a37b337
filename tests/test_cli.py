import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from cli.main import build_parser, main


LONG = "Remember to submit the assignment through the course portal"


class TestCli(unittest.TestCase):
    def _run(self, argv, stdin: str = ""):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err), \
                mock.patch("sys.stdin", io.StringIO(stdin)):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_scan_writes_report_and_summary(self):
        with tempfile.TemporaryDirectory() as td:
            inp = Path(td) / "input"
            inp.mkdir()
            (inp / "w1.txt").write_text(f"Course\nPage\n{LONG}.\n", encoding="utf-8")
            (inp / "w2.txt").write_text(f"Page\n{LONG.lower()}\n", encoding="utf-8")
            report = Path(td) / "report.txt"
            code, out, _err = self._run(["scan", "--input", str(inp), "--report", str(report)])
            self.assertEqual(code, 0)
            summary = json.loads(out[: out.rindex("}") + 1])
            self.assertEqual(summary["action"], "scan")
            self.assertEqual(summary["sources"], 2)
            self.assertEqual(summary["total_sentences"], 1)
            self.assertTrue(out.strip().endswith("is ready."))
            lines = report.read_text(encoding="utf-8").splitlines()
            self.assertEqual(lines[0], "Total sentences: 1")
            self.assertTrue(lines[1].startswith("2 "))

    def test_scan_no_provenance(self):
        with tempfile.TemporaryDirectory() as td:
            inp = Path(td) / "input"
            inp.mkdir()
            (inp / "w1.txt").write_text(f"Page\n{LONG}\n", encoding="utf-8")
            report = Path(td) / "report.txt"
            code, _out, _err = self._run(
                ["scan", "--input", str(inp), "--report", str(report), "--no-provenance"]
            )
            self.assertEqual(code, 0)
            self.assertEqual(report.read_text(encoding="utf-8").splitlines()[1], f"1\t{LONG}")

    def test_scan_problem_exit_code(self):
        with tempfile.TemporaryDirectory() as td:
            inp = Path(td) / "input"
            inp.mkdir()
            (inp / "slides.pdf").write_bytes(b"%PDF")
            code, _out, err = self._run(
                ["scan", "--input", str(inp), "--report", str(Path(td) / "report.txt")]
            )
            self.assertEqual(code, 1)
            self.assertIn("slides.pdf is not a txt file", err)
            self.assertIn("Please review this problem", err)

    def test_scan_invalid_options(self):
        with tempfile.TemporaryDirectory() as td:
            code, _out, err = self._run(["scan", "--input", td, "--min-length", "-1"])
            self.assertEqual(code, 2)
            self.assertIn("invalid options", err)

    def test_paste_prints_repeated_only(self):
        stdin = f"Page\n{LONG}\nEND\nPage\n{LONG}!\nA different sentence that is also quite long\nEND\nEND\n"
        code, out, _err = self._run(["paste"], stdin=stdin)
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["Total sentences: 2", f"2 page1 page2\t{LONG}"])

    def test_paste_all(self):
        stdin = f"Page\n{LONG}\nEND\nEND\n"
        code, out, _err = self._run(["paste", "--all"], stdin=stdin)
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines(), ["Total sentences: 1", f"1 page1\t{LONG}"])

    def test_key(self):
        code, out, _err = self._run(["key", "Hello, World!"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "helloworld")
        code, out, _err = self._run(["key", "Hello, World!", "--no-fold-case"])
        self.assertEqual(out.strip(), "HelloWorld")

    def test_parser_requires_command(self):
        with self.assertRaises(SystemExit), contextlib.redirect_stderr(io.StringIO()):
            build_parser().parse_args([])


if __name__ == "__main__":
    unittest.main()
