import os
import unittest
from pathlib import Path
from unittest import mock

from redundant.config import Config, load_config
from redundant.options import normalize_cli_options, options_from_config
from redundant.options.validation import validate_cli_options


class TestConfig(unittest.TestCase):
    def tearDown(self):
        load_config(reload=True)

    def test_defaults(self):
        cfg = Config()
        self.assertEqual(cfg.page_marker, "Page")
        self.assertEqual(cfg.min_fragment_length, 40)
        self.assertEqual(cfg.input_extensions, ("txt",))
        self.assertTrue(cfg.fold_case)
        self.assertFalse(cfg.only_show_repeated)

    def test_environment_overrides(self):
        env = {
            "FOLD_CASE": "false",
            "ONLY_SHOW_REPEATED": "yes",
            "MIN_FRAGMENT_LENGTH": "12",
            "INPUT_EXTENSIONS": "txt, md",
            "IGNORE_PREFIXES": "Collapse Subdiscussion|Reply",
        }
        with mock.patch.dict(os.environ, env):
            cfg = load_config(reload=True)
        self.assertFalse(cfg.fold_case)
        self.assertTrue(cfg.only_show_repeated)
        self.assertEqual(cfg.min_fragment_length, 12)
        self.assertEqual(cfg.input_extensions, ("txt", "md"))
        self.assertEqual(cfg.ignore_prefixes, ("Collapse Subdiscussion", "Reply"))

    def test_bad_int_falls_back(self):
        with mock.patch.dict(os.environ, {"MIN_FRAGMENT_LENGTH": "lots"}):
            cfg = load_config(reload=True)
        self.assertEqual(cfg.min_fragment_length, 40)

    def test_validate_for_scan(self):
        Config().validate_for_scan()
        with self.assertRaises(RuntimeError):
            Config(min_fragment_length=-1).validate_for_scan()


class TestValidation(unittest.TestCase):
    def test_extensions_are_normalized(self):
        clean = validate_cli_options({"extensions": [".TXT", " md ", "txt"]})
        self.assertEqual(clean["extensions"], ["txt", "md"])

    def test_empty_strings_become_none(self):
        clean = validate_cli_options({"input_dir": "   ", "report_path": ""})
        self.assertIsNone(clean["input_dir"])
        self.assertIsNone(clean["report_path"])

    def test_negative_min_length_rejected(self):
        with self.assertRaises(ValueError):
            validate_cli_options({"min_length": -3})

    def test_fixup_repairs(self):
        clean = validate_cli_options({"min_length": -3, "extensions": ["t.x t"]}, fixup=True)
        self.assertEqual(clean["min_length"], 0)
        self.assertEqual(clean["extensions"], ["txt"])

    def test_bad_extension_rejected_without_fixup(self):
        with self.assertRaises(ValueError):
            validate_cli_options({"extensions": ["t x t"]})

    def test_empty_marker_rejected(self):
        with self.assertRaises(ValueError):
            validate_cli_options({"page_marker": ""})


class TestNormalizeCliOptions(unittest.TestCase):
    def test_cli_values_win_over_config(self):
        cfg = Config(fold_case=True, min_fragment_length=40)
        opts = normalize_cli_options(cfg=cfg, fold_case=False, min_length=10, input_dir="threads")
        self.assertFalse(opts.scan.fold_case)
        self.assertEqual(opts.scan.min_length, 10)
        self.assertEqual(opts.sources.input_dir, Path("threads"))
        self.assertEqual(opts.sources.report_path, cfg.report_path)

    def test_none_keeps_config(self):
        cfg = Config(only_show_repeated=True, ignore_prefixes=("X",))
        opts = normalize_cli_options(cfg=cfg)
        self.assertEqual(opts, options_from_config(cfg))
        self.assertTrue(opts.report.only_show_repeated)
        self.assertEqual(opts.report.ignore_prefixes, ("X",))


if __name__ == "__main__":
    unittest.main()
