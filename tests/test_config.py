import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from htmllog.config import load_config, report_validation, validate_config
from htmllog.logger import DUPLICATE_REJECT, Logger

TEMPLATE_PATH = Path(__file__).resolve().parents[1] / "config_template.json"


class ConfigTest(unittest.TestCase):
    def _load(self, logs_path):
        cfg = load_config(str(TEMPLATE_PATH))
        cfg["logs_path"] = logs_path
        return cfg

    def test_template_valid(self):
        with tempfile.TemporaryDirectory() as td:
            errors, warnings = validate_config(self._load(td))
            self.assertEqual([], errors)
            self.assertEqual([], warnings)

    def test_missing_logs_path_dir_warns(self):
        with tempfile.TemporaryDirectory() as td:
            errors, warnings = validate_config(self._load(str(Path(td) / "nope")))
            self.assertEqual([], errors)
            self.assertTrue(any("logs_path" in w for w in warnings))

    def test_unsafe_title(self):
        with tempfile.TemporaryDirectory() as td:
            cfg = self._load(td)
            cfg["title"] = "a/b"
            errors, _ = validate_config(cfg)
            self.assertTrue(any("title" in e for e in errors))

    def test_invalid_fields(self):
        with tempfile.TemporaryDirectory() as td:
            cfg = self._load(td)
            cfg["duplicate_sections"] = "merge"
            cfg["echo"] = "yes"
            cfg["runtime_log"] = 3
            errors, _ = validate_config(cfg)
            self.assertTrue(any("duplicate_sections" in e for e in errors))
            self.assertTrue(any("echo" in e for e in errors))
            self.assertTrue(any("runtime_log" in e for e in errors))

    def test_not_an_object(self):
        errors, _ = validate_config([])
        self.assertEqual(["Config must be a JSON object."], errors)

    def test_report_validation_raises_on_errors(self):
        with patch("builtins.print") as mocked:
            with self.assertRaises(SystemExit):
                report_validation(["title is required"], ["careful"])
        mocked.assert_any_call("[WARN] careful")
        mocked.assert_any_call("[ERROR] title is required")

    def test_load_config_with_bom(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "cfg.json"
            path.write_text(json.dumps({"title": "T"}), encoding="utf-8-sig")
            self.assertEqual({"title": "T"}, load_config(str(path)))

    def test_from_config_echoes_to_runtime_log(self):
        with tempfile.TemporaryDirectory() as td:
            cfg = self._load(td)
            cfg["runtime_log"] = str(Path(td) / "runtime" / "htmllog.log")
            cfg["duplicate_sections"] = DUPLICATE_REJECT
            log = Logger.from_config(cfg)
            log.create_section("Phase 1", "P1")
            log.info("P1", "started")

            self.assertEqual("Import", log.title)
            self.assertEqual(DUPLICATE_REJECT, log.duplicate_sections)
            text = Path(cfg["runtime_log"]).read_text(encoding="utf-8")
            self.assertIn("[SECTION][P1] open Phase 1", text)
            self.assertIn("[INFO][P1] started", text)
            self.assertTrue(Path(log.path).exists())


if __name__ == "__main__":
    unittest.main()
