import json
import os
import shutil
import unittest
from pathlib import Path
from unittest.mock import patch
from uuid import uuid4

from brave_search_toolkit.app_config import load_json_config, parse_app_config, resolve_runtime_env

PROJECT_ROOT = Path(__file__).resolve().parents[1]


class TestAppConfig(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp_dir = PROJECT_ROOT / ".test-artifacts" / f"appconfig-{uuid4().hex}"
        self._tmp_dir.mkdir(parents=True, exist_ok=True)

    def tearDown(self) -> None:
        shutil.rmtree(self._tmp_dir, ignore_errors=True)

    def test_defaults(self) -> None:
        app = parse_app_config({})

        self.assertEqual(app.log_level, "WARNING")
        self.assertIsNone(app.log_file)
        self.assertEqual(app.timeout_seconds, 15.0)

    def test_values(self) -> None:
        app = parse_app_config(
            {"LogLevel": "debug", "LogFile": "logs/search.log", "TimeoutSeconds": "4.5"}
        )

        self.assertEqual(app.log_level, "DEBUG")
        self.assertEqual(app.log_file, "logs/search.log")
        self.assertEqual(app.timeout_seconds, 4.5)

    def test_load_json_config(self) -> None:
        path = self._tmp_dir / "config.json"
        path.write_text(json.dumps({"LogLevel": "INFO"}), encoding="utf-8")

        self.assertEqual(load_json_config(path), {"LogLevel": "INFO"})

    def test_load_missing_json_config(self) -> None:
        self.assertEqual(load_json_config(self._tmp_dir / "missing.json"), {})

    def test_resolve_runtime_env(self) -> None:
        with patch.dict(os.environ, {"BRAVE_SEARCH_API_KEY": "abc"}):
            self.assertEqual(resolve_runtime_env().brave_search_api_key, "abc")


if __name__ == "__main__":
    unittest.main()
