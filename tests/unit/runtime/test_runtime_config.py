"""Tests for config loading and input sanitization.

Validates locate command/timeout coercion and theme-name handling.
Ensures malformed config data is safely normalized on load.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from ccd.runtime import config


class ConfigBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = Path(self._tmp.name) / "ccd" / "config.json"
        patcher = mock.patch("ccd.runtime.config.CONFIG_PATH", self.config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, data: object) -> None:
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(json.dumps(data), encoding="utf-8")

    def test_missing_config_uses_defaults(self) -> None:
        self.assertEqual(config.load_config(), {})
        self.assertEqual(config.load_locate_command(), ("locate",))
        self.assertIsNone(config.load_locate_timeout())
        self.assertIsNone(config.load_theme_name())

    def test_malformed_or_non_object_config_is_ignored(self) -> None:
        self.config_path.parent.mkdir(parents=True)
        self.config_path.write_text("{not json", encoding="utf-8")
        self.assertEqual(config.load_config(), {})
        self.config_path.write_text("[1, 2]", encoding="utf-8")
        self.assertEqual(config.load_config(), {})

    def test_theme_name_is_read_from_config(self) -> None:
        self._write({"theme": "ocean"})
        self.assertEqual(config.load_theme_name(), "ocean")

    def test_locate_command_accepts_string_or_list(self) -> None:
        self._write({"locate_command": " plocate "})
        self.assertEqual(config.load_locate_command(), ("plocate",))
        self._write({"locate_command": ["locate", "-d", "/var/db"]})
        self.assertEqual(config.load_locate_command(), ("locate", "-d", "/var/db"))

    def test_locate_command_rejects_invalid_shapes(self) -> None:
        for value in ("", [], ["ok", ""], ["ok", 3], 7):
            self._write({"locate_command": value})
            self.assertEqual(config.load_locate_command(), ("locate",), msg=repr(value))

    def test_locate_timeout_requires_positive_number(self) -> None:
        self._write({"locate_timeout": 3})
        self.assertEqual(config.load_locate_timeout(), 3.0)
        for value in (0, -1, True, "5", None):
            self._write({"locate_timeout": value})
            self.assertIsNone(config.load_locate_timeout(), msg=repr(value))

    def test_blank_theme_name_is_unset(self) -> None:
        self._write({"theme": "   "})
        self.assertIsNone(config.load_theme_name())


if __name__ == "__main__":
    unittest.main()
