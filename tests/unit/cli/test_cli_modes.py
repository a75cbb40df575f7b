"""CLI dispatch, output channel, and exit-code tests.

Each test points ``HOME`` at a temporary directory and substitutes a fake
path index, so neither the real usage store nor ``locate`` is touched.
"""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from ccd import cli
from ccd.errors import LookupUnavailable
from ccd.runtime.app import deliver_selection
from ccd.store import STORE_FILENAME
from tests.fakes import FakePathIndex


class CliModeTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.home = Path(self._tmp.name).resolve()
        self.store_path = self.home / STORE_FILENAME
        self.index = FakePathIndex()
        for patcher in (
            mock.patch.dict(os.environ, {"HOME": str(self.home)}),
            mock.patch("ccd.runtime.config.CONFIG_PATH", self.home / "config.json"),
            mock.patch("ccd.cli.LocatePathIndex", return_value=self.index),
        ):
            patcher.start()
            self.addCleanup(patcher.stop)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = cli.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_no_arguments_prints_usage(self) -> None:
        code, out, _err = self._run()
        self.assertEqual(code, 0)
        self.assertIn("USAGE:", out)
        self.assertEqual(self.index.calls, [])

    def test_help_flags_print_usage(self) -> None:
        for flag in ("-h", "--help"):
            code, out, _err = self._run(flag)
            self.assertEqual(code, 0)
            self.assertIn("ccd-pick <search_pattern>", out)

    def test_pattern_prints_best_directory_on_stdout(self) -> None:
        proj = self.home / "proj"
        proj.mkdir()
        notes = proj / "notes.txt"
        notes.write_text("x", encoding="utf-8")
        self.store_path.write_text(f"3\t{proj}\n", encoding="utf-8")
        self.index.results = [str(notes), str(proj)]

        code, out, err = self._run("pro")

        self.assertEqual(code, 0)
        self.assertEqual(out, f"{proj}\n")
        self.assertIn("Searching for directories matching: pro", err)
        self.assertIn(f"1 matching files not shown, selected: {proj} (used 3 times)", err)
        self.assertEqual(self.store_path.read_text(encoding="utf-8"), f"3\t{proj}\n")

    def test_no_directories_found_exits_one_with_friendly_message(self) -> None:
        code, out, err = self._run("zzz")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("No directories found matching 'zzz'", err)

    def test_lookup_unavailable_exits_one_with_error(self) -> None:
        self.index.error = LookupUnavailable("Locate command error: Failed to execute locate")
        code, out, err = self._run("proj")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Error: Locate command error", err)

    def test_unknown_dash_word_is_a_pattern(self) -> None:
        self._run("-weird", "extra")
        self.assertEqual(self.index.calls, [("-weird", 100)])

    def test_abbreviated_long_flags_are_patterns(self) -> None:
        for word in ("--book", "--inc", "--verb"):
            code, _out, err = self._run(word)
            self.assertEqual(code, 1, msg=word)
            self.assertIn(f"No directories found matching '{word}'", err)
        self.assertEqual(self.index.calls, [("--book", 100), ("--inc", 100), ("--verb", 100)])
        self.assertFalse(self.store_path.exists())

    def test_lone_verbose_flag_is_a_pattern(self) -> None:
        for word in ("-v", "--verbose"):
            code, out, _err = self._run(word)
            self.assertEqual(code, 1, msg=word)
            self.assertNotIn("USAGE:", out)
        self.assertEqual(self.index.calls, [("-v", 100), ("--verbose", 100)])

    def test_bookmark_records_current_directory_once(self) -> None:
        previous = os.getcwd()
        os.chdir(self.home)
        try:
            code, _out, err = self._run("-b")
            self.assertEqual(code, 0)
            self.assertIn(f"Bookmarked: {self.home}", err)
            self.store_path.write_text(f"5\t{self.home}\n", encoding="utf-8")
            code, _out, err = self._run("--bookmark")
        finally:
            os.chdir(previous)
        self.assertEqual(code, 0)
        self.assertIn(f"Directory already bookmarked: {self.home}", err)
        self.assertEqual(self.store_path.read_text(encoding="utf-8"), f"5\t{self.home}\n")

    def test_increment_adds_one_use(self) -> None:
        self.assertEqual(self._run("--increment", "/some/dir")[0], 0)
        self.assertEqual(self._run("--increment", "/some/dir")[0], 0)
        self.assertEqual(self.store_path.read_text(encoding="utf-8"), "2\t/some/dir\n")

    def test_unwritable_store_is_fatal_for_increment(self) -> None:
        self.store_path.mkdir()
        code, _out, err = self._run("--increment", "/x")
        self.assertEqual(code, 1)
        self.assertIn("Error: cannot read", err)

    def test_interactive_selection_is_delivered(self) -> None:
        with mock.patch("ccd.runtime.app.run_picker", return_value="/picked") as run_picker, mock.patch(
            "ccd.runtime.app.deliver_selection"
        ) as deliver:
            code, _out, _err = self._run("-i")
        self.assertEqual(code, 0)
        run_picker.assert_called_once()
        deliver.assert_called_once_with("/picked")

    def test_interactive_quit_exits_one(self) -> None:
        with mock.patch("ccd.runtime.app.run_picker", return_value=None), mock.patch(
            "ccd.runtime.app.deliver_selection"
        ) as deliver:
            code, _out, _err = self._run("-i")
        self.assertEqual(code, 1)
        deliver.assert_not_called()


class DeliverSelectionTests(unittest.TestCase):
    def test_writes_to_fd_three_when_open(self) -> None:
        with mock.patch("ccd.runtime.app.os.write") as write:
            deliver_selection("/picked")
        write.assert_called_once_with(3, b"/picked\n")

    def test_falls_back_to_stdout_when_fd_three_is_closed(self) -> None:
        raw = io.BytesIO()
        stdout = io.TextIOWrapper(raw, encoding="utf-8")
        with mock.patch("ccd.runtime.app.os.write", side_effect=OSError(9, "Bad file descriptor")), mock.patch(
            "ccd.runtime.app.sys.stdout", stdout
        ):
            deliver_selection("/picked")
        self.assertEqual(raw.getvalue(), b"/picked\n")


if __name__ == "__main__":
    unittest.main()
