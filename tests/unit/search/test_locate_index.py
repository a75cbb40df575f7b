"""``LocatePathIndex`` subprocess handling tests.

``subprocess.run`` is patched so no real locate database is needed.
"""

from __future__ import annotations

import subprocess
import unittest
from unittest import mock

from ccd.errors import LookupUnavailable
from ccd.search import LocatePathIndex


def _completed(stdout: bytes, returncode: int = 0) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=["locate"], returncode=returncode, stdout=stdout)


class LocatePathIndexTests(unittest.TestCase):
    def test_builds_limit_and_pattern_arguments(self) -> None:
        index = LocatePathIndex()
        with mock.patch("ccd.search.index.subprocess.run", return_value=_completed(b"/a\n/b\n")) as run:
            paths = index.lookup("proj", 100)
        self.assertEqual(paths, ["/a", "/b"])
        argv = run.call_args.args[0]
        self.assertEqual(argv, ["locate", "--limit", "100", "proj"])
        self.assertIsNone(run.call_args.kwargs["timeout"])

    def test_custom_command_prefix_and_timeout(self) -> None:
        index = LocatePathIndex(("plocate", "-d", "/db"), timeout=2.5)
        with mock.patch("ccd.search.index.subprocess.run", return_value=_completed(b"")) as run:
            index.lookup("x", 10)
        self.assertEqual(run.call_args.args[0], ["plocate", "-d", "/db", "--limit", "10", "x"])
        self.assertEqual(run.call_args.kwargs["timeout"], 2.5)

    def test_non_zero_exit_without_output_means_no_matches(self) -> None:
        with mock.patch("ccd.search.index.subprocess.run", return_value=_completed(b"", returncode=1)):
            self.assertEqual(LocatePathIndex().lookup("none", 100), [])

    def test_blank_lines_and_crlf_are_dropped(self) -> None:
        with mock.patch("ccd.search.index.subprocess.run", return_value=_completed(b"/a\r\n\n  \n/b")):
            self.assertEqual(LocatePathIndex().lookup("x", 100), ["/a", "/b"])

    def test_missing_program_raises_lookup_unavailable(self) -> None:
        with mock.patch("ccd.search.index.subprocess.run", side_effect=FileNotFoundError("locate")):
            with self.assertRaises(LookupUnavailable) as ctx:
                LocatePathIndex().lookup("x", 100)
        self.assertIn("Failed to execute locate", str(ctx.exception))

    def test_timeout_raises_lookup_unavailable(self) -> None:
        expired = subprocess.TimeoutExpired(cmd=["locate"], timeout=1.0)
        with mock.patch("ccd.search.index.subprocess.run", side_effect=expired):
            with self.assertRaises(LookupUnavailable):
                LocatePathIndex(timeout=1.0).lookup("x", 100)


if __name__ == "__main__":
    unittest.main()
