from __future__ import annotations

import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from pathkeeper import (
    NotADirectoryPathError,
    PathRegistry,
    StartupValidationError,
    UnknownKeyError,
)
from pathkeeper.startup import build_report, validate_required

from tests.helpers import ReadOnlyFilesystem


class ValidateRequiredTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = TemporaryDirectory()
        self.home = Path(self._tmp.name)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_creates_and_returns_required_paths(self) -> None:
        registry = PathRegistry(self.home, {"uploads": "files/uploads", "logs": "logs", "cache": "cache"})

        ensured = validate_required(registry, ["uploads", "logs"])

        self.assertEqual(
            ensured,
            {"uploads": self.home / "files" / "uploads", "logs": self.home / "logs"},
        )
        self.assertTrue((self.home / "logs").is_dir())
        self.assertFalse((self.home / "cache").exists())

    def test_unknown_required_key(self) -> None:
        registry = PathRegistry(self.home, {"uploads": "files/uploads"})

        with self.assertRaises(StartupValidationError) as ctx:
            validate_required(registry, ["uploads", "archive"])

        self.assertEqual(ctx.exception.key, "archive")
        self.assertIn("archive", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, UnknownKeyError)

    def test_file_in_place_of_directory(self) -> None:
        (self.home / "logs").write_text("oops", encoding="utf-8")
        registry = PathRegistry(self.home, {"logs": "logs"})

        with self.assertRaises(StartupValidationError) as ctx:
            validate_required(registry, ["logs"])

        self.assertIsInstance(ctx.exception.__cause__, NotADirectoryPathError)
        self.assertIn("not a directory", str(ctx.exception))

    def test_unwritable_directory(self) -> None:
        registry = PathRegistry(self.home, {"logs": "logs"}, filesystem=ReadOnlyFilesystem())

        with self.assertRaises(StartupValidationError) as ctx:
            validate_required(registry, ["logs"])

        self.assertEqual(ctx.exception.key, "logs")
        self.assertIn("not writable", ctx.exception.reason)

    def test_fails_fast_on_first_error(self) -> None:
        registry = PathRegistry(self.home, {"uploads": "files/uploads"})

        with self.assertRaises(StartupValidationError):
            validate_required(registry, ["missing", "uploads"])

        self.assertFalse((self.home / "files").exists())


class BuildReportTests(unittest.TestCase):
    def test_report_describes_every_entry(self) -> None:
        with TemporaryDirectory() as tmpdir:
            home = Path(tmpdir)
            registry = PathRegistry(home, {"uploads": "files/uploads", "cache": "cache"})
            ensured = validate_required(registry, ["uploads"])

            report = build_report(registry, ensured)

        self.assertEqual(report["home"], str(home))
        self.assertTrue(report["case_sensitive"])
        by_key = {entry["key"]: entry for entry in report["entries"]}
        self.assertEqual(by_key["uploads"]["raw_value"], "files/uploads")
        self.assertTrue(by_key["uploads"]["exists"])
        self.assertTrue(by_key["uploads"]["writable"])
        self.assertTrue(by_key["uploads"]["required"])
        self.assertFalse(by_key["cache"]["exists"])
        self.assertFalse(by_key["cache"]["writable"])
        self.assertFalse(by_key["cache"]["required"])


if __name__ == "__main__":
    unittest.main()
