"""Git config lookup and repository discovery tests."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from git_filemode import config, paths


class RepositoryTestCase(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        base = Path(tmp.name).resolve()
        self.repo = base / "repo"
        (self.repo / ".git").mkdir(parents=True)
        self.home = base / "home"
        self.home.mkdir()

        previous_cwd = Path.cwd()
        os.chdir(self.repo)
        self.addCleanup(os.chdir, previous_cwd)

        env = mock.patch.dict(os.environ, {"HOME": str(self.home)})
        env.start()
        self.addCleanup(env.stop)

    def write_local_config(self, text: str) -> None:
        (self.repo / ".git" / "config").write_text(text, encoding="utf-8")

    def write_global_config(self, text: str) -> None:
        (self.home / ".gitconfig").write_text(text, encoding="utf-8")


class FindRepositoryRootTests(RepositoryTestCase):
    def test_finds_root_from_nested_directory(self) -> None:
        nested = self.repo / "a" / "b"
        nested.mkdir(parents=True)
        self.assertEqual(paths.find_repository_root(nested), self.repo)
        self.assertEqual(paths.find_config_file(nested), self.repo / ".git" / "config")

    def test_uses_current_directory_by_default(self) -> None:
        self.assertEqual(paths.find_repository_root(), self.repo)

    def test_raises_outside_repository(self) -> None:
        with self.assertRaises(paths.NotGitRepositoryError):
            paths.find_repository_root(self.home)


class GetConfigTests(RepositoryTestCase):
    def test_reads_tab_indented_local_config(self) -> None:
        self.write_local_config("[core]\n\trepositoryformatversion = 0\n\tfilemode = false\n\tbare = false\n")
        self.assertEqual(config.get_config("core", "filemode"), "false")
        self.assertEqual(config.get_config("core", "bare"), "false")

    def test_local_config_takes_precedence(self) -> None:
        self.write_local_config("[core]\n\tfilemode = false\n")
        self.write_global_config("[core]\n\tfilemode = true\n")
        self.assertFalse(config.filemode_enabled())

    def test_falls_back_to_global_config(self) -> None:
        self.write_local_config("[core]\n\tbare = false\n")
        self.write_global_config("[core]\n\tfileMode = false\n")
        self.assertEqual(config.get_config("core", "filemode"), "false")
        self.assertFalse(config.filemode_enabled())

    def test_missing_key_returns_none(self) -> None:
        self.assertIsNone(config.get_config("core", "filemode"))
        self.assertTrue(config.filemode_enabled())

    def test_global_config_used_outside_repository(self) -> None:
        self.write_local_config("[core]\n\tfilemode = true\n")
        self.write_global_config("[core]\n\tfilemode = no\n")
        with mock.patch(
            "git_filemode.config.paths.find_config_file",
            side_effect=paths.NotGitRepositoryError("not a repository"),
        ):
            self.assertFalse(config.filemode_enabled())


class GetBoolConfigTests(RepositoryTestCase):
    def test_git_boolean_spellings(self) -> None:
        cases = [
            ("true", True),
            ("Yes", True),
            ("on", True),
            ("1", True),
            ("FALSE", False),
            ("no", False),
            ("off", False),
            ("0", False),
        ]
        for text, expected in cases:
            with self.subTest(text=text):
                self.write_local_config(f"[core]\n\tfilemode = {text}\n")
                self.assertEqual(config.get_bool_config("core", "filemode", default=not expected), expected)

    def test_key_without_value_is_true(self) -> None:
        self.write_local_config("[core]\n\tfilemode\n")
        self.assertTrue(config.get_bool_config("core", "filemode"))

    def test_empty_value_is_false(self) -> None:
        self.write_local_config("[core]\n\tfilemode =\n")
        self.assertFalse(config.filemode_enabled())

    def test_section_name_ignores_case(self) -> None:
        self.write_local_config("[Core]\n\tfilemode = false\n")
        self.assertEqual(config.get_config("core", "filemode"), "false")
        self.assertFalse(config.filemode_enabled())

    def test_unrecognized_value_uses_default(self) -> None:
        self.write_local_config("[core]\n\tfilemode = maybe\n")
        self.assertTrue(config.filemode_enabled())
        self.assertFalse(config.get_bool_config("core", "filemode"))


if __name__ == "__main__":
    unittest.main()
