"""Tests for the registry authorization command."""

from __future__ import annotations

import io
import subprocess
import unittest
from pathlib import Path
from unittest.mock import patch

from rich.console import Console

from git_smart_init.exceptions import AuthorizationError
from git_smart_init.registry import authorize


class AuthorizeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.output = io.StringIO()
        self.console = Console(file=self.output, width=120)

    def test_runs_split_command_in_repository(self) -> None:
        with patch("git_smart_init.registry.subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess([], 0, stdout="ok", stderr="")
            authorize("npm run auth", cwd=Path("/repo"), console=self.console)

        self.assertEqual(run.call_args.args[0], ["npm", "run", "auth"])
        self.assertEqual(run.call_args.kwargs["cwd"], "/repo")
        self.assertIn('Running "npm run auth" to authorize downloads', self.output.getvalue())

    def test_non_zero_exit_raises(self) -> None:
        with patch("git_smart_init.registry.subprocess.run") as run:
            run.return_value = subprocess.CompletedProcess([], 1, stdout="", stderr="E401")
            with self.assertRaises(AuthorizationError) as caught:
                authorize("npm run auth", cwd=Path("/repo"), console=self.console)

        self.assertEqual(caught.exception.returncode, 1)
        self.assertIn("E401", str(caught.exception))

    def test_missing_executable_raises(self) -> None:
        with patch("git_smart_init.registry.subprocess.run", side_effect=FileNotFoundError):
            with self.assertRaises(AuthorizationError):
                authorize("npm run auth", cwd=Path("/repo"), console=self.console)

    def test_empty_command_raises(self) -> None:
        with self.assertRaises(AuthorizationError):
            authorize("  ", cwd=Path("/repo"), console=self.console)


if __name__ == "__main__":
    unittest.main()
