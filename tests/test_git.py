"""Tests for the git subprocess wrappers."""

from __future__ import annotations

import subprocess
import unittest
from pathlib import Path
from unittest.mock import patch

from git_smart_init import git
from git_smart_init.exceptions import GitCommandError, RemoteLookupError


def _completed(args: list[str], returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr=stderr)


class RemoteUrlTests(unittest.TestCase):
    def test_returns_trimmed_url(self) -> None:
        with patch("git_smart_init.git.subprocess.run") as run:
            run.return_value = _completed([], stdout="https://github.com/acme/tool.git\n")
            url = git.remote_url(Path("/repo"))

        self.assertEqual(url, "https://github.com/acme/tool.git")
        command = run.call_args.args[0]
        self.assertEqual(command, ["git", "config", "--get", "remote.origin.url"])
        self.assertEqual(run.call_args.kwargs["cwd"], "/repo")

    def test_missing_remote_raises_lookup_error(self) -> None:
        with patch("git_smart_init.git.subprocess.run") as run:
            run.return_value = _completed([], returncode=1)
            with self.assertRaises(RemoteLookupError) as caught:
                git.remote_url(Path("/repo"))

        self.assertIsInstance(caught.exception.__cause__, GitCommandError)

    def test_empty_output_raises_lookup_error(self) -> None:
        with patch("git_smart_init.git.subprocess.run") as run:
            run.return_value = _completed([], stdout="\n")
            with self.assertRaises(RemoteLookupError):
                git.remote_url(Path("/repo"))


class RepositoryRootTests(unittest.TestCase):
    def test_returns_toplevel(self) -> None:
        with patch("git_smart_init.git.subprocess.run") as run:
            run.return_value = _completed([], stdout="/home/me/project\n")
            root = git.repository_root(Path("/home/me/project/src"))

        self.assertEqual(root, Path("/home/me/project"))

    def test_outside_repository_raises_lookup_error(self) -> None:
        with patch("git_smart_init.git.subprocess.run") as run:
            run.return_value = _completed([], returncode=128, stderr="fatal: not a git repository")
            with self.assertRaises(RemoteLookupError):
                git.repository_root(Path("/tmp"))


class RunGitTests(unittest.TestCase):
    def test_error_carries_command_and_output(self) -> None:
        with patch("git_smart_init.git.subprocess.run") as run:
            run.return_value = _completed([], returncode=2, stderr="boom")
            with self.assertRaises(GitCommandError) as caught:
                git.run_git(["status"])

        self.assertEqual(caught.exception.command, ["git", "status"])
        self.assertEqual(caught.exception.returncode, 2)
        self.assertIn("boom", str(caught.exception))

    def test_unchecked_failure_is_returned(self) -> None:
        with patch("git_smart_init.git.subprocess.run") as run:
            run.return_value = _completed([], returncode=1)
            result = git.run_git(["status"], check=False)

        self.assertEqual(result.returncode, 1)


if __name__ == "__main__":
    unittest.main()
