"""Custom error hierarchy for git-smart-init."""

from __future__ import annotations

from typing import Sequence


class InitError(RuntimeError):
    """Base error for the CLI."""


class GitCommandError(InitError):
    """Raised when an underlying git command fails."""

    def __init__(
        self,
        command: list[str],
        returncode: int,
        *,
        stdout: str | None = None,
        stderr: str | None = None,
    ):
        self.command = command
        self.returncode = returncode
        self.stdout = stdout or ""
        self.stderr = stderr or ""
        message = f"git command failed (exit {returncode}): {' '.join(command)}"
        details = "\n".join(
            section
            for section in (self.stdout.strip(), self.stderr.strip())
            if section
        )
        if details:
            message = f"{message}\n{details}"
        super().__init__(message)


class RemoteLookupError(InitError):
    """Raised when the repository or its origin remote cannot be resolved."""


class ManifestError(InitError):
    """Raised when the manifest cannot be read or written."""


class StructureMismatch(ManifestError):
    """Raised when a key path descends through something that is not an object."""

    def __init__(self, path: Sequence[str], depth: int):
        self.path = list(path)
        self.depth = depth
        walked = ".".join(self.path[: depth + 1])
        super().__init__(
            f"Cannot write {'.'.join(self.path)}: {walked} is not an object in the manifest."
        )


class AuthorizationError(InitError):
    """Raised when the registry authorization command fails."""

    def __init__(self, command: Sequence[str], returncode: int, stderr: str | None = None):
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr or ""
        message = f"Authorization command failed (exit {returncode}): {' '.join(self.command)}"
        if self.stderr.strip():
            message = f"{message}\n{self.stderr.strip()}"
        super().__init__(message)


class ValidationError(InitError):
    """Raised when user input fails validation."""


class UserAbort(InitError):
    """Raised when the user cancels an interactive flow."""


__all__ = [
    "InitError",
    "GitCommandError",
    "RemoteLookupError",
    "ManifestError",
    "StructureMismatch",
    "AuthorizationError",
    "ValidationError",
    "UserAbort",
]
