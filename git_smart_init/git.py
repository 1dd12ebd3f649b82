"""Minimal utilities for invoking git commands."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from .exceptions import GitCommandError, RemoteLookupError

logger = logging.getLogger(__name__)


def run_git(
    args: Sequence[str],
    *,
    cwd: Path | None = None,
    check: bool = True,
) -> subprocess.CompletedProcess[str]:
    command = ["git", *args]
    logger.debug("Running command: %s", " ".join(command))
    result = subprocess.run(
        command,
        cwd=str(cwd) if cwd else None,
        text=True,
        capture_output=True,
    )
    if check and result.returncode != 0:
        raise GitCommandError(command, result.returncode, stdout=result.stdout, stderr=result.stderr)
    return result


def repository_root(path: Path) -> Path:
    try:
        proc = run_git(["rev-parse", "--show-toplevel"], cwd=path)
    except GitCommandError as exc:
        raise RemoteLookupError(f"Not inside a git repository: {path}") from exc
    return Path(proc.stdout.strip())


def remote_url(path: Path, remote: str = "origin") -> str:
    """Return the configured URL of ``remote``, trimmed."""

    try:
        proc = run_git(["config", "--get", f"remote.{remote}.url"], cwd=path)
    except GitCommandError as exc:
        raise RemoteLookupError(
            f"No '{remote}' remote is configured. Add one with: git remote add {remote} <url>"
        ) from exc
    url = proc.stdout.strip()
    if not url:
        raise RemoteLookupError(f"The '{remote}' remote has an empty URL.")
    return url


__all__ = ["run_git", "repository_root", "remote_url"]
