"""Registry credential bootstrap."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path

from rich.console import Console

from .exceptions import AuthorizationError

logger = logging.getLogger(__name__)


def authorize(command: str, *, cwd: Path, console: Console) -> None:
    """Run ``command`` (e.g. ``npm run auth``) so installs can reach the internal registry."""

    args = shlex.split(command)
    if not args:
        raise AuthorizationError([], -1, "No authorization command configured.")
    console.print()
    console.print(
        f'Running "{command}" to authorize downloads from the npm-internal registry...',
        markup=False,
        highlight=False,
    )
    logger.debug("Running command: %s", command)
    try:
        result = subprocess.run(
            args,
            cwd=str(cwd),
            text=True,
            capture_output=True,
        )
    except FileNotFoundError as exc:
        raise AuthorizationError(args, 127, f"{args[0]} not found in PATH") from exc
    if result.stdout.strip():
        logger.debug("%s", result.stdout.strip())
    if result.returncode != 0:
        raise AuthorizationError(args, result.returncode, result.stderr)


__all__ = ["authorize"]
