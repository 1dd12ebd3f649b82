"""Derive repository metadata from the origin remote URL."""

from __future__ import annotations

from .config import DEFAULT_HOST_PREFIX, DEFAULT_REMOTE_SUFFIX
from .exceptions import RemoteLookupError
from .models import GitContext


def derive_git_context(
    raw_url: str,
    *,
    host_prefix: str = DEFAULT_HOST_PREFIX,
    suffix: str = DEFAULT_REMOTE_SUFFIX,
) -> GitContext:
    """Split ``https://github.com/<org>/<name>.git`` into its parts.

    Only the literal prefix and suffix are stripped. Other remote shapes
    (``git@host:org/name``, other hosts) are not rejected and yield whatever
    the split produces.
    """

    url = raw_url.strip()
    if not url:
        raise RemoteLookupError("Remote URL is empty.")
    repository = url.removeprefix(host_prefix).removesuffix(suffix)
    parts = repository.split("/")
    organisation = parts[0]
    default_name = parts[1] if len(parts) > 1 else ""
    return GitContext(
        url=url,
        repository=repository,
        organisation=organisation,
        default_name=default_name,
    )


__all__ = ["derive_git_context"]
