"""Configuration defaults and environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path

DEFAULT_TRUSTED_ORGANISATION = "sknups"
DEFAULT_MANIFEST = "package.json"
DEFAULT_ENTRY_POINT = "index.js"
DEFAULT_AUTH_COMMAND = "npm run auth"
DEFAULT_TERRAFORM_URL = "https://github.com/sknups/sknups-terraform/blob/main/main.tf"
DEFAULT_VARIABLE_PREFIX = "npm_"
DEFAULT_HOST_PREFIX = "https://github.com/"
DEFAULT_REMOTE_SUFFIX = ".git"

_ENV_OVERRIDES = {
    "trusted_organisation": "GIT_SMART_INIT_TRUSTED_ORG",
    "manifest": "GIT_SMART_INIT_MANIFEST",
    "entry_point": "GIT_SMART_INIT_ENTRY_POINT",
    "auth_command": "GIT_SMART_INIT_AUTH_COMMAND",
    "terraform_url": "GIT_SMART_INIT_TERRAFORM_URL",
    "variable_prefix": "GIT_SMART_INIT_VARIABLE_PREFIX",
}


@dataclass(frozen=True)
class InitConfig:
    """Constants the flow is parameterized by."""

    root: Path
    trusted_organisation: str = DEFAULT_TRUSTED_ORGANISATION
    manifest: str = DEFAULT_MANIFEST
    entry_point: str = DEFAULT_ENTRY_POINT
    auth_command: str = DEFAULT_AUTH_COMMAND
    terraform_url: str = DEFAULT_TERRAFORM_URL
    variable_prefix: str = DEFAULT_VARIABLE_PREFIX
    host_prefix: str = DEFAULT_HOST_PREFIX
    remote_suffix: str = DEFAULT_REMOTE_SUFFIX

    @property
    def manifest_path(self) -> Path:
        return self.root / self.manifest

    @property
    def entry_point_path(self) -> Path:
        return self.root / self.entry_point

    @property
    def internal_scope(self) -> str:
        return f"@{self.trusted_organisation}-internal"

    @property
    def public_scope(self) -> str:
        return f"@{self.trusted_organisation}"

    def is_trusted(self, organisation: str) -> bool:
        return organisation == self.trusted_organisation

    def variable(self, name: str) -> str:
        """Terraform variable name, e.g. ``npm_public_writer_repositories``."""
        return f"{self.variable_prefix}{name}"


def load_config(root: Path, **overrides: str | None) -> InitConfig:
    """Build the config: explicit overrides win over env vars, env over defaults."""

    known = {field.name for field in fields(InitConfig)}
    values: dict[str, str] = {}
    for key, var in _ENV_OVERRIDES.items():
        raw = os.environ.get(var)
        if raw:
            values[key] = raw
    for key, value in overrides.items():
        if key not in known or key == "root":
            raise TypeError(f"Unknown configuration option: {key}")
        if value is not None:
            values[key] = value
    return InitConfig(root=root, **values)


__all__ = ["InitConfig", "load_config"]
