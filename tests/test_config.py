"""Tests for configuration defaults and overrides."""

from __future__ import annotations

import os
import unittest
from pathlib import Path
from unittest.mock import patch

from git_smart_init.config import InitConfig, load_config


class LoadConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            config = load_config(Path("/repo"))

        self.assertEqual(config.trusted_organisation, "sknups")
        self.assertEqual(config.manifest_path, Path("/repo/package.json"))
        self.assertEqual(config.entry_point_path, Path("/repo/index.js"))
        self.assertEqual(config.auth_command, "npm run auth")
        self.assertEqual(config.internal_scope, "@sknups-internal")
        self.assertEqual(config.public_scope, "@sknups")
        self.assertEqual(config.variable("public_writer_repositories"), "npm_public_writer_repositories")

    def test_env_overrides_defaults(self) -> None:
        env = {"GIT_SMART_INIT_TRUSTED_ORG": "acme", "GIT_SMART_INIT_ENTRY_POINT": "main.js"}
        with patch.dict(os.environ, env, clear=True):
            config = load_config(Path("/repo"))

        self.assertEqual(config.trusted_organisation, "acme")
        self.assertEqual(config.entry_point_path, Path("/repo/main.js"))

    def test_explicit_overrides_win_over_env(self) -> None:
        with patch.dict(os.environ, {"GIT_SMART_INIT_TRUSTED_ORG": "acme"}, clear=True):
            config = load_config(Path("/repo"), trusted_organisation="globex", manifest=None)

        self.assertEqual(config.trusted_organisation, "globex")
        self.assertEqual(config.manifest, "package.json")

    def test_unknown_override_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            load_config(Path("/repo"), colour="blue")

    def test_is_trusted_matches_exactly(self) -> None:
        config = InitConfig(root=Path("/repo"), trusted_organisation="acme")

        self.assertTrue(config.is_trusted("acme"))
        self.assertFalse(config.is_trusted("Acme"))


if __name__ == "__main__":
    unittest.main()
