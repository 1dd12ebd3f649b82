"""Typer CLI entrypoint for git-smart-init."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import load_config
from .context import derive_git_context
from .exceptions import InitError
from .flow import ProjectConfigurationFlow, ProjectEffects
from .git import remote_url, repository_root
from .interactive import InteractivePrompter
from .manifest import ManifestWriter

app = typer.Typer(
    add_completion=False,
    help="Initialize package.json and index.js from the repository's origin remote.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class NatureOption(str, Enum):
    script = "script"
    library = "library"


class ScopeOption(str, Enum):
    internal = "internal"
    public = "public"


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-smart-init {__version__}")
        raise typer.Exit()


@app.command()
def main(
    repo: Optional[Path] = typer.Option(
        None,
        "--repo",
        "-r",
        help="Path to the repository to initialize (defaults to current working directory).",
        dir_okay=True,
        file_okay=False,
    ),
    name: Optional[str] = typer.Option(None, "--name", help="Project name. Skips the prompt."),
    nature: Optional[NatureOption] = typer.Option(
        None,
        "--nature",
        help="Create a standalone script or a publishable library. Skips the prompt.",
    ),
    scope: Optional[ScopeOption] = typer.Option(
        None,
        "--scope",
        help="Publication scope for libraries of the trusted organisation. Skips the prompt.",
    ),
    depends: Optional[bool] = typer.Option(
        None,
        "--depends/--no-depends",
        help="Whether the project depends on internal packages. Skips the prompt.",
    ),
    trusted_org: Optional[str] = typer.Option(
        None,
        "--trusted-org",
        help="Organisation whose projects get internal/public scoping.",
    ),
    manifest: Optional[str] = typer.Option(None, "--manifest", help="Manifest file, relative to the repository."),
    entry_point: Optional[str] = typer.Option(
        None,
        "--entry-point",
        help="Entry point file, relative to the repository.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-smart-init version and exit.",
    ),
) -> None:
    """Ask how the project will be used and rewrite the manifest and entry point to match.

    Projects owned by the trusted organisation are additionally asked about
    their publication scope and internal dependencies, and the Terraform
    changes needed to authorize their workflows are printed.
    """

    _ = version  # handled via callback
    configure_logging(verbose)
    console = Console()
    presets = {
        "name": name,
        "nature": nature.value if nature else None,
        "scope": scope.value if scope else None,
        "depends_on_internal": depends,
    }
    try:
        root = repository_root((repo or Path.cwd()).expanduser().resolve())
        config = load_config(
            root,
            trusted_organisation=trusted_org,
            manifest=manifest,
            entry_point=entry_point,
        )
        context = derive_git_context(
            remote_url(root),
            host_prefix=config.host_prefix,
            suffix=config.remote_suffix,
        )
        writer = ManifestWriter(config.manifest_path, config.entry_point_path)
        flow = ProjectConfigurationFlow(
            context=context,
            config=config,
            prompter=InteractivePrompter(presets),
            effects=ProjectEffects(writer=writer, config=config, console=console),
        )
        flow.run()
        final_name = writer.load().get("name")
    except InitError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(1) from exc
    console.print(f"[green]Initialized {escape(str(final_name))} in {escape(str(root))}[/green]", highlight=False)


__all__ = ["app"]
