"""Operator instructions for authorizing GitHub workflows in Terraform."""

from __future__ import annotations

from .config import DEFAULT_TERRAFORM_URL

RULE = "-" * 80


def format_authorization_notice(
    variable: str,
    repository: str,
    *,
    terraform_url: str = DEFAULT_TERRAFORM_URL,
) -> str:
    """Render the block an operator pastes into the Terraform variables."""

    return (
        "To authorize GitHub Workflows you must modify this Terraform:\n"
        f"{terraform_url}\n"
        "\n"
        f"{RULE}\n"
        f"{variable} = [\n"
        f'  "{repository}"\n'
        "]\n"
        f"{RULE}\n"
    )


__all__ = ["format_authorization_notice"]
