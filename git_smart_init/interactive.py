"""Interactive prompt helpers built on InquirerPy."""

from __future__ import annotations

import logging
import sys
from typing import Any, Mapping, Sequence

from InquirerPy import inquirer
from InquirerPy.base.control import Choice

from .exceptions import UserAbort, ValidationError
from .models import Question

logger = logging.getLogger(__name__)


def _ensure_tty() -> None:
    if not sys.stdin.isatty():
        raise ValidationError(
            "Interactive mode requires a TTY. Pass --name, --nature, --scope and --depends "
            "to run non-interactively."
        )


def text_input(message: str, default: str | None = None) -> str:
    _ensure_tty()
    try:
        return inquirer.text(message=message, default=default or "").execute().strip()
    except KeyboardInterrupt as exc:
        raise UserAbort("User cancelled the prompt.") from exc


def select(message: str, choices: Sequence[tuple[Any, str]], default: Any = None) -> Any:
    if not choices:
        raise UserAbort("No options available for selection.")
    _ensure_tty()
    try:
        return inquirer.select(
            message=message,
            choices=[Choice(value=value, name=label) for value, label in choices],
            default=default,
        ).execute()
    except KeyboardInterrupt as exc:
        raise UserAbort("User cancelled the prompt.") from exc


class InteractivePrompter:
    """Answers questions from presets first, falling back to a prompt."""

    def __init__(self, presets: Mapping[str, Any] | None = None):
        self.presets = {key: value for key, value in (presets or {}).items() if value is not None}

    def ask(self, question: Question) -> Any:
        if question.key in self.presets:
            value = self.presets[question.key]
            logger.debug("Using preset answer %s=%r", question.key, value)
            return value
        if question.choices:
            return select(question.message, question.choices, question.default)
        return text_input(question.message, question.default)


__all__ = ["text_input", "select", "InteractivePrompter"]
