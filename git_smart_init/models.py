"""Dataclasses shared across modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import ValidationError


class Nature(str, Enum):
    SCRIPT = "script"
    LIBRARY = "library"


class Visibility(str, Enum):
    INTERNAL = "internal"
    PUBLIC = "public"


@dataclass(frozen=True)
class GitContext:
    """Metadata derived from the origin remote URL."""

    url: str
    repository: str
    organisation: str
    default_name: str


@dataclass
class ProjectAnswers:
    """Answers accumulated while the flow runs."""

    name: str | None = None
    nature: Nature | None = None
    scope: Visibility | None = None
    depends_on_internal: bool | None = None

    def record(self, key: str, value: Any) -> None:
        if key == "name":
            self.name = str(value)
        elif key == "nature":
            self.nature = _coerce(Nature, value, "nature")
        elif key == "scope":
            self.scope = _coerce(Visibility, value, "scope")
        elif key == "depends_on_internal":
            self.depends_on_internal = bool(value)
        else:
            raise ValidationError(f"Unknown answer: {key}")


def _coerce(enum_type: type[Enum], value: Any, label: str) -> Any:
    try:
        return enum_type(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_type)
        raise ValidationError(f"Invalid {label} '{value}'. Expected one of: {allowed}.") from exc


@dataclass(frozen=True)
class Question:
    """A prompt: free text when ``choices`` is empty, otherwise a list."""

    key: str
    message: str
    default: Any = None
    choices: tuple[tuple[Any, str], ...] = ()


@dataclass(frozen=True)
class SetRepositoryUrl:
    url: str


@dataclass(frozen=True)
class SetPrivate:
    value: bool


@dataclass(frozen=True)
class SetName:
    name: str


@dataclass(frozen=True)
class WriteEntryPoint:
    source: str


@dataclass(frozen=True)
class Authorize:
    pass


@dataclass(frozen=True)
class PrintNotice:
    variable: str
    repository: str


Command = SetRepositoryUrl | SetPrivate | SetName | WriteEntryPoint | Authorize | PrintNotice
