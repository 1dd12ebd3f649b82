"""Question flow that turns answers into manifest writes and side effects.

``transition`` is a pure function of the current state, the answers gathered
so far and the repository context. It returns the next state, the commands to
execute before moving on, and optionally the question whose answer the next
state depends on. ``ProjectConfigurationFlow`` drives it: commands run in the
order given, each manifest write is persisted before the next one starts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Protocol

from rich.console import Console

from . import registry
from .config import InitConfig
from .exceptions import ValidationError
from .manifest import ManifestWriter
from .models import (
    Authorize,
    Command,
    GitContext,
    Nature,
    PrintNotice,
    ProjectAnswers,
    Question,
    SetName,
    SetPrivate,
    SetRepositoryUrl,
    Visibility,
    WriteEntryPoint,
)
from .notice import format_authorization_notice
from .templates import template_for

logger = logging.getLogger(__name__)


class State(Enum):
    ASK_NAME = auto()
    ASK_NATURE = auto()
    BRANCH = auto()
    HANDLE_SCRIPT = auto()
    SCRIPT_DEPENDENCIES = auto()
    HANDLE_LIBRARY = auto()
    PUBLISH_SCOPE = auto()
    LIBRARY_DEPENDENCIES = auto()
    DONE = auto()


@dataclass(frozen=True)
class Step:
    next: State
    commands: tuple[Command, ...] = ()
    question: Question | None = None


NATURE_QUESTION = Question(
    key="nature",
    message="Are you creating a script, or a library?",
    default=Nature.SCRIPT,
    choices=(
        (Nature.SCRIPT, "script (standalone program)"),
        (Nature.LIBRARY, "library (npm package)"),
    ),
)

SCOPE_QUESTION = Question(
    key="scope",
    message="Are you publishing to the public internet?",
    default=Visibility.INTERNAL,
    choices=(
        (Visibility.INTERNAL, "no, internal"),
        (Visibility.PUBLIC, "yes, public"),
    ),
)

_YES_NO = ((False, "no"), (True, "yes"))

SCRIPT_DEPENDS_QUESTION = Question(
    key="depends_on_internal",
    message="Do you depend on internal packages?",
    default=False,
    choices=_YES_NO,
)

LIBRARY_DEPENDS_QUESTION = Question(
    key="depends_on_internal",
    message="Do you depend on [other] internal packages?",
    default=False,
    choices=_YES_NO,
)


def name_question(default: str) -> Question:
    return Question(key="name", message="What is the project name?", default=default)


def transition(
    state: State,
    answers: ProjectAnswers,
    context: GitContext,
    config: InitConfig,
) -> Step:
    if state is State.ASK_NAME:
        return Step(State.ASK_NATURE, question=name_question(context.default_name))
    if state is State.ASK_NATURE:
        return Step(State.BRANCH, question=NATURE_QUESTION)
    if state is State.BRANCH:
        nature = _require(answers.nature, "nature")
        return Step(State.HANDLE_SCRIPT if nature is Nature.SCRIPT else State.HANDLE_LIBRARY)
    if state is State.HANDLE_SCRIPT:
        return _handle_script(answers, context, config)
    if state is State.SCRIPT_DEPENDENCIES:
        if not answers.depends_on_internal:
            return Step(State.DONE)
        notice = PrintNotice(config.variable("internal_reader_repositories"), context.repository)
        return Step(State.DONE, (Authorize(), notice))
    if state is State.HANDLE_LIBRARY:
        return _handle_library(answers, context, config)
    if state is State.PUBLISH_SCOPE:
        return _publish_scope(answers, context, config)
    if state is State.LIBRARY_DEPENDENCIES:
        notice = PrintNotice(config.variable("internal_writer_repositories"), context.repository)
        if answers.depends_on_internal:
            return Step(State.DONE, (Authorize(), notice))
        return Step(State.DONE, (notice,))
    raise ValueError(f"No transition out of {state.name}")


def _handle_script(answers: ProjectAnswers, context: GitContext, config: InitConfig) -> Step:
    commands: list[Command] = [
        SetRepositoryUrl(f"git+{context.url}"),
        SetPrivate(True),
        WriteEntryPoint(template_for(Nature.SCRIPT)),
    ]
    if not config.is_trusted(context.organisation):
        commands.append(SetName(f"@{context.organisation}/{answers.name}"))
        return Step(State.DONE, tuple(commands))
    # scripts are never published, so they always sit in the internal scope
    commands.append(SetName(f"{config.internal_scope}/{answers.name}"))
    return Step(State.SCRIPT_DEPENDENCIES, tuple(commands), SCRIPT_DEPENDS_QUESTION)


def _handle_library(answers: ProjectAnswers, context: GitContext, config: InitConfig) -> Step:
    commands: list[Command] = [
        SetRepositoryUrl(f"git+{context.url}"),
        SetPrivate(False),
        WriteEntryPoint(template_for(Nature.LIBRARY)),
    ]
    if not config.is_trusted(context.organisation):
        commands.append(SetName(f"@{context.organisation}/{answers.name}"))
        return Step(State.DONE, tuple(commands))
    return Step(State.PUBLISH_SCOPE, tuple(commands), SCOPE_QUESTION)


def _publish_scope(answers: ProjectAnswers, context: GitContext, config: InitConfig) -> Step:
    scope = _require(answers.scope, "scope")
    if scope is Visibility.INTERNAL:
        rename = SetName(f"{config.internal_scope}/{answers.name}")
        return Step(State.LIBRARY_DEPENDENCIES, (rename,), LIBRARY_DEPENDS_QUESTION)
    rename = SetName(f"{config.public_scope}/{answers.name}")
    notice = PrintNotice(config.variable("public_writer_repositories"), context.repository)
    return Step(State.DONE, (rename, notice))


def _require(value: Any, label: str) -> Any:
    if value is None:
        raise ValidationError(f"No {label} has been chosen.")
    return value


class Prompter(Protocol):
    def ask(self, question: Question) -> Any: ...


class Effects(Protocol):
    def apply(self, command: Command) -> None: ...


@dataclass
class ProjectEffects:
    """Executes commands against the project files, the registry and the console."""

    writer: ManifestWriter
    config: InitConfig
    console: Console
    authorize: Callable[..., None] | None = None

    def apply(self, command: Command) -> None:
        if isinstance(command, SetRepositoryUrl):
            self.writer.set_repository_url(command.url)
        elif isinstance(command, SetPrivate):
            self.writer.set_private(command.value)
        elif isinstance(command, SetName):
            self.writer.set_name(command.name)
        elif isinstance(command, WriteEntryPoint):
            self.writer.write_entry_point(command.source)
        elif isinstance(command, Authorize):
            run = self.authorize or registry.authorize
            run(self.config.auth_command, cwd=self.config.root, console=self.console)
        elif isinstance(command, PrintNotice):
            text = format_authorization_notice(
                command.variable,
                command.repository,
                terraform_url=self.config.terraform_url,
            )
            self.console.print()
            self.console.print(text, markup=False, highlight=False)
        else:
            raise TypeError(f"Unsupported command: {command!r}")


@dataclass
class ProjectConfigurationFlow:
    context: GitContext
    config: InitConfig
    prompter: Prompter
    effects: Effects

    def run(self) -> ProjectAnswers:
        answers = ProjectAnswers()
        state = State.ASK_NAME
        while state is not State.DONE:
            step = transition(state, answers, self.context, self.config)
            logger.debug("%s -> %s", state.name, step.next.name)
            for command in step.commands:
                logger.debug("Applying %r", command)
                self.effects.apply(command)
            if step.question is not None:
                answers.record(step.question.key, self.prompter.ask(step.question))
            state = step.next
        return answers


__all__ = [
    "State",
    "Step",
    "transition",
    "ProjectEffects",
    "ProjectConfigurationFlow",
]
