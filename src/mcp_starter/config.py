"""Parameter validation and path resolution for new starter projects."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from .errors import ToolValidationError

__all__ = [
    "Action",
    "DEFAULT_ACTION",
    "DEFAULT_PROJECT_PATH",
    "ProjectSpec",
    "resolve_project_root",
]


class Action(str, Enum):
    """What to do when the target project already exists."""

    CREATE = "create"
    REPLACE = "replace"


DEFAULT_PROJECT_PATH = "Documents/projects"
DEFAULT_ACTION = Action.CREATE

_RESERVED_NAMES = frozenset({".", ".."})
_FORBIDDEN_NAME_CHARACTERS = ("/", "\\", "\0")


@dataclass(frozen=True, slots=True)
class ProjectSpec:
    """Validated description of the project to scaffold.

    Attributes
    ----------
    name:
        The trimmed project name. It is used verbatim as the name of the project
        directory and substituted for the project-name placeholder in templates.
    project_path:
        The directory holding the project, relative to the user's home
        directory but always stored with a single leading ``/``.
    action:
        Either :attr:`Action.CREATE` or :attr:`Action.REPLACE`.
    """

    name: str
    project_path: str
    action: Action

    @classmethod
    def from_params(cls, params: Mapping[str, Any]) -> "ProjectSpec":
        """Validate raw tool parameters, applying defaults.

        The checks run in order: ``name``, then ``projectPath`` (defaulted
        before being checked), then ``action`` (defaulted before being checked).
        The first problem found raises :class:`ToolValidationError`.
        """

        name = _validate_name(params.get("name"))
        project_path = _validate_project_path(params.get("projectPath"))
        action = _validate_action(params.get("action"))
        return cls(name=name, project_path=project_path, action=action)

    @property
    def display_path(self) -> str:
        """The project path as shown to the caller, e.g. ``~/Documents/projects``."""

        return f"~{self.project_path}"


def resolve_project_root(spec: ProjectSpec, home: str | Path) -> Path:
    """Return the absolute project root for ``spec`` below ``home``."""

    return Path(home).joinpath(spec.project_path.lstrip("/"), spec.name)


def _validate_name(name: Any) -> str:
    if name is None:
        msg = "Project name is required. Ask user for a valid project name."
        raise ToolValidationError(msg)

    if not isinstance(name, str) or not name.strip():
        msg = f'Invalid project name "{name}". Ask user for a valid project name.'
        raise ToolValidationError(msg)

    stripped = name.strip()
    if stripped in _RESERVED_NAMES or any(char in stripped for char in _FORBIDDEN_NAME_CHARACTERS):
        msg = f'Invalid project name "{name}". Ask user for a valid project name.'
        raise ToolValidationError(msg)

    return stripped


def _validate_project_path(project_path: Any) -> str:
    if not project_path:
        project_path = DEFAULT_PROJECT_PATH

    if not isinstance(project_path, str):
        msg = f'Invalid project path "{project_path}". Ask user for a valid project path.'
        raise ToolValidationError(msg)

    normalized = posixpath.normpath("/" + project_path.lstrip("/"))
    if not posixpath.isabs(normalized) or "\0" in normalized:
        msg = f'Invalid project path "{normalized}". Ask user for a valid project path.'
        raise ToolValidationError(msg)

    return normalized


def _validate_action(action: Any) -> Action:
    if not action:
        return DEFAULT_ACTION

    if isinstance(action, str):
        for candidate in Action:
            if action == candidate.value:
                return candidate

    msg = f'Invalid action "{action}". Ask user for a valid action ("create" or "replace").'
    raise ToolValidationError(msg)
