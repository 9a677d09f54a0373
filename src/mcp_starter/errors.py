"""Custom exception types raised by the scaffolding engine."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base class for errors raised while scaffolding a project."""


class ToolValidationError(ScaffoldError):
    """Raised when tool parameters are missing or malformed."""


class CommandExecutionError(ScaffoldError):
    """Raised when a setup command exits abnormally or cannot be started."""

    def __init__(self, command: str, detail: str | None = None, *, returncode: int | None = None) -> None:
        message = f"Failed to execute command: {command}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class ConfigurationError(ScaffoldError):
    """Raised when the installation itself is broken rather than the input."""


class TemplateRootNotFoundError(ConfigurationError):
    """Raised when the bundled template tree cannot be located."""


__all__ = [
    "CommandExecutionError",
    "ConfigurationError",
    "ScaffoldError",
    "TemplateRootNotFoundError",
    "ToolValidationError",
]
