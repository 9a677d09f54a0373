"""Execution of the setup commands run against a new project."""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional

from .errors import CommandExecutionError
from .io.adapters.local import SubprocessExecutor
from .io.interfaces import CommandExecutor
from .manifest import ScriptStep
from .scaffold import project_context
from .template import TemplateRenderer

__all__ = ["CommandRunner"]


LOGGER = logging.getLogger(__name__)


class CommandRunner:
    """Run commands one at a time, wrapping failures in :class:`CommandExecutionError`."""

    def __init__(
        self,
        executor: CommandExecutor | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self._executor = executor or SubprocessExecutor()
        self._renderer = renderer or TemplateRenderer()

    def run(self, command: str, working_directory: Optional[Path] = None) -> None:
        """Execute ``command`` in ``working_directory`` (the current directory when ``None``)."""

        try:
            args = shlex.split(command)
        except ValueError as exc:
            raise CommandExecutionError(command, str(exc)) from exc
        if not args:
            raise CommandExecutionError(command, "empty command")

        LOGGER.debug("Running %r in %s", command, working_directory or ".")
        try:
            self._executor.execute(args, working_directory)
        except subprocess.CalledProcessError as exc:
            raise CommandExecutionError(
                command,
                _describe_failure(exc),
                returncode=exc.returncode,
            ) from exc
        except OSError as exc:
            raise CommandExecutionError(command, exc.strerror or str(exc)) from exc

    def run_scripts(self, root: Path, project_name: str, scripts: Iterable[ScriptStep]) -> None:
        """Run ``scripts`` in order against the project at ``root``."""

        context = project_context(project_name)
        for step in scripts:
            command = self._renderer.render_string(step.command, context)
            self.run(command, self._working_directory(root, step, context))

    def _working_directory(self, root: Path, step: ScriptStep, context: Mapping[str, Any]) -> Path:
        if step.working_directory is None:
            return root
        # Absolute overrides replace the root when joined.
        return root / self._renderer.render_string(step.working_directory, context)


def _describe_failure(exc: subprocess.CalledProcessError) -> str:
    detail = f"exit status {exc.returncode}"
    stderr = exc.stderr
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    if stderr:
        lines = [line.strip() for line in stderr.splitlines() if line.strip()]
        if lines:
            detail = f"{detail}: {lines[-1]}"
    return detail
