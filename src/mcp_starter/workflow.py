"""Create/replace workflow turning a validated request into a text reply."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import Action, ProjectSpec, resolve_project_root
from .errors import ConfigurationError
from .manifest import DEFAULT_MANIFEST, ScaffoldManifest
from .runner import CommandRunner
from .scaffold import ProjectScaffolder, project_context
from .schema import ToolResult

__all__ = ["ERROR_PREFIX", "ScaffoldWorkflow"]


LOGGER = logging.getLogger(__name__)

ERROR_PREFIX = "Error occurred while creating the project."


class ScaffoldWorkflow:
    """Drive the check, remove, build, and script phases for one project.

    Validation and the existing-project conflict are resolved before anything
    on disk changes. Once the mutating phases start, any exception they raise
    is turned into an error reply instead of propagating to the caller.
    """

    def __init__(
        self,
        manifest: ScaffoldManifest = DEFAULT_MANIFEST,
        *,
        scaffolder: ProjectScaffolder | None = None,
        runner: CommandRunner | None = None,
        home: str | Path | None = None,
    ) -> None:
        self.manifest = manifest
        self.scaffolder = scaffolder or ProjectScaffolder()
        self.runner = runner or CommandRunner()
        self.home = Path(home) if home is not None else Path.home()

    def execute(self, spec: ProjectSpec) -> ToolResult:
        """Scaffold the project described by ``spec`` and report the outcome."""

        root = resolve_project_root(spec, self.home)
        LOGGER.info("Scaffolding %r at %s (action=%s)", spec.name, root, spec.action.value)

        if spec.action is Action.CREATE and self.scaffolder.exists(root):
            LOGGER.info("Project %r already exists at %s", spec.name, root)
            return ToolResult.from_text(_conflict_message(spec))

        try:
            if spec.action is Action.REPLACE:
                self.scaffolder.remove(root)
            self._build(root, spec.name)
        except ConfigurationError as exc:
            LOGGER.critical("Scaffolding is misconfigured: %s", exc, exc_info=True)
            return ToolResult.from_text(_error_message(exc))
        except Exception as exc:
            LOGGER.warning("Scaffolding %r failed: %s", spec.name, exc, exc_info=True)
            return ToolResult.from_text(_error_message(exc))

        LOGGER.info("Project %r ready at %s", spec.name, root)
        return ToolResult.from_text(_success_message(spec))

    def _build(self, root: Path, project_name: str) -> None:
        self.scaffolder.ensure_directories(root, self.manifest, project_context(project_name))
        self.scaffolder.write_all(root, project_name, self.manifest)
        self.runner.run_scripts(root, project_name, self.manifest.scripts)


def _conflict_message(spec: ProjectSpec) -> str:
    return (
        f'Project "{spec.name}" already exists at {spec.display_path}. '
        "Always ask the user what to do next: replace/overwrite the existing project "
        "or create a project with a different name. "
        'Please resubmit with "action": "replace" to overwrite, or have the user provide a new project name.'
    )


def _success_message(spec: ProjectSpec) -> str:
    prefix = "Replaced starter project" if spec.action is Action.REPLACE else "New starter project"
    return f"{prefix}: {spec.name} for creating an MCP server is created in {spec.display_path}."


def _error_message(exc: BaseException) -> str:
    detail = str(exc).strip()
    if not detail:
        return ERROR_PREFIX
    return f"{ERROR_PREFIX} {detail}"
