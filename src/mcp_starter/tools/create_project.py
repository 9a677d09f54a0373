"""Tool creating a starter MCP server project in the user's home directory."""

from __future__ import annotations

from collections.abc import Mapping
from textwrap import dedent
from typing import Any

from ..config import DEFAULT_ACTION, DEFAULT_PROJECT_PATH, Action, ProjectSpec
from ..schema import ToolResult
from ..workflow import ScaffoldWorkflow
from .base import Tool

__all__ = ["CreateMcpProject"]


DESCRIPTION = dedent(
    """
    Initialize a new project for creating an MCP server with sample code.
    System Prompt:
    - Always ask the user for the 'name' of the project if it is not provided. Avoid inferring or making up a name.
    - If the project already exists, ask the user whether to overwrite it ("replace") or create a new project with a different name.
    - Avoid assuming actions or names. Always explicitly ask the user for missing information.
    Parameters:
    - 'name' (optional): name of the project. If none provided, it will be requested from the user.
    - 'projectPath': path where the project will be created, default is 'Documents/projects'.
    - 'action' (optional): set to "replace" to overwrite an existing project. Otherwise, it defaults to "create".
    """
).strip()


class CreateMcpProject(Tool):
    """Validate ``name``/``projectPath``/``action`` and run :class:`ScaffoldWorkflow`."""

    def __init__(self, workflow: ScaffoldWorkflow | None = None) -> None:
        self.workflow = workflow or ScaffoldWorkflow()

    @property
    def name(self) -> str:
        return "create-mcp-project"

    @property
    def description(self) -> str:
        return DESCRIPTION

    @property
    def input_schema(self) -> Mapping[str, Any]:
        return {
            "type": "object",
            "properties": {
                "name": {"type": "string"},
                "projectPath": {"type": "string", "default": DEFAULT_PROJECT_PATH},
                "action": {
                    "type": "string",
                    "enum": [action.value for action in Action],
                    "default": DEFAULT_ACTION.value,
                },
            },
            "required": [],
        }

    def validate_with_defaults(self, params: Mapping[str, Any]) -> ProjectSpec:
        return ProjectSpec.from_params(params)

    def process_tool_workflow(self, validated: ProjectSpec) -> ToolResult:
        return self.workflow.execute(validated)
