"""Scaffold starter MCP server projects.

The package validates the parameters of a ``create-mcp-project`` tool call,
writes the files described by a declarative manifest below the user's home
directory, runs the project's setup commands, and reports the outcome as a
single block of text suitable for an agent protocol reply.
"""

from __future__ import annotations

from .config import Action, ProjectSpec, resolve_project_root
from .errors import (
    CommandExecutionError,
    ConfigurationError,
    ScaffoldError,
    TemplateRootNotFoundError,
    ToolValidationError,
)
from .manifest import DEFAULT_MANIFEST, FileManifestEntry, ScaffoldManifest, ScriptStep, load_manifest
from .runner import CommandRunner
from .scaffold import ProjectScaffolder
from .schema import TextContent, ToolResult
from .template import TemplateLocator, TemplateRenderer, TemplateRenderingError
from .tools import CreateMcpProject
from .workflow import ScaffoldWorkflow

__all__ = [
    "Action",
    "CommandExecutionError",
    "CommandRunner",
    "ConfigurationError",
    "CreateMcpProject",
    "DEFAULT_MANIFEST",
    "FileManifestEntry",
    "ProjectScaffolder",
    "ProjectSpec",
    "ScaffoldError",
    "ScaffoldManifest",
    "ScaffoldWorkflow",
    "ScriptStep",
    "TemplateLocator",
    "TemplateRenderer",
    "TemplateRenderingError",
    "TemplateRootNotFoundError",
    "TextContent",
    "ToolResult",
    "ToolValidationError",
    "load_manifest",
    "resolve_project_root",
]

__version__ = "0.1.0"
