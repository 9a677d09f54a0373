"""Tools exposed to agent protocol handlers."""

from __future__ import annotations

from .base import Tool
from .create_project import CreateMcpProject
from .spec import ToolSpec, ToolSpecError, tool_specs_to_mcp

__all__ = [
    "CreateMcpProject",
    "Tool",
    "ToolSpec",
    "ToolSpecError",
    "tool_specs_to_mcp",
]
