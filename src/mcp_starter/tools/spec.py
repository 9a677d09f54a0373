"""Tool descriptions in the shape advertised by an MCP ``tools/list`` reply."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import json
import re
from types import MappingProxyType
from typing import Any

_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1,64}$")


class ToolSpecError(ValueError):
    """Raised when a tool description is malformed."""


@dataclass(frozen=True, slots=True)
class ToolSpec:
    """Name, description, and JSON schema of a callable tool."""

    name: str
    description: str
    input_schema: Mapping[str, Any]

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not _NAME_PATTERN.fullmatch(self.name):
            msg = "tool name must match ^[a-zA-Z0-9_-]{1,64}$"
            raise ToolSpecError(msg)

        if not isinstance(self.description, str) or not self.description.strip():
            msg = "tool description must be a non-empty string"
            raise ToolSpecError(msg)

        if not isinstance(self.input_schema, Mapping):
            msg = "tool input schema must be a mapping"
            raise ToolSpecError(msg)

        try:
            sanitized = json.loads(json.dumps(_thaw_json_structure(self.input_schema), allow_nan=False))
        except (TypeError, ValueError) as exc:
            msg = "tool input schema must be JSON serializable"
            raise ToolSpecError(msg) from exc

        if sanitized.get("type") != "object":
            msg = "tool input schema must describe a JSON object"
            raise ToolSpecError(msg)

        properties = sanitized.get("properties")
        if not isinstance(properties, dict):
            msg = "tool input schema must include an object 'properties' mapping"
            raise ToolSpecError(msg)

        required = sanitized.get("required", [])
        if not isinstance(required, list):
            msg = "tool input schema 'required' must be a list of strings"
            raise ToolSpecError(msg)
        for item in required:
            if item not in properties:
                msg = f"required parameter '{item}' is not defined"
                raise ToolSpecError(msg)

        object.__setattr__(self, "description", self.description.strip())
        object.__setattr__(self, "input_schema", _freeze_json_structure(sanitized))

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, JSON-serializable description of the tool."""

        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": _thaw_json_structure(self.input_schema),
        }


def tool_specs_to_mcp(tool_specs: Sequence[ToolSpec]) -> list[dict[str, Any]]:
    """Convert tool specifications into the ``tools`` list of a ``tools/list`` reply."""

    normalized: list[dict[str, Any]] = []
    seen_names: set[str] = set()
    for index, spec in enumerate(tool_specs):
        if not isinstance(spec, ToolSpec):
            msg = f"tools[{index}] must be a ToolSpec"
            raise ToolSpecError(msg)
        if spec.name in seen_names:
            msg = f"duplicate tool name '{spec.name}'"
            raise ToolSpecError(msg)
        seen_names.add(spec.name)
        normalized.append(spec.to_dict())
    return normalized


def _freeze_json_structure(value: Any) -> Any:
    if isinstance(value, dict):
        return MappingProxyType({key: _freeze_json_structure(inner) for key, inner in value.items()})

    if isinstance(value, list):
        return tuple(_freeze_json_structure(inner) for inner in value)

    return value


def _thaw_json_structure(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw_json_structure(inner) for key, inner in value.items()}

    if isinstance(value, (list, tuple)):
        return [_thaw_json_structure(inner) for inner in value]

    return value


__all__ = ["ToolSpec", "ToolSpecError", "tool_specs_to_mcp"]
