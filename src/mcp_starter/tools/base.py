"""Base class for tools exposed to an agent protocol handler."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from ..errors import ToolValidationError
from ..schema import ToolResult
from .spec import ToolSpec

LOGGER = logging.getLogger(__name__)


class Tool(ABC):
    """A named capability that validates its input and replies with text."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique tool name."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Instructions shown to the model calling the tool."""

    @property
    @abstractmethod
    def input_schema(self) -> Mapping[str, Any]:
        """JSON schema of the accepted arguments."""

    @abstractmethod
    def validate_with_defaults(self, params: Mapping[str, Any]) -> Any:
        """Return validated parameters or raise :class:`ToolValidationError`."""

    @abstractmethod
    def process_tool_workflow(self, validated: Any) -> ToolResult:
        """Carry out the tool's work for already validated parameters."""

    def spec(self) -> ToolSpec:
        return ToolSpec(name=self.name, description=self.description, input_schema=self.input_schema)

    def call(self, params: Mapping[str, Any] | None = None) -> ToolResult:
        """Validate ``params`` and run the tool. Never raises."""

        try:
            validated = self.validate_with_defaults(dict(params or {}))
        except ToolValidationError as exc:
            LOGGER.info("Rejected %s call: %s", self.name, exc)
            return ToolResult.from_text(str(exc))
        return self.process_tool_workflow(validated)

    async def acall(self, params: Mapping[str, Any] | None = None) -> ToolResult:
        """Run :meth:`call` in a worker thread so the event loop stays responsive."""

        return await asyncio.to_thread(self.call, params)


__all__ = ["Tool"]
