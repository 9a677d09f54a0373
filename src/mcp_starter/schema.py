"""Result envelope returned to the protocol layer."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field


class TextContent(BaseModel):
    """A block of plain text in a tool result."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Literal["text"] = Field("text", description="Content block type; always 'text'.")
    text: str = Field(..., description="Human-readable message.")


class ToolResult(BaseModel):
    """Reply to a tool call, holding exactly one text block."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    content: List[TextContent] = Field(..., min_length=1, max_length=1, description="The single text block of the reply.")

    @classmethod
    def from_text(cls, text: str) -> "ToolResult":
        """Wrap ``text`` in a single-block result."""

        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        """The text of the result's only block."""

        return self.content[0].text


__all__ = ["TextContent", "ToolResult"]
