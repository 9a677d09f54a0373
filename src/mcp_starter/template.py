"""Placeholder substitution and discovery of the bundled template tree."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .errors import TemplateRootNotFoundError

__all__ = [
    "SKELETON_DIRECTORY",
    "SKELETON_MARKER",
    "TemplateLocator",
    "TemplateRenderer",
    "TemplateRenderingError",
]


_PLACEHOLDER_PATTERN = re.compile(r"\$\{(?P<key>[A-Za-z_][A-Za-z0-9_]*)\}")

SKELETON_DIRECTORY = "skeleton"
SKELETON_MARKER = "skeleton.toml"


class TemplateRenderingError(RuntimeError):
    """Raised when the renderer cannot resolve a placeholder."""


@dataclass(slots=True)
class TemplateRenderer:
    """Render templates containing ``${KEY}`` placeholders."""

    def render_string(
        self,
        template: str,
        context: Mapping[str, Any],
        *,
        missing: str = "keep",
    ) -> str:
        """Render ``template`` using ``context``.

        Parameters
        ----------
        template:
            The template string to evaluate.
        context:
            Mapping providing values for placeholders.
        missing:
            Controls what happens when a placeholder has no value. The supported
            policies are ``"keep"`` (leave the placeholder unchanged),
            ``"empty"`` (replace with an empty string) and ``"error"`` (raise
            :class:`TemplateRenderingError`).
        """

        if missing not in {"keep", "empty", "error"}:
            raise ValueError("missing must be 'keep', 'empty', or 'error'")

        def substitute(match: re.Match[str]) -> str:
            key = match.group("key")
            if key in context:
                return str(context[key])
            if missing == "keep":
                return match.group(0)
            if missing == "empty":
                return ""
            raise TemplateRenderingError(f"missing value for '{key}'")

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def render_path(self, relative_path: str, context: Mapping[str, Any]) -> Path:
        """Render every segment of a ``/`` separated relative path."""

        segments = [self.render_string(segment, context) for segment in relative_path.split("/") if segment]
        return Path(*segments) if segments else Path(".")


class TemplateLocator:
    """Find the template tree shipped with the package.

    The search walks upward from ``start`` until a directory containing
    ``skeleton/skeleton.toml`` is found. The result is cached for the lifetime
    of the locator. Passing ``root`` skips the search entirely.
    """

    def __init__(self, start: str | Path | None = None, *, root: str | Path | None = None) -> None:
        self._start = Path(start) if start is not None else Path(__file__).resolve().parent
        self._root = Path(root) if root is not None else None

    @property
    def root(self) -> Path:
        """The template tree root; raises :class:`TemplateRootNotFoundError`."""

        if self._root is None:
            self._root = self._search()
        return self._root

    def _search(self) -> Path:
        directory = self._start
        while True:
            if (directory / SKELETON_DIRECTORY / SKELETON_MARKER).is_file():
                return directory / SKELETON_DIRECTORY
            if directory.parent == directory:
                break
            directory = directory.parent

        msg = f"Template root not found above {self._start}."
        raise TemplateRootNotFoundError(msg)
