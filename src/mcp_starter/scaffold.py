"""Filesystem side of project scaffolding."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .io.adapters.local import LocalFileSystem
from .io.interfaces import FileSystem
from .manifest import FileManifestEntry, ScaffoldManifest
from .template import TemplateLocator, TemplateRenderer

__all__ = ["ProjectScaffolder", "project_context"]


LOGGER = logging.getLogger(__name__)


def project_context(project_name: str) -> Mapping[str, str]:
    """Return the placeholder values used when rendering a project."""

    return {"PROJECT_NAME": project_name}


@dataclass(slots=True)
class ProjectScaffolder:
    """Check, remove, and populate project roots described by a manifest."""

    filesystem: FileSystem = field(default_factory=LocalFileSystem)
    locator: TemplateLocator = field(default_factory=TemplateLocator)
    renderer: TemplateRenderer = field(default_factory=TemplateRenderer)

    def exists(self, root: Path) -> bool:
        """Return whether ``root`` exists, treating access failures as absent."""

        try:
            return self.filesystem.exists(root)
        except OSError as exc:
            LOGGER.debug("Treating %s as absent: %s", root, exc)
            return False

    def remove(self, root: Path) -> None:
        """Delete ``root`` recursively; a missing root is left alone."""

        if not self.filesystem.exists(root):
            return
        LOGGER.info("Removing existing project at %s", root)
        self.filesystem.remove_tree(root)

    def ensure_directories(self, root: Path, manifest: ScaffoldManifest, context: Mapping[str, Any]) -> None:
        """Create ``root`` and every distinct directory named by ``manifest``."""

        self.filesystem.make_dirs(root)
        for directory in manifest.directories():
            if directory == ".":
                continue
            target = root / self.renderer.render_path(directory, context)
            LOGGER.debug("Creating directory %s", target)
            self.filesystem.make_dirs(target)

    def write_all(self, root: Path, project_name: str, manifest: ScaffoldManifest) -> list[Path]:
        """Write every manifest file that does not exist yet.

        Returns the paths that were written; files already present are kept
        untouched so an interrupted scaffold can be resumed.
        """

        context = project_context(project_name)
        written: list[Path] = []
        for entry in manifest.files:
            destination = self._destination(root, entry, context)
            if self.filesystem.exists(destination):
                LOGGER.debug("Keeping existing file %s", destination)
                continue

            content = self.renderer.render_string(self._content(entry), context)
            LOGGER.debug("Writing %s", destination)
            self.filesystem.write_text(destination, content)
            written.append(destination)
        return written

    def _destination(self, root: Path, entry: FileManifestEntry, context: Mapping[str, Any]) -> Path:
        directory = self.renderer.render_path(entry.directory, context)
        filename = self.renderer.render_string(entry.filename, context)
        return root / directory / filename

    def _content(self, entry: FileManifestEntry) -> str:
        if entry.content is not None:
            return entry.content.strip() + "\n"

        source = self.locator.root / entry.directory / entry.filename
        return self.filesystem.read_text(source)
