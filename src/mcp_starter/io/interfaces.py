"""Abstract interfaces for the side effects performed while scaffolding."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Sequence


class FileSystem(ABC):
    """Directory and file operations needed to materialize a project."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return whether ``path`` exists. May raise :class:`OSError`."""

    @abstractmethod
    def make_dirs(self, path: Path) -> None:
        """Create ``path`` and any missing parents; existing directories are fine."""

    @abstractmethod
    def remove_tree(self, path: Path) -> None:
        """Delete ``path`` and everything beneath it."""

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Return the UTF-8 decoded content of ``path``."""

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Write ``content`` to ``path`` as UTF-8."""


class CommandExecutor(ABC):
    """Runs external commands synchronously."""

    @abstractmethod
    def execute(self, args: Sequence[str], cwd: Optional[Path] = None) -> None:
        """Run ``args`` in ``cwd``.

        Implementations raise :class:`subprocess.CalledProcessError` on a
        non-zero exit status and :class:`OSError` when the command cannot be
        started.
        """


__all__ = ["CommandExecutor", "FileSystem"]
