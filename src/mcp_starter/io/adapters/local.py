"""Local filesystem and subprocess backed capabilities."""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Optional, Sequence

from ..interfaces import CommandExecutor, FileSystem


class LocalFileSystem(FileSystem):
    """Operate on the real filesystem through :mod:`pathlib`."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def remove_tree(self, path: Path) -> None:
        target = Path(path)
        if target.is_dir() and not target.is_symlink():
            shutil.rmtree(target)
        else:
            target.unlink()

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        Path(path).write_text(content, encoding="utf-8")


class SubprocessExecutor(CommandExecutor):
    """Run commands with :func:`subprocess.run`, capturing their output."""

    def execute(self, args: Sequence[str], cwd: Optional[Path] = None) -> None:
        subprocess.run(
            list(args),
            cwd=str(cwd) if cwd is not None else None,
            check=True,
            capture_output=True,
            text=True,
        )


__all__ = [
    "LocalFileSystem",
    "SubprocessExecutor",
]
