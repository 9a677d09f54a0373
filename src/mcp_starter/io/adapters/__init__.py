"""Concrete capability implementations."""

from .local import LocalFileSystem, SubprocessExecutor

__all__ = [
    "LocalFileSystem",
    "SubprocessExecutor",
]
