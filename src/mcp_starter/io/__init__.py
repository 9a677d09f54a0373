"""Filesystem and process capabilities used by the scaffolding engine."""

from .interfaces import CommandExecutor, FileSystem

__all__ = [
    "CommandExecutor",
    "FileSystem",
]
