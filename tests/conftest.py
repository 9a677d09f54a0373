from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for entry in (SRC, ROOT):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from tests.fixtures.fake_io import HOME, TEMPLATE_ROOT, FakeFileSystem, RecordingExecutor  # noqa: E402

from mcp_starter.manifest import FileManifestEntry, ScaffoldManifest, ScriptStep  # noqa: E402


@pytest.fixture()
def fake_fs() -> FakeFileSystem:
    """Filesystem holding an empty home directory and a two-file template tree."""

    filesystem = FakeFileSystem()
    filesystem.seed_directory(HOME)
    filesystem.seed_file(TEMPLATE_ROOT / "src" / "main.py", 'print("${PROJECT_NAME}")\n')
    filesystem.seed_file(TEMPLATE_ROOT / ".gitignore", "build/\n")
    filesystem.operations.clear()
    return filesystem


@pytest.fixture()
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture()
def manifest() -> ScaffoldManifest:
    """Small manifest mixing inline and template-backed entries."""

    return ScaffoldManifest(
        files=(
            FileManifestEntry(filename="package.json", content='  {"name": "${PROJECT_NAME}"}  '),
            FileManifestEntry(filename=".gitignore"),
            FileManifestEntry(filename="README.md", relative_path=".", content="# ${PROJECT_NAME}"),
            FileManifestEntry(filename="main.py", relative_path="src"),
            FileManifestEntry(filename="${PROJECT_NAME}.txt", relative_path="docs/${PROJECT_NAME}", content="notes"),
        ),
        scripts=(
            ScriptStep(name="install", command="pip install -e ."),
            ScriptStep(name="build", command="make build", working_directory="/foo/bar"),
        ),
    )
