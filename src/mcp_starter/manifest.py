"""Declarative description of the files and commands making up a starter project."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from textwrap import dedent
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = [
    "DEFAULT_MANIFEST",
    "FileManifestEntry",
    "PROJECT_NAME_TOKEN",
    "ScaffoldManifest",
    "ScriptStep",
    "load_manifest",
]

PROJECT_NAME_TOKEN = "${PROJECT_NAME}"


class FileManifestEntry(BaseModel):
    """A single file that must exist in every generated project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    filename: str = Field(..., min_length=1, description="Name of the file, without directories.")
    relative_path: Optional[str] = Field(None, description="Directory relative to the project root; the root when omitted.")
    content: Optional[str] = Field(
        None,
        description="Inline file content. When omitted the file is read from the bundled template tree.",
    )

    @field_validator("filename")
    @classmethod
    def _single_segment(cls, value: str) -> str:
        if "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError("filename must be a single path segment")
        return value

    @field_validator("relative_path")
    @classmethod
    def _stays_inside_project(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        path = PurePosixPath(value)
        if path.is_absolute() or ".." in path.parts:
            raise ValueError("relative_path must stay inside the project root")
        return value

    @property
    def directory(self) -> str:
        """The entry's directory, ``"."`` for the project root."""

        return self.relative_path or "."


class ScriptStep(BaseModel):
    """A setup command executed after the project files are written."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Optional[str] = Field(None, description="Short label for the step.")
    command: str = Field(..., min_length=1, description="Command line to execute.")
    working_directory: Optional[str] = Field(
        None,
        description="Directory to run in; relative values are resolved against the project root.",
    )


class ScaffoldManifest(BaseModel):
    """The full, immutable set of files and scripts applied to every project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    files: Tuple[FileManifestEntry, ...] = Field(default_factory=tuple)
    scripts: Tuple[ScriptStep, ...] = Field(default_factory=tuple)

    def directories(self) -> tuple[str, ...]:
        """Return the distinct relative directories referenced by :attr:`files`."""

        return tuple(dict.fromkeys(entry.directory for entry in self.files))


def load_manifest(path: str | Path) -> ScaffoldManifest:
    """Read a :class:`ScaffoldManifest` from a JSON document."""

    payload = Path(path).read_text(encoding="utf-8")
    return ScaffoldManifest.model_validate_json(payload)


_PYPROJECT = dedent(
    """
    [build-system]
    requires = ["setuptools>=65.0"]
    build-backend = "setuptools.build_meta"

    [project]
    name = "${PROJECT_NAME}"
    version = "0.1.0"
    description = "MCP server ${PROJECT_NAME} generated from the starter template."
    readme = "README.md"
    requires-python = ">=3.10"
    dependencies = ["mcp>=1.2,<2"]

    [project.optional-dependencies]
    dev = ["pytest"]

    [project.scripts]
    "${PROJECT_NAME}" = "server.main:main"

    [tool.setuptools]
    package-dir = {"" = "src"}
    packages = ["server", "server.tools"]

    [tool.pytest.ini_options]
    testpaths = ["tests"]
    pythonpath = ["src"]
    """
)

_README = dedent(
    """
    # ${PROJECT_NAME}

    Sample Model Context Protocol (MCP) server generated from the starter template.

    ## Background

    The server exposes a single `sum-calculator` tool that adds two numbers. Use it as a
    starting point for your own tools.

    ## Setup

    1. Create a virtual environment and install the project:

       ```sh
       python3 -m venv .venv
       .venv/bin/python -m pip install -e ".[dev]"
       ```

    2. Verify the project:

       ```sh
       .venv/bin/python -m pytest
       ```

    ## Claude Desktop

    Add the server to `claude_desktop_config.json`:

    ```json
    {
      "mcpServers": {
        "${PROJECT_NAME}": {
          "command": "<path_to_project>/.venv/bin/${PROJECT_NAME}"
        }
      }
    }
    ```

    Restart Claude Desktop afterwards so the configuration is picked up.
    """
)

_SUM_CALCULATOR = dedent(
    '''
    """Tool adding two numbers."""

    from __future__ import annotations

    from ..errors import ToolValidationError

    TOOL_NAME = "sum-calculator"


    def add(a: float, b: float) -> float:
        """Return ``a + b`` after checking both operands are numbers."""

        for value in (a, b):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ToolValidationError("Bad parameter.")
        return a + b
    '''
)

_SUM_CALCULATOR_TEST = dedent(
    """
    import pytest

    from server.errors import ToolValidationError
    from server.tools.sum_calculator import add


    def test_add_numbers():
        assert add(2, 3) == 5


    def test_add_rejects_non_numbers():
        with pytest.raises(ToolValidationError):
            add("2", 3)
    """
)

_WORKSPACE = dedent(
    """
    {
      "folders": [
        {
          "name": "${PROJECT_NAME}",
          "path": "."
        }
      ],
      "settings": {
        "python.defaultInterpreterPath": ".venv/bin/python"
      }
    }
    """
)


DEFAULT_MANIFEST = ScaffoldManifest(
    files=(
        FileManifestEntry(filename="__init__.py", relative_path="src/server"),
        FileManifestEntry(filename="log.py", relative_path="src/server"),
        FileManifestEntry(filename="errors.py", relative_path="src/server"),
        FileManifestEntry(filename="main.py", relative_path="src/server"),
        FileManifestEntry(filename="__init__.py", relative_path="src/server/tools"),
        FileManifestEntry(filename="sum_calculator.py", relative_path="src/server/tools", content=_SUM_CALCULATOR),
        FileManifestEntry(filename="test_main.py", relative_path="tests"),
        FileManifestEntry(filename="test_errors.py", relative_path="tests"),
        FileManifestEntry(filename="test_sum_calculator.py", relative_path="tests/tools", content=_SUM_CALCULATOR_TEST),
        FileManifestEntry(filename=".env", content="# The name of the application\nAPP_NAME=${PROJECT_NAME}"),
        FileManifestEntry(filename="pyproject.toml", content=_PYPROJECT),
        FileManifestEntry(filename=".gitignore"),
        FileManifestEntry(filename="README.md", content=_README),
        FileManifestEntry(filename="${PROJECT_NAME}.code-workspace", content=_WORKSPACE),
        FileManifestEntry(filename="verify.yml", relative_path=".github/workflows"),
        FileManifestEntry(filename="PULL_REQUEST_TEMPLATE.md", relative_path=".github"),
        FileManifestEntry(filename="extensions.json", relative_path=".vscode"),
        FileManifestEntry(filename="settings.json", relative_path=".vscode"),
    ),
    scripts=(
        ScriptStep(name="venv", command="python3 -m venv .venv"),
        ScriptStep(name="install", command='.venv/bin/python -m pip install -e ".[dev]"'),
        ScriptStep(name="verify", command=".venv/bin/python -m pytest"),
    ),
)
