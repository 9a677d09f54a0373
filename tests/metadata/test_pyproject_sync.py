from __future__ import annotations

from pathlib import Path
import tomllib

import mcp_starter

REPO_ROOT = Path(__file__).resolve().parents[2]
README_PATH = REPO_ROOT / "README.md"
PYPROJECT_PATH = REPO_ROOT / "pyproject.toml"


def load_pyproject() -> dict:
    with PYPROJECT_PATH.open("rb") as handle:
        return tomllib.load(handle)


def test_readme_and_pyproject_descriptions_are_in_sync() -> None:
    pyproject = load_pyproject()
    description = pyproject["project"]["description"]
    readme_text = README_PATH.read_text(encoding="utf-8")

    assert description in readme_text, "README must include the project description from pyproject.toml"


def test_package_version_matches_pyproject() -> None:
    assert load_pyproject()["project"]["version"] == mcp_starter.__version__


def test_skeleton_files_are_declared_as_package_data() -> None:
    patterns = load_pyproject()["tool"]["setuptools"]["package-data"]["mcp_starter"]
    skeleton = REPO_ROOT / "src" / "mcp_starter" / "skeleton"
    package_root = skeleton.parent

    for path in skeleton.rglob("*"):
        if path.is_file():
            relative = path.relative_to(package_root)
            assert any(relative.match(pattern) or _glob_match(relative, pattern) for pattern in patterns), relative


def _glob_match(relative: Path, pattern: str) -> bool:
    prefix, _, _ = pattern.partition("**")
    return "**" in pattern and relative.as_posix().startswith(prefix)
