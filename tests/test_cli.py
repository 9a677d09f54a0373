from __future__ import annotations

import json
import shlex
import sys
from pathlib import Path

import pytest

from mcp_starter.cli import main


def _write_manifest(path: Path, *, command: str) -> Path:
    path.write_text(
        json.dumps(
            {
                "files": [
                    {"filename": "README.md", "content": "# ${PROJECT_NAME}"},
                    {"filename": "main.py", "relative_path": "src"},
                ],
                "scripts": [{"name": "check", "command": command}],
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def template_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    (root / "src").mkdir(parents=True)
    (root / "src" / "main.py").write_text("NAME = '${PROJECT_NAME}'\n", encoding="utf-8")
    return root


def _create_args(tmp_path: Path, manifest: Path, template_root: Path, *extra: str) -> list[str]:
    return [
        "create",
        "Demo",
        "--path",
        "work/projects",
        "--home",
        str(tmp_path / "home"),
        "--manifest",
        str(manifest),
        "--template-root",
        str(template_root),
        *extra,
    ]


def test_cli_create_and_replace(tmp_path: Path, template_root: Path, capsys: pytest.CaptureFixture[str]):
    command = f"{shlex.quote(sys.executable)} -c \"open('built.txt', 'w').write('ok')\""
    manifest = _write_manifest(tmp_path / "manifest.json", command=command)
    project = tmp_path / "home" / "work" / "projects" / "Demo"

    assert main(_create_args(tmp_path, manifest, template_root)) == 0
    assert "New starter project: Demo" in capsys.readouterr().out
    assert (project / "README.md").read_text(encoding="utf-8") == "# Demo\n"
    assert (project / "src" / "main.py").read_text(encoding="utf-8") == "NAME = 'Demo'\n"
    assert (project / "built.txt").read_text() == "ok"

    assert main(_create_args(tmp_path, manifest, template_root)) == 1
    assert 'Project "Demo" already exists at ~/work/projects.' in capsys.readouterr().out

    (project / "extra.txt").write_text("stale", encoding="utf-8")
    assert main(_create_args(tmp_path, manifest, template_root, "--replace")) == 0
    assert "Replaced starter project: Demo" in capsys.readouterr().out
    assert not (project / "extra.txt").exists()


def test_cli_reports_failing_command(tmp_path: Path, template_root: Path, capsys: pytest.CaptureFixture[str]):
    command = f"{shlex.quote(sys.executable)} -c \"import sys; sys.exit(4)\""
    manifest = _write_manifest(tmp_path / "manifest.json", command=command)

    assert main(_create_args(tmp_path, manifest, template_root)) == 1
    output = capsys.readouterr().out
    assert output.startswith("Error occurred while creating the project. Failed to execute command:")
    assert "exit status 4" in output


def test_cli_schema(capsys: pytest.CaptureFixture[str]):
    assert main(["schema"]) == 0
    [listing] = json.loads(capsys.readouterr().out)
    assert listing["name"] == "create-mcp-project"
    assert set(listing["inputSchema"]["properties"]) == {"name", "projectPath", "action"}
