"""Command line interface for the starter project tool."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_PROJECT_PATH, Action
from .manifest import DEFAULT_MANIFEST, load_manifest
from .scaffold import ProjectScaffolder
from .template import TemplateLocator
from .tools import CreateMcpProject, tool_specs_to_mcp
from .workflow import ScaffoldWorkflow

_SUCCESS_PREFIXES = ("New starter project", "Replaced starter project")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Create starter MCP server projects")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Verbosity of the log output written to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create", help="create a new starter project")
    create_parser.add_argument("name", help="Name of the project directory")
    create_parser.add_argument(
        "-p",
        "--path",
        default=DEFAULT_PROJECT_PATH,
        help="Directory relative to the home directory that holds the project",
    )
    create_parser.add_argument(
        "-r",
        "--replace",
        action="store_true",
        help="Delete and recreate the project if it already exists",
    )
    create_parser.add_argument(
        "--home",
        type=Path,
        help="Use this directory instead of the current user's home directory",
    )
    create_parser.add_argument("--manifest", type=Path, help="JSON manifest replacing the built-in file list")
    create_parser.add_argument(
        "--template-root",
        type=Path,
        help="Directory holding template files referenced by the manifest",
    )

    subparsers.add_parser("schema", help="print the tool description as JSON")

    return parser


def _build_tool(args: argparse.Namespace) -> CreateMcpProject:
    manifest = load_manifest(args.manifest) if args.manifest else DEFAULT_MANIFEST
    scaffolder = ProjectScaffolder(locator=TemplateLocator(root=args.template_root))
    workflow = ScaffoldWorkflow(manifest, scaffolder=scaffolder, home=args.home)
    return CreateMcpProject(workflow)


def _handle_create(args: argparse.Namespace) -> int:
    tool = _build_tool(args)
    action = Action.REPLACE if args.replace else Action.CREATE
    result = tool.call({"name": args.name, "projectPath": args.path, "action": action.value})
    print(result.text)
    return 0 if result.text.startswith(_SUCCESS_PREFIXES) else 1


def _handle_schema(args: argparse.Namespace) -> int:
    tool = CreateMcpProject()
    sys.stdout.write(json.dumps(tool_specs_to_mcp([tool.spec()]), indent=2))
    sys.stdout.write("\n")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.command == "create":
        return _handle_create(args)
    if args.command == "schema":
        return _handle_schema(args)
    parser.error("no command provided")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
