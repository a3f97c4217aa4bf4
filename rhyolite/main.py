#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
main.py - Command line entry point for Rhyolite

The command line plays the part of the editor host: it resolves the
workspace, builds the active editor context from the arguments, registers
the commands that the configuration allows and runs the requested one.
"""

import argparse
import os
import sys
from typing import List, Optional

from .commands import (
    CREATE_FILE_COMMAND,
    UPDATE_INDEX_COMMAND,
    CommandRegistry,
    compute_desired_commands,
)
from .core.config import config
from .core.host import ConsoleHost, EditorContext
from .utils.output import vprint
from .utils.signals import setup_interrupt_handling


COMMAND_IDS = {
    "create-link": CREATE_FILE_COMMAND.command_id,
    "update-index": UPDATE_INDEX_COMMAND.command_id,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the rhyolite command."""
    parser = argparse.ArgumentParser(
        prog="rhyolite",
        description="Maintain links between Markdown notes and their index.md files",
    )

    # General options
    parser.add_argument("--workspace", dest="workspace_path", help="Workspace directory (default: current directory)")
    parser.add_argument("--config", dest="config_file", help="YAML configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", default=None, help="Enable verbose output")
    parser.add_argument("--no-progress", dest="progress", action="store_false", default=None,
                        help="Hide the progress bar")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    update = subparsers.add_parser("update-index", help="Regenerate index.md files")
    update.add_argument("--active", help="Index document open in the editor; regeneration starts there")

    create = subparsers.add_parser("create-link", help="Create a note from a word and link to it")
    create.add_argument("file", help="Document containing the word")
    position = create.add_mutually_exclusive_group(required=True)
    position.add_argument("--selection", help="Selected range as START:END character offsets")
    position.add_argument("--line", type=int, help="Cursor line (1-based)")
    create.add_argument("--column", type=int, default=1, help="Cursor column (1-based)")
    create.add_argument("-y", "--yes", dest="assume_yes", action="store_true", default=None,
                        help="Overwrite an existing note without asking")

    subparsers.add_parser("commands", help="List the commands available in this workspace")

    return parser


def parse_selection(value: str):
    """Parse "START:END" into a pair of offsets."""
    try:
        start, end = (int(part) for part in value.split(":", 1))
    except ValueError:
        raise ValueError(f"Invalid selection '{value}', expected START:END") from None
    if start < 0 or end < start:
        raise ValueError(f"Invalid selection '{value}', expected 0 <= START <= END")
    return start, end


def build_editor(args, host: ConsoleHost) -> Optional[EditorContext]:
    """
    Build the active editor context described by the arguments.

    Raises:
        OSError: If the document can't be read
        ValueError: If the selection or cursor is invalid
    """
    if args.command == "update-index":
        if not args.active:
            return None
        return EditorContext(path=os.path.abspath(args.active), text="")

    if args.command == "create-link":
        path = os.path.abspath(args.file)
        text = host.workspace.read_text(path)
        if args.selection:
            start, end = parse_selection(args.selection)
            if end > len(text):
                raise ValueError(f"Selection '{args.selection}' is outside {args.file}")
            return EditorContext(path=path, text=text, selection_start=start, selection_end=end)
        return EditorContext.from_line_column(path, text, args.line, args.column)

    return None


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the rhyolite command.

    Returns:
        Process exit status
    """
    setup_interrupt_handling()

    args = build_parser().parse_args(argv)

    if args.config_file:
        config.load_from_file(args.config_file)
        config.load_from_env()
    config.load_from_args(args)

    workspace_root = config.workspace_root
    if not os.path.isdir(workspace_root):
        workspace_root = None
    vprint(f"Using workspace: {workspace_root}")

    host = ConsoleHost(workspace_root, assume_yes=bool(config["assume_yes"]))

    try:
        editor = build_editor(args, host)
    except (OSError, ValueError) as e:
        host.error(str(e))
        return 1

    registry = CommandRegistry()
    registry.reconcile(compute_desired_commands(config, editor.path if editor else None, workspace_root))

    if args.command == "commands":
        if not registry.active:
            print("No commands available (disabled or outside the allowed directories)")
        for descriptor in sorted(registry.active, key=lambda d: d.command_id):
            print(f"{descriptor.command_id}\t{descriptor.title}")
        return 0

    command_id = COMMAND_IDS[args.command]
    registration = registry.get(command_id)
    if registration is None:
        host.error(f"Command {command_id} is not available (disabled or outside the allowed directories)")
        return 1

    registration.handler(host, editor)
    return 1 if host.failed else 0


if __name__ == "__main__":
    sys.exit(main())
