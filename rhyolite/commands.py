#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
commands.py - The user-facing Rhyolite commands

Two commands are offered to the editor host:
- rhyolite.rhyCreateFile: create a note from the selected word and link to it
- rhyolite.updateIndexLinks: regenerate every index document in the workspace

Which commands are available depends on the configuration and on the active
document. compute_desired_commands works out the set, and CommandRegistry
applies only the difference to what is currently registered.
"""

import os
from dataclasses import dataclass
from typing import Any, Callable, Dict, FrozenSet, Iterable, Optional, Tuple

from .core.config import config
from .core.host import EditorContext, Host
from .core.index_builder import IndexBuilder
from .core.tree_walker import TreeUpdate, TreeWalker
from .core.workspace import IGNORE_GLOBS
from .exceptions import MissingContextError
from .utils.markdown import note_filename_for
from .utils.output import vprint


@dataclass(frozen=True)
class CommandDescriptor:
    """A command the host can register."""
    command_id: str
    title: str


CREATE_FILE_COMMAND = CommandDescriptor("rhyolite.rhyCreateFile", "Create note from word")
UPDATE_INDEX_COMMAND = CommandDescriptor("rhyolite.updateIndexLinks", "Update index links")

ALL_COMMANDS = frozenset({CREATE_FILE_COMMAND, UPDATE_INDEX_COMMAND})


def _require_workspace(host: Host) -> str:
    if not host.workspace_root:
        raise MissingContextError("No workspace folder is open")
    return host.workspace_root


def _require_editor(editor: Optional[EditorContext]) -> EditorContext:
    if editor is None:
        raise MissingContextError("No active text editor")
    return editor


def _require_word(editor: EditorContext) -> str:
    word = editor.target_word()
    if not word:
        raise MissingContextError("No word selected or cursor not positioned on a word")
    return word


def _is_index_document(path: str) -> bool:
    return os.path.basename(path) == config["index_filename"]


def create_file_link(host: Host, editor: Optional[EditorContext] = None) -> Optional[str]:
    """
    Create a note named after the selected word and link to it.

    The note is created next to the active document when that document is an
    index document, otherwise in the workspace root. The selection (or the
    word under the cursor) is replaced with a Markdown link to the new note.
    Overwriting an existing note requires confirmation; declining changes
    nothing.

    Args:
        host: Editor host to report to
        editor: Active editor, or None if there is none

    Returns:
        Path of the created note, or None if nothing was created
    """
    try:
        workspace_root = _require_workspace(host)
        editor = _require_editor(editor)
        word = _require_word(editor)
    except MissingContextError as e:
        host.error(str(e))
        return None

    file_name = note_filename_for(word, config["note_extension"])

    target_directory = workspace_root
    if _is_index_document(editor.path):
        target_directory = os.path.dirname(editor.path)
    file_path = os.path.join(target_directory, file_name)

    try:
        if host.workspace.exists(file_path):
            if not host.confirm("File already exists. Overwrite?"):
                vprint(f"Kept existing {file_path}")
                return None

        host.workspace.write_text(file_path, f"# {word}\n")
        host.info(f"File {file_name} created successfully!")

        # The link is relative to the document it is written into
        link = os.path.relpath(file_path, os.path.dirname(editor.path)).replace(os.sep, "/")
        start, end = editor.target_range()
        host.apply_edit(editor.path, start, end, f"[{word}]({link})")

        host.open_document(file_path)
        return file_path
    except Exception as e:
        host.error(f"Error creating file: {str(e)}")
        return None


def update_index_file(host: Host, editor: Optional[EditorContext] = None) -> Optional[TreeUpdate]:
    """
    Regenerate index documents from the active index document downwards.

    Starts from the active document when it is an index document, otherwise
    from the index document in the workspace root.

    Args:
        host: Editor host to report to
        editor: Active editor, or None if there is none

    Returns:
        TreeUpdate totals, or None if the command failed
    """
    try:
        workspace_root = _require_workspace(host)
    except MissingContextError as e:
        host.error(str(e))
        return None

    index_path = os.path.join(workspace_root, config["index_filename"])
    if editor is not None and _is_index_document(editor.path):
        index_path = editor.path

    try:
        walker = TreeWalker(IndexBuilder(host.workspace))
        summary = walker.update_index_tree(index_path, IGNORE_GLOBS)

        name = config["index_filename"]
        if summary.root_existed:
            host.info(f"Updated {summary.updated} {name} files with links.")
        else:
            host.info(f"Created and updated {summary.updated} {name} files with links.")
        if summary.fallbacks:
            vprint(f"{summary.fallbacks} links are titled by file name")

        # The starting directory may have had nothing to index
        if host.workspace.exists(index_path):
            host.open_document(index_path)
        return summary
    except Exception as e:
        host.error(f"Error updating index links: {str(e)}")
        return None


COMMAND_HANDLERS: Dict[str, Callable[..., Any]] = {
    CREATE_FILE_COMMAND.command_id: create_file_link,
    UPDATE_INDEX_COMMAND.command_id: update_index_file,
}


def is_path_allowed(path: str, allowed_directories: Iterable[str]) -> bool:
    """
    Check whether a path lies inside one of the allowed directories.

    Args:
        path: File or directory path
        allowed_directories: Directories, "~" is expanded

    Returns:
        True if path is one of the directories or below one of them
    """
    path = os.path.abspath(os.path.expanduser(path))
    for directory in allowed_directories:
        directory = os.path.abspath(os.path.expanduser(directory))
        try:
            if os.path.commonpath([path, directory]) == directory:
                return True
        except ValueError:
            # Different drives
            continue
    return False


def compute_desired_commands(settings, active_path: Optional[str] = None,
                             workspace_root: Optional[str] = None) -> FrozenSet[CommandDescriptor]:
    """
    Work out which commands should be registered.

    Args:
        settings: Config (or dict) with "enabled" and "allowed_directories"
        active_path: Path of the active document, if any
        workspace_root: Workspace directory, checked when there is no active
                        document

    Returns:
        The set of commands that should be available
    """
    if not settings["enabled"]:
        return frozenset()

    allowed = settings["allowed_directories"] or []
    if allowed:
        path = active_path or workspace_root
        if not path or not is_path_allowed(path, allowed):
            return frozenset()

    return ALL_COMMANDS


class Registration:
    """A registered command; disposing it makes the command unavailable."""

    def __init__(self, descriptor: CommandDescriptor, handler: Callable[..., Any]):
        self.descriptor = descriptor
        self.handler = handler
        self.disposed = False

    def dispose(self) -> None:
        self.disposed = True


def _register_handler(descriptor: CommandDescriptor) -> Registration:
    return Registration(descriptor, COMMAND_HANDLERS[descriptor.command_id])


class CommandRegistry:
    """
    Keeps the host's registered commands in line with the desired set.

    ``register`` is called with a CommandDescriptor and must return an object
    with a ``dispose()`` method.
    """

    def __init__(self, register: Optional[Callable[[CommandDescriptor], Any]] = None):
        self._register = register or _register_handler
        self._registrations: Dict[CommandDescriptor, Any] = {}

    @property
    def active(self) -> FrozenSet[CommandDescriptor]:
        return frozenset(self._registrations)

    def reconcile(self, desired: Iterable[CommandDescriptor]
                  ) -> Tuple[FrozenSet[CommandDescriptor], FrozenSet[CommandDescriptor]]:
        """
        Register missing commands and dispose the ones no longer wanted.

        Commands present in both sets are left registered as they are.

        Args:
            desired: Commands that should be registered

        Returns:
            (added, removed) command sets
        """
        desired = frozenset(desired)
        current = self.active

        removed = current - desired
        for descriptor in removed:
            self._registrations.pop(descriptor).dispose()

        added = desired - current
        for descriptor in sorted(added, key=lambda d: d.command_id):
            self._registrations[descriptor] = self._register(descriptor)

        if added or removed:
            vprint(f"Commands: +{len(added)} -{len(removed)}")
        return added, removed

    def get(self, command_id: str) -> Optional[Any]:
        """The registration for a command id, or None if it isn't registered."""
        for descriptor, registration in self._registrations.items():
            if descriptor.command_id == command_id:
                return registration
        return None

    def dispose_all(self) -> None:
        self.reconcile(())
