#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
host.py - The editor host that Rhyolite commands talk to

Commands never print or prompt directly. They report through a Host, which
also knows the workspace root and can edit and open documents. The console
host provided here backs the command line; an editor integration supplies
its own subclass.
"""

import os
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .workspace import Workspace
from ..utils.markdown import word_at


@dataclass
class EditorContext:
    """
    The active editor: document path, its text and the selection.

    Offsets index into ``text``. An empty selection has start == end, which
    is also the cursor position.
    """
    path: str
    text: str
    selection_start: int = 0
    selection_end: int = 0

    @property
    def has_selection(self) -> bool:
        return self.selection_end > self.selection_start

    def target_range(self) -> Optional[Tuple[int, int]]:
        """Selected range, or the range of the word under the cursor."""
        if self.has_selection:
            return self.selection_start, self.selection_end
        return word_at(self.text, self.selection_start)

    def target_word(self) -> str:
        """Selected text, or the word under the cursor ("" if none)."""
        span = self.target_range()
        if span is None:
            return ""
        return self.text[span[0]:span[1]]

    @classmethod
    def from_line_column(cls, path: str, text: str, line: int, column: int) -> 'EditorContext':
        """
        Build a context with the cursor at a 1-based line and column.

        Raises:
            ValueError: If the line is outside the document
        """
        lines = text.splitlines(keepends=True)
        if line < 1 or line > max(len(lines), 1):
            raise ValueError(f"Line {line} is outside {path}")
        offset = sum(len(l) for l in lines[:line - 1])
        line_text = lines[line - 1].rstrip("\r\n") if lines else ""
        offset += min(max(column - 1, 0), len(line_text))
        return cls(path=path, text=text, selection_start=offset, selection_end=offset)


class Host:
    """
    Interface to the editor hosting the commands.

    Attributes:
        workspace_root: Absolute workspace directory, or None if no
                        workspace is open
        workspace: Filesystem access used by the commands
    """

    def __init__(self, workspace_root: Optional[str], workspace: Optional[Workspace] = None):
        self.workspace_root = workspace_root
        self.workspace = workspace or Workspace()

    def info(self, message: str) -> None:
        raise NotImplementedError

    def error(self, message: str) -> None:
        raise NotImplementedError

    def confirm(self, prompt: str) -> bool:
        raise NotImplementedError

    def open_document(self, path: str) -> None:
        raise NotImplementedError

    def apply_edit(self, path: str, start: int, end: int, text: str) -> None:
        """Replace ``[start, end)`` of the document at ``path`` with ``text``."""
        raise NotImplementedError


class ConsoleHost(Host):
    """
    Host for the command line.

    Messages go to stdout/stderr, confirmations are read from stdin unless
    ``assume_yes`` is set, and edits are written straight to disk.
    """

    def __init__(self, workspace_root: Optional[str], workspace: Optional[Workspace] = None,
                 assume_yes: bool = False, input_func: Callable[[str], str] = input):
        super().__init__(workspace_root, workspace)
        self.assume_yes = assume_yes
        self.input_func = input_func
        self.failed = False

    def info(self, message: str) -> None:
        print(message)

    def error(self, message: str) -> None:
        self.failed = True
        print(f"Error: {message}", file=sys.stderr)

    def confirm(self, prompt: str) -> bool:
        if self.assume_yes:
            return True
        try:
            answer = self.input_func(f"{prompt} [y/N] ")
        except EOFError:
            return False
        return answer.strip().lower() in ('y', 'yes')

    def open_document(self, path: str) -> None:
        print(f"Open: {os.path.relpath(path, self.workspace_root or os.getcwd())}")

    def apply_edit(self, path: str, start: int, end: int, text: str) -> None:
        content = self.workspace.read_text(path)
        self.workspace.write_text(path, content[:start] + text + content[end:])
