#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
index_builder.py - Regenerate the index document of a single directory

An index document (index.md) carries two managed sections:
- "## Indexes": links to the index documents in sub-directories
- "## Links": links to the other notes in the same directory

Both sections are cleared and rebuilt on every run; everything else in the
document is left alone.
"""

import os
from dataclasses import dataclass
from typing import Optional, Sequence

from .config import config
from .workspace import IGNORE_GLOBS, Workspace
from ..linkers import linker_registry
from ..utils.output import vprint


@dataclass
class IndexUpdate:
    """
    Result of regenerating one index document.

    Attributes:
        existed: Whether the index document was on disk before the run
        links: Links written across both managed sections
        fallbacks: Links whose title fell back to the filename
        written: Whether the index document was written
    """
    existed: bool = False
    links: int = 0
    fallbacks: int = 0
    written: bool = False


class IndexBuilder:
    """
    Rebuilds index documents from the files around them.
    """

    # Managed sections in document order, by linker type
    LINKER_TYPES = ("indexes", "notes")

    def __init__(self, workspace: Optional[Workspace] = None,
                 index_filename: Optional[str] = None,
                 index_title: Optional[str] = None,
                 note_extension: Optional[str] = None):
        """
        Initialize the index builder.

        Args:
            workspace: Filesystem access (defaults to the local filesystem)
            index_filename: Name of index documents (defaults to config value)
            index_title: Title for newly created index documents
            note_extension: Extension of note files
        """
        self.workspace = workspace or Workspace()
        self.index_filename = index_filename or config["index_filename"]
        self.index_title = index_title or config["index_title"]
        self.note_extension = note_extension or config["note_extension"]

        self.linkers = {
            linker_type: linker_registry[linker_type](self.workspace)
            for linker_type in self.LINKER_TYPES
        }

    @property
    def default_content(self) -> str:
        """Starting text for an index document that doesn't exist yet."""
        return f"# {self.index_title}\n\n"

    def find_index_files(self, base_path: str, ignore: Sequence[str] = IGNORE_GLOBS):
        """All index documents below base_path, relative and "/"-separated."""
        return self.workspace.glob(f"**/{self.index_filename}", base_path, ignore)

    def update_single_index_file(self, index_path: str, base_path: str,
                                 ignore: Sequence[str] = IGNORE_GLOBS) -> IndexUpdate:
        """
        Regenerate the managed sections of one index document.

        Directories with nothing to link are skipped entirely, so no index
        document is created for them.

        Args:
            index_path: Path of the index document to write
            base_path: Directory whose notes and sub-indexes are linked
            ignore: Glob patterns excluded from every scan

        Returns:
            IndexUpdate describing what was done

        Raises:
            OSError: If a directory can't be scanned or the index can't be
                     read or written
        """
        note_files = self.workspace.glob(f"*{self.note_extension}", base_path, ignore)
        index_files = self.find_index_files(base_path, ignore)

        # The index document never links to itself
        note_files = [f for f in note_files if f != self.index_filename]
        index_files = [f for f in index_files if f != self.index_filename]

        if not note_files and not index_files:
            vprint(f"Nothing to link in {base_path}, skipping")
            return IndexUpdate()

        update = IndexUpdate(existed=self.workspace.exists(index_path))
        if update.existed:
            content = self.workspace.read_text(index_path)
        else:
            vprint(f"Creating {index_path}")
            content = self.default_content

        targets = {"indexes": index_files, "notes": note_files}
        for linker_type, linker in self.linkers.items():
            if not targets[linker_type]:
                continue
            result = linker.update(content, targets[linker_type], base_path)
            content = result.content
            update.links += result.links
            update.fallbacks += result.fallbacks

        self.workspace.write_text(index_path, content)
        update.written = True

        vprint(f"Wrote {update.links} links to {os.path.relpath(index_path, base_path)} in {base_path}")
        return update
