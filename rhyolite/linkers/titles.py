#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
titles.py - Title resolution for index links

A link's display title comes from one of two strategies:
- HeadingTitleStrategy: the target note's first "# " heading
- DirectoryTitleStrategy: the name of the directory holding the target

Both fall back to the target's filename stem, and report when they did.
"""

import os
import posixpath
from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..core.workspace import Workspace
from ..utils.markdown import extract_title, get_note_filename


# Where a resolved title came from
SOURCE_HEADING = "heading"
SOURCE_DIRECTORY = "directory"
SOURCE_FILENAME = "filename"


@dataclass(frozen=True)
class TitleResult:
    """A resolved display title and its source."""
    title: str
    source: str

    @property
    def fell_back(self) -> bool:
        return self.source == SOURCE_FILENAME


def fallback_title(target: str) -> TitleResult:
    return TitleResult(get_note_filename(target), SOURCE_FILENAME)


class TitleStrategy(ABC):
    """Derives the display title for a link target."""

    @abstractmethod
    def resolve(self, target: str, base_path: str, workspace: Workspace) -> TitleResult:
        """
        Resolve a title for a target.

        Args:
            target: Target path relative to base_path, "/"-separated
            base_path: Directory the target is relative to
            workspace: Filesystem access

        Returns:
            TitleResult; never raises for unreadable targets
        """


class HeadingTitleStrategy(TitleStrategy):
    """Title a note by its first level-1 heading."""

    def resolve(self, target: str, base_path: str, workspace: Workspace) -> TitleResult:
        try:
            content = workspace.read_text(os.path.join(base_path, *target.split("/")))
        except (OSError, UnicodeDecodeError):
            # Moved, unreadable or not text: the filename will do
            return fallback_title(target)

        title = extract_title(content)
        if title is None:
            return fallback_title(target)
        return TitleResult(title, SOURCE_HEADING)


class DirectoryTitleStrategy(TitleStrategy):
    """Title an index document by the directory that contains it."""

    def resolve(self, target: str, base_path: str, workspace: Workspace) -> TitleResult:
        directory = posixpath.basename(posixpath.dirname(target))
        if not directory:
            return fallback_title(target)
        return TitleResult(directory, SOURCE_DIRECTORY)
