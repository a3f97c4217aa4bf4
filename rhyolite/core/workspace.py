#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
workspace.py - Filesystem access for Rhyolite

Every read, write and directory scan made while maintaining index files
goes through a Workspace, so the index logic can be exercised against a
real directory tree or a substitute.
"""

import os
from fnmatch import fnmatch
from typing import List, Sequence


# Build and dependency directories never scanned for notes
IGNORE_GLOBS = ("**/node_modules/**", "**/out/**")


def is_ignored(rel_path: str, ignore: Sequence[str]) -> bool:
    """
    Check a relative POSIX path against ignore globs.

    The path is also tried with a leading "/" so that a "**/" prefix in a
    pattern matches zero directories ("**/out/**" ignores "out/a.md").

    Args:
        rel_path: Path relative to the scan root, "/"-separated
        ignore: Glob patterns to exclude

    Returns:
        True if any pattern matches
    """
    for pattern in ignore:
        if fnmatch(rel_path, pattern) or fnmatch("/" + rel_path, pattern):
            return True
    return False


def _matches(rel_path: str, pattern: str) -> bool:
    if fnmatch(rel_path, pattern):
        return True
    # "**/" may stand for no directory at all
    return pattern.startswith("**/") and fnmatch(rel_path, pattern[3:])


class Workspace:
    """
    File access on the local filesystem.

    Paths handed to the read and write methods are used as-is; glob results
    are relative to the directory that was scanned.
    """

    encoding = "utf-8"

    def read_text(self, path: str) -> str:
        """
        Read a whole text file with its line endings unchanged.

        Raises:
            OSError: If the file is missing or unreadable
            UnicodeDecodeError: If the file is not valid text
        """
        with open(path, 'r', encoding=self.encoding, newline='') as f:
            return f.read()

    def write_text(self, path: str, text: str) -> None:
        """Create or overwrite a text file."""
        with open(path, 'w', encoding=self.encoding, newline='') as f:
            f.write(text)

    def exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def glob(self, pattern: str, cwd: str, ignore: Sequence[str] = IGNORE_GLOBS) -> List[str]:
        """
        Enumerate files matching a glob pattern.

        A pattern without "/" (e.g., "*.md") only matches files directly in
        ``cwd``; a pattern with "/" (e.g., "**/index.md") is matched against
        every file below ``cwd``. Hidden files and directories (names starting
        with ".") are skipped and ignored directories are not descended into.

        Args:
            pattern: Glob pattern relative to cwd
            cwd: Directory to scan
            ignore: Glob patterns to exclude

        Returns:
            Sorted list of matching paths relative to cwd, "/"-separated

        Raises:
            OSError: If cwd can't be listed
        """
        if "/" not in pattern:
            return sorted(
                entry.name for entry in os.scandir(cwd)
                if entry.is_file()
                and not entry.name.startswith(".")
                and fnmatch(entry.name, pattern)
                and not is_ignored(entry.name, ignore)
            )

        if not os.path.isdir(cwd):
            raise FileNotFoundError(f"No such directory: '{cwd}'")

        results = []
        for root, dirs, files in os.walk(cwd):
            rel_root = os.path.relpath(root, cwd).replace(os.sep, "/")
            prefix = "" if rel_root == "." else rel_root + "/"

            # Prune hidden and ignored directories and keep the walk order stable
            dirs[:] = sorted(
                d for d in dirs
                if not d.startswith(".") and not is_ignored(prefix + d + "/", ignore)
            )

            for file in sorted(f for f in files if not f.startswith(".")):
                rel_path = prefix + file
                if _matches(rel_path, pattern) and not is_ignored(rel_path, ignore):
                    results.append(rel_path)

        return sorted(results)
