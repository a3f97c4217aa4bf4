#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
tree_walker.py - Regenerate every index document under a directory

The starting index document is rebuilt first, then every index document
found below it, one after another in sorted path order. Any error stops the
walk; index documents already written are kept.
"""

import os
from dataclasses import dataclass
from typing import Optional, Sequence

from tqdm import tqdm

from .config import config
from .index_builder import IndexBuilder
from .workspace import IGNORE_GLOBS
from ..utils.output import vprint


@dataclass
class TreeUpdate:
    """
    Result of a workspace-wide regeneration.

    Attributes:
        root_existed: Whether the starting index document existed before
        updated: Index documents counted as updated (the starting one always
                 counts, others only when they received links)
        links: Links written across all index documents
        fallbacks: Links whose title fell back to the filename
    """
    root_existed: bool = False
    updated: int = 0
    links: int = 0
    fallbacks: int = 0


class TreeWalker:
    """Drives an IndexBuilder over a directory tree."""

    def __init__(self, builder: Optional[IndexBuilder] = None, progress: Optional[bool] = None):
        self.builder = builder or IndexBuilder()
        self.progress = config["progress"] if progress is None else progress

    def update_index_tree(self, root_index_path: str,
                          ignore: Sequence[str] = IGNORE_GLOBS) -> TreeUpdate:
        """
        Regenerate the starting index document and every one below it.

        Args:
            root_index_path: Index document to start from
            ignore: Glob patterns excluded from every scan

        Returns:
            TreeUpdate with the totals

        Raises:
            OSError: On the first scan, read or write failure
        """
        root_index_path = os.path.abspath(root_index_path)
        base_path = os.path.dirname(root_index_path)

        root = self.builder.update_single_index_file(root_index_path, base_path, ignore)
        summary = TreeUpdate(
            root_existed=root.existed,
            updated=1,
            links=root.links,
            fallbacks=root.fallbacks,
        )

        others = [
            rel for rel in self.builder.find_index_files(base_path, ignore)
            if os.path.join(base_path, *rel.split("/")) != root_index_path
        ]
        vprint(f"Found {len(others)} index documents below {base_path}")

        for rel in tqdm(others, desc="Updating indexes", unit="index", disable=not self.progress):
            index_path = os.path.join(base_path, *rel.split("/"))
            update = self.builder.update_single_index_file(index_path, os.path.dirname(index_path), ignore)
            if update.links > 0:
                summary.updated += 1
            summary.links += update.links
            summary.fallbacks += update.fallbacks

        return summary
