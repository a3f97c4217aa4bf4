#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
indexes.py - Links from an index document to the index documents below it

Sub-indexes are titled by their directory name rather than by their own
heading, since most index documents share the same "# Index" title.
"""

from .base_linker import SectionLinker, linker_registry
from .titles import DirectoryTitleStrategy


class IndexesLinker(SectionLinker):
    """Regenerates "## Indexes" with one link per descendant index."""

    TYPE = "indexes"
    SECTION_NAME = "Indexes"
    STRATEGY = DirectoryTitleStrategy


# Register the linker
linker_registry[IndexesLinker.TYPE] = IndexesLinker
