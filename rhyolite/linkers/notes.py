#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
notes.py - Links from an index document to its sibling notes
"""

from .base_linker import SectionLinker, linker_registry
from .titles import HeadingTitleStrategy


class NotesLinker(SectionLinker):
    """Regenerates "## Links", titling each note by its first heading."""

    TYPE = "notes"
    SECTION_NAME = "Links"
    STRATEGY = HeadingTitleStrategy


# Register the linker
linker_registry[NotesLinker.TYPE] = NotesLinker
