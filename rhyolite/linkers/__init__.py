#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Linkers package - Link generation for Rhyolite index documents

This package contains the managed-section linkers:
- Indexes linking: links to index documents in sub-directories
- Notes linking: links to notes next to the index document
"""

# Import linkers to register them
from . import indexes
from . import notes

# Import the registry for easy access
from .base_linker import linker_registry, SectionLinker, LinkResult, add_links
from .titles import (
    TitleResult,
    TitleStrategy,
    HeadingTitleStrategy,
    DirectoryTitleStrategy
)
from .indexes import IndexesLinker
from .notes import NotesLinker
