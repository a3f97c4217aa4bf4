#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Rhyolite - Keep Markdown notes and their index.md files linked

This package provides functionality for:
- Creating a note from a selected word and linking to it
- Regenerating the "Links" and "Indexes" sections of index.md files
- Deciding which commands an editor host should offer
"""

__version__ = "0.1.0"

# Import core modules
from .core.config import config
from .core.workspace import Workspace
from .core.index_builder import IndexBuilder
from .core.tree_walker import TreeWalker

# Import linkers
from .linkers.base_linker import linker_registry
from . import linkers

from .commands import create_file_link, update_index_file, compute_desired_commands
