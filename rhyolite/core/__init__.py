#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core package - Core functionality for Rhyolite

This package contains the core functionality:
- Config: Configuration management
- Workspace: Filesystem access and directory scans
- Host: The editor host commands report to
- IndexBuilder: Regeneration of one directory's index document
- TreeWalker: Regeneration of every index document under a directory
"""

from .config import config, Config
from .workspace import Workspace, IGNORE_GLOBS
from .host import Host, ConsoleHost, EditorContext
from .index_builder import IndexBuilder, IndexUpdate
from .tree_walker import TreeWalker, TreeUpdate
