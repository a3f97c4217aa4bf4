#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Utils package - Utility functions for Rhyolite

This package contains various utility functions and helpers:
- Markdown utilities for section editing, link insertion and titles
- Console output helpers
- Interrupt handling for the command line
"""

from .markdown import (
    SectionToken,
    tokenize_sections,
    find_section,
    clear_section,
    extract_title,
    format_link,
    insert_link,
    word_at,
    note_filename_for,
    get_note_filename
)
from .output import vprint
