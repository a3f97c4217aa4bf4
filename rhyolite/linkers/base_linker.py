#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
base_linker.py - Link insertion and the base class for section linkers

This module defines add_links, which writes link lines under a section
header, and SectionLinker, which binds one managed section of an index
document to a title strategy.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Type

from ..core.workspace import Workspace
from ..utils.markdown import clear_section, format_link, insert_link
from ..utils.output import vprint
from .titles import HeadingTitleStrategy, TitleStrategy


@dataclass
class LinkResult:
    """
    Outcome of inserting links into a document.

    Attributes:
        content: Updated document text
        links: Number of link lines inserted
        fallbacks: Number of titles that fell back to the filename
    """
    content: str
    links: int = 0
    fallbacks: int = 0


def add_links(content: str,
              targets: Sequence[str],
              base_path: str,
              header_marker: str,
              strategy: Optional[TitleStrategy] = None,
              workspace: Optional[Workspace] = None) -> LinkResult:
    """
    Insert one link line per target below a header.

    Every target produces a link; existing links are not checked for
    duplicates. Links are inserted directly under the header one at a time,
    so the last target ends up first.

    Args:
        content: Index document text
        targets: Target paths relative to base_path, "/"-separated
        base_path: Directory the targets are relative to
        header_marker: Header line to insert under (e.g., "## Links")
        strategy: Title strategy (defaults to the note heading)
        workspace: Filesystem access used for title lookups

    Returns:
        LinkResult with the updated content and counts
    """
    strategy = strategy or HeadingTitleStrategy()
    workspace = workspace or Workspace()
    result = LinkResult(content)

    for target in targets:
        title = strategy.resolve(target, base_path, workspace)
        if title.fell_back:
            result.fallbacks += 1
            vprint(f"  No heading for {target}, using '{title.title}'")

        result.content = insert_link(result.content, header_marker, format_link(title.title, target))
        result.links += 1

    return result


class SectionLinker:
    """
    Base class for linkers that regenerate one managed section.

    Subclasses set the section name and the title strategy used for its
    links.
    """

    # Type of the linker - subclasses should override
    TYPE = "base"

    # Managed section this linker regenerates
    HEADER_DEPTH = "##"
    SECTION_NAME = ""

    # Title strategy class used for the section's links
    STRATEGY: Type[TitleStrategy] = HeadingTitleStrategy

    def __init__(self, workspace: Optional[Workspace] = None):
        self.workspace = workspace or Workspace()
        self.strategy = self.STRATEGY()

    @property
    def header_marker(self) -> str:
        return f"{self.HEADER_DEPTH} {self.SECTION_NAME}"

    def update(self, content: str, targets: Sequence[str], base_path: str) -> LinkResult:
        """
        Clear the managed section and fill it with links to the targets.

        Args:
            content: Index document text
            targets: Target paths relative to base_path
            base_path: Directory containing the index document

        Returns:
            LinkResult with the regenerated content
        """
        content = clear_section(content, self.HEADER_DEPTH, self.SECTION_NAME)
        return add_links(content, targets, base_path, self.header_marker,
                         strategy=self.strategy, workspace=self.workspace)


# Registry of linker implementations
linker_registry: Dict[str, Type[SectionLinker]] = {}
