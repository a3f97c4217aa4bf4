#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
markdown.py - Text-level editing of Markdown index documents

This module provides the string manipulation used to maintain index files:
locating and clearing level-2 sections, inserting link lines under a header,
extracting a note's title and finding the word under a cursor.
"""

import re
from dataclasses import dataclass
from typing import List, Optional, Tuple


# Header line: one to six '#' characters, a space, then the section name
HEADER_PATTERN = re.compile(r'^(#{1,6}) (.*)$', re.MULTILINE)

# First level-1 heading anywhere in a note
TITLE_PATTERN = re.compile(r'^# (.+)$', re.MULTILINE)

# A word may contain internal hyphens or apostrophes ("follow-up", "don't")
WORD_PATTERN = re.compile(r"\w+(?:[-']\w+)*")


@dataclass(frozen=True)
class SectionToken:
    """
    A header line and the extent of its body.

    Attributes:
        depth: Number of '#' characters in the header
        name: Header text after the marker, trailing whitespace removed
        start: Offset of the first character of the header line
        body_start: Offset just past the header line's newline
        end: Offset where the body stops (next same-or-shallower header or EOF)
    """
    depth: int
    name: str
    start: int
    body_start: int
    end: int


def tokenize_sections(content: str) -> List[SectionToken]:
    """
    Split a document into header tokens.

    Args:
        content: Markdown content to scan

    Returns:
        One SectionToken per header line, in document order
    """
    matches = list(HEADER_PATTERN.finditer(content))
    tokens = []

    for index, match in enumerate(matches):
        depth = len(match.group(1))
        body_start = match.end()
        if body_start < len(content) and content[body_start] == "\n":
            body_start += 1

        # The body runs until a header that is not nested below this one
        end = len(content)
        for following in matches[index + 1:]:
            if len(following.group(1)) <= depth:
                end = following.start()
                break

        tokens.append(SectionToken(
            depth=depth,
            name=match.group(2).rstrip(),
            start=match.start(),
            body_start=body_start,
            end=end,
        ))

    return tokens


def find_section(content: str, depth: int, name: str) -> Optional[SectionToken]:
    """Return the first section of exactly ``depth`` named ``name``, if any."""
    for token in tokenize_sections(content):
        if token.depth == depth and token.name == name:
            return token
    return None


def clear_section(content: str, header_depth: str, section_name: str) -> str:
    """
    Empty the body of a section, adding the section if it doesn't exist.

    The header is rewritten as ``"<header_depth> <section_name>"`` followed by
    a blank line. Everything outside the section is left byte-identical.

    Args:
        content: Markdown content to modify
        header_depth: Header marker for the section (e.g., "##")
        section_name: Exact section name (e.g., "Links")

    Returns:
        Modified Markdown content
    """
    header = f"{header_depth} {section_name}"
    token = find_section(content, len(header_depth), section_name)

    if token is None:
        separator = "\n" if content and not content.endswith("\n") else ""
        return f"{content}{separator}{header}\n\n"

    return content[:token.start] + f"{header}\n\n" + content[token.end:]


def extract_title(content: str) -> Optional[str]:
    """
    Extract the first level-1 heading from Markdown content.

    Args:
        content: Markdown content to search

    Returns:
        The heading text, or None if the content has no usable heading
    """
    match = TITLE_PATTERN.search(content)
    if match:
        title = match.group(1).rstrip("\r")
        if title:
            return title
    return None


def format_link(title: str, target: str) -> str:
    """Render a single link line for an index section."""
    return f"- [{title}]({target})\n"


def insert_link(content: str, header_marker: str, link_line: str) -> str:
    """
    Insert a link line directly below a header line.

    Each call inserts right after the header, so the latest link ends up
    first in the section.

    Args:
        content: Markdown content to modify
        header_marker: Literal header line to look for (e.g., "## Links")
        link_line: Link line to insert, including its trailing newline

    Returns:
        Modified Markdown content
    """
    pattern = re.compile(r'^' + re.escape(header_marker) + r'[ \t]*\r?$', re.MULTILINE)
    match = pattern.search(content)

    if match:
        insert_pos = match.end()
        if insert_pos < len(content):
            # Skip past the newline that ends the header line
            insert_pos += 1
            return content[:insert_pos] + link_line + content[insert_pos:]
        return f"{content}\n{link_line}"

    # Header not found: append to the end
    separator = "\n" if content and not content.endswith("\n") else ""
    return f"{content}{separator}{link_line}"


def word_at(text: str, offset: int) -> Optional[Tuple[int, int]]:
    """
    Find the range of the word touching a cursor offset.

    Args:
        text: Document text
        offset: Cursor offset into the text

    Returns:
        (start, end) offsets of the word, or None if the cursor isn't on a word
    """
    for match in WORD_PATTERN.finditer(text):
        if match.start() > offset:
            break
        if match.start() <= offset <= match.end():
            return match.start(), match.end()
    return None


def note_filename_for(word: str, extension: str = ".md") -> str:
    """
    Build the file name for a note created from a word.

    Args:
        word: Selected word or phrase (e.g., "My Topic")
        extension: File extension to append

    Returns:
        File name such as "my-topic.md"
    """
    return word.replace(" ", "-").lower() + extension


def get_note_filename(path: str) -> str:
    """
    Extract the note name from a file path.

    Args:
        path: Path to the note file, using "/" or the OS separator

    Returns:
        Note name without extension
    """
    filename = re.split(r'[\\/]', path)[-1]
    if "." in filename.lstrip("."):
        return filename.rsplit(".", 1)[0]
    return filename
