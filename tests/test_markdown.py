#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
test_markdown.py - Unit tests for rhyolite.utils.markdown

This module contains unit tests for section editing, link insertion and
title extraction.
"""

import sys
import os
import unittest

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from rhyolite.utils import markdown


class TestTokenizeSections(unittest.TestCase):
    """Test cases for the section tokenizer."""

    def test_tokens_in_document_order(self):
        """Test that every header becomes a token with its body extent."""
        content = "# Index\n\nIntro\n\n## Links\n- a\n### Deep\nx\n## Other\ny"
        tokens = markdown.tokenize_sections(content)

        self.assertEqual([(t.depth, t.name) for t in tokens],
                         [(1, "Index"), (2, "Links"), (3, "Deep"), (2, "Other")])

        links = tokens[1]
        self.assertEqual(content[links.start:links.body_start], "## Links\n")
        # Deeper headers belong to the body
        self.assertEqual(content[links.body_start:links.end], "- a\n### Deep\nx\n")
        self.assertEqual(tokens[3].end, len(content))

    def test_hashes_without_space_are_not_headers(self):
        """Test that '##Links' and '#tag' are not treated as headers."""
        tokens = markdown.tokenize_sections("##Links\n#tag\ntext\n")
        self.assertEqual(tokens, [])

    def test_find_section_is_exact(self):
        """Test that a lookup for 'Links' does not match 'Links Archive'."""
        content = "## Links Archive\nold\n"
        self.assertIsNone(markdown.find_section(content, 2, "Links"))
        self.assertIsNotNone(markdown.find_section(content, 2, "Links Archive"))

    def test_find_section_checks_depth(self):
        """Test that only headers of the requested depth match."""
        content = "### Links\nx\n"
        self.assertIsNone(markdown.find_section(content, 2, "Links"))


class TestClearSection(unittest.TestCase):
    """Test cases for clear_section."""

    def test_adds_missing_section(self):
        """Test adding a section when it doesn't exist."""
        result = markdown.clear_section("# Index\n\n", "##", "Links")
        self.assertEqual(result, "# Index\n\n## Links\n\n")

    def test_adds_missing_section_on_its_own_line(self):
        """Test that the header starts a new line when content lacks one."""
        result = markdown.clear_section("# Index", "##", "Links")
        self.assertEqual(result, "# Index\n## Links\n\n")
        self.assertTrue(result.startswith("# Index"))

    def test_adds_section_to_empty_document(self):
        """Test clearing a section in an empty document."""
        self.assertEqual(markdown.clear_section("", "##", "Links"), "## Links\n\n")

    def test_clears_existing_section(self):
        """Test that the section body is removed and others are untouched."""
        content = "# Index\n\n## Links\n- [File1](file1.md)\n- [File2](file2.md)\n\n## Other Section\nSome content"
        result = markdown.clear_section(content, "##", "Links")
        self.assertEqual(result, "# Index\n\n## Links\n\n## Other Section\nSome content")

    def test_clears_last_section(self):
        """Test clearing a section that runs to the end of the document."""
        content = "# Index\n\nIntro text\n\n## Links\n- [A](a.md)\n- [B](b.md)\n"
        result = markdown.clear_section(content, "##", "Links")
        self.assertEqual(result, "# Index\n\nIntro text\n\n## Links\n\n")

    def test_preserves_preamble_and_later_sections(self):
        """Test that text around the section is byte-identical."""
        preamble = "# Index\n\nSome intro\nwith two lines\n\n"
        before = "## Notes\nkeep me\n\n"
        after = "## Other\n  spacing   kept\n\n\n"
        content = preamble + before + "## Links\n- [X](x.md)\n\n" + after

        result = markdown.clear_section(content, "##", "Links")
        self.assertEqual(result, preamble + before + "## Links\n\n" + after)

    def test_clears_nested_subsections(self):
        """Test that deeper headers inside the section are cleared with it."""
        content = "## Links\n- a\n### Sub\ny\n## Other\nz"
        result = markdown.clear_section(content, "##", "Links")
        self.assertEqual(result, "## Links\n\n## Other\nz")

    def test_stops_at_shallower_header(self):
        """Test that a level-1 header after the section is kept."""
        content = "## Links\n- a\n# Appendix\nz"
        result = markdown.clear_section(content, "##", "Links")
        self.assertEqual(result, "## Links\n\n# Appendix\nz")

    def test_similar_name_is_not_cleared(self):
        """Test that 'Links Archive' survives clearing 'Links'."""
        content = "# I\n\n## Links Archive\n- old\n"
        result = markdown.clear_section(content, "##", "Links")
        self.assertEqual(result, "# I\n\n## Links Archive\n- old\n## Links\n\n")

    def test_idempotent(self):
        """Test that clearing twice gives the same result as clearing once."""
        documents = [
            "# Index\n\n",
            "# Index",
            "# Index\n\n## Links\n- [A](a.md)\n\n## Other\ntext",
            "## Indexes\n- [sub](sub/index.md)\n",
        ]
        for content in documents:
            once = markdown.clear_section(content, "##", "Links")
            twice = markdown.clear_section(once, "##", "Links")
            self.assertEqual(once, twice)


class TestExtractTitle(unittest.TestCase):
    """Test cases for title extraction."""

    def test_first_heading(self):
        """Test that the first level-1 heading is used."""
        self.assertEqual(markdown.extract_title("# Hello World\n\ntext\n# Second"), "Hello World")

    def test_heading_not_on_first_line(self):
        """Test that the heading may appear anywhere in the note."""
        content = "---\ntags: [a]\n---\n\nintro\n# Late Title\n"
        self.assertEqual(markdown.extract_title(content), "Late Title")

    def test_ignores_deeper_headings(self):
        """Test that '## ' headings are not titles."""
        self.assertIsNone(markdown.extract_title("## Not a title\ntext"))

    def test_strips_carriage_return(self):
        """Test titles in CRLF files."""
        self.assertEqual(markdown.extract_title("# Windows\r\nbody"), "Windows")

    def test_keeps_heading_text_as_written(self):
        """Test that spacing inside the heading is not trimmed."""
        self.assertEqual(markdown.extract_title("#  Spaced Title  \nbody"), " Spaced Title  ")

    def test_no_heading(self):
        """Test content without a heading."""
        self.assertIsNone(markdown.extract_title("just text"))


class TestInsertLink(unittest.TestCase):
    """Test cases for link insertion."""

    def test_inserts_below_header(self):
        """Test inserting a link directly after the header line."""
        content = "# Index\n\n## Links\n\n"
        result = markdown.insert_link(content, "## Links", markdown.format_link("Alpha", "a.md"))
        self.assertEqual(result, "# Index\n\n## Links\n- [Alpha](a.md)\n\n")

    def test_latest_link_first(self):
        """Test that each new link is placed above the previous ones."""
        content = "## Links\n\n"
        content = markdown.insert_link(content, "## Links", markdown.format_link("A", "a.md"))
        content = markdown.insert_link(content, "## Links", markdown.format_link("B", "b.md"))
        self.assertEqual(content, "## Links\n- [B](b.md)\n- [A](a.md)\n\n")

    def test_header_is_last_line(self):
        """Test a header without a trailing newline."""
        result = markdown.insert_link("## Links", "## Links", "- [A](a.md)\n")
        self.assertEqual(result, "## Links\n- [A](a.md)\n")

    def test_header_must_match_whole_line(self):
        """Test that '## Links Archive' is not used for '## Links'."""
        content = "## Links Archive\n\n## Links\n\n"
        result = markdown.insert_link(content, "## Links", "- [A](a.md)\n")
        self.assertEqual(result, "## Links Archive\n\n## Links\n- [A](a.md)\n\n")

    def test_missing_header_appends(self):
        """Test the fallback when the header is missing."""
        self.assertEqual(markdown.insert_link("# T\n", "## Links", "- [A](a.md)\n"), "# T\n- [A](a.md)\n")
        self.assertEqual(markdown.insert_link("# T", "## Links", "- [A](a.md)\n"), "# T\n- [A](a.md)\n")


class TestWords(unittest.TestCase):
    """Test cases for word lookup and note file names."""

    def test_word_at_cursor(self):
        self.assertEqual(markdown.word_at("hello world", 7), (6, 11))

    def test_word_at_word_end(self):
        """Test that a cursor right after a word still finds it."""
        self.assertEqual(markdown.word_at("hello world", 5), (0, 5))

    def test_word_with_hyphen(self):
        text = "a follow-up item"
        start, end = markdown.word_at(text, 4)
        self.assertEqual(text[start:end], "follow-up")

    def test_no_word(self):
        self.assertIsNone(markdown.word_at("a   b", 2))
        self.assertIsNone(markdown.word_at("", 0))

    def test_note_filename(self):
        self.assertEqual(markdown.note_filename_for("My Topic"), "my-topic.md")
        self.assertEqual(markdown.note_filename_for("TestWord"), "testword.md")

    def test_get_note_filename(self):
        self.assertEqual(markdown.get_note_filename("notes/a.md"), "a")
        self.assertEqual(markdown.get_note_filename("archive.tar.md"), "archive.tar")
        self.assertEqual(markdown.get_note_filename("README"), "README")


if __name__ == '__main__':
    unittest.main()
