"""Tests for adrscope/catalog/header.py - frontmatter splitting."""

import pytest

from adrscope.catalog.header import extract_header, join_header
from adrscope.errors import MalformedHeader, MetadataError


class TestExtractHeader:
    """Test splitting documents into metadata block and body."""

    def test_basic_document(self):
        block, body = extract_header("---\ntitle: Test\n---\n\n# Body\n")
        assert block == "title: Test"
        assert body == "# Body"

    def test_block_and_body_are_trimmed(self):
        block, body = extract_header("---\n\n  title: Test\n\n---\n\n\n  Body text  \n\n")
        assert block == "title: Test"
        assert body == "Body text"

    def test_crlf_line_endings(self):
        block, body = extract_header("---\r\ntitle: Test\r\n---\r\nBody\r\n")
        assert block == "title: Test"
        assert body == "Body"

    def test_empty_block(self):
        block, body = extract_header("---\n---\nBody")
        assert block == ""
        assert body == "Body"

    def test_empty_body(self):
        block, body = extract_header("---\ntitle: Test\n---\n")
        assert block == "title: Test"
        assert body == ""

    def test_first_closing_delimiter_wins(self):
        block, body = extract_header("---\ntitle: Test\n---\nIntro\n---\nMore")
        assert block == "title: Test"
        assert body == "Intro\n---\nMore"

    def test_missing_opening_delimiter(self):
        with pytest.raises(MalformedHeader, match="opening"):
            extract_header("title: Test\n---\nBody")

    def test_leading_whitespace_is_not_an_opening(self):
        with pytest.raises(MalformedHeader):
            extract_header("\n---\ntitle: Test\n---\n")

    def test_missing_closing_delimiter(self):
        with pytest.raises(MalformedHeader, match="closing"):
            extract_header("---\ntitle: Test\nBody")

    def test_malformed_header_is_metadata_error(self):
        with pytest.raises(MetadataError):
            extract_header("")


class TestJoinHeader:
    """Test building documents from a block and body."""

    def test_join_with_body(self):
        assert join_header("title: A", "Body") == "---\ntitle: A\n---\n\nBody\n"

    def test_join_without_body(self):
        assert join_header("title: A") == "---\ntitle: A\n---\n"

    def test_round_trip(self):
        document = join_header("title: A\nstatus: accepted", "# Heading\n\nText")
        assert extract_header(document) == ("title: A\nstatus: accepted", "# Heading\n\nText")
