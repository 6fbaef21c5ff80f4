"""Tests for adrscope/catalog/markdown_renderer.py."""

import pytest

from adrscope.catalog.markdown_renderer import (
    MarkdownRenderer,
    escape_markdown,
    parse_attribute_block,
    sanitize_whitespace,
    to_html,
    to_plain_text,
)


@pytest.fixture
def renderer():
    return MarkdownRenderer()


class TestToHtml:
    """Test HTML rendering."""

    def test_heading_and_paragraph(self, renderer):
        html = renderer.to_html("# Title\n\nSome *text*.")
        assert "<h1>Title</h1>" in html
        assert "<em>text</em>" in html

    def test_table(self, renderer):
        html = renderer.to_html("| a | b |\n|---|---|\n| 1 | 2 |\n")
        assert "<table>" in html
        assert "<td>1</td>" in html

    def test_strikethrough(self, renderer):
        assert "<s>old</s>" in renderer.to_html("~~old~~")

    def test_task_list(self, renderer):
        html = renderer.to_html("- [x] done\n- [ ] todo\n")
        assert 'type="checkbox"' in html

    def test_heading_attributes(self, renderer):
        assert renderer.to_html("## Context {#context}\n") == '<h2 id="context">Context</h2>\n'

    def test_heading_classes_and_key_values(self, renderer):
        html = renderer.to_html("# Decision {#decision .lead .wide data-section=outcome}\n")
        assert 'id="decision"' in html
        assert 'class="lead wide"' in html
        assert 'data-section="outcome"' in html
        assert ">Decision</h1>" in html

    def test_heading_attributes_after_inline_code(self, renderer):
        html = renderer.to_html("## Use `pg` {#use-pg}\n")
        assert '<h2 id="use-pg">' in html
        assert "{#" not in html

    def test_braces_inside_paragraph_are_text(self, renderer):
        assert "{#context}" in renderer.to_html("Not a heading {#context}\n")

    def test_braces_glued_to_heading_text_are_kept(self, renderer):
        assert "<h2>Context{#context}</h2>" in renderer.to_html("## Context{#context}\n")

    def test_raw_html_is_escaped(self, renderer):
        html = renderer.to_html("<script>alert(1)</script>")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_empty(self, renderer):
        assert renderer.to_html("") == ""

    def test_module_function(self):
        assert "<h1>Title</h1>" in to_html("# Title")


class TestToPlainText:
    """Test flattening markdown for search indexing."""

    def test_text_is_joined_on_one_line(self, renderer):
        assert renderer.to_plain_text("# Title\n\nFirst paragraph.\n\nSecond one.") == (
            "Title First paragraph. Second one."
        )

    def test_breaks_become_spaces(self, renderer):
        assert renderer.to_plain_text("line one\nline two  \nline three") == "line one line two line three"

    def test_inline_code_is_kept(self, renderer):
        assert renderer.to_plain_text("Run `make test` first") == "Run make test first"

    def test_fenced_code_is_dropped(self, renderer):
        text = renderer.to_plain_text("Intro\n\n```python\nsecret()\n```\n\nOutro")
        assert text == "Intro Outro"

    def test_indented_code_is_dropped(self, renderer):
        assert renderer.to_plain_text("Intro\n\n    secret()\n\nOutro") == "Intro Outro"

    def test_link_text_and_image_alt(self, renderer):
        text = renderer.to_plain_text("See [the docs](https://example.org) and ![diagram](arch.png)")
        assert "the docs" in text
        assert "diagram" in text
        assert "https" not in text

    def test_list_items(self, renderer):
        assert renderer.to_plain_text("- one\n- two\n") == "one two"

    def test_empty(self, renderer):
        assert renderer.to_plain_text("") == ""

    @pytest.mark.parametrize("markdown", [
        "# Title\n\nSome *text*.",
        "  leading\n\n\n\ttabs   and   spaces  ",
        "* [ ] task\n> quote\n\n| a |\n|---|\n| b |",
        "**unclosed *emphasis _and `code",
        "<div>raw</div>\n\n[broken](",
    ])
    def test_whitespace_is_normalized(self, renderer, markdown):
        once = renderer.to_plain_text(markdown)
        twice = renderer.to_plain_text(once)
        for text in (once, twice):
            assert "  " not in text
            assert text == text.strip()
            assert "\n" not in text

    def test_idempotent_on_plain_prose(self, renderer):
        once = renderer.to_plain_text("# Decision\n\nWe will use PostgreSQL\nfor storage.")
        assert renderer.to_plain_text(once) == once

    def test_heading_attributes_do_not_reach_text(self, renderer):
        assert renderer.to_plain_text("## Context {#context}\n") == "Context"

    @pytest.mark.parametrize("markdown", [
        "\\*not emphasis\\*",
        "\\`\\`\\` x",
        "AT&amp;amp;T",
        "\\# not a heading",
        "1\\. not a list",
        "\\- not a list either",
        "\\> not a quote",
        "Use \\[brackets\\] and \\<angles\\>",
        "C:\\\\Program Files\\\\app",
    ])
    def test_idempotent_on_escaped_input(self, renderer, markdown):
        once = renderer.to_plain_text(markdown)
        assert once
        assert renderer.to_plain_text(once) == once

    def test_reinterpretable_text_is_escaped(self, renderer):
        assert renderer.to_plain_text("\\*not emphasis\\*") == "\\*not emphasis\\*"
        assert renderer.to_plain_text("AT&amp;amp;T") == "AT\\&amp;T"

    def test_stable_text_is_not_escaped(self, renderer):
        assert renderer.to_plain_text("Costs 5 * 3 dollars") == "Costs 5 * 3 dollars"

    def test_module_function(self):
        assert to_plain_text("*hi*") == "hi"


class TestSanitizeWhitespace:

    def test_collapses_runs(self):
        assert sanitize_whitespace("  a \n\t b  ") == "a b"

    def test_none_safe(self):
        assert sanitize_whitespace(None) == ""


class TestEscapeMarkdown:

    def test_inline_metacharacters(self):
        assert escape_markdown("a*b_c`d") == "a\\*b\\_c\\`d"

    def test_block_start(self):
        assert escape_markdown("# title") == "\\# title"
        assert escape_markdown("12. item") == "12\\. item"

    def test_plain_text_unchanged(self):
        assert escape_markdown("2025-01-15 release.") == "2025-01-15 release."


class TestParseAttributeBlock:

    def test_all_forms(self):
        assert parse_attribute_block("#intro .a .b lang='en'") == {"id": "intro", "lang": "en", "class": "a b"}

    def test_empty(self):
        assert parse_attribute_block("") == {}
