"""
Markdown rendering for ADR bodies.

Produces the HTML embedded in viewers and a flattened single-line text used
for search indexing. Rendering never fails: markdown has no invalid input.

Headings may carry trailing attributes:

    ## Context {#context .lead data-section=intro}

which render as <h2 id="context" class="lead" data-section="intro">Context</h2>.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Sequence

from markdown_it import MarkdownIt
from markdown_it.rules_core import StateCore
from markdown_it.token import Token
from mdit_py_plugins.tasklists import tasklists_plugin

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")

# Trailing '{...}' on a heading line, separated from the text by whitespace
HEADING_ATTRS_RE = re.compile(r"(?:^|\s+)\{([^{}]*)\}\s*$")

# Characters a second parse would treat as inline syntax or entities
INLINE_SPECIAL_RE = re.compile(r"([\\`*_~\[\]<&])")
# Line starts a second parse would treat as block syntax
BLOCK_START_RE = re.compile(r"^(?:[#>+\-=]|\d{1,9}[.)])")

# Block tokens whose content never reaches the plain-text index
CODE_BLOCK_TYPES = {"fence", "code_block"}


def sanitize_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text or "").strip()


def escape_markdown(text: str) -> str:
    """Backslash-escape text so that parsing it again yields the same text.

    Example:
        >>> escape_markdown("*not emphasis*")
        '\\\\*not emphasis\\\\*'
    """
    escaped = INLINE_SPECIAL_RE.sub(r"\\\1", text)
    match = BLOCK_START_RE.match(escaped)
    if match:
        cut = match.end() - 1
        escaped = escaped[:cut] + "\\" + escaped[cut:]
    return escaped


def parse_attribute_block(spec: str) -> Dict[str, str]:
    """Parse the inside of '{#id .class key=value}' into HTML attributes."""
    attrs: Dict[str, str] = {}
    classes: List[str] = []
    for part in spec.split():
        if part.startswith("#") and len(part) > 1:
            attrs["id"] = part[1:]
        elif part.startswith(".") and len(part) > 1:
            classes.append(part[1:])
        elif "=" in part:
            key, value = part.split("=", 1)
            if key:
                attrs[key] = value.strip("\"'")
    if classes:
        attrs["class"] = " ".join(classes)
    return attrs


def _heading_attrs_rule(state: StateCore) -> None:
    tokens = state.tokens
    for index, token in enumerate(tokens[:-1]):
        if token.type != "heading_open":
            continue
        inline = tokens[index + 1]
        if inline.type != "inline" or not inline.children:
            continue
        last = inline.children[-1]
        if last.type != "text":
            continue
        match = HEADING_ATTRS_RE.search(last.content)
        if not match:
            continue

        for key, value in parse_attribute_block(match.group(1)).items():
            token.attrSet(key, value)
        last.content = last.content[:match.start()]
        inline.content = HEADING_ATTRS_RE.sub("", inline.content)


def heading_attrs_plugin(md: MarkdownIt) -> None:
    """Move a trailing '{#id .class key=value}' on heading lines into the heading's attributes."""
    md.core.ruler.push("heading_attrs", _heading_attrs_rule)


class MarkdownRenderer:
    """CommonMark renderer with tables, strikethrough, task lists and heading attributes."""

    def __init__(self) -> None:
        # Raw HTML in sources is escaped rather than passed through
        self._md = (
            MarkdownIt("commonmark", {"html": False})
            .enable(["table", "strikethrough"])
            .use(tasklists_plugin)
            .use(heading_attrs_plugin)
        )

    def to_html(self, markdown: str) -> str:
        """Render markdown to HTML."""
        return self._md.render(markdown or "")

    def to_plain_text(self, markdown: str) -> str:
        """Extract single-line plain text for search indexing.

        Text and inline code are kept, code blocks are dropped and line
        breaks become spaces. If the parser fails, the raw input is returned
        with its whitespace normalized.

        The result is stable under a second pass. When the flattened text
        would itself parse as markdown (an unescaped '\\*', an entity, a
        leading '#'), its metacharacters are backslash-escaped.

        Example:
            >>> MarkdownRenderer().to_plain_text("# Title\\n\\nSome *text*.")
            'Title Some text .'
        """
        text = self._flatten(markdown)
        if self._flatten(text) != text:
            text = escape_markdown(text)
        return text

    def _flatten(self, markdown: str) -> str:
        try:
            tokens = self._md.parse(markdown or "")
        except Exception as exc:
            logger.warning(f"Markdown parsing failed, indexing raw text: {exc}")
            return sanitize_whitespace(markdown)

        parts: List[str] = []
        for token in tokens:
            if token.type in CODE_BLOCK_TYPES:
                continue
            if token.type == "inline" and token.children:
                _collect_inline_text(token.children, parts)

        return sanitize_whitespace(" ".join(parts))


def _collect_inline_text(children: Sequence[Token], parts: List[str]) -> None:
    for child in children:
        if child.type in ("text", "code_inline"):
            parts.append(child.content)
        elif child.type in ("softbreak", "hardbreak"):
            parts.append(" ")
        elif child.children:
            # Image alt text
            _collect_inline_text(child.children, parts)


_default_renderer: Optional[MarkdownRenderer] = None


def default_renderer() -> MarkdownRenderer:
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = MarkdownRenderer()
    return _default_renderer


def to_html(markdown: str) -> str:
    """Render markdown to HTML with the shared default renderer."""
    return default_renderer().to_html(markdown)


def to_plain_text(markdown: str) -> str:
    """Extract plain text with the shared default renderer."""
    return default_renderer().to_plain_text(markdown)
