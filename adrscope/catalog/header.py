"""
Header extractor for ADR files.

Splits a document into its YAML metadata block and its markdown body.

Format:
---
title: Use PostgreSQL
status: accepted
---

# Use PostgreSQL
...

The closing delimiter is the first '---' found at the start of a line after the
opening one. A metadata value spanning a line that is exactly '---' therefore
ends the block early; this is a known limitation of the format.
"""

from __future__ import annotations

from typing import Tuple

from ..errors import MalformedHeader

DELIMITER = "---"


def extract_header(text: str) -> Tuple[str, str]:
    """Split raw text into (metadata block, body).

    Args:
        text: Full document content

    Returns:
        Tuple of (trimmed metadata block, trimmed body)

    Raises:
        MalformedHeader: If the opening or closing delimiter is missing

    Example:
        >>> extract_header("---\\ntitle: Test\\n---\\n\\n# Body\\n")
        ('title: Test', '# Body')
    """
    if not text.startswith(DELIMITER):
        raise MalformedHeader("missing opening frontmatter delimiter (---)")

    rest = text[len(DELIMITER):]

    # Closing delimiter must start a line
    closing = rest.find("\n" + DELIMITER)
    if closing < 0:
        raise MalformedHeader("missing closing frontmatter delimiter (---)")

    block = rest[:closing].strip()
    body = rest[closing + 1 + len(DELIMITER):].lstrip("\r\n").strip()

    return block, body


def join_header(block: str, body: str = "") -> str:
    """Build a document from a metadata block and a body.

    Inverse of extract_header() for blocks that contain no '---' line.
    """
    document = f"{DELIMITER}\n{block.strip()}\n{DELIMITER}\n"
    if body.strip():
        document += f"\n{body.strip()}\n"
    return document
