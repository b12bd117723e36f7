"""Markdown frontmatter parsing."""

from dataclasses import dataclass
from typing import Any

import frontmatter


@dataclass(frozen=True)
class FrontmatterDocument:
    """Markdown document split into its YAML header and body."""

    data: dict[str, Any]
    body: str


def split_frontmatter(content: str) -> FrontmatterDocument | None:
    """Split markdown content into frontmatter mapping and body.

    Returns None when the content does not open with a ``---`` block or the
    block is not a non-empty YAML mapping. YAML syntax errors propagate to the
    caller. The body is returned stripped.
    """
    if not frontmatter.checks(content):
        return None

    post = frontmatter.loads(content)
    if not post.metadata:
        return None

    return FrontmatterDocument(data=dict(post.metadata), body=post.content)
