from __future__ import annotations

import re
from fnmatch import fnmatch

from bs4 import BeautifulSoup
from markdown_it import MarkdownIt

MARKDOWN_SUFFIXES = (".md", ".markdown", ".mkdown", ".mkdn", ".mkd")

_md = MarkdownIt("commonmark", {"html": True})
_WS_RE = re.compile(r"\s+")

def render_markdown(text: str) -> str:
    return _md.render(text).strip()

def html_to_text(html: str) -> str:
    text = BeautifulSoup(html, "html.parser").get_text(" ")
    return _WS_RE.sub(" ", text).strip()

def matches_pattern(rel_path: str, patterns: list[str]) -> bool:
    """Check if a site-relative path matches any of the given glob patterns.

    Supports:
    - "**/draft.md" - match draft.md in any directory
    - "drafts/**" - match everything under drafts
    - "*.txt" / "about.md" - plain fnmatch against the whole path

    A leading "/" on either side is ignored.
    """
    rel_path = rel_path.replace("\\", "/").lstrip("/")

    for pattern in patterns:
        pattern = pattern.replace("\\", "/").lstrip("/")

        if pattern.startswith("**/"):
            suffix = pattern[3:]
            parts = rel_path.split("/")
            for i in range(len(parts)):
                if fnmatch("/".join(parts[i:]), suffix):
                    return True

        elif pattern.endswith("/**"):
            prefix = pattern[:-3]
            if rel_path.startswith(prefix + "/") or rel_path == prefix:
                return True

        elif fnmatch(rel_path, pattern):
            return True

    return False
