from __future__ import annotations

from typing import Callable, Optional

from bs4 import BeautifulSoup

from ..models import Excerpt, FileRecord
from ..utils import MARKDOWN_SUFFIXES, html_to_text, render_markdown

ExcerptRenderer = Callable[[FileRecord], Optional[Excerpt]]


def render_excerpt(file: FileRecord) -> Optional[Excerpt]:
    """Excerpt of `file` as HTML and plain text.

    An explicit `excerpt_source` (front-matter override) is rendered on its
    own. Otherwise the excerpt is the first <p> of the rendered content. Both
    forms come from the same HTML, so they only differ by markup.
    """
    if file.excerpt_source is not None:
        source = file.excerpt_source.strip()
        if file.extension in MARKDOWN_SUFFIXES:
            html = render_markdown(source)
        else:
            html = source
    elif file.content:
        paragraph = BeautifulSoup(file.content, "html.parser").find("p")
        if paragraph is None:
            return None
        html = str(paragraph)
    else:
        return None
    return Excerpt(html=html, text=html_to_text(html))
