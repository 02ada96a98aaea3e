"""Project accepted site files onto the flat record sent to the search index."""
from __future__ import annotations

import re
from pathlib import PurePosixPath
from typing import Any, Optional

from ..models import Excerpt, ExtractedRecord, FileKind, FileRecord, POSTS_COLLECTION
from .excerpt import ExcerptRenderer, render_excerpt

# Keys exposed through their own record fields, never through `data`
RESERVED_KEYS = ("slug", "type", "url", "date", "excerpt")

DATE_PREFIX_RE = re.compile(r"^\d{4}-\d{2}-\d{2}-")
LEADING_SEPARATOR_RE = re.compile(r"^[^A-Za-z0-9]+")


class Extractor:
    def __init__(self, excerpt_renderer: ExcerptRenderer = render_excerpt) -> None:
        self.excerpt_renderer = excerpt_renderer

    def extract(self, file: FileRecord) -> ExtractedRecord:
        excerpt = self._excerpt(file)
        return ExtractedRecord(
            type=self.type(file),
            url=self.url(file),
            slug=self.slug(file),
            date=self.date(file),
            collection=self.collection(file),
            excerpt_html=excerpt.html if excerpt else None,
            excerpt_text=excerpt.text if excerpt else None,
            data=self.raw_data(file),
        )

    def type(self, file: FileRecord) -> str:
        if file.kind is FileKind.DOCUMENT and file.collection:
            return "post" if file.collection == POSTS_COLLECTION else "document"
        return "page"

    def url(self, file: FileRecord) -> str:
        return file.url

    def date(self, file: FileRecord) -> Optional[int]:
        """Publication date as epoch seconds, None for pages and undated documents."""
        if self.type(file) == "page" or file.date is None:
            return None
        return int(file.date.timestamp())

    def slug(self, file: FileRecord) -> str:
        name = DATE_PREFIX_RE.sub("", file.basename)
        name = LEADING_SEPARATOR_RE.sub("", name)
        return PurePosixPath(name).stem.lower()

    def collection(self, file: FileRecord) -> Optional[str]:
        if self.type(file) == "document":
            return file.collection
        return None

    def excerpt_html(self, file: FileRecord) -> Optional[str]:
        excerpt = self._excerpt(file)
        return excerpt.html if excerpt else None

    def excerpt_text(self, file: FileRecord) -> Optional[str]:
        excerpt = self._excerpt(file)
        return excerpt.text if excerpt else None

    def raw_data(self, file: FileRecord) -> dict[str, Any]:
        """Front-matter without the keys that have dedicated fields.

        Returns a new top-level mapping; the file's own data is left untouched.
        """
        data = dict(file.data)
        for key in RESERVED_KEYS:
            data.pop(key, None)
        return data

    def _excerpt(self, file: FileRecord) -> Optional[Excerpt]:
        if self.type(file) == "page":
            return None
        return self.excerpt_renderer(file)
