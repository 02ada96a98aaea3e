from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import PurePosixPath
from typing import Any, Optional

POSTS_COLLECTION = "posts"


class FileKind(Enum):
    """Kind assigned by the site generator when the file object is built."""

    STATIC_ASSET = "static_asset"
    PAGE = "page"
    DOCUMENT = "document"


@dataclass(frozen=True)
class FileRecord:
    """One file of a built site, as handed over by the generator.

    `collection` is only meaningful for documents; posts are documents of the
    reserved `posts` collection.
    """
    relative_path: str
    url: str
    kind: FileKind
    collection: Optional[str] = None
    data: dict[str, Any] = field(default_factory=dict)
    date: Optional[datetime] = None
    content: Optional[str] = None
    excerpt_source: Optional[str] = None

    @property
    def basename(self) -> str:
        return PurePosixPath(self.relative_path).name

    @property
    def extension(self) -> str:
        return PurePosixPath(self.relative_path).suffix.lower()


@dataclass(frozen=True)
class Excerpt:
    html: str
    text: str


@dataclass(frozen=True)
class ExtractedRecord:
    type: str
    url: str
    slug: str
    date: Optional[int] = None
    collection: Optional[str] = None
    excerpt_html: Optional[str] = None
    excerpt_text: Optional[str] = None
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Flatten into a single mapping, typed fields taking precedence over data."""
        out = dict(self.data)
        out.update(
            type=self.type,
            url=self.url,
            slug=self.slug,
            date=self.date,
            collection=self.collection,
            excerpt_html=self.excerpt_html,
            excerpt_text=self.excerpt_text,
        )
        return out
