"""Build FileRecords from a Jekyll-style source tree.

This stands in for the site generator: it assigns each file its kind, output
URL, date and front-matter the way the generator would, so the classifier and
extractor can run against a real directory.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path, PurePosixPath
from typing import Any, Optional
from zoneinfo import ZoneInfo

import frontmatter

from ..config import IndexConfig
from ..models import FileKind, FileRecord, POSTS_COLLECTION
from ..utils import MARKDOWN_SUFFIXES, render_markdown

logger = logging.getLogger(__name__)

POST_NAME_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})-(.+)$")
FRONT_MATTER_RE = re.compile(r"\A\ufeff?---[ \t]*\r?\n")


def has_front_matter(text: str) -> bool:
    """True when the first line is exactly a `---` fence (trailing blanks allowed)."""
    return FRONT_MATTER_RE.match(text) is not None


def first_paragraph(body: str) -> str:
    return body.strip().split("\n\n", 1)[0].strip()


def coerce_date(value: Any, tz: ZoneInfo) -> Optional[datetime]:
    """Turn a front-matter date into an aware datetime in `tz`.

    Naive values are read as wall-clock time in `tz`. Returns None for values
    that are not dates.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def output_name(path: PurePosixPath) -> PurePosixPath:
    if path.suffix.lower() in MARKDOWN_SUFFIXES:
        return path.with_suffix(".html")
    return path


@dataclass
class SiteReader:
    config: IndexConfig

    def __post_init__(self) -> None:
        self.root = Path(self.config.source)
        self.tz = self.config.tzinfo
        self.collections = set(self.config.get("collections", []))

    def read(self) -> list[FileRecord]:
        """Read every file the generator would publish, sorted by relative path."""
        files: list[FileRecord] = []
        for p in sorted(self.root.rglob("*")):
            if not p.is_file():
                continue
            rel = str(p.relative_to(self.root)).replace("\\", "/")
            try:
                record = self.read_file(rel)
            except Exception as e:
                logger.warning(f"Could not read {rel}: {e}")
                continue
            if record is not None:
                files.append(record)
        logger.info(f"Read {len(files)} files from {self.root}")
        return files

    def read_file(self, rel: str) -> Optional[FileRecord]:
        """Build the record for one site-relative path, or None if it is not published."""
        parts = rel.split("/")
        if any(part.startswith(".") for part in parts):
            return None

        collection = None
        top = parts[0]
        if top.startswith("_"):
            label = top[1:]
            if len(parts) < 2 or (label != POSTS_COLLECTION and label not in self.collections):
                return None
            collection = label
        if any(part.startswith("_") for part in parts[1:]):
            return None

        raw = (self.root / rel).read_bytes().decode("utf-8", errors="replace")
        if not has_front_matter(raw):
            return FileRecord(relative_path=rel, url="/" + rel, kind=FileKind.STATIC_ASSET)

        post = frontmatter.loads(raw)
        fm = dict(post.metadata or {})
        path = PurePosixPath(rel)

        if collection is None:
            return self._page(path, fm, post.content)
        return self._document(path, collection, fm, post.content)

    def _page(self, path: PurePosixPath, fm: dict[str, Any], body: str) -> FileRecord:
        out = output_name(path)
        if out.name == "index.html":
            parent = str(out.parent)
            url = "/" if parent == "." else f"/{parent}/"
        else:
            url = "/" + str(out)
        return FileRecord(
            relative_path=str(path),
            url=fm.get("permalink") or url,
            kind=FileKind.PAGE,
            data=fm,
            content=self._render(path, body),
        )

    def _document(self, path: PurePosixPath, collection: str, fm: dict[str, Any],
                  body: str) -> Optional[FileRecord]:
        inner = PurePosixPath(*path.parts[1:])
        stem = PurePosixPath(inner.name).stem
        published = coerce_date(fm.get("date"), self.tz) if "date" in fm else None

        if collection == POSTS_COLLECTION:
            m = POST_NAME_RE.match(stem)
            if m is None:
                logger.debug(f"Skipping post without a date prefix: {path}")
                return None
            year, month, day, title = m.groups()
            if published is None:
                published = datetime(int(year), int(month), int(day), tzinfo=self.tz)
            url = f"/{published:%Y/%m/%d}/{title}.html"
            slug = title
        else:
            url = f"/{collection}/{output_name(inner)}"
            slug = stem

        # Only a front-matter excerpt overrides the first paragraph of the content
        explicit = fm.get("excerpt") if isinstance(fm.get("excerpt"), str) else None
        excerpt = explicit if explicit is not None else first_paragraph(body)

        data = dict(fm)
        data.setdefault("title", slug.replace("-", " ").title())
        data.setdefault("slug", slug)
        data.setdefault("categories", [])
        data.setdefault("tags", [])
        data.setdefault("draft", False)
        data["ext"] = path.suffix
        data["excerpt"] = excerpt
        if published is not None:
            data["date"] = published

        return FileRecord(
            relative_path=str(path),
            url=fm.get("permalink") or url,
            kind=FileKind.DOCUMENT,
            collection=collection,
            data=data,
            date=published,
            content=self._render(path, body),
            excerpt_source=explicit,
        )

    def _render(self, path: PurePosixPath, body: str) -> str:
        if path.suffix.lower() in MARKDOWN_SUFFIXES:
            return render_markdown(body)
        return body.strip()
