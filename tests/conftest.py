"""Shared fixtures: a small Jekyll-style site written to tmp_path."""
from __future__ import annotations

from pathlib import Path

import pytest

from sitefinder.browser.classifier import Classifier
from sitefinder.browser.extractor import Extractor
from sitefinder.config import IndexConfig
from sitefinder.models import FileRecord
from sitefinder.site.reader import SiteReader

FIRST_PARAGRAPH = (
    "This is the first paragraph. It is especially long because we want it "
    "to wrap on two lines."
)

def _page(front: str = "", body: str = "Content.") -> str:
    return f"---\n{front}---\n\n{body}\n"

SITE_FILES: dict[str, str | bytes] = {
    "_config.yml": "title: Test site\n",
    ".hidden.md": _page("title: Hidden\n"),
    "png.png": b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR",
    "ring.png": b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR",
    "assets/style.css": "body { color: black; }\n",
    "404.html": _page("title: Not found\n"),
    "404.md": _page("title: Not found\n"),
    "page2/index.html": _page("title: Page 2\n"),
    "excluded.html": _page("title: Excluded\n"),
    "excluded-from-hook.html": _page("title: Excluded by hook\n"),
    "dhtml.dhtml": _page("title: DHTML\n"),
    "html.html": _page(
        "title: HTML page\nslug: custom-slug\ntype: custom\nurl: /elsewhere.html\n"
        "date: 2016-01-01\nexcerpt: Hand-written excerpt\nnested:\n  items: [1, 2]\n",
        "<p>Some HTML content.</p>",
    ),
    "markdown.markdown": _page("title: Markdown\n"),
    "mkdown.mkdown": _page("title: Mkdown\n"),
    "mkdn.mkdn": _page("title: Mkdn\n"),
    "mkd.mkd": _page("title: Mkd\n"),
    "md.md": _page("title: Md\n"),
    "about.md": _page("title: About\ncustom1: foo\ncustom2: bar\n", "# About\n\nAbout this site."),
    "authors.html": _page("title: Authors\n"),
    "MIXed-CaSe.md": _page("title: Mixed case\n"),
    "excerpt.md": _page("title: Page with paragraphs\n", f"{FIRST_PARAGRAPH}\n\nSecond paragraph."),
    "_drafts/2015-07-04-draft.md": _page("title: Draft\n"),
    "_posts/2015-07-02-test-post.md": _page("title: Test post\n", "A test post."),
    "_posts/2015-07-02-test-post-again.md": _page("title: Test post again\n", "Again."),
    "_posts/2015-07-03-post-with-excerpt.md": _page(
        "title: Post with excerpt\n",
        "This is the first paragraph. It is especially long because we want it to\n"
        "wrap on two lines.\n\nThis is the second paragraph.",
    ),
    "_posts/not-a-post.md": _page("title: Missing date\n"),
    "_my-collection/collection-item.html": _page(
        "title: Collection item\ndate: 2014-05-11\n", "<p>Item body.</p>"
    ),
    "_my-collection/collection-item-with-excerpt.md": _page(
        "title: Collection item with excerpt\n",
        f"{FIRST_PARAGRAPH}\n\nThis is the second paragraph.",
    ),
}


def write_site(root: Path, files: dict[str, str | bytes]) -> Path:
    for rel, content in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            p.write_bytes(content)
        else:
            p.write_text(content, encoding="utf-8")
    return root


def excluded_from_hook(file: FileRecord) -> bool:
    return file.basename == "excluded-from-hook.html"


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    return write_site(tmp_path / "site", SITE_FILES)


@pytest.fixture
def make_config(site_root: Path):
    """Build an IndexConfig for the sample site, with keyword overrides."""
    def _make(**overrides) -> IndexConfig:
        options = {
            "source": site_root,
            "collections": ["my-collection"],
            "files_to_exclude": ["excluded.html"],
            "workers": 1,
        }
        options.update(overrides)
        return IndexConfig(**options)
    return _make


@pytest.fixture
def config(make_config) -> IndexConfig:
    return make_config()


@pytest.fixture
def make_find(make_config):
    """Return a lookup of FileRecords by relative path for a given config."""
    def _make(**overrides):
        files = {f.relative_path: f for f in SiteReader(make_config(**overrides)).read()}

        def _find(rel_path: str) -> FileRecord:
            return files[rel_path]
        return _find
    return _make


@pytest.fixture
def find(make_find):
    return make_find()


@pytest.fixture
def classifier(config: IndexConfig) -> Classifier:
    return Classifier(config, exclusion_hook=excluded_from_hook)


@pytest.fixture
def extractor() -> Extractor:
    return Extractor()
