"""sitefinder — pick the files of a static-site build worth indexing for search.

Classifies the pages, posts and collection documents of a built site, then
extracts one flat record per indexable file (type, url, date, slug,
collection, excerpt and cleaned front-matter) for an upload client to send.

Public API:
- IndexConfig
- Classifier
- Extractor
- SiteReader
- SiteIndexer
"""

from .browser import Classifier, Extractor
from .config import IndexConfig, load_config
from .indexer import SiteIndexer
from .models import Excerpt, ExtractedRecord, FileKind, FileRecord
from .site import SiteReader

__all__ = [
    "Classifier",
    "Excerpt",
    "ExtractedRecord",
    "Extractor",
    "FileKind",
    "FileRecord",
    "IndexConfig",
    "SiteIndexer",
    "SiteReader",
    "load_config",
]
