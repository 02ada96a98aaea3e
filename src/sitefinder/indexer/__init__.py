from .indexer import SiteIndexer
from .parallel_types import FileOutcome, IndexResult, ScanStats

__all__ = ["SiteIndexer", "FileOutcome", "IndexResult", "ScanStats"]
