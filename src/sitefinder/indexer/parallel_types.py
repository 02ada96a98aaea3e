"""Data classes for the indexing pass."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..models import ExtractedRecord


@dataclass
class FileOutcome:
    """Result of classifying and extracting one file."""

    relative_path: str
    record: ExtractedRecord | None = None
    skipped_by: str | None = None  # name of the failed check
    error: str | None = None


@dataclass
class ScanStats:
    """Statistics from an indexing pass."""

    files_scanned: int = 0
    files_indexed: int = 0
    files_skipped: int = 0
    files_failed: int = 0
    skipped_by: dict[str, int] = field(default_factory=dict)  # check name -> file count
    elapsed_seconds: float = 0.0


@dataclass
class IndexResult:
    records: list[ExtractedRecord] = field(default_factory=list)
    stats: ScanStats = field(default_factory=ScanStats)
