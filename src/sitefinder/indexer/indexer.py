from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Optional

from ..browser.classifier import Classifier, ExclusionHook
from ..browser.excerpt import ExcerptRenderer, render_excerpt
from ..browser.extractor import Extractor
from ..config import IndexConfig
from ..models import FileRecord
from ..site.reader import SiteReader
from .parallel_types import FileOutcome, IndexResult, ScanStats

logger = logging.getLogger(__name__)


@dataclass
class SiteIndexer:
    """Run classification and extraction over every file of a site.

    Files are independent, so they are processed on a thread pool. Errors
    from the exclusion hook or excerpt renderer mark that file as failed;
    with `fail_fast` the first one is re-raised instead.
    """
    cfg: IndexConfig
    exclusion_hook: Optional[ExclusionHook] = None
    excerpt_renderer: ExcerptRenderer = field(default=render_excerpt)

    def __post_init__(self) -> None:
        self.classifier = Classifier(self.cfg, exclusion_hook=self.exclusion_hook)
        self.extractor = Extractor(excerpt_renderer=self.excerpt_renderer)

    def run(self, files: list[FileRecord] | None = None) -> IndexResult:
        """Index `files`, or everything the site reader finds when omitted."""
        start = time.time()
        if files is None:
            files = SiteReader(self.cfg).read()
        logger.info(f"Found {len(files)} files to classify")

        outcomes: list[FileOutcome] = []
        workers = self.cfg.get("workers", 1)
        if workers <= 1:
            outcomes = [self._process_one(f) for f in files]
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = {executor.submit(self._process_one, f): f for f in files}
                for future in as_completed(futures):
                    outcomes.append(future.result())

        stats = ScanStats(files_scanned=len(files))
        records = []
        for outcome in outcomes:
            if outcome.error:
                stats.files_failed += 1
            elif outcome.record is None:
                stats.files_skipped += 1
                stats.skipped_by[outcome.skipped_by] = stats.skipped_by.get(outcome.skipped_by, 0) + 1
            else:
                records.append(outcome.record)
        records.sort(key=lambda r: r.url)
        stats.files_indexed = len(records)
        stats.elapsed_seconds = time.time() - start

        logger.info(
            f"Indexing complete: {stats.files_indexed} indexed, "
            f"{stats.files_skipped} skipped, {stats.files_failed} failed"
        )
        return IndexResult(records=records, stats=stats)

    def _process_one(self, file: FileRecord) -> FileOutcome:
        try:
            reasons = self.classifier.reasons(file)
            if reasons:
                return FileOutcome(relative_path=file.relative_path, skipped_by=reasons[0])
            record = self.extractor.extract(file)
        except Exception as e:
            if self.cfg.get("fail_fast", False):
                raise
            logger.warning(f"Extraction failed for {file.relative_path}: {e}")
            return FileOutcome(relative_path=file.relative_path, error=str(e))
        return FileOutcome(relative_path=file.relative_path, record=record)
