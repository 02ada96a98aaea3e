"""Decide whether a built site file should be sent to the search index."""
from __future__ import annotations

import logging
from pathlib import PurePosixPath
from typing import Callable, Optional

from ..config import IndexConfig
from ..models import FileKind, FileRecord
from ..utils import matches_pattern
from .pagination import PaginationMatcher

logger = logging.getLogger(__name__)

ExclusionHook = Callable[[FileRecord], bool]
PaginationPredicate = Callable[[FileRecord], bool]


class Classifier:
    """Indexability checks for a single site.

    The exclusion hook is called once per classified file (when every other
    check passed) and its exceptions are not caught here.
    """

    def __init__(
        self,
        config: IndexConfig,
        exclusion_hook: Optional[ExclusionHook] = None,
        pagination: Optional[PaginationPredicate] = None,
    ) -> None:
        self.config = config
        self.exclusion_hook = exclusion_hook
        self.pagination = pagination or PaginationMatcher(config.get("paginate_path"))
        self.extensions = config.extensions
        self.files_to_exclude = list(config.get("files_to_exclude", []))

    def indexable(self, file: FileRecord) -> bool:
        return not self.reasons(file)

    def reasons(self, file: FileRecord) -> list[str]:
        """Names of the checks that reject `file`, in evaluation order.

        Stops at the first failure; an empty list means the file is indexable.
        """
        checks = (
            ("static_file", self.static_file),
            ("is_404", self.is_404),
            ("pagination_page", self.pagination_page),
            ("allowed_extension", lambda f: not self.allowed_extension(f)),
            ("excluded_by_user", self.excluded_by_user),
        )
        for name, rejects in checks:
            if rejects(file):
                logger.debug(f"Skipping {file.relative_path}: {name}")
                return [name]
        return []

    def static_file(self, file: FileRecord) -> bool:
        return file.kind is FileKind.STATIC_ASSET

    def is_404(self, file: FileRecord) -> bool:
        return PurePosixPath(file.relative_path).stem.lower() == "404"

    def pagination_page(self, file: FileRecord) -> bool:
        return self.pagination(file)

    def allowed_extension(self, file: FileRecord) -> bool:
        ext = file.extension
        return bool(ext) and ext in self.extensions

    def excluded_by_user(self, file: FileRecord) -> bool:
        if matches_pattern(file.relative_path, self.files_to_exclude):
            return True
        if self.exclusion_hook is not None:
            return bool(self.exclusion_hook(file))
        return False
