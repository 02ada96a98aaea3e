from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
import logging
import os
import tomllib
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = frozenset({".html", ".markdown", ".mkdown", ".mkdn", ".mkd", ".md"})
DEFAULT_PAGINATE_PATH = "/page:num/"

def _expand(p: str) -> str:
    return os.path.expandvars(os.path.expanduser(p))

def parse_extensions(value: Any) -> frozenset[str]:
    """Turn an `extensions_to_index` value into a set of dotted, lower-cased suffixes.

    Accepts a comma-separated string ("html,dhtml") or a list of strings.
    A custom value replaces the defaults entirely. Anything unusable falls
    back to DEFAULT_EXTENSIONS with a warning.
    """
    if value is None:
        return DEFAULT_EXTENSIONS

    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        items = list(value)
    else:
        logger.warning(f"Invalid extensions_to_index {value!r}, using defaults")
        return DEFAULT_EXTENSIONS

    exts = set()
    for item in items:
        item = item.strip().lower().lstrip(".")
        if item:
            exts.add("." + item)

    if not exts:
        logger.warning(f"extensions_to_index {value!r} has no usable entries, using defaults")
        return DEFAULT_EXTENSIONS
    return frozenset(exts)


@dataclass(frozen=True)
class IndexConfig:
    """Resolved configuration for one site.

    Only `source` is required; everything else has the defaults the site
    generator uses.
    """

    source: Path

    def __post_init__(self):
        """Convert string paths to Path objects and expand ~ and environment variables."""
        if isinstance(self.source, str):
            object.__setattr__(self, 'source', Path(_expand(self.source)))

    # Site (generator settings read by the reader and classifier)
    timezone: str | None = None  # None means UTC
    collections: list[str] = field(default_factory=list)
    paginate_path: str | None = DEFAULT_PAGINATE_PATH

    # Indexing
    extensions_to_index: str | list[str] | None = None  # comma-separated string
    files_to_exclude: list[str] = field(default_factory=list)
    workers: int = 4
    fail_fast: bool = False

    @property
    def extensions(self) -> frozenset[str]:
        return parse_extensions(self.extensions_to_index)

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone or "UTC")

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a recognized setting by name, returning `default` when unset.

        Raises KeyError for names that are not settings.
        """
        if key not in {f.name for f in fields(self)}:
            raise KeyError(f"Unknown setting: {key}")
        value = getattr(self, key)
        return default if value is None else value

    @staticmethod
    def from_toml(path: str | Path) -> "IndexConfig":
        data = tomllib.loads(Path(path).read_text(encoding="utf-8"))
        site = data.get("site", {})
        index = data.get("index", {})

        if "source" not in site:
            raise ValueError(f"Missing [site].source in {path}")
        source = Path(_expand(site["source"]))
        if not source.is_absolute():
            # Relative sources are resolved against the config file location
            source = Path(path).resolve().parent / source

        timezone = site.get("timezone")
        if timezone is not None:
            try:
                ZoneInfo(timezone)
            except (ZoneInfoNotFoundError, ValueError) as e:
                raise ValueError(f"Unknown timezone: {timezone}") from e

        workers = int(index.get("workers", 4))
        if workers <= 0 or workers > 256:
            raise ValueError(f"Invalid workers: {workers}. Must be between 1 and 256.")

        return IndexConfig(
            source=source.resolve(),
            timezone=timezone,
            collections=list(site.get("collections", [])),
            paginate_path=site.get("paginate_path", DEFAULT_PAGINATE_PATH),
            extensions_to_index=index.get("extensions_to_index"),
            files_to_exclude=list(index.get("files_to_exclude", [])),
            workers=workers,
            fail_fast=bool(index.get("fail_fast", False)),
        )


def load_config(path: str | Path) -> IndexConfig:
    return IndexConfig.from_toml(path)
