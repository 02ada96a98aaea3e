from .classifier import Classifier, ExclusionHook
from .excerpt import ExcerptRenderer, render_excerpt
from .extractor import Extractor, RESERVED_KEYS
from .pagination import PaginationMatcher

__all__ = [
    "Classifier",
    "ExclusionHook",
    "ExcerptRenderer",
    "Extractor",
    "PaginationMatcher",
    "RESERVED_KEYS",
    "render_excerpt",
]
