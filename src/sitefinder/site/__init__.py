from .reader import SiteReader

__all__ = ["SiteReader"]
