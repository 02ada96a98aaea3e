from __future__ import annotations

import re

from ..config import DEFAULT_PAGINATE_PATH
from ..models import FileRecord


class PaginationMatcher:
    """Recognize listing pages created by the generator's paginator.

    The pattern comes from the `paginate_path` setting, where `:num` stands
    for the page number ("/page:num/" matches "/page2/" and
    "/page2/index.html"). Generators paginating differently can pass any
    `Callable[[FileRecord], bool]` to the classifier instead.
    """

    def __init__(self, paginate_path: str | None = DEFAULT_PAGINATE_PATH) -> None:
        self.paginate_path = paginate_path or DEFAULT_PAGINATE_PATH
        self._regex = self._compile(self.paginate_path)

    @staticmethod
    def _compile(paginate_path: str) -> re.Pattern[str]:
        path = "/" + paginate_path.strip("/")
        pieces = [re.escape(p) for p in path.split(":num")]
        return re.compile("^" + r"\d+".join(pieces) + r"(?:/|/index\.html)?$")

    def __call__(self, file: FileRecord) -> bool:
        return bool(self._regex.match(file.url))
