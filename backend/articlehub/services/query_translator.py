"""
ArticleHub Backend — Query Translator
=======================================

What:  Turns the raw query string of GET /articles into a QueryDescriptor
       (filter predicates + sort + skip/limit) that MongoDB can execute.
How:   Pure function over a string mapping; numeric parameters are parsed
       leniently and coerced to defaults instead of being rejected.
Who:   Called by ArticleService.list_articles.

Coercion rules:
    title, desc   non-empty → case-insensitive substring predicate
    sort          non-empty → sort field, otherwise natural order
    order         exactly 1 or -1, anything else → 1 (ignored without sort)
    page          > 0, anything else → 1
    limit         > 0, anything else → 10
    skip          (page - 1) * limit, never read from the request

Example:
    >>> d = translate_query({"page": "2", "limit": "5", "sort": "title", "order": "-1"})
    >>> d.skip, d.limit, d.sort_field, d.sort_direction
    (5, 5, 'title', -1)
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
ASCENDING = 1
DESCENDING = -1

# Optional sign followed by ASCII digits; no whitespace, underscores or decimals
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MAX = 2**63 - 1


class QueryDescriptor(BaseModel):
    """
    Structured filter/sort/pagination intent for one list request.

    Never persisted or returned to clients; consumed only by the storage call.
    """

    title_contains: Optional[str] = None
    desc_contains: Optional[str] = None
    sort_field: Optional[str] = None
    sort_direction: int = ASCENDING
    page: int = Field(default=DEFAULT_PAGE, ge=1)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1)

    model_config = {"frozen": True}

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def to_filter(self) -> Dict[str, Any]:
        """
        MongoDB filter document. Both predicates combine as an implicit AND;
        an empty dict matches every article.
        """
        query_filter: Dict[str, Any] = {}
        if self.title_contains:
            query_filter["title"] = _contains(self.title_contains)
        if self.desc_contains:
            query_filter["desc"] = _contains(self.desc_contains)
        return query_filter

    def to_sort(self) -> Optional[List[Tuple[str, int]]]:
        if not self.sort_field:
            return None
        return [(self.sort_field, self.sort_direction)]

    def find_options(self) -> Dict[str, Any]:
        """Keyword arguments for `collection.find()`."""
        options: Dict[str, Any] = {"skip": self.skip, "limit": self.limit}
        sort = self.to_sort()
        if sort:
            options["sort"] = sort
        return options


def _contains(value: str) -> Dict[str, str]:
    # Literal substring: user text is escaped so it never acts as a pattern
    return {"$regex": re.escape(value), "$options": "i"}


def parse_int(value: Optional[str]) -> Optional[int]:
    """
    Strict integer parse. Returns None for missing, empty or malformed input.

    >>> parse_int("-3"), parse_int("+7"), parse_int(" 4"), parse_int("1.5")
    (-3, 7, None, None)
    """
    if value is None or not _INTEGER_RE.fullmatch(value):
        return None
    parsed = int(value)
    # Out of int64 range is treated as malformed
    if not -_INT64_MAX - 1 <= parsed <= _INT64_MAX:
        return None
    return parsed


def coerce_positive(value: Optional[str], default: int) -> int:
    parsed = parse_int(value)
    if parsed is None or parsed <= 0:
        return default
    return parsed


def coerce_direction(value: Optional[str]) -> int:
    parsed = parse_int(value)
    if parsed not in (ASCENDING, DESCENDING):
        return ASCENDING
    return parsed


def translate_query(params: Mapping[str, str]) -> QueryDescriptor:
    """
    Build a QueryDescriptor from request query parameters.

    Args:
        params: Parameter name → string value (e.g. `request.query_params`).
                Keys are case-sensitive; unknown keys are ignored.

    Returns:
        A valid QueryDescriptor for every possible input. This function has
        no error conditions and no side effects.
    """
    sort_field = params.get("sort") or None
    direction = coerce_direction(params.get("order")) if sort_field else ASCENDING

    page = coerce_positive(params.get("page"), DEFAULT_PAGE)
    limit = coerce_positive(params.get("limit"), DEFAULT_LIMIT)
    # skip must fit in int64 as well; a page past that range is malformed
    if (page - 1) * limit > _INT64_MAX:
        page = DEFAULT_PAGE

    return QueryDescriptor(
        title_contains=params.get("title") or None,
        desc_contains=params.get("desc") or None,
        sort_field=sort_field,
        sort_direction=direction,
        page=page,
        limit=limit,
    )
