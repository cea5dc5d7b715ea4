"""
Catalog listing: turns page/limit/year/sort request parameters into a
store query and pagination metadata.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple

from .errors import InvalidParameter
from .validation import parse_int, validate_year

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# skip and limit travel to MongoDB as signed 64-bit ints
MAX_OFFSET = 2 ** 63 - 1

SORT_FIELDS = {
    "title": ("+title",),
    "author": ("+author",),
}


@dataclass(frozen=True)
class CatalogQuery:
    filter: Dict[str, Any] = field(default_factory=dict)
    sort: Tuple[str, ...] = ()
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True)
class Pagination:
    total_items: int
    total_pages: int
    current_page: int

    @property
    def has_prev(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalItems": self.total_items,
            "totalPages": self.total_pages,
            "currentPage": self.current_page,
        }


@dataclass
class CatalogPage:
    books: List[Any]
    pagination: Pagination


def build_catalog_query(params: Mapping[str, Any], default_limit: int = DEFAULT_LIMIT) -> CatalogQuery:
    """
    Raises InvalidParameter for a non-numeric page or limit and InvalidYear
    for a bad year filter. Page and limit below 1 are clamped to 1; a
    limit or skip too large for MongoDB is an InvalidParameter.
    """
    page = max(1, parse_int(params.get("page"), DEFAULT_PAGE, "page"))
    limit = max(1, parse_int(params.get("limit"), default_limit, "limit"))
    if limit > MAX_OFFSET:
        raise InvalidParameter("'limit' is too large")
    if (page - 1) * limit > MAX_OFFSET:
        raise InvalidParameter("'page' is too large")

    year = params.get("year")
    if year is not None and str(year).strip():
        query_filter = {"year": validate_year(year)}
    else:
        query_filter = {}

    sort = SORT_FIELDS.get(params.get("sort") or "", ())
    return CatalogQuery(filter=query_filter, sort=sort, page=page, limit=limit)


def run_catalog_query(store, query: CatalogQuery) -> CatalogPage:
    books = store.find(query.filter, sort=query.sort, skip=query.skip, limit=query.limit)
    total = store.count_documents(query.filter)
    pagination = Pagination(
        total_items=total,
        total_pages=math.ceil(total / query.limit),
        current_page=query.page,
    )
    return CatalogPage(books=books, pagination=pagination)
