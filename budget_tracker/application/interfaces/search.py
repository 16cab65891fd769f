"""
Search contracts shared by every searchable repository.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar


E = TypeVar('E')

SORT_DIRECTIONS = ('asc', 'desc')


def _to_positive_int(value: Any, default: int) -> int:
    """Coerce to a positive integer, falling back to ``default``."""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, float):
        if not value.is_integer():
            return default
        value = int(value)
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return default
    if not isinstance(value, int) or value <= 0:
        return default
    return value


@dataclass(frozen=True)
class SearchParams:
    """
    Normalised search input.

    Any value can be passed in; invalid ones fall back to defaults:
    page 1, per_page 15, no sort, no filter. ``sort_dir`` is only kept
    when ``sort`` is set and defaults to 'asc'.
    """
    page: Any = 1
    per_page: Any = 15
    sort: Any = None
    sort_dir: Any = None
    filter: Any = None

    DEFAULT_PAGE = 1
    DEFAULT_PER_PAGE = 15

    def __post_init__(self) -> None:
        object.__setattr__(self, 'page', _to_positive_int(self.page, self.DEFAULT_PAGE))
        object.__setattr__(self, 'per_page', _to_positive_int(self.per_page, self.DEFAULT_PER_PAGE))

        sort = None if self.sort is None or self.sort == '' else str(self.sort)
        object.__setattr__(self, 'sort', sort)

        sort_dir = None
        if sort is not None:
            sort_dir = str(self.sort_dir).lower() if self.sort_dir is not None else 'asc'
            if sort_dir not in SORT_DIRECTIONS:
                sort_dir = 'asc'
        object.__setattr__(self, 'sort_dir', sort_dir)

        search_filter = None
        if self.filter is not None and str(self.filter).strip() != '':
            search_filter = str(self.filter)
        object.__setattr__(self, 'filter', search_filter)

    @property
    def offset(self) -> int:
        """Rows to skip before the requested page."""
        return (self.page - 1) * self.per_page


@dataclass(frozen=True)
class SearchResult(Generic[E]):
    """One page of search results plus the parameters that produced it."""
    items: List[E] = field(default_factory=list)
    total: int = 0
    current_page: int = 1
    per_page: int = 15
    sort: Optional[str] = None
    sort_dir: Optional[str] = None
    filter: Optional[str] = None

    @property
    def last_page(self) -> int:
        """Number of the last page, 0 when there are no results."""
        if self.per_page <= 0:
            return 0
        return math.ceil(self.total / self.per_page)

    def to_dict(self, serialize_items: bool = False) -> Dict[str, Any]:
        """
        Serialize to dictionary.

        Args:
            serialize_items: Convert items with their own ``to_dict``
        """
        items = [item.to_dict() for item in self.items] if serialize_items else self.items
        return {
            'items': items,
            'total': self.total,
            'current_page': self.current_page,
            'per_page': self.per_page,
            'last_page': self.last_page,
            'sort': self.sort,
            'sort_dir': self.sort_dir,
            'filter': self.filter,
        }
