"""
Cursor pagination helpers.

List endpoints page by entity ID: the repository is asked for one item more
than the page size, the extra item only signals that another page exists.
"""
from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, List, Optional, TypeVar, Union
from urllib.parse import urlencode

from ..core.config import get_settings

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    items: List[T] = field(default_factory=list)
    next_cursor: Optional[str] = None
    has_more: bool = False

    @property
    def count(self) -> int:
        return len(self.items)


def clamp_limit(limit: Optional[int]) -> int:
    """Apply the configured default and keep the limit within [1, max]."""
    settings = get_settings()
    if limit is None:
        limit = settings.pagination_default_limit
    return max(1, min(int(limit), settings.pagination_max_limit))


def build_page(fetched: List[T], limit: int, key: Callable[[T], str]) -> Page[T]:
    """
    Turn a `limit + 1` fetch into a page.

    Args:
        fetched: Items returned by the repository (up to limit + 1)
        limit: Requested page size
        key: Returns the cursor value (ID) of an item
    """
    has_more = len(fetched) > limit
    items = fetched[:limit]
    next_cursor = key(items[-1]) if has_more and items else None
    return Page(items=items, next_cursor=next_cursor, has_more=has_more)


def build_link_header(
    base_url: str,
    params: Dict[str, Union[str, int, None]],
    next_cursor: Optional[str],
) -> Optional[str]:
    """
    RFC 5988 `Link` header pointing at the next page, or None on the last page.

    >>> build_link_header("/projects", {"limit": 10}, "abc123")
    '</projects?limit=10&cursor=abc123>; rel="next"'
    """
    if not next_cursor:
        return None

    query = [(k, str(v)) for k, v in params.items() if k != "cursor" and v is not None]
    query.append(("cursor", next_cursor))
    return f'<{base_url}?{urlencode(query)}>; rel="next"'
