"""Page-number pagination over a document store."""

from pidgeot.core.exceptions import ConfigError, StoreError
from pidgeot.core.pagination import PageResult, PaginationConfig, Paginator, paginate

__all__ = [
    "ConfigError",
    "PageResult",
    "PaginationConfig",
    "Paginator",
    "StoreError",
    "paginate",
]
