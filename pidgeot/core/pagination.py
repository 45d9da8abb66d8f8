"""Page-number pagination over a countable document store."""

import math
from typing import Any

from pydantic import BaseModel, Field

from pidgeot.core.config import get_settings
from pidgeot.core.exceptions import ConfigError, StoreError


class PaginationConfig(BaseModel):
    base_path: str = "/"
    page: Any = 1
    page_size: int = Field(default=50, gt=0)
    filter: dict[str, Any] = Field(default_factory=dict)
    sort: Any = None
    fields: dict[str, Any] = Field(default_factory=dict)


class PageResult(BaseModel):
    page: int
    records: list[Any]
    prev_page_url: str
    next_page_url: str
    total_records: int
    total_pages: int


def count_pages(total_records: int, page_size: int) -> int:
    return math.ceil(total_records / page_size)


def normalize_page(page: Any, total_pages: int) -> int:
    """Clamp page into [1, max(1, total_pages)]; anything non-numeric is page 1."""
    try:
        page = int(page)
    except (TypeError, ValueError, OverflowError):
        page = 1
    if page < 1:
        page = 1
    return min(page, max(1, total_pages))


def link_suffix(fields: dict[str, Any]) -> str:
    return "".join(f"&{key}={value or ''}" for key, value in fields.items())


class Paginator:
    """
    Count the documents matching a filter, then fetch one page of them.

    ``model`` is any store handle with ``count(filter)`` and
    ``find(filter)`` returning a sort/skip/limit/exec query.
    """

    def __init__(
        self,
        model: Any = None,
        *,
        path: str | None = None,
        page: Any = 1,
        query: dict[str, Any] | None = None,
        factor: int | None = None,
        sort: Any = None,
        fields: dict[str, Any] | None = None,
    ) -> None:
        if model is None:
            raise ConfigError("A store handle must be passed.")
        settings = get_settings()
        if factor is None:
            factor = settings.default_page_size
        if isinstance(factor, bool) or not isinstance(factor, int) or factor < 1:
            raise ConfigError("Page size must be a positive integer.", details={"factor": repr(factor)})
        self.model = model
        self.config = PaginationConfig(
            base_path=settings.default_base_path if path is None else path,
            page=page,
            page_size=factor,
            filter=query or {},
            sort=sort,
            fields=fields or {},
        )

    @classmethod
    def from_config(cls, model: Any, config: PaginationConfig) -> "Paginator":
        return cls(
            model,
            path=config.base_path,
            page=config.page,
            query=config.filter,
            factor=config.page_size,
            sort=config.sort,
            fields=config.fields,
        )

    @property
    def page(self) -> Any:
        return self.config.page

    async def paginate(self) -> PageResult:
        cfg = self.config
        try:
            total_records = await self.model.count(cfg.filter)
        except Exception as exc:
            raise StoreError("Counting documents failed", cause=exc) from exc

        total_pages = count_pages(total_records, cfg.page_size)
        page = normalize_page(cfg.page, total_pages)
        cfg.page = page

        prev_page = page if page == 1 else page - 1
        next_page = page if page >= max(1, total_pages) else page + 1
        suffix = link_suffix(cfg.fields)
        skip = max(0, (page - 1) * cfg.page_size)

        try:
            db_query = self.model.find(cfg.filter)
            if cfg.sort:
                db_query = db_query.sort(cfg.sort)
            if skip > 0:
                db_query = db_query.skip(skip)
            records = await db_query.limit(cfg.page_size).exec()
        except Exception as exc:
            raise StoreError("Fetching documents failed", cause=exc) from exc

        return PageResult(
            page=page,
            records=list(records),
            prev_page_url=f"{cfg.base_path}?page={prev_page}{suffix}",
            next_page_url=f"{cfg.base_path}?page={next_page}{suffix}",
            total_records=total_records,
            total_pages=total_pages,
        )


async def paginate(model: Any = None, **options: Any) -> PageResult:
    """Build a Paginator from keyword options and run it once."""
    return await Paginator(model, **options).paginate()
