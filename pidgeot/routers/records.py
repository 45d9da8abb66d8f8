from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Request

from pidgeot.core.config import get_settings
from pidgeot.core.exceptions import BadRequestError
from pidgeot.core.pagination import Paginator
from pidgeot.deps import get_record_store
from pidgeot.stores.base import CountableQueryable, parse_sort_spec

router = APIRouter()

RESERVED_PARAMS = ("page", "page_size", "sort")
FILTER_FIELDS = ("name", "category", "tag")


@router.get("")
async def records_list(
    request: Request,
    page: str = "1",
    page_size: int | None = Query(None, ge=1),
    sort: str | None = None,
    store: CountableQueryable = Depends(get_record_store),
):
    """
    Paginated records. name/category/tag parameters filter by equality
    (empty values are ignored); every parameter but page is carried,
    percent-encoded, into the prev/next links. A repeated parameter
    keeps its last value.
    """
    settings = get_settings()
    if page_size is not None and page_size > settings.max_page_size:
        raise BadRequestError(
            f"page_size must be at most {settings.max_page_size}",
            details={"page_size": page_size},
        )
    try:
        parse_sort_spec(sort)
    except ValueError as exc:
        raise BadRequestError(str(exc), details={"sort": sort}) from exc

    params = {k: v for k, v in request.query_params.multi_items() if k != "page"}
    unknown = [k for k in params if k not in RESERVED_PARAMS and k not in FILTER_FIELDS]
    if unknown:
        raise BadRequestError(
            "Unknown query parameters",
            details={"unknown": unknown, "allowed": list(RESERVED_PARAMS + FILTER_FIELDS)},
        )
    query = {k: v for k, v in params.items() if k in FILTER_FIELDS and v}
    fields = {quote(k, safe=""): quote(v, safe="") for k, v in params.items()}
    paginator = Paginator(
        store,
        path=request.url.path,
        page=page,
        query=query,
        factor=page_size,
        sort=sort,
        fields=fields,
    )
    result = await paginator.paginate()
    return result.model_dump()
