from typing import Callable, Optional, Union

from fastapi import HTTPException, Query

from trade_service.exceptions import InvalidSortField
from trade_service.logging import setup_logger
from trade_service.utils.sorting import EntityKind, SortSpec, get_valid_sort_fields, parse_sort

logger = setup_logger(__name__)


def sort_dependency(entity_kind: Union[EntityKind, str]) -> Callable[..., SortSpec]:
    """
    Create a FastAPI dependency that parses the ``sort`` query parameter.

    Unknown fields are rejected with a 400 so they never reach the query layer.
    """
    kind = EntityKind(entity_kind)
    allowed_fields = sorted(get_valid_sort_fields(kind))

    def get_sort(
        sort: Optional[str] = Query(
            None,
            description=f"Comma-separated sort fields, '-' prefix for descending. Allowed values: {allowed_fields}",
        )
    ) -> SortSpec:
        try:
            return parse_sort(sort, kind)
        except InvalidSortField as e:
            logger.warning(f"Invalid sort parameter for {kind.value}: {e}")
            raise HTTPException(status_code=400, detail=str(e))

    return get_sort


trade_order_sort = sort_dependency(EntityKind.TRADE_ORDER)
execution_sort = sort_dependency(EntityKind.EXECUTION)
