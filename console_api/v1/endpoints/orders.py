"""Order endpoints for the admin console."""

from typing import List

from fastapi import APIRouter, Depends, Query

from storefront.application.dtos import (
    OrderActionDTO,
    OrderDTO,
    OrderListDTO,
    UpdateOrderStatusRequest,
    order_to_dto,
)
from storefront.application.order_queries import count_by_status, filter_orders
from storefront.application.services import (
    OrderQueryService,
    OrderStatusService,
    StockReconciliationService,
)
from storefront.domain.enums import ALL_STATUSES
from storefront.domain.workflow import parse_status

from console_api.deps import (
    get_order_query_service,
    get_order_status_service,
    get_reconciliation_service,
)

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=OrderListDTO)
async def list_orders(
    status: str = Query(default=ALL_STATUSES, description="'all' or an order status"),
    q: str = Query(default="", description="Search in name, email, phone and order id"),
    service: OrderQueryService = Depends(get_order_query_service),
) -> OrderListDTO:
    """List orders, newest first, with per-status counts.

    Counts always cover every order, independent of the filters.
    """
    if status != ALL_STATUSES:
        parse_status(status)

    orders = await service.list_orders()
    visible = filter_orders(orders, status, q)
    return OrderListDTO(
        orders=[order_to_dto(order) for order in visible],
        total=len(visible),
        counts=count_by_status(orders),
    )


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: str,
    service: OrderQueryService = Depends(get_order_query_service),
) -> OrderDTO:
    """Get order by ID.

    Raises:
        OrderNotFoundError: Mapped to 404
    """
    return order_to_dto(await service.get_order(order_id))


@router.post("/{order_id}/confirm", response_model=OrderDTO)
async def confirm_order(
    order_id: str,
    service: StockReconciliationService = Depends(get_reconciliation_service),
) -> OrderDTO:
    """Confirm a new order and deduct its stock.

    Insufficient stock answers 409 and leaves every stock level untouched.
    """
    order = await service.confirm_order(order_id)
    return order_to_dto(order)


@router.patch("/{order_id}/status", response_model=OrderDTO)
async def update_order_status(
    order_id: str,
    request: UpdateOrderStatusRequest,
    service: OrderStatusService = Depends(get_order_status_service),
) -> OrderDTO:
    order = await service.update_order_status(order_id, request.order_status)
    return order_to_dto(order)


@router.get("/{order_id}/actions", response_model=List[OrderActionDTO])
async def list_order_actions(
    order_id: str,
    service: OrderStatusService = Depends(get_order_status_service),
) -> List[OrderActionDTO]:
    actions = await service.available_actions(order_id)
    return [OrderActionDTO(**action) for action in actions]
