"""Order router: place, update and cancel orders."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, Request, Response, status

from subshop_core.validation import validate_paging

from ..dependencies import DEFAULT_PAGE_SIZE, DbDep, PageNumber, PageSize
from ..responses import ensure_valid, not_found, page_response, unwrap
from ..schemas.common import PageResponse
from ..schemas.orders import CreateOrderRequest, OrderResponse, UpdateOrderRequest
from ..services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=PageResponse[OrderResponse])
async def list_orders(
    db: DbDep,
    page_number: PageNumber = 1,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
    offer_id: Annotated[int | None, Query(alias="offerId")] = None,
    customer_id: Annotated[int | None, Query(alias="customerId")] = None,
) -> PageResponse[OrderResponse]:
    ensure_valid(validate_paging(page_number, page_size))
    page = await OrderService(db).list_orders(
        page_number, page_size, offer_id, customer_id
    )
    return page_response(page, OrderResponse)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: int, db: DbDep) -> OrderResponse:
    order = await OrderService(db).get_order(order_id)
    if order is None:
        raise not_found("Order", order_id)
    return OrderResponse.model_validate(order)


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    body: CreateOrderRequest,
    request: Request,
    response: Response,
    db: DbDep,
) -> OrderResponse:
    """Place an order; its end date follows from the offer's terms."""
    order = unwrap(
        await OrderService(db).create_order(
            body.offer_id, body.start_date, body.customer_id
        )
    )
    response.headers["Location"] = str(
        request.url_for("get_order", order_id=order.order_id)
    )
    return OrderResponse.model_validate(order)


@router.put("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: int,
    body: UpdateOrderRequest,
    db: DbDep,
) -> OrderResponse:
    order = unwrap(
        await OrderService(db).update_order(
            order_id, body.paid, body.cancelled, body.reason
        )
    )
    return OrderResponse.model_validate(order)


@router.delete("/{order_id}", response_model=int)
async def delete_order(order_id: int, db: DbDep) -> int:
    """Cancel an order; cancelling an unknown id succeeds."""
    return unwrap(await OrderService(db).delete_order(order_id))
