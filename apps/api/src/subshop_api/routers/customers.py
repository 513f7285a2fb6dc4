"""Customer CRUD router."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, Request, Response, status

from subshop_core.validation import validate_customer, validate_paging

from ..dependencies import DEFAULT_PAGE_SIZE, DbDep, PageNumber, PageSize
from ..responses import ensure_valid, not_found, page_response, unwrap
from ..schemas.common import PageResponse
from ..schemas.customers import CustomerRequest, CustomerResponse
from ..services.customer_service import CustomerService

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=PageResponse[CustomerResponse])
async def list_customers(
    db: DbDep,
    page_number: PageNumber = 1,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
    name: Annotated[str | None, Query()] = None,
    email: Annotated[str | None, Query()] = None,
    offer_id: Annotated[int | None, Query(alias="offerId")] = None,
) -> PageResponse[CustomerResponse]:
    """List customers by name, e-mail substring or ordered offer."""
    ensure_valid(validate_paging(page_number, page_size))
    page = await CustomerService(db).list_customers(
        page_number, page_size, name, email, offer_id
    )
    return page_response(page, CustomerResponse)


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: int, db: DbDep) -> CustomerResponse:
    customer = await CustomerService(db).get_customer(customer_id)
    if customer is None:
        raise not_found("Customer", customer_id)
    return CustomerResponse.model_validate(customer)


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(
    body: CustomerRequest,
    request: Request,
    response: Response,
    db: DbDep,
) -> CustomerResponse:
    ensure_valid(
        validate_customer(body.email_address, body.first_name, body.last_name)
    )
    customer = unwrap(
        await CustomerService(db).create_customer(
            body.email_address, body.first_name, body.last_name
        )
    )
    response.headers["Location"] = str(
        request.url_for("get_customer", customer_id=customer.customer_id)
    )
    return CustomerResponse.model_validate(customer)


@router.put("/{customer_id}", response_model=CustomerResponse)
async def update_customer(
    customer_id: int,
    body: CustomerRequest,
    db: DbDep,
) -> CustomerResponse:
    ensure_valid(
        validate_customer(body.email_address, body.first_name, body.last_name)
    )
    customer = unwrap(
        await CustomerService(db).update_customer(
            customer_id, body.email_address, body.first_name, body.last_name
        )
    )
    return CustomerResponse.model_validate(customer)


@router.delete("/{customer_id}", response_model=int)
async def delete_customer(customer_id: int, db: DbDep) -> int:
    return unwrap(await CustomerService(db).delete_customer(customer_id))
