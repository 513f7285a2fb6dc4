"""Product CRUD router."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, Request, Response, status

from subshop_core.validation import validate_paging, validate_product

from ..dependencies import DEFAULT_PAGE_SIZE, DbDep, PageNumber, PageSize
from ..responses import ensure_valid, not_found, page_response, unwrap
from ..schemas.common import PageResponse
from ..schemas.products import ProductRequest, ProductResponse
from ..services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=PageResponse[ProductResponse])
async def list_products(
    db: DbDep,
    page_number: PageNumber = 1,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
    name: Annotated[str | None, Query()] = None,
    brand: Annotated[str | None, Query()] = None,
    is_active: Annotated[bool | None, Query(alias="isActive")] = None,
) -> PageResponse[ProductResponse]:
    """List products filtered by name, brand name and active flag."""
    ensure_valid(validate_paging(page_number, page_size))
    page = await ProductService(db).list_products(
        page_number, page_size, name, brand, is_active
    )
    return page_response(page, ProductResponse)


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: int, db: DbDep) -> ProductResponse:
    product = await ProductService(db).get_product(product_id)
    if product is None:
        raise not_found("Product", product_id)
    return ProductResponse.model_validate(product)


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductRequest,
    request: Request,
    response: Response,
    db: DbDep,
) -> ProductResponse:
    ensure_valid(validate_product(body.name, body.term))
    product = unwrap(
        await ProductService(db).create_product(
            body.name, body.is_active, body.term, body.brand_id
        )
    )
    response.headers["Location"] = str(
        request.url_for("get_product", product_id=product.product_id)
    )
    return ProductResponse.model_validate(product)


@router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: int,
    body: ProductRequest,
    db: DbDep,
) -> ProductResponse:
    ensure_valid(validate_product(body.name, body.term))
    product = unwrap(
        await ProductService(db).update_product(
            product_id, body.name, body.is_active, body.term, body.brand_id
        )
    )
    return ProductResponse.model_validate(product)


@router.delete("/{product_id}", response_model=int)
async def delete_product(product_id: int, db: DbDep) -> int:
    """Delete a product unless an offer still references it."""
    return unwrap(await ProductService(db).delete_product(product_id))
