"""Brand CRUD router."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, Request, Response, status

from subshop_core.validation import validate_brand, validate_paging

from ..dependencies import DEFAULT_PAGE_SIZE, DbDep, PageNumber, PageSize
from ..responses import ensure_valid, not_found, page_response, unwrap
from ..schemas.brands import BrandRequest, BrandResponse
from ..schemas.common import PageResponse
from ..services.brand_service import BrandService

router = APIRouter(prefix="/brands", tags=["brands"])


@router.get("", response_model=PageResponse[BrandResponse])
async def list_brands(
    db: DbDep,
    page_number: PageNumber = 1,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
    name: Annotated[str | None, Query()] = None,
) -> PageResponse[BrandResponse]:
    """List brands, optionally filtered by a name substring."""
    ensure_valid(validate_paging(page_number, page_size))
    page = await BrandService(db).list_brands(page_number, page_size, name)
    return page_response(page, BrandResponse)


@router.get("/{brand_id}", response_model=BrandResponse)
async def get_brand(brand_id: int, db: DbDep) -> BrandResponse:
    brand = await BrandService(db).get_brand(brand_id)
    if brand is None:
        raise not_found("Brand", brand_id)
    return BrandResponse.model_validate(brand)


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
async def create_brand(
    body: BrandRequest,
    request: Request,
    response: Response,
    db: DbDep,
) -> BrandResponse:
    ensure_valid(validate_brand(body.name))
    brand = unwrap(await BrandService(db).create_brand(body.name))
    response.headers["Location"] = str(
        request.url_for("get_brand", brand_id=brand.brand_id)
    )
    return BrandResponse.model_validate(brand)


@router.put("/{brand_id}", response_model=BrandResponse)
async def update_brand(brand_id: int, body: BrandRequest, db: DbDep) -> BrandResponse:
    ensure_valid(validate_brand(body.name))
    brand = unwrap(await BrandService(db).update_brand(brand_id, body.name))
    return BrandResponse.model_validate(brand)


@router.delete("/{brand_id}", response_model=int)
async def delete_brand(brand_id: int, db: DbDep) -> int:
    """Delete a brand; deleting an unknown id succeeds."""
    return unwrap(await BrandService(db).delete_brand(brand_id))
