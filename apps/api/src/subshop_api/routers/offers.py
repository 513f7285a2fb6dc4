"""Offer CRUD router."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Query, Request, Response, status

from subshop_core.validation import validate_offer, validate_paging

from ..dependencies import DEFAULT_PAGE_SIZE, DbDep, PageNumber, PageSize
from ..responses import ensure_valid, not_found, page_response, unwrap
from ..schemas.common import PageResponse
from ..schemas.offers import OfferRequest, OfferResponse
from ..services.offer_service import OfferService

router = APIRouter(prefix="/offers", tags=["offers"])


@router.get("", response_model=PageResponse[OfferResponse])
async def list_offers(
    db: DbDep,
    page_number: PageNumber = 1,
    page_size: PageSize = DEFAULT_PAGE_SIZE,
    description: Annotated[str | None, Query()] = None,
    product_id: Annotated[int | None, Query(alias="productId")] = None,
    active_product: Annotated[bool | None, Query(alias="activeProduct")] = None,
) -> PageResponse[OfferResponse]:
    ensure_valid(validate_paging(page_number, page_size))
    page = await OfferService(db).list_offers(
        page_number, page_size, description, product_id, active_product
    )
    return page_response(page, OfferResponse)


@router.get("/{offer_id}", response_model=OfferResponse)
async def get_offer(offer_id: int, db: DbDep) -> OfferResponse:
    offer = await OfferService(db).get_offer(offer_id)
    if offer is None:
        raise not_found("Offer", offer_id)
    return OfferResponse.model_validate(offer)


@router.post("", response_model=OfferResponse, status_code=status.HTTP_201_CREATED)
async def create_offer(
    body: OfferRequest,
    request: Request,
    response: Response,
    db: DbDep,
) -> OfferResponse:
    ensure_valid(validate_offer(body.number_of_terms, body.price))
    offer = unwrap(
        await OfferService(db).create_offer(
            body.product_id, body.description, body.price, body.number_of_terms
        )
    )
    response.headers["Location"] = str(
        request.url_for("get_offer", offer_id=offer.offer_id)
    )
    return OfferResponse.model_validate(offer)


@router.put("/{offer_id}", response_model=OfferResponse)
async def update_offer(offer_id: int, body: OfferRequest, db: DbDep) -> OfferResponse:
    ensure_valid(validate_offer(body.number_of_terms, body.price))
    offer = unwrap(
        await OfferService(db).update_offer(
            offer_id,
            body.product_id,
            body.description,
            body.price,
            body.number_of_terms,
        )
    )
    return OfferResponse.model_validate(offer)


@router.delete("/{offer_id}", response_model=int)
async def delete_offer(offer_id: int, db: DbDep) -> int:
    return unwrap(await OfferService(db).delete_offer(offer_id))
