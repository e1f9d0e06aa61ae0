"""Card (payment method) API endpoints."""

from typing import Annotated, Literal, Optional

from fastapi import APIRouter, Depends, Query

from src.application.dto import ListCardsRequest
from src.application.services import CardService
from src.core.dependencies import get_card_service
from src.presentation.schemas import (
    AddCardSchema,
    ApiResponse,
    CardReferenceSchema,
)

card_router = APIRouter(prefix="/card")


@card_router.post(
    "/add",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    summary="Add Card",
    description="Create a card on the gateway and attach it to the customer.",
)
async def add_card(
    request: AddCardSchema,
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> ApiResponse:
    result = await card_service.add_card(request.to_request())
    return ApiResponse.from_result(result)


@card_router.get(
    "/list",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    summary="List Cards",
    description="""
    List a customer's payment methods.

    Each method carries a `default` flag, true only for the customer's
    invoice default payment method.
    """,
)
async def list_cards(
    stripe_customer_id: Annotated[
        str,
        Query(alias="stripeCustomerId", min_length=1, description="Gateway customer id"),
    ],
    card_service: Annotated[CardService, Depends(get_card_service)],
    method_type: Annotated[
        Literal["card", "us_bank_account"],
        Query(alias="type", description="Payment method type"),
    ] = "card",
    limit: Annotated[
        Optional[int],
        Query(ge=1, le=100, description="Maximum number of methods to return"),
    ] = None,
    starting_after: Annotated[
        Optional[str],
        Query(alias="startingAfter", description="Cursor for the next page"),
    ] = None,
) -> ApiResponse:
    result = await card_service.list_cards(
        ListCardsRequest(
            customer_id=stripe_customer_id,
            method_type=method_type,
            limit=limit,
            starting_after=starting_after,
        )
    )
    return ApiResponse.from_result(result)


@card_router.post(
    "/delete",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    summary="Delete Card",
    description="""
    Detach a card from the customer.

    Expired cards can always be removed. An active card can only be
    removed while the customer has another active card.
    """,
)
async def delete_card(
    request: CardReferenceSchema,
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> ApiResponse:
    result = await card_service.delete_card(
        request.stripe_customer_id,
        request.payment_method_id,
    )
    return ApiResponse.from_result(result)


@card_router.post(
    "/set-default",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    summary="Set Default Card",
    description="Make a payment method the customer's default.",
)
async def set_default_card(
    request: CardReferenceSchema,
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> ApiResponse:
    result = await card_service.set_default_card(
        request.stripe_customer_id,
        request.payment_method_id,
    )
    return ApiResponse.from_result(result)


@card_router.get(
    "/details",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    summary="Card Details",
    description="Fetch a single payment method.",
)
async def card_details(
    payment_method_id: Annotated[
        str,
        Query(alias="paymentMethodId", min_length=1, description="Gateway payment method id"),
    ],
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> ApiResponse:
    result = await card_service.get_card(payment_method_id)
    return ApiResponse.from_result(result)
