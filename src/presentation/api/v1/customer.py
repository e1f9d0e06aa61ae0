"""Customer API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from src.application.services import CustomerService
from src.core.dependencies import get_customer_service
from src.presentation.schemas import (
    ApiResponse,
    CustomerCreateSchema,
    CustomerUpdateSchema,
)

customer_router = APIRouter(prefix="/customer")


@customer_router.post(
    "/create",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    summary="Create Customer",
    description="Create a customer on the payment gateway.",
)
async def create_customer(
    request: CustomerCreateSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> ApiResponse:
    result = await customer_service.create_customer(request.to_request())
    return ApiResponse.from_result(result)


@customer_router.get(
    "/retrieve",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    summary="Retrieve Customer",
    description="Fetch a customer record from the payment gateway.",
)
async def retrieve_customer(
    stripe_customer_id: Annotated[
        str,
        Query(alias="stripeCustomerId", min_length=1, description="Gateway customer id"),
    ],
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> ApiResponse:
    result = await customer_service.get_customer(stripe_customer_id)
    return ApiResponse.from_result(result)


@customer_router.post(
    "/update",
    response_model=ApiResponse,
    response_model_exclude_unset=True,
    summary="Update Customer",
    description="Overwrite a customer's name, contact details and billing address.",
)
async def update_customer(
    request: CustomerUpdateSchema,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> ApiResponse:
    result = await customer_service.update_customer(
        request.stripe_customer_id,
        request.to_request(),
    )
    return ApiResponse.from_result(result)
