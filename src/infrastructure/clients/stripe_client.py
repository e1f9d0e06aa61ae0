"""HTTP implementation of PaymentGatewayClient for the Stripe API."""

from typing import Any, Dict, List, Optional, Tuple

import httpx
import structlog

from src.core.config import settings
from src.core.metrics import (
    track_gateway_latency,
    record_gateway_success,
    record_gateway_failure,
)
from src.domain.entities import (
    CardDetails,
    Customer,
    CustomerProfile,
    PaymentMethod,
    PaymentMethodList,
)
from src.domain.exceptions import (
    GatewayException,
    GatewayTimeoutException,
    ResourceNotFoundException,
)
from src.domain.interfaces import PaymentGatewayClient

logger = structlog.get_logger(__name__)


def encode_form_params(
    params: Dict[str, Any],
    prefix: str | None = None,
) -> List[Tuple[str, str]]:
    """
    Flatten nested params into Stripe's bracketed form encoding.

    ``{"address": {"line1": "x"}}`` becomes ``[("address[line1]", "x")]``.
    None values are skipped.
    """
    pairs: List[Tuple[str, str]] = []

    for key, value in params.items():
        name = f"{prefix}[{key}]" if prefix else key

        if value is None:
            continue
        if isinstance(value, dict):
            pairs.extend(encode_form_params(value, name))
        elif isinstance(value, (list, tuple)):
            for index, item in enumerate(value):
                if isinstance(item, dict):
                    pairs.extend(encode_form_params(item, f"{name}[{index}]"))
                else:
                    pairs.append((f"{name}[{index}]", _format_value(item)))
        else:
            pairs.append((name, _format_value(value)))

    return pairs


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class HttpStripeClient(PaymentGatewayClient):
    """
    HTTP client for the Stripe API.

    One request per operation. Failures are mapped to domain exceptions
    and surfaced immediately.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        default_list_limit: int | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key if api_key is not None else settings.stripe_secret_key
        self._base_url = (base_url or settings.stripe_api_url).rstrip("/")
        self._timeout = timeout or settings.stripe_api_timeout
        self._default_list_limit = default_list_limit or settings.payment_method_list_limit
        self._transport = transport

    # ------------------------------------------------------------------
    # Customers
    # ------------------------------------------------------------------

    async def create_customer(self, profile: CustomerProfile) -> Customer:
        data = await self._request(
            "POST", "/customers", "create_customer", params=profile.to_dict()
        )
        return Customer.from_gateway(data)

    async def get_customer(self, customer_id: str) -> Customer:
        data = await self._request(
            "GET", f"/customers/{customer_id}", "get_customer"
        )

        # Deleted customers come back as a stub instead of a 404
        if data.get("deleted"):
            record_gateway_failure("get_customer", "not_found")
            raise ResourceNotFoundException(
                f"No such customer: '{customer_id}'", param="id"
            )

        return Customer.from_gateway(data)

    async def update_customer(
        self,
        customer_id: str,
        profile: CustomerProfile,
    ) -> Customer:
        data = await self._request(
            "POST",
            f"/customers/{customer_id}",
            "update_customer",
            params=profile.to_dict(),
        )
        return Customer.from_gateway(data)

    async def set_default_payment_method(
        self,
        customer_id: str,
        payment_method_id: str,
    ) -> Customer:
        data = await self._request(
            "POST",
            f"/customers/{customer_id}",
            "set_default_payment_method",
            params={"invoice_settings": {"default_payment_method": payment_method_id}},
        )
        return Customer.from_gateway(data)

    # ------------------------------------------------------------------
    # Payment methods
    # ------------------------------------------------------------------

    async def add_payment_method(
        self,
        card: CardDetails,
        method_type: str = "card",
    ) -> PaymentMethod:
        data = await self._request(
            "POST",
            "/payment_methods",
            "add_payment_method",
            params={"type": method_type, "card": card.to_dict()},
        )
        return PaymentMethod.from_gateway(data)

    async def attach_payment_method(
        self,
        payment_method_id: str,
        customer_id: str,
    ) -> None:
        await self._request(
            "POST",
            f"/payment_methods/{payment_method_id}/attach",
            "attach_payment_method",
            params={"customer": customer_id},
        )

    async def list_payment_methods(
        self,
        customer_id: str,
        method_type: str = "card",
        limit: Optional[int] = None,
        starting_after: Optional[str] = None,
    ) -> PaymentMethodList:
        params = {
            "customer": customer_id,
            "type": method_type,
            "limit": limit or self._default_list_limit,
            "starting_after": starting_after,
        }
        data = await self._request(
            "GET", "/payment_methods", "list_payment_methods", params=params
        )
        return PaymentMethodList.from_gateway(data)

    async def retrieve_payment_method(self, payment_method_id: str) -> PaymentMethod:
        data = await self._request(
            "GET",
            f"/payment_methods/{payment_method_id}",
            "retrieve_payment_method",
        )
        return PaymentMethod.from_gateway(data)

    async def detach_payment_method(self, payment_method_id: str) -> PaymentMethod:
        data = await self._request(
            "POST",
            f"/payment_methods/{payment_method_id}/detach",
            "detach_payment_method",
        )
        return PaymentMethod.from_gateway(data)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        operation: str,
        params: Dict[str, Any] | None = None,
    ) -> Dict[str, Any]:
        """Send one request to Stripe and return the decoded JSON body."""
        url = f"{self._base_url}{path}"
        encoded = encode_form_params(params or {})
        log = logger.bind(operation=operation, method=method, path=path)

        try:
            with track_gateway_latency(operation):
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                    auth=(self._api_key, ""),
                ) as client:
                    if method == "GET":
                        response = await client.request(method, url, params=encoded)
                    else:
                        response = await client.request(method, url, data=dict(encoded))
        except httpx.TimeoutException:
            record_gateway_failure(operation, "timeout")
            log.warning("gateway_timeout")
            raise GatewayTimeoutException()
        except httpx.HTTPError as e:
            record_gateway_failure(operation, "error")
            log.error("gateway_request_failed", error=str(e))
            raise GatewayException(message=f"Payment gateway unreachable: {e}")

        if response.status_code >= 400:
            raise self._error_from_response(response, operation)

        record_gateway_success(operation)
        return response.json()

    def _error_from_response(
        self,
        response: httpx.Response,
        operation: str,
    ) -> GatewayException:
        """Build a domain exception from a Stripe error body."""
        try:
            error = response.json().get("error", {})
        except ValueError:
            error = {}

        message = error.get("message") or f"Payment gateway error: {response.text[:200]}"

        logger.warning(
            "gateway_error",
            operation=operation,
            status_code=response.status_code,
            error_type=error.get("type"),
            code=error.get("code"),
            decline_code=error.get("decline_code"),
        )

        if response.status_code == 404 or error.get("code") == "resource_missing":
            record_gateway_failure(operation, "not_found")
            return ResourceNotFoundException(message, param=error.get("param"))

        error_type = "card_error" if error.get("type") == "card_error" else "error"
        record_gateway_failure(operation, error_type)

        return GatewayException(
            message=message,
            code=error.get("code"),
            decline_code=error.get("decline_code"),
            error_type=error.get("type"),
            param=error.get("param"),
            status_code=response.status_code,
        )
