"""
Unit tests for the Stripe HTTP client.

Requests are served by httpx.MockTransport so no network is used.
"""

from urllib.parse import parse_qs

import httpx
import pytest

from src.domain.entities import Address, CardDetails, CustomerProfile
from src.domain.exceptions import (
    GatewayException,
    GatewayTimeoutException,
    ResourceNotFoundException,
)
from src.infrastructure.clients import HttpStripeClient
from src.infrastructure.clients.stripe_client import encode_form_params
from tests.fakes import card_object


def make_client(handler) -> HttpStripeClient:
    return HttpStripeClient(
        api_key="sk_test_123",
        base_url="https://stripe.test/v1",
        timeout=5.0,
        default_list_limit=8,
        transport=httpx.MockTransport(handler),
    )


def form(request: httpx.Request) -> dict:
    return {key: values[0] for key, values in parse_qs(request.content.decode()).items()}


PROFILE = CustomerProfile(
    name="Jenny Rosen",
    email="jenny.rosen@example.com",
    phone="5555550100",
    address=Address(
        line1="510 Townsend St",
        city="San Francisco",
        state="CA",
        postal_code="94103",
        country="US",
    ),
)


class TestEncodeFormParams:
    """Tests for Stripe's bracketed form encoding."""

    def test_nested_dicts(self):
        pairs = encode_form_params(
            {"invoice_settings": {"default_payment_method": "pm_1"}}
        )

        assert pairs == [("invoice_settings[default_payment_method]", "pm_1")]

    def test_none_values_are_skipped(self):
        pairs = encode_form_params({"customer": "cus_1", "starting_after": None, "limit": 8})

        assert pairs == [("customer", "cus_1"), ("limit", "8")]

    def test_lists_and_booleans(self):
        pairs = encode_form_params({"expand": ["customer"], "livemode": False})

        assert pairs == [("expand[0]", "customer"), ("livemode", "false")]


class TestCustomers:
    """Tests for customer operations."""

    @pytest.mark.asyncio
    async def test_create_customer_sends_form_body(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["request"] = request
            return httpx.Response(200, json={"id": "cus_1", "object": "customer", "name": "Jenny Rosen"})

        customer = await make_client(handler).create_customer(PROFILE)

        request = captured["request"]
        body = form(request)
        assert request.method == "POST"
        assert str(request.url) == "https://stripe.test/v1/customers"
        assert request.headers["authorization"].startswith("Basic ")
        assert body["name"] == "Jenny Rosen"
        assert body["address[line1]"] == "510 Townsend St"
        assert body["address[postal_code]"] == "94103"
        assert customer.id == "cus_1"
        assert customer.to_dict()["name"] == "Jenny Rosen"

    @pytest.mark.asyncio
    async def test_get_customer_reads_default_payment_method(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/v1/customers/cus_1"
            return httpx.Response(200, json={
                "id": "cus_1",
                "invoice_settings": {"default_payment_method": "pm_9"},
            })

        customer = await make_client(handler).get_customer("cus_1")

        assert customer.default_payment_method_id == "pm_9"

    @pytest.mark.asyncio
    async def test_get_unknown_customer_raises_not_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"error": {
                "type": "invalid_request_error",
                "code": "resource_missing",
                "message": "No such customer: 'cus_missing'",
                "param": "id",
            }})

        with pytest.raises(ResourceNotFoundException) as exc_info:
            await make_client(handler).get_customer("cus_missing")

        assert exc_info.value.message == "No such customer: 'cus_missing'"

    @pytest.mark.asyncio
    async def test_deleted_customer_raises_not_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"id": "cus_1", "object": "customer", "deleted": True})

        with pytest.raises(ResourceNotFoundException):
            await make_client(handler).get_customer("cus_1")

    @pytest.mark.asyncio
    async def test_set_default_payment_method(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["body"] = form(request)
            return httpx.Response(200, json={
                "id": "cus_1",
                "invoice_settings": {"default_payment_method": "pm_2"},
            })

        customer = await make_client(handler).set_default_payment_method("cus_1", "pm_2")

        assert captured["body"] == {"invoice_settings[default_payment_method]": "pm_2"}
        assert customer.default_payment_method_id == "pm_2"


class TestPaymentMethods:
    """Tests for payment method operations."""

    @pytest.mark.asyncio
    async def test_add_payment_method(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["body"] = form(request)
            return httpx.Response(200, json=card_object("pm_1", 8, 2030))

        card = CardDetails(number="4242424242424242", exp_month=8, exp_year=2030, cvc="314")
        payment_method = await make_client(handler).add_payment_method(card)

        assert captured["body"]["type"] == "card"
        assert captured["body"]["card[number]"] == "4242424242424242"
        assert captured["body"]["card[exp_month]"] == "8"
        assert payment_method.id == "pm_1"
        assert payment_method.expiry.year == 2030

    @pytest.mark.asyncio
    async def test_attach_payment_method(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["path"] = request.url.path
            captured["body"] = form(request)
            return httpx.Response(200, json=card_object("pm_1", 8, 2030, "cus_1"))

        await make_client(handler).attach_payment_method("pm_1", "cus_1")

        assert captured["path"] == "/v1/payment_methods/pm_1/attach"
        assert captured["body"] == {"customer": "cus_1"}

    @pytest.mark.asyncio
    async def test_list_uses_default_limit(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["params"] = dict(request.url.params)
            return httpx.Response(200, json={
                "object": "list",
                "data": [card_object("pm_1", 8, 2030, "cus_1")],
                "has_more": False,
                "url": "/v1/payment_methods",
            })

        result = await make_client(handler).list_payment_methods("cus_1")

        assert captured["params"] == {"customer": "cus_1", "type": "card", "limit": "8"}
        assert [pm.id for pm in result.data] == ["pm_1"]
        assert result.has_more is False

    @pytest.mark.asyncio
    async def test_list_with_caller_limit_and_cursor(self):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["params"] = dict(request.url.params)
            return httpx.Response(200, json={"object": "list", "data": [], "has_more": False})

        await make_client(handler).list_payment_methods(
            "cus_1", method_type="us_bank_account", limit=3, starting_after="pm_5"
        )

        assert captured["params"] == {
            "customer": "cus_1",
            "type": "us_bank_account",
            "limit": "3",
            "starting_after": "pm_5",
        }

    @pytest.mark.asyncio
    async def test_detach_payment_method(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/v1/payment_methods/pm_1/detach"
            return httpx.Response(200, json=card_object("pm_1", 8, 2030))

        payment_method = await make_client(handler).detach_payment_method("pm_1")

        assert payment_method.customer_id is None


class TestErrors:
    """Tests for error mapping."""

    @pytest.mark.asyncio
    async def test_card_error_keeps_decline_fields(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(402, json={"error": {
                "type": "card_error",
                "code": "card_declined",
                "decline_code": "insufficient_funds",
                "message": "Your card has insufficient funds.",
            }})

        with pytest.raises(GatewayException) as exc_info:
            await make_client(handler).attach_payment_method("pm_1", "cus_1")

        error = exc_info.value
        assert error.gateway_code == "card_declined"
        assert error.decline_code == "insufficient_funds"
        assert error.status_code == 402
        assert error.message == "Your card has insufficient funds."

    @pytest.mark.asyncio
    async def test_non_json_error_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="Bad Gateway")

        with pytest.raises(GatewayException) as exc_info:
            await make_client(handler).retrieve_payment_method("pm_1")

        assert exc_info.value.status_code == 502
        assert "Bad Gateway" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_timeout_raises_timeout_exception(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(GatewayTimeoutException):
            await make_client(handler).get_customer("cus_1")

    @pytest.mark.asyncio
    async def test_connection_error_raises_gateway_exception(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(GatewayException) as exc_info:
            await make_client(handler).get_customer("cus_1")

        assert exc_info.value.gateway_code is None
