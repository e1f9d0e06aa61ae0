"""
Unit tests for CardService.

Runs the service against the in-memory gateway with a fixed clock.
"""

from datetime import date

import pytest

from src.application.dto import AddCardRequest, ListCardsRequest
from src.application.services import CardService
from src.domain.exceptions import (
    EmptyCardSetException,
    GatewayException,
    InvalidCardReferenceException,
    LastActiveCardException,
)
from tests.fakes import FakeGatewayClient

TODAY = date(2024, 1, 15)


@pytest.fixture
def gateway() -> FakeGatewayClient:
    gateway = FakeGatewayClient()
    gateway.add_customer("cus_1", name="Jenny Rosen")
    return gateway


@pytest.fixture
def service(gateway: FakeGatewayClient) -> CardService:
    return CardService(gateway_client=gateway, today=lambda: TODAY)


class TestAddCard:
    """Tests for card creation and attachment."""

    @pytest.mark.asyncio
    async def test_creates_then_attaches(self, service, gateway):
        result = await service.add_card(AddCardRequest(
            customer_id="cus_1",
            card_number="4242424242424242",
            expiry_month=8,
            expiry_year=2030,
            cvc="314",
        ))

        assert result.success is True
        assert result.message == "Payment method added successfully"
        assert gateway.calls == ["add_payment_method", "attach_payment_method"]

        payment_method_id = result.response["id"]
        assert gateway.payment_methods[payment_method_id]["customer"] == "cus_1"
        assert gateway.payment_methods[payment_method_id]["card"]["last4"] == "4242"

    @pytest.mark.asyncio
    async def test_attach_failure_propagates(self, service, gateway):
        gateway.fail("attach_payment_method", GatewayException(
            message="Your card was declined.",
            code="card_declined",
            decline_code="generic_decline",
            error_type="card_error",
            status_code=402,
        ))

        with pytest.raises(GatewayException) as exc_info:
            await service.add_card(AddCardRequest(
                customer_id="cus_1",
                card_number="4000000000000002",
                expiry_month=8,
                expiry_year=2030,
                cvc="314",
            ))

        assert exc_info.value.decline_code == "generic_decline"


class TestListCards:
    """Tests for listing with the default flag."""

    @pytest.mark.asyncio
    async def test_flags_only_the_default(self, service, gateway):
        gateway.add_card("cus_1", "pm_a", 8, 2030)
        gateway.add_card("cus_1", "pm_b", 9, 2031)
        gateway.customers["cus_1"]["invoice_settings"]["default_payment_method"] = "pm_b"

        result = await service.list_cards(ListCardsRequest(customer_id="cus_1"))

        flags = {pm["id"]: pm["default"] for pm in result.response["data"]}
        assert flags == {"pm_a": False, "pm_b": True}
        assert result.response["object"] == "list"
        assert result.message is None

    @pytest.mark.asyncio
    async def test_no_default_means_all_false(self, service, gateway):
        gateway.add_card("cus_1", "pm_a", 8, 2030)

        result = await service.list_cards(ListCardsRequest(customer_id="cus_1"))

        assert [pm["default"] for pm in result.response["data"]] == [False]

    @pytest.mark.asyncio
    async def test_default_page_size_is_eight(self, service, gateway):
        for index in range(10):
            gateway.add_card("cus_1", f"pm_{index}", 8, 2030)

        result = await service.list_cards(ListCardsRequest(customer_id="cus_1"))

        assert len(result.response["data"]) == 8
        assert result.response["has_more"] is True


class TestDeleteCard:
    """Tests for deletion under the card lifecycle rules."""

    @pytest.mark.asyncio
    async def test_expired_card_is_detached(self, service, gateway):
        gateway.add_card("cus_1", "pm_old", 1, 2020)
        gateway.add_card("cus_1", "pm_new", 1, 2030)

        result = await service.delete_card("cus_1", "pm_old")

        assert result.message == "PaymentMethod object detached from a Customer successfully."
        assert gateway.payment_methods["pm_old"]["customer"] is None

    @pytest.mark.asyncio
    async def test_one_of_two_active_cards_is_detached(self, service, gateway):
        gateway.add_card("cus_1", "pm_a", 1, 2030)
        gateway.add_card("cus_1", "pm_b", 2, 2030)

        await service.delete_card("cus_1", "pm_a")

        assert gateway.payment_methods["pm_a"]["customer"] is None
        assert gateway.payment_methods["pm_b"]["customer"] == "cus_1"

    @pytest.mark.asyncio
    async def test_only_active_card_is_kept(self, service, gateway):
        gateway.add_card("cus_1", "pm_old", 1, 2020)
        gateway.add_card("cus_1", "pm_new", 1, 2030)

        with pytest.raises(LastActiveCardException):
            await service.delete_card("cus_1", "pm_new")

        assert "detach_payment_method" not in gateway.calls

    @pytest.mark.asyncio
    async def test_no_cards(self, service):
        with pytest.raises(EmptyCardSetException):
            await service.delete_card("cus_1", "pm_any")

    @pytest.mark.asyncio
    async def test_foreign_card(self, service, gateway):
        gateway.add_customer("cus_2")
        gateway.add_card("cus_1", "pm_a", 1, 2030)
        gateway.add_card("cus_1", "pm_b", 1, 2030)
        gateway.add_card("cus_2", "pm_other", 1, 2030)

        with pytest.raises(InvalidCardReferenceException):
            await service.delete_card("cus_1", "pm_other")

    @pytest.mark.asyncio
    async def test_reads_every_page(self, gateway):
        service = CardService(gateway_client=gateway, today=lambda: TODAY)
        service.PAGE_SIZE = 2
        gateway.add_card("cus_1", "pm_1", 1, 2020)
        gateway.add_card("cus_1", "pm_2", 1, 2020)
        gateway.add_card("cus_1", "pm_3", 1, 2020)
        gateway.add_card("cus_1", "pm_4", 1, 2030)
        gateway.add_card("cus_1", "pm_5", 1, 2030)

        # pm_5 is on the third page; without it pm_4 would look like the last active card
        await service.delete_card("cus_1", "pm_4")

        assert gateway.calls.count("list_payment_methods") == 3
        assert gateway.payment_methods["pm_4"]["customer"] is None


class TestSetDefaultAndDetails:
    """Tests for set-default and single card lookup."""

    @pytest.mark.asyncio
    async def test_set_default(self, service, gateway):
        gateway.add_card("cus_1", "pm_a", 8, 2030)

        result = await service.set_default_card("cus_1", "pm_a")

        assert result.message == "Payment method set default for payment"
        assert gateway.customers["cus_1"]["invoice_settings"]["default_payment_method"] == "pm_a"

    @pytest.mark.asyncio
    async def test_get_card(self, service, gateway):
        gateway.add_card("cus_1", "pm_a", 8, 2030)

        result = await service.get_card("pm_a")

        assert result.message == "Payment method fetched successfully"
        assert result.response["id"] == "pm_a"
        assert "default" not in result.response
