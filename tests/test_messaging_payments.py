"""Unit tests for messaging and payment callback handling."""

import json

import pytest

from workstream.models.enums import PaymentState
from workstream.services.messaging import search_users, send_message
from workstream.services.payments import verify_callback

from conftest import TOKEN, FakeBackend

VERIFIED = {
    "payment": {"id": "pay-1", "status": "SUCCESS", "amount": 5000},
    "transaction": {"status": "success", "channel": "card", "amount": 500000},
}


class TestSendMessage:
    @pytest.mark.asyncio
    async def test_content_is_trimmed(self, backend: FakeBackend) -> None:
        backend.add("POST", "/messages", {"message": {"id": "m1", "content": "Hello"}}, status=201)

        message = await send_message(TOKEN, "user-2", "  Hello  ")

        assert message is not None
        assert message.id == "m1"
        assert json.loads(backend.last.content) == {"receiverId": "user-2", "content": "Hello"}

    @pytest.mark.asyncio
    async def test_blank_message_is_not_sent(self, backend: FakeBackend) -> None:
        assert await send_message(TOKEN, "user-2", "   ") is None
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_no_recipient_is_not_sent(self, backend: FakeBackend) -> None:
        assert await send_message(TOKEN, None, "Hello") is None
        assert backend.requests == []


class TestSearchUsers:
    @pytest.mark.asyncio
    async def test_short_query_matches_nobody(self, backend: FakeBackend) -> None:
        assert await search_users(TOKEN, "a") == []
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_query_is_forwarded(self, backend: FakeBackend) -> None:
        backend.add(
            "GET",
            "/messages/search-users?q=ad",
            {"users": [{"id": "u1", "firstName": "Ada"}]},
        )

        users = await search_users(TOKEN, "ad")

        assert [u.first_name for u in users] == ["Ada"]


class TestPaymentCallback:
    """Verification of the provider's redirect."""

    @pytest.mark.asyncio
    async def test_missing_reference_fails_without_request(self, backend: FakeBackend) -> None:
        outcome = await verify_callback(TOKEN, {"reference": None, "trxref": None})
        assert outcome.state == PaymentState.failed
        assert outcome.error == "No payment reference found"
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_success(self, backend: FakeBackend) -> None:
        backend.add("GET", "/payments/verify/ref-1", VERIFIED)

        outcome = await verify_callback(TOKEN, {"reference": "ref-1"})

        assert outcome.state == PaymentState.success
        assert outcome.result is not None
        assert outcome.result.payment.id == "pay-1"

    @pytest.mark.asyncio
    async def test_trxref_is_accepted(self, backend: FakeBackend) -> None:
        backend.add("GET", "/payments/verify/ref-2", VERIFIED)

        outcome = await verify_callback(TOKEN, {"trxref": "ref-2"})

        assert outcome.reference == "ref-2"
        assert backend.endpoints() == ["GET /payments/verify/ref-2"]

    @pytest.mark.asyncio
    async def test_unsettled_transaction_is_pending(self, backend: FakeBackend) -> None:
        pending = {**VERIFIED, "transaction": {"status": "ongoing"}}
        backend.add("GET", "/payments/verify/ref-3", pending)

        outcome = await verify_callback(TOKEN, {"reference": "ref-3"})

        assert outcome.state == PaymentState.pending

    @pytest.mark.asyncio
    async def test_api_error_fails(self, backend: FakeBackend) -> None:
        backend.add("GET", "/payments/verify/ref-4", {"message": "Unknown reference"}, status=400)

        outcome = await verify_callback(TOKEN, {"reference": "ref-4"})

        assert outcome.state == PaymentState.failed
        assert outcome.error == "Payment verification failed"
        assert outcome.reference == "ref-4"

    @pytest.mark.asyncio
    async def test_non_json_verification_fails(self, backend: FakeBackend) -> None:
        backend.add_text("GET", "/payments/verify/ref-5", "<html>maintenance</html>")

        outcome = await verify_callback(TOKEN, {"reference": "ref-5"})

        assert outcome.state == PaymentState.failed
        assert outcome.error == "Payment verification failed"

    @pytest.mark.asyncio
    async def test_malformed_verification_fails(self, backend: FakeBackend) -> None:
        backend.add("GET", "/payments/verify/ref-6", {"payment": {"id": "pay-6"}})

        outcome = await verify_callback(TOKEN, {"reference": "ref-6"})

        assert outcome.state == PaymentState.failed
