"""Student portal endpoint bindings.

Programs are public; everything else needs the student's bearer token.
Each binding returns the API's envelope parsed into its view model.
"""

from __future__ import annotations

from typing import Any

from workstream.api.client import get_api_client, parse_response
from workstream.api.query import build_query, drop_unset
from workstream.models.application import ApplicationEnvelope, ApplicationsResponse
from workstream.models.document import DocumentEnvelope, DocumentsResponse
from workstream.models.message import (
    ConversationsResponse,
    MessageEnvelope,
    ThreadResponse,
    UsersResponse,
)
from workstream.models.payment import PaymentResult
from workstream.models.program import ProgramEnvelope, ProgramsResponse

# ---------------------------------------------------------------------------
# Programs (public)
# ---------------------------------------------------------------------------


async def list_programs(
    field: str | None = None,
    status: str | None = None,
    page: int | None = None,
    limit: int | None = None,
) -> ProgramsResponse:
    query = build_query({"field": field, "status": status, "page": page, "limit": limit})
    data = await get_api_client().request(f"/programs{query}")
    return parse_response(ProgramsResponse, data)


async def get_program(slug: str) -> ProgramEnvelope:
    data = await get_api_client().request(f"/programs/{slug}")
    return parse_response(ProgramEnvelope, data)


# ---------------------------------------------------------------------------
# Auth and profile
# ---------------------------------------------------------------------------


async def sync_user(token: str, identity: dict[str, Any] | None = None) -> dict[str, Any]:
    """Create or refresh the API's user record for the signed-in identity."""
    return await get_api_client().request(
        "/auth/sync", method="POST", token=token, body=identity
    )


async def get_me(token: str) -> dict[str, Any]:
    return await get_api_client().request("/auth/me", token=token)


async def get_profile(token: str) -> dict[str, Any]:
    return await get_api_client().request("/users/profile", token=token)


async def update_profile(token: str, data: dict[str, Any]) -> dict[str, Any]:
    return await get_api_client().request(
        "/users/profile", method="PUT", token=token, body=data
    )


# ---------------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------------


async def list_applications(token: str) -> ApplicationsResponse:
    data = await get_api_client().request("/applications", token=token)
    return parse_response(ApplicationsResponse, data)


async def get_application(token: str, application_id: str) -> ApplicationEnvelope:
    data = await get_api_client().request(f"/applications/{application_id}", token=token)
    return parse_response(ApplicationEnvelope, data)


async def create_application(
    token: str, program_id: str, motivation_letter: str | None = None
) -> ApplicationEnvelope:
    data = await get_api_client().request(
        "/applications",
        method="POST",
        token=token,
        body=drop_unset({"programId": program_id, "motivationLetter": motivation_letter}),
    )
    return parse_response(ApplicationEnvelope, data)


async def submit_application(token: str, application_id: str) -> ApplicationEnvelope:
    data = await get_api_client().request(
        f"/applications/{application_id}/submit", method="POST", token=token
    )
    return parse_response(ApplicationEnvelope, data)


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


async def list_documents(token: str) -> DocumentsResponse:
    data = await get_api_client().request("/documents", token=token)
    return parse_response(DocumentsResponse, data)


async def get_document(token: str, document_id: str) -> DocumentEnvelope:
    data = await get_api_client().request(f"/documents/{document_id}", token=token)
    return parse_response(DocumentEnvelope, data)


async def create_document(token: str, data: dict[str, Any]) -> DocumentEnvelope:
    response = await get_api_client().request(
        "/documents", method="POST", token=token, body=data
    )
    return parse_response(DocumentEnvelope, response)


async def parse_document(token: str, document_id: str) -> DocumentEnvelope:
    data = await get_api_client().request(
        f"/documents/{document_id}/parse", method="POST", token=token
    )
    return parse_response(DocumentEnvelope, data)


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


async def list_conversations(token: str) -> ConversationsResponse:
    data = await get_api_client().request("/messages/conversations", token=token)
    return parse_response(ConversationsResponse, data)


async def get_thread(token: str, user_id: str) -> ThreadResponse:
    data = await get_api_client().request(f"/messages/thread/{user_id}", token=token)
    return parse_response(ThreadResponse, data)


async def send_message(token: str, receiver_id: str, content: str) -> MessageEnvelope:
    data = await get_api_client().request(
        "/messages",
        method="POST",
        token=token,
        body={"receiverId": receiver_id, "content": content},
    )
    return parse_response(MessageEnvelope, data)


async def search_users(token: str, query: str) -> UsersResponse:
    data = await get_api_client().request(
        f"/messages/search-users{build_query({'q': query})}", token=token
    )
    return parse_response(UsersResponse, data)


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------


async def verify_payment(token: str, reference: str) -> PaymentResult:
    data = await get_api_client().request(f"/payments/verify/{reference}", token=token)
    return parse_response(PaymentResult, data)
