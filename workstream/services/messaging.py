"""Direct messaging between users."""

from __future__ import annotations

from workstream.api import student as student_api
from workstream.core.constants import USER_SEARCH_MIN_LENGTH
from workstream.models.message import Message
from workstream.models.organization import User


async def send_message(token: str, receiver_id: str | None, content: str) -> Message | None:
    """Send trimmed ``content``; blank messages and missing recipients send nothing."""
    text = content.strip()
    if not text or not receiver_id:
        return None
    envelope = await student_api.send_message(token, receiver_id, text)
    return envelope.message


async def search_users(token: str, query: str) -> list[User]:
    """Find users to message; queries under two characters match nobody."""
    if len(query) < USER_SEARCH_MIN_LENGTH:
        return []
    response = await student_api.search_users(token, query)
    return response.users
