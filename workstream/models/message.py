"""View shapes for direct messaging."""

from workstream.models.base import ApiModel
from workstream.models.organization import Pagination, User


class MessageSender(ApiModel):
    """Sender block of a message."""
    id: str
    first_name: str | None = None
    last_name: str | None = None
    avatar_url: str | None = None


class Message(ApiModel):
    """A single message in a thread."""
    id: str
    content: str
    created_at: str | None = None
    is_read: bool = False
    sender: MessageSender | None = None


class LastMessage(ApiModel):
    """Preview of the latest message in a conversation."""
    id: str
    content: str
    created_at: str | None = None
    is_read: bool = False


class Conversation(ApiModel):
    """A conversation with one partner, as listed in the sidebar."""
    partner_id: str
    partner: User
    last_message: LastMessage | None = None
    unread_count: int = 0


class ConversationsResponse(ApiModel):
    """Envelope for ``GET /messages/conversations``."""
    conversations: list[Conversation] = []


class ThreadResponse(ApiModel):
    """Envelope for ``GET /messages/thread/:userId``."""
    messages: list[Message] = []
    partner: User | None = None


class MessageEnvelope(ApiModel):
    """Envelope for ``POST /messages``."""
    message: Message


class UsersResponse(ApiModel):
    """Envelope for user listings (search and admin)."""
    users: list[User] = []
    pagination: Pagination | None = None
