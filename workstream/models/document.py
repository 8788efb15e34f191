"""View shapes for student documents."""

from workstream.models.base import ApiModel


class Document(ApiModel):
    """A supporting document registered after upload."""
    id: str
    type: str
    name: str
    file_url: str | None = None
    file_name: str | None = None
    file_size: int | None = None
    mime_type: str | None = None
    status: str | None = None
    created_at: str | None = None


class DocumentsResponse(ApiModel):
    """Envelope for ``GET /documents``."""
    documents: list[Document] = []


class DocumentEnvelope(ApiModel):
    """Envelope for a single document."""
    document: Document


class UploadedFile(ApiModel):
    """What the upload provider reports for each stored file."""
    file_url: str
    file_name: str
    file_size: int
