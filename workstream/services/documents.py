"""Document registration after upload.

The upload provider stores the files; the portal then records each stored
file as a document through the API.  Limits mirror the provider's uploader
routes so oversized batches are turned away before any request.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from workstream.api import student as student_api
from workstream.core.constants import (
    DEFAULT_UPLOADER,
    DOCUMENT_TYPES,
    IMAGE_EXTENSIONS,
    UPLOAD_RULES,
    UPLOADER_BY_DOCUMENT_TYPE,
)
from workstream.models.document import Document, UploadedFile

logger = logging.getLogger(__name__)


class UploadRejected(Exception):
    """Raised when a batch breaks its uploader's limits."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def document_label(document_type: str) -> str:
    """Display name of a document type; unknown types show as given."""
    entry = DOCUMENT_TYPES.get(document_type)
    return entry["label"] if entry else document_type


def uploader_for(document_type: str) -> str:
    return UPLOADER_BY_DOCUMENT_TYPE.get(document_type, DEFAULT_UPLOADER)


def file_kind(file_name: str) -> str | None:
    """Classify a file as ``pdf`` or ``image`` by extension."""
    suffix = PurePosixPath(file_name.lower()).suffix
    if suffix == ".pdf":
        return "pdf"
    if suffix in IMAGE_EXTENSIONS:
        return "image"
    return None


def mime_type_for(file_name: str) -> str:
    return "application/pdf" if file_name.lower().endswith(".pdf") else "image/*"


def check_upload(route: str, files: list[UploadedFile]) -> None:
    """Raise ``UploadRejected`` if ``files`` break the route's limits."""
    rules = UPLOAD_RULES.get(route)
    if rules is None:
        raise UploadRejected(f"Unknown uploader: {route}")

    counts: dict[str, int] = {}
    for item in files:
        kind = file_kind(item.file_name)
        if kind is None or kind not in rules:
            raise UploadRejected(f"{item.file_name}: file type not accepted")
        max_size, _ = rules[kind]
        if item.file_size > max_size:
            raise UploadRejected(
                f"{item.file_name}: larger than {format_file_size(max_size)}"
            )
        counts[kind] = counts.get(kind, 0) + 1

    for kind, count in counts.items():
        _, max_count = rules[kind]
        if count > max_count:
            raise UploadRejected(f"At most {max_count} {kind} file(s) allowed")


async def register_uploads(
    token: str, document_type: str, files: list[UploadedFile]
) -> list[Document]:
    """Record each uploaded file as a document of ``document_type``."""
    if not files:
        return []
    check_upload(uploader_for(document_type), files)

    documents: list[Document] = []
    for item in files:
        envelope = await student_api.create_document(
            token,
            {
                "type": document_type,
                "name": document_label(document_type),
                "fileName": item.file_name,
                "fileUrl": item.file_url,
                "fileSize": item.file_size,
                "mimeType": mime_type_for(item.file_name),
            },
        )
        documents.append(envelope.document)

    logger.info(
        "documents_registered",
        extra={"document_type": document_type, "count": len(documents)},
    )
    return documents


def format_file_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
