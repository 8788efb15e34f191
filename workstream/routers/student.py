"""Student portal endpoints.

Programs and the dashboard work signed out; everything else forwards the
student's bearer token to the API.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from workstream.api import student as student_api
from workstream.core.auth import get_optional_token, get_token
from workstream.models.dashboard import (
    ApplicationCard,
    ApplicationDetailView,
    DocumentCard,
    StudentDashboardView,
)
from workstream.models.document import Document
from workstream.models.message import ConversationsResponse, Message, ThreadResponse
from workstream.models.organization import User
from workstream.models.payment import PaymentOutcome
from workstream.models.program import ProgramEnvelope, ProgramsResponse
from workstream.models.requests import (
    ApplyRequest,
    DocumentUploadRequest,
    OnboardingRequest,
    OnboardingStepCheck,
    SendMessageRequest,
)
from workstream.services import documents, messaging, payments
from workstream.services.documents import UploadRejected
from workstream.services.dashboards import load_student_dashboard
from workstream.services.status import (
    application_badge,
    application_progress,
    detail_badge,
    document_badge,
)
from workstream.services.wizards import (
    ApplicationSubmission,
    ApplicationWizard,
    EligibilityReport,
    OnboardingWizard,
    StepCheck,
    WizardError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _incomplete(exc: WizardError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"message": str(exc), "step": exc.step, "missing": exc.missing},
    )


@router.get("/dashboard", response_model=StudentDashboardView)
async def dashboard(token: str | None = Depends(get_optional_token)) -> StudentDashboardView:
    return await load_student_dashboard(token)


# ---------------------------------------------------------------------------
# Programs
# ---------------------------------------------------------------------------


@router.get("/programs", response_model=ProgramsResponse)
async def programs(
    field: str | None = Query(default=None),
    status: str | None = Query(default=None),
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
) -> ProgramsResponse:
    return await student_api.list_programs(field=field, status=status, page=page, limit=limit)


@router.get("/programs/{slug}", response_model=ProgramEnvelope)
async def program_detail(slug: str) -> ProgramEnvelope:
    return await student_api.get_program(slug)


@router.get("/programs/{slug}/apply", response_model=EligibilityReport)
async def application_requirements(slug: str) -> EligibilityReport:
    """Eligibility step of the application wizard."""
    envelope = await student_api.get_program(slug)
    return ApplicationWizard(envelope.program).check_eligibility()


@router.post("/programs/{slug}/apply", response_model=ApplicationSubmission, status_code=201)
async def apply(
    slug: str,
    body: ApplyRequest,
    token: str = Depends(get_token),
) -> ApplicationSubmission:
    """Walk the application wizard with the given answers and submit.

    Stops with 422 at the first step that cannot be left.
    """
    envelope = await student_api.get_program(slug)
    wizard = ApplicationWizard(envelope.program)
    wizard.check_eligibility()
    try:
        wizard.next()
        wizard.motivation_letter = body.motivation_letter
        wizard.next()
        wizard.agreed_to_terms = body.agreed_to_terms
        return await wizard.submit(token)
    except WizardError as exc:
        logger.error(
            "application_wizard_incomplete",
            extra={"slug": slug, "step": exc.step, "missing": exc.missing},
        )
        raise _incomplete(exc) from exc


# ---------------------------------------------------------------------------
# Onboarding and profile
# ---------------------------------------------------------------------------


@router.post("/onboarding/steps/{step}", response_model=StepCheck)
async def onboarding_step(step: int, body: OnboardingStepCheck) -> StepCheck:
    try:
        return OnboardingWizard(form=body.form).check(step)
    except ValueError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


@router.post("/onboarding")
async def onboarding(
    body: OnboardingRequest, token: str = Depends(get_token)
) -> dict[str, Any]:
    wizard = OnboardingWizard(form=body.form, identity=body.identity)
    try:
        return await wizard.submit(token)
    except WizardError as exc:
        logger.error(
            "onboarding_incomplete",
            extra={"step": exc.step, "missing": exc.missing},
        )
        raise _incomplete(exc) from exc


@router.get("/me")
async def me(token: str = Depends(get_token)) -> dict[str, Any]:
    return await student_api.get_me(token)


@router.get("/profile")
async def profile(token: str = Depends(get_token)) -> dict[str, Any]:
    return await student_api.get_profile(token)


@router.put("/profile")
async def edit_profile(
    body: dict[str, Any], token: str = Depends(get_token)
) -> dict[str, Any]:
    return await student_api.update_profile(token, body)


# ---------------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------------


@router.get("/applications", response_model=list[ApplicationCard])
async def applications(token: str = Depends(get_token)) -> list[ApplicationCard]:
    response = await student_api.list_applications(token)
    return [
        ApplicationCard(application=app, badge=application_badge(app.status))
        for app in response.applications
    ]


@router.get("/applications/{application_id}", response_model=ApplicationDetailView)
async def application_detail(
    application_id: str, token: str = Depends(get_token)
) -> ApplicationDetailView:
    envelope = await student_api.get_application(token, application_id)
    status = envelope.application.status
    return ApplicationDetailView(
        application=envelope.application,
        badge=detail_badge(status),
        progress=application_progress(status),
    )


@router.post("/applications/{application_id}/submit", response_model=ApplicationCard)
async def submit_application(
    application_id: str, token: str = Depends(get_token)
) -> ApplicationCard:
    envelope = await student_api.submit_application(token, application_id)
    return ApplicationCard(
        application=envelope.application,
        badge=application_badge(envelope.application.status),
    )


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


@router.get("/documents", response_model=list[DocumentCard])
async def document_list(token: str = Depends(get_token)) -> list[DocumentCard]:
    response = await student_api.list_documents(token)
    return [
        DocumentCard(
            document=document,
            badge=document_badge(document.status),
            size=documents.format_file_size(document.file_size or 0),
        )
        for document in response.documents
    ]


@router.post("/documents", response_model=list[Document], status_code=201)
async def register_documents(
    body: DocumentUploadRequest, token: str = Depends(get_token)
) -> list[Document]:
    try:
        return await documents.register_uploads(token, body.type.value, body.files)
    except UploadRejected as exc:
        logger.error(
            "document_upload_rejected",
            extra={"document_type": body.type.value, "error_message": exc.message},
        )
        raise HTTPException(status_code=422, detail=exc.message) from exc


@router.get("/documents/{document_id}", response_model=Document)
async def document_detail(document_id: str, token: str = Depends(get_token)) -> Document:
    envelope = await student_api.get_document(token, document_id)
    return envelope.document


@router.post("/documents/{document_id}/parse", response_model=Document)
async def parse_document(document_id: str, token: str = Depends(get_token)) -> Document:
    envelope = await student_api.parse_document(token, document_id)
    return envelope.document


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


@router.get("/messages/conversations", response_model=ConversationsResponse)
async def conversations(token: str = Depends(get_token)) -> ConversationsResponse:
    return await student_api.list_conversations(token)


@router.get("/messages/thread/{user_id}", response_model=ThreadResponse)
async def thread(user_id: str, token: str = Depends(get_token)) -> ThreadResponse:
    return await student_api.get_thread(token, user_id)


@router.post("/messages", response_model=Message | None)
async def send_message(
    body: SendMessageRequest, token: str = Depends(get_token)
) -> Message | None:
    return await messaging.send_message(token, body.receiver_id, body.content)


@router.get("/messages/search-users", response_model=list[User])
async def search_users(
    q: str = Query(default=""), token: str = Depends(get_token)
) -> list[User]:
    return await messaging.search_users(token, q)


# ---------------------------------------------------------------------------
# Payments
# ---------------------------------------------------------------------------


@router.get("/payments/callback", response_model=PaymentOutcome)
async def payment_callback(
    reference: str | None = Query(default=None),
    trxref: str | None = Query(default=None),
    token: str = Depends(get_token),
) -> PaymentOutcome:
    return await payments.verify_callback(token, {"reference": reference, "trxref": trxref})
