"""University portal endpoints: programs, application review, partners."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Query

from workstream.api import university as university_api
from workstream.core.auth import get_token
from workstream.core.constants import UNIVERSITY_STATUS_TABS
from workstream.models.application import ApplicationEnvelope
from workstream.models.dashboard import (
    ApplicationCard,
    ProgramCard,
    UniversityDashboardView,
)
from workstream.models.organization import EmployersResponse
from workstream.models.program import ProgramEnvelope
from workstream.models.requests import ApplicationReview
from workstream.services.dashboards import load_university_dashboard
from workstream.services.status import program_badge, staff_badge

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/dashboard", response_model=UniversityDashboardView)
async def dashboard(token: str = Depends(get_token)) -> UniversityDashboardView:
    return await load_university_dashboard(token)


# ---------------------------------------------------------------------------
# Programs
# ---------------------------------------------------------------------------


@router.get("/programs", response_model=list[ProgramCard])
async def programs(token: str = Depends(get_token)) -> list[ProgramCard]:
    response = await university_api.list_programs(token)
    return [
        ProgramCard(program=program, badge=program_badge(program.status, "university"))
        for program in response.programs
    ]


@router.post("/programs", response_model=ProgramEnvelope, status_code=201)
async def add_program(
    body: dict[str, Any], token: str = Depends(get_token)
) -> ProgramEnvelope:
    envelope = await university_api.create_program(token, body)
    logger.info("program_created", extra={"program_id": envelope.program.id})
    return envelope


@router.patch("/programs/{program_id}", response_model=ProgramEnvelope)
async def edit_program(
    program_id: str, body: dict[str, Any], token: str = Depends(get_token)
) -> ProgramEnvelope:
    return await university_api.update_program(token, program_id, body)


@router.post("/programs/{program_id}/publish", response_model=ProgramEnvelope)
async def publish_program(program_id: str, token: str = Depends(get_token)) -> ProgramEnvelope:
    envelope = await university_api.publish_program(token, program_id)
    logger.info("program_published", extra={"program_id": program_id})
    return envelope


# ---------------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------------


@router.get("/applications/tabs")
async def application_tabs() -> list[dict[str, str]]:
    """Status filter tabs of the review queue; an empty value means all."""
    return UNIVERSITY_STATUS_TABS


@router.get("/applications", response_model=list[ApplicationCard])
async def applications(
    status: str | None = Query(default=None),
    program_id: str | None = Query(default=None, alias="programId"),
    token: str = Depends(get_token),
) -> list[ApplicationCard]:
    response = await university_api.list_applications(
        token, status=status, program_id=program_id
    )
    return [
        ApplicationCard(application=app, badge=staff_badge(app.status, "university"))
        for app in response.applications
    ]


@router.get("/applications/{application_id}", response_model=ApplicationCard)
async def application_detail(
    application_id: str, token: str = Depends(get_token)
) -> ApplicationCard:
    envelope = await university_api.get_application(token, application_id)
    return ApplicationCard(
        application=envelope.application,
        badge=staff_badge(envelope.application.status, "university"),
    )


@router.patch("/applications/{application_id}", response_model=ApplicationEnvelope)
async def review_application(
    application_id: str, body: ApplicationReview, token: str = Depends(get_token)
) -> ApplicationEnvelope:
    envelope = await university_api.review_application(
        token,
        application_id,
        status=body.status.value,
        review_notes=body.review_notes,
        rejection_reason=body.rejection_reason,
        interview_date=body.interview_date,
    )
    logger.info(
        "application_reviewed",
        extra={"application_id": application_id, "status": body.status.value},
    )
    return envelope


@router.get("/employers", response_model=EmployersResponse)
async def employers(token: str = Depends(get_token)) -> EmployersResponse:
    return await university_api.list_employers(token)
