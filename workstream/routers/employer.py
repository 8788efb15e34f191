"""Employer portal endpoints: sponsored programs and candidate decisions."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query

from workstream.api import employer as employer_api
from workstream.core.auth import get_token
from workstream.models.application import CandidateEnvelope, CandidatesResponse
from workstream.models.dashboard import EmployerDashboardView, ProgramCard
from workstream.models.organization import UniversitiesResponse
from workstream.models.requests import CandidateDecisionRequest, InterviewRequest
from workstream.services.dashboards import load_employer_dashboard
from workstream.services.status import program_badge

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/dashboard", response_model=EmployerDashboardView)
async def dashboard(token: str = Depends(get_token)) -> EmployerDashboardView:
    return await load_employer_dashboard(token)


@router.get("/programs", response_model=list[ProgramCard])
async def programs(token: str = Depends(get_token)) -> list[ProgramCard]:
    response = await employer_api.list_programs(token)
    return [
        ProgramCard(program=program, badge=program_badge(program.status, "employer"))
        for program in response.programs
    ]


# ---------------------------------------------------------------------------
# Candidates
# ---------------------------------------------------------------------------


@router.get("/candidates", response_model=CandidatesResponse)
async def candidates(
    status: str | None = Query(default=None),
    program_id: str | None = Query(default=None, alias="programId"),
    token: str = Depends(get_token),
) -> CandidatesResponse:
    return await employer_api.list_candidates(token, status=status, program_id=program_id)


@router.get("/candidates/{candidate_id}", response_model=CandidateEnvelope)
async def candidate_detail(
    candidate_id: str, token: str = Depends(get_token)
) -> CandidateEnvelope:
    return await employer_api.get_candidate(token, candidate_id)


@router.patch("/candidates/{candidate_id}", response_model=CandidateEnvelope)
async def decide(
    candidate_id: str, body: CandidateDecisionRequest, token: str = Depends(get_token)
) -> CandidateEnvelope:
    """Approve or reject a candidate; the API moves the application on."""
    envelope = await employer_api.decide_candidate(
        token,
        candidate_id,
        body.decision,
        notes=body.notes,
        interview_score=body.interview_score,
    )
    logger.info(
        "candidate_decided",
        extra={"candidate_id": candidate_id, "decision": body.decision.value},
    )
    return envelope


@router.post("/candidates/{candidate_id}/interview", response_model=CandidateEnvelope)
async def schedule_interview(
    candidate_id: str, body: InterviewRequest, token: str = Depends(get_token)
) -> CandidateEnvelope:
    envelope = await employer_api.schedule_interview(
        token, candidate_id, body.interview_date, notes=body.notes
    )
    logger.info(
        "interview_scheduled",
        extra={"candidate_id": candidate_id, "interview_date": body.interview_date},
    )
    return envelope


@router.get("/universities", response_model=UniversitiesResponse)
async def universities(token: str = Depends(get_token)) -> UniversitiesResponse:
    return await employer_api.list_universities(token)
