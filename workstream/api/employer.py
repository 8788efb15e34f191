"""Employer portal endpoint bindings. Every call needs an employer admin's token."""

from __future__ import annotations

from workstream.api.client import get_api_client, parse_response
from workstream.api.query import build_query, drop_unset
from workstream.models.application import CandidateEnvelope, CandidatesResponse
from workstream.models.dashboard import EmployerDashboard
from workstream.models.enums import CandidateDecision
from workstream.models.organization import UniversitiesResponse
from workstream.models.program import ProgramsResponse


async def get_dashboard(token: str) -> EmployerDashboard:
    data = await get_api_client().request("/employer/dashboard", token=token)
    return parse_response(EmployerDashboard, data)


async def list_programs(token: str) -> ProgramsResponse:
    data = await get_api_client().request("/employer/programs", token=token)
    return parse_response(ProgramsResponse, data)


# ---------------------------------------------------------------------------
# Candidates
# ---------------------------------------------------------------------------


async def list_candidates(
    token: str, status: str | None = None, program_id: str | None = None
) -> CandidatesResponse:
    query = build_query({"status": status, "programId": program_id})
    data = await get_api_client().request(f"/employer/candidates{query}", token=token)
    return parse_response(CandidatesResponse, data)


async def get_candidate(token: str, candidate_id: str) -> CandidateEnvelope:
    data = await get_api_client().request(f"/employer/candidates/{candidate_id}", token=token)
    return parse_response(CandidateEnvelope, data)


async def decide_candidate(
    token: str,
    candidate_id: str,
    decision: CandidateDecision,
    notes: str | None = None,
    interview_score: float | None = None,
) -> CandidateEnvelope:
    data = await get_api_client().request(
        f"/employer/candidates/{candidate_id}",
        method="PATCH",
        token=token,
        body=drop_unset({
            "decision": CandidateDecision(decision).value,
            "notes": notes,
            "interviewScore": interview_score,
        }),
    )
    return parse_response(CandidateEnvelope, data)


async def schedule_interview(
    token: str, candidate_id: str, interview_date: str, notes: str | None = None
) -> CandidateEnvelope:
    data = await get_api_client().request(
        f"/employer/candidates/{candidate_id}/interview",
        method="POST",
        token=token,
        body=drop_unset({"interviewDate": interview_date, "notes": notes}),
    )
    return parse_response(CandidateEnvelope, data)


async def list_universities(token: str) -> UniversitiesResponse:
    data = await get_api_client().request("/employer/universities", token=token)
    return parse_response(UniversitiesResponse, data)
