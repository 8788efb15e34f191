"""University portal endpoint bindings. Every call needs a university admin's token."""

from __future__ import annotations

from typing import Any

from workstream.api.client import get_api_client, parse_response
from workstream.api.query import build_query, drop_unset
from workstream.models.application import ApplicationEnvelope, ApplicationsResponse
from workstream.models.dashboard import UniversityDashboard
from workstream.models.organization import EmployersResponse
from workstream.models.program import ProgramEnvelope, ProgramsResponse


async def get_dashboard(token: str) -> UniversityDashboard:
    data = await get_api_client().request("/university/dashboard", token=token)
    return parse_response(UniversityDashboard, data)


# ---------------------------------------------------------------------------
# Programs
# ---------------------------------------------------------------------------


async def list_programs(token: str) -> ProgramsResponse:
    data = await get_api_client().request("/university/programs", token=token)
    return parse_response(ProgramsResponse, data)


async def create_program(token: str, data: dict[str, Any]) -> ProgramEnvelope:
    """Create a program; ``data`` must name the partner ``employerId``."""
    response = await get_api_client().request(
        "/university/programs", method="POST", token=token, body=data
    )
    return parse_response(ProgramEnvelope, response)


async def update_program(token: str, program_id: str, data: dict[str, Any]) -> ProgramEnvelope:
    response = await get_api_client().request(
        f"/university/programs/{program_id}", method="PATCH", token=token, body=data
    )
    return parse_response(ProgramEnvelope, response)


async def publish_program(token: str, program_id: str) -> ProgramEnvelope:
    data = await get_api_client().request(
        f"/university/programs/{program_id}/publish", method="POST", token=token
    )
    return parse_response(ProgramEnvelope, data)


# ---------------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------------


async def list_applications(
    token: str, status: str | None = None, program_id: str | None = None
) -> ApplicationsResponse:
    query = build_query({"status": status, "programId": program_id})
    data = await get_api_client().request(f"/university/applications{query}", token=token)
    return parse_response(ApplicationsResponse, data)


async def get_application(token: str, application_id: str) -> ApplicationEnvelope:
    data = await get_api_client().request(
        f"/university/applications/{application_id}", token=token
    )
    return parse_response(ApplicationEnvelope, data)


async def review_application(
    token: str,
    application_id: str,
    status: str,
    review_notes: str | None = None,
    rejection_reason: str | None = None,
    interview_date: str | None = None,
) -> ApplicationEnvelope:
    data = await get_api_client().request(
        f"/university/applications/{application_id}",
        method="PATCH",
        token=token,
        body=drop_unset({
            "status": status,
            "reviewNotes": review_notes,
            "rejectionReason": rejection_reason,
            "interviewDate": interview_date,
        }),
    )
    return parse_response(ApplicationEnvelope, data)


async def list_employers(token: str) -> EmployersResponse:
    """Partner employers offered when creating a program."""
    data = await get_api_client().request("/university/employers", token=token)
    return parse_response(EmployersResponse, data)
