"""Admin portal endpoint bindings. Every call needs an admin's token."""

from __future__ import annotations

from typing import Any

from workstream.api.client import get_api_client, parse_response
from workstream.api.query import build_query, drop_unset
from workstream.models.application import ApplicationsResponse
from workstream.models.dashboard import AdminDashboard
from workstream.models.message import UsersResponse
from workstream.models.organization import (
    EmployerEnvelope,
    EmployersResponse,
    UniversitiesResponse,
    UniversityEnvelope,
    UserEnvelope,
)
from workstream.models.program import DeleteResult, ProgramEnvelope, ProgramsResponse


async def get_dashboard(token: str) -> AdminDashboard:
    data = await get_api_client().request("/admin/dashboard", token=token)
    return parse_response(AdminDashboard, data)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


async def list_users(
    token: str,
    page: int | None = None,
    limit: int | None = None,
    role: str | None = None,
    search: str | None = None,
) -> UsersResponse:
    query = build_query({"page": page, "limit": limit, "role": role, "search": search})
    data = await get_api_client().request(f"/admin/users{query}", token=token)
    return parse_response(UsersResponse, data)


async def get_user(token: str, user_id: str) -> UserEnvelope:
    data = await get_api_client().request(f"/admin/users/{user_id}", token=token)
    return parse_response(UserEnvelope, data)


async def update_user(
    token: str,
    user_id: str,
    role: str | None = None,
    is_active: bool | None = None,
) -> UserEnvelope:
    data = await get_api_client().request(
        f"/admin/users/{user_id}",
        method="PATCH",
        token=token,
        body=drop_unset({"role": role, "isActive": is_active}),
    )
    return parse_response(UserEnvelope, data)


# ---------------------------------------------------------------------------
# Universities and employers
# ---------------------------------------------------------------------------


async def list_universities(token: str) -> UniversitiesResponse:
    data = await get_api_client().request("/admin/universities", token=token)
    return parse_response(UniversitiesResponse, data)


async def create_university(token: str, data: dict[str, Any]) -> UniversityEnvelope:
    response = await get_api_client().request(
        "/admin/universities", method="POST", token=token, body=data
    )
    return parse_response(UniversityEnvelope, response)


async def update_university(
    token: str, university_id: str, data: dict[str, Any]
) -> UniversityEnvelope:
    response = await get_api_client().request(
        f"/admin/universities/{university_id}", method="PATCH", token=token, body=data
    )
    return parse_response(UniversityEnvelope, response)


async def list_employers(token: str) -> EmployersResponse:
    data = await get_api_client().request("/admin/employers", token=token)
    return parse_response(EmployersResponse, data)


async def create_employer(token: str, data: dict[str, Any]) -> EmployerEnvelope:
    response = await get_api_client().request(
        "/admin/employers", method="POST", token=token, body=data
    )
    return parse_response(EmployerEnvelope, response)


async def update_employer(
    token: str, employer_id: str, data: dict[str, Any]
) -> EmployerEnvelope:
    response = await get_api_client().request(
        f"/admin/employers/{employer_id}", method="PATCH", token=token, body=data
    )
    return parse_response(EmployerEnvelope, response)


# ---------------------------------------------------------------------------
# Programs
# ---------------------------------------------------------------------------


async def list_programs(
    token: str,
    page: int | None = None,
    limit: int | None = None,
    status: str | None = None,
) -> ProgramsResponse:
    query = build_query({"page": page, "limit": limit, "status": status})
    data = await get_api_client().request(f"/admin/programs{query}", token=token)
    return parse_response(ProgramsResponse, data)


async def create_program(token: str, data: dict[str, Any]) -> ProgramEnvelope:
    response = await get_api_client().request(
        "/admin/programs", method="POST", token=token, body=data
    )
    return parse_response(ProgramEnvelope, response)


async def update_program(token: str, program_id: str, data: dict[str, Any]) -> ProgramEnvelope:
    response = await get_api_client().request(
        f"/admin/programs/{program_id}", method="PATCH", token=token, body=data
    )
    return parse_response(ProgramEnvelope, response)


async def delete_program(token: str, program_id: str) -> DeleteResult:
    data = await get_api_client().request(
        f"/admin/programs/{program_id}", method="DELETE", token=token
    )
    return parse_response(DeleteResult, data)


# ---------------------------------------------------------------------------
# Admin assignment
# ---------------------------------------------------------------------------


async def assign_university_admin(
    token: str,
    user_id: str,
    university_id: str,
    title: str | None = None,
    department: str | None = None,
) -> dict[str, Any]:
    return await get_api_client().request(
        "/admin/assign/university-admin",
        method="POST",
        token=token,
        body=drop_unset({
            "userId": user_id,
            "universityId": university_id,
            "title": title,
            "department": department,
        }),
    )


async def assign_employer_admin(
    token: str,
    user_id: str,
    employer_id: str,
    title: str | None = None,
    department: str | None = None,
) -> dict[str, Any]:
    return await get_api_client().request(
        "/admin/assign/employer-admin",
        method="POST",
        token=token,
        body=drop_unset({
            "userId": user_id,
            "employerId": employer_id,
            "title": title,
            "department": department,
        }),
    )


# ---------------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------------


async def list_applications(
    token: str,
    page: int | None = None,
    limit: int | None = None,
    status: str | None = None,
    program_id: str | None = None,
) -> ApplicationsResponse:
    query = build_query(
        {"page": page, "limit": limit, "status": status, "programId": program_id}
    )
    data = await get_api_client().request(f"/admin/applications{query}", token=token)
    return parse_response(ApplicationsResponse, data)
