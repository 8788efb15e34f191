"""Admin portal endpoints: platform stats, users, organizations, programs."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query

from workstream.api import admin as admin_api
from workstream.core.auth import get_token
from workstream.models.dashboard import AdminDashboardView, ApplicationCard
from workstream.models.message import UsersResponse
from workstream.models.organization import (
    EmployerEnvelope,
    EmployersResponse,
    UniversitiesResponse,
    UniversityEnvelope,
    UserEnvelope,
)
from workstream.models.program import DeleteResult, ProgramEnvelope, ProgramsResponse
from workstream.models.requests import AdminAssignment, OrganizationInput, UserUpdate
from workstream.services.dashboards import load_admin_dashboard
from workstream.services.status import staff_badge

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/dashboard", response_model=AdminDashboardView)
async def dashboard(token: str = Depends(get_token)) -> AdminDashboardView:
    return await load_admin_dashboard(token)


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------


@router.get("/users", response_model=UsersResponse)
async def users(
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    role: str | None = Query(default=None),
    search: str | None = Query(default=None),
    token: str = Depends(get_token),
) -> UsersResponse:
    return await admin_api.list_users(token, page=page, limit=limit, role=role, search=search)


@router.get("/users/{user_id}", response_model=UserEnvelope)
async def user_detail(user_id: str, token: str = Depends(get_token)) -> UserEnvelope:
    return await admin_api.get_user(token, user_id)


@router.patch("/users/{user_id}", response_model=UserEnvelope)
async def edit_user(
    user_id: str, body: UserUpdate, token: str = Depends(get_token)
) -> UserEnvelope:
    envelope = await admin_api.update_user(
        token, user_id, role=body.role, is_active=body.is_active
    )
    logger.info("user_updated", extra={"user_id": user_id, "role": body.role})
    return envelope


# ---------------------------------------------------------------------------
# Universities and employers
# ---------------------------------------------------------------------------


@router.get("/universities", response_model=UniversitiesResponse)
async def universities(token: str = Depends(get_token)) -> UniversitiesResponse:
    return await admin_api.list_universities(token)


@router.post("/universities", response_model=UniversityEnvelope, status_code=201)
async def add_university(
    body: OrganizationInput, token: str = Depends(get_token)
) -> UniversityEnvelope:
    return await admin_api.create_university(
        token, body.model_dump(by_alias=True, exclude_none=True)
    )


@router.patch("/universities/{university_id}", response_model=UniversityEnvelope)
async def edit_university(
    university_id: str, body: OrganizationInput, token: str = Depends(get_token)
) -> UniversityEnvelope:
    return await admin_api.update_university(
        token, university_id, body.model_dump(by_alias=True, exclude_none=True)
    )


@router.get("/employers", response_model=EmployersResponse)
async def employers(token: str = Depends(get_token)) -> EmployersResponse:
    return await admin_api.list_employers(token)


@router.post("/employers", response_model=EmployerEnvelope, status_code=201)
async def add_employer(
    body: OrganizationInput, token: str = Depends(get_token)
) -> EmployerEnvelope:
    return await admin_api.create_employer(
        token, body.model_dump(by_alias=True, exclude_none=True)
    )


@router.patch("/employers/{employer_id}", response_model=EmployerEnvelope)
async def edit_employer(
    employer_id: str, body: OrganizationInput, token: str = Depends(get_token)
) -> EmployerEnvelope:
    return await admin_api.update_employer(
        token, employer_id, body.model_dump(by_alias=True, exclude_none=True)
    )


# ---------------------------------------------------------------------------
# Programs
# ---------------------------------------------------------------------------


@router.get("/programs", response_model=ProgramsResponse)
async def programs(
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    status: str | None = Query(default=None),
    token: str = Depends(get_token),
) -> ProgramsResponse:
    return await admin_api.list_programs(token, page=page, limit=limit, status=status)


@router.post("/programs", response_model=ProgramEnvelope, status_code=201)
async def add_program(
    body: dict[str, Any], token: str = Depends(get_token)
) -> ProgramEnvelope:
    return await admin_api.create_program(token, body)


@router.patch("/programs/{program_id}", response_model=ProgramEnvelope)
async def edit_program(
    program_id: str, body: dict[str, Any], token: str = Depends(get_token)
) -> ProgramEnvelope:
    return await admin_api.update_program(token, program_id, body)


@router.delete("/programs/{program_id}", response_model=DeleteResult)
async def remove_program(program_id: str, token: str = Depends(get_token)) -> DeleteResult:
    result = await admin_api.delete_program(token, program_id)
    logger.info("program_deleted", extra={"program_id": program_id})
    return result


# ---------------------------------------------------------------------------
# Organization admins
# ---------------------------------------------------------------------------


@router.post("/assignments/university", status_code=201)
async def assign_university_admin(
    body: AdminAssignment, token: str = Depends(get_token)
) -> dict[str, Any]:
    if not body.university_id:
        raise HTTPException(status_code=422, detail="universityId is required")
    return await admin_api.assign_university_admin(
        token, body.user_id, body.university_id, title=body.title, department=body.department
    )


@router.post("/assignments/employer", status_code=201)
async def assign_employer_admin(
    body: AdminAssignment, token: str = Depends(get_token)
) -> dict[str, Any]:
    if not body.employer_id:
        raise HTTPException(status_code=422, detail="employerId is required")
    return await admin_api.assign_employer_admin(
        token, body.user_id, body.employer_id, title=body.title, department=body.department
    )


# ---------------------------------------------------------------------------
# Applications
# ---------------------------------------------------------------------------


@router.get("/applications", response_model=list[ApplicationCard])
async def applications(
    page: int | None = Query(default=None, ge=1),
    limit: int | None = Query(default=None, ge=1, le=100),
    status: str | None = Query(default=None),
    program_id: str | None = Query(default=None, alias="programId"),
    token: str = Depends(get_token),
) -> list[ApplicationCard]:
    response = await admin_api.list_applications(
        token, page=page, limit=limit, status=status, program_id=program_id
    )
    return [
        ApplicationCard(application=app, badge=staff_badge(app.status, "admin"))
        for app in response.applications
    ]
