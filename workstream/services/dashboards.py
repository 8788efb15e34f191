"""Dashboard loaders for the four portals.

Each loader fetches what its portal shows on arrival and attaches badges.
The student dashboard's two fetches are independent: one failing leaves
its section empty without touching the other.
"""

from __future__ import annotations

import asyncio
import logging

from workstream.api import admin as admin_api
from workstream.api import employer as employer_api
from workstream.api import student as student_api
from workstream.api import university as university_api
from workstream.api.client import ApiError
from workstream.models.application import Application
from workstream.models.dashboard import (
    AdminDashboardView,
    ApplicationCard,
    EmployerDashboardView,
    ProgramCard,
    StudentDashboardView,
    UniversityDashboardView,
)
from workstream.models.enums import ProgramStatus
from workstream.models.program import Program
from workstream.services.status import dashboard_badge, program_badge, staff_badge

logger = logging.getLogger(__name__)

DASHBOARD_PROGRAM_LIMIT = 3


async def _open_programs() -> list[Program]:
    try:
        response = await student_api.list_programs(
            status=ProgramStatus.OPEN.value, limit=DASHBOARD_PROGRAM_LIMIT
        )
    except ApiError as exc:
        logger.warning("dashboard_programs_failed", extra={"error_message": exc.message})
        return []
    return response.programs


async def _my_applications(token: str | None) -> list[Application]:
    if not token:
        return []
    try:
        response = await student_api.list_applications(token)
    except ApiError as exc:
        logger.warning("dashboard_applications_failed", extra={"error_message": exc.message})
        return []
    return response.applications


async def load_student_dashboard(token: str | None) -> StudentDashboardView:
    programs, applications = await asyncio.gather(
        _open_programs(), _my_applications(token)
    )
    return StudentDashboardView(
        signed_in=token is not None,
        programs=programs,
        applications=[
            ApplicationCard(application=app, badge=dashboard_badge(app.status))
            for app in applications
        ],
    )


async def load_admin_dashboard(token: str) -> AdminDashboardView:
    dashboard = await admin_api.get_dashboard(token)
    return AdminDashboardView(
        stats=dashboard.stats,
        recent_applications=[
            ApplicationCard(application=app, badge=staff_badge(app.status, "admin"))
            for app in dashboard.recent_applications
        ],
    )


async def load_university_dashboard(token: str) -> UniversityDashboardView:
    dashboard = await university_api.get_dashboard(token)
    return UniversityDashboardView(
        university=dashboard.university,
        stats=dashboard.stats,
        programs=[
            ProgramCard(program=program, badge=program_badge(program.status, "university"))
            for program in dashboard.programs
        ],
    )


async def load_employer_dashboard(token: str) -> EmployerDashboardView:
    dashboard = await employer_api.get_dashboard(token)
    return EmployerDashboardView(
        employer=dashboard.employer,
        stats=dashboard.stats,
        programs=[
            ProgramCard(program=program, badge=program_badge(program.status, "employer"))
            for program in dashboard.programs
        ],
    )
