"""Unit tests for the portal dashboard loaders."""

import pytest

from workstream.api.client import ApiError
from workstream.services.dashboards import (
    load_admin_dashboard,
    load_employer_dashboard,
    load_student_dashboard,
    load_university_dashboard,
)

from conftest import TOKEN, FakeBackend, make_application, make_program

OPEN_PROGRAMS = "/programs?status=OPEN&limit=3"


class TestStudentDashboard:
    """Open programs and the student's applications load independently."""

    @pytest.mark.asyncio
    async def test_signed_out_only_loads_programs(self, backend: FakeBackend) -> None:
        backend.add("GET", OPEN_PROGRAMS, {"programs": [make_program()]})

        view = await load_student_dashboard(None)

        assert view.signed_in is False
        assert [p.title for p in view.programs] == ["Data Engineering Bootcamp"]
        assert view.applications == []
        assert backend.endpoints() == [f"GET {OPEN_PROGRAMS}"]

    @pytest.mark.asyncio
    async def test_signed_in_cards_carry_variants(self, backend: FakeBackend) -> None:
        backend.add("GET", OPEN_PROGRAMS, {"programs": []})
        backend.add(
            "GET",
            "/applications",
            {"applications": [make_application(status="UNDER_REVIEW")]},
        )

        view = await load_student_dashboard(TOKEN)

        assert view.signed_in is True
        assert view.applications[0].badge.variant == "warning"

    @pytest.mark.asyncio
    async def test_failed_programs_leave_applications(self, backend: FakeBackend) -> None:
        backend.add("GET", OPEN_PROGRAMS, {"message": "boom"}, status=500)
        backend.add("GET", "/applications", {"applications": [make_application()]})

        view = await load_student_dashboard(TOKEN)

        assert view.programs == []
        assert len(view.applications) == 1

    @pytest.mark.asyncio
    async def test_failed_applications_leave_programs(self, backend: FakeBackend) -> None:
        backend.add("GET", OPEN_PROGRAMS, {"programs": [make_program()]})
        backend.add("GET", "/applications", {"message": "Unauthorized"}, status=401)

        view = await load_student_dashboard(TOKEN)

        assert len(view.programs) == 1
        assert view.applications == []


    @pytest.mark.asyncio
    async def test_malformed_program_leaves_applications(self, backend: FakeBackend) -> None:
        """Given a program item missing its title, only the programs section empties."""
        backend.add("GET", OPEN_PROGRAMS, {"programs": [{"id": "p1"}]})
        backend.add("GET", "/applications", {"applications": [make_application()]})

        view = await load_student_dashboard(TOKEN)

        assert view.programs == []
        assert len(view.applications) == 1

    @pytest.mark.asyncio
    async def test_non_json_applications_leave_programs(self, backend: FakeBackend) -> None:
        backend.add("GET", OPEN_PROGRAMS, {"programs": [make_program()]})
        backend.add_text("GET", "/applications", "<html>maintenance</html>")

        view = await load_student_dashboard(TOKEN)

        assert len(view.programs) == 1
        assert view.applications == []


class TestStaffDashboards:
    @pytest.mark.asyncio
    async def test_admin_recent_applications_get_badges(self, backend: FakeBackend) -> None:
        backend.add(
            "GET",
            "/admin/dashboard",
            {
                "stats": {"totalUsers": 12, "applicationsByStatus": {"SUBMITTED": 3}},
                "recentApplications": [make_application(status="REJECTED")],
            },
        )

        view = await load_admin_dashboard(TOKEN)

        assert view.stats.total_users == 12
        assert view.stats.applications_by_status == {"SUBMITTED": 3}
        assert view.recent_applications[0].badge.color == "bg-red-100 text-red-700"

    @pytest.mark.asyncio
    async def test_admin_forbidden_raises(self, backend: FakeBackend) -> None:
        backend.add("GET", "/admin/dashboard", {"message": "Forbidden"}, status=403)

        with pytest.raises(ApiError) as exc_info:
            await load_admin_dashboard(TOKEN)

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_university_program_cards(self, backend: FakeBackend) -> None:
        backend.add(
            "GET",
            "/university/dashboard",
            {
                "university": {"id": "uni-1", "name": "Lagos Tech"},
                "stats": {"totalPrograms": 2, "pendingReview": 1},
                "programs": [make_program(status="CLOSED"), make_program(status="OPEN")],
            },
        )

        view = await load_university_dashboard(TOKEN)

        assert view.university.name == "Lagos Tech"
        assert view.stats.pending_review == 1
        assert [c.badge.color for c in view.programs] == [
            "bg-red-100 text-red-700",
            "bg-green-100 text-green-700",
        ]

    @pytest.mark.asyncio
    async def test_employer_program_cards(self, backend: FakeBackend) -> None:
        backend.add(
            "GET",
            "/employer/dashboard",
            {
                "employer": {"id": "emp-1", "name": "Acme Data"},
                "stats": {"totalCandidates": 9, "hired": 2},
                "programs": [make_program(status="IN_PROGRESS")],
            },
        )

        view = await load_employer_dashboard(TOKEN)

        assert view.stats.hired == 2
        assert view.programs[0].badge.color == "bg-green-100 text-green-700"
