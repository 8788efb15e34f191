"""Unit tests for status badges and the application progress tracker."""

import pytest

from workstream.core.constants import NEUTRAL_COLOR, UNIVERSITY_PROGRAM_FALLBACK
from workstream.services.status import (
    application_badge,
    application_progress,
    dashboard_badge,
    detail_badge,
    document_badge,
    program_badge,
    staff_badge,
    status_text,
)


class TestStudentBadges:
    """Student-facing application badges."""

    def test_known_status(self) -> None:
        badge = application_badge("UNDER_REVIEW")
        assert badge.label == "Under Review"
        assert badge.color == "bg-amber-100 text-amber-700"

    def test_rejected_reads_not_selected(self) -> None:
        assert application_badge("REJECTED").label == "Not Selected"

    @pytest.mark.parametrize("status", ["ARCHIVED", "", None])
    def test_unknown_status_falls_back_to_draft(self, status: str | None) -> None:
        """Given an unmapped status, the Draft badge renders without raising."""
        badge = application_badge(status)
        assert badge.label == "Draft"
        assert badge.color == "bg-secondary text-secondary-foreground"
        assert badge.status == status

    def test_dashboard_variant(self) -> None:
        assert dashboard_badge("SHORTLISTED").variant == "success"
        assert dashboard_badge("UNDER_REVIEW").variant == "warning"
        assert dashboard_badge("REJECTED").variant == "destructive"

    def test_dashboard_unknown_is_secondary(self) -> None:
        badge = dashboard_badge("ENROLLED")
        assert badge.label == "Draft"
        assert badge.variant == "secondary"

    def test_detail_badge_label_replaces_first_underscore(self) -> None:
        badge = detail_badge("UNDER_REVIEW")
        assert badge.label == "UNDER REVIEW"
        assert badge.color == "bg-amber-100 text-amber-700"

    def test_detail_badge_unknown_color(self) -> None:
        badge = detail_badge("INTERVIEW_SCHEDULED")
        assert badge.color == "bg-secondary"
        assert badge.label == "INTERVIEW SCHEDULED"


class TestStatusText:
    def test_only_first_underscore_is_replaced(self) -> None:
        assert status_text("A_B_C") == "A B_C"

    def test_missing_status_reads_draft(self) -> None:
        assert status_text(None) == "DRAFT"


class TestStaffBadges:
    """Admin and university listings."""

    def test_admin_colors(self) -> None:
        assert staff_badge("ACCEPTED", "admin").color == "bg-emerald-100 text-emerald-700"

    def test_admin_interview_scheduled_is_neutral(self) -> None:
        assert staff_badge("INTERVIEW_SCHEDULED", "admin").color == NEUTRAL_COLOR

    def test_university_knows_interview_scheduled(self) -> None:
        badge = staff_badge("INTERVIEW_SCHEDULED", "university")
        assert badge.color == "bg-purple-100 text-purple-700"

    def test_unknown_is_neutral(self) -> None:
        assert staff_badge("SOMETHING_NEW", "university").color == NEUTRAL_COLOR


class TestDocumentAndProgramBadges:
    def test_document_defaults_to_pending(self) -> None:
        badge = document_badge(None)
        assert badge.label == "PENDING"
        assert badge.color == "bg-yellow-100 text-yellow-700"

    def test_document_unknown_uses_pending_color(self) -> None:
        assert document_badge("EXPIRED").color == "bg-yellow-100 text-yellow-700"

    def test_university_program_fallback_is_red(self) -> None:
        assert program_badge("CLOSED", "university").color == UNIVERSITY_PROGRAM_FALLBACK

    def test_employer_in_progress_is_green(self) -> None:
        assert program_badge("IN_PROGRESS", "employer").color == "bg-green-100 text-green-700"
        assert program_badge("DRAFT", "employer").color == NEUTRAL_COLOR


class TestApplicationProgress:
    """Placement on the DRAFT -> ACCEPTED tracker."""

    def test_submitted_is_second_step(self) -> None:
        progress = application_progress("SUBMITTED")
        assert progress.current_step == 1
        assert progress.percent == pytest.approx(40.0)
        assert [s.completed for s in progress.steps] == [True, True, False, False, False]
        assert [s.current for s in progress.steps] == [False, True, False, False, False]

    def test_interview_scheduled_shares_shortlisted_step(self) -> None:
        assert application_progress("INTERVIEW_SCHEDULED").current_step == 3

    def test_accepted_is_complete(self) -> None:
        progress = application_progress("ACCEPTED")
        assert progress.percent == pytest.approx(100.0)
        assert all(step.completed for step in progress.steps)

    def test_enrolled_is_capped(self) -> None:
        assert application_progress("ENROLLED").percent == pytest.approx(100.0)

    @pytest.mark.parametrize("status", ["REJECTED", "WITHDRAWN"])
    def test_terminal_shows_no_progress(self, status: str) -> None:
        progress = application_progress(status)
        assert progress.terminal is True
        assert progress.percent == 0.0
        assert not any(step.completed for step in progress.steps)

    def test_unknown_sits_on_first_step(self) -> None:
        progress = application_progress("MYSTERY")
        assert progress.current_step == 0
        assert progress.percent == pytest.approx(20.0)
        assert progress.terminal is False
