"""Status badge lookups and the application progress tracker.

Every lookup tolerates statuses it has never seen (including None): the
API owns the lifecycle and may add values before the portals learn them,
so unmapped statuses render with the table's default entry.
"""

from __future__ import annotations

from typing import Literal

from workstream.core.constants import (
    ADMIN_STATUS_COLORS,
    APPLICATION_DETAIL_COLORS,
    APPLICATION_STATUS_BADGES,
    APPLICATION_STATUS_ORDER,
    APPLICATION_STATUS_VARIANTS,
    APPLICATION_STEPS,
    DOCUMENT_STATUS_COLORS,
    EMPLOYER_PROGRAM_COLORS,
    NEUTRAL_COLOR,
    UNIVERSITY_PROGRAM_COLORS,
    UNIVERSITY_PROGRAM_FALLBACK,
    UNIVERSITY_STATUS_COLORS,
)
from workstream.models.dashboard import ApplicationProgress, Badge, TrackerStep
from workstream.models.enums import ApplicationStatus, DocumentStatus

DEFAULT_APPLICATION_STATUS = ApplicationStatus.DRAFT.value
DEFAULT_DOCUMENT_STATUS = DocumentStatus.PENDING.value


def status_text(status: str | None) -> str:
    """Render a raw status for display (``UNDER_REVIEW`` -> ``UNDER REVIEW``)."""
    return (status or DEFAULT_APPLICATION_STATUS).replace("_", " ", 1)


def application_badge(status: str | None) -> Badge:
    """Label and color of an application on the student's list."""
    entry = APPLICATION_STATUS_BADGES.get(
        status or "", APPLICATION_STATUS_BADGES[DEFAULT_APPLICATION_STATUS]
    )
    return Badge(status=status, label=entry["label"], color=entry["color"])


def dashboard_badge(status: str | None) -> Badge:
    """Label and variant of an application on the student dashboard."""
    entry = APPLICATION_STATUS_VARIANTS.get(
        status or "", APPLICATION_STATUS_VARIANTS[DEFAULT_APPLICATION_STATUS]
    )
    return Badge(status=status, label=entry["label"], variant=entry["variant"])


def detail_badge(status: str | None) -> Badge:
    """Header badge of the application detail view."""
    color = APPLICATION_DETAIL_COLORS.get(
        status or "", APPLICATION_DETAIL_COLORS[DEFAULT_APPLICATION_STATUS]
    )
    return Badge(status=status, label=status_text(status), color=color)


def staff_badge(status: str | None, portal: Literal["admin", "university"]) -> Badge:
    """Badge of an application on the admin or university listings."""
    table = ADMIN_STATUS_COLORS if portal == "admin" else UNIVERSITY_STATUS_COLORS
    return Badge(
        status=status,
        label=status or DEFAULT_APPLICATION_STATUS,
        color=table.get(status or "", NEUTRAL_COLOR),
    )


def document_badge(status: str | None) -> Badge:
    """Verification badge of an uploaded document."""
    label = status or DEFAULT_DOCUMENT_STATUS
    color = DOCUMENT_STATUS_COLORS.get(label, DOCUMENT_STATUS_COLORS[DEFAULT_DOCUMENT_STATUS])
    return Badge(status=status, label=label, color=color)


def program_badge(status: str | None, portal: Literal["university", "employer"]) -> Badge:
    """Status badge of a program card.

    The university portal flags anything outside OPEN/DRAFT/IN_PROGRESS in
    red; the employer portal only distinguishes running programs.
    """
    if portal == "university":
        color = UNIVERSITY_PROGRAM_COLORS.get(status or "", UNIVERSITY_PROGRAM_FALLBACK)
    else:
        color = EMPLOYER_PROGRAM_COLORS.get(status or "", NEUTRAL_COLOR)
    return Badge(status=status, label=status or "", color=color)


def application_progress(status: str | None) -> ApplicationProgress:
    """Place an application on the DRAFT -> ACCEPTED tracker.

    REJECTED and WITHDRAWN are terminal and show no progress; unknown
    statuses sit on the first step.
    """
    order = APPLICATION_STATUS_ORDER.get(status or "", 0)
    terminal = order < 0
    total = len(APPLICATION_STEPS)

    if terminal:
        percent = 0.0
    else:
        percent = min((order + 1) / total * 100, 100.0)

    steps = [
        TrackerStep(
            key=step["key"],
            label=step["label"],
            completed=not terminal and index <= order,
            current=not terminal and index == order,
        )
        for index, step in enumerate(APPLICATION_STEPS)
    ]
    return ApplicationProgress(
        current_step=order, percent=percent, terminal=terminal, steps=steps
    )
