"""Response models for the portal dashboards.

The ``*Dashboard`` classes mirror the API envelopes; the ``*View`` classes
are what the gateway returns, with each card carrying its badge.
"""

from workstream.models.application import Application
from workstream.models.base import ApiModel
from workstream.models.document import Document
from workstream.models.enums import BadgeVariant
from workstream.models.organization import Employer, University
from workstream.models.program import Program


class Badge(ApiModel):
    """Render data for a status badge."""
    status: str | None = None
    label: str
    color: str | None = None
    variant: BadgeVariant | None = None


class ApplicationCard(ApiModel):
    """An application with its badge."""
    application: Application
    badge: Badge


class ProgramCard(ApiModel):
    """A program with its status badge."""
    program: Program
    badge: Badge


class DocumentCard(ApiModel):
    """An uploaded document with its verification badge and display size."""
    document: Document
    badge: Badge
    size: str


# --- Admin ---

class AdminStats(ApiModel):
    """Platform-wide counters."""
    total_users: int = 0
    total_students: int = 0
    total_universities: int = 0
    total_employers: int = 0
    total_programs: int = 0
    total_applications: int = 0
    applications_by_status: dict[str, int] = {}


class AdminDashboard(ApiModel):
    """Envelope for ``GET /admin/dashboard``."""
    stats: AdminStats
    recent_applications: list[Application] = []


class AdminDashboardView(ApiModel):
    stats: AdminStats
    recent_applications: list[ApplicationCard] = []


# --- University ---

class UniversityStats(ApiModel):
    """Counters for one university."""
    total_programs: int = 0
    active_programs: int = 0
    total_applications: int = 0
    pending_review: int = 0
    shortlisted: int = 0


class UniversityDashboard(ApiModel):
    """Envelope for ``GET /university/dashboard``."""
    university: University
    stats: UniversityStats
    programs: list[Program] = []


class UniversityDashboardView(ApiModel):
    university: University
    stats: UniversityStats
    programs: list[ProgramCard] = []


# --- Employer ---

class EmployerStats(ApiModel):
    """Counters for one employer."""
    total_programs: int = 0
    active_programs: int = 0
    total_candidates: int = 0
    pending_review: int = 0
    hired: int = 0


class EmployerDashboard(ApiModel):
    """Envelope for ``GET /employer/dashboard``."""
    employer: Employer
    stats: EmployerStats
    programs: list[Program] = []


class EmployerDashboardView(ApiModel):
    employer: Employer
    stats: EmployerStats
    programs: list[ProgramCard] = []


# --- Student ---

class StudentDashboardView(ApiModel):
    """Open programs plus, when signed in, the student's applications."""
    signed_in: bool = False
    programs: list[Program] = []
    applications: list[ApplicationCard] = []


# --- Application detail ---

class TrackerStep(ApiModel):
    """One step of the application progress tracker."""
    key: str
    label: str
    completed: bool = False
    current: bool = False


class ApplicationProgress(ApiModel):
    """Where an application sits on the tracker."""
    current_step: int
    percent: float
    terminal: bool = False
    steps: list[TrackerStep] = []


class ApplicationDetailView(ApiModel):
    application: Application
    badge: Badge
    progress: ApplicationProgress
