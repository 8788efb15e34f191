"""View shapes for applications, students, and employer candidates.

One ``Application`` covers the student, admin, and university projections;
fields a portal does not receive stay at their defaults.
"""

from workstream.models.base import ApiModel
from workstream.models.document import Document
from workstream.models.organization import Pagination
from workstream.models.program import Program


class StudentUser(ApiModel):
    """The user block nested in a student record."""
    first_name: str | None = None
    last_name: str | None = None
    email: str
    avatar_url: str | None = None


class Student(ApiModel):
    """A student as seen by reviewers."""
    id: str | None = None
    date_of_birth: str | None = None
    gender: str | None = None
    nationality: str | None = None
    highest_education: str | None = None
    institution: str | None = None
    graduation_year: int | None = None
    user: StudentUser
    documents: list[Document] = []


class AttachedDocument(ApiModel):
    """Join record linking a document to an application."""
    document: Document


class Application(ApiModel):
    """A student's submission against a program."""
    id: str | None = None
    application_number: str | None = None
    status: str
    created_at: str | None = None
    submitted_at: str | None = None
    reviewed_at: str | None = None
    review_notes: str | None = None
    meets_requirements: bool | None = None
    motivation_letter: str | None = None
    interview_date: str | None = None
    program: Program | None = None
    student: Student | None = None
    documents: list[AttachedDocument] = []


class ApplicationsResponse(ApiModel):
    """Envelope for application listings."""
    applications: list[Application] = []
    pagination: Pagination | None = None


class ApplicationEnvelope(ApiModel):
    """Envelope for a single application."""
    application: Application


class Candidate(ApiModel):
    """An application as the employer portal sees it."""
    id: str
    application_number: str | None = None
    status: str
    motivation_letter: str | None = None
    interview_date: str | None = None
    interview_score: float | None = None
    interview_notes: str | None = None
    student: Student | None = None
    program: Program | None = None


class CandidatesResponse(ApiModel):
    """Envelope for ``GET /employer/candidates``."""
    candidates: list[Candidate] = []


class CandidateEnvelope(ApiModel):
    """Envelope for a single candidate."""
    candidate: Candidate
