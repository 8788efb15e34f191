"""View shapes for training programs.

The student portal sees the full public record; staff portals get trimmed
projections, so everything beyond the title is optional.
"""

from typing import Any

from pydantic import Field

from workstream.models.base import ApiModel
from workstream.models.organization import Employer, Pagination, University


class ProgramCounts(ApiModel):
    """The API's ``_count`` aggregate on programs."""
    applications: int = 0


class Program(ApiModel):
    """A training program co-sponsored by a university and an employer."""
    id: str | None = None
    title: str
    slug: str | None = None
    description: str | None = None
    short_description: str | None = None
    field: str | None = None
    specialization: str | None = None
    job_role: str | None = None
    total_slots: int | None = None
    available_slots: int | None = None
    application_deadline: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    duration_weeks: int | None = None
    min_education: str | None = None
    required_grades: dict[str, str] | None = None
    additional_requirements: list[str] = []
    application_fee: float = 0
    is_funded: bool | None = None
    stipend_amount: float | None = None
    has_internship: bool | None = None
    internship_duration: int | None = None
    status: str | None = None
    is_published: bool | None = None
    tags: list[str] = []
    university: University | None = None
    employer: Employer | None = None
    cohorts: list[Any] = []
    count: ProgramCounts | None = Field(default=None, alias="_count")


class ProgramsResponse(ApiModel):
    """Envelope for ``GET /programs`` and the staff program listings."""
    programs: list[Program] = []
    pagination: Pagination | None = None


class ProgramEnvelope(ApiModel):
    """Envelope for a single program."""
    program: Program


class DeleteResult(ApiModel):
    """Envelope for deletions."""
    success: bool
