"""View shapes for users, universities, and employers."""

from pydantic import Field

from workstream.models.base import ApiModel


class EntityCounts(ApiModel):
    """The API's ``_count`` aggregate on universities and employers."""
    programs: int = 0
    admins: int = 0


class University(ApiModel):
    """A university as listed by any portal."""
    id: str | None = None
    name: str
    short_name: str | None = None
    logo_url: str | None = None
    description: str | None = None
    website: str | None = None
    is_verified: bool | None = None
    count: EntityCounts | None = Field(default=None, alias="_count")


class Employer(ApiModel):
    """An employer as listed by any portal."""
    id: str | None = None
    name: str
    logo_url: str | None = None
    description: str | None = None
    industry: str | None = None
    is_verified: bool | None = None
    count: EntityCounts | None = Field(default=None, alias="_count")


class User(ApiModel):
    """A platform user (admin listing, message partners, search results)."""
    id: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    avatar_url: str | None = None
    role: str | None = None
    is_active: bool | None = None
    created_at: str | None = None


class Pagination(ApiModel):
    """Pagination block of a list envelope."""
    page: int
    limit: int
    total: int
    total_pages: int


class UserEnvelope(ApiModel):
    """Envelope for a single user."""
    user: User


class UniversitiesResponse(ApiModel):
    """Envelope for university listings."""
    universities: list[University] = []


class UniversityEnvelope(ApiModel):
    """Envelope for a single university."""
    university: University


class EmployersResponse(ApiModel):
    """Envelope for employer listings."""
    employers: list[Employer] = []


class EmployerEnvelope(ApiModel):
    """Envelope for a single employer."""
    employer: Employer
