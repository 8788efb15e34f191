"""Request bodies accepted by the portal routers.

Field names follow the REST API's camelCase so the portals can post the
same JSON they would send upstream.
"""

from typing import Any

from pydantic import ConfigDict

from workstream.models.base import ApiModel
from workstream.models.document import UploadedFile
from workstream.models.enums import ApplicationStatus, CandidateDecision, DocumentType


# --- Student ---

class OnboardingStepCheck(ApiModel):
    """Form snapshot for checking one onboarding step."""
    form: dict[str, Any] = {}


class OnboardingRequest(ApiModel):
    """Completed onboarding form plus the identity-provider user."""
    identity: dict[str, Any] = {}
    form: dict[str, Any] = {}


class ApplyRequest(ApiModel):
    """Answers to the program application wizard."""
    motivation_letter: str = ""
    agreed_to_terms: bool = False


class DocumentUploadRequest(ApiModel):
    """Files stored by the upload provider, to register as documents."""
    type: DocumentType
    files: list[UploadedFile] = []


class SendMessageRequest(ApiModel):
    receiver_id: str | None = None
    content: str = ""


# --- Admin ---

class UserUpdate(ApiModel):
    role: str | None = None
    is_active: bool | None = None


class OrganizationInput(ApiModel):
    """Partial university or employer record; unknown fields pass through."""
    model_config = ConfigDict(extra="allow")

    name: str | None = None


class AdminAssignment(ApiModel):
    user_id: str
    university_id: str | None = None
    employer_id: str | None = None
    title: str | None = None
    department: str | None = None


# --- University ---

class ApplicationReview(ApiModel):
    status: ApplicationStatus
    review_notes: str | None = None
    rejection_reason: str | None = None
    interview_date: str | None = None


# --- Employer ---

class CandidateDecisionRequest(ApiModel):
    decision: CandidateDecision
    notes: str | None = None
    interview_score: float | None = None


class InterviewRequest(ApiModel):
    interview_date: str
    notes: str | None = None
