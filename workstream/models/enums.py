"""Enum types mirroring the status values the REST API reports.

View models keep statuses as plain strings so an unknown value from the
API still renders; these enums name the values the portals know about.
"""

from enum import Enum


class ApplicationStatus(str, Enum):
    """Lifecycle of an application, driven server-side."""
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    UNDER_REVIEW = "UNDER_REVIEW"
    SHORTLISTED = "SHORTLISTED"
    INTERVIEW_SCHEDULED = "INTERVIEW_SCHEDULED"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    ENROLLED = "ENROLLED"
    WITHDRAWN = "WITHDRAWN"


class ProgramStatus(str, Enum):
    """Lifecycle of a training program."""
    DRAFT = "DRAFT"
    OPEN = "OPEN"
    CLOSED = "CLOSED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class DocumentType(str, Enum):
    """Kinds of supporting document a student can upload."""
    TRANSCRIPT = "TRANSCRIPT"
    CERTIFICATE = "CERTIFICATE"
    CV = "CV"
    ID_DOCUMENT = "ID_DOCUMENT"
    RECOMMENDATION = "RECOMMENDATION"
    OTHER = "OTHER"


class DocumentStatus(str, Enum):
    """Verification state of an uploaded document."""
    PENDING = "PENDING"
    VERIFIED = "VERIFIED"
    REJECTED = "REJECTED"


class CandidateDecision(str, Enum):
    """An employer's verdict on a candidate."""
    APPROVE = "APPROVE"
    REJECT = "REJECT"


class BadgeVariant(str, Enum):
    """Badge variants of the shared UI library."""
    secondary = "secondary"
    warning = "warning"
    success = "success"
    destructive = "destructive"


class PaymentState(str, Enum):
    """Outcome of a payment callback."""
    success = "success"
    pending = "pending"
    failed = "failed"
