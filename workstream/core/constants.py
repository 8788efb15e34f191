"""Portal constants.

Contains the status-to-label/color lookup tables shared by the four portals,
the application progress tracker, the document type catalogue, and the
upload limits enforced by the file-upload provider.
"""

# ---------------------------------------------------------------------------
# Application status badges (student portal)
# Colors are the badge classes of the shared UI library.
# ---------------------------------------------------------------------------
APPLICATION_STATUS_BADGES: dict[str, dict[str, str]] = {
    "DRAFT": {"label": "Draft", "color": "bg-secondary text-secondary-foreground"},
    "SUBMITTED": {"label": "Submitted", "color": "bg-blue-100 text-blue-700"},
    "UNDER_REVIEW": {"label": "Under Review", "color": "bg-amber-100 text-amber-700"},
    "SHORTLISTED": {"label": "Shortlisted", "color": "bg-purple-100 text-purple-700"},
    "INTERVIEW_SCHEDULED": {
        "label": "Interview Scheduled",
        "color": "bg-indigo-100 text-indigo-700",
    },
    "ACCEPTED": {"label": "Accepted", "color": "bg-success-100 text-success-700"},
    "REJECTED": {"label": "Not Selected", "color": "bg-destructive/10 text-destructive"},
    "ENROLLED": {"label": "Enrolled", "color": "bg-success-100 text-success-700"},
    "WITHDRAWN": {"label": "Withdrawn", "color": "bg-secondary text-muted-foreground"},
}

# Student dashboard cards use badge variants rather than raw colors
APPLICATION_STATUS_VARIANTS: dict[str, dict[str, str]] = {
    "DRAFT": {"label": "Draft", "variant": "secondary"},
    "SUBMITTED": {"label": "Submitted", "variant": "secondary"},
    "UNDER_REVIEW": {"label": "Under Review", "variant": "warning"},
    "SHORTLISTED": {"label": "Shortlisted", "variant": "success"},
    "INTERVIEW_SCHEDULED": {"label": "Interview Scheduled", "variant": "success"},
    "ACCEPTED": {"label": "Accepted", "variant": "success"},
    "REJECTED": {"label": "Not Selected", "variant": "destructive"},
}

# Application detail header badge
APPLICATION_DETAIL_COLORS: dict[str, str] = {
    "DRAFT": "bg-secondary",
    "SUBMITTED": "bg-blue-100 text-blue-700",
    "UNDER_REVIEW": "bg-amber-100 text-amber-700",
    "SHORTLISTED": "bg-purple-100 text-purple-700",
    "ACCEPTED": "bg-success-100 text-success-700",
    "REJECTED": "bg-destructive/10 text-destructive",
}

# ---------------------------------------------------------------------------
# Staff portals (admin, university)
# ---------------------------------------------------------------------------
NEUTRAL_COLOR = "bg-gray-100 text-gray-700"

ADMIN_STATUS_COLORS: dict[str, str] = {
    "SUBMITTED": "bg-blue-100 text-blue-700",
    "UNDER_REVIEW": "bg-yellow-100 text-yellow-700",
    "SHORTLISTED": "bg-green-100 text-green-700",
    "ACCEPTED": "bg-emerald-100 text-emerald-700",
    "REJECTED": "bg-red-100 text-red-700",
    "DRAFT": NEUTRAL_COLOR,
}

UNIVERSITY_STATUS_COLORS: dict[str, str] = {
    **ADMIN_STATUS_COLORS,
    "INTERVIEW_SCHEDULED": "bg-purple-100 text-purple-700",
}

# Review tabs on the university applications page; "" means all statuses
UNIVERSITY_STATUS_TABS: list[dict[str, str]] = [
    {"value": "", "label": "All"},
    {"value": "SUBMITTED", "label": "Submitted"},
    {"value": "UNDER_REVIEW", "label": "Under Review"},
    {"value": "SHORTLISTED", "label": "Shortlisted"},
    {"value": "ACCEPTED", "label": "Accepted"},
    {"value": "REJECTED", "label": "Rejected"},
]

UNIVERSITY_PROGRAM_COLORS: dict[str, str] = {
    "OPEN": "bg-green-100 text-green-700",
    "DRAFT": NEUTRAL_COLOR,
    "IN_PROGRESS": "bg-blue-100 text-blue-700",
}
UNIVERSITY_PROGRAM_FALLBACK = "bg-red-100 text-red-700"

EMPLOYER_PROGRAM_COLORS: dict[str, str] = {
    "OPEN": "bg-green-100 text-green-700",
    "IN_PROGRESS": "bg-green-100 text-green-700",
}

# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------
DOCUMENT_STATUS_COLORS: dict[str, str] = {
    "PENDING": "bg-yellow-100 text-yellow-700",
    "VERIFIED": "bg-green-100 text-green-700",
    "REJECTED": "bg-red-100 text-red-700",
}

DOCUMENT_TYPES: dict[str, dict[str, str]] = {
    "TRANSCRIPT": {
        "label": "Academic Transcript",
        "description": "Your official academic records",
    },
    "CERTIFICATE": {
        "label": "Certificates",
        "description": "WASSCE, degree certificates, etc.",
    },
    "CV": {"label": "CV/Resume", "description": "Your curriculum vitae"},
    "ID_DOCUMENT": {
        "label": "ID Document",
        "description": "National ID, passport, etc.",
    },
    "RECOMMENDATION": {
        "label": "Recommendation Letter",
        "description": "Letters from teachers or employers",
    },
    "OTHER": {
        "label": "Other Documents",
        "description": "Any other supporting documents",
    },
}

# ---------------------------------------------------------------------------
# Upload limits per uploader route: kind -> (max bytes per file, max files)
# ---------------------------------------------------------------------------
MB = 1024 * 1024

UPLOAD_RULES: dict[str, dict[str, tuple[int, int]]] = {
    "documentUploader": {"pdf": (8 * MB, 5), "image": (4 * MB, 5)},
    "transcriptUploader": {"pdf": (8 * MB, 1)},
    "certificateUploader": {"pdf": (8 * MB, 3), "image": (4 * MB, 3)},
    "cvUploader": {"pdf": (4 * MB, 1)},
    "idDocumentUploader": {"pdf": (4 * MB, 1), "image": (4 * MB, 2)},
}

UPLOADER_BY_DOCUMENT_TYPE: dict[str, str] = {
    "TRANSCRIPT": "transcriptUploader",
    "CERTIFICATE": "certificateUploader",
    "CV": "cvUploader",
    "ID_DOCUMENT": "idDocumentUploader",
}
DEFAULT_UPLOADER = "documentUploader"

IMAGE_EXTENSIONS: set[str] = {".png", ".jpg", ".jpeg", ".gif", ".webp"}

# ---------------------------------------------------------------------------
# Application progress tracker
# ---------------------------------------------------------------------------
APPLICATION_STEPS: list[dict[str, str]] = [
    {"key": "DRAFT", "label": "Draft"},
    {"key": "SUBMITTED", "label": "Submitted"},
    {"key": "UNDER_REVIEW", "label": "Under Review"},
    {"key": "SHORTLISTED", "label": "Shortlisted"},
    {"key": "ACCEPTED", "label": "Accepted"},
]

# Terminal statuses sit at -1 and show no progress
APPLICATION_STATUS_ORDER: dict[str, int] = {
    "DRAFT": 0,
    "SUBMITTED": 1,
    "UNDER_REVIEW": 2,
    "SHORTLISTED": 3,
    "INTERVIEW_SCHEDULED": 3,
    "ACCEPTED": 4,
    "ENROLLED": 5,
    "REJECTED": -1,
    "WITHDRAWN": -1,
}

# ---------------------------------------------------------------------------
# Wizard limits
# ---------------------------------------------------------------------------
MOTIVATION_LETTER_MIN_LENGTH: int = 100
MOTIVATION_LETTER_MAX_LENGTH: int = 2000
USER_SEARCH_MIN_LENGTH: int = 2
