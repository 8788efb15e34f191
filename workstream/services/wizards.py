"""Multi-step form wizards: student onboarding and program application.

Both wizards are linear: a step can be left forward only once its required
fields are filled, and submitting re-checks every step before any request
goes out.
"""

from __future__ import annotations

import logging
from typing import Any

from workstream.api import student as student_api
from workstream.core.auth import SignInRequired
from workstream.core.constants import (
    MOTIVATION_LETTER_MAX_LENGTH,
    MOTIVATION_LETTER_MIN_LENGTH,
)
from workstream.models.application import Application
from workstream.models.base import ApiModel
from workstream.models.program import Program

logger = logging.getLogger(__name__)


class WizardError(Exception):
    """Raised when a step is left or submitted with fields missing."""

    def __init__(self, step: int, missing: list[str]) -> None:
        super().__init__(f"Step {step} is incomplete: {', '.join(missing)}")
        self.step = step
        self.missing = missing


class StepCheck(ApiModel):
    """Verdict on a single wizard step."""
    step: int
    total_steps: int
    can_advance: bool
    missing: list[str] = []
    progress: float


class Wizard:
    """Linear step counter with per-step validation.

    Subclasses set ``total_steps`` and implement ``missing_fields``.
    """

    total_steps: int = 1

    def __init__(self) -> None:
        self.current_step = 1

    @property
    def progress(self) -> float:
        return self.current_step / self.total_steps * 100

    def missing_fields(self, step: int) -> list[str]:
        raise NotImplementedError

    def can_advance(self) -> bool:
        return not self.missing_fields(self.current_step)

    def check(self, step: int | None = None) -> StepCheck:
        if step is None:
            step = self.current_step
        if not 1 <= step <= self.total_steps:
            raise ValueError(f"step must be between 1 and {self.total_steps}")
        missing = self.missing_fields(step)
        return StepCheck(
            step=step,
            total_steps=self.total_steps,
            can_advance=not missing,
            missing=missing,
            progress=step / self.total_steps * 100,
        )

    def next(self) -> int:
        """Advance one step, refusing while the current step is incomplete."""
        missing = self.missing_fields(self.current_step)
        if missing:
            raise WizardError(self.current_step, missing)
        if self.current_step < self.total_steps:
            self.current_step += 1
        return self.current_step

    def back(self) -> int:
        if self.current_step > 1:
            self.current_step -= 1
        return self.current_step

    def validate_all(self) -> None:
        for step in range(1, self.total_steps + 1):
            missing = self.missing_fields(step)
            if missing:
                raise WizardError(step, missing)


def _is_blank(value: Any) -> bool:
    return value is None or not str(value).strip()


# ---------------------------------------------------------------------------
# Onboarding
# ---------------------------------------------------------------------------


class OnboardingWizard(Wizard):
    """Three-step profile setup run once after sign-up.

    1. Personal information, 2. contact & location, 3. education.
    """

    total_steps = 3

    STEP_FIELDS: dict[int, tuple[str, ...]] = {
        1: ("firstName", "lastName", "dateOfBirth"),
        2: ("phone", "location"),
        3: (
            "institution",
            "degree",
            "fieldOfStudy",
            "currentYear",
            "expectedGraduation",
            "cgpa",
        ),
    }

    def __init__(
        self,
        form: dict[str, Any] | None = None,
        identity: dict[str, Any] | None = None,
    ) -> None:
        super().__init__()
        self.identity = identity or {}
        # Names prefill from the identity provider
        self.form: dict[str, Any] = {
            "firstName": self.identity.get("firstName") or "",
            "lastName": self.identity.get("lastName") or "",
        }
        self.form.update(form or {})

    def missing_fields(self, step: int) -> list[str]:
        missing = [name for name in self.STEP_FIELDS[step] if _is_blank(self.form.get(name))]
        if step == 3:
            if "currentYear" not in missing and not _parses(int, self.form["currentYear"]):
                missing.append("currentYear")
            if "cgpa" not in missing and not _parses(float, self.form["cgpa"]):
                missing.append("cgpa")
        return missing

    def profile_payload(self) -> dict[str, Any]:
        """The ``PUT /users/profile`` body built from a complete form."""
        form = self.form
        return {
            "firstName": form["firstName"],
            "lastName": form["lastName"],
            "phone": form["phone"],
            "dateOfBirth": form["dateOfBirth"],
            "location": form["location"],
            "bio": form.get("bio") or "",
            "education": {
                "institution": form["institution"],
                "degree": form["degree"],
                "fieldOfStudy": form["fieldOfStudy"],
                "currentYear": int(str(form["currentYear"]).strip()),
                "expectedGraduation": form["expectedGraduation"],
                "cgpa": float(str(form["cgpa"]).strip()),
            },
        }

    async def submit(self, token: str | None) -> dict[str, Any]:
        """Sync the user with the API, then save the full profile."""
        if not token:
            raise SignInRequired("Not authenticated")
        self.validate_all()

        await student_api.sync_user(token, self.identity or None)
        result = await student_api.update_profile(token, self.profile_payload())
        logger.info("onboarding_completed", extra={"clerk_id": self.identity.get("clerkId")})
        return result


def _parses(kind: type, value: Any) -> bool:
    try:
        kind(str(value).strip())
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Program application
# ---------------------------------------------------------------------------


class EligibilityReport(ApiModel):
    """Requirements shown on the eligibility step and the verdict."""
    requirements: list[str] = []
    eligible: bool = True
    issues: list[str] = []


class ApplicationSubmission(ApiModel):
    """The created application and where the student goes next."""
    application: Application
    next: str


class ApplicationWizard(Wizard):
    """Three-step application to one program.

    1. Eligibility check, 2. motivation letter, 3. review and terms.
    """

    total_steps = 3

    def __init__(self, program: Program) -> None:
        super().__init__()
        self.program = program
        self.eligibility: EligibilityReport | None = None
        self.motivation_letter = ""
        self.agreed_to_terms = False

    def check_eligibility(self) -> EligibilityReport:
        """List the program's requirements.

        The API decides eligibility when the application is reviewed, so the
        portal reports the requirements and lets the student proceed.
        """
        program = self.program
        requirements: list[str] = []
        if program.min_education:
            requirements.append(f"Education: {program.min_education}")
        for subject, grade in (program.required_grades or {}).items():
            requirements.append(f"{subject[:1].upper()}{subject[1:]}: Minimum grade {grade}")
        requirements.extend(program.additional_requirements)

        self.eligibility = EligibilityReport(requirements=requirements)
        return self.eligibility

    def missing_fields(self, step: int) -> list[str]:
        if step == 1:
            if self.eligibility is None or not self.eligibility.eligible:
                return ["eligibility"]
            return []
        if step == 2:
            length = len(self.motivation_letter)
            if not MOTIVATION_LETTER_MIN_LENGTH <= length <= MOTIVATION_LETTER_MAX_LENGTH:
                return ["motivationLetter"]
            return []
        return [] if self.agreed_to_terms else ["agreedToTerms"]

    def next_location(self, application: Application) -> str:
        if self.program.application_fee > 0:
            return f"/applications/{application.id}/payment"
        return f"/applications/{application.id}"

    async def submit(self, token: str | None) -> ApplicationSubmission:
        """Create the application; a fee routes the student to payment."""
        if not token:
            raise SignInRequired()
        self.validate_all()

        envelope = await student_api.create_application(
            token, self.program.id or "", self.motivation_letter
        )
        logger.info(
            "application_created",
            extra={
                "program_id": self.program.id,
                "application_id": envelope.application.id,
            },
        )
        return ApplicationSubmission(
            application=envelope.application,
            next=self.next_location(envelope.application),
        )
