"""Payment callback handling.

The payment provider redirects back with ``reference`` (or ``trxref``);
the portal asks the API to verify it once and reports the outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from workstream.api import student as student_api
from workstream.api.client import ApiError
from workstream.models.enums import PaymentState
from workstream.models.payment import PaymentOutcome

logger = logging.getLogger(__name__)


async def verify_callback(token: str, params: Mapping[str, str | None]) -> PaymentOutcome:
    reference = params.get("reference") or params.get("trxref")
    if not reference:
        return PaymentOutcome(state=PaymentState.failed, error="No payment reference found")

    try:
        result = await student_api.verify_payment(token, reference)
    except ApiError as exc:
        logger.error(
            "payment_verification_failed",
            extra={"reference": reference, "error_message": exc.message},
        )
        return PaymentOutcome(
            state=PaymentState.failed,
            reference=reference,
            error="Payment verification failed",
        )

    state = (
        PaymentState.success
        if result.transaction.status == "success"
        else PaymentState.pending
    )
    return PaymentOutcome(state=state, reference=reference, result=result)
