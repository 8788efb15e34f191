"""View shapes for payment verification."""

from workstream.models.base import ApiModel
from workstream.models.enums import PaymentState


class Payment(ApiModel):
    """The platform's payment record."""
    id: str
    status: str
    amount: float
    paid_at: str | None = None


class Transaction(ApiModel):
    """The payment processor's view of the transaction."""
    status: str
    channel: str | None = None
    amount: float = 0


class PaymentResult(ApiModel):
    """Envelope for ``GET /payments/verify/:ref``."""
    payment: Payment
    transaction: Transaction


class PaymentOutcome(ApiModel):
    """What the payment callback shows the student."""
    state: PaymentState
    reference: str | None = None
    result: PaymentResult | None = None
    error: str | None = None
