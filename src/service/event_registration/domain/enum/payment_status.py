from enum import StrEnum


class PaymentStatus(StrEnum):
    """Payment state of a registration"""

    PENDING = 'pending'
    PAID = 'paid'
    FAILED = 'failed'
    REFUNDED = 'refunded'


class PaymentRecordStatus(StrEnum):
    """State of a payment_history ledger row"""

    COMPLETED = 'completed'
    REFUNDED = 'refunded'
