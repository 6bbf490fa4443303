from prometheus_client import Counter


class RegistrationMetrics:
    """
    Business counters for the registration platform

    Exposed on /metrics through the default prometheus registry.
    """

    def __init__(self):
        # ========== Registration Metrics ==========
        self.registrations_created = Counter(
            'registrations_created_total',
            'Total registrations created',
            ['event_id'],
        )

        # ========== Payment Metrics ==========
        self.payments_processed = Counter(
            'payments_processed_total',
            'Total simulated payments completed',
            ['payment_method'],
        )

        self.payment_refunds = Counter(
            'payment_refunds_total',
            'Total refunds issued by admins',
        )

        # ========== Auth Metrics ==========
        self.auth_failures = Counter(
            'auth_failures_total',
            'Rejected logins and bearer tokens',
            ['reason'],  # reason: login/no_token/invalid_token/unknown_principal
        )

    # ========== Helper Methods ==========

    def record_registration(self, *, event_id: object) -> None:
        self.registrations_created.labels(event_id=str(event_id)).inc()

    def record_payment(self, *, payment_method: str) -> None:
        self.payments_processed.labels(payment_method=payment_method).inc()

    def record_refund(self) -> None:
        self.payment_refunds.inc()

    def record_auth_failure(self, *, reason: str) -> None:
        self.auth_failures.labels(reason=reason).inc()


# Global metrics instance
metrics = RegistrationMetrics()
