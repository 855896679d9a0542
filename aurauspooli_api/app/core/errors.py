"""
Error taxonomy raised by the service layer.

The in-memory directory accepts whatever it is given: an unknown postal
code is stored as is, and a booking that references a missing service
request simply does not update the area counter.  The services are
stricter and raise the errors below instead, which the API maps to HTTP
status codes (422, 404 and 409 respectively).

All errors derive from ``ValueError`` so handlers that only care about
"bad input" can keep catching ``ValueError``.
"""


class AurauspooliError(ValueError):
    """Base class for domain errors."""


class ValidationError(AurauspooliError):
    """Input refers to something that does not make sense (e.g. an unknown postal code)."""


class NotFoundError(AurauspooliError):
    """A referenced record does not exist."""

    def __init__(self, kind: str, record_id) -> None:
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} {record_id} does not exist")


class InvalidTransitionError(ValidationError):
    """A status change is not allowed from the record's current status."""

    def __init__(self, kind: str, current: str, requested: str) -> None:
        self.kind = kind
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change {kind} status from {current} to {requested}")
