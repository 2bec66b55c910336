"""Error types raised by the scoring engine."""


class HealthScoringError(Exception):
    """Base class for scoring engine errors."""


class InvalidEntryError(HealthScoringError, ValueError):
    """Raised when an input record violates its documented domain."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class MalformedDateError(HealthScoringError, ValueError):
    """Raised when a timestamp or date cannot be resolved to a calendar day."""

    def __init__(self, value: object, message: str = "not a valid date") -> None:
        super().__init__(f"{value!r}: {message}")
        self.value = value
        self.message = message
