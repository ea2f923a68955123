"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Record related errors
# ============================================================================


class ReservedFieldError(DomainError):
    """Raised when caller-supplied extra fields collide with managed fields."""

    def __init__(self, record_kind: str, fields: list[str]) -> None:
        super().__init__(
            f"{record_kind} extra fields may not set reserved keys: "
            f"{', '.join(sorted(fields))}."
        )
        self.record_kind = record_kind
        self.fields = sorted(fields)


class InvalidRecordError(DomainError):
    """Raised when a stored mapping cannot be read back as a record."""

    def __init__(self, record_kind: str, reason: str) -> None:
        super().__init__(f"Invalid {record_kind} record: {reason}.")
        self.record_kind = record_kind
        self.reason = reason


# ============================================================================
#                           Validation related errors
# ============================================================================


class InvalidFieldSpecError(DomainError):
    """Raised when a form field spec names neither an id nor a name."""

    def __init__(self) -> None:
        super().__init__("A field spec needs an id or a name.")
