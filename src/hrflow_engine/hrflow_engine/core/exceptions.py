class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidInputError(ValidationError):
    """Raised when a calculation receives an argument outside its domain."""


class MalformedRecordError(ValidationError):
    """Raised when an attendance record contradicts itself (check-out before check-in)."""


class DivisionUndefinedError(DomainError):
    """Raised when a rate cannot be derived because its denominator is zero.

    For payroll this means the schedule yields no working days (or hours) in the
    requested month, which points at a misconfigured working-hours setup.
    """
