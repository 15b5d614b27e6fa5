class VanatimeError(Exception):
    """Base error."""

class DurationParseError(VanatimeError, ValueError):
    """Raised when a duration string does not match the duration grammar."""

class NanosecondUnitError(DurationParseError):
    """Raised when a duration string uses ns; Vana'diel time has microsecond resolution."""

class FormatDirectiveError(VanatimeError, ValueError):
    """Raised by strict formatting when a template holds unknown directives."""
