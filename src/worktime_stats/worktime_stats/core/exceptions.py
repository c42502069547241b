class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NoMatchingShiftsError(DomainError):
    """Raised when a statistics query finds no shifts for the employee."""


class ScheduleFormatError(DomainError):
    """Raised when a schedule file cannot be turned into shifts."""


class ScheduleHeaderError(ScheduleFormatError):
    """Header row is missing or does not follow the `<id>_Start,<id>_End` layout."""


class ScheduleRecordError(ScheduleFormatError):
    """A data row has the wrong shape."""


class ScheduleDateError(ScheduleFormatError):
    """A row date could not be parsed."""


class ScheduleTimeError(ScheduleFormatError):
    """A shift clock value could not be parsed."""
