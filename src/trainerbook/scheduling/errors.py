"""Scheduling error taxonomy.

Validation errors subclass ``ValueError`` so plain callers can catch them the
usual way; the API layer maps every ``SchedulingError`` to an HTTP status.
"""


class SchedulingError(Exception):
    """Base class for all scheduling failures."""

    status_code: int = 400


class MalformedTime(SchedulingError, ValueError):
    status_code = 422


class MalformedDate(SchedulingError, ValueError):
    status_code = 422


class InvalidMinutes(SchedulingError, ValueError):
    status_code = 422


class InvalidInterval(SchedulingError, ValueError):
    status_code = 422


class InvalidDuration(SchedulingError, ValueError):
    status_code = 422


class InvalidWindowKind(SchedulingError, ValueError):
    status_code = 422


class NotFound(SchedulingError, LookupError):
    status_code = 404


class Unauthorized(SchedulingError, PermissionError):
    status_code = 403


class OperationTokenConflict(SchedulingError):
    """An operation token was replayed against a different trainer."""

    status_code = 409


class StorageUnavailable(SchedulingError, RuntimeError):
    status_code = 503
