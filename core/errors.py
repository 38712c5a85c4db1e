"""Custom errors with tracking IDs."""

import secrets


class LexicoidError(Exception):
    """Base error with a short tracking ID and context."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = secrets.token_hex(4)
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class ClockUnavailable(LexicoidError):
    """The clock could not produce a usable seconds-since-epoch reading."""

    def __init__(self, message, clock=None, **kwargs):
        context = kwargs.pop("context", {})
        if clock:
            context["clock"] = clock
        super().__init__(message, context=context, **kwargs)


class TimestampOutOfRange(LexicoidError, ValueError):
    """Timestamp is not an unsigned 64-bit value."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)


class LexicoidDecodeError(LexicoidError, ValueError):
    """String is not a canonical lexicoid."""

    def __init__(self, message, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)
