"""
Exception types raised by the container itself.

Failures raised by a managed object's own init or start step are never
wrapped: they reach the caller exactly as the object raised them.
"""

from enum import Enum
from typing import Any, Optional


class ErrorLevel(Enum):
    """Error level definitions"""
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"


class ErrorKind(Enum):
    """Kinds of failure the container can report."""
    INVALID_REGISTRATION = "INVALID_REGISTRATION"
    INIT = "INIT"
    START = "START"
    ASYNC_IN_SYNC_PASS = "ASYNC_IN_SYNC_PASS"


class SDIException(Exception):
    """Base class for container exceptions"""

    def __init__(self, message: str, error_code: Optional[ErrorKind] = None,
                 level: ErrorLevel = ErrorLevel.ERROR):
        self.message = message
        self.error_code = error_code
        self.level = level
        super().__init__(self.message)


class InvalidRegistrationException(SDIException):
    """
    Raised when an object exposing none of init, start or global_ is added.

    This signals misuse of the container rather than a runtime condition.
    """

    def __init__(self, obj: Any):
        super().__init__(
            f"{type(obj).__qualname__} does not implement IRunner, IInitializer or IGlobalizer interfaces",
            ErrorKind.INVALID_REGISTRATION,
            ErrorLevel.CRITICAL)
        self.obj = obj


class AsyncLifecycleInSyncPassException(SDIException):
    """Raised when a synchronous pass gets an awaitable back from init or start."""

    def __init__(self, obj: Any, phase: ErrorKind):
        method, async_pass = (("init", "ainit_required") if phase is ErrorKind.INIT
                              else ("start", "astart_runners"))
        super().__init__(
            f"{type(obj).__qualname__}.{method} returned an awaitable; use {async_pass} instead",
            ErrorKind.ASYNC_IN_SYNC_PASS)
        self.obj = obj
        self.phase = phase
