"""
Core module containing capability interfaces, domain models and exceptions.

This module is independent of the container implementation and of any
logging or configuration concerns.
"""

from .interfaces.lifecycle import (
    Global, IContaineredService, IGlobalizer, IInitializer, IPrivateAccessor, IRunner
)
from .domain.capabilities import Capability, ContainerState
from .exceptions import ErrorKind, InvalidRegistrationException, SDIException

__all__ = [
    "Global",
    "IContaineredService",
    "IGlobalizer",
    "IInitializer",
    "IPrivateAccessor",
    "IRunner",
    "Capability",
    "ContainerState",
    "ErrorKind",
    "InvalidRegistrationException",
    "SDIException",
]
