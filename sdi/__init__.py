"""
sdi - Simple dependency injection with ordered two-phase bring-up.

Register already constructed objects, let the container link them through
their interface-typed fields, then run init and start across all of them
in registration order.
"""

__version__ = "0.1.0"

# Public API exports
from .core.interfaces.lifecycle import (
    Global, IContaineredService, IGlobalizer, IInitializer, IPrivateAccessor, IRunner
)
from .core.domain.capabilities import Capability, ContainerState, WiringReport
from .core.exceptions import (
    AsyncLifecycleInSyncPassException, ErrorKind, InvalidRegistrationException, SDIException
)
from .application.container import Container, IContainer, new
from .application.startup import ApplicationStartup
from .infrastructure.config.models import ContainerConfig

__all__ = [
    "Global",
    "IContaineredService",
    "IGlobalizer",
    "IInitializer",
    "IPrivateAccessor",
    "IRunner",
    "Capability",
    "ContainerState",
    "WiringReport",
    "AsyncLifecycleInSyncPassException",
    "ErrorKind",
    "InvalidRegistrationException",
    "SDIException",
    "Container",
    "IContainer",
    "new",
    "ApplicationStartup",
    "ContainerConfig",
]
