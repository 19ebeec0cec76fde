"""
Application layer containing the container, the linker, the lifecycle
orchestrator and the startup sequence.
"""

from .container import Container, IContainer, new
from .startup import ApplicationStartup

__all__ = [
    "Container",
    "IContainer",
    "new",
    "ApplicationStartup",
]
