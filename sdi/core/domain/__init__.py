"""
Domain models for registrations and wiring results.
"""

from .capabilities import (
    Capability, ContainerState, ManagedObject, UnresolvedSlot, Wiring, WiringReport, classify
)

__all__ = [
    "Capability",
    "ContainerState",
    "ManagedObject",
    "UnresolvedSlot",
    "Wiring",
    "WiringReport",
    "classify",
]
