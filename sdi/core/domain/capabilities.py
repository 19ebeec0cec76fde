"""
Domain models describing registered objects and the results of wiring.

This module defines how an object is classified by the capabilities it
exposes, the record kept for each registration, and the report produced
by a linking pass.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Any, List


class Capability(Flag):
    """Optional behaviors a managed object may expose."""
    NONE = 0
    INITIALIZER = auto()
    RUNNER = auto()
    GLOBALIZER = auto()
    PRIVATE_ACCESSOR = auto()


# Capabilities that qualify an object for registration.
REGISTRABLE = Capability.INITIALIZER | Capability.RUNNER | Capability.GLOBALIZER

_CAPABILITY_METHODS = (
    (Capability.INITIALIZER, "init"),
    (Capability.RUNNER, "start"),
    (Capability.GLOBALIZER, "global_"),
    (Capability.PRIVATE_ACCESSOR, "private"),
)


def classify(obj: Any) -> Capability:
    """
    Determine which capabilities an object exposes.

    Args:
        obj: Object to inspect

    Returns:
        Combined capability flags, Capability.NONE if there are none
    """
    capabilities = Capability.NONE
    for capability, method_name in _CAPABILITY_METHODS:
        if callable(getattr(obj, method_name, None)):
            capabilities |= capability
    return capabilities


class ContainerState(Enum):
    """Progress of a container through its bring-up sequence."""
    EMPTY = "empty"
    POPULATED = "populated"
    WIRED = "wired"
    INITIALIZED = "initialized"
    STARTED = "started"


@dataclass(eq=False)
class ManagedObject:
    """
    Registration record for a caller-owned object.

    The object is held by reference; the container never copies,
    constructs or destroys it.
    """

    obj: Any
    """The registered object itself."""

    position: int
    """Zero-based insertion position in the registry."""

    capabilities: Capability
    """Capabilities detected at registration time."""

    @property
    def name(self) -> str:
        """Human readable identifier used in logs and reports."""
        return f"{type(self.obj).__qualname__}#{self.position}"

    def has(self, capability: Capability) -> bool:
        """Check whether the object exposes the given capability."""
        return capability in self.capabilities


@dataclass(frozen=True)
class Wiring:
    """A single assignment made by the linker."""
    owner: ManagedObject
    field: str
    target: ManagedObject
    private: bool = False

    def describe(self) -> str:
        prefix = "private()." if self.private else ""
        return f"{self.owner.name}.{prefix}{self.field} -> {self.target.name}"


@dataclass(frozen=True)
class UnresolvedSlot:
    """An eligible slot for which no compatible object was registered."""
    owner: ManagedObject
    field: str
    interface: Any
    private: bool = False

    def describe(self) -> str:
        prefix = "private()." if self.private else ""
        interface_name = getattr(self.interface, "__qualname__", repr(self.interface))
        return f"{self.owner.name}.{prefix}{self.field}: {interface_name} (unresolved)"


@dataclass
class WiringReport:
    """Outcome of a linking pass."""
    wirings: List[Wiring] = field(default_factory=list)
    unresolved: List[UnresolvedSlot] = field(default_factory=list)

    def lines(self) -> List[str]:
        return [w.describe() for w in self.wirings] + [u.describe() for u in self.unresolved]
