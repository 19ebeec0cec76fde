"""
Ordered registry of managed objects.

The registry classifies each object by the capabilities it exposes and
keeps a per-object compatibility table consulted by the linker.
"""

import logging
from typing import Any, Dict, Iterator, List, Tuple

from ..core.domain.capabilities import REGISTRABLE, Capability, ManagedObject, classify
from ..core.domain.typing_utils import implements
from ..core.exceptions import InvalidRegistrationException

logger = logging.getLogger(__name__)


class Registry:
    """
    Insertion-ordered collection of managed objects.

    Position is the only index; there is no lookup by name and no removal.
    """

    def __init__(self) -> None:
        self._objects: List[ManagedObject] = []
        self._compatibility: Dict[Tuple[int, type], Tuple[Any, bool]] = {}

    def register(self, *objects: Any) -> List[ManagedObject]:
        """
        Append objects to the registry.

        Every object is validated before any is appended, so a failing call
        registers nothing.

        Args:
            *objects: Caller-owned objects, held by reference

        Returns:
            Registration records of the appended objects

        Raises:
            InvalidRegistrationException: If an object exposes none of the
                initializer, runner or globalizer capabilities
        """
        classified = []
        for obj in objects:
            capabilities = classify(obj)
            if not capabilities & REGISTRABLE:
                raise InvalidRegistrationException(obj)
            classified.append((obj, capabilities))

        added = []
        for obj, capabilities in classified:
            if any(existing.obj is obj for existing in self._objects):
                logger.warning(
                    f"{type(obj).__qualname__} instance registered more than once")

            managed = ManagedObject(obj=obj, position=len(self._objects), capabilities=capabilities)
            self._objects.append(managed)
            added.append(managed)
            logger.debug(f"Registered {managed.name} with capabilities {capabilities}")

        return added

    def satisfies(self, obj: Any, interface: type) -> bool:
        """
        Check whether an object satisfies an interface.

        Results are cached per object, since instances of one type can
        differ in their data members. Each entry keeps its object so the
        id in the key cannot be reused.
        """
        key = (id(obj), interface)
        entry = self._compatibility.get(key)
        if entry is None:
            entry = (obj, implements(obj, interface))
            self._compatibility[key] = entry
        return entry[1]

    def with_capability(self, capability: Capability) -> Iterator[ManagedObject]:
        """Iterate over objects exposing a capability, in insertion order."""
        for managed in list(self._objects):
            if managed.has(capability):
                yield managed

    @property
    def objects(self) -> Tuple[ManagedObject, ...]:
        return tuple(self._objects)

    def __iter__(self) -> Iterator[ManagedObject]:
        return iter(list(self._objects))

    def __len__(self) -> int:
        return len(self._objects)
