"""
Dependency linking for registered objects.

The linker walks every registered object's interface-typed fields and
assigns the first other registered object that structurally satisfies the
field's interface. Objects exposing a private() accessor get the fields of
the returned structure wired the same way, one level deep.

Each slot is resolved independently against the whole registry, so the
order in which objects depend on each other does not matter and mutual
dependencies resolve without any cycle handling. A slot with no compatible
candidate is left as None.
"""

import logging
from typing import Any, List, Optional, Tuple

from ..core.domain.capabilities import Capability, ManagedObject, UnresolvedSlot, Wiring, WiringReport
from ..core.domain.typing_utils import iter_slots, qualname
from ..infrastructure.config.models import ContainerConfig
from .registry import Registry

logger = logging.getLogger(__name__)


class DependencyLinker:
    """Assigns registered objects into compatible unset fields."""

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._config = config or ContainerConfig()

    def link(self, registry: Registry) -> WiringReport:
        """
        Run one linking pass over the registry.

        Args:
            registry: Registry holding the objects to wire

        Returns:
            Report of the assignments made and the slots left unresolved
        """
        report = WiringReport()
        objects = registry.objects

        for owner in objects:
            self._link_target(registry, objects, owner, owner.obj, False, report)

            if owner.has(Capability.PRIVATE_ACCESSOR):
                target = owner.obj.private()
                if target is None:
                    logger.debug(f"{owner.name}.private() returned None, skipping")
                    continue
                self._link_target(registry, objects, owner, target, True, report)

        logger.info(
            f"Dependencies built: {len(report.wirings)} assigned, "
            f"{len(report.unresolved)} unresolved")
        return report

    def _link_target(self,
                     registry: Registry,
                     objects: Tuple[ManagedObject, ...],
                     owner: ManagedObject,
                     target: Any,
                     private: bool,
                     report: WiringReport) -> None:
        """Wire the eligible fields of a single target structure."""
        for field_name, interface in iter_slots(target):
            candidates = self._candidates(registry, objects, owner, target, interface)

            if not candidates:
                slot = UnresolvedSlot(owner=owner, field=field_name, interface=interface, private=private)
                report.unresolved.append(slot)
                if self._config.log_unresolved:
                    logger.info(f"No registered object satisfies {slot.describe()}")
                continue

            if len(candidates) > 1 and self._config.warn_on_ambiguity:
                logger.warning(
                    f"{owner.name}.{field_name} ({qualname(interface)}) is satisfied by "
                    f"{', '.join(c.name for c in candidates)}; using {candidates[0].name}")

            chosen = candidates[0]
            setattr(target, field_name, chosen.obj)

            wiring = Wiring(owner=owner, field=field_name, target=chosen, private=private)
            report.wirings.append(wiring)
            logger.debug(f"Wired {wiring.describe()}")

    def _candidates(self,
                    registry: Registry,
                    objects: Tuple[ManagedObject, ...],
                    owner: ManagedObject,
                    target: Any,
                    interface: type) -> List[ManagedObject]:
        """
        Collect compatible objects in insertion order.

        Stops at the first match unless ambiguity warnings are enabled.
        """
        found: List[ManagedObject] = []
        for candidate in objects:
            if candidate.position == owner.position:
                continue
            if candidate.obj is owner.obj or candidate.obj is target:
                continue
            if not registry.satisfies(candidate.obj, interface):
                continue

            found.append(candidate)
            if not self._config.warn_on_ambiguity:
                break
        return found
