"""
Dependency injection container for linking and bringing up caller-owned objects.

This module provides a lightweight container: callers register objects they
already constructed, the container links them to each other through their
interface-typed fields, then drives an init pass followed by a start pass.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from ..core.domain.capabilities import ContainerState, WiringReport
from ..core.interfaces.lifecycle import IContaineredService
from ..infrastructure.config.models import ContainerConfig
from .lifecycle import LifecycleOrchestrator
from .linker import DependencyLinker
from .registry import Registry

logger = logging.getLogger(__name__)


class IContainer(ABC):
    """Interface for dependency injection containers."""

    @abstractmethod
    def add_service(self, *services: IContaineredService) -> None:
        """
        Add objects implementing both init and start.

        Args:
            *services: Objects statically known to be IContaineredService
        """
        pass

    @abstractmethod
    def add(self, *objects: Any) -> None:
        """
        Add objects implementing IInitializer, IRunner or IGlobalizer.

        Args:
            *objects: Objects to register, in order

        Raises:
            InvalidRegistrationException: If an object implements none of them
        """
        pass

    @abstractmethod
    def build_dependencies(self) -> None:
        """Link registered objects to each other."""
        pass

    @abstractmethod
    def init_required(self, ctx: Any) -> None:
        """
        Call init on each registered initializer.

        Raises:
            Exception: The first exception raised by an init, unchanged
        """
        pass

    @abstractmethod
    def start_runners(self, ctx: Any) -> None:
        """
        Call start on each registered runner.

        Raises:
            Exception: The first exception raised by a start, unchanged
        """
        pass


class Container(IContainer):
    """
    Container holding references to registered objects.

    Intended use is a single, ordered sequence from one thread:
    add/add_service, build_dependencies, init_required, start_runners.
    The order is not enforced and the container holds no lock.
    """

    def __init__(self, config: Optional[ContainerConfig] = None) -> None:
        self._config = config or ContainerConfig()
        self._registry = Registry()
        self._linker = DependencyLinker(self._config)
        self._orchestrator = LifecycleOrchestrator(self._registry)
        self._state = ContainerState.EMPTY
        self._wiring_report: Optional[WiringReport] = None

    def add_service(self, *services: IContaineredService) -> None:
        """Add objects implementing IContaineredService into container."""
        self.add(*services)

    def add(self, *objects: Any) -> None:
        """Add objects into container, preserving call order."""
        self._registry.register(*objects)
        if objects and self._state is ContainerState.EMPTY:
            self._state = ContainerState.POPULATED

    def build_dependencies(self) -> None:
        """
        Link registered objects.

        Should be called once after adding all objects. Fields set before
        this call are left as they are; fields with no compatible object
        stay None.
        """
        self._wiring_report = self._linker.link(self._registry)
        self._state = ContainerState.WIRED

    def init_required(self, ctx: Any) -> None:
        """Init each registered object implementing IInitializer."""
        self._orchestrator.init_required(ctx)
        self._state = ContainerState.INITIALIZED

    def start_runners(self, ctx: Any) -> None:
        """Start each registered object implementing IRunner, in the order added."""
        self._orchestrator.start_runners(ctx)
        self._state = ContainerState.STARTED

    async def ainit_required(self, ctx: Any) -> None:
        """Async variant of init_required, awaiting coroutine init methods."""
        await self._orchestrator.ainit_required(ctx)
        self._state = ContainerState.INITIALIZED

    async def astart_runners(self, ctx: Any) -> None:
        """Async variant of start_runners, awaiting coroutine start methods."""
        await self._orchestrator.astart_runners(ctx)
        self._state = ContainerState.STARTED

    @property
    def state(self) -> ContainerState:
        """Last phase completed successfully."""
        return self._state

    @property
    def wiring_report(self) -> Optional[WiringReport]:
        """Report of the most recent build_dependencies call, if any."""
        return self._wiring_report

    @property
    def registry(self) -> Registry:
        return self._registry

    def __len__(self) -> int:
        return len(self._registry)


def new(config: Optional[ContainerConfig] = None) -> Container:
    """Return an empty container."""
    return Container(config)
