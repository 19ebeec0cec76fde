"""
Two-phase bring-up of registered objects.

Both passes walk the registry once, in insertion order, one object at a
time, and stop at the first failure. The failing object's exception is
re-raised unchanged; objects after it are left untouched.
"""

import inspect
import logging
from typing import Any

from ..core.domain.capabilities import Capability, ManagedObject
from ..core.exceptions import AsyncLifecycleInSyncPassException, ErrorKind
from .registry import Registry

logger = logging.getLogger(__name__)

_PHASES = {
    ErrorKind.INIT: (Capability.INITIALIZER, "init"),
    ErrorKind.START: (Capability.RUNNER, "start"),
}


class LifecycleOrchestrator:
    """Runs the init and start passes over a registry."""

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    def init_required(self, ctx: Any) -> None:
        """Call init(ctx) on every initializer."""
        self._run(ErrorKind.INIT, ctx)

    def start_runners(self, ctx: Any) -> None:
        """Call start(ctx) on every runner."""
        self._run(ErrorKind.START, ctx)

    async def ainit_required(self, ctx: Any) -> None:
        """Call init(ctx) on every initializer, awaiting coroutine results."""
        await self._arun(ErrorKind.INIT, ctx)

    async def astart_runners(self, ctx: Any) -> None:
        """Call start(ctx) on every runner, awaiting coroutine results."""
        await self._arun(ErrorKind.START, ctx)

    def _run(self, phase: ErrorKind, ctx: Any) -> None:
        capability, method_name = _PHASES[phase]
        logger.info(f"Running {method_name} pass")

        count = 0
        for managed in self._registry.with_capability(capability):
            logger.debug(f"Calling {managed.name}.{method_name}")
            try:
                result = getattr(managed.obj, method_name)(ctx)
            except Exception as e:
                self._log_failure(managed, method_name, e)
                raise

            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                error = AsyncLifecycleInSyncPassException(managed.obj, phase)
                self._log_failure(managed, method_name, error)
                raise error
            count += 1

        logger.info(f"Completed {method_name} pass for {count} objects")

    async def _arun(self, phase: ErrorKind, ctx: Any) -> None:
        capability, method_name = _PHASES[phase]
        logger.info(f"Running async {method_name} pass")

        count = 0
        for managed in self._registry.with_capability(capability):
            logger.debug(f"Calling {managed.name}.{method_name}")
            try:
                result = getattr(managed.obj, method_name)(ctx)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:
                self._log_failure(managed, method_name, e)
                raise
            count += 1

        logger.info(f"Completed async {method_name} pass for {count} objects")

    @staticmethod
    def _log_failure(managed: ManagedObject, method_name: str, error: Exception) -> None:
        logger.error(f"Failed to {method_name} {managed.name}: {error}")
