"""
Application bring-up sequencing.

This module runs the usual bootstrap order against a populated container:
link dependencies, initialize, then start.
"""

import logging
from typing import Any

from .container import Container

logger = logging.getLogger(__name__)


class ApplicationStartup:
    """
    Drives a populated container through its bring-up sequence.

    Errors raised by any phase are logged and re-raised unchanged.
    """

    def __init__(self, container: Container) -> None:
        self._container = container

    def start_application(self, ctx: Any = None) -> None:
        """
        Link, initialize and start all registered objects.

        Args:
            ctx: Cancellation context passed to every init and start call
        """
        logger.info(f"Starting application with {len(self._container)} registered objects")

        self._container.build_dependencies()
        try:
            self._container.init_required(ctx)
            self._container.start_runners(ctx)
        except Exception as e:
            logger.error(f"Application startup failed: {e}")
            raise

        logger.info("Application startup completed successfully")

    async def astart_application(self, ctx: Any = None) -> None:
        """Async variant of start_application."""
        logger.info(f"Starting application with {len(self._container)} registered objects")

        self._container.build_dependencies()
        try:
            await self._container.ainit_required(ctx)
            await self._container.astart_runners(ctx)
        except Exception as e:
            logger.error(f"Application startup failed: {e}")
            raise

        logger.info("Application startup completed successfully")

    @property
    def container(self) -> Container:
        return self._container
