"""
Lifecycle capability interfaces for objects managed by the container.

An object becomes manageable by exposing at least one of these behaviors.
The interfaces are structural: a class never has to inherit from them,
it only has to provide the named methods.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IInitializer(Protocol):
    """Interface for objects that need a one-time initialization step."""

    def init(self, ctx: Any) -> None:
        """
        Initialize the object.

        Called once by the container's init pass, synchronously and in
        registration order.

        Args:
            ctx: Cancellation context supplied by the caller, passed through as-is.

        Raises:
            Exception: Any exception stops the init pass and reaches the caller unchanged.
        """
        ...


@runtime_checkable
class IRunner(Protocol):
    """Interface for objects that have a start step."""

    def start(self, ctx: Any) -> None:
        """
        Start the object.

        Called once by the container's start pass, synchronously and in
        registration order. Long running work (serving requests, polling)
        must be handed off to a thread or task so that this call returns.

        Args:
            ctx: Cancellation context supplied by the caller, to be used for graceful shutdown.

        Raises:
            Exception: Any exception stops the start pass and reaches the caller unchanged.
        """
        ...


@runtime_checkable
class IContaineredService(IInitializer, IRunner, Protocol):
    """
    Typical service with both an initialization and a serving part.

    Annotating with this interface gives static assurance that both
    steps are present.
    """


@runtime_checkable
class IGlobalizer(Protocol):
    """
    Marker interface for arbitrary values that should be injectable.

    Objects exposing only this marker take no part in the init and start
    passes; they exist to be wired into other objects' fields.
    """

    def global_(self) -> None:
        ...


@runtime_checkable
class IPrivateAccessor(Protocol):
    """Interface for objects with an internal wiring target."""

    def private(self) -> Any:
        """
        Get the internal structure whose fields should also be wired.

        Returns:
            Object whose annotated fields are treated like the owner's own fields.
        """
        ...


class Global:
    """Mixin implementing IGlobalizer."""

    def global_(self) -> None:
        pass
