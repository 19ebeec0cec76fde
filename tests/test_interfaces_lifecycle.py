"""
Tests for lifecycle capability interfaces.

This module tests IInitializer, IRunner, IContaineredService, IGlobalizer,
IPrivateAccessor and the Global mixin.
"""

from typing import Any

from sdi.core.interfaces.lifecycle import (
    Global, IContaineredService, IGlobalizer, IInitializer, IPrivateAccessor, IRunner
)


class InitOnly:
    """Object with an init step only."""

    def __init__(self) -> None:
        self.ctx: Any = None

    def init(self, ctx: Any) -> None:
        self.ctx = ctx


class Service:
    """Object with init and start steps."""

    def init(self, ctx: Any) -> None:
        pass

    def start(self, ctx: Any) -> None:
        pass


class Settings(Global):
    """Plain value made injectable through the Global mixin."""

    def __init__(self, dsn: str) -> None:
        self.dsn = dsn


class WithPrivate:
    def __init__(self) -> None:
        self._internal = object()

    def private(self) -> Any:
        return self._internal


class TestLifecycleInterfaces:
    """Structural checks against the capability interfaces."""

    def test_initializer_is_structural(self) -> None:
        assert isinstance(InitOnly(), IInitializer)
        assert not isinstance(InitOnly(), IRunner)

    def test_containered_service_requires_both(self) -> None:
        assert isinstance(Service(), IContaineredService)
        assert not isinstance(InitOnly(), IContaineredService)

    def test_global_mixin_makes_globalizer(self) -> None:
        settings = Settings("sqlite://")

        assert isinstance(settings, IGlobalizer)
        assert settings.global_() is None
        assert not isinstance(settings, IInitializer)

    def test_private_accessor(self) -> None:
        obj = WithPrivate()

        assert isinstance(obj, IPrivateAccessor)
        assert obj.private() is obj._internal

    def test_plain_object_has_no_capability(self) -> None:
        plain = object()

        for interface in (IInitializer, IRunner, IGlobalizer, IPrivateAccessor):
            assert not isinstance(plain, interface)
