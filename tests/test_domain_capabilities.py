"""
Tests for capability classification and wiring report models.
"""

from typing import Any

from sdi.core.domain.capabilities import (
    REGISTRABLE, Capability, ManagedObject, UnresolvedSlot, Wiring, WiringReport, classify
)
from sdi.core.interfaces.lifecycle import Global


class Full:
    def init(self, ctx: Any) -> None:
        pass

    def start(self, ctx: Any) -> None:
        pass

    def private(self) -> Any:
        return None


class Marker(Global):
    pass


class NotCallable:
    init = "not a method"


class TestClassify:
    """Test cases for classify()."""

    def test_all_capabilities(self) -> None:
        caps = classify(Full())

        assert Capability.INITIALIZER in caps
        assert Capability.RUNNER in caps
        assert Capability.PRIVATE_ACCESSOR in caps
        assert Capability.GLOBALIZER not in caps

    def test_globalizer_only(self) -> None:
        assert classify(Marker()) == Capability.GLOBALIZER

    def test_non_callable_attribute_does_not_count(self) -> None:
        assert classify(NotCallable()) == Capability.NONE

    def test_private_accessor_alone_is_not_registrable(self) -> None:
        assert not Capability.PRIVATE_ACCESSOR & REGISTRABLE
        assert Capability.GLOBALIZER & REGISTRABLE


class TestReportModels:
    """Test cases for ManagedObject, Wiring and UnresolvedSlot."""

    def test_managed_object_name_and_has(self) -> None:
        managed = ManagedObject(obj=Full(), position=3, capabilities=classify(Full()))

        assert managed.name == "Full#3"
        assert managed.has(Capability.RUNNER)
        assert not managed.has(Capability.GLOBALIZER)

    def test_managed_objects_compare_by_identity(self) -> None:
        obj = Full()
        first = ManagedObject(obj=obj, position=0, capabilities=Capability.INITIALIZER)
        second = ManagedObject(obj=obj, position=0, capabilities=Capability.INITIALIZER)

        assert first != second

    def test_report_lines(self) -> None:
        owner = ManagedObject(obj=Full(), position=0, capabilities=Capability.INITIALIZER)
        target = ManagedObject(obj=Marker(), position=1, capabilities=Capability.GLOBALIZER)

        report = WiringReport()
        report.wirings.append(Wiring(owner=owner, field="marker", target=target))
        report.wirings.append(Wiring(owner=owner, field="inner", target=target, private=True))
        report.unresolved.append(UnresolvedSlot(owner=owner, field="missing", interface=Marker))

        assert report.lines() == [
            "Full#0.marker -> Marker#1",
            "Full#0.private().inner -> Marker#1",
            "Full#0.missing: Marker (unresolved)",
        ]
