"""
Type introspection helpers used for structural matching.

These helpers answer two questions for the linker: which fields of an
object are interface typed and settable, and whether a given object
satisfies an interface.
"""

import dataclasses
import inspect
import logging
import types
from typing import (
    Annotated, Any, ClassVar, Dict, Iterator, Optional, Tuple, Union, get_args, get_origin, get_type_hints
)

from typing_extensions import Format, get_annotations, get_protocol_members, is_protocol

logger = logging.getLogger(__name__)

_NONE_TYPE = type(None)


def unwrap_annotation(annotation: Any) -> Any:
    """
    Strip Annotated and Optional wrappers from a field annotation.

    Returns the bare type, or the annotation unchanged if it is a union of
    more than one non-None type.
    """
    if get_origin(annotation) is Annotated:
        annotation = get_args(annotation)[0]

    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not _NONE_TYPE]
        if len(members) == 1:
            return unwrap_annotation(members[0])

    return annotation


def is_interface(tp: Any) -> bool:
    """Check whether a type is a Protocol or an abstract base class."""
    if not isinstance(tp, type):
        return False
    if is_protocol(tp):
        return True
    return inspect.isabstract(tp)


def implements(obj: Any, interface: type) -> bool:
    """
    Check structural compatibility of an object with an interface.

    Protocols are matched member by member; methods declared on the
    protocol must be callable on the object. Abstract base classes match
    through isinstance, or when the object's class supplies every abstract
    method.
    """
    if is_protocol(interface):
        for member in get_protocol_members(interface):
            if not hasattr(obj, member):
                return False
            if callable(getattr(interface, member, None)) and not callable(getattr(obj, member)):
                return False
        return True

    if isinstance(obj, interface):
        return True

    cls = type(obj)
    for method_name in getattr(interface, "__abstractmethods__", ()):
        attr = getattr(cls, method_name, None)
        if attr is None or getattr(attr, "__isabstractmethod__", False):
            return False
    return bool(getattr(interface, "__abstractmethods__", ()))


def _resolve_field(base: type, name: str, annotation: Any) -> Any:
    # Evaluate a single annotation in the namespace of the class declaring it
    holder = type(base.__name__, (), {
        "__annotations__": {name: annotation},
        "__module__": base.__module__,
    })
    return get_type_hints(holder, localns=dict(vars(base)), include_extras=True)[name]


def _field_annotations(cls: type) -> Dict[str, Any]:
    try:
        return get_type_hints(cls, include_extras=True)
    except (NameError, TypeError):
        pass

    # Some annotation does not resolve; resolve field by field and drop only the failures
    hints: Dict[str, Any] = {}
    for base in reversed(cls.__mro__):
        for name, annotation in get_annotations(base, format=Format.FORWARDREF).items():
            try:
                hints[name] = _resolve_field(base, name, annotation)
            except (NameError, TypeError, AttributeError) as e:
                hints.pop(name, None)
                logger.warning(
                    f"Cannot resolve type of {cls.__qualname__}.{name}: {e}; "
                    f"field is not wired")
    return hints


def _is_settable(target: Any, name: str, annotation: Any) -> bool:
    if name.startswith("_"):
        return False

    if annotation is ClassVar or get_origin(annotation) is ClassVar:
        return False

    cls = type(target)
    if dataclasses.is_dataclass(cls) and cls.__dataclass_params__.frozen:  # type: ignore[attr-defined]
        return False

    descriptor = inspect.getattr_static(cls, name, None)
    if isinstance(descriptor, property) and descriptor.fset is None:
        return False

    return True


def iter_slots(target: Any) -> Iterator[Tuple[str, type]]:
    """
    Yield the fields of an object that are eligible for wiring.

    A field is eligible when it is annotated with an interface type, is
    settable from outside the object and currently holds None.

    Yields:
        (field name, interface type) pairs in annotation order
    """
    for name, annotation in _field_annotations(type(target)).items():
        if not _is_settable(target, name, annotation):
            continue

        interface = unwrap_annotation(annotation)
        if not is_interface(interface):
            continue

        if getattr(target, name, None) is not None:
            # assigned by the caller before wiring
            continue

        yield name, interface


def qualname(tp: Optional[Any]) -> str:
    return getattr(tp, "__qualname__", repr(tp))
