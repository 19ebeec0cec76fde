"""
Core interfaces defining the capabilities a managed object can expose.
"""

from .lifecycle import (
    Global, IContaineredService, IGlobalizer, IInitializer, IPrivateAccessor, IRunner
)

__all__ = [
    "Global",
    "IContaineredService",
    "IGlobalizer",
    "IInitializer",
    "IPrivateAccessor",
    "IRunner",
]
