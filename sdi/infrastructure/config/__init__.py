"""
Configuration loading and models.
"""

from .loader import ConfigLoader
from .models import ApplicationConfig, ContainerConfig, LoggingConfig

__all__ = [
    "ApplicationConfig",
    "ConfigLoader",
    "ContainerConfig",
    "LoggingConfig",
]
