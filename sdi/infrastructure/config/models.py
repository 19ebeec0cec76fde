"""
Configuration models and data structures.

This module defines the configuration models used by the container, the
logging setup and the command line interface.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ContainerConfig:
    """Dependency linking options."""
    warn_on_ambiguity: bool = False
    log_unresolved: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = ("{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
                   "{name}:{function}:{line} - {message}")
    log_directory: str = "logs"
    max_file_size: str = "10MB"
    backup_count: int = 5
    console_enabled: bool = True
    file_enabled: bool = False


@dataclass
class ApplicationConfig:
    """Main application configuration."""

    name: str = "sdi"
    version: str = "0.1.0"
    debug: bool = False

    container: ContainerConfig = field(default_factory=ContainerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    config_file_path: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate_logging()

    def _validate_logging(self) -> None:
        """Validate logging values."""
        if self.logging.level.upper() not in _LOG_LEVELS:
            raise ValueError(
                f"Log level must be one of {', '.join(_LOG_LEVELS)}, got {self.logging.level}")

        if self.logging.backup_count < 0:
            raise ValueError(
                f"Log backup count must not be negative, got {self.logging.backup_count}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ApplicationConfig':
        """Create configuration from dictionary."""
        return cls(
            name=data.get('name', 'sdi'),
            version=data.get('version', '0.1.0'),
            debug=data.get('debug', False),
            container=ContainerConfig(**data.get('container', {})),
            logging=LoggingConfig(**data.get('logging', {})),
            config_file_path=data.get('config_file_path'),
        )
