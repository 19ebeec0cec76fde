"""
Command-line interface for inspecting and bringing up containers.

Targets are given as ``module:attribute`` where the attribute is either a
Container or a callable returning one. A callable with a ``config``
parameter receives the container options from the configuration file.
"""

import asyncio
import importlib
import inspect
import logging
import sys
from typing import Any, Optional

import typer

from .application.container import Container
from .application.startup import ApplicationStartup
from .infrastructure.config.loader import ConfigLoader
from .infrastructure.config.models import ApplicationConfig
from .infrastructure.logging.setup import setup_logging

cli = typer.Typer(
    name="sdi",
    help="Simple dependency injection: link registered objects and bring them up in order"
)

logger = logging.getLogger(__name__)


def load_target(target: str, config: ApplicationConfig) -> Container:
    """
    Import a container from a ``module:attribute`` reference.

    Raises:
        ValueError: If the reference is malformed or does not yield a Container
    """
    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Target must look like 'module:attribute', got {target!r}")

    obj: Any = importlib.import_module(module_name)
    for attr in attr_path.split("."):
        obj = getattr(obj, attr)

    if callable(obj) and not isinstance(obj, Container):
        if "config" in inspect.signature(obj).parameters:
            obj = obj(config=config.container)
        else:
            obj = obj()

    if not isinstance(obj, Container):
        raise ValueError(f"{target} did not produce a Container, got {type(obj).__qualname__}")
    return obj


def _prepare(config_file: Optional[str], log_level: Optional[str]) -> ApplicationConfig:
    config = ConfigLoader().load_config(config_file)
    if log_level:
        config.logging.level = log_level.upper()
    if config.debug:
        config.logging.level = "DEBUG"
    setup_logging(config.logging)
    return config


@cli.command()
def wire(
    target: str = typer.Argument(..., help="Container reference, module:attribute"),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="Configuration file path"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level"
    )
) -> None:
    """Link the target container and print every assignment."""
    try:
        config = _prepare(config_file, log_level)
        container = load_target(target, config)
        container.build_dependencies()
    except Exception as e:
        typer.echo(f"Wiring failed: {e}", err=True)
        sys.exit(1)

    report = container.wiring_report
    if report is None or not report.lines():
        typer.echo("No interface-typed fields to wire")
        return

    for line in report.lines():
        typer.echo(line)


@cli.command()
def bringup(
    target: str = typer.Argument(..., help="Container reference, module:attribute"),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="Configuration file path"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level"
    ),
    use_async: bool = typer.Option(
        False, "--async", help="Await coroutine init/start methods"
    )
) -> None:
    """Link, initialize and start the target container."""
    try:
        config = _prepare(config_file, log_level)
        container = load_target(target, config)
        startup = ApplicationStartup(container)
        if use_async:
            asyncio.run(startup.astart_application())
        else:
            startup.start_application()
    except Exception as e:
        typer.echo(f"Bring-up failed: {e}", err=True)
        sys.exit(1)

    typer.echo(f"Started {len(container)} objects")


@cli.command()
def init_config(
    output: str = typer.Option(
        "sdi.yaml", "--output", "-o", help="Output configuration file"
    ),
    format: str = typer.Option(
        "yaml", "--format", "-f", help="Configuration format (yaml/json)"
    )
) -> None:
    """Generate a default configuration file."""
    try:
        ConfigLoader().save_config(ApplicationConfig(), output, format)
        typer.echo(f"Default configuration saved to {output}")
    except Exception as e:
        typer.echo(f"Error saving configuration: {e}", err=True)
        sys.exit(1)


@cli.command()
def validate_config(
    config_file: str = typer.Argument(..., help="Configuration file to validate")
) -> None:
    """Validate a configuration file."""
    try:
        config = ConfigLoader().load_config(config_file)
        typer.echo(f"Configuration file {config_file} is valid")
        typer.echo(f"Application: {config.name} v{config.version}")
    except Exception as e:
        typer.echo(f"Configuration validation failed: {e}", err=True)
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
