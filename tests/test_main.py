"""
Tests for the command-line interface.
"""

import textwrap
from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner

from sdi.application.container import Container
from sdi.infrastructure.config.models import ApplicationConfig, ContainerConfig
from sdi.main import cli, load_target

APP_MODULE = textwrap.dedent('''
    from typing import Any, Optional, Protocol

    from sdi import Container, ContainerConfig


    class Clock(Protocol):
        def now(self) -> float: ...


    class FixedClock:
        def now(self) -> float:
            return 1.0

        def init(self, ctx: Any) -> None:
            pass


    class Scheduler:
        clock: Optional[Clock] = None
        started = False

        def start(self, ctx: Any) -> None:
            Scheduler.started = True


    class Broken:
        def init(self, ctx: Any) -> None:
            raise RuntimeError("database unavailable")


    class AsyncWorker:
        ran = False

        async def start(self, ctx: Any) -> None:
            AsyncWorker.ran = True


    def build() -> Container:
        container = Container()
        container.add(Scheduler(), FixedClock())
        return container


    def build_with_config(config: ContainerConfig) -> Container:
        return Container(config)


    def build_broken() -> Container:
        container = Container()
        container.add(Broken())
        return container


    def build_async() -> Container:
        container = Container()
        container.add(AsyncWorker())
        return container


    prebuilt = Container()
    not_a_container = 42
''')


@pytest.fixture
def app_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    (tmp_path / "cli_sample_app.py").write_text(APP_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_sample_app"


class TestLoadTarget:
    """Test cases for load_target()."""

    def test_callable_target(self, app_module: str) -> None:
        container = load_target(f"{app_module}:build", ApplicationConfig())

        assert isinstance(container, Container)
        assert len(container) == 2

    def test_callable_receives_container_config(self, app_module: str) -> None:
        config = ApplicationConfig(container=ContainerConfig(warn_on_ambiguity=True))

        container = load_target(f"{app_module}:build_with_config", config)

        assert container._config is config.container

    def test_instance_target(self, app_module: str) -> None:
        import importlib

        container = load_target(f"{app_module}:prebuilt", ApplicationConfig())

        assert container is importlib.import_module(app_module).prebuilt

    @pytest.mark.parametrize("target", ["no_colon", ":build", "module:"])
    def test_malformed_target(self, target: str) -> None:
        with pytest.raises(ValueError, match="module:attribute"):
            load_target(target, ApplicationConfig())

    def test_non_container_target(self, app_module: str) -> None:
        with pytest.raises(ValueError, match="did not produce a Container"):
            load_target(f"{app_module}:not_a_container", ApplicationConfig())


@patch('sdi.main.setup_logging')
class TestMainCLI:
    """Test cases for the CLI commands."""

    def setup_method(self) -> None:
        self.runner = CliRunner()

    def test_help(self, mock_setup_logging: Mock) -> None:
        result = self.runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "Simple dependency injection" in result.output

    def test_wire_prints_assignments(self, mock_setup_logging: Mock, app_module: str) -> None:
        result = self.runner.invoke(cli, ["wire", f"{app_module}:build"])

        assert result.exit_code == 0
        assert "Scheduler#0.clock -> FixedClock#1" in result.output
        mock_setup_logging.assert_called_once()

    def test_wire_with_nothing_to_wire(self, mock_setup_logging: Mock, app_module: str) -> None:
        result = self.runner.invoke(cli, ["wire", f"{app_module}:prebuilt"])

        assert result.exit_code == 0
        assert "No interface-typed fields to wire" in result.output

    def test_wire_bad_target(self, mock_setup_logging: Mock) -> None:
        result = self.runner.invoke(cli, ["wire", "missing_module_xyz:build"])

        assert result.exit_code == 1

    def test_wire_log_level_option(self, mock_setup_logging: Mock, app_module: str) -> None:
        result = self.runner.invoke(cli, ["wire", f"{app_module}:build", "--log-level", "debug"])

        assert result.exit_code == 0
        assert mock_setup_logging.call_args.args[0].level == "DEBUG"

    def test_bringup(self, mock_setup_logging: Mock, app_module: str) -> None:
        import importlib

        result = self.runner.invoke(cli, ["bringup", f"{app_module}:build"])

        assert result.exit_code == 0
        assert "Started 2 objects" in result.output
        assert importlib.import_module(app_module).Scheduler.started is True

    def test_bringup_failure(self, mock_setup_logging: Mock, app_module: str) -> None:
        result = self.runner.invoke(cli, ["bringup", f"{app_module}:build_broken"])

        assert result.exit_code == 1

    def test_bringup_async(self, mock_setup_logging: Mock, app_module: str) -> None:
        import importlib

        result = self.runner.invoke(cli, ["bringup", f"{app_module}:build_async", "--async"])

        assert result.exit_code == 0
        assert importlib.import_module(app_module).AsyncWorker.ran is True

    def test_init_and_validate_config(self, mock_setup_logging: Mock, tmp_path: Path) -> None:
        output = tmp_path / "sdi.yaml"

        result = self.runner.invoke(cli, ["init-config", "--output", str(output)])
        assert result.exit_code == 0
        assert output.exists()

        result = self.runner.invoke(cli, ["validate-config", str(output)])
        assert result.exit_code == 0
        assert "is valid" in result.output

    def test_validate_missing_config(self, mock_setup_logging: Mock, tmp_path: Path) -> None:
        result = self.runner.invoke(cli, ["validate-config", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
