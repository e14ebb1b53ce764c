from unittest.mock import MagicMock, patch

import pytest

import cli
from core.config import CONFIG_FILE, Config
from core.protocols import NullLogger


def _printed(console: MagicMock) -> str:
    return "\n".join(str(call.args[0]) for call in console.print.call_args_list)


# ---------------------------------------------------------------------------
# Informational flags
# ---------------------------------------------------------------------------


class TestInfoFlags:
    def test_config_prints_location(self):
        with (
            patch("sys.argv", ["cors-forward-proxy", "--config"]),
            patch("cli.console") as console,
            patch("cli.load_config") as load_config,
        ):
            cli.main()

        assert str(CONFIG_FILE) in _printed(console)
        load_config.assert_not_called()

    @pytest.mark.parametrize("flag", ["--help", "-h"])
    def test_help(self, flag):
        with (
            patch("sys.argv", ["cors-forward-proxy", flag]),
            patch("cli.console") as console,
            patch("cli.load_config") as load_config,
        ):
            cli.main()

        output = _printed(console)
        assert "Usage:" in output
        assert "--headless" in output
        load_config.assert_not_called()


# ---------------------------------------------------------------------------
# Bad arguments
# ---------------------------------------------------------------------------


class TestUnknownArgument:
    def test_exits_with_usage_error(self):
        with (
            patch("sys.argv", ["cors-forward-proxy", "--bogus"]),
            patch("cli.console") as console,
            patch("cli.load_config") as load_config,
            pytest.raises(SystemExit) as exc_info,
        ):
            cli.main()

        assert exc_info.value.code == 2
        output = _printed(console)
        assert "Unknown argument: --bogus" in output
        assert "Usage:" in output
        load_config.assert_not_called()


# ---------------------------------------------------------------------------
# Startup
# ---------------------------------------------------------------------------


class TestHeadlessStartup:
    def test_runs_server_without_dashboard(self):
        with (
            patch("sys.argv", ["cors-forward-proxy", "--headless"]),
            patch("cli.load_config", return_value=Config()),
            patch("cli.clear_logs") as clear_logs,
            patch("cli.write_cli_log") as write_cli_log,
            patch("cli.create_app") as create_app,
            patch("cli.Dashboard") as dashboard,
            patch("uvicorn.Server") as server,
        ):
            cli.main()

        clear_logs.assert_called_once()
        dashboard.assert_not_called()
        assert isinstance(create_app.call_args[0][1], NullLogger)
        server.return_value.run.assert_called_once()
        events = [call.args[0] for call in write_cli_log.call_args_list]
        assert events == ["STARTUP", "SHUTDOWN"]
