"""Tests for server entry point and async server."""

import logging
import sys

import pytest
from unittest.mock import patch

from naver_maps_mcp.config import Settings
from naver_maps_mcp.server import configure_logging

CREDENTIALS = {"NAVER_CLIENT_ID": "test-client-id", "NAVER_CLIENT_SECRET": "test-client-secret"}


@pytest.fixture(autouse=True)
def keep_root_logging():
    """main() reconfigures the root logger; leave pytest's handlers alone."""
    with patch("naver_maps_mcp.server.configure_logging") as configure:
        yield configure


class TestAsyncServer:
    def test_mcp_exists(self):
        from naver_maps_mcp.async_server import mcp

        assert mcp is not None

    def test_client_exists(self):
        from naver_maps_mcp.async_server import client

        assert client is not None

    def test_mcp_has_tools(self):
        from naver_maps_mcp.async_server import mcp

        tools = mcp.get_tools()
        assert len(tools) >= 8

    def test_dispatcher_matches_tool_list(self):
        from naver_maps_mcp.async_server import dispatcher
        from naver_maps_mcp.constants import ALL_TOOLS

        assert sorted(dispatcher.tool_names) == sorted(ALL_TOOLS)


class TestServerModule:
    def test_mcp_same_as_async_server(self):
        from naver_maps_mcp.async_server import mcp as async_mcp
        from naver_maps_mcp.server import mcp as server_mcp

        assert async_mcp is server_mcp

    def test_main_exists(self):
        from naver_maps_mcp.server import main

        assert callable(main)

    @patch("naver_maps_mcp.server.client")
    @patch("naver_maps_mcp.server.mcp")
    def test_main_stdio_mode(self, mock_mcp, mock_client):
        from naver_maps_mcp.server import main

        with patch.dict("os.environ", CREDENTIALS, clear=True):
            main([])
        mock_mcp.run.assert_called_once_with(stdio=True)
        settings = mock_client.reload.call_args.args[0]
        assert settings.client_id == "test-client-id"

    @patch("naver_maps_mcp.server.client")
    @patch("naver_maps_mcp.server.mcp")
    def test_stdio_without_credentials_exits(self, mock_mcp, mock_client):
        from naver_maps_mcp.server import main

        with patch.dict("os.environ", {}, clear=True), pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
        mock_mcp.run.assert_not_called()

    @patch("naver_maps_mcp.server.client")
    @patch("naver_maps_mcp.server.mcp")
    def test_main_http_mode(self, mock_mcp, mock_client):
        from naver_maps_mcp.server import main

        with patch.dict("os.environ", CREDENTIALS, clear=True):
            main(["--web", "--port=4000"])
        mock_mcp.run.assert_called_once_with(host="localhost", port=4000, stdio=False)

    @patch("naver_maps_mcp.server.client")
    @patch("naver_maps_mcp.server.mcp")
    def test_http_port_from_env(self, mock_mcp, mock_client):
        from naver_maps_mcp.server import main

        with patch.dict("os.environ", {**CREDENTIALS, "PORT": "8123"}, clear=True):
            main(["--web"])
        mock_mcp.run.assert_called_once_with(host="localhost", port=8123, stdio=False)

    @patch("naver_maps_mcp.server.client")
    @patch("naver_maps_mcp.server.mcp")
    def test_http_default_port(self, mock_mcp, mock_client):
        from naver_maps_mcp.server import main

        with patch.dict("os.environ", CREDENTIALS, clear=True):
            main(["--web", "--host", "0.0.0.0"])
        mock_mcp.run.assert_called_once_with(host="0.0.0.0", port=3000, stdio=False)

    @patch("naver_maps_mcp.server.client")
    @patch("naver_maps_mcp.server.mcp")
    def test_http_without_credentials_starts(self, mock_mcp, mock_client, caplog):
        from naver_maps_mcp.server import main

        with patch.dict("os.environ", {}, clear=True), caplog.at_level(logging.WARNING):
            main(["--web"])
        mock_mcp.run.assert_called_once()
        assert "NAVER_CLIENT_ID" in caplog.text

    @patch("naver_maps_mcp.server.client")
    @patch("naver_maps_mcp.server.mcp")
    def test_debug_flag(self, mock_mcp, mock_client):
        from naver_maps_mcp.server import main

        with patch.dict("os.environ", CREDENTIALS, clear=True):
            main(["--debug"])
        settings = mock_client.reload.call_args.args[0]
        assert settings.log_level == "debug"
        assert settings.debug is True
        assert settings.logging_level == logging.DEBUG

    @patch("naver_maps_mcp.server.client")
    @patch("naver_maps_mcp.server.mcp")
    def test_transport_failure_exits(self, mock_mcp, mock_client):
        from naver_maps_mcp.server import main

        mock_mcp.run.side_effect = OSError("address already in use")
        with patch.dict("os.environ", CREDENTIALS, clear=True), pytest.raises(SystemExit) as exc:
            main(["--web"])
        assert exc.value.code == 1

    @patch("naver_maps_mcp.server.client")
    @patch("naver_maps_mcp.server.mcp")
    def test_unexpected_failure_exits(self, mock_mcp, mock_client):
        from naver_maps_mcp.server import main

        mock_mcp.run.side_effect = RuntimeError("boom")
        with patch.dict("os.environ", CREDENTIALS, clear=True), pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1

    @patch("naver_maps_mcp.server.client")
    @patch("naver_maps_mcp.server.mcp")
    def test_keyboard_interrupt_is_clean(self, mock_mcp, mock_client):
        from naver_maps_mcp.server import main

        mock_mcp.run.side_effect = KeyboardInterrupt
        with patch.dict("os.environ", CREDENTIALS, clear=True):
            main([])

    def test_help_exits_zero(self, capsys):
        from naver_maps_mcp.server import main

        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "--web" in out
        assert "Naver Maps geocoding & directions MCP Server" in out


class TestConfigureLogging:
    def test_logs_to_stderr(self):
        with patch("logging.basicConfig") as basic_config:
            configure_logging(Settings(debug=True))
        kwargs = basic_config.call_args.kwargs
        assert kwargs["level"] == logging.DEBUG
        assert kwargs["stream"] is sys.stderr
