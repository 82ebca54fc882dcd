from __future__ import annotations

from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from conftest import AUTHORIZED_USER_INFO, encode_token
from google_admin_mcp.cli import cli


class TestCLI:
    """Test cases for the CLI commands."""

    def setup_method(self) -> None:
        self.runner = CliRunner()

    def test_cli_help(self) -> None:
        result = self.runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Google Admin MCP Server CLI" in result.output
        assert "serve" in result.output
        assert "check-credentials" in result.output

    @patch("google_admin_mcp.cli.run")
    def test_serve_runs_stdio_server(self, mock_run: Mock) -> None:
        result = self.runner.invoke(cli, ["serve"])
        assert result.exit_code == 0
        mock_run.assert_called_once()
        assert mock_run.call_args.kwargs["transport"] == "stdio"

    def test_check_credentials_ok(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GOOGLE_TOKEN_JSON", encode_token(AUTHORIZED_USER_INFO))
        result = self.runner.invoke(cli, ["check-credentials"])
        assert result.exit_code == 0
        assert "Credentials OK (authorized_user)" in result.output

    def test_check_credentials_missing_token(self) -> None:
        result = self.runner.invoke(cli, ["check-credentials"])
        assert result.exit_code == 1
        assert "Failed to load authentication token" in result.output
