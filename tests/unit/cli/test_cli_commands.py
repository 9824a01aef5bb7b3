"""Unit tests for CLI commands."""

from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from depscian.cli.main import app
from depscian.config import ClientConfig
from tests.conftest import MockAPI

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DEPSCIAN_API_KEY", "DEPSCIAN_BASE_URL", "DEPSCIAN_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def captured_configs(mock_api: MockAPI):
    """Route CLI clients to the mock API and record the configs they used."""
    configs: list[ClientConfig] = []

    def fake_create_client(config: ClientConfig):
        configs.append(config)
        return mock_api.client(api_key=config.api_key)

    with patch("depscian.cli.context.create_client", side_effect=fake_create_client):
        yield configs


class TestMainApp:
    """Tests for the main CLI application."""

    def test_help_output(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "Depscian" in result.stdout
        assert "player" in result.stdout
        assert "fractions" in result.stdout
        assert "families" in result.stdout

    def test_group_help(self) -> None:
        result = runner.invoke(app, ["fractions", "--help"])
        assert result.exit_code == 0
        assert "list" in result.stdout
        assert "members" in result.stdout


class TestRequestCommands:
    """Tests for commands issuing API requests."""

    def test_status(self, mock_api: MockAPI, captured_configs) -> None:
        mock_api.add("/status", json={"servers": [{"id": 1, "name": "Phoenix"}]})

        result = runner.invoke(app, ["--api-key", "cli-key", "status"])

        assert result.exit_code == 0
        assert '"name": "Phoenix"' in result.stdout
        assert mock_api.last_request.headers["X-API-Key"] == "cli-key"

    def test_player_find(self, mock_api: MockAPI, captured_configs) -> None:
        mock_api.add("/player/find", json={"name": "Nick_Name", "level": 25})

        result = runner.invoke(
            app, ["--api-key", "cli-key", "player", "find", "3", "Nick_Name"]
        )

        assert result.exit_code == 0
        assert '"level": 25' in result.stdout
        assert mock_api.last_request.url.params["nickname"] == "Nick_Name"
        assert mock_api.last_request.url.params["server_id"] == "3"

    def test_fraction_members(self, mock_api: MockAPI, captured_configs) -> None:
        mock_api.add("/fraction", json={"fraction_id": "lspd", "members": []})

        result = runner.invoke(
            app, ["--api-key", "k", "fractions", "members", "1", "lspd"]
        )

        assert result.exit_code == 0
        assert mock_api.last_request.url.params["fraction_id"] == "lspd"

    def test_family_get(self, mock_api: MockAPI, captured_configs) -> None:
        mock_api.add("/family", json={"id": 5, "name": "Corleone"})

        result = runner.invoke(app, ["--api-key", "k", "families", "get", "1", "5"])

        assert result.exit_code == 0
        assert '"Corleone"' in result.stdout

    @pytest.mark.parametrize(
        ("command", "path"),
        [
            ("online", "/online"),
            ("admins", "/admins"),
            ("leaders", "/leaders"),
            ("subleaders", "/subleaders"),
            ("ghetto", "/ghetto"),
            ("map", "/map"),
            ("sobes", "/sobes"),
        ],
    )
    def test_server_commands(
        self, mock_api: MockAPI, captured_configs, command: str, path: str
    ) -> None:
        mock_api.add(path, json={})

        result = runner.invoke(app, ["--api-key", "k", command, "2"])

        assert result.exit_code == 0
        assert mock_api.last_request.url.path == f"/v2{path}"
        assert mock_api.last_request.url.params["server_id"] == "2"

    def test_not_found_exits_with_error(
        self, mock_api: MockAPI, captured_configs
    ) -> None:
        mock_api.add("/player/find", status_code=404)

        result = runner.invoke(app, ["--api-key", "k", "player", "find", "1", "Nobody"])

        assert result.exit_code == 1
        assert "not found" in result.stdout

    def test_status_error_exits_with_error(
        self, mock_api: MockAPI, captured_configs
    ) -> None:
        mock_api.add("/online", status_code=502)

        result = runner.invoke(app, ["--api-key", "k", "online", "1"])

        assert result.exit_code == 1
        assert "Bad Gateway" in result.stdout


class TestConfiguration:
    """Tests for option, environment and config file handling."""

    def test_missing_api_key(self, captured_configs) -> None:
        result = runner.invoke(app, ["status"])

        assert result.exit_code == 1
        assert "API key required" in result.stdout
        assert captured_configs == []

    def test_api_key_from_environment(
        self, mock_api: MockAPI, captured_configs
    ) -> None:
        mock_api.add("/status", json={})

        result = runner.invoke(app, ["status"], env={"DEPSCIAN_API_KEY": "env-key"})

        assert result.exit_code == 0
        assert captured_configs[0].api_key == "env-key"

    def test_config_file_with_overrides(
        self, mock_api: MockAPI, captured_configs, tmp_path
    ) -> None:
        mock_api.add("/status", json={})
        config_path = tmp_path / "depscian.yaml"
        config_path.write_text(
            "api_key: file-key\nbase_url: https://staging.example/v2\ntimeout: 3\n"
        )

        result = runner.invoke(
            app, ["--config", str(config_path), "--timeout", "9", "status"]
        )

        assert result.exit_code == 0
        config = captured_configs[0]
        assert config.api_key == "file-key"
        assert config.base_url == "https://staging.example/v2"
        assert config.timeout == 9.0

    def test_invalid_timeout(self, captured_configs) -> None:
        result = runner.invoke(app, ["--api-key", "k", "--timeout", "0", "status"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout

    def test_config_file_must_be_mapping(self, captured_configs, tmp_path) -> None:
        config_path = tmp_path / "depscian.yaml"
        config_path.write_text("- just\n- a list\n")

        result = runner.invoke(app, ["--config", str(config_path), "status"])

        assert result.exit_code == 1
        assert "YAML mapping" in result.stdout
