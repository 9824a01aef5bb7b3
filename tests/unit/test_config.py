"""Unit tests for transport options and ClientConfig."""

import httpx
import pytest
from pydantic import ValidationError

from depscian.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientConfig,
    TransportSettings,
    with_base_url,
    with_http_client,
    with_timeout,
)
from depscian.exceptions import ConfigurationError


class TestTransportSettings:
    """Tests for TransportSettings and the option functions."""

    def test_defaults(self) -> None:
        settings = TransportSettings()
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.base_url == "https://api.depscian.tech/v2"
        assert settings.timeout == DEFAULT_TIMEOUT == 30.0
        assert settings.http_client is None

    def test_options_apply_in_order(self) -> None:
        settings = TransportSettings()
        for option in [
            with_base_url("https://first.example/v2"),
            with_timeout(10),
            with_base_url("https://second.example/v2"),
        ]:
            option(settings)

        assert settings.base_url == "https://second.example/v2"
        assert settings.timeout == 10

    def test_http_client_discards_earlier_timeout(self) -> None:
        custom = httpx.AsyncClient(timeout=12.0)
        settings = TransportSettings()
        with_timeout(5)(settings)
        with_http_client(custom)(settings)

        assert settings.http_client is custom
        assert settings.timeout is None

    def test_timeout_after_http_client_is_kept(self) -> None:
        custom = httpx.AsyncClient(timeout=12.0)
        settings = TransportSettings()
        with_http_client(custom)(settings)
        with_timeout(5)(settings)

        assert settings.timeout == 5
        # Caller's client is not mutated
        assert custom.timeout == httpx.Timeout(12.0)

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            with_timeout(0)(TransportSettings())

    def test_build_http_client_returns_custom(self) -> None:
        custom = httpx.AsyncClient()
        settings = TransportSettings(http_client=custom)
        assert settings.build_http_client() is custom

    def test_build_http_client_uses_timeout(self) -> None:
        client = TransportSettings(timeout=7.5).build_http_client()
        assert client.timeout == httpx.Timeout(7.5)


class TestClientConfig:
    """Tests for the declarative ClientConfig."""

    def test_defaults(self) -> None:
        config = ClientConfig(api_key="secret")
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == DEFAULT_TIMEOUT

    def test_api_key_required(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig()  # type: ignore[call-arg]

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ClientConfig(api_key="secret", timeout=0)

    def test_config_is_frozen(self) -> None:
        config = ClientConfig(api_key="secret")
        with pytest.raises(ValidationError):
            config.timeout = 5  # type: ignore[misc]

    def test_from_yaml(self, tmp_path) -> None:
        path = tmp_path / "depscian.yaml"
        path.write_text(
            "api_key: yaml-key\nbase_url: https://staging.example/v2\ntimeout: 12.5\n"
        )

        config = ClientConfig.from_yaml(path)

        assert config.api_key == "yaml-key"
        assert config.base_url == "https://staging.example/v2"
        assert config.timeout == 12.5

    def test_from_yaml_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            ClientConfig.from_yaml(tmp_path / "missing.yaml")

    def test_to_yaml_then_from_yaml(self, tmp_path) -> None:
        path = tmp_path / "saved.yaml"
        config = ClientConfig(api_key="secret", timeout=3.0)

        config.to_yaml(path)

        assert ClientConfig.from_yaml(path) == config

    def test_from_env(self) -> None:
        config = ClientConfig.from_env(
            {
                "DEPSCIAN_API_KEY": "env-key",
                "DEPSCIAN_BASE_URL": "https://env.example/v2",
                "DEPSCIAN_TIMEOUT": "4",
            }
        )

        assert config.api_key == "env-key"
        assert config.base_url == "https://env.example/v2"
        assert config.timeout == 4.0

    def test_from_env_uses_defaults(self) -> None:
        config = ClientConfig.from_env({"DEPSCIAN_API_KEY": "env-key"})
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == DEFAULT_TIMEOUT

    def test_from_env_requires_api_key(self) -> None:
        with pytest.raises(ConfigurationError, match="DEPSCIAN_API_KEY"):
            ClientConfig.from_env({})

    @pytest.mark.parametrize("timeout", ["soon", "0", "-3"])
    def test_from_env_rejects_invalid_timeout(self, timeout: str) -> None:
        with pytest.raises(ValidationError):
            ClientConfig.from_env(
                {"DEPSCIAN_API_KEY": "env-key", "DEPSCIAN_TIMEOUT": timeout}
            )

    def test_from_env_reads_process_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("DEPSCIAN_API_KEY", "process-key")
        monkeypatch.delenv("DEPSCIAN_BASE_URL", raising=False)
        monkeypatch.delenv("DEPSCIAN_TIMEOUT", raising=False)

        assert ClientConfig.from_env().api_key == "process-key"

    def test_options(self) -> None:
        config = ClientConfig(
            api_key="secret", base_url="https://example.test/v2", timeout=9
        )
        settings = TransportSettings()
        for option in config.options():
            option(settings)

        assert settings.base_url == "https://example.test/v2"
        assert settings.timeout == 9
