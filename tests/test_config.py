"""Tests for wren.config — AppConfig and CacheStrategy."""

from pathlib import Path

import pytest

from wren.config import AppConfig, CacheStrategy
from wren.errors import ConfigurationError


class TestCacheStrategy:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_defaults_to_dev(self, value) -> None:
        assert CacheStrategy.parse(value) is CacheStrategy.DEV

    @pytest.mark.parametrize("value", ["prod", "PROD", " prod "])
    def test_parse_is_lenient(self, value) -> None:
        assert CacheStrategy.parse(value) is CacheStrategy.PROD

    def test_unknown_value_raises(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            CacheStrategy.parse("staging")
        assert "staging" in str(exc_info.value)

    def test_is_a_string(self) -> None:
        assert CacheStrategy.DEV == "dev"


class TestAppConfig:
    def test_defaults(self) -> None:
        cfg = AppConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 3000
        assert cfg.debug is False
        assert cfg.cache_strategy is CacheStrategy.DEV
        assert cfg.frontend_dir == "frontend"
        assert cfg.dist_dir == "dist"
        assert cfg.layout_file == "views/layout.html"
        assert cfg.api_prefix == "/api/"
        assert cfg.dist_prefix == "/dist/"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("dev", CacheStrategy.DEV), ("PROD", CacheStrategy.PROD), (CacheStrategy.PROD, CacheStrategy.PROD)],
    )
    def test_cache_strategy_string_is_coerced(self, value, expected) -> None:
        assert AppConfig(cache_strategy=value).cache_strategy is expected

    def test_cache_strategy_override_is_coerced(self) -> None:
        cfg = AppConfig.from_env({"CACHE_STRATEGY": "prod"}, cache_strategy="dev")

        assert cfg.cache_strategy is CacheStrategy.DEV

    def test_unknown_cache_strategy_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            AppConfig(cache_strategy="forever")

    def test_frozen(self) -> None:
        cfg = AppConfig()

        with pytest.raises(AttributeError):
            cfg.port = 1  # type: ignore[misc]

    def test_with_base_dir_makes_paths_absolute(self, tmp_path) -> None:
        cfg = AppConfig().with_base_dir(tmp_path)

        assert cfg.frontend_dir == (tmp_path / "frontend").resolve()
        assert cfg.dist_dir == (tmp_path / "dist").resolve()
        assert cfg.layout_file == (tmp_path / "views" / "layout.html").resolve()
        assert isinstance(cfg.frontend_dir, Path)

    def test_with_base_dir_keeps_absolute_paths(self, tmp_path) -> None:
        elsewhere = tmp_path / "elsewhere"
        cfg = AppConfig(frontend_dir=elsewhere).with_base_dir(tmp_path / "site")

        assert cfg.frontend_dir == elsewhere.resolve()


class TestFromEnv:
    def test_empty_environment(self) -> None:
        cfg = AppConfig.from_env({})

        assert cfg == AppConfig()

    def test_reads_cache_strategy(self) -> None:
        cfg = AppConfig.from_env({"CACHE_STRATEGY": "prod"})

        assert cfg.cache_strategy is CacheStrategy.PROD

    def test_reads_server_settings(self) -> None:
        cfg = AppConfig.from_env(
            {
                "WREN_HOST": "0.0.0.0",
                "WREN_PORT": "8080",
                "WREN_LOG_LEVEL": "DEBUG",
                "WREN_DEBUG": "true",
            }
        )

        assert cfg.host == "0.0.0.0"
        assert cfg.port == 8080
        assert cfg.log_level == "debug"
        assert cfg.debug is True

    def test_bad_port_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="WREN_PORT"):
            AppConfig.from_env({"WREN_PORT": "eighty"})

    def test_bad_strategy_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            AppConfig.from_env({"CACHE_STRATEGY": "sometimes"})

    def test_overrides_win(self) -> None:
        cfg = AppConfig.from_env({"WREN_PORT": "8080"}, port=9000)

        assert cfg.port == 9000

    def test_none_overrides_are_ignored(self) -> None:
        cfg = AppConfig.from_env({"WREN_PORT": "8080"}, port=None, host=None)

        assert cfg.port == 8080
        assert cfg.host == "127.0.0.1"

    def test_reads_process_environment_by_default(self, monkeypatch) -> None:
        monkeypatch.setenv("CACHE_STRATEGY", "prod")

        assert AppConfig.from_env().cache_strategy is CacheStrategy.PROD
