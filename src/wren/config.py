"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups. The environment is read exactly once, by
``AppConfig.from_env()`` at startup; request handling only ever sees the
resulting value.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import StrEnum
from pathlib import Path
from typing import Any

from wren.errors import ConfigurationError

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class CacheStrategy(StrEnum):
    """Caching mode for HTML, JS and CSS responses."""

    DEV = "dev"
    PROD = "prod"

    @classmethod
    def parse(cls, value: str | None) -> CacheStrategy:
        """Parse an environment value. Empty or missing means ``dev``."""
        if value is None or not value.strip():
            return cls.DEV
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            msg = f"Invalid cache strategy {value!r}; expected one of: {choices}"
            raise ConfigurationError(msg) from None


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(port=8080, cache_strategy=CacheStrategy.PROD)

    Relative directories are resolved against the app's ``base_dir``.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False  # Exception detail in 500 bodies

    # Caching
    cache_strategy: CacheStrategy = CacheStrategy.DEV

    # Content roots
    frontend_dir: str | Path = "frontend"
    dist_dir: str | Path = "dist"
    layout_file: str | Path = "views/layout.html"
    index_file: str = "index.html"

    # URL prefixes
    api_prefix: str = "/api/"
    dist_prefix: str = "/dist/"

    # Logging
    log_level: str = "info"

    def __post_init__(self) -> None:
        # Accept plain strings such as "prod" from callers and overrides.
        object.__setattr__(self, "cache_strategy", CacheStrategy.parse(self.cache_strategy))

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> AppConfig:
        """Build a config from environment variables plus explicit overrides.

        Recognised variables: ``CACHE_STRATEGY``, ``WREN_HOST``,
        ``WREN_PORT``, ``WREN_LOG_LEVEL``, ``WREN_DEBUG``. Overrides whose value is
        ``None`` are ignored so CLI defaults don't mask the environment.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {
            "cache_strategy": CacheStrategy.parse(env.get("CACHE_STRATEGY")),
        }
        if env.get("WREN_HOST"):
            values["host"] = env["WREN_HOST"]
        if env.get("WREN_PORT"):
            try:
                values["port"] = int(env["WREN_PORT"])
            except ValueError:
                msg = f"WREN_PORT must be an integer, got {env['WREN_PORT']!r}"
                raise ConfigurationError(msg) from None
        if env.get("WREN_LOG_LEVEL"):
            values["log_level"] = env["WREN_LOG_LEVEL"].lower()
        if env.get("WREN_DEBUG"):
            values["debug"] = env["WREN_DEBUG"].strip().lower() in _TRUTHY

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def with_base_dir(self, base_dir: str | Path) -> AppConfig:
        """Return a copy with every content path made absolute under *base_dir*."""
        base = Path(base_dir).resolve()
        return replace(
            self,
            frontend_dir=(base / self.frontend_dir).resolve(),
            dist_dir=(base / self.dist_dir).resolve(),
            layout_file=(base / self.layout_file).resolve(),
        )
