from __future__ import annotations

import os
from dataclasses import dataclass

from crow import __version__
from crow.errors import ConfigError


@dataclass(frozen=True)
class CrowConfig:
    encoding: str = "utf-8"
    timeout: float = 10.0  # seconds, URL fetches only
    user_agent: str = f"crow/{__version__}"
    follow_redirects: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> CrowConfig:
        """Build a config from ``CROW_*`` environment variables, falling back to defaults."""
        defaults = cls()
        raw_timeout = os.environ.get("CROW_TIMEOUT")
        try:
            timeout = defaults.timeout if raw_timeout is None else float(raw_timeout)
        except ValueError as exc:
            raise ConfigError(f"CROW_TIMEOUT must be a number, got {raw_timeout!r}") from exc
        return cls(
            encoding=os.environ.get("CROW_ENCODING", defaults.encoding),
            timeout=timeout,
            user_agent=os.environ.get("CROW_USER_AGENT", defaults.user_agent),
            follow_redirects=defaults.follow_redirects,
            log_level=os.environ.get("CROW_LOG_LEVEL", defaults.log_level).upper(),
        )
