"""Environment-driven settings for the guides service."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from guides_api.exceptions import ConfigurationError

ENV_PREFIX = "GUIDES_API_"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# Route tree shipped inside the package
DEFAULT_ROUTES_DIR = Path(__file__).resolve().parent / "routes"


@dataclass(frozen=True)
class Settings:
    """Runtime settings.

    Attributes:
        host: Interface the entry point binds to.
        port: TCP port the entry point binds to.
        log_level: Standard logging level name (DEBUG, INFO, ...).
        prefix: URL prefix for every route, empty or starting with "/".
        routes_dir: Route tree to load.
    """

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    prefix: str = ""
    routes_dir: Path = field(default=DEFAULT_ROUTES_DIR)

    @classmethod
    def from_env(cls, *, env_file: str | Path | None = None) -> "Settings":
        """Build settings from GUIDES_API_* environment variables.

        The .env file in the working directory (or env_file, if given) is
        loaded first; parent directories are not searched. Variables
        already set in the environment win.

        Raises:
            ConfigurationError: If any variable has an invalid value.
        """
        load_dotenv(env_file or Path.cwd() / ".env")

        return cls(
            host=_parse_host(_env("HOST", cls.host)),
            port=_parse_port(_env("PORT", str(cls.port))),
            log_level=_parse_log_level(_env("LOG_LEVEL", cls.log_level)),
            prefix=_parse_prefix(_env("PREFIX", cls.prefix)),
            routes_dir=_parse_routes_dir(_env("ROUTES_DIR", str(DEFAULT_ROUTES_DIR))),
        )


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default).strip()


def _parse_host(raw: str) -> str:
    if not raw:
        raise ConfigurationError(f"{ENV_PREFIX}HOST must not be empty")
    return raw


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}PORT must be an integer, got '{raw}'") from None
    if not 1 <= port <= 65535:
        raise ConfigurationError(f"{ENV_PREFIX}PORT must be between 1 and 65535, got '{raw}'")
    return port


def _parse_log_level(raw: str) -> str:
    level = raw.upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(f"{ENV_PREFIX}LOG_LEVEL is not a logging level: '{raw}'")
    return level


def _parse_prefix(raw: str) -> str:
    prefix = raw.rstrip("/")
    if prefix and not prefix.startswith("/"):
        raise ConfigurationError(f"{ENV_PREFIX}PREFIX must start with '/', got '{raw}'")
    return prefix


def _parse_routes_dir(raw: str) -> Path:
    # Path("") would silently mean the working directory
    if not raw:
        raise ConfigurationError(f"{ENV_PREFIX}ROUTES_DIR must not be empty")
    return Path(raw)
