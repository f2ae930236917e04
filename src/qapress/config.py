from __future__ import annotations

import os
import platform
import tomllib
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = {"1", "true", "yes", "on"}


def _expand(p: str) -> str:
    """Expand environment variables and ``~`` in a path string."""
    return os.path.expanduser(os.path.expandvars(p))


def _default_config_path() -> Path:
    """Get the default path for the configuration file.

    Returns:
        Path object pointing to the config.toml file location.
        - Linux/macOS: ~/.config/qapress/config.toml
        - Windows: %APPDATA%/qapress/config.toml
    """
    if platform.system().lower().startswith("win"):
        base = os.environ.get("APPDATA", str(Path.home() / "AppData" / "Roaming"))
        return Path(base) / "qapress" / "config.toml"
    return Path.home() / ".config" / "qapress" / "config.toml"


def _default_db_path() -> str:
    """Get the default path for the SQLite database file.

    Returns:
        String path to the qa.db file location.
        - Linux/macOS: ~/.local/share/qapress/qa.db
        - Windows: %LOCALAPPDATA%/qapress/qa.db
    """
    if platform.system().lower().startswith("win"):
        base = os.environ.get("LOCALAPPDATA", str(Path.home() / "AppData" / "Local"))
        return str(Path(base) / "qapress" / "qa.db")
    return str(Path.home() / ".local" / "share" / "qapress" / "qa.db")


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    """Configuration settings for the qapress service.

    Attributes:
        db_path: Path to the SQLite database file
        host: Interface the HTTP server binds to
        port: Port the HTTP server listens on
        log_level: Minimum level for the console log sink
        log_dir: Directory for rotating log files; empty disables file logging
        seed_on_start: Insert the seed questions when the server starts on an empty database
    """

    db_path: str
    host: str
    port: int
    log_level: str
    log_dir: str
    seed_on_start: bool


def load_settings() -> Settings:
    """Load settings from the configuration file and the environment.

    Sources, in order of precedence:
    1. Environment variables (highest priority)
    2. Configuration file (TOML)
    3. Default values (lowest priority)

    Environment variables supported:
        - QAPRESS_DB_PATH
        - QAPRESS_HOST
        - QAPRESS_PORT
        - QAPRESS_LOG_LEVEL
        - QAPRESS_LOG_DIR
        - QAPRESS_SEED_ON_START

    The parent directory of the database file is created if missing.
    """
    cfg_path = _default_config_path()
    data: dict = {}
    if cfg_path.exists():
        with cfg_path.open("rb") as f:
            data = tomllib.load(f) or {}

    db_path = _expand(str(data.get("db_path", _default_db_path())))
    host = str(data.get("host", "127.0.0.1"))
    port = int(data.get("port", 3000))
    log_level = str(data.get("log_level", "INFO")).upper()
    log_dir = _expand(str(data.get("log_dir", "")))
    seed_on_start = _as_bool(data.get("seed_on_start", True))

    # Environment overrides; ignore empty values.
    env_db_path = os.environ.get("QAPRESS_DB_PATH")
    env_host = os.environ.get("QAPRESS_HOST")
    env_log_level = os.environ.get("QAPRESS_LOG_LEVEL")
    env_log_dir = os.environ.get("QAPRESS_LOG_DIR")
    env_seed = os.environ.get("QAPRESS_SEED_ON_START")

    if env_db_path:
        db_path = _expand(env_db_path)
    if env_host:
        host = env_host
    if env_log_level:
        log_level = env_log_level.upper()
    if env_log_dir:
        log_dir = _expand(env_log_dir)
    if env_seed:
        seed_on_start = _as_bool(env_seed)
    try:
        port = int(os.environ.get("QAPRESS_PORT", str(port)))
    except ValueError:
        pass

    Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return Settings(
        db_path=db_path,
        host=host,
        port=port,
        log_level=log_level,
        log_dir=log_dir,
        seed_on_start=seed_on_start,
    )
