from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Where the config file lives
    config_dir: Path
    config_file: str

    # Lifecycle
    load_on_startup: bool
    save_on_shutdown: bool

    # Debug
    debug_log_requests: bool


def get_settings() -> Settings:
    raw_dir = os.getenv("CONFIG_DIR", "").strip()
    config_dir = Path(raw_dir) if raw_dir else Path.cwd()

    config_file = os.getenv("CONFIG_FILE", "config.json").strip() or "config.json"

    load_on_startup = _env_bool("CONFIG_LOAD_ON_STARTUP", True)
    # Off by default: a crash mid-request should not overwrite the file on exit.
    save_on_shutdown = _env_bool("CONFIG_SAVE_ON_SHUTDOWN", False)

    debug_log_requests = _env_bool("DEBUG_LOG_REQUESTS", False)

    return Settings(
        config_dir=config_dir,
        config_file=config_file,
        load_on_startup=load_on_startup,
        save_on_shutdown=save_on_shutdown,
        debug_log_requests=debug_log_requests,
    )
