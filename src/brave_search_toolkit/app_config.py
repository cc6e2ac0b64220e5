from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from brave_search_toolkit.search_executor import API_KEY_ENV_VAR, DEFAULT_TIMEOUT_SECONDS


@dataclass
class RuntimeEnv:
    brave_search_api_key: str


@dataclass
class AppConfig:
    log_level: str
    log_file: str | None
    timeout_seconds: float


def load_json_config(path: Path | None = None) -> dict:
    config_path = path or Path.cwd() / "config.json"
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            return json.load(f)
    return {}


def parse_app_config(config: dict) -> AppConfig:
    return AppConfig(
        log_level=str(config.get("LogLevel", "WARNING")).upper(),
        log_file=str(config.get("LogFile") or "").strip() or None,
        timeout_seconds=float(config.get("TimeoutSeconds", DEFAULT_TIMEOUT_SECONDS)),
    )


def resolve_runtime_env() -> RuntimeEnv:
    return RuntimeEnv(brave_search_api_key=os.environ.get(API_KEY_ENV_VAR, ""))
