from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class RuntimeEnv:
    github_token: str | None


@dataclass
class AppConfig:
    log_level: str
    log_consumers: list | None


def load_json_config(config_path: Path | None = None) -> dict:
    if config_path is None:
        config_path = Path.cwd() / "config.json"
    if config_path.exists():
        with open(config_path) as f:
            return json.load(f)
    return {}


def parse_app_config(config: dict) -> AppConfig:
    return AppConfig(
        log_level=str(config.get("LogLevel", "INFO")).upper(),
        log_consumers=config.get("LogConsumers"),
    )


def resolve_runtime_env() -> RuntimeEnv:
    return RuntimeEnv(
        github_token=os.environ.get("GITHUB_TOKEN", "").strip() or None,
    )
