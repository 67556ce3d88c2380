from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

_TRUE_WORDS = frozenset({"1", "true", "yes", "on"})
_FALSE_WORDS = frozenset({"0", "false", "no", "off"})


@dataclass
class AppConfig:
    log_level: str
    log_file: str | None
    kind: str | None
    strict: bool
    show_unknown: bool


def load_json_config(path: Path | None = None) -> dict:
    config_path = path or Path.cwd() / "config.json"
    if config_path.exists():
        with open(config_path) as f:
            return json.load(f)
    return {}


def _to_bool(value: object, default: bool = False) -> bool:
    if value is None:
        return default
    if not isinstance(value, str):
        return bool(value)
    word = value.strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    return default


def _setting(env: dict[str, str], config: dict, env_var: str, key: str, default: object = None) -> object:
    if env.get(env_var):
        return env[env_var]
    return config.get(key, default)


def parse_app_config(config: dict, environ: dict[str, str] | None = None) -> AppConfig:
    env = os.environ if environ is None else environ
    log_file = _setting(env, config, "SNSS_LOG_FILE", "LogFile")
    kind = _setting(env, config, "SNSS_KIND", "Kind")
    return AppConfig(
        log_level=str(_setting(env, config, "SNSS_LOG_LEVEL", "LogLevel", "INFO")).upper(),
        log_file=str(log_file) if log_file else None,
        kind=str(kind).strip().lower() if kind else None,
        strict=_to_bool(_setting(env, config, "SNSS_STRICT", "Strict"), default=False),
        show_unknown=_to_bool(config.get("ShowUnknown"), default=False),
    )
