"""Configuration module — frozen dataclass loaded from YAML and environment variables."""

import logging
import os
from dataclasses import dataclass

import yaml

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class Config:
    host: str = "0.0.0.0"
    port: int = 7489
    log_dir: str = "./logs"
    create_log_dir: bool = False
    debug: bool = False
    report_write_failures: bool = False
    log_level: str = "INFO"


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, ignoring it", path)
        return {}
    logger.info("Loaded YAML config from %s", path)
    return data


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config from defaults, then YAML data, then environment variables."""
    yaml_data = yaml_data or {}

    def pick(env_name, key, default):
        value = os.environ.get(env_name)
        if value is not None:
            return value
        value = yaml_data.get(key)
        # an empty YAML value (`port:`) means "not set"
        return default if value is None else value

    log_level = str(pick("JOURNAL_LOG_LEVEL", "log_level", Config.log_level)).upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {log_level}")

    return Config(
        host=str(pick("JOURNAL_HOST", "host", Config.host)),
        port=int(pick("JOURNAL_PORT", "port", Config.port)),
        log_dir=str(pick("JOURNAL_LOG_DIR", "log_dir", Config.log_dir)),
        create_log_dir=_parse_bool(
            pick("JOURNAL_CREATE_LOG_DIR", "create_log_dir", Config.create_log_dir)
        ),
        debug=_parse_bool(pick("JOURNAL_DEBUG", "debug", Config.debug)),
        report_write_failures=_parse_bool(
            pick("JOURNAL_REPORT_WRITE_FAILURES", "report_write_failures",
                 Config.report_write_failures)
        ),
        log_level=log_level,
    )
