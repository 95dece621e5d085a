from __future__ import annotations

from dataclasses import dataclass

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

_DEFAULTS: dict[str, object] = {
    "savant": {
        "base_url": "https://baseballsavant.mlb.com",
        "timeout": 60.0,
        "connect_timeout": 10.0,
        "user_agent": "Mozilla/5.0",
    },
    "season": {
        "default": 2025,
    },
    "requests": {
        "delay_seconds": 1.2,
    },
    "retry": {
        "attempts": 3,
        "max_wait_seconds": 10.0,
    },
}


@dataclass(frozen=True)
class FeedSettings:
    base_url: str
    timeout: float
    connect_timeout: float
    user_agent: str
    default_season: int
    delay_seconds: float
    retry_attempts: int = 3
    retry_max_wait: float = 10.0


def create_config(
    yaml_path: str = "pitch_analytics.yaml",
    env_prefix: str = "PITCH_ANALYTICS",
    defaults: dict[str, object] | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables, e.g. ``PITCH_ANALYTICS__SAVANT__TIMEOUT``.
        defaults: Default configuration values.
    """
    if defaults is None:
        defaults = _DEFAULTS
    return ConfigurationSet(
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    )


def load_feed_settings(cfg: ConfigurationSet | None = None) -> FeedSettings:
    if cfg is None:
        cfg = create_config()
    return FeedSettings(
        base_url=str(cfg["savant.base_url"]).rstrip("/"),
        timeout=float(str(cfg["savant.timeout"])),
        connect_timeout=float(str(cfg["savant.connect_timeout"])),
        user_agent=str(cfg["savant.user_agent"]),
        default_season=int(str(cfg["season.default"])),
        delay_seconds=float(str(cfg["requests.delay_seconds"])),
        retry_attempts=int(str(cfg["retry.attempts"])),
        retry_max_wait=float(str(cfg["retry.max_wait_seconds"])),
    )
