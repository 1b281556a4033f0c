"""Environment-driven settings and their resolvers."""

import os

DEFAULT_POLL_INTERVAL = 1.0
DEFAULT_LOG_LEVEL = "WARNING"

POLL_INTERVAL_ENV = "STACKWATCH_POLL_INTERVAL"
LOG_FILE_ENV = "STACKWATCH_LOG_FILE"


def resolve_poll_interval(env_value: str | float | None = None) -> float:
    """Resolve the polling interval in seconds."""
    if env_value is None:
        env_value = os.getenv(POLL_INTERVAL_ENV)
    if env_value is None or env_value == "":
        return DEFAULT_POLL_INTERVAL

    try:
        interval = float(env_value)
    except ValueError as e:
        raise ValueError(f"{POLL_INTERVAL_ENV} must be a number, got {env_value!r}") from e

    if interval <= 0:
        raise ValueError(f"{POLL_INTERVAL_ENV} must be positive, got {interval}")
    return interval


def resolve_region(env_value: str | None = None) -> str | None:
    """Resolve the default AWS region; None lets botocore decide."""
    return env_value or os.getenv("AWS_REGION") or os.getenv("AWS_DEFAULT_REGION") or None


def resolve_log_level(env_value: str | None = None) -> str:
    level = (env_value or os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
    if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ValueError(f"LOG_LEVEL must be a standard level name, got {level!r}")
    return level


def resolve_log_file(env_value: str | None = None) -> str | None:
    return env_value or os.getenv(LOG_FILE_ENV) or None
