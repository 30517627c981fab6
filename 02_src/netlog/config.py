"""Project-level configuration and path helpers."""

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = PROJECT_ROOT / "04_logs"
DEFAULT_LOG_PATH = LOGS_DIR / "app.log"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
LOG_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT = 5

# Viewer timers, seconds
DEFAULT_BLINK_PERIOD = 1.0
DEFAULT_ELAPSED_TICK = 1.0
DEFAULT_BLINK_HIGH = 6

LOGS_DIR.mkdir(parents=True, exist_ok=True)


def resolve_interval(env_value: str | None, default: float) -> float:
    """Resolve a timer interval from an env value (seconds)."""
    if not env_value:
        return default

    try:
        interval = float(env_value)
    except ValueError:
        raise ValueError(f"Invalid interval: {env_value!r}") from None

    if interval <= 0:
        raise ValueError(f"Interval must be positive, got {interval}")
    return interval


def resolve_origins(env_value: str | None) -> list[str]:
    """Parse a comma-separated CORS origin list. Empty means CORS is off."""
    if not env_value:
        return []
    return [origin.strip() for origin in env_value.split(",") if origin.strip()]
