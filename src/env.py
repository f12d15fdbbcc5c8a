import logging

from src.util.env import env_flag, optional_env

# Package defaults, overridable through the environment or a .env file
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_STRICT_COLOR = False


def get_log_level() -> str:
    """Log level for the package logger (LOGLEVEL); unknown names fall back to the default."""
    level = optional_env("LOGLEVEL")
    if not level:
        return DEFAULT_LOG_LEVEL
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def strict_color_enabled() -> bool:
    """Whether series colors must be RRGGBB hex strings (CHART_STRICT_COLOR)."""
    return env_flag("CHART_STRICT_COLOR", DEFAULT_STRICT_COLOR)
