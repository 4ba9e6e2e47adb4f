"""Environment variable helpers."""

import os

TRUTHY_VALUES = ("true", "1", "yes")


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if an environment variable is set to a truthy value.

    Args:
        env_var_name: Name of the environment variable
        default: Value used when the variable is unset

    Returns:
        True if the value is one of 'true', '1' or 'yes' (case-insensitive)
    """
    return os.getenv(env_var_name, default).strip().lower() in TRUTHY_VALUES


def get_env_int(env_var_name: str, default: int) -> int:
    """Read an integer environment variable, falling back to a default."""
    raw = os.getenv(env_var_name)
    if raw is None or not raw.strip():
        return default
    return int(raw.strip())
