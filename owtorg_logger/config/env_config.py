# owtorg_logger/config/env_config.py
import os
from typing import Dict, Mapping, Optional


def get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get Env variable with optional default.

    Blank values count as unset.
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def read_env_overrides(keys: Mapping[str, str]) -> Dict[str, str]:
    """
    Collect the set variables among keys.

    Args:
        keys: Field name -> environment variable name

    Returns:
        Field name -> value, only for variables that are set
    """
    overrides: Dict[str, str] = {}
    for field, env_key in keys.items():
        value = get_env(env_key)
        if value is not None:
            overrides[field] = value
    return overrides


__all__ = ["get_env", "read_env_overrides"]
