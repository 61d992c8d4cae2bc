"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import Callable, Optional, Sequence, TypeVar

from notionarchive.errors import ConfigurationError, MissingConfigurationError

T = TypeVar("T")


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank."""

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = os.getenv(name)
        if value is None or not value.strip():
            missing.append(name)
            continue
        values[name] = value

    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(f"Missing configuration for: {missing_list}")

    return values


def optional_env(name: str) -> Optional[str]:
    """Return a stripped environment variable, or None when unset/blank."""
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def optional_env_as(name: str, convert: Callable[[str], T], default: T) -> T:
    """Convert an optional environment variable, raising ConfigurationError if invalid."""
    raw = optional_env(name)
    if raw is None:
        return default
    try:
        return convert(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"Invalid value for {name}: {raw!r}",
            details={"name": name, "value": raw},
            cause=exc,
        ) from exc
