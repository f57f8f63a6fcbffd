"""Runtime configuration for the pretty printer.

Purpose
-------
Hold the recognised options in one immutable object and resolve them from
explicit arguments, environment variables, and an optional ``.env`` file.

Contents
--------
* :class:`PrettyJsonLogConfig` - frozen option set shared by every record.
* :func:`enable_dotenv` / :func:`should_use_dotenv` - ``.env`` support.
* ``ENV_*`` / ``DOTENV_ENV_VAR`` - environment variable names.

System Role
-----------
Built once by the CLI (or host code) before the pipeline starts; read-only
afterwards.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from .domain.timestamps import expand_time_format

LOGGER = logging.getLogger(__name__)

ENV_TIME_FIELD_KEY = "PRETTY_JSON_LOG_TIME_FIELD_KEY"
ENV_LEVEL_FIELD_KEY = "PRETTY_JSON_LOG_LEVEL_FIELD_KEY"
ENV_MESSAGE_FIELD_KEY = "PRETTY_JSON_LOG_MESSAGE_FIELD_KEY"
ENV_OUTPUT_TIME_FMT = "PRETTY_JSON_LOG_OUTPUT_TIME_FMT"
ENV_LEVEL_STYLES = "PRETTY_JSON_LOG_LEVEL_STYLES"
DOTENV_ENV_VAR = "PRETTY_JSON_LOG_USE_DOTENV"

DEFAULT_TIME_FIELD_KEY = "time,ts,timestamp,@timestamp"
DEFAULT_LEVEL_FIELD_KEY = "level,severity,lvl"
DEFAULT_MESSAGE_FIELD_KEY = "message,msg"
DEFAULT_OUTPUT_TIME_FMT = "{d} {t}{ms}"

_TRUTHY = {"1", "true", "yes", "on"}


def split_keys(raw: str) -> tuple[str, ...]:
    """Split a comma-separated fallback list, dropping blank entries.

    Examples
    --------
    >>> split_keys("time, ts,,@timestamp")
    ('time', 'ts', '@timestamp')
    """

    return tuple(key.strip() for key in raw.split(",") if key.strip())


@dataclass(slots=True, frozen=True)
class PrettyJsonLogConfig:
    """Recognised options; fallback lists are comma-separated key names.

    Examples
    --------
    >>> config = PrettyJsonLogConfig(time_field_key="ts", output_time_fmt="{t}")
    >>> config.time_keys
    ('ts',)
    >>> config.display_time_format
    '%H:%M:%S'
    """

    time_field_key: str = DEFAULT_TIME_FIELD_KEY
    level_field_key: str = DEFAULT_LEVEL_FIELD_KEY
    message_field_key: str = DEFAULT_MESSAGE_FIELD_KEY
    output_time_fmt: str = DEFAULT_OUTPUT_TIME_FMT
    time_keys: tuple[str, ...] = field(init=False)
    level_keys: tuple[str, ...] = field(init=False)
    message_keys: tuple[str, ...] = field(init=False)
    display_time_format: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "time_keys", split_keys(self.time_field_key))
        object.__setattr__(self, "level_keys", split_keys(self.level_field_key))
        object.__setattr__(self, "message_keys", split_keys(self.message_field_key))
        object.__setattr__(self, "display_time_format", expand_time_format(self.output_time_fmt))

    @classmethod
    def from_env(
        cls,
        *,
        time_field_key: str | None = None,
        level_field_key: str | None = None,
        message_field_key: str | None = None,
        output_time_fmt: str | None = None,
    ) -> "PrettyJsonLogConfig":
        """Resolve options: explicit arguments, then environment, then defaults."""

        return cls(
            time_field_key=_resolve(time_field_key, ENV_TIME_FIELD_KEY, DEFAULT_TIME_FIELD_KEY),
            level_field_key=_resolve(level_field_key, ENV_LEVEL_FIELD_KEY, DEFAULT_LEVEL_FIELD_KEY),
            message_field_key=_resolve(message_field_key, ENV_MESSAGE_FIELD_KEY, DEFAULT_MESSAGE_FIELD_KEY),
            output_time_fmt=_resolve(output_time_fmt, ENV_OUTPUT_TIME_FMT, DEFAULT_OUTPUT_TIME_FMT),
        )


def _resolve(explicit: str | None, env_name: str, default: str) -> str:
    if explicit is not None:
        return explicit
    value = os.getenv(env_name)
    if value is None or not value.strip():
        return default
    return value


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Return whether ``.env`` loading is requested; an explicit flag wins.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value="1")
    True
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` above the working directory.

    Existing environment variables keep precedence. Returns the loaded path or
    ``None`` when no file was found.
    """

    located = find_dotenv(usecwd=True)
    if not located:
        LOGGER.debug("No .env file found from %s", Path.cwd())
        return None
    path = Path(located).resolve()
    load_dotenv(path, override=False)
    LOGGER.debug("Loaded environment from %s", path)
    return path


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_LEVEL_FIELD_KEY",
    "ENV_LEVEL_STYLES",
    "ENV_MESSAGE_FIELD_KEY",
    "ENV_OUTPUT_TIME_FMT",
    "ENV_TIME_FIELD_KEY",
    "PrettyJsonLogConfig",
    "enable_dotenv",
    "should_use_dotenv",
    "split_keys",
]
