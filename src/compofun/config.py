"""Settings read from the environment, plus the default name formats."""

import os
from enum import StrEnum

from compofun.errors import ConfigError


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                       Name Formats                       ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛

# Positional defaults, formatted with the 0-based index of the component
FUN_NAME_FORMAT = 'Fun${:02d}'
FUNMAP_NAME_FORMAT = 'F${:02d}'
MULTIMAP_NAME_FORMAT = 'fun_{:2d}'


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                         Settings                         ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class EnvVar(StrEnum):
    LOG_LEVEL = 'COMPOFUN_LOG_LEVEL'
    MAX_WORKERS = 'COMPOFUN_MAX_WORKERS'


DEFAULTS: dict[EnvVar, str | None] = {
    EnvVar.LOG_LEVEL: 'WARNING',
    EnvVar.MAX_WORKERS: None,
}


def get_setting(var: EnvVar) -> str | None:
    return os.getenv(var.value, DEFAULTS[var])


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def check_log_level(level: str, source: str = 'level') -> str:
    """Upper-cased ``level``, or ``ConfigError`` if logging has no such level."""
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f'{source}: unknown log level {level!r}')
    return level


def log_level() -> str:
    return check_log_level(get_setting(EnvVar.LOG_LEVEL) or 'WARNING', EnvVar.LOG_LEVEL)


def max_workers() -> int | None:
    """Worker count for the shared executor, ``None`` lets the pool decide."""
    raw = get_setting(EnvVar.MAX_WORKERS)
    if raw is None or not raw.strip():
        return None
    try:
        workers = int(raw)
    except ValueError:
        raise ConfigError(f'{EnvVar.MAX_WORKERS}: expected an integer, got {raw!r}') from None
    if workers < 1:
        raise ConfigError(f'{EnvVar.MAX_WORKERS}: must be positive, got {workers}')
    return workers
