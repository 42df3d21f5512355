"""Exceptions raised by compofun itself.

Exceptions raised by component functions are never wrapped: they propagate
from ``apply`` exactly as the component raised them.
"""


class CompoFunError(Exception):
    """Base class for every error raised by the library."""


class NotCallableError(CompoFunError, TypeError):
    def __init__(self, value: object) -> None:
        super().__init__(f'{value!r} is not callable')
        self.value = value


class NameCountError(CompoFunError, ValueError):
    """Names and functions don't line up."""


class ConfigError(CompoFunError, ValueError):
    pass
