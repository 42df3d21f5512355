#
#  _____                 _   _                   _
# |  ___|   _ _ __   ___| |_(_) ___  _ __   __ _| |
# | |_ | | | | '_ \ / __| __| |/ _ \| '_ \ / _` | |
# |  _|| |_| | | | | (__| |_| | (_) | | | | (_| | |
# |_|   \__,_|_| |_|\___|\__|_|\___/|_| |_|\__,_|_|
#

"""Small functional building blocks shared by the composites."""

from abc import ABC, abstractmethod
from functools import reduce
from typing import Callable, Generic, TypeVar


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          Types                           ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛

A = TypeVar('A')  # Input type
B = TypeVar('B')  # Result type
C = TypeVar('C')
E = TypeVar('E', bound=BaseException)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                        Functions                         ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def compose2(f: Callable[[B], C], g: Callable[[A], B]) -> Callable[[A], C]:
    def inner(x: A) -> C:
        return f(g(x))

    return inner


def identity(value: A) -> A:
    return value


def compose(*fn: Callable) -> Callable:
    return reduce(compose2, fn, identity)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          Monads                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class Either(ABC, Generic[E, B]):
    """Outcome of a component call: ``Right`` holds a result, ``Left`` the error."""

    __slots__ = ()

    def is_left(self) -> bool:
        return not self.is_right()

    @property
    @abstractmethod
    def value(self) -> E | B:
        raise NotImplementedError

    @abstractmethod
    def is_right(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def map(self, func: Callable[[B], C]) -> 'Either[E, B] | Either[E, C]':
        raise NotImplementedError

    @abstractmethod
    def get_or_else(self, default: C) -> B | C:
        raise NotImplementedError

    def __eq__(self, other: object, /) -> bool:
        return type(other) is type(self) and other.value == self.value

    def __hash__(self) -> int:
        return hash((type(self), self.value))

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.value!r})'


class Left(Either[E, B]):
    __slots__ = ('_error',)

    def __init__(self, error: E) -> None:
        self._error = error

    @property
    def value(self) -> E:
        return self._error

    def is_right(self) -> bool:
        return False

    def map(self, func: Callable[[B], C]) -> Either[E, B]:
        return self

    def get_or_else(self, default: C) -> C:
        return default

    def __eq__(self, other: object, /) -> bool:
        # Exceptions compare by identity, so compare their type and args
        if not isinstance(other, Left):
            return False
        mine, theirs = self.value, other.value
        if isinstance(mine, BaseException) and isinstance(theirs, BaseException):
            return type(mine) is type(theirs) and mine.args == theirs.args
        return mine == theirs

    def __hash__(self) -> int:
        return hash((Left, type(self.value)))


class Right(Either[E, B]):
    __slots__ = ('_value',)

    def __init__(self, value: B) -> None:
        self._value = value

    @property
    def value(self) -> B:
        return self._value

    def is_right(self) -> bool:
        return True

    def map(self, func: Callable[[B], C]) -> Either[E, C]:
        return Right(func(self._value))

    def get_or_else(self, default: C) -> B:
        return self._value


def attempt(function: Callable[[A], B]) -> Callable[[A], Either[Exception, B]]:
    """Turn a raising function into one that returns ``Left(error)`` instead."""

    def inner(value: A) -> Either[Exception, B]:
        try:
            return Right(function(value))
        except Exception as error:
            return Left(error)

    return inner
