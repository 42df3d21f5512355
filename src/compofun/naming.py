"""
Name bindings for component functions.

Every component of a composite has a name: the explicit one when the
component is ``Named``, otherwise a positional default built from its
0-based index within the collection that holds it.
"""

from functools import reduce
from typing import Callable, Generic, Iterable

from compofun.config import FUN_NAME_FORMAT
from compofun.errors import NotCallableError
from compofun.fn import A, B


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                        Components                        ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class Named:
    """Mixin for anything that carries its own ``name``."""

    name: str

    def __repr__(self) -> str:
        return f'<{self.name}>'


class Fun(Generic[A, B]):
    __slots__ = ('function',)

    def __init__(self, function: Callable[[A], B]) -> None:
        self.function = check_callable(function)

    def __call__(self, value: A) -> B:
        return self.function(value)

    def __eq__(self, other: object, /) -> bool:
        return type(other) is type(self) and other.function == self.function

    def __hash__(self) -> int:
        return hash(self.function)

    def __repr__(self) -> str:
        return f'Fun({self.function!r})'


class NamedFun(Named, Fun[A, B]):
    __slots__ = ('name',)

    def __init__(self, name: str, function: Callable[[A], B]) -> None:
        super().__init__(function)
        self.name = name

    def __eq__(self, other: object, /) -> bool:
        return (
            isinstance(other, NamedFun)
            and other.name == self.name
            and other.function == self.function
        )

    def __hash__(self) -> int:
        return hash((self.name, self.function))


def fun(function: Callable[[A], B], name: str | None = None) -> Fun[A, B]:
    if name is not None:
        return NamedFun(name, function)
    if isinstance(function, Fun):
        return function
    return Fun(function)


def check_callable(function: Callable) -> Callable:
    if not callable(function):
        raise NotCallableError(function)
    return function


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          Naming                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def bound_name(function: Callable) -> str | None:
    return function.name if isinstance(function, Named) else None


def name_of(function: Callable, index: int, name_format: str = FUN_NAME_FORMAT) -> str:
    name = bound_name(function)
    return name_format.format(index) if name is None else name


def resolve_names(
    functions: Iterable[Callable], name_format: str = FUN_NAME_FORMAT
) -> tuple[str, ...]:
    return tuple(name_of(f, i, name_format) for i, f in enumerate(functions))


def rebind(function: Callable, wrapped: Callable[[A], B]) -> Callable[[A], B]:
    """Return ``wrapped`` under the name ``function`` is bound to, if any."""
    name = bound_name(function)
    return wrapped if name is None else NamedFun(name, wrapped)


def concat(*collections: Iterable[Callable]) -> tuple[Callable, ...]:
    return reduce(lambda acc, fs: acc + tuple(fs), collections, ())
