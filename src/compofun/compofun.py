"""
``CompoFun`` is a sequence of unary functions that are applied to the same
input, producing the sequence of corresponding results.

A ``CompoFun`` is itself a unary function, so composites nest: a composite
used as a component contributes its whole result list, and a named composite
contributes its name as well.

    >>> ops = CompoFun.of({'add': lambda p: p[0] + p[1], 'mul': lambda p: p[0] * p[1]})
    >>> ops((2, 3))
    [5, 6]
    >>> ops.apply_to_map((2, 3))
    {'add': 5, 'mul': 6}
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable, Generic, Iterable

from compofun import fn
from compofun.config import FUN_NAME_FORMAT
from compofun.errors import NameCountError
from compofun.fn import A, B, C
from compofun.logger import logger
from compofun.naming import Named, NamedFun, check_callable, concat, rebind, resolve_names


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                        Composites                        ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class CompoFun(ABC, Generic[A, B]):
    functions: tuple[Callable[[A], B], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, 'functions', tuple(map(check_callable, self.functions)))

    def __call__(self, value: A) -> list[B]:
        return self.apply(value)

    def apply(self, value: A) -> list[B]:
        """Apply every component to ``value``, results in component order."""
        return [f(value) for f in self.functions]

    def apply_to_map(self, value: A) -> dict[str, B]:
        """
        Apply the components to ``value`` and key each result by the name of
        its component. When two components share a name only the last one is
        applied.
        """
        bound = dict(zip(self.names, self.functions))
        return {name: f(value) for name, f in bound.items()}

    @cached_property
    def names(self) -> tuple[str, ...]:
        return resolve_names(self.functions, FUN_NAME_FORMAT)

    def __len__(self) -> int:
        return len(self.functions)

    def __add__(self, other: Any) -> 'CompoFun[A, B]':
        if isinstance(other, CompoFun):
            return self.concat(other)
        if callable(other):
            return self.append(other)
        return NotImplemented

    def __radd__(self, other: Any) -> 'CompoFun[A, B]':
        if callable(other):
            return self.prepend(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f'{type(self).__name__}({", ".join(self.names)})'

    @abstractmethod
    def prepend(self, function: Callable[[A], B]) -> 'CompoFun[A, B]':
        raise NotImplementedError

    @abstractmethod
    def append(self, function: Callable[[A], B]) -> 'CompoFun[A, B]':
        raise NotImplementedError

    @abstractmethod
    def concat(self, other: 'CompoFun[A, B]') -> 'CompoFun[A, B]':
        raise NotImplementedError

    @abstractmethod
    def with_functions(self, functions: Iterable[Callable[[A], C]]) -> 'CompoFun[A, C]':
        """Same kind and name as ``self``, different components."""
        raise NotImplementedError

    def map_results(self, g: Callable[[B], C]) -> 'CompoFun[A, C]':
        return self.with_functions(rebind(f, fn.compose2(g, f)) for f in self.functions)

    def attempt(self) -> 'CompoFun[A, fn.Either[Exception, B]]':
        return self.with_functions(rebind(f, fn.attempt(f)) for f in self.functions)

    @staticmethod
    def of(functions: Any, name: str | None = None) -> 'CompoFun':
        """
        Build a composite from a sequence of functions, a mapping of names to
        functions, another composite or a single function. Nameless unless
        ``name`` is given.
        """
        components = components_of(functions, name)
        if name is None:
            compo: CompoFun = NamelessCompoFun(components)
        else:
            compo = NamedCompoFun(name, components)
        logger.debug('Built %r from %d function(s)', compo, len(components))
        return compo


@dataclass(frozen=True, repr=False)
class NamelessCompoFun(CompoFun[A, B]):
    functions: tuple[Callable[[A], B], ...] = ()

    def prepend(self, function: Callable[[A], B]) -> CompoFun[A, B]:
        return NamelessCompoFun((check_callable(function),) + self.functions)

    def append(self, function: Callable[[A], B]) -> CompoFun[A, B]:
        return NamelessCompoFun(self.functions + (check_callable(function),))

    def concat(self, other: CompoFun[A, B]) -> CompoFun[A, B]:
        logger.debug('Concatenating %r with %r', self, other)
        return NamelessCompoFun(concat(self.functions, other.functions))

    def with_functions(self, functions: Iterable[Callable[[A], C]]) -> CompoFun[A, C]:
        return NamelessCompoFun(tuple(functions))


@dataclass(frozen=True, repr=False)
class NamedCompoFun(Named, CompoFun[A, B]):
    name: str
    functions: tuple[Callable[[A], B], ...] = ()

    def prepend(
        self, function: Callable[[A], B], name: str | None = None
    ) -> CompoFun[A, B]:
        return NamedCompoFun(
            self.name if name is None else name,
            (check_callable(function),) + self.functions,
        )

    def append(
        self, function: Callable[[A], B], name: str | None = None
    ) -> CompoFun[A, B]:
        return NamedCompoFun(
            self.name if name is None else name,
            self.functions + (check_callable(function),),
        )

    def concat(self, other: CompoFun[A, B], name: str | None = None) -> CompoFun[A, B]:
        logger.debug('Concatenating %r with %r', self, other)
        return NamedCompoFun(
            self.name if name is None else name,
            concat(self.functions, other.functions),
        )

    def with_functions(self, functions: Iterable[Callable[[A], C]]) -> CompoFun[A, C]:
        return NamedCompoFun(self.name, tuple(functions))


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                        Factories                         ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def components_of(functions: Any, name: str | None = None) -> tuple[Callable, ...]:
    match functions:
        case CompoFun():
            return functions.functions
        case Mapping():
            return tuple(NamedFun(n, f) for n, f in functions.items())
        case _ if callable(functions):
            if name is None:
                raise NameCountError('a single function needs a name')
            return (functions,)
        case _:
            return tuple(map(check_callable, functions))
