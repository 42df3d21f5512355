"""
``MultiOp``: one class for both nameless and named operation lists.

A ``MultiOp`` with a name behaves as a ``Named`` component when it is nested
inside another ``MultiOp`` or ``CompoFun``, so its results show up under that
name in ``apply_to_map``.
"""

from collections.abc import Mapping
from functools import cached_property
from typing import Any, Callable, Generic, Iterable

from compofun.config import FUN_NAME_FORMAT
from compofun.errors import NameCountError
from compofun.fn import A, B
from compofun.naming import Named, NamedFun, check_callable, concat, resolve_names


class MultiOp(Named, Generic[A, B]):
    def __init__(
        self, functions: Iterable[Callable[[A], B]] = (), name: str | None = None
    ) -> None:
        self._functions: tuple[Callable[[A], B], ...] = tuple(map(check_callable, functions))
        self._name = name

    @property
    def functions(self) -> tuple[Callable[[A], B], ...]:
        return self._functions

    @property
    def name(self) -> str | None:
        return self._name

    @staticmethod
    def of(functions: Any, name: str | None = None) -> 'MultiOp':
        match functions:
            case MultiOp():
                return MultiOp(functions.functions, name)
            case Mapping():
                return MultiOp((NamedFun(n, f) for n, f in functions.items()), name)
            case _ if callable(functions):
                if name is None:
                    raise NameCountError('a single operation needs a name')
                return MultiOp((functions,), name)
            case _:
                return MultiOp(functions, name)

    def __call__(self, value: A) -> list[B]:
        return [f(value) for f in self.functions]

    def apply_to_map(self, value: A) -> dict[str, B]:
        bound = dict(zip(self.names, self.functions))
        return {name: f(value) for name, f in bound.items()}

    @cached_property
    def names(self) -> tuple[str, ...]:
        return resolve_names(self.functions, FUN_NAME_FORMAT)

    def named(self, name: str | None) -> 'MultiOp[A, B]':
        return MultiOp(self.functions, name)

    def prepend(self, function: Callable[[A], B], name: str | None = None) -> 'MultiOp[A, B]':
        return MultiOp((function,) + self.functions, self.name if name is None else name)

    def concat(self, other: 'MultiOp[A, B]', name: str | None = None) -> 'MultiOp[A, B]':
        return MultiOp(concat(self.functions, other.functions), self.name if name is None else name)

    def __add__(self, other: Any) -> 'MultiOp[A, B]':
        if isinstance(other, MultiOp):
            return self.concat(other)
        return NotImplemented

    def __radd__(self, other: Any) -> 'MultiOp[A, B]':
        if callable(other):
            return self.prepend(other)
        return NotImplemented

    def __len__(self) -> int:
        return len(self.functions)

    def __eq__(self, other: object, /) -> bool:
        return (
            isinstance(other, MultiOp)
            and other.name == self.name
            and other.functions == self.functions
        )

    def __hash__(self) -> int:
        return hash((self.name, self.functions))

    def __repr__(self) -> str:
        return f'<{self.name}>' if self.name else f'MultiOp({", ".join(self.names)})'
