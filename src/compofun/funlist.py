"""
``FunList`` and ``FunMap``: the list-backed and dict-backed iterations.

Both are unary functions themselves, so they can hold each other: a nested
``FunList`` yields a nested list, a nested ``FunMap`` a nested dict.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, Sequence

from compofun.config import FUNMAP_NAME_FORMAT
from compofun.fn import A, B, C
from compofun.naming import check_callable, concat


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                         FunList                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


@dataclass(frozen=True)
class FunList(Generic[A, B]):
    functions: tuple[Callable[[A], B], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'functions', tuple(map(check_callable, self.functions)))

    @classmethod
    def of(cls, *functions: Callable[[A], B]) -> 'FunList[A, B]':
        return cls(functions)

    def __call__(self, value: A) -> list[B]:
        return [f(value) for f in self.functions]

    def prepend(self, function: Callable[[A], B]) -> 'FunList[A, B]':
        return FunList((function,) + self.functions)

    def __add__(self, other: Any) -> 'FunList[A, B]':
        if isinstance(other, FunList):
            return FunList(concat(self.functions, other.functions))
        return NotImplemented

    def __radd__(self, other: Any) -> 'FunList[A, B]':
        if callable(other):
            return self.prepend(other)
        return NotImplemented


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          FunMap                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class FunMap(Generic[A, B]):
    """
    Names bound to functions. Calling a ``FunMap`` returns a dict with one
    result per name, in insertion order. Merging two maps with ``+`` keeps
    the right-hand function when both define the same name.
    """

    __slots__ = ('_functions',)

    def __init__(self, functions: Mapping[str, Callable[[A], B]] | None = None) -> None:
        self._functions: dict[str, Callable[[A], B]] = {
            name: check_callable(f) for name, f in (functions or {}).items()
        }

    @classmethod
    def of(
        cls,
        functions: Mapping[str, Callable[[A], B]] | Sequence[Callable[[A], B]] = (),
    ) -> 'FunMap[A, B]':
        if isinstance(functions, Mapping):
            return cls(functions)
        return cls({FUNMAP_NAME_FORMAT.format(i): f for i, f in enumerate(functions)})

    @property
    def functions(self) -> Mapping[str, Callable[[A], B]]:
        return dict(self._functions)

    def __call__(self, value: A) -> dict[str, B]:
        return {name: f(value) for name, f in self._functions.items()}

    def __len__(self) -> int:
        return len(self._functions)

    def __eq__(self, other: object, /) -> bool:
        return isinstance(other, FunMap) and other._functions == self._functions

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'FunMap({", ".join(self._functions)})'

    def add(self, name: str, function: Callable[[A], B]) -> 'FunMap[A, B]':
        return FunMap({**self._functions, name: function})

    def __add__(self, other: Any) -> 'FunMap[A, B]':
        if isinstance(other, FunMap):
            return FunMap({**self._functions, **other._functions})
        return NotImplemented

    def map(
        self, g: Callable[[str, Callable[[A], B]], tuple[str, Callable[[A], C]]]
    ) -> 'FunMap[A, C]':
        return FunMap(dict(g(name, f) for name, f in self._functions.items()))

    def flat_map(
        self, g: Callable[[str, Callable[[A], B]], 'FunMap[A, C]']
    ) -> 'FunMap[A, C]':
        return reduce(
            lambda acc, item: acc + g(*item), self._functions.items(), FunMap()
        )
