"""
First iterations of the pattern.

``MultiFun`` applies a fixed sequence of functions to one input; the
``MultiFunMap`` and ``MultiMapFun`` variants also keep a name per function
so results can be returned keyed by name.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Sequence

from compofun.config import MULTIMAP_NAME_FORMAT
from compofun.errors import NameCountError
from compofun.fn import A, B
from compofun.logger import logger
from compofun.naming import check_callable, concat


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                         MultiFun                         ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class MultiFun(ABC, Generic[A, B]):
    @property
    @abstractmethod
    def functions(self) -> tuple[Callable[[A], B], ...]:
        raise NotImplementedError

    def __call__(self, value: A) -> list[B]:
        return [f(value) for f in self.functions]

    @staticmethod
    def join(multifuns: Iterable['MultiFun[A, B]']) -> 'MultiFunSeq[A, B]':
        """One ``MultiFunSeq`` holding the functions of all ``multifuns``, in order."""
        return MultiFunSeq(concat(*(m.functions for m in multifuns)))

    @staticmethod
    def of(functions: Any) -> 'MultiFun':
        """``MultiFunMap`` for a mapping, ``MultiFunSeq`` for anything else."""
        if isinstance(functions, Mapping):
            return MultiFunMap(functions)
        return MultiFunSeq(tuple(functions))


@dataclass(frozen=True)
class MultiFunSeq(MultiFun[A, B]):
    # Backs the read-only ``functions``
    sequence: tuple[Callable[[A], B], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'sequence', tuple(map(check_callable, self.sequence)))

    @property
    def functions(self) -> tuple[Callable[[A], B], ...]:
        return self.sequence


@dataclass(frozen=True)
class MultiFunMap(MultiFun[A, B]):
    functions_map: Mapping[str, Callable[[A], B]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            'functions_map',
            {name: check_callable(f) for name, f in self.functions_map.items()},
        )

    def __hash__(self) -> int:
        return hash(tuple(self.functions_map.items()))

    @property
    def functions(self) -> tuple[Callable[[A], B], ...]:
        return tuple(self.functions_map.values())

    def apply_to_map(self, value: A) -> dict[str, B]:
        return {name: f(value) for name, f in self.functions_map.items()}


# Earlier names of the sequence-backed variant
FunN = MultiFunSeq
MultiSeqFun = MultiFunSeq


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                       MultiMapFun                        ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


@dataclass(frozen=True)
class MultiMapFun(Generic[A, B]):
    """Functions with a parallel sequence of names, one name per function."""

    functions: tuple[Callable[[A], B], ...]
    names: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, 'functions', tuple(map(check_callable, self.functions)))
        object.__setattr__(self, 'names', tuple(self.names))
        if len(self.functions) != len(self.names):
            raise NameCountError(
                f'{len(self.functions)} function(s) but {len(self.names)} name(s)'
            )

    def __call__(self, value: A) -> list[B]:
        return self.apply(value)

    def apply(self, value: A) -> list[B]:
        return [f(value) for f in self.functions]

    def apply_to_map(self, value: A) -> dict[str, B]:
        bound = dict(zip(self.names, self.functions))
        return {name: f(value) for name, f in bound.items()}

    @staticmethod
    def of(
        functions: Sequence[Callable[[A], B]] | Mapping[str, Callable[[A], B]],
        names: Sequence[str] = (),
    ) -> 'MultiMapFun[A, B]':
        """
        Missing names are filled in with positional defaults (``fun_ 0``,
        ``fun_ 1``, ...); names beyond the last function are dropped.
        """
        if isinstance(functions, Mapping):
            return MultiMapFun(tuple(functions.values()), tuple(functions.keys()))
        functions = tuple(functions)
        padded = tuple(names[: len(functions)]) + tuple(
            MULTIMAP_NAME_FORMAT.format(i) for i in range(len(names), len(functions))
        )
        if len(names) > len(functions):
            logger.debug('Dropping unused names %r', tuple(names[len(functions):]))
        return MultiMapFun(functions, padded)
