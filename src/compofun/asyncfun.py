"""
Asynchronous composites.

Each component ``A -> B`` becomes ``A -> Future[B]``: calling the composite
submits every component to an executor and returns the futures right away.
Tasks are fire-and-forget, there is no cancellation or ordering between them.
"""

from collections.abc import Mapping
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from functools import partial
from threading import Lock
from typing import Any, Callable

from compofun import config
from compofun.compofun import CompoFun, components_of
from compofun.fn import A, B
from compofun.logger import logger
from compofun.naming import rebind


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                         Executor                         ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛

_default_executor: Executor | None = None
_executor_lock = Lock()


def default_executor() -> Executor:
    global _default_executor
    with _executor_lock:
        if _default_executor is None:
            _default_executor = ThreadPoolExecutor(
                max_workers=config.max_workers(), thread_name_prefix='compofun'
            )
            logger.debug('Started shared executor %r', _default_executor)
        return _default_executor


def submitting(function: Callable[[A], B], executor: Executor) -> Callable[[A], Future[B]]:
    def submit(value: A) -> Future[B]:
        logger.debug('Submitting %r', function)
        return executor.submit(function, value)

    return submit


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                        Factories                         ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def acompofun(
    functions: Any, name: str | None = None, *, executor: Executor | None = None
) -> CompoFun[A, Future[B]]:
    """
    Build a composite of futures out of anything ``CompoFun.of`` accepts.
    Component names carry over to the asynchronous components.
    """
    executor = executor or default_executor()
    lift = partial(submitting, executor=executor)
    components = tuple(rebind(f, lift(f)) for f in components_of(functions, name))
    return CompoFun.of(components, name)


def resolve(results: Any, timeout: float | None = None) -> Any:
    """Wait on a list or dict of futures and return the plain values."""
    if isinstance(results, Mapping):
        return {name: future.result(timeout) for name, future in results.items()}
    return [future.result(timeout) for future in results]
