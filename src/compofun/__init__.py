"""Apply one input to many functions, collect the results as a list or by name."""

from compofun.asyncfun import acompofun, resolve
from compofun.compofun import CompoFun, NamedCompoFun, NamelessCompoFun
from compofun.errors import CompoFunError, ConfigError, NameCountError, NotCallableError
from compofun.fn import Either, Left, Right, attempt, compose, compose2, identity
from compofun.funlist import FunList, FunMap
from compofun.logger import setup_logger
from compofun.multifun import FunN, MultiFun, MultiFunMap, MultiFunSeq, MultiMapFun, MultiSeqFun
from compofun.multiop import MultiOp
from compofun.naming import Fun, Named, NamedFun, fun, name_of, resolve_names

__all__ = [
    'CompoFun',
    'CompoFunError',
    'ConfigError',
    'Either',
    'Fun',
    'FunList',
    'FunMap',
    'FunN',
    'Left',
    'MultiFun',
    'MultiFunMap',
    'MultiFunSeq',
    'MultiMapFun',
    'MultiOp',
    'MultiSeqFun',
    'NameCountError',
    'Named',
    'NamedCompoFun',
    'NamedFun',
    'NamelessCompoFun',
    'NotCallableError',
    'Right',
    'acompofun',
    'attempt',
    'compose',
    'compose2',
    'fun',
    'identity',
    'name_of',
    'resolve',
    'resolve_names',
    'setup_logger',
]
