import math
import unittest

import pytest

from compofun import multifun
from compofun.errors import NameCountError, NotCallableError


def add(p):
    return p[0] + float(p[1])


def sub(p):
    return p[0] - float(p[1])


def mul(p):
    return p[0] * float(p[1])


def div(p):
    return p[0] / float(p[1]) if p[1] else math.inf


FUNCTIONS = [add, sub, mul, div]
FUNCTIONS_MAP = {'add': add, 'sub': sub, 'mul': mul, 'div': div}


class TestMultiFunSeq(unittest.TestCase):
    def test_no_functions(self):
        self.assertEqual(multifun.MultiFunSeq()((1, 2)), [])

    def test_normal_case(self):
        self.assertEqual(
            multifun.MultiFunSeq(tuple(FUNCTIONS))((1, 2)), [3.0, -1.0, 2.0, 0.5]
        )

    def test_infinity(self):
        self.assertEqual(
            multifun.MultiFunSeq(tuple(FUNCTIONS))((1, 0)), [1.0, 1.0, 0.0, math.inf]
        )

    def test_exception_thrown(self):
        def boom(p):
            raise ValueError(p)

        with self.assertRaises(ValueError):
            multifun.MultiFunSeq((add, boom))((1, 2))

    def test_not_callable(self):
        with self.assertRaises(NotCallableError):
            multifun.MultiFunSeq((add, 'sub'))

    def test_aliases(self):
        self.assertIs(multifun.FunN, multifun.MultiFunSeq)
        self.assertIs(multifun.MultiSeqFun, multifun.MultiFunSeq)


class TestMultiFunMap(unittest.TestCase):
    def test_single_input(self):
        mf = multifun.MultiFunMap(FUNCTIONS_MAP)
        self.assertEqual(
            mf.apply_to_map((1, 2)), {'add': 3.0, 'sub': -1.0, 'mul': 2.0, 'div': 0.5}
        )
        self.assertEqual(mf((1, 2)), [3.0, -1.0, 2.0, 0.5])

    def test_multiple_inputs(self):
        mf = multifun.MultiFunMap(FUNCTIONS_MAP)
        self.assertEqual(
            [mf.apply_to_map(i) for i in [(1, 2), (1, 0)]],
            [
                {'add': 3.0, 'sub': -1.0, 'mul': 2.0, 'div': 0.5},
                {'add': 1.0, 'sub': 1.0, 'mul': 0.0, 'div': math.inf},
            ],
        )

    def test_copies_the_mapping(self):
        source = {'add': add}
        mf = multifun.MultiFunMap(source)
        source['sub'] = sub
        self.assertEqual(mf.apply_to_map((1, 2)), {'add': 3.0})
        self.assertEqual(len(mf.functions), 1)

    def test_hashable(self):
        self.assertEqual(
            hash(multifun.MultiFunMap({'add': add})),
            hash(multifun.MultiFunMap({'add': add})),
        )
        pair = {multifun.MultiFunMap(FUNCTIONS_MAP), multifun.MultiFunMap(FUNCTIONS_MAP)}
        self.assertEqual(len(pair), 1)

    def test_rejects_non_callables(self):
        with self.assertRaises(NotCallableError):
            multifun.MultiFunMap({'add': add, 'answer': 42})


class TestJoin(unittest.TestCase):
    def test_associativity(self):
        complex1 = multifun.MultiFun.join(
            [multifun.MultiFunSeq((add, sub)), multifun.MultiFunSeq((mul,))]
        )
        complex2 = multifun.MultiFun.join(
            [multifun.MultiFunSeq((add,)), multifun.MultiFunSeq((sub, mul))]
        )
        self.assertEqual(complex1((1, 2)), complex2((1, 2)))
        self.assertEqual(complex1((1, 2)), [3.0, -1.0, 2.0])
        self.assertEqual(complex1, complex2)

    def test_join_mixed_kinds(self):
        joined = multifun.MultiFun.join(
            [multifun.MultiFunMap({'add': add}), multifun.MultiFunSeq((div,))]
        )
        self.assertEqual(joined((1, 2)), [3.0, 0.5])

    def test_join_nothing(self):
        self.assertEqual(multifun.MultiFun.join([])((1, 2)), [])


def test_multifun_of():
    assert isinstance(multifun.MultiFun.of(FUNCTIONS_MAP), multifun.MultiFunMap)
    assert isinstance(multifun.MultiFun.of(FUNCTIONS), multifun.MultiFunSeq)


@pytest.mark.parametrize(
    ('names', 'expected'),
    (
        pytest.param(
            [],
            {'fun_ 0': 3.0, 'fun_ 1': -1.0, 'fun_ 2': 2.0, 'fun_ 3': 0.5},
            id='All default names',
        ),
        pytest.param(
            ['add'],
            {'add': 3.0, 'fun_ 1': -1.0, 'fun_ 2': 2.0, 'fun_ 3': 0.5},
            id='Some default names',
        ),
        pytest.param(
            ['add', 'sub', 'mul', 'div', 'log', 'sqr'],
            {'add': 3.0, 'sub': -1.0, 'mul': 2.0, 'div': 0.5},
            id='More names than functions',
        ),
        pytest.param(
            ['add', 'sub', 'mul', 'div'],
            {'add': 3.0, 'sub': -1.0, 'mul': 2.0, 'div': 0.5},
            id='No default names',
        ),
    ),
)
def test_multimapfun_names(names, expected):
    mf = multifun.MultiMapFun.of(FUNCTIONS, names)
    assert mf.apply_to_map((1, 2)) == expected
    assert mf((1, 2)) == [3.0, -1.0, 2.0, 0.5]


def test_multimapfun_from_map():
    mf = multifun.MultiMapFun.of(FUNCTIONS_MAP)
    assert mf.names == ('add', 'sub', 'mul', 'div')
    assert mf.apply_to_map((1, 0)) == {'add': 1.0, 'sub': 1.0, 'mul': 0.0, 'div': math.inf}


def test_multimapfun_constructor_needs_one_name_per_function():
    with pytest.raises(NameCountError):
        multifun.MultiMapFun(tuple(FUNCTIONS), ('add', 'sub'))
    with pytest.raises(ValueError):
        multifun.MultiMapFun((add,), ('add', 'sub'))
