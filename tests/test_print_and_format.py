import pytest

from tlisp.printer import to_string
from tlisp.types.closure import make_closure
from tlisp.types.environment import Environment
from tlisp.types.value import (
    Nil,
    Truth,
    cons,
    from_list,
    make_double,
    make_long,
    make_string,
    make_symbol,
)


def sym(name):
    return make_symbol(name)


@pytest.mark.parametrize(
    "value,expected",
    [
        (make_long(5), "5"),
        (make_long(-12), "-12"),
        (make_double(2.5), "2.500000"),
        (make_double(5.0), "5.000000"),
        (make_double(-0.25), "-0.250000"),
        (make_double(3.14159265), "3.141593"),
        (make_double(float("inf")), "inf"),
        (sym("abc"), "abc"),
        (make_string("hi"), '"hi"'),
        (make_string(""), '""'),
        (Nil, "()"),
        (Truth, "t"),
    ],
)
def test_atoms(value, expected):
    assert to_string(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (cons(sym("a"), cons(sym("b"), Nil)), "(a b)"),
        (cons(sym("x"), sym("y")), "(x . y)"),
        (cons(make_long(1), cons(make_long(2), make_long(3))), "(1 2 . 3)"),
        (cons(sym("a"), cons(from_list([make_long(1), make_long(2)]), Nil)), "(a (1 2))"),
        (cons(Nil, Nil), "(())"),
        (cons(make_string("s"), make_double(1.5)), '("s" . 1.500000)'),
        (from_list([sym("a")], tail=sym("b")), "(a . b)"),
    ],
)
def test_pairs(value, expected):
    assert to_string(value) == expected


def test_closure_prints_as_lambda():
    params = from_list([sym("x")])
    body = from_list([sym("mul"), sym("x"), sym("x")])
    closure = make_closure(params, body, Environment())
    assert to_string(closure) == "(lambda (x) (mul x x))"


def test_dotted_closure_tail():
    closure = make_closure(Nil, make_long(1), Environment())
    assert to_string(cons(sym("f"), closure)) == "(f . (lambda () 1))"


def test_str_uses_printer():
    value = from_list([make_long(1), make_double(0.5), make_string("a")])
    assert str(value) == '(1 0.500000 "a")'
    assert repr(Nil) == "Nil"


def test_deeply_nested_car_chain():
    depth = 5000
    value = make_long(1)
    for _ in range(depth):
        value = cons(value, make_long(2))
    assert to_string(value) == "(" * depth + "1" + " . 2)" * depth


def test_deeply_nested_closure_body():
    body = sym("x")
    for _ in range(3000):
        body = from_list([body])
    closure = make_closure(Nil, body, Environment())
    assert to_string(closure) == "(lambda () " + "(" * 3000 + "x" + ")" * 3000 + ")"
