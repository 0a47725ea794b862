import math

import pytest

from tlisp.types.value import (
    LONG_MAX,
    Nil,
    Tag,
    Truth,
    cadddr,
    caddr,
    cadr,
    car,
    cdr,
    cons,
    from_list,
    length,
    make_double,
    make_long,
    make_number,
    make_string,
    make_symbol,
    to_bool,
    truncate,
)


def longs(*ns):
    return from_list([make_long(n) for n in ns])


def test_singletons():
    assert Nil.tag == Tag.NIL
    assert Truth.tag == Tag.SYMBOL
    assert Truth.data == "t"
    assert to_bool(True) is Truth
    assert to_bool(False) is Nil


def test_falseness_is_identity_not_shape():
    # a fresh symbol named like the truth value is still a distinct value
    assert make_symbol("t") is not Truth
    # a pair holding only Nil is not Nil
    assert cons(Nil, Nil) is not Nil


def test_car_cdr_of_pair():
    pair = cons(make_symbol("a"), make_symbol("b"))
    assert car(pair).data == "a"
    assert cdr(pair).data == "b"


@pytest.mark.parametrize(
    "atom",
    [make_long(1), make_double(1.5), make_symbol("a"), make_string("s")],
)
def test_car_cdr_of_atom_is_type_error(atom):
    assert car(atom).data == "NotAPair"
    assert cdr(atom).data == "NotAPair"


def test_car_cdr_of_nil_is_nil():
    assert car(Nil) is Nil
    assert cdr(Nil) is Nil


def test_positional_accessors():
    lst = longs(1, 2, 3, 4)
    assert car(lst).data == 1
    assert cadr(lst).data == 2
    assert caddr(lst).data == 3
    assert cadddr(lst).data == 4
    assert cadddr(longs(1, 2)) is Nil


def test_from_list_and_length():
    lst = longs(1, 2, 3)
    assert length(lst) == 3
    assert [v.data for v in lst] == [1, 2, 3]
    assert from_list([]) is Nil
    assert length(Nil) == 0


def test_iteration_stops_at_dotted_tail():
    dotted = cons(make_long(1), cons(make_long(2), make_long(3)))
    assert [v.data for v in dotted] == [1, 2]
    assert length(dotted) == 2


@pytest.mark.parametrize(
    "x,tag,data",
    [
        (5.0, Tag.LONG, 5),
        (-3.0, Tag.LONG, -3),
        (-0.0, Tag.LONG, 0),
        (5.5, Tag.DOUBLE, 5.5),
        (2.0**62, Tag.LONG, 2**62),
        (2.0**63, Tag.DOUBLE, 2.0**63),
        (-(2.0**63), Tag.LONG, -(2**63)),
        (1e300, Tag.DOUBLE, 1e300),
    ],
)
def test_make_number_canonicalizes(x, tag, data):
    value = make_number(x)
    assert value.tag == tag
    assert value.data == data


def test_make_number_non_finite_stays_double():
    assert make_number(float("inf")).tag == Tag.DOUBLE
    nan = make_number(float("nan"))
    assert nan.tag == Tag.DOUBLE
    assert math.isnan(nan.data)


def test_truncate():
    assert truncate(2.9) == 2
    assert truncate(-2.9) == -2
    assert truncate(float("inf")) is None
    assert truncate(float(LONG_MAX) * 2) is None


def test_symbols_are_interned():
    assert make_symbol("abc").data is make_symbol("abc").data
