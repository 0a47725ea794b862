import pytest

from tlisp import evaluate, parse
from tlisp.types.value import Truth


# -----------------------------------------------------
# quote / set
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(quote (a b))", "(a b)"),
        ("(quote 5)", "5"),
        ("'x", "x"),
        ("'(add 1 2)", "(add 1 2)"),
        ("(quote)", "()"),
    ],
)
def test_quote(run, source, expected):
    assert run(source) == expected


def test_set_returns_value(run):
    assert run("(set x (add 1 2))") == "3"
    assert run("x") == "3"


def test_set_shadows_and_keeps_old_binding(run, env):
    run("(set x 1)")
    run("(set x 2)")
    assert run("x") == "2"
    assert len(env) == 2


def test_set_requires_symbol(run):
    assert run("(set 5 1)") == "NotASymbol"
    assert run('(set "x" 1)') == "NotASymbol"


def test_set_inside_closure_binds_in_call_frame(run):
    run("(set x 1)")
    run("(define f () (set x 99))")
    assert run("(f)") == "99"
    assert run("x") == "1"


# -----------------------------------------------------
# and / or
# -----------------------------------------------------

def test_and_short_circuits(run):
    assert run("(and () (set hit 1))") == "()"
    assert run("hit") == "hit"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and t 5)", "5"),
        ("(and 1 ())", "()"),
        ("(and () (div 1 0))", "()"),
        ("(and 1 '(a b))", "(a b)"),
    ],
)
def test_and_returns_second_value(run, source, expected):
    assert run(source) == expected


def test_or_short_circuits_to_truth(run, env):
    assert run("(or t (set hit 1))") == "t"
    assert run("hit") == "hit"
    assert evaluate(parse("(or 5 6)"), env) is Truth


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(or () 123)", "123"),
        ("(or () ())", "()"),
        ("(or '(x) 1)", "t"),
    ],
)
def test_or(run, source, expected):
    assert run(source) == expected


# -----------------------------------------------------
# if / cond
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if t 1 2)", "1"),
        ("(if () 1 2)", "2"),
        ("(if 0 1 2)", "1"),
        ('(if "" 1 2)', "1"),
        ("(if (lt 1 2) yes no)", "yes"),
        ("(if (gt 1 2) yes no)", "no"),
        ("(if () 1)", "()"),
    ],
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_evaluates_only_the_chosen_branch(run):
    run("(if t (set a 1) (set b 2))")
    assert run("a") == "1"
    assert run("b") == "b"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond ((lt 2 1) a) ((gt 2 1) b))", "b"),
        ("(cond (t first) (t second))", "first"),
        ("(cond ((eq 1 1) (add 1 1)))", "2"),
        ("(cond (() a))", "NoBranchMatched"),
        ("(cond)", "NoBranchMatched"),
    ],
)
def test_cond(run, source, expected):
    assert run(source) == expected


def test_cond_stops_at_first_match(run):
    run("(cond (t (set a 1)) (t (set b 2)))")
    assert run("a") == "1"
    assert run("b") == "b"


# -----------------------------------------------------
# cons / car / cdr
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cons 1 2)", "(1 . 2)"),
        ("(cons 1 '(2 3))", "(1 2 3)"),
        ("(cons 1 ())", "(1)"),
        ("(cons '(a) '(b))", "((a) b)"),
        ("(car '(a b))", "a"),
        ("(cdr '(a b))", "(b)"),
        ("(cdr '(a))", "()"),
        ("(car (cdr '(1 2 3)))", "2"),
        ("(car (cons x y))", "x"),
        ("(cdr (cons x y))", "y"),
        ("(car ())", "()"),
        ("(cdr ())", "()"),
        ("(car 5)", "NotAPair"),
        ('(cdr "s")', "NotAPair"),
        ("(car (lambda (x) x))", "NotAPair"),
        # no dotted-pair syntax: '.' is an ordinary list element
        ("(cdr '(a . b))", "(. b)"),
    ],
)
def test_list_operations(run, source, expected):
    assert run(source) == expected


# -----------------------------------------------------
# predicates / not
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(nil? ())", "t"),
        ("(nil? '())", "t"),
        ("(nil? 0)", "()"),
        ("(nil? '(()))", "()"),
        ("(symbol? 'a)", "t"),
        ("(symbol? a)", "t"),
        ('(symbol? "a")', "()"),
        ("(number? 1)", "t"),
        ("(number? 1.5)", "t"),
        ("(number? '1)", "t"),
        ("(number? 'a)", "()"),
        ('(string? "a")', "t"),
        ("(string? 'a)", "()"),
        ("(list? '(1))", "t"),
        ("(list? ())", "t"),
        ("(list? 'a)", "()"),
        ("(list? (lambda () 1))", "()"),
        ("(not ())", "t"),
        ("(not 0)", "()"),
        ("(not (not ()))", "()"),
    ],
)
def test_predicates(run, source, expected):
    assert run(source) == expected


def test_special_form_names_cannot_be_shadowed(run):
    assert run("(define add (x y) x)") == "add"
    assert run("(add 2 3)") == "5"
