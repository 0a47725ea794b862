import pytest

from tlisp import evaluate, new_global_environment, parse, to_string
from tlisp.types.value import Nil


# Every test gets a fresh, empty global environment. ``run`` evaluates
# source strings in order against it and returns the printed form of the
# last result, the way a session prints each top-level expression.


@pytest.fixture
def env():
    return new_global_environment()


@pytest.fixture
def run(env):
    def _run(*sources: str) -> str:
        result = Nil
        for source in sources:
            result = evaluate(parse(source), env)
        return to_string(result)

    return _run
