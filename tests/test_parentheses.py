import pytest

from cc232.parentheses import paren_iterative, paren_recursive


def test_public_cases():
    assert paren_recursive("a+(b*(c+d))")
    assert paren_iterative("a+(b*[c-{d/e}])")
    assert not paren_iterative("([)]")


def test_internal_cases():
    assert paren_recursive("sin parentesis")
    assert not paren_recursive(")()(")
    assert not paren_iterative("{[(])}")


def test_empty_string_is_balanced():
    assert paren_recursive("")
    assert paren_iterative("")


@pytest.mark.parametrize(
    "expr, expected",
    [
        ("(()())", True),
        ("(()", False),
        ("())", False),
        ("x(y)z(w)", True),
        (")(", False),
        ("((a))(b)", True),
    ],
)
def test_round_parentheses_versions_agree(expr, expected):
    assert paren_recursive(expr) is expected
    assert paren_iterative(expr) is expected


def test_iterative_detects_unclosed_bracket():
    assert not paren_iterative("[{}")
    assert not paren_iterative("}")