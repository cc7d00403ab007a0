import io
from collections import Counter

import pytest

from dslabs.postfix import main, priority, to_postfix


def test_priority_ordering():
    assert priority("*") == priority("/")
    assert priority("+") == priority("-")
    assert priority("*") > priority("+") > priority("(")
    assert priority("(") == priority(")")
    assert priority("(") > priority("a")


def test_simple_sum():
    assert to_postfix("a+b") == "ab+"


def test_parentheses_change_order():
    assert to_postfix("a*(b+c)") == "abc+*"


def test_left_associativity():
    assert to_postfix("a-b-c") == "ab-c-"


@pytest.mark.parametrize("expression", ["a+b*c", "(a+b)*(c-d)/e", "((a))", "x"])
def test_operands_and_operators_are_kept(expression):
    result = to_postfix(expression)
    assert Counter(result) == Counter(ch for ch in expression if ch not in "()")


def test_operand_order_is_preserved():
    result = to_postfix("(a+b)*c-d/e")
    operands = [ch for ch in result if priority(ch) == 0]
    assert operands == list("abcde")


@pytest.mark.parametrize("expression", ["a+b)", "(a+b", ")"])
def test_unbalanced_parentheses(expression):
    with pytest.raises(ValueError):
        to_postfix(expression)


def test_main_with_arguments(capsys):
    assert main(["a+b", "a*(b+c)"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [to_postfix("a+b"), to_postfix("a*(b+c)")]


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("a-b-c\n(a+b)*c\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [to_postfix("a-b-c"), to_postfix("(a+b)*c")]