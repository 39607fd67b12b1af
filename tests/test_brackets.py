#!/usr/bin/env python3
"""
Bracket matching in both directions, and the up-front balance check.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from bfmacro import Direction, ErrorKind, ExecutionError, check_brackets, lex, match_bracket


def test_forward_match_counts_levels():
    assert match_bracket(lex("-[-]-]]--"), Direction.FORWARD) == 5


def test_backward_match_counts_levels():
    assert match_bracket(lex("--[[-[-]-"), Direction.BACKWARD) == 3


def test_match_from_start_index():
    program = lex("[[-]+]")
    assert match_bracket(program, Direction.FORWARD, start=1) == 5
    assert match_bracket(program, Direction.BACKWARD, start=4) == 0
    assert match_bracket(program, Direction.FORWARD, start=2) == 3


def test_forward_exhausted_is_an_error():
    with pytest.raises(ExecutionError) as exc:
        match_bracket(lex("[-"), Direction.FORWARD)
    assert exc.value.kind is ErrorKind.UNMATCHED_BRACKET


def test_backward_exhausted_is_an_error():
    with pytest.raises(ExecutionError) as exc:
        match_bracket(lex("+]-"), Direction.BACKWARD)
    assert exc.value.kind is ErrorKind.UNMATCHED_BRACKET


def test_empty_sequence():
    for direction in Direction:
        with pytest.raises(ExecutionError):
            match_bracket([], direction)


def test_check_brackets_jump_table():
    assert check_brackets(lex("[[]]")) == {0: 3, 3: 0, 1: 2, 2: 1}
    assert check_brackets(lex("+-")) == {}


def test_check_brackets_reports_position():
    with pytest.raises(ExecutionError) as exc:
        check_brackets(lex("[]]"))
    assert exc.value.position == 2

    with pytest.raises(ExecutionError) as exc:
        check_brackets(lex("+[[]"))
    assert exc.value.position == 1
    assert exc.value.kind is ErrorKind.UNMATCHED_BRACKET
