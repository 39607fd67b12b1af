#!/usr/bin/env python3
"""
Lexer tests: source characters to instructions.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfmacro import Instruction, lex
from bfmacro.instructions import from_char, to_source

I = Instruction


def test_ignores_unknown_characters():
    assert lex("a<+<c<]") == [I.MOVE_LEFT, I.INCREMENT, I.MOVE_LEFT, I.MOVE_LEFT, I.LOOP_CLOSE]


def test_all_instruction_characters():
    assert lex("+-<>[],.") == [
        I.INCREMENT, I.DECREMENT, I.MOVE_LEFT, I.MOVE_RIGHT,
        I.LOOP_OPEN, I.LOOP_CLOSE, I.INPUT, I.OUTPUT,
    ]


def test_breakpoints_kept_or_dropped():
    assert lex("+@-", keep_breakpoints=True) == [I.INCREMENT, I.BREAKPOINT, I.DECREMENT]
    assert lex("+@-", keep_breakpoints=False) == [I.INCREMENT, I.DECREMENT]


def test_lexing_is_an_order_preserving_filter():
    samples = [
        "",
        "hello world",
        "+ comment - with [words] and , dots .",
        "@@ > @ < \n\t[-]",
        "ünïcödé +→-",
    ]
    for text in samples:
        for keep in (False, True):
            allowed = "+-<>[],." + ("@" if keep else "")
            expected = "".join(c for c in text if c in allowed)
            assert to_source(lex(text, keep)) == expected


def test_from_char():
    assert from_char('+') is I.INCREMENT
    assert from_char('x') is None
    assert from_char('@') is None
    assert from_char('@', keep_breakpoints=True) is I.BREAKPOINT


if __name__ == "__main__":
    test_ignores_unknown_characters()
    test_all_instruction_characters()
    test_breakpoints_kept_or_dropped()
    test_lexing_is_an_order_preserving_filter()
    test_from_char()
    print("✓ lexer tests passed")
