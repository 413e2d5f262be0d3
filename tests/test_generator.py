#!/usr/bin/env python3
"""
Generator tests: rendering, indentation and the packaged preface.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bf2c.generator import STATEMENTS, Generator
from bf2c.instructions import Op
from bf2c.lexer import tokenize
from bf2c.preface import PREFACE

GOLDEN = os.path.join(os.path.dirname(__file__), 'golden')


def _golden(name):
    with open(os.path.join(GOLDEN, name), encoding='utf-8', newline='') as f:
        return f.read()


def _indent_width(line):
    return len(line) - len(line.lstrip(' '))


def test_new_generator_starts_at_depth_one():
    assert Generator()._state.depth == 1


def test_every_op_has_a_statement():
    assert set(STATEMENTS) == set(Op)


def test_generate_matches_golden():
    program = tokenize("+><[,-].")
    assert Generator().generate("{\n", program) == _golden('generator_generate.c')


def test_empty_program():
    assert Generator().generate(PREFACE, []) == PREFACE + "}\n"


def test_single_increment():
    out = Generator().generate("int main(void) {\n", tokenize("+"))
    assert out == "int main(void) {\n    (*ptr)++;\n}\n"


def test_single_increment_with_packaged_preface():
    assert Generator().generate(PREFACE, tokenize("+")) == _golden('single_increment.c')


def test_loop_body_is_nested_one_level():
    out = Generator().generate("{\n", tokenize("[,-]"))
    lines = out.splitlines()[1:-1]
    assert lines == [
        "    while (*ptr) {",
        "        *ptr = getchar();",
        "        (*ptr)--;",
        "    }",
    ]
    open_line, read_line, dec_line, close_line = lines
    assert _indent_width(read_line) == _indent_width(open_line) + 4
    assert _indent_width(dec_line) == _indent_width(read_line)
    assert _indent_width(close_line) == _indent_width(open_line)


def test_nested_loops():
    out = Generator().generate("{\n", tokenize("[[+]]"))
    assert out == (
        "{\n"
        "    while (*ptr) {\n"
        "        while (*ptr) {\n"
        "            (*ptr)++;\n"
        "        }\n"
        "    }\n"
        "}\n"
    )


def test_output_always_ends_with_closing_brace():
    for src in ["", "+", "[", "]", "[[[", "+-<>,."]:
        out = Generator().generate(PREFACE, tokenize(src))
        assert out.endswith("\n}\n")
        assert out.startswith(PREFACE)


def test_unmatched_end_is_not_rejected():
    gen = Generator()
    out = gen.generate("{\n", tokenize("]]+"))
    assert out == "{\n}\n}\n(*ptr)++;\n}\n"
    assert gen._state.depth == -1


def test_generate_twice_is_identical():
    program = tokenize("++[>+<-]>.")
    gen = Generator()
    first = gen.generate(PREFACE, program)
    second = gen.generate(PREFACE, program)
    assert first == second
    assert Generator().generate(PREFACE, program) == first


def test_indent():
    gen = Generator()
    assert gen.indent("x;") == "    x;\n"
    gen._state.depth = 0
    assert gen.indent("x;") == "x;\n"
    gen._state.depth = 4
    assert gen.indent("x;") == " " * 16 + "x;\n"


def test_trace_records_locations_and_depth():
    gen = Generator(trace=True)
    gen.generate("{\n", tokenize("+\n[.]"))
    assert gen.trace == [
        "1:1 + depth=1",
        "2:1 [ depth=1",
        "2:2 . depth=2",
        "2:3 ] depth=1",
    ]


def test_trace_off_by_default():
    gen = Generator()
    gen.generate("{\n", tokenize("+[-]"))
    assert gen.trace == []


def test_preface_opens_main():
    assert "#include <stdio.h>" in PREFACE
    assert "char array[30000] = {0};" in PREFACE
    assert "char *ptr = array;" in PREFACE
    assert PREFACE.rstrip().endswith("int main(void) {")


def test_trace_is_a_copy():
    gen = Generator(trace=True)
    gen.generate("{\n", tokenize("+"))
    gen.trace.clear()
    assert gen.trace == ["1:1 + depth=1"]
