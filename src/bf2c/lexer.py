from __future__ import annotations

from typing import Dict, List

from .errors import make_loop_error
from .instructions import Instruction, Location, Op, Program


SYMBOLS: Dict[str, Op] = {op.value: op for op in Op}


def tokenize(text: str) -> Program:
    """
    Scan Brainfuck source into an ordered list of instructions.

    Every character outside the eight instruction symbols is a comment and is
    skipped, but still counts towards the column so that locations point at the
    real position in the source. Lines and columns start counting at 1.
    """
    program: Program = []
    line = 1
    column = 1

    for ch in text:
        if ch == '\n':
            line += 1
            column = 1
            continue

        op = SYMBOLS.get(ch)
        if op is not None:
            program.append(Instruction(op, Location(line, column)))
        column += 1

    return program


def check_loops(program: Program, source: str) -> None:
    """Raise BF2CLoopError for the first unmatched ']' or the innermost unclosed '['."""
    open_loops: List[Instruction] = []

    for ins in program:
        if ins.op is Op.LOOP_BEGIN:
            open_loops.append(ins)
        elif ins.op is Op.LOOP_END:
            if not open_loops:
                raise make_loop_error(
                    message="Unmatched ']'",
                    source=source,
                    line=ins.location.line,
                    column=ins.location.column,
                )
            open_loops.pop()

    if open_loops:
        ins = open_loops[-1]
        raise make_loop_error(
            message="Unclosed '['",
            source=source,
            line=ins.location.line,
            column=ins.location.column,
        )
