from __future__ import annotations

from typing import Dict, Iterable, List

from .instructions import Instruction, Op
from .state import GeneratorState


INDENT = '    '

# One C statement per operation. Every Op must have an entry.
STATEMENTS: Dict[Op, str] = {
    Op.INCREMENT: '(*ptr)++;',
    Op.DECREMENT: '(*ptr)--;',
    Op.MOVE_RIGHT: 'ptr++;',
    Op.MOVE_LEFT: 'ptr--;',
    Op.READ_INPUT: '*ptr = getchar();',
    Op.WRITE_OUTPUT: 'putchar(*ptr);',
    Op.LOOP_BEGIN: 'while (*ptr) {',
    Op.LOOP_END: '}',
}


class Generator:
    """
    Renders a Brainfuck program as C statements.

    The preface passed to generate() must leave one block open (the body of
    main). Generated statements are nested inside it, one level per open loop,
    and a final closing brace terminates it.

    Unbalanced loops are not checked here: a surplus ']' drives the depth
    below zero, which renders as no indentation. Use lexer.check_loops() first
    when that matters.
    """

    def __init__(self, trace: bool = False):
        self._state = GeneratorState(is_tracing=trace)

    def generate(self, preface: str, program: Iterable[Instruction]) -> str:
        self._state.reset()
        out = [preface]

        for ins in program:
            statement = STATEMENTS[ins.op]

            if ins.op is Op.LOOP_END:
                self._state.depth -= 1

            out.append(self.indent(statement))
            self._state.add_trace(f"{ins.location} {ins.symbol} depth={self._state.depth}")

            if ins.op is Op.LOOP_BEGIN:
                self._state.depth += 1

        out.append('}\n')
        return ''.join(out)

    def indent(self, line: str) -> str:
        """Indent a single line to the current depth and terminate it."""
        return f"{INDENT * self._state.depth}{line}\n"

    @property
    def trace(self) -> List[str]:
        """Trace lines of the last generate() call, empty unless tracing is on."""
        return list(self._state.trace)
