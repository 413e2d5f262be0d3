from __future__ import annotations

from typing import List, Optional

from .generator import Generator
from .instructions import Program
from .lexer import check_loops, tokenize
from .preface import PREFACE


class Brainfuck2CCompiler:
    """
    Brainfuck to C compiler

    Pipeline:
    1. Tokenize: scan the source into location-tagged instructions
    2. Check (strict mode only): reject unbalanced loops
    3. Generate: render one C statement per instruction after the preface

    The last compiled program and its trace are kept on the instance for
    inspection.
    """

    def __init__(self, strict: bool = False, trace: bool = False):
        self.strict = strict
        self.trace_enabled = trace
        self.instructions: Program = []
        self.trace: List[str] = []

    def compile(self, source: str, *, preface: Optional[str] = None) -> str:
        """
        Compile Brainfuck source into a complete C program.

        Args:
            source: Brainfuck source text; non-instruction characters are comments
            preface: C text opening main(); defaults to the packaged preface

        Returns:
            The generated C source

        Raises:
            BF2CLoopError: in strict mode, when loops are unbalanced
        """
        self.instructions = tokenize(source)
        if self.strict:
            check_loops(self.instructions, source)

        generator = Generator(trace=self.trace_enabled)
        c_code = generator.generate(PREFACE if preface is None else preface, self.instructions)
        self.trace = generator.trace
        return c_code
