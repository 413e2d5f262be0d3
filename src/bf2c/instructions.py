from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List


class Op(Enum):
    """The eight Brainfuck operations, keyed by their source symbol."""

    INCREMENT = '+'
    DECREMENT = '-'
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    READ_INPUT = ','
    WRITE_OUTPUT = '.'
    LOOP_BEGIN = '['
    LOOP_END = ']'


@dataclass(frozen=True)
class Location:
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True)
class Instruction:
    op: Op
    location: Location

    @property
    def symbol(self) -> str:
        return self.op.value


Program = List[Instruction]
