from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union


def _build_context(lines: List[str], line_no_1: int, *, column: Optional[int] = None, context: int = 2) -> str:
    idx = min(max(1, line_no_1), max(1, len(lines)))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx and column is not None and column >= 1:
            out.append(f"       | {' ' * (column - 1)}^")
    return "\n".join(out)


def _hint_for(message: str) -> Optional[str]:
    msg = message.lower()
    if "unmatched ']'" in msg:
        return 'Every "]" must close a "[" opened before it. Remove the extra "]" or add a matching "[".'
    if "unclosed '['" in msg:
        return 'Add a matching "]" after the loop body.'
    return None


@dataclass
class BF2CError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class BF2CIOError(BF2CError):
    path: str


@dataclass
class BF2CLoopError(BF2CError):
    line: int
    column: int
    context: str


def make_io_error(path: Union[str, Path], exc: Union[OSError, UnicodeDecodeError]) -> BF2CIOError:
    if isinstance(exc, UnicodeDecodeError):
        reason = f"not valid {exc.encoding} (byte {exc.start})"
    else:
        reason = exc.strerror or str(exc)
    return BF2CIOError(message=f"{reason}: {path}", path=str(path))


def make_loop_error(*, message: str, source: str, line: int, column: int) -> BF2CLoopError:
    lines = source.split('\n')
    ctx = _build_context(lines, line, column=column)
    hint = _hint_for(message)
    hint_block = f"\nHint: {hint}" if hint else ""
    return BF2CLoopError(
        message=f"LoopError: {message} (line {line}, column {column})\n{ctx}{hint_block}",
        line=line,
        column=column,
        context=ctx,
    )
