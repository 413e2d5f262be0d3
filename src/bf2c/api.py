from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .compiler import Brainfuck2CCompiler
from .errors import make_io_error
from .instructions import Instruction


@dataclass(frozen=True)
class CompileOptions:
    strict: bool = False
    trace: bool = False


@dataclass(frozen=True)
class CompileResult:
    c_code: str
    instructions: List[Instruction]
    trace: List[str] = field(default_factory=list)


def compile_string(source: str, *, options: Optional[CompileOptions] = None) -> CompileResult:
    opts = options or CompileOptions()
    compiler = Brainfuck2CCompiler(strict=opts.strict, trace=opts.trace)
    c_code = compiler.compile(source)
    return CompileResult(c_code=c_code, instructions=list(compiler.instructions), trace=list(compiler.trace))


def compile_file(path: str | Path, *, options: Optional[CompileOptions] = None, encoding: str = "utf-8") -> CompileResult:
    p = Path(path)
    try:
        source = p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise make_io_error(p, e) from e
    return compile_string(source, options=options)


def write_output(path: str | Path, c_code: str, *, encoding: str = "utf-8") -> None:
    p = Path(path)
    try:
        # newline='' keeps the generated '\n' line endings on every platform.
        with open(p, 'w', encoding=encoding, newline='') as f:
            f.write(c_code)
            f.flush()
    except OSError as e:
        raise make_io_error(p, e) from e
