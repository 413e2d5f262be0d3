from __future__ import annotations

import argparse
import sys
from enum import IntEnum
from pathlib import Path
from typing import List, Optional

from .api import CompileOptions, compile_file, write_output
from .errors import BF2CIOError, BF2CLoopError


class ExitCode(IntEnum):
    SUCCESS = 0
    IO_FAILURE = 1
    SYNTAX_FAILURE = 2  # unbalanced loops, only with --strict


def default_output_path(input_path: str | Path) -> Path:
    """<input stem>.c in the current directory, or out.c if the input has no stem."""
    stem = Path(input_path).stem
    if not stem or stem == '..':
        return Path('out.c')
    return Path(f"{stem}.c")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bf2c",
        description="Translate a Brainfuck program into C source code.",
    )
    parser.add_argument("input", metavar="INPUT", help="The Brainfuck source file.")
    parser.add_argument(
        "-o", "--output",
        metavar="OUTPUT",
        help="The generated C file. [default: ./<INPUT stem>.c]",
    )
    parser.add_argument("--strict", action="store_true", help="Reject unbalanced '[' and ']'")
    parser.add_argument("--trace", action="store_true", help="Print one trace line per generated statement")
    return parser


def _fail(exit_code: ExitCode, message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return int(exit_code)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    output = Path(args.output) if args.output else default_output_path(args.input)
    options = CompileOptions(strict=args.strict, trace=args.trace)

    try:
        result = compile_file(args.input, options=options)
        write_output(output, result.c_code)
    except BF2CIOError as e:
        return _fail(ExitCode.IO_FAILURE, str(e))
    except BF2CLoopError as e:
        return _fail(ExitCode.SYNTAX_FAILURE, str(e))

    for line in result.trace:
        print(line)

    return int(ExitCode.SUCCESS)


if __name__ == "__main__":
    raise SystemExit(main())
