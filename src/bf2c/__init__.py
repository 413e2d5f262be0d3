from .api import CompileOptions, CompileResult, compile_file, compile_string, write_output
from .compiler import Brainfuck2CCompiler
from .errors import BF2CError, BF2CIOError, BF2CLoopError
from .generator import Generator
from .instructions import Instruction, Location, Op, Program
from .lexer import check_loops, tokenize
from .preface import PREFACE

__all__ = [
    'Brainfuck2CCompiler',
    'Generator',
    'tokenize',
    'check_loops',
    'Op',
    'Location',
    'Instruction',
    'Program',
    'PREFACE',
    'BF2CError',
    'BF2CIOError',
    'BF2CLoopError',
    'CompileOptions',
    'CompileResult',
    'compile_string',
    'compile_file',
    'write_output',
]
