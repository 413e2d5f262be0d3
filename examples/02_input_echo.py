#!/usr/bin/env python3

import os
import shutil
import subprocess
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bf2c.api import CompileOptions, compile_file, write_output


def main():
    here = os.path.dirname(__file__)
    result = compile_file(os.path.join(here, "echo.b"), options=CompileOptions(strict=True, trace=True))
    for line in result.trace:
        print(line)

    c_path = os.path.join(here, "_echo.c")
    write_output(c_path, result.c_code)

    cc = shutil.which("cc")
    if cc is None:
        print("No C compiler found, skipping run")
        return

    exe_path = os.path.join(here, "_echo")
    subprocess.run([cc, "-o", exe_path, c_path], check=True)
    # Type a character then press enter
    subprocess.run([exe_path], check=True)


if __name__ == "__main__":
    main()
