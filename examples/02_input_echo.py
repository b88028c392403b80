#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bftape.api import run_string
from bftape.state import RunOptions


def main():
    # ,[.,] echoes bytes until end of input stores 0
    code = ",[.,]"

    line_mode = run_string(code, input=b"first\nsecond\n")
    raw_mode = run_string(code, input=b"first\nsecond\n", options=RunOptions(line_input=False))

    print("line input:", line_mode.output)
    print("raw input: ", raw_mode.output)


if __name__ == "__main__":
    main()
