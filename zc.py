#!/usr/bin/env python3
"""zc: the zlang transpiler.

Thin entry point that delegates to zlang.compiler.main.
"""

import sys

from zlang.compiler.main import main

if __name__ == "__main__":
    sys.exit(main())
