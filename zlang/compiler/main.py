#!/usr/bin/env python3
"""zc: compile a zlang program to C and hand it to gcc.

Usage: python -m zlang.compiler.main [-i main.z] [--no-cc] [gcc flags...]

Flags this tool does not know are forwarded to gcc unchanged; other `.z`
files on the command line are passed to gcc as their `.c` counterparts.
"""

import argparse
import logging
import os
import shutil
import subprocess
import sys

from .driver import CompileContext, compile_with_context
from .imports import ImportResolutionError
from .lexer import tokenize

DEFAULT_INPUT = "main.z"
SOURCE_SUFFIX = ".z"

logger = logging.getLogger(__name__)


def output_path(input_path: str) -> str:
    return os.path.splitext(input_path)[0] + ".c"


def cc_arguments(extra: list[str], c_path: str) -> list[str]:
    """gcc arguments: forwarded flags, .z files mapped to .c, then c_path."""
    args = []
    for arg in extra:
        if arg.endswith(SOURCE_SUFFIX):
            args.append(output_path(arg))
        else:
            args.append(arg)
    args.append(c_path)
    return args


def build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        prog="zc", description="zlang transpiler", allow_abbrev=False,
        epilog="Unrecognized arguments are forwarded to the C compiler.")
    argparser.add_argument("-i", "--input", default=DEFAULT_INPUT,
                           help=f"Input source file (default: {DEFAULT_INPUT})")
    argparser.add_argument("--emit-tokens", action="store_true",
                           help="Print the token stream and exit")
    argparser.add_argument("--emit-c", action="store_true",
                           help="Print the generated C and exit")
    argparser.add_argument("--emit-imports", action="store_true",
                           help="List imported files in the order they were compiled")
    argparser.add_argument("--no-cc", action="store_true",
                           help="Write the .c file but don't run the C compiler")
    argparser.add_argument("--cc", default="gcc",
                           help="C compiler to invoke (default: gcc)")
    argparser.add_argument("-v", "--verbose", action="store_true",
                           help="Log each compiler pass to stderr")
    return argparser


def main(argv: list[str] | None = None) -> int:
    argparser = build_argparser()
    args, extra = argparser.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(name)s: %(message)s",
    )

    try:
        with open(args.input, "r") as f:
            source = f.read()
    except FileNotFoundError:
        print(f"Error: File '{args.input}' not found", file=sys.stderr)
        return 1

    if args.emit_tokens:
        for tok in tokenize(source):
            print(tok)
        return 0

    context = CompileContext()
    try:
        c_source = compile_with_context(source, context)
    except ImportResolutionError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.emit_imports:
        for path in context.imports:
            print(path)

    if args.emit_c:
        print(c_source)
        return 0

    c_path = output_path(args.input)
    with open(c_path, "w") as f:
        f.write(c_source)
    print(f"Transpiled {args.input} → {c_path}")

    if args.no_cc:
        return 0

    if shutil.which(args.cc) is None:
        print(f"error: C compiler '{args.cc}' not found", file=sys.stderr)
        return 1

    cmd = [args.cc] + cc_arguments(extra, c_path)
    logger.debug("running %s", " ".join(cmd))
    result = subprocess.run(cmd, capture_output=True, text=True)
    if result.stdout:
        print(result.stdout, end="")
    if result.stderr:
        print(result.stderr, end="", file=sys.stderr)
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
