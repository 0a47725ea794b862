"""tlisp command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from tlisp import __version__, config
from tlisp.interpreter import Interpreter
from tlisp.printer import to_string


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tlisp",
        description="A small Lisp: reader, printer and tree-walking evaluator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           # Interactive mode, 'exit' to quit
  %(prog)s program.lisp              # Run a source file
  %(prog)s -e "(add 2 3)"            # Evaluate one expression
        """,
    )
    parser.add_argument("file", nargs="?", help="source file to run")
    parser.add_argument("-e", "--eval", dest="expr", metavar="EXPR", help="evaluate EXPR and print the result")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interp = Interpreter()

    if args.expr is not None:
        print(to_string(interp.eval(args.expr)))
        return 0

    if args.file is not None:
        try:
            output = interp.run_file(args.file)
        except OSError as ex:
            print(f"tlisp: cannot read {args.file}: {ex.strerror}", file=sys.stderr)
            return 1
        for text in output:
            print(text)
        return 0

    print(f"Type s-expressions to evaluate, '{config.get_exit_command()}' to quit.")
    interp.repl()
    return 0


if __name__ == "__main__":
    sys.exit(main())
