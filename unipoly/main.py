#!/usr/bin/env python

"""
Main entry point for the polynomial calculator. Run with --help for options.

Reads one polynomial per line (from a file or standard input) and prints it
in canonical form together with its square and cube.  An empty line or the
end of the input stops the loop.
"""

import argparse
import sys

from unipoly import common
from unipoly import logging
from unipoly import opts
from unipoly.common import format_number
from unipoly.parse import InvalidPolynomialError
from unipoly.polynomials import Polynomial

def report(p, out, calculus=False, points=()):
    """Print everything there is to say about one polynomial."""
    print("p = {}".format(p), file=out)
    print("p² = {}".format(p ** 2), file=out)
    print("p³ = {}".format(p ** 3), file=out)
    if calculus:
        print("p' = {}".format(p.derivative()), file=out)
        print("∫p = {}".format(p.integral()), file=out)
    for x in points:
        print("p({}) = {}".format(format_number(x), format_number(p(x))), file=out)

def repl(lines, out, prompt=False, calculus=False, points=()):
    """Run the read-eval-print loop over an iterable of lines.

    Returns the number of lines that failed to parse or to evaluate.
    """
    failures = 0
    for line in lines:
        line = line.rstrip("\r\n")
        if not line:
            break
        with logging.task("line", text=line):
            try:
                p = Polynomial.from_string(line)
            except InvalidPolynomialError as e:
                failures += 1
                print("error: {}".format(e), file=out)
            else:
                try:
                    report(p, out, calculus=calculus, points=points)
                except ArithmeticError as e:
                    failures += 1
                    print("error: {}".format(e), file=out)
        if prompt:
            print("p = ", end="", file=out, flush=True)
    return failures

def run():
    """Entry point for the unipoly executable.

    This procedure reads sys.argv and executes the requested tasks.
    """

    parser = argparse.ArgumentParser(description='Single-variable polynomial calculator.')
    parser.add_argument("--calculus", action="store_true", help="Also print the derivative and the integral")
    parser.add_argument("--at", metavar="X", type=float, action="append", default=[], help="Evaluate each polynomial at X (may be repeated)")
    parser.add_argument("--profile", action="store_true", help="Print time spent in each step when done")

    internal_opts = parser.add_argument_group("Options")
    opts.setup(internal_opts)

    parser.add_argument("file", nargs="?", default=None, help="Input file (omit to use stdin)")
    args = parser.parse_args()
    try:
        opts.read(args)
    except ValueError as e:
        parser.error(str(e))

    interactive = args.file is None and sys.stdin.isatty()
    if interactive:
        print("p = ", end="", flush=True)
    with common.open_maybe_stdin(args.file or "-") as f:
        failures = repl(f, sys.stdout, prompt=interactive, calculus=args.calculus, points=args.at)

    if args.profile:
        logging.dump_profile(sys.stderr)
    sys.exit(1 if failures else 0)

if __name__ == "__main__":
    run()
