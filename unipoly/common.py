"""Utility functions not found in the standard libraries.

Important functions:
 - is_variable_symbol: check that a string can serve as the variable
 - format_number: print a float the short way ("3", not "3.0")
 - to_superscript / from_superscript: convert exponents to and from
   superscript digits
 - open_maybe_stdin: open a file, or standard input for "-"
"""

# builtins
import os
import sys

SUPERSCRIPT_DIGITS = "⁰¹²³⁴⁵⁶⁷⁸⁹"

_TO_SUPERSCRIPT = str.maketrans("0123456789", SUPERSCRIPT_DIGITS)
_FROM_SUPERSCRIPT = str.maketrans(SUPERSCRIPT_DIGITS, "0123456789")

def to_superscript(n : int) -> str:
    return str(n).translate(_TO_SUPERSCRIPT)

def from_superscript(s : str) -> int:
    return int(s.translate(_FROM_SUPERSCRIPT))

def is_variable_symbol(s) -> bool:
    """Variable symbols are single ASCII letters other than "e".

    "e" is taken by scientific notation: "2e+3" reads as 2000.
    """
    return isinstance(s, str) and len(s) == 1 and s.isascii() and s.isalpha() and s not in "eE"

def format_number(x) -> str:
    """Render a coefficient as text.

    Integral values drop the trailing ".0"; everything else uses `repr`, which
    is the shortest text that reads back as the same float.
    """
    s = repr(float(x))
    if s.endswith(".0"):
        s = s[:-2]
    return s

def open_maybe_stdin(f : str, mode="r"):
    """Open file f, or open standard input if f is "-".

    In any case, the caller is responsible for closing the returned handle.
    The safest usage of this function is

        with open_maybe_stdin(path) as f:
            ...
    """
    if f == "-":
        return os.fdopen(os.dup(sys.stdin.fileno()), mode)
    return open(f, mode)
