"""Parser for polynomial text such as "3x^2 + 2x - 5".

The important functions are:
 - tokenize:    str -> iterator of ply tokens
 - parse_terms: str -> [Term]

Polynomial.from_string (in unipoly.polynomials) is the usual entry point; it
folds the terms produced here into canonical form.

The grammar is scanned term by term, left to right.  A term is an optional
coefficient, optionally followed by the variable, optionally followed by an
exponent:

    term  ::= coeff | [coeff] VAR [exp]
    coeff ::= NUM | ("+" | "-") NUM | ("+" | "-")      (the bare sign only before VAR)
    exp   ::= "^" DIGITS | SUPERSCRIPT

Terms follow each other with no separator other than their own sign, so
"2x 3" is 2x+3.  Whitespace is ignored everywhere.
"""

# 3rd party
from ply import lex

# ours
from unipoly.common import from_superscript, is_variable_symbol, SUPERSCRIPT_DIGITS
from unipoly.logging import task, event
from unipoly.terms import Term

class InvalidPolynomialError(ValueError):
    """The text does not describe a polynomial.

    Attributes:
        text     - the text being parsed
        position - index into `text` of the offending character, or None if
                   the text ended too early
        reason   - what was expected
    """
    def __init__(self, text, position, reason):
        self.text = text
        self.position = position
        self.reason = reason
        where = "at end of input" if position is None else "at position {}".format(position)
        super().__init__("invalid polynomial {}: {}".format(where, reason))

# Lexer ########################################################################

tokens = ("NUM", "PLUS", "MINUS", "CARET", "LETTER", "SUPERSCRIPT")

def make_lexer():

    t_PLUS   = r"\+"
    t_MINUS  = r"-"
    t_CARET  = r"\^"
    t_LETTER = r"[a-zA-Z]"
    t_SUPERSCRIPT = "[" + SUPERSCRIPT_DIGITS + "]+"

    def t_NUM(t):
        r"([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?"
        return t

    t_ignore = " \t\r\n"

    def t_error(t):
        raise InvalidPolynomialError(
            t.lexer.lexdata, t.lexpos,
            "illegal character {}".format(repr(t.value[0])))

    return lex.lex()

_lexer = make_lexer()
def tokenize(s):
    lexer = _lexer.clone() # Because lexer objects are stateful
    lexer.input(s)
    while True:
        tok = lexer.token()
        if not tok:
            break
        yield tok

# Term scanner #################################################################

class _TermScanner(object):
    def __init__(self, text, var):
        self.text = text
        self.var = var.lower()
        self.tokens = list(tokenize(text))
        self.i = 0

    def peek(self):
        return self.tokens[self.i] if self.i < len(self.tokens) else None

    def advance(self):
        tok = self.tokens[self.i]
        self.i += 1
        return tok

    def at_var(self):
        tok = self.peek()
        return tok is not None and tok.type == "LETTER" and tok.value.lower() == self.var

    def fail(self, reason):
        tok = self.peek()
        raise InvalidPolynomialError(self.text, None if tok is None else tok.lexpos, reason)

    def coefficient(self):
        """Read an optional coefficient; returns None if there is none."""
        tok = self.peek()
        if tok.type == "NUM":
            self.advance()
            return float(tok.value)
        if tok.type in ("PLUS", "MINUS"):
            self.advance()
            sign = -1.0 if tok.type == "MINUS" else 1.0
            nxt = self.peek()
            if nxt is not None and nxt.type == "NUM":
                self.advance()
                return sign * float(nxt.value)
            if self.at_var():
                return sign
            self.fail("expected a number after {!r}".format(tok.value))
        return None

    def exponent(self):
        tok = self.peek()
        if tok is None:
            return 1
        if tok.type == "SUPERSCRIPT":
            self.advance()
            return from_superscript(tok.value)
        if tok.type != "CARET":
            return 1
        self.advance()
        tok = self.peek()
        if tok is None or tok.type != "NUM" or not tok.value.isdigit():
            self.fail("expected a non-negative integer exponent after '^'")
        self.advance()
        return int(tok.value)

    def term(self):
        coeff = self.coefficient()
        if not self.at_var():
            if coeff is None:
                self.fail("expected a number or {!r}".format(self.var))
            return Term(coeff)
        self.advance()
        if coeff is None:
            coeff = 1.0
        return Term(coeff, self.exponent())

def parse_terms(text, var="x"):
    """Split polynomial text into its terms, in source order.

    Terms are not merged; equal exponents may repeat and zero coefficients
    are kept.  Raises InvalidPolynomialError if the text is malformed.
    """
    if not is_variable_symbol(var):
        raise ValueError("variable must be a single letter, not {!r}".format(var))
    with task("parse", text=text):
        scanner = _TermScanner(text, var)
        terms = []
        while scanner.peek() is not None:
            terms.append(scanner.term())
        event("read {} terms".format(len(terms)))
        return terms
