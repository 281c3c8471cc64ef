"""Class for representing a single monomial c*x^n.

Terms are immutable values: every operation returns a new Term.  Operations
that only make sense between terms of compatible exponents raise DomainError
when misused; Polynomial never triggers those, since it merges equal
exponents itself before combining terms.
"""

import math
import numbers

from unipoly.common import format_number, to_superscript

class DomainError(ValueError):
    """An operation was applied outside of its mathematical domain."""
    pass

def check_exponent(order, what="exponent"):
    if isinstance(order, bool) or not isinstance(order, numbers.Integral):
        raise DomainError("{} must be an integer, not {!r}".format(what, order))
    if order < 0:
        raise DomainError("{} must be non-negative, not {}".format(what, order))
    return int(order)

def _power(base, n):
    """base ** n, saturating to a signed infinity where floats overflow."""
    try:
        return base ** n
    except OverflowError:
        if not isinstance(base, numbers.Real):
            raise
        negative = base < 0 and n % 2 == 1
        return -math.inf if negative else math.inf

class Term(object):
    __slots__ = ("coeff", "order")

    def __init__(self, coeff=0.0, order=0):
        object.__setattr__(self, "coeff", float(coeff))
        object.__setattr__(self, "order", check_exponent(order))

    def __setattr__(self, name, value):
        raise AttributeError("Term objects are immutable")

    def __reduce__(self):
        return (Term, (self.coeff, self.order))

    def __hash__(self):
        return hash((self.coeff, self.order))

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        return self.coeff == other.coeff and self.order == other.order

    def __repr__(self):
        return "Term({!r}, {!r})".format(self.coeff, self.order)

    def __str__(self):
        return self.format()

    def format(self, var="x"):
        s = ""
        if self.order == 0 or self.coeff != 1:
            s += format_number(self.coeff)
        if self.order != 0:
            s += var
            if self.order != 1:
                s += to_superscript(self.order)
        return s

    def __pos__(self):
        return self

    def __neg__(self):
        return Term(-self.coeff, self.order)

    def __add__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        if self.order != other.order:
            raise DomainError("cannot add terms of order {} and {}".format(self.order, other.order))
        return Term(self.coeff + other.coeff, self.order)

    def __sub__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        if self.order != other.order:
            raise DomainError("cannot subtract terms of order {} and {}".format(self.order, other.order))
        return Term(self.coeff - other.coeff, self.order)

    def __mul__(self, other):
        if isinstance(other, Term):
            return Term(self.coeff * other.coeff, self.order + other.order)
        if isinstance(other, numbers.Real):
            return Term(self.coeff * other, self.order)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, Term):
            if self.order < other.order:
                raise DomainError("cannot divide a term of order {} by a term of order {}".format(self.order, other.order))
            return Term(self.coeff / other.coeff, self.order - other.order)
        if isinstance(other, numbers.Real):
            return Term(self.coeff / other, self.order)
        return NotImplemented

    def __pow__(self, n):
        n = check_exponent(n, what="power")
        return Term(_power(self.coeff, n), self.order * n)

    def __call__(self, x):
        if isinstance(x, numbers.Real):
            x = float(x)
        return self.coeff * _power(x, self.order)
