"""Class for representing polynomials of one variable.

A Polynomial is a map from exponent to Term kept in canonical form:
 - no term has a zero coefficient
 - no two terms share an exponent
 - iteration yields terms in strictly decreasing exponent order

Every constructor and operator funnels its terms through `_reduce`, which is
the only place where equal exponents are merged and zero terms dropped.

Polynomials support +, -, * (by numbers, Terms and Polynomials), / (by
numbers only), ** with a non-negative integer, the in-place forms of these,
calling (evaluation), and `derivative`/`integral`.  Binary operators never
modify their operands.  In-place operators build the new term map on the side
and swap it in at the end, so a failing operation leaves the receiver as it
was.
"""

import numbers

from unipoly import opts
from unipoly.common import is_variable_symbol
from unipoly.logging import task
from unipoly.parse import parse_terms
from unipoly.terms import Term, check_exponent

variable = opts.Option("variable", str, "x",
    description="Variable symbol for polynomials",
    metavar="CHAR",
    check=is_variable_symbol)

def _reduce(terms, incoming, coeff=1.0, order=0):
    """Fold terms into a canonical map.

    Each incoming term is first multiplied by Term(coeff, order).  The map
    `terms` is updated in place and returned.
    """
    shift = Term(coeff, order)
    for t in incoming:
        t = t * shift
        old = terms.get(t.order)
        if old is not None:
            t = old + t
            if t.coeff == 0:
                del terms[t.order]
            else:
                terms[t.order] = t
        elif t.coeff != 0:
            terms[t.order] = t
    return terms

class Polynomial(object):
    __slots__ = ("_terms", "var")

    def __init__(self, terms=(), var=None):
        """Build a polynomial.

        `terms` may be a number (constant polynomial), a single Term, or an
        iterable of Terms.  Terms with equal exponents are added together.
        The variable symbol defaults to the `variable` option.
        """
        if var is None:
            var = variable.value
        if not is_variable_symbol(var):
            raise ValueError("variable must be a single letter, not {!r}".format(var))
        if isinstance(terms, Term):
            terms = (terms,)
        elif isinstance(terms, numbers.Real):
            terms = (Term(terms),)
        self.var = var
        self._terms = _reduce({}, terms)

    @classmethod
    def from_string(cls, text, var=None):
        """Parse text such as "3x^2+2x-5".

        Raises unipoly.parse.InvalidPolynomialError on malformed text.  Text
        with no terms at all gives the zero polynomial.
        """
        if var is None:
            var = variable.value
        return cls(parse_terms(text, var), var=var)

    def _derive(self, terms):
        p = Polynomial.__new__(Polynomial)
        p.var = self.var
        p._terms = terms
        return p

    def _coerce(self, other):
        if isinstance(other, Polynomial):
            if other.var != self.var:
                raise ValueError("cannot combine polynomials in {} and {}".format(self.var, other.var))
            return other
        if isinstance(other, (Term, numbers.Real)):
            return Polynomial(other, var=self.var)
        return None

    def copy(self):
        return self._derive(dict(self._terms))

    # Queries ##################################################################

    def __iter__(self):
        for o in sorted(self._terms, reverse=True):
            yield self._terms[o]

    def __len__(self):
        return len(self._terms)

    def __bool__(self):
        return bool(self._terms)

    def is_zero(self):
        return not self._terms

    def degree(self):
        """The highest exponent, or -1 for the zero polynomial."""
        return max(self._terms, default=-1)

    def coefficient(self, order):
        t = self._terms.get(order)
        return 0.0 if t is None else t.coeff

    def __eq__(self, other):
        if isinstance(other, (Term, numbers.Real)):
            other = Polynomial(other, var=self.var)
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.var == other.var and self._terms == other._terms

    __hash__ = None

    def __str__(self):
        return self.format()

    def format(self):
        s = ""
        for t in self:
            if t.coeff > 0 and s:
                s += "+"
            s += t.format(self.var)
        return s

    def __repr__(self):
        return "Polynomial({!r}, var={!r})".format(list(self), self.var)

    # Arithmetic ###############################################################

    def __pos__(self):
        return self.copy()

    def __neg__(self):
        return self * -1.0

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._derive(_reduce(dict(self._terms), other._terms.values()))

    __radd__ = __add__

    def __iadd__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        self._terms = _reduce(dict(self._terms), other._terms.values())
        return self

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self._derive(_reduce(dict(self._terms), other._terms.values(), -1.0))

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __isub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        self._terms = _reduce(dict(self._terms), other._terms.values(), -1.0)
        return self

    def _product(self, other):
        if isinstance(other, numbers.Real):
            return _reduce({}, self._terms.values(), other)
        other = self._coerce(other)
        if other is None:
            return None
        terms = {}
        for t in other._terms.values():
            _reduce(terms, self._terms.values(), t.coeff, t.order)
        return terms

    def __mul__(self, other):
        terms = self._product(other)
        if terms is None:
            return NotImplemented
        return self._derive(terms)

    __rmul__ = __mul__

    def __imul__(self, other):
        terms = self._product(other)
        if terms is None:
            return NotImplemented
        self._terms = terms
        return self

    def __truediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("polynomial division by zero")
        return self * (1.0 / other)

    def __itruediv__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("polynomial division by zero")
        self *= 1.0 / other
        return self

    def __pow__(self, n):
        n = check_exponent(n, what="power")
        with task("pow", terms=len(self), n=n):
            res = Polynomial(1.0, var=self.var)
            for i in range(n):
                res *= self
            return res

    pow = __pow__

    # Calculus #################################################################

    def derivative(self):
        return self._derive(_reduce({},
            (Term(t.coeff * t.order, t.order - 1) for t in self._terms.values() if t.order > 0)))

    def integral(self):
        """Antiderivative with a zero constant of integration."""
        return self._derive(_reduce({},
            (Term(t.coeff / (t.order + 1), t.order + 1) for t in self._terms.values())))

    def evaluate(self, x):
        return sum((t(x) for t in self), 0.0)

    __call__ = evaluate
