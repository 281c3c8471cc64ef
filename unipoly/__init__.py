"""Single-variable polynomials: arithmetic, calculus, parsing and printing."""
