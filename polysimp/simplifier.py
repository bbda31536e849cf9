import functools

from .parser import DEFAULT_COEFFICIENT_BITS, coefficient_range, parse
from . import reports


def compare_keys(a, b):
    # The constant term goes last, then shorter keys first, then by character code
    if len(a) != len(b):
        if a == "":
            return 1
        elif b == "":
            return -1
        else:
            return -1 if len(a) < len(b) else 1
    return (a > b) - (a < b)


def sort_keys(keys):
    return sorted(keys, key=functools.cmp_to_key(compare_keys))


def accumulate(monomials, coefficient_bits=DEFAULT_COEFFICIENT_BITS):
    min_coefficient, max_coefficient = coefficient_range(coefficient_bits)
    terms = {}
    for monomial in monomials:
        total = terms.get(monomial.variables, 0) + monomial.coefficient
        if not min_coefficient <= total <= max_coefficient:
            reports.critical(
                "coefficient-overflow",
                (monomial.ctx_start, monomial.ctx_end, f"Adding this monomial makes the coefficient of '{monomial.variables or 1}' overflow {coefficient_bits} bits")
            )
        terms[monomial.variables] = total
    return terms


def render(terms):
    result = []
    middle = False
    for key in sort_keys(terms):
        coeff = terms[key]
        if coeff == 0:
            continue
        elif coeff == -1:
            result.append("-")
            if key == "":
                result.append("1")
        elif coeff == 1:
            if middle:
                result.append("+")
            if key == "":
                result.append("1")
        else:
            if middle and coeff > 0:
                result.append("+")
            result.append(str(coeff))
        result.append(key)
        middle = True
    return "".join(result) or "0"


def simplify(polynomial, filename="<polynomial>", coefficient_bits=DEFAULT_COEFFICIENT_BITS):
    monomials = parse(filename, polynomial, coefficient_bits=coefficient_bits)
    return render(accumulate(monomials, coefficient_bits=coefficient_bits))
