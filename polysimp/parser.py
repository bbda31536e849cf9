import re

from .context import Context
from . import reports
from . import types


DEFAULT_COEFFICIENT_BITS = 32


class Parser:
    def __init__(self, fn):
        self.fn = fn


    def __call__(self, ctx, *, maybe=False, **kwargs):
        if maybe:
            old_ctx = ctx.save()
            try:
                result = self.fn(ctx, **kwargs)
                assert result is not None
            except reports.RecoverableError:
                ctx.restore(old_ctx)
                return None
            else:
                return result
        else:
            result = self.fn(ctx, **kwargs)
            assert result is not None
            return result


    @classmethod
    def regex(cls, regex):
        regex = re.compile(regex)
        def fn(ctx):
            match = regex.match(ctx.code, ctx.pos)
            if match is None:
                raise reports.RecoverableError(f"Failed to match regex at position {ctx.pos}")
            ctx.pos = match.end()
            return match.group()
        return Parser(fn)


sign = Parser.regex(r"[+-]")
digits = Parser.regex(r"[0-9]+")
variables = Parser.regex(r"[0-9a-zA-Z]+")


def coefficient_range(coefficient_bits):
    limit = 1 << (coefficient_bits - 1)
    return -limit, limit - 1


@Parser
def monomial(ctx, end, coefficient_bits=DEFAULT_COEFFICIENT_BITS):
    ctx_start = ctx.save()

    sign_str = sign(ctx, maybe=True) or ""
    if ctx.pos >= end:
        reports.error(
            "missing-monomial",
            (ctx_start, ctx, f"A monomial was expected after '{sign_str}'" if sign_str else "A monomial was expected")
        )
        raise reports.RecoverableError("Empty monomial")

    ctx_digits = ctx.save()
    digits_str = digits(ctx, maybe=True)
    if digits_str is None:
        magnitude = 1
    else:
        magnitude = int(digits_str)
        _, max_coefficient = coefficient_range(coefficient_bits)
        if magnitude > max_coefficient:
            reports.critical(
                "coefficient-overflow",
                (ctx_digits, ctx, f"This coefficient does not fit in {coefficient_bits} bits.\nThe largest supported magnitude is {max_coefficient}.")
            )
        elif magnitude == 0:
            reports.warning(
                "zero-coefficient",
                (ctx_digits, ctx, "This monomial has a zero coefficient and does not contribute to the result")
            )

    ctx_variables = ctx.save()
    variables_str = variables(ctx, maybe=True) or ""

    if ctx.pos < end:
        char = ctx.peek()
        reports.error(
            "invalid-character",
            (ctx, ctx.at(ctx.pos + 1), f"Unexpected character '{char}'. Only digits, letters and '+'/'-' signs are allowed in a polynomial")
        )
        raise reports.RecoverableError("Invalid character in monomial")

    repeated = sorted(char for char in set(variables_str) if variables_str.count(char) > 1)
    if repeated:
        reports.warning(
            "repeated-variable",
            (ctx_variables, ctx, "Variables " + ", ".join(f"'{char}'" for char in repeated) + " occur more than once.\nRepetition is kept as a separate letter and is not treated as an exponent")
        )

    coefficient = -magnitude if sign_str == "-" else magnitude
    return types.Monomial(ctx_start, ctx, coefficient, "".join(sorted(variables_str)))


def split_polynomial(code):
    # A sign at index 0 belongs to the first monomial
    segment_start = 0
    for i, char in enumerate(code):
        if i != 0 and char in "+-":
            yield segment_start, i
            segment_start = i
    if code:
        yield segment_start, len(code)


def parse(filename, code, coefficient_bits=DEFAULT_COEFFICIENT_BITS):
    ctx = Context(filename, code)
    monomials = []
    for start, end in split_polynomial(code):
        ctx.pos = start
        result = monomial(ctx, maybe=True, end=end, coefficient_bits=coefficient_bits)
        if result is not None:
            monomials.append(result)
    return monomials


def split_monomial(segment, coefficient_bits=DEFAULT_COEFFICIENT_BITS):
    ctx = Context("<monomial>", segment)
    return monomial(ctx, end=len(segment), coefficient_bits=coefficient_bits).as_pair()
