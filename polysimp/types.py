from .context import Context


class Token:
    def __init__(self, ctx_start, ctx_end, *args, **kwargs):
        assert ctx_start is None or isinstance(ctx_start, Context)
        assert ctx_end is None or isinstance(ctx_end, Context)
        self.ctx_start = None if ctx_start is None else ctx_start.save()
        self.ctx_end = None if ctx_end is None else ctx_end.save()
        self.init(*args, **kwargs)

    def init(self):
        pass

    def text(self):
        return self.ctx_start.code[self.ctx_start.pos:self.ctx_end.pos]

    def __eq__(self, rhs):
        raise NotImplementedError()  # pragma: no cover


class Monomial(Token):
    # pylint: disable=arguments-differ
    def init(self, coefficient, variables):
        assert isinstance(coefficient, int)
        assert list(variables) == sorted(variables)
        self.coefficient = coefficient
        self.variables = variables

    def as_pair(self):
        return self.coefficient, self.variables

    def __repr__(self):
        sign = "-" if self.coefficient < 0 else "+"
        magnitude = abs(self.coefficient)
        if magnitude == 1 and self.variables:
            return sign + self.variables
        return f"{sign}{magnitude}{self.variables}"

    def __eq__(self, rhs):
        return isinstance(rhs, type(self)) and self.as_pair() == rhs.as_pair()
