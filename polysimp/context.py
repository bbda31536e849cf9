class Context:
    def __init__(self, filename, code):
        self.filename = filename
        self.code = code
        self.pos = 0


    def save(self):
        ctx = Context(self.filename, self.code)
        ctx.pos = self.pos
        return ctx


    def restore(self, ctx):
        self.pos = ctx.pos


    def at(self, pos):
        ctx = Context(self.filename, self.code)
        ctx.pos = pos
        return ctx


    def peek(self):
        return self.code[self.pos:self.pos + 1]


    def __repr__(self):
        line_no = self.code[:self.pos].count("\n")
        idx_line_start = self.code.rfind("\n", 0, self.pos) + 1
        col_no = self.pos - idx_line_start
        return f"{self.filename}:{line_no + 1}:{col_no + 1}"
