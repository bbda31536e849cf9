import itertools
import re
import threading


class Report:
    def __init__(self, text: str, raw_text: str):
        self.text: str = text
        self.raw_text: str = raw_text

    def __call__(self, *args, **kwargs):
        emit_report(self, *args, **kwargs)

error = Report("\x1b[91mError\x1b[0m", "Error")
critical = Report("\x1b[91mError\x1b[0m", "Error")
warning = Report("\x1b[33mWarning\x1b[0m", "Warning")


def colorize(text):
    def paint(match):
        token = match.group()
        if token.isdigit():
            color = 95
        elif token in "+-":
            color = 93
        else:
            color = 94
        return f"\x1b[{color}m{token}\x1b[39m"
    return re.sub(r"[a-zA-Z]+|\d+|[+-]", paint, text)


_local = threading.local()


def handlers_stack():
    if not hasattr(_local, "handlers_stack"):
        _local.handlers_stack = []
    return _local.handlers_stack


class handle_reports:
    def __init__(self, fn):
        self.fn = fn
        self.is_error_condition = False

    def __enter__(self):
        handlers_stack().append(self)
        return self

    def __exit__(self, exc_type, exc_value, exc_tb):
        assert handlers_stack().pop() is self

        if self.is_error_condition and exc_type in (None, RecoverableError):
            raise UnrecoverableError("Errors were reported")

        return False


class BareHandler:
    def __call__(self, priority, identifier, *reports):
        for ctx_start, _ctx_end, text in reports:
            text = text.replace("\n", " ")
            print(f"{ctx_start!r}: {priority.raw_text}: {text}")


class GraphicalHandler:
    def __call__(self, priority, identifier, *reports):
        for file_i, (filename, file_reports) in enumerate(itertools.groupby(reports, key=lambda report: report[0].filename)):
            if file_i == 0:
                print(f"{priority.text} in \x1b[96m{filename}\x1b[0m: \x1b[38;5;208m[-W{identifier}]\x1b[0m")
            else:
                print(f"In \x1b[96m{filename}\x1b[0m:")

            for ctx_start, ctx_end, text in file_reports:
                assert ctx_start.filename == ctx_end.filename
                code = ctx_start.code
                idx_line_start = code.rfind("\n", 0, ctx_start.pos) + 1
                idx_line_end = code.find("\n", ctx_start.pos)
                if idx_line_end == -1:
                    idx_line_end = len(code)
                line_no = code[:idx_line_start].count("\n")
                line = code[idx_line_start:idx_line_end]

                start_col_no = ctx_start.pos - idx_line_start
                end_col_no = min(ctx_end.pos, idx_line_end) - idx_line_start

                print("\x1b[92m" + str(line_no + 1).rjust(5) + "\x1b[0m \x1b[38;5;242m│ \x1b[0m", end="")
                print(colorize(line[:start_col_no]), end="")
                print(f"\x1b[48;5;52m{colorize(line[start_col_no:end_col_no])}\x1b[0m", end="")
                print(colorize(line[end_col_no:]))

                for line_i, text_line in enumerate(text.split("\n")):
                    print(" " * 5 + " \x1b[38;5;242m│ \x1b[38;5;11m" + " " * start_col_no + ("🡹 " if line_i == 0 else "  ") + text_line + "\x1b[0m")

        print()


def emit_report(priority, identifier, *reports):
    stack = handlers_stack()
    if not stack:
        # Library calls without a handler: drop warnings, fail on the first error
        if priority is warning:
            return
        raise UnrecoverableError(reports[0][2] if reports else identifier, identifier)

    handler = stack[-1]
    handler.fn(priority, identifier, *reports)

    if priority in (error, critical):
        handler.is_error_condition = True

    if priority is critical:
        raise UnrecoverableError(reports[0][2] if reports else identifier, identifier)


class RecoverableError(Exception):
    pass

class UnrecoverableError(Exception):
    def __init__(self, message="", identifier=None):
        super().__init__(message)
        self.identifier = identifier
