from .parser import split_monomial
from .simplifier import simplify
from .version import __version__
