'''
objdump_att: parser de salida de objdump -d (x86-64, sintaxis AT&T)
'''

from .parser import parse_line, parse, iter_lines, LineResult
from .diagnostics import ParseError, MalformedInteger, MalformedAddressExpression, EmptyInput

__all__ = [
    "parse_line", "parse", "iter_lines", "LineResult",
    "ParseError", "MalformedInteger", "MalformedAddressExpression", "EmptyInput",
]
