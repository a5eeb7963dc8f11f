from __future__ import annotations
from typing import List, Tuple

def strip_comment(line: str) -> str:
    """Remove everything from the first '#' onward (objdump's '# 0x4010 <sym>' notes)."""
    return line.split("#", 1)[0]

def split_fields(line: str) -> List[str]:
    """Split a line into its tab-separated columns."""
    return line.split("\t")

def is_blank_field(field: str) -> bool:
    return not field.strip()

def split_mnemonic_operands(text: str) -> Tuple[str, List[str]]:
    """Return (mnemonic, remaining whitespace tokens). Case is preserved."""
    parts = text.split()
    if not parts:
        return "", []
    return parts[0], parts[1:]

def split_trailing_symbol(tokens: List[str]) -> Tuple[List[str], str]:
    """Cut tokens at the first one starting with '<'.

    Returns (operand tokens, symbol); the symbol token is kept as is and
    anything after it is dropped.
    """
    for i, tok in enumerate(tokens):
        if tok.startswith("<"):
            return tokens[:i], tok
    return tokens, ""

def split_operands(op_str: str) -> List[str]:
    """Split operand text on commas outside parentheses.

    '-0x8(%rbp,%rax,4),%rcx' gives two operands; empty pieces are dropped.
    """
    pieces: List[str] = []
    depth = 0
    start = 0
    for i, ch in enumerate(op_str):
        if ch == "(":
            depth += 1
        elif ch == ")" and depth:
            depth -= 1
        elif ch == "," and not depth:
            pieces.append(op_str[start:i])
            start = i + 1
    pieces.append(op_str[start:])
    return [p.strip() for p in pieces if p.strip()]
