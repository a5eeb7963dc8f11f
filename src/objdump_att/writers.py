from __future__ import annotations
from typing import Iterable, List, Optional, Union

from .ast import (
    Reg, Imm, Operand, Instruction,
    InstructionLine, DataLine, OtherLine, ParsedLine,
)
from .regs import UnknownRegister
from .utils import as_signed64, hex_bytes, to_hex64

def format_register(reg: Reg) -> str:
    r = reg.register
    if isinstance(r, UnknownRegister):
        return r.name
    return f"%{r.value}"

def _format_value(v: Union[Reg, Imm]) -> str:
    if isinstance(v, Reg):
        return format_register(v)
    return f"${to_hex64(v.value)}"

def format_operand(op: Operand) -> str:
    """Vista legible de un operando; los desplazamientos se muestran con signo."""
    if isinstance(op, Reg):
        return format_register(op)
    if isinstance(op, Imm):
        return f"${to_hex64(op.value)}"
    disp = ""
    if op.displacement is not None:
        d = as_signed64(op.displacement)
        disp = f"-{to_hex64(-d)}" if d < 0 else to_hex64(d)
    parts = [_format_value(op.base) if op.base is not None else "", _format_value(op.index)]
    if op.scale is not None:
        parts.append(str(op.scale))
    return f"{disp}({','.join(parts)})"

def format_instruction(ins: Instruction) -> str:
    s = ins.mnemonic
    if ins.operands:
        s += " " + ",".join(format_operand(o) for o in ins.operands)
    if ins.trailing_symbol:
        s += " " + ins.trailing_symbol
    return s

def format_line(parsed: ParsedLine) -> Optional[str]:
    """Una línea por registro: 'INS 0x401000 [55] push %rbp'. BlankLine no produce salida."""
    if isinstance(parsed, InstructionLine):
        return f"INS {to_hex64(parsed.address)} [{hex_bytes(parsed.bytes)}] {format_instruction(parsed.instruction)}"
    if isinstance(parsed, DataLine):
        return f"DAT {to_hex64(parsed.address)} {parsed.text}"
    if isinstance(parsed, OtherLine):
        return f"OTH {parsed.text.strip()}"
    return None

def to_text_lines(lines: Iterable[ParsedLine]) -> List[str]:
    out = []
    for p in lines:
        s = format_line(p)
        if s is not None:
            out.append(s)
    return out

def write_text(lines: Iterable[ParsedLine], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in to_text_lines(lines):
            f.write(line + "\n")
