# src/objdump_att/parser.py
from __future__ import annotations
import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .lexer import (
    strip_comment,
    split_fields,
    is_blank_field,
    split_mnemonic_operands,
    split_trailing_symbol,
    split_operands,
)
from .ast import (
    Reg, Imm, Addr, Operand, Instruction,
    InstructionLine, DataLine, OtherLine, BlankLine, ParsedLine,
)
from .isa import opcode_of
from .regs import register_of
from .utils import fits_u64, u64
from .diagnostics import (
    Diagnostic, ParseError, MalformedInteger, MalformedAddressExpression, EmptyInput,
    from_parse_error,
)

logger = logging.getLogger(__name__)

HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")
BIN_DIGITS_RE = re.compile(r"[01]+")
DEC_DIGITS_RE = re.compile(r"[0-9]+")
BYTE_RE       = re.compile(r"[0-9a-fA-F]{1,2}")

# '<addr>:' con decoración opcional delante (flechas de salto, sangría)
INSTRUCTION_RE = re.compile(r"^\W*([0-9a-fA-F]{1,16}):")
# '<addr de 16 dígitos> <palabras...>'
DATA_RE        = re.compile(r"^[0-9a-fA-F]{16}")

_NEG_LIMIT = 1 << 63

# ---------------- Literales ----------------

def parse_int(token: str) -> int:
    """Parsea un literal entero: '0x..' hex, '0b..' binario, si no decimal.

    Un '-' inicial se acepta y el valor se guarda como patrón de bits u64
    ('-0x8' -> 0xfffffffffffffff8). Cualquier otro carácter, o un valor
    fuera de 64 bits, lanza MalformedInteger.
    """
    t = token
    negative = t.startswith("-")
    if negative:
        t = t[1:]
    if t.startswith("0x"):
        digits, base, digits_re = t[2:], 16, HEX_DIGITS_RE
    elif t.startswith("0b"):
        digits, base, digits_re = t[2:], 2, BIN_DIGITS_RE
    else:
        digits, base, digits_re = t, 10, DEC_DIGITS_RE
    if not digits_re.fullmatch(digits):
        raise MalformedInteger(f"Literal entero inválido en base {base}: '{token}'", token)
    value = int(digits, base)
    if negative:
        if value > _NEG_LIMIT:
            raise MalformedInteger(f"Literal negativo fuera de 64 bits: '{token}'", token)
        return u64(-value)
    if not fits_u64(value):
        raise MalformedInteger(f"Literal fuera de 64 bits: '{token}'", token)
    return value

def parse_immediate(token: str) -> int:
    """Parsea un inmediato AT&T ('$0x2a', '$0b101010', '$42')."""
    if not token.startswith("$"):
        raise MalformedInteger(f"Inmediato sin prefijo '$': '{token}'", token)
    return parse_int(token[1:])

# ---------------- Operandos ----------------

def _parse_value(token: str) -> Union[Reg, Imm]:
    # dentro de paréntesis: '$' es inmediato, lo demás registro (con o sin '%')
    if token.startswith("$"):
        return Imm(parse_immediate(token))
    return Reg(register_of(token))

def parse_address(token: str) -> Addr:
    """Parsea '[DISP](BASE,INDEX[,SCALE])'.

    DISP y SCALE son literales enteros; BASE e INDEX registros o inmediatos.
    INDEX es obligatorio; su ausencia o unos paréntesis mal formados lanzan
    MalformedAddressExpression.
    """
    disp_raw, sep, rest = token.partition("(")
    if not sep:
        raise MalformedAddressExpression(f"Operando de memoria inválido (falta '('): '{token}'", token)
    if not rest.endswith(")"):
        raise MalformedAddressExpression(f"Operando de memoria inválido (falta ')'): '{token}'", token)
    inner = rest[:-1]
    if "(" in inner or ")" in inner:
        raise MalformedAddressExpression(f"Paréntesis anidados en operando de memoria: '{token}'", token)

    disp_raw = disp_raw.strip()
    displacement = parse_int(disp_raw) if disp_raw else None

    parts = [p.strip() for p in inner.split(",")]
    if len(parts) < 2 or not parts[1]:
        raise MalformedAddressExpression(f"Falta INDEX en operando de memoria: '{token}'", token)
    if len(parts) > 3:
        raise MalformedAddressExpression(f"Demasiados componentes en operando de memoria: '{token}'", token)

    base = _parse_value(parts[0]) if parts[0] else None
    index = _parse_value(parts[1])
    scale = None
    if len(parts) == 3 and parts[2]:
        scale = parse_int(parts[2])
    return Addr(displacement=displacement, base=base, index=index, scale=scale)

def parse_operand(token: str) -> Operand:
    """Clasifica por el primer carácter: '%' registro, '$' inmediato, resto memoria."""
    if token.startswith("%"):
        return Reg(register_of(token))
    if token.startswith("$"):
        return Imm(parse_immediate(token))
    return parse_address(token)

# ---------------- Instrucción ----------------

def parse_instruction(text: str) -> Instruction:
    """Tokeniza 'mnemónico operandos [<símbolo>]' en una Instruction.

    El texto de operandos se vuelve a unir y se separa por comas fuera de
    paréntesis, así que 'movq %rax, %rbx' y 'mov %rsp,%rbp' dan dos
    operandos y '-0x8(%rbp,%rax,4)' queda entero. Los operandos conservan el
    orden de la fuente. Un operando inválido aborta la instrucción completa.
    """
    mnemonic, tokens = split_mnemonic_operands(text)
    if not mnemonic:
        raise EmptyInput("Instrucción vacía", text)
    op_tokens, symbol = split_trailing_symbol(tokens)
    operands: List[Operand] = [parse_operand(tok) for tok in split_operands(" ".join(op_tokens))]
    return Instruction(opcode=opcode_of(mnemonic), operands=operands, trailing_symbol=symbol)

# ---------------- Líneas ----------------

def _parse_bytes(tokens: List[str]) -> bytes:
    out = bytearray()
    for tok in tokens:
        if not BYTE_RE.fullmatch(tok):
            raise MalformedInteger(f"Byte hexadecimal inválido: '{tok}'", tok)
        out.append(int(tok, 16))
    return bytes(out)

def _parse_instruction_line(fields: List[str], address_match: re.Match) -> InstructionLine:
    address = int(address_match.group(1), 16)
    byte_tokens = fields[0][address_match.end():].split()
    if len(fields) >= 3:
        # formato nativo de objdump: 'addr:\tbytes\tinstrucción'
        byte_tokens += fields[1].split()
        text = fields[2]
    elif len(fields) == 2:
        text = fields[1]
    else:
        text = ""
    if is_blank_field(text):
        raise EmptyInput("Línea de instrucción sin mnemónico", fields[0])
    return InstructionLine(address=address, bytes=_parse_bytes(byte_tokens),
                           instruction=parse_instruction(text))

def _parse_data_line(field0: str) -> DataLine:
    words = field0.split()
    addr_tok = words[0]
    if not HEX_DIGITS_RE.fullmatch(addr_tok):
        raise MalformedInteger(f"Dirección hexadecimal inválida: '{addr_tok}'", addr_tok)
    address = int(addr_tok, 16)
    if not fits_u64(address):
        raise MalformedInteger(f"Dirección fuera de 64 bits: '{addr_tok}'", addr_tok)
    return DataLine(address=address, text=" ".join(words[1:]))

def parse_line(line: str) -> ParsedLine:
    """Clasifica una línea de objdump (sin el salto de línea final).

    Devuelve InstructionLine, DataLine, OtherLine o BlankLine. Solo lanza
    ParseError cuando la línea tiene forma de instrucción/datos pero su
    contenido es inválido; las formas no reconocidas son OtherLine.
    Una línea solo con espacios o comentario es BlankLine.
    """
    core = strip_comment(line)
    fields = split_fields(core)
    if all(is_blank_field(f) for f in fields):
        return BlankLine()

    m = INSTRUCTION_RE.match(fields[0])
    if m:
        return _parse_instruction_line(fields, m)
    if DATA_RE.match(fields[0]):
        return _parse_data_line(fields[0])
    return OtherLine(text=core)

# ---------------- Flujo de líneas ----------------

@dataclass(frozen=True)
class LineResult:
    """Resultado de una línea: exactamente uno de parsed/diagnostic es distinto de None."""
    lineno: int
    parsed: Optional[ParsedLine] = None
    diagnostic: Optional[Diagnostic] = None

    @property
    def ok(self) -> bool:
        return self.diagnostic is None

def iter_lines(lines: Iterable[str], *, filename: Optional[str] = None) -> Iterator[LineResult]:
    """Aplica parse_line a cada línea; un error produce un diagnóstico y el flujo sigue."""
    for lineno, raw in enumerate(lines, start=1):
        raw = raw.rstrip("\r\n")
        try:
            res = LineResult(lineno, parsed=parse_line(raw))
        except ParseError as ex:
            logger.debug("línea %d: %s (%r)", lineno, ex, raw)
            res = LineResult(lineno, diagnostic=from_parse_error(ex, line=lineno, file=filename))
        yield res

def parse(text: str, *, filename: Optional[str] = None) -> Tuple[List[ParsedLine], List[Diagnostic]]:
    """
    Devuelve (lines, diagnostics): las líneas parseadas correctamente, en orden,
    y un diagnóstico por cada línea con contenido inválido.
    """
    parsed: List[ParsedLine] = []
    diags: List[Diagnostic] = []
    for res in iter_lines(text.splitlines(), filename=filename):
        if res.ok:
            parsed.append(res.parsed)
        else:
            diags.append(res.diagnostic)
    return parsed, diags
