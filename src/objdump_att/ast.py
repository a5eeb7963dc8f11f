'''
dataclases del modelo: líneas parseadas, instrucción y operandos
'''

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .isa import OpcodeLike, UnknownOpcode
from .regs import RegisterLike

# ---- Operandos ----

@dataclass(frozen=True)
class Reg:
    """Operando registro ('%rax'); puede ser UnknownRegister."""
    register: RegisterLike

@dataclass(frozen=True)
class Imm:
    """Inmediato '$...' como patrón de bits u64."""
    value: int

@dataclass(frozen=True)
class Addr:
    """Expresión de direccionamiento disp(base,index,scale), sin resolver.

    Solo refleja los tokens presentes: displacement y scale son enteros u64
    (los desplazamientos negativos quedan en complemento a dos), base es
    opcional e index obligatorio.
    """
    displacement: Optional[int]
    base: Optional[Union[Reg, Imm]]
    index: Union[Reg, Imm]
    scale: Optional[int] = None

Operand = Union[Reg, Imm, Addr]

# ---- Instrucción ----

@dataclass(frozen=True)
class Instruction:
    """Mnemónico resuelto + operandos en orden de fuente (AT&T: src, dst) + símbolo '<...>'."""
    opcode: OpcodeLike
    operands: List[Operand] = field(default_factory=list)
    trailing_symbol: str = ""

    @property
    def mnemonic(self) -> str:
        if isinstance(self.opcode, UnknownOpcode):
            return self.opcode.name
        return self.opcode.value

# ---- Líneas ----

@dataclass(frozen=True)
class InstructionLine:
    address: int
    bytes: bytes
    instruction: Instruction

@dataclass(frozen=True)
class DataLine:
    """Línea '<16 dígitos hex> <palabras...>'; el texto se guarda opaco."""
    address: int
    text: str

@dataclass(frozen=True)
class OtherLine:
    """Línea que no encaja en ningún patrón (cabeceras, 'Disassembly of section ...')."""
    text: str

@dataclass(frozen=True)
class BlankLine:
    pass

ParsedLine = Union[InstructionLine, DataLine, OtherLine, BlankLine]
