'''
registros de propósito general x86-64 (AT&T) y su resolución total
'''

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

class Register(Enum):
    """Los 16 registros de propósito general de 64 bits."""
    RAX = "rax"
    RBX = "rbx"
    RCX = "rcx"
    RDX = "rdx"
    RSI = "rsi"
    RDI = "rdi"
    RBP = "rbp"
    RSP = "rsp"
    R8 = "r8"
    R9 = "r9"
    R10 = "r10"
    R11 = "r11"
    R12 = "r12"
    R13 = "r13"
    R14 = "r14"
    R15 = "r15"

@dataclass(frozen=True)
class UnknownRegister:
    """Nombre de registro fuera de la tabla; conserva el texto tal cual llegó."""
    name: str

RegisterLike = Union[Register, UnknownRegister]

# nombre sin '%' -> miembro
NAME_TO_REG: Dict[str, Register] = {r.value: r for r in Register}

def _bare(token: str) -> str:
    return token[1:] if token.startswith("%") else token

def register_of(token: str) -> RegisterLike:
    """Resuelve '%rax' o 'rax' a Register; cualquier otro nombre da UnknownRegister(token).

    Es total: nunca lanza. La comparación es exacta (sensible a mayúsculas),
    igual que la salida de objdump.
    """
    reg = NAME_TO_REG.get(_bare(token))
    if reg is None:
        return UnknownRegister(token)
    return reg

