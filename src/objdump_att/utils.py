'''
bit-twiddling de 64 bits (u64, sign_extend, formatos hex)
'''

from __future__ import annotations
from typing import Iterable

# Máscara para 64 bits sin signo
U64_MASK = 0xFFFFFFFFFFFFFFFF

def u64(x: int) -> int:
    """Fuerza el valor al rango de 64 bits sin signo (complemento a dos para negativos)."""
    return x & U64_MASK

def fits_u64(x: int) -> bool:
    return 0 <= x <= U64_MASK

def sign_extend(x: int, bits: int) -> int:
    """Extiende el signo de x, asumiendo que cabe en 'bits' bits (complemento a dos)."""
    if bits <= 0:
        raise ValueError("bits debe ser positivo")
    mask = (1 << bits) - 1
    x &= mask
    sign_bit = 1 << (bits - 1)
    return (x ^ sign_bit) - sign_bit

def as_signed64(x: int) -> int:
    """Reinterpreta un patrón de bits u64 como entero con signo (p.ej. desplazamientos)."""
    return sign_extend(x, 64)

def to_hex64(x: int, *, prefix: bool = True) -> str:
    """Representación hexadecimal mínima, como '{:#x}'."""
    s = format(u64(x), "x")
    return ("0x" + s) if prefix else s

def hex_bytes(data: Iterable[int]) -> str:
    """Bytes como pares hex separados por espacio ('48 89 e5')."""
    return " ".join(format(b, "02x") for b in data)
