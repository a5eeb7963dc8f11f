'''
descubrimiento de mnemónicos: acumula los UnknownOpcode vistos por primera vez
'''

from __future__ import annotations
import logging
from typing import Dict, Iterable, List

from .ast import InstructionLine, ParsedLine
from .isa import UnknownOpcode

logger = logging.getLogger(__name__)

def identifier_for(mnemonic: str) -> str:
    """Nombre de identificador generado: primera letra en mayúscula ('movq' -> 'Movq')."""
    if not mnemonic:
        return ""
    return mnemonic[0].upper() + mnemonic[1:]

class OpcodeDiscovery:
    """Tabla mnemónico -> identificador, en orden de primera aparición.

    Sirve como entrada para ampliar la tabla de isa.py con lo que aparece en
    desensamblados reales.
    """

    def __init__(self) -> None:
        self.table: Dict[str, str] = {}
        self.counts: Dict[str, int] = {}

    def feed(self, parsed: ParsedLine) -> bool:
        """Registra la línea; devuelve True si trae un mnemónico desconocido nuevo."""
        if not isinstance(parsed, InstructionLine):
            return False
        op = parsed.instruction.opcode
        if not isinstance(op, UnknownOpcode):
            return False
        self.counts[op.name] = self.counts.get(op.name, 0) + 1
        if op.name in self.table:
            return False
        self.table[op.name] = identifier_for(op.name)
        logger.debug("mnemónico nuevo: %s", op.name)
        return True

    def feed_all(self, lines: Iterable[ParsedLine]) -> List[str]:
        """Alimenta varias líneas y devuelve los mnemónicos nuevos en orden."""
        return [p.instruction.opcode.name for p in lines if self.feed(p)]

    def row_for(self, mnemonic: str) -> str:
        """Fila de diccionario '"mnemónico": "Identificador",' de un mnemónico ya registrado."""
        return f'\t"{mnemonic}": "{self.table[mnemonic]}",'

    def table_lines(self) -> List[str]:
        return [self.row_for(m) for m in self.table]

    def isa_snippet(self, group: str = "discovered") -> str:
        """Llamada _add(...) lista para pegar en isa.py."""
        return f'_add("{group}", "{" ".join(self.table)}")'

    def __len__(self) -> int:
        return len(self.table)
