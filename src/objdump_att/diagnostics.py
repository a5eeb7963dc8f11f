'''
clase Diagnostic, helpers y jerarquía de errores de parseo
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

# Severidad de los diagnósticos (en español)
Severity = Literal["error", "advertencia", "nota"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
    "nota": "NOTA",
}

# ---- Errores del núcleo ----

class ParseError(ValueError):
    """Error de parseo acotado a una única línea de entrada.

    `kind` identifica la categoría (MalformedInteger, MalformedAddressExpression,
    EmptyInput) y `token` guarda el fragmento que lo provocó, si lo hay.
    """
    kind = "ParseError"

    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.token = token

class MalformedInteger(ParseError):
    """Literal numérico inválido para la base seleccionada (o fuera de u64)."""
    kind = "MalformedInteger"

class MalformedAddressExpression(ParseError):
    """Expresión de direccionamiento sin INDEX o con paréntesis mal formados."""
    kind = "MalformedAddressExpression"

class EmptyInput(ParseError):
    """Faltan tokens donde la gramática exige al menos uno."""
    kind = "EmptyInput"

# ---- Diagnósticos ----

@dataclass(frozen=True)
class Diagnostic:
    """Estructura de un diagnóstico para reportar problemas.

    Abarca errores, advertencias y notas, con ubicación opcional (archivo, línea y columna)
    y un mensaje de ayuda (pista) para orientar la corrección.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file)

def from_parse_error(exc: ParseError, *, line: int | None = None,
                     file: str | None = None) -> Diagnostic:
    """Convierte un ParseError en un diagnóstico de error (la pista es el token culpable)."""
    hint = f"token '{exc.token}'" if exc.token is not None else None
    return error(f"{exc.kind}: {exc.message}", line=line, file=file, hint=hint)
