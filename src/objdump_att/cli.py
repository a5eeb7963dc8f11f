from __future__ import annotations
import argparse, io, logging, sys
from typing import Iterable, List, Tuple

from .parser import iter_lines
from .ast import ParsedLine
from .diagnostics import Diagnostic
from .discovery import OpcodeDiscovery
from .writers import to_text_lines, write_text

logger = logging.getLogger(__name__)

def _stdin_text():
    # bytes no UTF-8 pasan como U+FFFD y solo afectan a su propia línea
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(encoding="utf-8", errors="replace")
    return sys.stdin

def process_lines(lines: Iterable[str], *, filename: str | None = None,
                  discovery: OpcodeDiscovery | None = None) -> Tuple[List[ParsedLine], List[Diagnostic]]:
    """Parsea el flujo completo, alimentando el descubrimiento de opcodes si se pide.
    Devuelve (líneas_parseadas, diagnostics)."""
    parsed: List[ParsedLine] = []
    diags: List[Diagnostic] = []
    for res in iter_lines(lines, filename=filename):
        if not res.ok:
            diags.append(res.diagnostic)
            continue
        parsed.append(res.parsed)
        if discovery is not None and discovery.feed(res.parsed):
            # cada mnemónico nuevo se emite en cuanto aparece
            print(discovery.row_for(res.parsed.instruction.opcode.name), flush=True)
    return parsed, diags

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Parser de desensamblado x86-64 AT&T (objdump -d)")
    ap.add_argument("source", nargs="?", default="-", help="archivo con la salida de objdump ('-' = stdin)")
    ap.add_argument("-o", "--output", help="escribe las líneas parseadas en este archivo")
    ap.add_argument("--discover", action="store_true",
                    help="lista los mnemónicos que no están en la tabla (descubrimiento de opcodes)")
    ap.add_argument("--strict", action="store_true", help="termina con código 1 si alguna línea falla")
    ap.add_argument("-v", "--verbose", action="store_true", help="logging en nivel DEBUG")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    discovery = OpcodeDiscovery() if args.discover else None
    filename = "<stdin>" if args.source == "-" else args.source
    try:
        if args.source == "-":
            parsed, diags = process_lines(_stdin_text(), filename=filename, discovery=discovery)
        else:
            with open(args.source, "r", encoding="utf-8", errors="replace") as f:
                parsed, diags = process_lines(f, filename=filename, discovery=discovery)
    except OSError as ex:
        print(f"ERROR: no pude leer {args.source}: {ex}", file=sys.stderr)
        return 2

    for d in diags:
        # una línea inválida no detiene el resto; solo se informa
        print(d, file=sys.stderr)

    if discovery is not None:
        if len(discovery):
            print(discovery.isa_snippet(), file=sys.stderr)
    elif args.output:
        try:
            write_text(parsed, args.output)
        except OSError as ex:
            print(f"ERROR al escribir salidas: {ex}", file=sys.stderr)
            return 3
    else:
        for line in to_text_lines(parsed):
            print(line)

    logger.debug("%d líneas parseadas, %d con errores", len(parsed), len(diags))
    if diags and args.strict:
        return 1
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
