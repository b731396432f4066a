# detectors/regex/hexwerte.py
#
# Regex-basierte Erkennung hexadezimaler Literale:
#   - CSS-Farben (#RGB, #RGBA, #RRGGBB, #RRGGBBAA)
#   - C-Style Integer-Literale (0x…, beliebige Länge)
#   - Unicode-Escapes (\uXXXX, \x{XXXX})
#
# Rückgabeformat:
#   Treffer(start, ende, "HEX", "hex")
#   -> Character-Offsets für die Ausschluss-Menge

import re
from typing import Iterator

from core.typen import HEX, Treffer


_HEX_RE = re.compile(
    r"""
    \#[0-9a-f]{3,8}            # CSS-Farbwert
    |
    0x[0-9a-f]+                # C-Style, rein lexikalisch (0xbadc0ffee ist EIN Treffer)
    |
    \\u[0-9a-f]{4}             # \uBABC
    |
    \\x\{[0-9a-f]{4}\}         # \x{abcd}
    """,
    re.IGNORECASE | re.VERBOSE,
)


# Ein isoliertes Token, das nur aus Hex-Ziffern besteht (optional mit führendem x)
_HEX_ZIFFERN_RE = re.compile(r"x?[0-9a-f]+", re.IGNORECASE)


def finde_hex(text: str) -> Iterator[Treffer]:
    """
    Durchsucht Text nach hexadezimalen Literalen.

    Nackte Hex-Ziffernfolgen (z. B. "FFEE") werden hier NICHT gesucht:
    im Fließtext wären sonst Wörter wie "a", "add" oder "cafe" Treffer.
    Dafür gibt es ist_hex_ziffern() für einzelne, bereits isolierte Tokens.
    """

    for m in _HEX_RE.finditer(text):
        yield Treffer(m.start(), m.end(), HEX, "hex")


# Prüft, ob ein isoliertes Token vollständig aus Hex-Ziffern besteht
def ist_hex_ziffern(wort: str) -> bool:
    return _HEX_ZIFFERN_RE.fullmatch(wort) is not None
