import re
from typing import Iterator

from core.typen import KOMMENTAR, Treffer


# // bis Zeilenende | /* ... */ (nicht verschachtelt, offen → Dokumentende)
_KOMMENTAR_RE = re.compile(r"//[^\r\n]*|/\*[\s\S]*?(?:\*/|\Z)")


def finde_kommentare(text: str) -> Iterator[Treffer]:
    """
    Regex-basierte Erkennung von C-Style-Kommentaren.

    Ein "//" innerhalb eines Block-Kommentars wird mit verschluckt, ebenso ein
    "/*" hinter "//". Ein "//" in einer URL zählt als Zeilenkommentar; die URL
    selbst landet über das url-Muster in der Ausschluss-Menge.

    Rückgabe:
      Treffer(start, ende, "KOMMENTAR", "kommentar")
    """

    for m in _KOMMENTAR_RE.finditer(text):
        yield Treffer(m.start(), m.end(), KOMMENTAR, "kommentar")
