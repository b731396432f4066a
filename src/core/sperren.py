###     Guard-Resolver (Spelling-Guard-Direktiven → gesperrte Bereiche)
### __________________________________________________________________________
#
#  - Verarbeitet Direktiven-Treffer (disable/enable/disable-line/disable-next) in Dokumentreihenfolge
#  - Hält genau ein Flag "aktiv" + Startoffset des offenen Blocks (pro Aufruf, nie global)
#  - disable-line: Direktive bis Zeilenende (Zeilenumbruch exklusive)
#  - disable-next: Direktive bis Ende der FOLGENDEN Zeile
#  - disable: Direktive bis einschließlich nächstem enable, sonst bis Dokumentende
#  - Verschachteltes disable innerhalb eines offenen Blocks ist ein No-op (nicht unterstützt)
#  - enable ohne offenen Block ist ein No-op
#  - Direktiven innerhalb eines bereits ausgegebenen Zeilenbereichs werden von diesem verschluckt


from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List

from .protokoll import get_logger
from .typen import (
    GUARD,
    GUARD_DISABLE,
    GUARD_DISABLE_LINE,
    GUARD_DISABLE_NEXT,
    GUARD_ENABLE,
    Treffer,
)

log = get_logger(__name__)


_ZEILENUMBRUCH = re.compile(r"\r\n|\r|\n")


# Zustand einer Auflösung (lokal pro Dokument)
@dataclass
class GuardZustand:
    aktiv: bool = False
    seit: int = 0


# Liefert Offset des nächsten Zeilenumbruchs ab pos (oder Textende)
def _zeilenende(text: str, pos: int) -> int:
    m = _ZEILENUMBRUCH.search(text, pos)
    return m.start() if m else len(text)


# Liefert Ende der Folgezeile (Textende, wenn es keine Folgezeile gibt)
def _ende_folgezeile(text: str, pos: int) -> int:
    m = _ZEILENUMBRUCH.search(text, pos)
    if not m:
        return len(text)
    return _zeilenende(text, m.end())


# Reichweite einer zeilenbezogenen Direktive
def reichweite(text: str, direktive: Treffer) -> int:
    if direktive.art == GUARD_DISABLE_NEXT:
        return _ende_folgezeile(text, direktive.ende)
    return _zeilenende(text, direktive.ende)


def _gesperrt(start: int, ende: int) -> Treffer:
    return Treffer(start, ende, GUARD, "guard")


# Löst Direktiven-Treffer in gesperrte Bereiche auf (Dokumentreihenfolge, überlappungsfrei)
def löse_sperren(text: str, direktiven: Iterable[Treffer]) -> List[Treffer]:
    zustand = GuardZustand()
    result: List[Treffer] = []
    verbraucht_bis = 0

    for d in sorted(direktiven, key=lambda t: t.start):

        # Liegt innerhalb eines bereits ausgegebenen Bereichs
        if d.start < verbraucht_bis:
            continue

        if zustand.aktiv:
            if d.art == GUARD_ENABLE:
                result.append(_gesperrt(zustand.seit, d.ende))
                verbraucht_bis = d.ende
                zustand.aktiv = False
            else:
                log.debug("guard_verschachtelt_ignoriert", offset=d.start, art=d.art)
            continue

        if d.art == GUARD_ENABLE:
            log.debug("guard_enable_ohne_disable", offset=d.start)
            continue

        if d.art == GUARD_DISABLE:
            zustand.aktiv = True
            zustand.seit = d.start
            continue

        if d.art in (GUARD_DISABLE_LINE, GUARD_DISABLE_NEXT):
            ende = reichweite(text, d)
            result.append(_gesperrt(d.start, ende))
            verbraucht_bis = ende

    # Offener Block reicht bis Dokumentende
    if zustand.aktiv:
        result.append(_gesperrt(zustand.seit, len(text)))

    return result
