# detectors/regex/guard.py
#
# Spelling-Guard-Direktiven (zweistufig):
#   1) finde_direktiven(): findet nur Position + Art der Direktive
#        cspell:disable / cSpell:enable / spell-checker:disable-line / spellchecker::disable-next-line
#   2) finde_guards(): löst die Direktiven über core.sperren in gesperrte Bereiche auf
#
# Ein direkt vorangestellter Kommentar-Öffner (//, /*, #, <!--) wird in
# Treffer.daten["kommentar"] festgehalten, gehört aber nicht zum Bereich.

import re
from typing import Iterator

from core.sperren import löse_sperren
from core.typen import (
    GUARD_DISABLE,
    GUARD_DISABLE_LINE,
    GUARD_DISABLE_NEXT,
    GUARD_ENABLE,
    Treffer,
)


_DIREKTIVE_RE = re.compile(
    r"""
    (?:(?P<kommentar>//|/\*|\#|<!--)[ \t]*)?
    (?P<direktive>
        \b(?:spell-?checker|cspell)::?[ \t]*
        (?P<art>disable-line|disable-next(?:-line)?|disable|enable)
    )
    (?![-\w])                  # kein "disabled", kein "disable-lines"
    """,
    re.IGNORECASE | re.VERBOSE,
)


_ARTEN = {
    "disable": GUARD_DISABLE,
    "enable": GUARD_ENABLE,
    "disable-line": GUARD_DISABLE_LINE,
    "disable-next": GUARD_DISABLE_NEXT,
    "disable-next-line": GUARD_DISABLE_NEXT,
}


def finde_direktiven(text: str) -> Iterator[Treffer]:
    """
    Findet Guard-Direktiven (Position + Art), ohne deren Reichweite.

    Präfix case-insensitive: cspell, cSpell, spell-checker, spellchecker;
    danach ":" (oder "::") und disable | enable | disable-line | disable-next[-line].

    Rückgabe:
      Treffer(start, ende, "GUARD_…", "guard", daten={"kommentar": …})
    """

    for m in _DIREKTIVE_RE.finditer(text):
        art = _ARTEN[m.group("art").lower()]
        daten = {"kommentar": m.group("kommentar")} if m.group("kommentar") else None
        yield Treffer(m.start("direktive"), m.end("direktive"), art, "guard", daten)


# Gesperrte Bereiche (Reichweite aufgelöst), in Dokumentreihenfolge
def finde_guards(text: str) -> Iterator[Treffer]:
    yield from löse_sperren(text, finde_direktiven(text))
