###     Prüfbereich-Pipeline (Einschluss/Ausschluss-Muster → prüfbare Spans)
### __________________________________________________________________________
#
#  - Orchestriert alle Muster über denselben, unveränderten Text
#  - Rollen: Einschluss-Muster (Kandidaten) vs. Ausschluss-Muster (nie prüfen)
#  - Rollen kommen aus Argumenten oder Config (include_patterns/exclude_patterns)
#  - Einschluss = Vereinigung der Kandidaten-Treffer
#  - Ausschluss = Vereinigung der Ausschluss-Treffer (inkl. Guard-Sperrbereiche)
#  - Ergebnis = Einschluss − Ausschluss (sortiert, überlappungsfrei)
#  - zerlege(): teilt das ganze Dokument in prüfbare / nicht prüfbare Stücke


from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from core import config
from core.ausschließen import ausschließen
from core.protokoll import get_logger
from core.typen import Bereich, Treffer
from core.zusammenführen import zusammenführen
from detectors.regex import finde_muster, pruefe_namen

log = get_logger(__name__)


# Zwischenergebnisse einer Analyse (für Diagnose / CLI --debug)
@dataclass(frozen=True)
class Analyse:
    einschluss: List[Bereich]
    ausschluss: List[Bereich]
    sperren: List[Bereich]
    pruefbar: List[Bereich]
    anzahl: Dict[str, int]


# Ein Stück des Dokuments (alle Stücke zusammen ergeben den Text lückenlos)
@dataclass(frozen=True)
class TextStueck:
    start: int
    ende: int
    text: str
    pruefbar: bool



# Ermittelt Rollen aus Argumenten, fehlende Seite aus der Config
def _rollen(
    einschluss: Optional[Sequence[str]],
    ausschluss: Optional[Sequence[str]],
) -> Tuple[List[str], List[str]]:
    if einschluss is None or ausschluss is None:
        cfg_ein, cfg_aus = config.get_rollen()
        if einschluss is None:
            einschluss = cfg_ein
        if ausschluss is None:
            ausschluss = cfg_aus

    return pruefe_namen(einschluss), pruefe_namen(ausschluss)



# Führt jedes Muster genau einmal aus (auch wenn es in beiden Rollen steht)
def sammle(text: str, namen: Sequence[str]) -> Dict[str, List[Treffer]]:
    treffer: Dict[str, List[Treffer]] = {}
    for name in namen:
        if name not in treffer:
            treffer[name] = list(finde_muster(name, text))
    return treffer



# Analyse: liefert Einschluss, Ausschluss, Guard-Sperren und prüfbare Bereiche
def analysiere(
    text: str,
    *,
    einschluss: Optional[Sequence[str]] = None,
    ausschluss: Optional[Sequence[str]] = None,
) -> Analyse:
    ein_namen, aus_namen = _rollen(einschluss, ausschluss)

    treffer = sammle(text, ein_namen + aus_namen)

    ein = zusammenführen(*(treffer[n] for n in ein_namen))
    aus = zusammenführen(*(treffer[n] for n in aus_namen))
    sperren = zusammenführen(treffer.get("guard", [])) if "guard" in aus_namen else []

    pruefbar = ausschließen(ein, aus)

    anzahl = {name: len(t) for name, t in treffer.items()}
    log.debug(
        "pruefbereiche_berechnet",
        zeichen=len(text),
        treffer=anzahl,
        einschluss=len(ein),
        ausschluss=len(aus),
        pruefbar=len(pruefbar),
    )

    return Analyse(ein, aus, sperren, pruefbar, anzahl)



# API: prüfbare Bereiche eines Textes (einzige Ausgabe für den Wort-/Wörterbuch-Schritt)
def pruefbereiche(
    text: str,
    *,
    einschluss: Optional[Sequence[str]] = None,
    ausschluss: Optional[Sequence[str]] = None,
) -> List[Bereich]:
    return analysiere(text, einschluss=einschluss, ausschluss=ausschluss).pruefbar



# Liefert (Bereich, Teilstring) für jeden prüfbaren Bereich
def pruefbare_texte(text: str, bereiche: Sequence[Bereich]) -> Iterator[Tuple[Bereich, str]]:
    for b in bereiche:
        yield b, text[b.start:b.ende]



# Zerlegt den ganzen Text in aufeinanderfolgende Stücke (prüfbar / nicht prüfbar)
def zerlege(text: str, bereiche: Sequence[Bereich]) -> List[TextStueck]:
    teile: List[TextStueck] = []
    pos = 0

    for b in bereiche:
        if b.start > pos:
            teile.append(TextStueck(pos, b.start, text[pos:b.start], False))
        teile.append(TextStueck(b.start, b.ende, text[b.start:b.ende], True))
        pos = b.ende

    if pos < len(text):
        teile.append(TextStueck(pos, len(text), text[pos:], False))

    return teile
