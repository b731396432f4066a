###     Bereichs-Vereinigung (Merge mehrerer Treffer-Folgen zu einer RangeSet)
### __________________________________________________________________________
#
#  - Kombiniert beliebig viele Folgen von Treffern/Bereichen (alle Arten gemischt)
#  - Verwirft nullbreite Bereiche (tragen nichts bei)
#  - Sortiert nach (start, ende) und verschmilzt überlappende UND angrenzende Bereiche
#  - Liefert überlappungsfreie, start-sortierte Ergebnisliste (RangeSet)
#  - Idempotent: eine bereits verschmolzene Liste bleibt unverändert


from typing import Iterable, List, Union

from .typen import Bereich, Treffer


# Führt alle Eingabefolgen zusammen und verschmilzt sie zu einer RangeSet
def zusammenführen(*folgen: Iterable[Union[Treffer, Bereich]]) -> List[Bereich]:

    # Alle Bereiche einsammeln und nach (start, ende) sortieren
    alles = sorted(
        (t.start, t.ende)
        for folge in folgen
        for t in folge
        if t.ende > t.start
    )

    result: List[Bereich] = []

    if not alles:
        return result

    start, ende = alles[0]

    for s, e in alles[1:]:

        # Überlappend oder angrenzend → laufenden Bereich verlängern
        if s <= ende:
            ende = max(ende, e)
            continue

        result.append(Bereich(start, ende))
        start, ende = s, e

    result.append(Bereich(start, ende))
    return result
