###     Bereichs-Differenz (Einschluss − Ausschluss)
### __________________________________________________________________________
#
#  - Erwartet zwei RangeSets (sortiert, überlappungsfrei, verschmolzen)
#  - Läuft mit zwei Cursorn über beide Listen (kein quadratischer Vergleich)
#  - Vollständig überdeckter Einschluss → entfällt
#  - Teilüberlappung am Rand → Rand wird abgeschnitten
#  - Ausschluss innerhalb eines Einschlusses → Aufteilung in bis zu zwei Teile
#  - Ergebnis ist wieder eine RangeSet (kein erneutes Verschmelzen nötig)


from typing import List, Sequence

from .typen import Bereich


# Zieht alle Ausschluss-Bereiche von den Einschluss-Bereichen ab
def ausschließen(einschluss: Sequence[Bereich], ausschluss: Sequence[Bereich]) -> List[Bereich]:

    result: List[Bereich] = []
    j = 0

    for b in einschluss:
        start = b.start

        # Ausschlüsse, die vor diesem Einschluss enden, sind für alle weiteren irrelevant
        while j < len(ausschluss) and ausschluss[j].ende <= start:
            j += 1

        k = j
        while k < len(ausschluss) and ausschluss[k].start < b.ende:
            a = ausschluss[k]

            # Teil vor dem Loch bleibt erhalten
            if a.start > start:
                result.append(Bereich(start, a.start))

            start = max(start, a.ende)
            if start >= b.ende:
                break

            k += 1

        # Rest hinter dem letzten Loch
        if start < b.ende:
            result.append(Bereich(start, b.ende))

    return result
