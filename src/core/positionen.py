###     Offset → (Zeile, Spalte) Abbildung für Diagnosen
### __________________________________________________________________________
#
#  - Berechnet Zeilenanfänge einmal pro Text (\n, \r\n und \r beenden eine Zeile)
#  - Abbildung per Binärsuche, Zeile und Spalte 1-basiert
#  - Offset == len(text) ist erlaubt (Ende des letzten Bereichs)


from __future__ import annotations

import re
from bisect import bisect_right
from typing import List, Tuple

from .typen import Bereich


_ZEILENUMBRUCH = re.compile(r"\r\n|\r|\n")


class Positionen:
    """Bildet Zeichen-Offsets eines Textes auf 1-basierte (zeile, spalte) ab."""

    def __init__(self, text: str) -> None:
        self._länge = len(text)
        self._starts: List[int] = [0] + [m.end() for m in _ZEILENUMBRUCH.finditer(text)]

    def von(self, offset: int) -> Tuple[int, int]:
        if offset < 0 or offset > self._länge:
            raise ValueError(f"Offset außerhalb des Textes: {offset}")
        idx = bisect_right(self._starts, offset) - 1
        return idx + 1, offset - self._starts[idx] + 1

    def von_bereich(self, bereich: Bereich) -> Tuple[int, int]:
        return self.von(bereich.start)

    @property
    def zeilen(self) -> int:
        return len(self._starts)
