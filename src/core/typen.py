###     Bereich- und Treffer-Datentypen (Immutable Span-Objekte)
### __________________________________________________________________________
#
#  - Bereich: halboffenes Intervall [start, ende) über Zeichen-Offsets
#  - Treffer: von einem Muster erzeugter Bereich + Art + Mustername + Captures
#  - Unterstützt Overlap-Prüfung für Mengen-Algebra und Sperrlogik
#  - Immutable (frozen=True) → Werte können frei kopiert/geteilt werden
#  - Sortierung über (start, ende), damit Mengen deterministisch bleiben


from dataclasses import dataclass, field
from typing import Dict, Optional


# Treffer-Arten (Label je Muster bzw. Direktive)
URL = "URL"
HEX = "HEX"
STRING = "STRING"
HEREDOC = "HEREDOC"
KOMMENTAR = "KOMMENTAR"
GUARD = "GUARD"
GUARD_DISABLE = "GUARD_DISABLE"
GUARD_ENABLE = "GUARD_ENABLE"
GUARD_DISABLE_LINE = "GUARD_DISABLE_LINE"
GUARD_DISABLE_NEXT = "GUARD_DISABLE_NEXT"


# Halboffener Textbereich [start, ende) im Originaltext
@dataclass(frozen=True, order=True)
class Bereich:
    start: int          # Startindex (inklusive)
    ende: int           # Endindex (exklusive)

    def __post_init__(self) -> None:
        if self.start < 0 or self.ende < self.start:
            raise ValueError(f"Ungültiger Bereich: [{self.start}, {self.ende})")

    # Prüft, ob zwei Bereiche sich echt überlappen (Berührung zählt nicht)
    def überschneidet(self, other: "Bereich") -> bool:
        return not (self.ende <= other.start or other.ende <= self.start)

    def länge(self) -> int:
        return self.ende - self.start

    # Nullbreite Bereiche tragen nichts zur Mengen-Algebra bei
    def leer(self) -> bool:
        return self.ende == self.start


# Beschreibt einen Muster-Treffer im Text (z. B. URL, String, Guard-Direktive)
@dataclass(frozen=True)
class Treffer:
    start: int          # Startindex (inklusive)
    ende: int           # Endindex (exklusive)
    art: str            # Treffer-Art (z. B. "URL", "GUARD_DISABLE_LINE")
    muster: str         # Registry-Name des erzeugenden Musters ("url", "guard", ...)
    daten: Optional[Dict[str, str]] = field(default=None, compare=False, hash=False)

    @property
    def bereich(self) -> Bereich:
        return Bereich(self.start, self.ende)
