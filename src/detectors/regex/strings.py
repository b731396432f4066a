import re
from typing import Iterator

from core.typen import STRING, Treffer


_STRING_RE = re.compile(
    r"""
    # ----------------------------
    # 1) '...' / "..." (einzeilig)
    #    - Backslash-Escapes werden übersprungen (\' schließt nicht)
    #    - mindestens ein Zeichen Inhalt
    #    - beginnt nie an einem escapten Quote (linear auch ohne schließendes Quote)
    # ----------------------------
    (?<!\\)
    (?:
        '(?!')[^'\\\n]*(?:\\.[^'\\\n]*)*'
        |
        "(?!")[^"\\\n]*(?:\\.[^"\\\n]*)*"
    )
    |
    # ----------------------------
    # 2) `...` Template-Literal
    #    - wortwörtlich bis zum nächsten Backtick, auch über Zeilen
    # ----------------------------
    `[^`]+`
    """,
    re.VERBOSE,
)


def finde_strings(text: str) -> Iterator[Treffer]:
    """
    Regex-basierte Erkennung von String-Literalen.

    Erkannt werden:
      - 'einfach' und "doppelt" quotierte Strings mit Escape-Erkennung
      - `Template`-Literale ohne Escape-Verarbeitung

    Nicht erkannt (absichtlich hier):
      - leere Literale ('', "", ``) → nichts zu prüfen
      - nicht geschlossene Quotes bis Zeilenende

    Rückgabe:
      Treffer(start, ende, "STRING", "string")
    """

    for m in _STRING_RE.finditer(text):
        yield Treffer(m.start(), m.end(), STRING, "string")
