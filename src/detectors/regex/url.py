import re
from typing import Iterator

from core.typen import URL, Treffer


# Schema case-insensitive, danach ein Lauf aus URL-Zeichen (RFC 3986: unreserved + reserved + %)
_URL_RE = re.compile(
    r"""
    \b(?:https?|ftp)://
    [-\w.~:/?\#\[\]@!$&'()*+,;=%]+
    """,
    re.IGNORECASE | re.VERBOSE,
)


def finde_url(text: str) -> Iterator[Treffer]:
    """
    Regex-basierte Erkennung von URLs mit Schema.

    Erkannt werden:
      - http://...
      - https://...
      - ftp://...

    Der Treffer läuft gierig über alle URL-Zeichen (inkl. Query, Fragment und
    Sub-Delimiter wie ' ; , ), endet also erst an Whitespace, Anführungszeichen
    " bzw. spitzen Klammern.

    Nicht erkannt (absichtlich hier):
      - www.… ohne Schema
      - nackte Hostnamen

    Rückgabe:
      Treffer(start, ende, "URL", "url")
    """

    for m in _URL_RE.finditer(text):
        yield Treffer(m.start(), m.end(), URL, "url")
