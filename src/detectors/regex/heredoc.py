import re
from typing import Iterator

from core.typen import HEREDOC, Treffer


_HEREDOC_RE = re.compile(
    r"""
    <<<[ \t]*
    (?P<quote>["']?)(?P<label>[A-Za-z_]\w*)(?P=quote)      # SQL | "SQL" | 'SQL'
    [\s\S]*?
    (?:
        (?:^|(?<=\r))[ \t]*(?P=label);?                    # Ende-Label allein auf der Zeile
        (?=[ \t]*(?:\r\n|\r|\n|\Z))                        # \n, \r\n und \r beenden eine Zeile
        |
        \Z                                                 # nicht geschlossen → Dokumentende
    )
    """,
    re.MULTILINE | re.VERBOSE,
)


def finde_heredocs(text: str) -> Iterator[Treffer]:
    """
    Regex-basierte Erkennung von PHP-Heredoc/Nowdoc-Blöcken.

    Erkannt werden:
      - <<<LABEL ... LABEL;
      - <<<"LABEL" ... LABEL;   (Heredoc, quotiert)
      - <<<'LABEL' ... LABEL;   (Nowdoc)

    Das schließende Label muss allein (optional eingerückt) auf einer eigenen
    Zeile stehen; fehlt es, reicht der Treffer bis zum Dokumentende.

    Rückgabe:
      Treffer(start, ende, "HEREDOC", "heredoc", daten={"label": …})
    """

    for m in _HEREDOC_RE.finditer(text):
        yield Treffer(m.start(), m.end(), HEREDOC, "heredoc", {"label": m.group("label")})
