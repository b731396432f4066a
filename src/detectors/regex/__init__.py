# detectors/regex/__init__.py
from typing import Callable, Dict, Iterable, Iterator, List

from core.typen import GUARD, HEREDOC, HEX, KOMMENTAR, STRING, URL, Treffer

from .guard import finde_direktiven, finde_guards
from .heredoc import finde_heredocs
from .hexwerte import finde_hex, ist_hex_ziffern
from .kommentare import finde_kommentare
from .strings import finde_strings
from .url import finde_url

_PRODUCES: Dict[str, List[str]] = {
    "url": [URL],
    "hex": [HEX],
    "guard": [GUARD],
    "string": [STRING],
    "heredoc": [HEREDOC],
    "kommentar": [KOMMENTAR],
}

_FINDERS: Dict[str, Callable[[str], Iterable[Treffer]]] = {
    "url": finde_url,
    "hex": finde_hex,
    "guard": finde_guards,
    "string": finde_strings,
    "heredoc": finde_heredocs,
    "kommentar": finde_kommentare,
}

MUSTER_NAMEN: List[str] = list(_FINDERS)


class UnbekanntesMuster(ValueError):
    """Ein Mustername ist nicht in der Registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Unbekanntes Muster: {name!r} (bekannt: {', '.join(MUSTER_NAMEN)})"
        )


def produziert(name: str) -> List[str]:
    if name not in _PRODUCES:
        raise UnbekanntesMuster(name)
    return list(_PRODUCES[name])


def pruefe_namen(namen: Iterable[str]) -> List[str]:
    out = []
    for name in namen:
        if name not in _FINDERS:
            raise UnbekanntesMuster(name)
        out.append(name)
    return out


# Führt genau ein benanntes Muster aus (neuer Aufruf = neuer Durchlauf)
def finde_muster(name: str, text: str) -> Iterator[Treffer]:
    if name not in _FINDERS:
        raise UnbekanntesMuster(name)
    return iter(_FINDERS[name](text))


__all__ = [
    "MUSTER_NAMEN",
    "UnbekanntesMuster",
    "finde_muster",
    "finde_direktiven",
    "finde_guards",
    "finde_heredocs",
    "finde_hex",
    "finde_kommentare",
    "finde_strings",
    "finde_url",
    "ist_hex_ziffern",
    "produziert",
    "pruefe_namen",
]
