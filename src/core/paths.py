###     Pfad-Resolver (Source-Root + Config-Datei)
### __________________________________________________________________________
#
#  - Ermittelt den Source-Root relativ zur Dateistruktur
#  - Unterstützt optionales Override der Config-Datei via ENV-Variable
#    (PRUEFBEREICHE_CONFIG)
#  - Keine globale Zustandsverwaltung, reine Pfad-Funktionen
#  - Legt keine Verzeichnisse an (Schreiben passiert nur in config.save)


from __future__ import annotations

import os
from pathlib import Path

from .einstellungen import ENV_CONFIG_PATH, ROOT


# Source-Root (eine Ebene über src/core/)
def source_root() -> Path:
    return ROOT



# Liefert Config-Pfad:
# 1) Falls ENV gesetzt → dieser Pfad
# 2) Sonst <source-root>/config.json
def config_path() -> Path:
    env = (os.getenv(ENV_CONFIG_PATH) or "").strip()

    if env:
        return Path(env).expanduser().resolve()

    return source_root() / "config.json"
