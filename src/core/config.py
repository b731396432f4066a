###     Config Store (config.json Loader + Defaults + Atomic Save)
### __________________________________________________________________________
#
#  - Lädt/schreibt Konfiguration aus config.json (Pfad über core.paths, ENV-Override)
#  - Merged Defaults mit Datei-Inhalten (fehlende Keys fallen auf Defaults zurück)
#  - Hält In-Memory Cache (_CONFIG) zur Vermeidung wiederholter IO
#  - Defekte/ungültige Datei → Defaults + Warnung im Log
#  - Schreibt atomar über *.tmp + replace(), um teilweise Writes zu vermeiden
#  - Bietet Convenience-API: get/set, get_rollen für die Muster-Rollen


from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from .einstellungen import SETTINGS_DEFAULTS as _DEFAULTS
from .paths import config_path
from .protokoll import get_logger

log = get_logger(__name__)


# In-Memory Cache der geladenen Konfiguration (None = noch nicht geladen)
_CONFIG: Dict[str, Any] | None = None

# Pfad, aus dem _CONFIG geladen wurde
_GELADEN_AUS: Path | None = None


# Lädt Konfiguration einmalig (fehlende Datei → reine Defaults, nichts wird geschrieben)
def _ensure_loaded() -> None:
    global _CONFIG, _GELADEN_AUS

    if _CONFIG is not None:
        return

    path = config_path()
    _GELADEN_AUS = path

    if not path.exists():
        _CONFIG = dict(_DEFAULTS)
        return

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        log.warning("config_unlesbar", path=str(path), error=str(exc))
        data = {}

    if not isinstance(data, dict):
        log.warning("config_kein_objekt", path=str(path))
        data = {}

    merged = dict(_DEFAULTS)
    merged.update(data)
    _CONFIG = merged


# Persistiert Konfiguration atomar über temporäre Datei + replace
def _save_file(data: Dict[str, Any]) -> None:
    path = _GELADEN_AUS or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(".json.tmp")
    tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    tmp.replace(path)


# Verwirft den Cache (nächster Zugriff liest neu, z. B. nach ENV-Wechsel)
def reset() -> None:
    global _CONFIG, _GELADEN_AUS
    _CONFIG = None
    _GELADEN_AUS = None


# Liefert eine Kopie der aktuellen Konfiguration
def load() -> Dict[str, Any]:
    _ensure_loaded()
    return dict(_CONFIG)


# Schreibt mehrere Key/Value-Paare, persistiert und liefert Kopie zurück
def save(values: Dict[str, Any]) -> Dict[str, Any]:
    _ensure_loaded()
    _CONFIG.update(values)
    _save_file(_CONFIG)
    return dict(_CONFIG)


# Liest Key aus Config; fällt auf Defaults und dann optionalen default zurück
def get(key: str, default: Any = None) -> Any:
    _ensure_loaded()
    return _CONFIG.get(key, _DEFAULTS.get(key, default))


# Setzt einen Key und persistiert
def set(key: str, value: Any) -> Dict[str, Any]:
    return save({key: value})


# Normalisiert eine Namensliste aus der Config (Strings, getrimmt, lowercase, ohne Duplikate)
def _namen(value: Any, fallback: List[str]) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, (list, tuple)):
        return list(fallback)

    out: List[str] = []
    for v in value:
        if not isinstance(v, str) or not v.strip():
            continue
        name = v.strip().lower()
        if name not in out:
            out.append(name)
    return out


# Liefert (Einschluss-Muster, Ausschluss-Muster) als normalisierte Namenslisten
def get_rollen() -> Tuple[List[str], List[str]]:
    _ensure_loaded()
    return (
        _namen(_CONFIG.get("include_patterns"), _DEFAULTS["include_patterns"]),
        _namen(_CONFIG.get("exclude_patterns"), _DEFAULTS["exclude_patterns"]),
    )
