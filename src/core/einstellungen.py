###     Globale Einstellungen (Pfadkonstanten + Muster-Rollen + Defaults)
### ________________________________________________________________________
#
#  - Definiert projektweite Konstanten ohne Laufzeit-Logik
#  - Enthält Pfaddefinitionen relativ zum Source-Root
#  - Definiert Default-Rollen der Muster (Prüfkandidat vs. immer ausgeschlossen)
#  - Namen der ENV-Variablen für Config-Pfad und Log-Format
#  - Wird von Core, Pipeline und CLI konsumiert (keine zyklischen Abhängigkeiten)


from pathlib import Path


# Source-Root (von .../src/core/einstellungen.py eine Ebene nach oben)
ROOT = Path(__file__).resolve().parents[1]


# ENV-Overrides
ENV_CONFIG_PATH = "PRUEFBEREICHE_CONFIG"
ENV_LOG_FORMAT = "PRUEFBEREICHE_LOG_FORMAT"


# Muster, deren Treffer Kandidaten für die Rechtschreibprüfung sind
EINSCHLUSS_MUSTER = ["string", "heredoc", "kommentar"]


# Muster, deren Treffer nie geprüft werden (inkl. Guard-Sperrbereiche)
AUSSCHLUSS_MUSTER = ["url", "hex", "guard"]


# Default-Konfiguration (Fallback, falls config.json fehlt oder unvollständig ist)
SETTINGS_DEFAULTS = {
    "include_patterns": EINSCHLUSS_MUSTER,
    "exclude_patterns": AUSSCHLUSS_MUSTER,
    "debug": False,
}


# Platzhalter für nicht prüfbare Zeichen in der CLI-Ansicht (zeige)
MASKE = "·"
