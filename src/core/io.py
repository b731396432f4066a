###     Text-I/O Hilfsfunktionen (UTF-8, offset-treu)
### __________________________________________________________________________
#
#  - Kapselt das Einlesen von Textdateien
#  - Erzwingt UTF-8 Encoding für konsistente Verarbeitung
#  - Liest OHNE Newline-Übersetzung (\r\n bleibt erhalten → Offsets passen zur Datei)
#  - Keine Validierung, kein Error-Handling (Exceptions propagieren)


from pathlib import Path


# Liest vollständigen Dateiinhalt als UTF-8 String (Zeilenenden unverändert)
def read_text(path: str) -> str:
    with open(Path(path), encoding="utf-8", newline="") as f:
        return f.read()
