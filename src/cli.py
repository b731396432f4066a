###     CLI für Prüfbereich-Berechnung
### __________________________________________________________________________

import json
import sys
import time

import click

# interne Module
from core import config
from core.einstellungen import MASKE
from core.io import read_text
from core.positionen import Positionen
from core.protokoll import konfiguriere_logging
from detectors.regex import MUSTER_NAMEN, UnbekanntesMuster, produziert
from pipeline.pruefbereiche import analysiere, pruefbare_texte, zerlege


@click.group()
@click.option("--debug/--no-debug", default=None, help="Debug-Logging (Default aus config.json).")
@click.pass_context
def cli(ctx: click.Context, debug: bool | None):
    """Kommandozeilen-Interface für prüfbare Textbereiche."""
    if debug is None:
        debug = bool(config.get("debug", False))
    konfiguriere_logging(debug=debug)
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug


def _analyse(text: str, include: tuple, exclude: tuple):
    try:
        return analysiere(
            text,
            einschluss=list(include) or None,
            ausschluss=list(exclude) or None,
        )
    except UnbekanntesMuster as exc:
        raise click.BadParameter(str(exc), param_hint="--include/--exclude") from exc


# ========================  Prüfbare Bereiche ausgeben  ==================================
@cli.command("check")
@click.option("--in", "in_path", required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--include", multiple=True, help="Einschluss-Muster (mehrfach). Default aus config.json.")
@click.option("--exclude", multiple=True, help="Ausschluss-Muster (mehrfach). Default aus config.json.")
@click.option("--json", "as_json", is_flag=True, help="Ausgabe als JSON-Liste.")
@click.pass_context
def cmd_check(ctx: click.Context, in_path: str, include: tuple, exclude: tuple, as_json: bool):
    """Gibt alle prüfbaren Bereiche einer Datei mit Zeile/Spalte aus."""
    start_time = time.time()

    text = read_text(in_path)
    analyse = _analyse(text, include, exclude)
    pos = Positionen(text)

    if as_json:
        items = []
        for b, teil in pruefbare_texte(text, analyse.pruefbar):
            zeile, spalte = pos.von_bereich(b)
            items.append({"start": b.start, "ende": b.ende, "zeile": zeile, "spalte": spalte, "text": teil})
        click.echo(json.dumps(items, ensure_ascii=False, indent=2))
    else:
        for b, teil in pruefbare_texte(text, analyse.pruefbar):
            zeile, spalte = pos.von_bereich(b)
            click.echo(f"{in_path}[{zeile}, {spalte}]: {json.dumps(teil, ensure_ascii=False)}")

    # Wenn Debug deaktiviert → keine Statistik
    if not ctx.obj.get("debug"):
        return

    runtime_ms = (time.time() - start_time) * 1000

    click.echo("\n=== DEBUG: Analyse abgeschlossen ===", err=True)
    click.echo(f"Laufzeit: {runtime_ms:.2f} ms", err=True)
    click.echo("\nTreffer je Muster:", err=True)
    for name, n in sorted(analyse.anzahl.items()):
        click.echo(f"  - {name:<10} {n:>4}", err=True)
    click.echo(f"\nEinschluss: {len(analyse.einschluss)}", err=True)
    click.echo(f"Ausschluss: {len(analyse.ausschluss)}", err=True)
    click.echo(f"Guard:      {len(analyse.sperren)}", err=True)
    click.echo(f"Prüfbar:    {len(analyse.pruefbar)}", err=True)
# ====================================================================================================


@cli.command("zeige")
@click.option("--in", "in_path", required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--include", multiple=True)
@click.option("--exclude", multiple=True)
def cmd_zeige(in_path: str, include: tuple, exclude: tuple):
    """Zeigt die Datei, nicht prüfbare Zeichen maskiert (Zeilenumbrüche bleiben)."""
    text = read_text(in_path)
    analyse = _analyse(text, include, exclude)

    teile = []
    for stueck in zerlege(text, analyse.pruefbar):
        if stueck.pruefbar:
            teile.append(stueck.text)
        else:
            teile.append("".join(c if c in "\r\n" else MASKE for c in stueck.text))

    click.echo("".join(teile), nl=False)


@cli.command("muster")
def cmd_muster():
    """Listet alle registrierten Muster mit Treffer-Art und Default-Rolle."""
    einschluss, ausschluss = config.get_rollen()

    for name in MUSTER_NAMEN:
        if name in einschluss:
            rolle = "einschluss"
        elif name in ausschluss:
            rolle = "ausschluss"
        else:
            rolle = "-"
        click.echo(f"{name:<10} {','.join(produziert(name)):<10} {rolle}")


def main():
    cli(prog_name="pruefbereiche")


if __name__ == "__main__":
    sys.exit(main())
