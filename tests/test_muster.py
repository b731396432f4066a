"""Tests für die Muster-Bibliothek (URL, Hex, Strings, Heredoc, Kommentare, Registry)."""

from __future__ import annotations

import time
from typing import List

import pytest

from detectors.regex import (
    MUSTER_NAMEN,
    UnbekanntesMuster,
    finde_heredocs,
    finde_hex,
    finde_kommentare,
    finde_muster,
    finde_strings,
    finde_url,
    ist_hex_ziffern,
    produziert,
)


def _texte(text: str, finder) -> List[str]:
    return [text[t.start:t.ende] for t in finder(text)]


# ---------------------------------------------------------------- URL


def test_url_is_greedy_over_url_characters() -> None:
    text = "see https://example.com/a/b?q=1&r=2#frag, then more"
    assert _texte(text, finde_url) == ["https://example.com/a/b?q=1&r=2#frag,"]


def test_url_scheme_case_insensitive() -> None:
    assert _texte("HTTP://X.ORG and Ftp://files.org/x", finde_url) == [
        "HTTP://X.ORG",
        "Ftp://files.org/x",
    ]


def test_url_stops_at_double_quote_and_whitespace() -> None:
    assert _texte('a="http://x.io/y" b', finde_url) == ["http://x.io/y"]


def test_url_requires_scheme() -> None:
    assert _texte("www.example.com mailto:x@y.z", finde_url) == []


# ---------------------------------------------------------------- Hex


def test_hex_formats(beispiel: str) -> None:
    hex_texte = _texte(beispiel, finde_hex)
    assert hex_texte == ["#cccd", "0x5612abcd", "0xbadc0ffee", "\\uBABC", "\\x{abcd}"]


def test_hex_third_match_is_bad_coffee(beispiel: str) -> None:
    treffer = list(finde_hex(beispiel))
    assert treffer[2].start == beispiel.index("0xbadc0ffee")


@pytest.mark.parametrize(
    "text, erwartet",
    [
        ("color: #fff;", ["#fff"]),
        ("#A0B1C2", ["#A0B1C2"]),
        ("0XDEADBEEF", ["0XDEADBEEF"]),
        ("a cafe with bad food", []),
    ],
)
def test_hex_variants(text: str, erwartet: List[str]) -> None:
    assert _texte(text, finde_hex) == erwartet


@pytest.mark.parametrize(
    "wort, erwartet",
    [("FFEE", True), ("xff00", True), ("0", True), ("cafe", True), ("coffee", False), ("", False)],
)
def test_isolated_hex_digits(wort: str, erwartet: bool) -> None:
    assert ist_hex_ziffern(wort) is erwartet


# ---------------------------------------------------------------- Strings


def test_string_escaped_quote_does_not_close() -> None:
    text = "x = 'it\\'s fine' + 'y'"
    assert _texte(text, finde_strings) == ["'it\\'s fine'", "'y'"]


def test_string_double_and_template() -> None:
    text = 'a = "say \\"hi\\"";\nb = `multi\nline \\`;'
    # Template-Literale kennen keine Escapes: der Backslash schließt nicht mit ein
    assert _texte(text, finde_strings) == ['"say \\"hi\\""', "`multi\nline \\`"]


def test_string_empty_and_unterminated_not_matched() -> None:
    assert _texte("a = '';\nb = \"open\nc", finde_strings) == []


def test_string_never_starts_at_escaped_quote() -> None:
    assert _texte("x = \\'abc' + \\\"d\"", finde_strings) == []


def test_string_scan_is_linear_on_unclosed_escaped_quotes() -> None:
    text = "'" + "\\'" * 50000

    start = time.perf_counter()
    treffer = list(finde_strings(text))
    dauer = time.perf_counter() - start

    assert treffer == []
    assert dauer < 1.0


def test_string_count_in_sample(beispiel: str) -> None:
    assert len(list(finde_strings(beispiel))) == 14


# ---------------------------------------------------------------- Heredoc


def test_heredoc_count_in_sample(beispiel: str) -> None:
    treffer = list(finde_heredocs(beispiel))
    assert len(treffer) == 3
    assert all(beispiel[t.start:t.ende].endswith("SQL;") for t in treffer)
    assert {t.daten["label"] for t in treffer} == {"SQL"}


def test_heredoc_indented_closing_label() -> None:
    text = "$x = <<<EOT\n  body EOT;\n  EOT;\nrest"
    assert _texte(text, finde_heredocs) == ["<<<EOT\n  body EOT;\n  EOT;"]


def test_heredoc_unterminated_reaches_end() -> None:
    text = "$x = <<<'EOT'\nbody\nno end"
    assert _texte(text, finde_heredocs) == ["<<<'EOT'\nbody\nno end"]


@pytest.mark.parametrize("nl", ["\n", "\r\n", "\r"])
def test_heredoc_closes_with_any_line_terminator(nl: str) -> None:
    text = f"$a = <<<SQL{nl}  select{nl}SQL;{nl}// after comment{nl}"
    assert _texte(text, finde_heredocs) == [f"<<<SQL{nl}  select{nl}SQL;"]


def test_heredoc_mismatched_quotes_not_matched() -> None:
    assert _texte("<<<\"EOT'\nbody\nEOT;\n", finde_heredocs) == []


# ---------------------------------------------------------------- Kommentare


def test_comments_line_and_block() -> None:
    text = "a // one\nb /* two\nlines */ c // three /* inner"
    assert _texte(text, finde_kommentare) == ["// one", "/* two\nlines */", "// three /* inner"]


def test_block_comment_unterminated_reaches_end() -> None:
    text = "x /* open\nstill"
    assert _texte(text, finde_kommentare) == ["/* open\nstill"]


def test_line_comment_stops_before_cr() -> None:
    assert _texte("// c\r\nx", finde_kommentare) == ["// c"]


def test_block_comments_not_nested() -> None:
    assert _texte("/* a /* b */ c */", finde_kommentare) == ["/* a /* b */"]


# ---------------------------------------------------------------- Registry


def test_registry_names() -> None:
    assert MUSTER_NAMEN == ["url", "hex", "guard", "string", "heredoc", "kommentar"]
    assert produziert("kommentar") == ["KOMMENTAR"]


def test_registry_unknown_name_raises_eagerly() -> None:
    with pytest.raises(UnbekanntesMuster) as exc:
        finde_muster("nope", "text")
    assert "nope" in str(exc.value)
    assert isinstance(exc.value, ValueError)


def test_registry_matches_are_restartable(beispiel: str) -> None:
    assert list(finde_muster("url", beispiel)) == list(finde_muster("url", beispiel))
    assert len(list(finde_muster("url", beispiel))) == 2


def test_zero_matches_yield_empty_sequence() -> None:
    for name in MUSTER_NAMEN:
        assert list(finde_muster(name, "plain words only")) == []
