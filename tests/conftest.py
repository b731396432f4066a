from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from core import config
from core.einstellungen import ENV_CONFIG_PATH
from core.protokoll import konfiguriere_logging


# Beispieldokument: 2 URLs, 5 Hex-Literale, 5 Guard-Bereiche
# (disable-line, disable-next, disable/enable-Paar, verschachteltes disable, offenes cSpell:disable)
BEISPIEL = (
    "\n"
    "/*\n"
    " * this is a comment.\r\n"
    " */\n"
    "\n"
    "const text = 'some nice text goes here';\n"
    "const url = 'https://www.google.com?q=typescript';\n"
    "const url2 = 'http://www.weirddomain.com?key=jdhehdjsiijdkejshaijncjfhe';\n"
    "const cssHexValue = '#cccd';\n"
    "const cHexValue = 0x5612abcd;\n"
    "const cHexValueBadCoffee = 0xbadc0ffee;\n"
    "\n"
    "const badspelling = 'disable'; // spell-checker:disable-line, yes all of it.\n"
    "// But not this line\n"
    "// cspell:disable-next\n"
    "const verybadspelling = 'disable';\n"
    "// And not this line\n"
    "\n"
    "// spell-checker:disable\n"
    "const unicodeHexValue = '\\uBABC';\n"
    "const unicodeHexValue2 = '\\x{abcd}';\n"
    "\n"
    "// spell-checker:enable\n"
    "\n"
    "/* More code and comments */\n"
    "\n"
    "// Make sure /* this works.\n"
    "\n"
    "/* spell-checker:disable */\n"
    "\n"
    "// nested disabled checker is not supported.\n"
    "\n"
    "// spell-checker:disable\n"
    "\n"
    "// nested spell-checker:enable <--> checking is now turned on.\n"
    "\n"
    "// This will be checked\n"
    "\n"
    "/*\n"
    " * spell-checker:enable  <-- this makes no difference because it was already turned back on.\n"
    " */\n"
    "\n"
    "let text = '';\n"
    "for (let i = 0; i < 99; ++i) {\n"
    "    text += ' ' + i;\n"
    "}\n"
    "\n"
    "const string1 = 'This is a single quote string.  it\\'s a lot of fun.'\n"
    "const string2 = \"How about a double quote string?\";\n"
    "const templateString = `\n"
    "can contain \" and '\n"
    "\n"
    " `;\n"
    "\n"
    "$phpHereDocString = <<<SQL\n"
    "    SELECT * FROM users WHERE id in :ids;\n"
    "SQL;\n"
    "\n"
    "$phpHereDocString = <<<\"SQL\"\n"
    "    SELECT * FROM users WHERE id in :ids;\n"
    "SQL;\n"
    "\n"
    "$phpNowDocString = <<<'SQL'\n"
    "    SELECT * FROM users WHERE id in :ids;\n"
    "SQL;\n"
    "\n"
    "// cSpell:disable\n"
    "\n"
    "Not checked.\n"
    "\n"
)


@pytest.fixture(autouse=True)
def isolierte_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    path = tmp_path / "config.json"
    monkeypatch.setenv(ENV_CONFIG_PATH, str(path))
    konfiguriere_logging(debug=False, json=False)
    config.reset()
    yield path
    config.reset()
    konfiguriere_logging(debug=False, json=False)


@pytest.fixture
def beispiel() -> str:
    return BEISPIEL
