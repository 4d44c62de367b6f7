"""Word lexer: double-quoted, single-quoted and bare words.

Quoted words keep everything between their quotes verbatim, including the
other quote character, ``#``, ``;`` and whitespace. Backslashes are plain
data everywhere. Empty quotes are not a quoted word.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator

from pyparsing import Located, ParseException, ParserElement, Regex, Suppress


@contextlib.contextmanager
def explicit_whitespace() -> Iterator[None]:
    """Build pyparsing elements that never skip whitespace on their own."""

    saved = ParserElement.DEFAULT_WHITE_CHARS
    ParserElement.set_default_whitespace_chars("")
    try:
        yield
    finally:
        ParserElement.set_default_whitespace_chars(saved)


BARE_WORD_EXCLUDED = " \t\r\n#;&|<>"

with explicit_whitespace():
    DOUBLE_QUOTED_WORD = (Suppress('"') + Regex(r'[^"]+') + Suppress('"')).set_name(
        "double-quoted word"
    )
    SINGLE_QUOTED_WORD = (Suppress("'") + Regex(r"[^']+") + Suppress("'")).set_name(
        "single-quoted word"
    )
    BARE_WORD = Regex(r"[^ \t\r\n#;&|<>]+").set_name("word")
    WORD = (DOUBLE_QUOTED_WORD | SINGLE_QUOTED_WORD | BARE_WORD).set_name("word")
    _LOCATED_WORD = Located(WORD).parse_with_tabs()


def lex_word(text: str, pos: int = 0) -> tuple[str, int] | None:
    """Lex one word at ``pos``; return its value and end offset."""

    try:
        result = _LOCATED_WORD.parse_string(text[pos:])
    except ParseException:
        return None
    return result["value"][0], pos + result["locn_end"]


__all__ = [
    "BARE_WORD",
    "BARE_WORD_EXCLUDED",
    "DOUBLE_QUOTED_WORD",
    "SINGLE_QUOTED_WORD",
    "WORD",
    "explicit_whitespace",
    "lex_word",
]
