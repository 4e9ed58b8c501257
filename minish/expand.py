"""Variable expansion and re-splitting of a command's tokens."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace

from .tokens import Token, TokenType

_SEPARATORS = (" ", "\n", "\t")
_PIECE = re.compile(
    r"\$(?:(?P<status>\?)|(?P<name>[A-Za-z_][A-Za-z0-9_]*)|(?P<other>[^$]+))?"
    r"|(?P<text>[^$]+)"
)


def expand_token(
    token: Token, env: Mapping[str, str] | None = None, exit_status: int = 0
) -> str | None:
    """Return the token's value with '$NAME' and '$?' expanded.

    Unknown variables expand to nothing. A '$' followed by something that
    cannot start a name is kept literally. A trailing '$' is kept only when
    the token is followed by whitespace or ends the line. Returns None when
    the expansion produced nothing at all.
    """
    env = os.environ if env is None else env
    text = token.value
    pieces: list[str] = []
    produced = False
    for match in _PIECE.finditer(text):
        if match.group("text") is not None:
            pieces.append(match.group("text"))
            produced = True
        elif match.group("status") is not None:
            pieces.append(str(exit_status))
            produced = True
        elif match.group("name") is not None:
            value = env.get(match.group("name"))
            if value is not None:
                pieces.append(value)
                produced = True
        elif match.group("other") is not None:
            pieces.append("$" + match.group("other"))
            produced = True
        elif match.end() < len(text) or token.next_char in ("", *_SEPARATORS):
            pieces.append("$")
            produced = True
    return "".join(pieces) if produced else None


def _repair_quotes(value: str) -> str:
    """Wrap a value holding an unpaired quote in the other kind of quote."""
    if value.count("'") % 2:
        return f'"{value}"'
    if value.count('"') % 2:
        return f"'{value}'"
    return value


def preprocess_expansion(
    tokens: Iterable[Token],
    env: Mapping[str, str] | None = None,
    exit_status: int = 0,
) -> list[Token]:
    """Return new tokens with every token outside single quotes expanded.

    A token whose expansion is empty gets the value None. Values of '$'
    tokens that hold an unpaired quote are wrapped so the quote survives.
    """
    result = []
    for token in tokens:
        value: str | None = token.value
        if token.type is not TokenType.SING_QUOTE:
            value = expand_token(token, env, exit_status)
        if token.type is TokenType.EXPAND and value is not None:
            value = _repair_quotes(value)
        result.append(replace(token, value=value))
    return result


def rejoin(tokens: Sequence[Token]) -> str | None:
    """Join token values back into one line, with a space where whitespace was.

    Returns None when there is nothing to join.
    """
    joined: str | None = None
    for token in tokens:
        if token.value is not None:
            joined = token.value if joined is None else joined + token.value
        if token.next_char in _SEPARATORS:
            joined = (joined or "") + " "
    return joined


def retokenize(words: Iterable[str]) -> list[Token]:
    """Turn plain words into WORD tokens separated by spaces."""
    return [Token(word, TokenType.WORD, " ") for word in words]