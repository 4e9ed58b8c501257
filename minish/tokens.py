"""Split a command line into shell tokens."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum, auto


class TokenType(IntEnum):
    """Kinds of token, ordered so that related kinds form ranges."""

    AND = auto()
    OR = auto()
    PIPE = auto()
    IN_REDIR = auto()
    OUT_REDIR = auto()
    APPEND = auto()
    HEREDOC = auto()
    WORD = auto()
    EXPAND = auto()
    SING_QUOTE = auto()
    DOUB_QUOTE = auto()
    OPEN_PAR = auto()
    CLOSE_PAR = auto()

    @property
    def is_operator(self) -> bool:
        """True for '&&', '||' and '|'."""
        return TokenType.AND <= self <= TokenType.PIPE

    @property
    def is_redirection(self) -> bool:
        """True for '<', '>', '>>' and '<<'."""
        return TokenType.IN_REDIR <= self <= TokenType.HEREDOC

    @property
    def is_control(self) -> bool:
        """True for operators and redirections."""
        return TokenType.AND <= self <= TokenType.HEREDOC

    @property
    def starts_command(self) -> bool:
        """True for words, quoted strings, expansions and '('."""
        return TokenType.WORD <= self <= TokenType.OPEN_PAR


@dataclass
class Token:
    """One token; ``next_char`` is the character that follows it, '' at the end."""

    value: str
    type: TokenType
    next_char: str = ""


_META_TYPES = {
    "&&": TokenType.AND,
    "||": TokenType.OR,
    "|": TokenType.PIPE,
    ">>": TokenType.APPEND,
    "<<": TokenType.HEREDOC,
    "<": TokenType.IN_REDIR,
    ">": TokenType.OUT_REDIR,
    "(": TokenType.OPEN_PAR,
    ")": TokenType.CLOSE_PAR,
}

_QUOTE_TYPES = {
    "'": TokenType.SING_QUOTE,
    '"': TokenType.DOUB_QUOTE,
}

_LEXER_PATTERN = re.compile(
    r"[ \n\t]*(?:"
    r"(?P<meta>&&|\|\||\||>>|<<|<|>|\(|\))"
    r"|(?P<quote>'(?=[\s\S])[^']*'?|\"(?=[\s\S])[^\"]*\"?)"
    r"|(?P<word>(?:[^|<> \"'()\n\t&]|&(?!&))+)"
    r")"
)


def _scan(text: str) -> Iterator[Token]:
    pos = 0
    while pos < len(text):
        match = _LEXER_PATTERN.match(text, pos)
        if match is None:
            return
        kind = match.lastgroup
        value = match.group(kind)
        if kind == "meta":
            category = _META_TYPES[value]
        elif kind == "quote":
            category = _QUOTE_TYPES[value[0]]
        elif value.startswith("$"):
            category = TokenType.EXPAND
        else:
            category = TokenType.WORD
        pos = match.end()
        yield Token(value, category, text[pos:pos + 1])


def tokenize(text: str) -> list[Token]:
    """Return the tokens of ``text``.

    Scanning stops early at a lone quote that ends the text.
    """
    return list(_scan(text))