"""Syntax checks applied to a command line before it is built into a tree."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import chain

from .tokens import Token, TokenType


class ShellSyntaxError(ValueError):
    """Raised when a command line is not well formed."""

    def __init__(self, message: str = "Syntax error") -> None:
        super().__init__(message)


def check_quote_syntax(text: str) -> str:
    """Return ``text`` if every quote in it is closed, else raise ShellSyntaxError."""
    open_quote = None
    for char in text:
        if char in "'\"":
            if open_quote is None:
                open_quote = char
            elif char == open_quote:
                open_quote = None
    if open_quote is not None:
        raise ShellSyntaxError()
    return text


def check_parentheses(tokens: Sequence[Token]) -> Sequence[Token]:
    """Return ``tokens`` if their parentheses balance, else raise ShellSyntaxError."""
    depth = 0
    for token in tokens:
        if depth < 0:
            raise ShellSyntaxError()
        if token.type is TokenType.OPEN_PAR:
            depth += 1
        elif token.type is TokenType.CLOSE_PAR:
            depth -= 1
    if depth != 0:
        raise ShellSyntaxError()
    return tokens


def _check_neighbours(
    prev: Token | None, token: Token, following: Token, after: Token | None
) -> None:
    kind, next_kind = token.type, following.type
    if kind.is_operator and next_kind.is_operator:
        raise ShellSyntaxError()
    if kind.is_redirection and next_kind.is_control:
        raise ShellSyntaxError()
    if kind is TokenType.OPEN_PAR and (
        next_kind is TokenType.CLOSE_PAR or next_kind.is_operator
    ):
        raise ShellSyntaxError()
    if kind is TokenType.CLOSE_PAR:
        if prev is not None and prev.type.is_operator:
            raise ShellSyntaxError()
        if next_kind.starts_command:
            raise ShellSyntaxError()
        if next_kind.is_operator and after is not None and not after.type.starts_command:
            raise ShellSyntaxError()


def check_syntax(tokens: Sequence[Token]) -> Sequence[Token]:
    """Return ``tokens`` if they form a valid command line, else raise ShellSyntaxError."""
    if not tokens:
        return tokens
    if tokens[0].type.is_operator:
        raise ShellSyntaxError()
    neighbours = zip(
        chain([None], tokens),
        tokens[:-1],
        tokens[1:],
        chain(tokens[2:], [None]),
    )
    for prev, token, following, after in neighbours:
        _check_neighbours(prev, token, following, after)
    if tokens[-1].type.is_control:
        raise ShellSyntaxError()
    return check_parentheses(tokens)