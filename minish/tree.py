"""Build a binary command tree from a token list."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .tokens import Token, TokenType

_WHITESPACE = (" ", "\t", "\n")


@dataclass
class Tree:
    """A node holding an operator, a redirection, or a simple command's tokens."""

    tokens: list[Token]
    left: Tree | None = None
    right: Tree | None = None


def _find_backward(tokens: Sequence[Token], kinds: set[TokenType]) -> int | None:
    """Index of the last top-level token of one of ``kinds``, ignoring index 0."""
    depth = 0
    for index, token in reversed(list(enumerate(tokens))[1:]):
        if token.type is TokenType.CLOSE_PAR:
            depth += 1
        elif token.type is TokenType.OPEN_PAR:
            depth -= 1
        elif depth == 0 and token.type in kinds:
            return index
    return None


def find_and_or(tokens: Sequence[Token]) -> int | None:
    """Index of the last '&&' or '||' outside parentheses, or None."""
    return _find_backward(tokens, {TokenType.AND, TokenType.OR})


def find_pipe(tokens: Sequence[Token]) -> int | None:
    """Index of the last '|' outside parentheses, or None."""
    return _find_backward(tokens, {TokenType.PIPE})


def find_operator(tokens: Sequence[Token]) -> int | None:
    """Index of the operator to split on: '&&'/'||' before '|'."""
    index = find_and_or(tokens)
    return index if index is not None else find_pipe(tokens)


def find_redirection(tokens: Sequence[Token]) -> int | None:
    """Index of the first redirection outside parentheses, ignoring the last token."""
    depth = 0
    for index, token in enumerate(tokens[:-1]):
        if token.type is TokenType.OPEN_PAR:
            depth += 1
        elif token.type is TokenType.CLOSE_PAR:
            depth -= 1
        elif depth == 0 and token.type.is_redirection:
            return index
    return None


def split_redirection(
    tokens: Sequence[Token], index: int
) -> tuple[list[Token], list[Token], list[Token]]:
    """Split around the redirection at ``index``.

    Returns the command's remaining tokens, the redirection, and the file
    operand, which spans every following token glued to it without whitespace.
    """
    tokens = list(tokens)
    if not 0 <= index < len(tokens) - 1:
        raise ValueError("redirection must be followed by a file operand")
    if not tokens[index].type.is_redirection:
        raise ValueError("token at index is not a redirection")
    end = index + 1
    while (
        end + 1 < len(tokens)
        and tokens[end].next_char not in _WHITESPACE
        and not tokens[end + 1].type.is_control
    ):
        end += 1
    end += 1
    return tokens[:index] + tokens[end:], [tokens[index]], tokens[index + 1:end]


def split_tokens(
    tokens: Sequence[Token],
) -> tuple[list[Token], list[Token], list[Token]] | None:
    """Split into (left, node, right), or return None for a simple command."""
    tokens = list(tokens)
    if not tokens:
        return None
    index = find_operator(tokens)
    if index is not None:
        return tokens[:index], [tokens[index]], tokens[index + 1:]
    index = find_redirection(tokens)
    if index is not None:
        return split_redirection(tokens, index)
    return None


def build_tree(tokens: Sequence[Token]) -> Tree | None:
    """Build the command tree for ``tokens``; None when there are none."""
    tokens = list(tokens)
    if not tokens:
        return None
    parts = split_tokens(tokens)
    if parts is None:
        return Tree(tokens)
    left, node, right = parts
    return Tree(node, build_tree(left), build_tree(right))