"""Turn a command line into a command tree."""

from __future__ import annotations

from .syntax import check_quote_syntax, check_syntax
from .tokens import tokenize
from .tree import Tree, build_tree


def parse(text: str) -> Tree | None:
    """Check, tokenize and build the command tree for ``text``.

    Returns None for a line with no tokens. Raises ShellSyntaxError for an
    unclosed quote or a malformed command line.
    """
    check_quote_syntax(text)
    tokens = tokenize(text)
    if not tokens:
        return None
    check_syntax(tokens)
    return build_tree(tokens)