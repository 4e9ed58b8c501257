"""Split a command line into words while honouring and removing quotes."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import islice, zip_longest

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'


class UnclosedQuoteError(ValueError):
    """Raised when a quote is opened and never closed."""

    def __init__(self) -> None:
        super().__init__("Invalid command. Dquote mechanism is not available.")


def _check_delimiter(delimiter: str) -> None:
    if len(delimiter) != 1:
        raise ValueError("delimiter must be a single character")


def count_words(text: str, delimiter: str) -> int:
    """Count the words of ``text`` split on unquoted ``delimiter`` characters.

    A pair of quotes with nothing between them counts as an empty word.
    Raises UnclosedQuoteError if a quote is left open.
    """
    _check_delimiter(delimiter)
    count = 0
    in_word = False
    single_open = double_open = False
    seen_quote = False
    for char, following in zip_longest(text, text[1:], fillvalue=""):
        if char == delimiter and not single_open and not double_open:
            if not in_word and seen_quote:
                count += 1
            in_word = False
        elif char == SINGLE_QUOTE and not double_open:
            seen_quote = True
            if single_open:
                single_open = False
                if not following and not in_word:
                    count += 1
            else:
                single_open = True
        elif char == DOUBLE_QUOTE and not single_open:
            seen_quote = True
            if double_open:
                double_open = False
                if not following and not in_word:
                    count += 1
            else:
                double_open = True
        elif not in_word:
            count += 1
            in_word = True
    if single_open or double_open:
        raise UnclosedQuoteError()
    return count


def _words(text: str, delimiter: str) -> Iterator[str]:
    """Yield successive words with their quotes removed, then empty strings."""
    single_open = double_open = False
    pos = 0
    end = len(text)
    while True:
        while pos < end and text[pos] == delimiter:
            pos += 1
        chars: list[str] = []
        while pos < end and not (
            text[pos] == delimiter and not single_open and not double_open
        ):
            char = text[pos]
            if char == SINGLE_QUOTE and not double_open:
                single_open = not single_open
            elif char == DOUBLE_QUOTE and not single_open:
                double_open = not double_open
            else:
                chars.append(char)
            pos += 1
        yield "".join(chars)


def remove_quotes(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on unquoted ``delimiter`` characters and strip the quotes.

    Quote characters inside the other kind of quote are kept literally.
    Raises UnclosedQuoteError if a quote is left open.
    """
    count = count_words(text, delimiter)
    return list(islice(_words(text, delimiter), count))