import pytest

from minish.expand import expand_token, preprocess_expansion, rejoin, retokenize
from minish.quote_split import remove_quotes
from minish.tokens import Token, TokenType, tokenize

HOME = "/home/user"
ENV = {"HOME": HOME, "EMPTY": ""}


def test_expands_known_variable():
    assert expand_token(Token("$HOME", TokenType.EXPAND), ENV, 0) == HOME


def test_unknown_variable_expands_to_none():
    assert expand_token(Token("$MISSING", TokenType.EXPAND), ENV, 0) is None


def test_empty_variable_is_empty_string_not_none():
    assert expand_token(Token("$EMPTY", TokenType.EXPAND), ENV, 0) == ""


def test_exit_status():
    assert expand_token(Token("$?", TokenType.EXPAND), ENV, 42) == "42"


def test_exit_status_inside_word():
    assert expand_token(Token("a$?b", TokenType.WORD), ENV, 7) == "a" + "7" + "b"


def test_variable_inside_word_and_suffix():
    assert expand_token(Token("a$HOME.txt", TokenType.WORD), ENV, 0) == "a" + HOME + ".txt"


def test_name_stops_at_non_identifier():
    token = Token("$HOME-x", TokenType.EXPAND)
    assert expand_token(token, ENV, 0) == HOME + "-x"


def test_non_identifier_after_dollar_is_kept():
    assert expand_token(Token("$1abc", TokenType.EXPAND), ENV, 0) == "$1abc"


def test_double_dollar_kept():
    assert expand_token(Token("$$", TokenType.EXPAND, ""), ENV, 0) == "$$"


@pytest.mark.parametrize("next_char", ["", " ", "\t", "\n"])
def test_lone_dollar_before_whitespace_kept(next_char):
    assert expand_token(Token("$", TokenType.EXPAND, next_char), ENV, 0) == "$"


def test_lone_dollar_before_quote_dropped():
    tokens = tokenize('$"x"')
    assert tokens[0].value == "$"
    assert expand_token(tokens[0], ENV, 0) is None


def test_double_quoted_token_expanded():
    token = Token('"$HOME"', TokenType.DOUB_QUOTE)
    assert expand_token(token, ENV, 0) == f'"{HOME}"'


def test_text_without_dollar_unchanged():
    assert expand_token(Token("plain", TokenType.WORD), ENV, 0) == "plain"


def test_preprocess_skips_single_quotes():
    tokens = [Token("'$HOME'", TokenType.SING_QUOTE)]
    assert preprocess_expansion(tokens, ENV, 0)[0].value == "'$HOME'"


def test_preprocess_does_not_mutate_input():
    tokens = tokenize("echo $HOME")
    result = preprocess_expansion(tokens, ENV, 0)
    assert [t.value for t in tokens] == ["echo", "$HOME"]
    assert [t.value for t in result] == ["echo", HOME]


def test_preprocess_repairs_single_quote():
    env = {"Q": "it's"}
    result = preprocess_expansion([Token("$Q", TokenType.EXPAND)], env, 0)
    assert result[0].value == '"' + env["Q"] + '"'


def test_preprocess_repairs_double_quote():
    env = {"Q": 'say "hi'}
    result = preprocess_expansion([Token("$Q", TokenType.EXPAND)], env, 0)
    assert result[0].value == "'" + env["Q"] + "'"


def test_preprocess_missing_variable_gives_none():
    result = preprocess_expansion([Token("$NOPE", TokenType.EXPAND)], ENV, 0)
    assert result[0].value is None
    assert result[0].type is TokenType.EXPAND


def test_rejoin_round_trip():
    line = "echo hello world"
    assert rejoin(tokenize(line)) == line


def test_rejoin_normalises_whitespace():
    assert rejoin(tokenize("a\tb")) == "a b"


def test_rejoin_keeps_glued_tokens_together():
    assert rejoin(tokenize("a'b c'd")) == "a'b c'd"


def test_rejoin_skips_none_values():
    tokens = [Token("a", TokenType.WORD, " "), Token(None, TokenType.EXPAND, " "), Token("b", TokenType.WORD)]
    assert rejoin(tokens) == "a  b"


def test_rejoin_empty():
    assert rejoin([]) is None


def test_retokenize():
    tokens = retokenize(["ls", "-l"])
    assert [t.value for t in tokens] == ["ls", "-l"]
    assert all(t.type is TokenType.WORD and t.next_char == " " for t in tokens)


def test_full_pipeline():
    tokens = preprocess_expansion(tokenize("echo \"$HOME\" '$HOME'"), ENV, 0)
    words = remove_quotes(rejoin(tokens), " ")
    assert [t.value for t in retokenize(words)] == ["echo", HOME, "$HOME"]