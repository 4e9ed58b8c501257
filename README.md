# minish

minish is the front end of a small shell, packaged as a library. It takes a
command line and does the following:

* **Tokenizing** (`minish.tokens.tokenize`). The line becomes a list of
  `Token` objects. Each has a `value`, a `type` (a `TokenType`) and a
  `next_char`, which is the character that follows the token, or `""` at the
  end of the line. The token types are words, `$` expansions, single- and
  double-quoted strings, the operators `&&`, `||` and `|`, the redirections
  `<`, `>`, `>>` and `<<`, and parentheses.
* **Checking syntax** (`minish.syntax`). `check_quote_syntax` rejects
  unclosed quotes. `check_syntax` rejects misplaced operators and
  redirections and unmatched parentheses; `check_parentheses` checks only the
  parentheses. Each check returns its input unchanged when it is valid and
  raises `ShellSyntaxError` when it is not.
* **Building a command tree** (`minish.tree.build_tree`). `&&` and `||` bind
  loosest, then `|`, then redirections. Each `Tree` node holds `tokens`,
  `left` and `right`. The lower-level helpers `split_tokens`, `find_operator`,
  `find_and_or`, `find_pipe`, `find_redirection` and `split_redirection` are
  also available.
* **Expanding** (`minish.expand`). `$NAME` and `$?` are expanded against an
  environment mapping; `os.environ` is used when none is given.
  `preprocess_expansion` returns new tokens. `rejoin` glues the tokens back
  into one line. `minish.quote_split.remove_quotes` splits that line into
  words and removes the quotes the way a shell does. `retokenize` turns the
  words back into `WORD` tokens.

`minish.parser.parse` runs the first three steps on one input line. It
returns a `Tree`, or `None` for a blank line.

There are also some small helpers:

* `minish.textutils`: C-style string and number routines such as `atoi`,
  `atol`, `atoi_base`, `split`, `strtrim`, `substr`, `strstr`, `strnstr`,
  `strcmp` and `strncmp`.
* `minish.formatting`: `render` and `printf`, a printf-style formatter for
  `%c %s %p %d %i %u %x %X %%`.
* `minish.reader.LineReader`: reads lines from a text or binary stream in
  fixed-size chunks.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from minish.parser import parse
from minish.expand import preprocess_expansion, rejoin, retokenize
from minish.quote_split import remove_quotes

tree = parse("echo $HOME && ls -l | wc -l")
# tree.tokens holds the "&&" token. tree.left is the echo command;
# tree.right is the pipeline, split at "|".

env = {"HOME": "/home/user"}
expanded = preprocess_expansion(tree.left.tokens, env, 0)
words = remove_quotes(rejoin(expanded), " ")   # ["echo", "/home/user"]
command = retokenize(words)
```

`remove_quotes("say 'hello world'", " ")` returns `["say", "hello world"]`.
If a quote is never closed, it raises `UnclosedQuoteError`.

## What it does not do

minish only reads and structures command lines. It does not do any of the
following:

* run commands or builtins
* open the files named in redirections
* collect here-document input
* provide an interactive prompt or history
* install a command to run

Running the commands in a tree is left to the caller.