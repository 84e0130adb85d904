"""Tests for splitting operator lines into tokens."""

import pytest

from shell.tokenizer import tokenize


def test_quoted_regions():
    line = "This is 'a test' of \"quoted strings\""
    assert tokenize(line) == ["This", "is", "a test", "of", "quoted strings"]


def test_mixed_quotes_and_escaped_quotes():
    line = r"""This is 'a test' of "quoted strings" and unquoted strings. \"escaped quotes\""""
    assert tokenize(line) == [
        "This",
        "is",
        "a test",
        "of",
        "quoted strings",
        "and",
        "unquoted",
        "strings.",
        '"escaped',
        'quotes"',
    ]


@pytest.mark.parametrize(
    "line",
    ["ls -la /tmp", "  echo   hello\tworld  ", "\t\ta\t b  c ", "one"],
)
def test_plain_input_matches_whitespace_split(line):
    assert tokenize(line) == line.split()


@pytest.mark.parametrize("line", ["", "   ", "\t", " \t \t "])
def test_blank_input_yields_no_tokens(line):
    assert tokenize(line) == []


def test_escaped_space_does_not_separate():
    assert tokenize("a\\ b") == ["a b"]


def test_escaped_tab_does_not_separate():
    assert tokenize("a\\\tb") == ["a\tb"]


def test_double_backslash_is_one_literal_backslash():
    assert tokenize("a\\\\b") == ["a\\b"]


def test_escape_applies_to_one_character_only():
    assert tokenize("\\ab c") == ["ab", "c"]


def test_trailing_backslash_is_dropped():
    assert tokenize("echo hi\\") == ["echo", "hi"]


def test_unterminated_quote_emits_partial_token():
    assert tokenize("'unterminated") == ["unterminated"]
    assert tokenize('echo "two words') == ["echo", "two words"]


def test_lone_quote_yields_nothing():
    assert tokenize("'") == []


def test_empty_quotes_emit_empty_token():
    assert tokenize("echo '' \"\"") == ["echo", "", ""]


def test_other_quote_is_literal_inside_region():
    assert tokenize("\"it's\"") == ["it's"]
    assert tokenize("'say \"hi\"'") == ['say "hi"']


def test_escaped_quote_inside_region():
    assert tokenize("'it\\'s'") == ["it's"]


def test_closing_quote_ends_token_immediately():
    assert tokenize("'a'b") == ["a", "b"]


def test_prefix_joins_opening_quote():
    assert tokenize("--name='John Smith' x") == ["--name=John Smith", "x"]


def test_whitespace_preserved_inside_quotes():
    assert tokenize("'  a\tb  '") == ["  a\tb  "]


@pytest.mark.parametrize(
    "line",
    ["git commit -m message", "  python3   -c   pass ", "a b c d e"],
)
def test_retokenizing_joined_tokens_is_stable(line):
    tokens = tokenize(line)
    assert tokenize(" ".join(tokens)) == tokens
