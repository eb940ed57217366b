import pytest

from simparse.parser import TokenizerState, tokenize


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize("   \t ") == []


def test_tokenize_splits_on_spaces_and_tabs():
    assert tokenize("a  b\tc") == ["a", "b", "c"]


def test_tokenize_double_quotes_keep_whitespace():
    assert tokenize('echo "hello world" -n') == ["echo", "hello world", "-n"]


def test_tokenize_single_quotes_keep_whitespace():
    assert tokenize("command 'hello world'") == ["command", "hello world"]


def test_tokenize_adjacent_quoted_sections_join():
    assert tokenize("echo 'it''s'") == ["echo", "its"]
    assert tokenize('a"b c"d') == ["ab cd"]


def test_tokenize_single_quotes_are_fully_literal():
    assert tokenize(r"echo 'a \"b'") == ["echo", r"a \"b"]
    assert tokenize("echo '$HOME | grep x'") == ["echo", "$HOME | grep x"]


def test_tokenize_escaped_quotes_outside_quotes():
    assert tokenize(r"say \"hi\"") == ["say", '"hi"']
    assert tokenize(r"it\'s") == ["it's"]


def test_tokenize_escaped_backslash():
    assert tokenize(r"a\\b") == [r"a\b"]


def test_tokenize_escaped_quote_ends_double_quoted_section():
    assert tokenize(r'echo "say \"hi\" now"') == ["echo", 'say "hi"', "now"]
    assert tokenize(r'"a\"b c"') == ['a"b', "c"]


def test_tokenize_backslash_inside_double_quotes_is_literal():
    assert tokenize(r'"a\\b"') == [r"a\\b"]
    assert tokenize(r'"a\nb"') == [r"a\nb"]


def test_tokenize_other_backslashes_are_kept():
    assert tokenize(r"a\ b") == ["a\\", "b"]
    assert tokenize("echo foo\\") == ["echo", "foo\\"]


@pytest.mark.parametrize(
    "line, expected",
    [
        ('echo "unterminated text', ["echo", "unterminated text"]),
        ("echo 'unterminated text", ["echo", "unterminated text"]),
        ('echo "', ["echo"]),
    ],
)
def test_tokenize_unterminated_quotes(line, expected):
    assert tokenize(line) == expected


def test_tokenize_never_emits_empty_tokens():
    assert tokenize('""') == []
    assert tokenize("a '' b \"\"") == ["a", "b"]


def test_tokenize_pipe_is_ordinary():
    assert tokenize("dmesg | grep error") == ["dmesg", "|", "grep", "error"]


def test_tokenizer_states_are_closed():
    assert {state.name for state in TokenizerState} == {
        "NORMAL",
        "SINGLE_QUOTE",
        "DOUBLE_QUOTE",
        "ESCAPE",
    }
