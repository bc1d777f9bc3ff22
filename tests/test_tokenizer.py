from text_analyzer.analysis import tokenize


def test_splits_on_whitespace_runs_and_lowercases() -> None:
    assert list(tokenize("  Hello\tWORLD\n\nfoo  ")) == ["hello", "world", "foo"]


def test_keeps_punctuation() -> None:
    assert list(tokenize("Hello, world!")) == ["hello,", "world!"]


def test_empty_and_blank_input() -> None:
    assert list(tokenize("")) == []
    assert list(tokenize(" \n\t ")) == []


def test_unicode_lowercase_and_whitespace() -> None:
    # U+00A0 (no-break space) counts as whitespace.
    assert list(tokenize("ÄPFEL\u00a0Straße ΣΟΦΊΑ")) == ["äpfel", "straße", "σοφία"]


def test_is_lazy_and_single_pass() -> None:
    tokens = tokenize("a b")
    assert next(tokens) == "a"
    assert list(tokens) == ["b"]
    assert list(tokens) == []
