"""Tests for text normalization."""

import pytest

from wordgraph.core.tokenizer import OTHER, SPACE, WORD, iter_runs, tokenize


class TestTokenize:

    def test_lowercases_and_splits(self):
        assert tokenize("The Scientist studies") == ["the", "scientist", "studies"]

    def test_non_letters_are_separators(self):
        assert tokenize("data-set, 2024!model_v2") == ["data", "set", "model", "v"]

    def test_newlines_and_runs_collapse(self):
        assert tokenize("  one\n\ntwo\t  three  ") == ["one", "two", "three"]

    def test_empty_and_blank(self):
        assert tokenize("") == []
        assert tokenize("   ...  123 ") == []

    def test_non_ascii_letters_split(self):
        assert tokenize("café au lait") == ["caf", "au", "lait"]

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            tokenize(None)


class TestIterRuns:

    def test_classifies_runs(self):
        runs = list(iter_runs("Hi,  there!"))
        assert runs == [(WORD, "Hi"), (OTHER, ","), (SPACE, "  "), (WORD, "there"), (OTHER, "!")]

    def test_runs_cover_text(self):
        text = "Seek to explore new worlds... 42 times\n"
        assert "".join(run for _, run in iter_runs(text)) == text

    def test_digits_are_other(self):
        assert list(iter_runs("abc123")) == [(WORD, "abc"), (OTHER, "123")]
