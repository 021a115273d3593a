import logging

import pytest
from wordseq.data.tokenizer import Vocabulary, read_corpus, split_lines
from wordseq.data.toy_corpus import get_toy_lines
from wordseq.errors import ConfigurationError

def test_first_seen_index_order():
    vocab = Vocabulary.from_tokens(["b", "a", "b", "c", "a"])
    assert vocab.id_to_token == ["b", "a", "c"]
    assert vocab.index_of("b") == 0
    assert vocab.index_of("a") == 1
    assert vocab.index_of("c") == 2
    assert vocab.vocab_size == 3
    assert vocab.tokens == ("b", "a", "b", "c", "a")

def test_blank_lines_contribute_nothing():
    tokens = split_lines(["one two", "", "   ", "\tthree   four "])
    assert tokens == ["one", "two", "three", "four"]

def test_toy_lines_vocabulary():
    vocab = Vocabulary.from_lines(get_toy_lines())
    assert len(vocab.tokens) == 23
    assert vocab.id_to_token == ["the", "cat", "eats", "fish", ".", "a", "dog", "sees", "chases"]
    assert len(vocab) == 9
    assert "dog" in vocab
    assert "zebra" not in vocab

def test_index_round_trip():
    vocab = Vocabulary.from_lines(get_toy_lines())
    for i in range(vocab.vocab_size):
        assert vocab.index_of(vocab.token_for(i)) == i

def test_encode_decode():
    vocab = Vocabulary.from_lines(get_toy_lines())
    ids = vocab.encode("the dog sees a fish")
    assert ids == [0, 6, 7, 5, 3]
    assert vocab.decode(ids) == "the dog sees a fish"

def test_unknown_token_is_not_mapped():
    vocab = Vocabulary.from_tokens(["x", "y"])
    with pytest.raises(KeyError):
        vocab.index_of("z")
    with pytest.raises(IndexError):
        vocab.token_for(2)

def test_corpus_token_positions():
    vocab = Vocabulary.from_tokens(["x", "y", "x"])
    assert vocab.corpus_token(2) == "x"
    assert vocab.index_of(vocab.corpus_token(2)) == 0

def test_require_length():
    vocab = Vocabulary.from_tokens(["x", "y", "z"])
    vocab.require_length(2)
    with pytest.raises(ConfigurationError):
        vocab.require_length(3)

def test_load_summary_logged(caplog):
    caplog.set_level(logging.INFO, logger="wordseq.data.tokenizer")
    Vocabulary.from_lines(get_toy_lines())
    assert "23 tokens kept of 28 raw (5 removed), 9 distinct" in caplog.text

def test_read_corpus(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("héllo world\n\nagain\n", encoding="utf-8")
    assert read_corpus(str(path)) == ["héllo world", "", "again"]
    vocab = Vocabulary.from_file(str(path), encoding="utf-8")
    assert vocab.tokens == ("héllo", "world", "again")

def test_read_corpus_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="does not exist"):
        read_corpus(str(tmp_path / "missing.txt"))
