import logging
import os

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


def split_lines(lines):
    """
    Flatten corpus lines into whitespace-delimited tokens in reading order.
    Blank lines contribute nothing.
    """
    tokens = []
    for line in lines:
        tokens.extend(line.split())
    return tokens


def read_corpus(path, encoding="utf-8"):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Could not access file (does not exist): {path}")
    with open(path, 'r', encoding=encoding) as f:
        return f.read().splitlines()


class Vocabulary:
    """
    Word-level vocabulary over a fixed corpus.

    Indices are dense and follow first occurrence in the token stream:
    the first distinct word is 0, the next new word is 1, and so on.
    The corpus itself is kept for position-based lookups.
    """

    def __init__(self, tokens):
        self.tokens = tuple(tokens)
        self.id_to_token = []
        self.token_to_id = {}
        for t in self.tokens:
            if t not in self.token_to_id:
                self.token_to_id[t] = len(self.id_to_token)
                self.id_to_token.append(t)

    @classmethod
    def from_tokens(cls, tokens):
        return cls(tokens)

    @classmethod
    def from_lines(cls, lines):
        lines = list(lines)
        vocab = cls(split_lines(lines))

        # Space count per non-empty line, as a naive single-space split would see it
        raw_count = sum(line.count(" ") + 1 for line in lines if line)
        n_removed = raw_count - len(vocab.tokens)
        logger.info(
            "Loaded corpus: %d tokens kept of %d raw (%d removed), %d distinct",
            len(vocab.tokens), raw_count, n_removed, vocab.vocab_size,
        )
        return vocab

    @classmethod
    def from_file(cls, path, encoding="utf-8"):
        return cls.from_lines(read_corpus(path, encoding=encoding))

    @property
    def vocab_size(self):
        return len(self.id_to_token)

    def __len__(self):
        return self.vocab_size

    def __contains__(self, token):
        return token in self.token_to_id

    def index_of(self, token):
        return self.token_to_id[token]

    def token_for(self, index):
        if index < 0 or index >= self.vocab_size:
            raise IndexError(f"Vocabulary index {index} out of range [0, {self.vocab_size})")
        return self.id_to_token[index]

    def corpus_token(self, position):
        return self.tokens[position]

    def encode(self, tokens):
        if isinstance(tokens, str):
            tokens = tokens.split()
        return [self.token_to_id[t] for t in tokens]

    def decode(self, ids):
        return " ".join(self.token_for(i) for i in ids)

    def require_length(self, example_length):
        """Raise if the corpus cannot hold a single window of example_length tokens."""
        if example_length >= len(self.tokens):
            raise ConfigurationError(
                f"example_length={example_length} cannot exceed number of valid "
                f"tokens in corpus ({len(self.tokens)})"
            )
