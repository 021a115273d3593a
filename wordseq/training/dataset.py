import logging
import math
import random
import threading
from collections import deque

import torch

from ..config import BATCH_SIZE, EXAMPLE_LENGTH, TEXT_ENCODING
from ..data.tokenizer import Vocabulary
from ..errors import ConfigurationError, ExhaustionError

logger = logging.getLogger(__name__)


class WordWindowIterator:
    """
    Minibatch source for next-word prediction.

    The corpus is cut into non-overlapping windows starting at offsets
    0, example_length, 2*example_length, ... Each epoch visits every window
    exactly once in shuffled order. A window of E tokens yields E - 1 steps:
    step j feeds token start+j and targets token start+j+1.

    Batches are one-hot float tensors shaped (batch, vocab_size, E - 1):
    - dimension 0 = example within the minibatch
    - dimension 1 = vocabulary index
    - dimension 2 = time step
    """

    def __init__(self, corpus, batch_size=BATCH_SIZE, example_length=EXAMPLE_LENGTH, rng=None):
        """
        corpus: a Vocabulary, or an ordered sequence of token strings.
        rng: int seed, random.Random instance, or None for an unseeded source.
            Anything else is rejected.
        """
        if batch_size <= 0:
            raise ConfigurationError(f"Invalid batch_size={batch_size} (must be >0)")
        if example_length <= 0:
            raise ConfigurationError(f"Invalid example_length={example_length} (must be >0)")
        if isinstance(rng, bool) or not (rng is None or isinstance(rng, (int, random.Random))):
            raise ConfigurationError(
                f"Invalid rng of type {type(rng).__name__} (expected int seed, random.Random or None)"
            )

        self.vocab = corpus if isinstance(corpus, Vocabulary) else Vocabulary.from_tokens(corpus)
        self.vocab.require_length(example_length)

        self.batch_size = batch_size
        self.example_length = example_length
        self.rng = rng if isinstance(rng, random.Random) else random.Random(rng)

        # -2: one window for the end index, one for a partial trailing example
        self._windows_per_epoch = (len(self.vocab.tokens) - 1) // example_length - 2
        if self._windows_per_epoch < 1:
            raise ConfigurationError(
                f"Corpus of {len(self.vocab.tokens)} tokens yields no windows of "
                f"example_length={example_length}"
            )

        self._offsets = deque()
        self._lock = threading.Lock()
        self.last_offsets = []
        self._initialize_offsets()

    @classmethod
    def from_file(cls, path, encoding=TEXT_ENCODING, batch_size=BATCH_SIZE,
                  example_length=EXAMPLE_LENGTH, rng=None):
        vocab = Vocabulary.from_file(path, encoding=encoding)
        return cls(vocab, batch_size=batch_size, example_length=example_length, rng=rng)

    def _initialize_offsets(self):
        # Defines the order in which parts of the corpus are fetched this epoch
        offsets = [i * self.example_length for i in range(self._windows_per_epoch)]
        self.rng.shuffle(offsets)
        self._offsets.extend(offsets)

    # Epoch accounting

    def has_next(self):
        return len(self._offsets) > 0

    def windows_per_epoch(self):
        return self._windows_per_epoch

    def remaining(self):
        return len(self._offsets)

    def cursor(self):
        return self._windows_per_epoch - len(self._offsets)

    def reset(self):
        with self._lock:
            self._offsets.clear()
            self._initialize_offsets()
        logger.debug("Reshuffled %d windows", self._windows_per_epoch)

    # Batch production

    def next_batch(self, size=None):
        """
        Pop up to `size` windows (default: the configured batch size) and
        encode them. The last batch of an epoch may be smaller.

        Returns (features, labels), each (n, vocab_size, example_length - 1).
        """
        if size is None:
            size = self.batch_size
        if size < 1:
            raise ConfigurationError(f"Invalid batch size {size} (must be >0)")

        with self._lock:
            if not self._offsets:
                raise ExhaustionError("No windows left in this epoch; call reset()")
            n = min(size, len(self._offsets))
            starts = [self._offsets.popleft() for _ in range(n)]
            self.last_offsets = starts

        steps = self.example_length - 1
        vocab_size = self.vocab.vocab_size
        features = torch.zeros(n, vocab_size, steps)
        labels = torch.zeros(n, vocab_size, steps)

        tokens = self.vocab.tokens
        token_to_id = self.vocab.token_to_id
        for i, start in enumerate(starts):
            curr_idx = token_to_id[tokens[start]]
            for c in range(steps):
                next_idx = token_to_id[tokens[start + c + 1]]  # Word to predict
                features[i, curr_idx, c] = 1.0
                labels[i, next_idx, c] = 1.0
                curr_idx = next_idx

        return features, labels

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return self.next_batch()
        except ExhaustionError:
            raise StopIteration

    def __len__(self):
        # Batches per epoch at the configured batch size
        return math.ceil(self._windows_per_epoch / self.batch_size)

    # Lookups

    def vocabulary_size(self):
        return self.vocab.vocab_size

    def token_at(self, index):
        return self.vocab.token_for(index)

    def index_of(self, token):
        return self.vocab.index_of(token)

    def random_token(self):
        tokens = self.vocab.tokens
        return tokens[int(self.rng.random() * len(tokens))]

    # Shape descriptors for model construction

    def batch(self):
        return self.batch_size

    def num_examples(self):
        return self._windows_per_epoch

    def input_columns(self):
        return self.vocab.vocab_size

    def total_outcomes(self):
        return self.vocab.vocab_size

    def reset_supported(self):
        return True
