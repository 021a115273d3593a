import torch
from wordseq.data.toy_corpus import create_random_corpus
from wordseq.models.validation import check_batch_validity, check_one_hot
from wordseq.training.dataset import WordWindowIterator

def test_one_hot_marks_per_row():
    it = WordWindowIterator(create_random_corpus(n_tokens=400, seed=2), batch_size=6, example_length=7, rng=4)
    steps = it.example_length - 1
    while it.has_next():
        features, labels = it.next_batch()
        for t in (features, labels):
            # exactly E-1 marks per row, everything else zero
            assert torch.equal(t.sum(dim=(1, 2)), torch.full((t.shape[0],), float(steps)))
            assert int((t != 0).sum()) == t.shape[0] * steps
            assert t.dtype == torch.float32

def test_marks_match_window_tokens():
    tokens = create_random_corpus(n_tokens=120, seed=8)
    it = WordWindowIterator(tokens, batch_size=4, example_length=6, rng=8)
    features, labels = it.next_batch()
    for row, start in enumerate(it.last_offsets):
        for j in range(5):
            assert features[row, :, j].argmax().item() == it.index_of(tokens[start + j])
            assert labels[row, :, j].argmax().item() == it.index_of(tokens[start + j + 1])

def test_batch_validity_helper():
    it = WordWindowIterator(create_random_corpus(n_tokens=200), batch_size=5, example_length=5, rng=0)
    features, labels = it.next_batch()
    valid, msg = check_batch_validity(features, labels, it.vocabulary_size(), it.example_length)
    assert valid, msg

def test_batch_validity_rejects_corrupt_batch():
    it = WordWindowIterator(create_random_corpus(n_tokens=200), batch_size=5, example_length=5, rng=0)
    features, labels = it.next_batch()
    labels[0, :, 0] = 0.0
    valid, _ = check_batch_validity(features, labels, it.vocabulary_size(), it.example_length)
    assert not valid

def test_check_one_hot():
    t = torch.zeros(2, 3, 4)
    t[:, 1, :] = 1.0
    valid, sums = check_one_hot(t, dim=1)
    assert valid
    assert sums.shape == (2, 4)
    t[0, 2, 0] = 1.0
    valid, _ = check_one_hot(t, dim=1)
    assert not valid

def test_batches_are_fresh_tensors():
    it = WordWindowIterator(create_random_corpus(n_tokens=200), batch_size=2, example_length=5, rng=0)
    x1, _ = it.next_batch()
    x1.fill_(0.0)
    x2, _ = it.next_batch()
    assert x2.sum().item() == 2 * 4
