import random

def create_random_corpus(n_tokens=200, vocab=None, seed=0):
    """
    Generate a random token sequence for testing.
    Every word of `vocab` appears at least once if n_tokens allows it.
    """
    if vocab is None:
        vocab = get_toy_vocab()
    rng = random.Random(seed)
    tokens = list(vocab[:n_tokens])
    tokens += [rng.choice(vocab) for _ in range(n_tokens - len(tokens))]
    rng.shuffle(tokens)
    return tokens

def get_toy_lines():
    """
    A few short sentences split over lines, blank lines included,
    for the 'cat eats fish' smoke runs.
    """
    return [
        "the cat eats fish .",
        "",
        "a dog  sees the cat .",
        "   ",
        "the dog chases a cat .",
        "a cat sees the fish .",
    ]

def get_toy_vocab():
    # Basic vocabulary
    vocab = ["cat", "dog", "fish", "eats", "sees", "chases", ".", "the", "a"]
    return vocab
