import torch

def check_one_hot(tensor, dim=1):
    """
    Check that every slice along `dim` is a one-hot vector (a single 1.0, zeros elsewhere).
    """
    is_binary = bool(((tensor == 0.0) | (tensor == 1.0)).all())
    sums = tensor.sum(dim=dim)
    is_valid = is_binary and torch.equal(sums, torch.ones_like(sums))
    return is_valid, sums

def check_batch_validity(features, labels, vocab_size, example_length):
    """
    Check a (features, labels) minibatch from WordWindowIterator.
    """
    expected = (features.shape[0], vocab_size, example_length - 1)
    if tuple(features.shape) != expected or tuple(labels.shape) != expected:
        return False, f"Expected shape {expected}, got {tuple(features.shape)} / {tuple(labels.shape)}"
    for name, t in (("features", features), ("labels", labels)):
        valid, _ = check_one_hot(t, dim=1)
        if not valid:
            return False, f"{name} is not one-hot along the vocabulary axis"
    # Step j's target is step j+1's input
    if not torch.equal(labels[:, :, :-1], features[:, :, 1:]):
        return False, "labels are not features shifted by one step"
    return True, "Valid"
