import torch
import torch.nn as nn

class WordLSTM(nn.Module):
    """
    Next-word model over one-hot word windows.

    Consumes features shaped (batch, vocab_size, steps), the layout
    WordWindowIterator produces, and returns logits in the same layout
    so they line up with the label tensor.
    """

    def __init__(self, vocab_size, hidden_size=200, num_layers=2):
        super().__init__()
        self.vocab_size = vocab_size
        self.hidden_size = hidden_size
        self.lstm = nn.LSTM(vocab_size, hidden_size, num_layers=num_layers, batch_first=True)
        self.head = nn.Linear(hidden_size, vocab_size)

    def forward(self, features, state=None):
        # (batch, vocab, steps) -> (batch, steps, vocab)
        x = features.transpose(1, 2)
        out, state = self.lstm(x, state)
        logits = self.head(out)
        return logits.transpose(1, 2), state

    @torch.no_grad()
    def sample(self, vocab, prime_token, length, generator=None):
        """
        Generate `length` words after `prime_token`, feeding each sampled word back in.
        `vocab` is anything with index_of/token_at (a WordWindowIterator works).
        """
        was_training = self.training
        self.eval()

        words = []
        state = None
        x = torch.zeros(1, self.vocab_size, 1)
        x[0, vocab.index_of(prime_token), 0] = 1.0
        for _ in range(length):
            logits, state = self(x, state)
            probs = torch.softmax(logits[0, :, -1], dim=0)
            idx = torch.multinomial(probs, 1, generator=generator).item()
            words.append(vocab.token_at(idx))
            x = torch.zeros(1, self.vocab_size, 1)
            x[0, idx, 0] = 1.0

        self.train(was_training)
        return words
