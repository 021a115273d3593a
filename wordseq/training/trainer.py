import logging

import torch.nn.functional as F
import torch.optim as optim

logger = logging.getLogger(__name__)


class WordTrainer:
    def __init__(self, model, iterator, learning_rate=0.01):
        self.model = model
        self.iterator = iterator
        self.optimizer = optim.Adam(model.parameters(), lr=learning_rate)

    def train_epoch(self, epoch_idx=0):
        """
        Drain one epoch of windows from the iterator, then reset it for the next.
        Returns the mean per-step cross-entropy over the epoch.
        """
        total_loss = 0.0
        total_batches = 0

        self.model.train()

        for batch_idx, (features, labels) in enumerate(self.iterator):
            self.optimizer.zero_grad()

            logits, _ = self.model(features)
            # Labels are one-hot over dim 1; cross_entropy wants class indices (batch, steps)
            targets = labels.argmax(dim=1)
            loss = F.cross_entropy(logits, targets)

            loss.backward()
            self.optimizer.step()

            total_loss += loss.item()
            total_batches += 1

            if batch_idx % 10 == 0:
                print(f"Epoch {epoch_idx} | Batch {batch_idx} | Loss: {loss.item():.4f}")

        logger.info("Epoch %d finished: %d batches, %d windows",
                    epoch_idx, total_batches, self.iterator.cursor())
        self.iterator.reset()

        if total_batches == 0:
            return 0.0
        return total_loss / total_batches
