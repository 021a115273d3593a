import logging
import os
import random
import sys

import requests
import torch

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from wordseq.config import (
    BATCH_SIZE, EXAMPLE_LENGTH, GENERATION_LENGTH, LEARNING_RATE,
    LSTM_HIDDEN_SIZE, LSTM_LAYERS, N_EPOCHS, SEED, TEXT_ENCODING,
)
from wordseq.models.word_lstm import WordLSTM
from wordseq.training.dataset import WordWindowIterator
from wordseq.training.trainer import WordTrainer

def download_tiny_shakespeare(file_path):
    if not os.path.exists(file_path):
        print("Downloading Tiny Shakespeare...")
        url = "https://raw.githubusercontent.com/karpathy/char-rnn/master/data/tinyshakespeare/input.txt"
        r = requests.get(url, timeout=60)
        r.raise_for_status()
        with open(file_path, 'w', encoding=TEXT_ENCODING) as f:
            f.write(r.text)
        print("Download complete.")
    else:
        print("Dataset found.")

def main():
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(name)s: %(message)s")

    # 1. Prepare Data
    data_dir = os.path.join(os.path.dirname(__file__), '../data')
    os.makedirs(data_dir, exist_ok=True)
    input_file = os.path.join(data_dir, 'input.txt')
    download_tiny_shakespeare(input_file)

    torch.manual_seed(SEED)
    iterator = WordWindowIterator.from_file(
        input_file,
        encoding=TEXT_ENCODING,
        batch_size=BATCH_SIZE,
        example_length=EXAMPLE_LENGTH,
        rng=random.Random(SEED),
    )
    print(f"Vocab size: {iterator.vocabulary_size()}")
    print(f"Windows per epoch: {iterator.windows_per_epoch()}")

    # 2. Initialize Model
    model = WordLSTM(
        vocab_size=iterator.input_columns(),
        hidden_size=LSTM_HIDDEN_SIZE,
        num_layers=LSTM_LAYERS,
    )

    # 3. Train
    print("Starting Training...")
    trainer = WordTrainer(model, iterator, learning_rate=LEARNING_RATE)
    for epoch in range(N_EPOCHS):
        loss = trainer.train_epoch(epoch)
        print(f"Epoch {epoch} Complete. Avg loss: {loss:.4f}")

    # 4. Generate Text, primed with a word drawn from the corpus
    print("\n--- Generating Text ---")
    prime = iterator.random_token()
    generator = torch.Generator().manual_seed(SEED)
    words = model.sample(iterator, prime, GENERATION_LENGTH, generator=generator)
    print(f"Generated: {prime} {' '.join(words)}")

if __name__ == "__main__":
    main()
