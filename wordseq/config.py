# Defaults for the word-window iterator and the demo LSTM
BATCH_SIZE = 32                   # Windows per minibatch
EXAMPLE_LENGTH = 50               # Tokens per window (yields EXAMPLE_LENGTH - 1 steps)
TEXT_ENCODING = "utf-8"           # Corpus file encoding
SEED = 12345                      # Shuffle seed for reproducible epochs
LSTM_HIDDEN_SIZE = 200            # Hidden units per LSTM layer
LSTM_LAYERS = 2                   # Stacked LSTM layers
LEARNING_RATE = 2e-3              # Adam step size
N_EPOCHS = 1                      # Passes over the corpus in the demo script
GENERATION_LENGTH = 100           # Words sampled after training
