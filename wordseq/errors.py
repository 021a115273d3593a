class WordSeqError(Exception):
    """Base class for errors raised by wordseq."""


class ConfigurationError(WordSeqError, ValueError):
    """
    Invalid construction arguments: non-positive batch size, or a window
    length the corpus cannot fill. The instance is unusable.
    """


class ExhaustionError(WordSeqError, LookupError):
    """No windows left in the current epoch. Call reset() to start another."""
