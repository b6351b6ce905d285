"""Exception hierarchy for phonics.

The encoders themselves never raise for string input: an empty or letterless
word simply encodes to ``""``. These exceptions belong to the argument
checking and batch layers around them.
"""

__all__ = ["PhonicsError", "ValidationError", "AlgorithmError", "EncodingCancelled"]


class PhonicsError(Exception):
    """Base exception for all phonics errors."""


class ValidationError(PhonicsError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class AlgorithmError(PhonicsError, ValueError):
    """Raised when an unknown or unsupported algorithm is specified."""


class EncodingCancelled(PhonicsError):
    """Raised when a batch is cancelled at a checkpoint.

    Attributes:
        processed: Number of items encoded before cancellation was noticed.
    """

    def __init__(self, processed: int):
        super().__init__(f"Encoding cancelled after {processed} items")
        self.processed = processed
