# src/tagscan/exceptions.py


class TagScanError(Exception):
    """Base class for all errors raised by tagscan."""


class TransformLengthError(TagScanError, ValueError):
    """
    Raised when a transform passed to apply_tags_where returns a token list
    whose length differs from its input, which would misalign the substitution.
    """

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Transform must preserve length: expected {expected} tokens, got {actual}"
        )


class TokenKindError(TagScanError, TypeError):
    """Raised when an operation receives a token of the wrong kind, or not a token at all."""
