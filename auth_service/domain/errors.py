"""
Domain exceptions.

These are raised by infrastructure-level helpers and converted into
``Result`` errors by the use cases; they never reach the HTTP layer.
"""


class CryptoFailure(Exception):
    """The system random source or the key-derivation function failed."""


class DuplicateAccountError(Exception):
    """An account insert hit the username or email unique constraint."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Duplicate account {field}")
