import secrets

from auth_service.domain.errors import CryptoFailure

TOKEN_BYTES = 32


class TokenGenerator:
    """Produces opaque, URL-safe random tokens (256 bits by default)."""

    def __init__(self, nbytes: int = TOKEN_BYTES):
        self.nbytes = nbytes

    def generate(self) -> str:
        try:
            return secrets.token_urlsafe(self.nbytes)
        except (NotImplementedError, OSError) as exc:
            raise CryptoFailure("Random source unavailable") from exc
