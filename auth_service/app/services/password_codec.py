"""
Password hashing with scrypt.

Stored format is the hex encoding of ``salt || derived_key`` (32 + 32 bytes),
so every stored hash is exactly 128 characters long.
"""

import hashlib
import hmac
import logging
import secrets

from auth_service.domain.errors import CryptoFailure

logger = logging.getLogger(__name__)

SALT_BYTES = 32
KEY_BYTES = 32
SCRYPT_N = 32768
SCRYPT_R = 8
SCRYPT_P = 1


class PasswordCodec:
    """
    Derives and verifies salted scrypt password hashes.

    The cost parameters are fixed per instance; a hash can only be verified
    by a codec configured with the parameters that produced it.
    """

    def __init__(
        self,
        n: int = SCRYPT_N,
        r: int = SCRYPT_R,
        p: int = SCRYPT_P,
        salt_bytes: int = SALT_BYTES,
        key_bytes: int = KEY_BYTES,
    ):
        self.n = n
        self.r = r
        self.p = p
        self.salt_bytes = salt_bytes
        self.key_bytes = key_bytes
        # scrypt needs 128 * r * N bytes; leave headroom over OpenSSL's 32 MiB default
        self.maxmem = 2 * 128 * r * n + 1024 * 1024

    @property
    def encoded_length(self) -> int:
        return 2 * (self.salt_bytes + self.key_bytes)

    def _derive(self, password: str, salt: bytes) -> bytes:
        return hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt,
            n=self.n,
            r=self.r,
            p=self.p,
            maxmem=self.maxmem,
            dklen=self.key_bytes,
        )

    def hash(self, password: str) -> str:
        """
        Hash a password with a fresh random salt.

        Raises:
            CryptoFailure: random source or KDF unavailable
        """
        try:
            salt = secrets.token_bytes(self.salt_bytes)
            derived = self._derive(password, salt)
        except (NotImplementedError, OSError, ValueError, MemoryError) as exc:
            logger.error("Password hashing failed: %s", type(exc).__name__)
            raise CryptoFailure("Unable to hash password") from exc

        return (salt + derived).hex()

    def verify(self, encoded_hash: str, password: str) -> bool:
        """
        Check a password against a stored hash in constant time.

        Malformed or wrong-length stored values fail closed and return False.
        """
        if not isinstance(encoded_hash, str) or len(encoded_hash) != self.encoded_length:
            return False

        try:
            decoded = bytes.fromhex(encoded_hash)
        except ValueError:
            return False

        salt = decoded[: self.salt_bytes]
        expected = decoded[self.salt_bytes :]

        try:
            candidate = self._derive(password, salt)
        except (ValueError, MemoryError):
            return False

        return hmac.compare_digest(candidate, expected)
