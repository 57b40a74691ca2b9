from unittest.mock import patch

import pytest

from auth_service.app.services.password_codec import PasswordCodec
from auth_service.domain.errors import CryptoFailure


def test_hash_then_verify_default_parameters():
    """Production parameters (N=32768, r=8, p=1) round-trip"""
    codec = PasswordCodec()

    encoded = codec.hash("SecurePass123!")

    assert len(encoded) == 128
    assert codec.verify(encoded, "SecurePass123!") is True


def test_wrong_password_does_not_verify(fast_codec):
    encoded = fast_codec.hash("SecurePass123!")

    assert fast_codec.verify(encoded, "SecurePass123?") is False
    assert fast_codec.verify(encoded, "") is False


def test_hash_uses_fresh_salt(fast_codec):
    first = fast_codec.hash("SecurePass123!")
    second = fast_codec.hash("SecurePass123!")

    assert first != second
    # Salts differ, not just the derived keys
    assert first[:64] != second[:64]
    assert fast_codec.verify(first, "SecurePass123!")
    assert fast_codec.verify(second, "SecurePass123!")


@pytest.mark.parametrize(
    "stored",
    [
        "",
        "not-hex",
        "zz" * 64,
        "ab" * 63,
        "ab" * 65,
    ],
)
def test_malformed_hash_fails_closed(fast_codec, stored):
    assert fast_codec.verify(stored, "SecurePass123!") is False


def test_non_string_hash_fails_closed(fast_codec):
    assert fast_codec.verify(None, "SecurePass123!") is False


def test_hash_from_different_parameters_does_not_verify(fast_codec):
    encoded = fast_codec.hash("SecurePass123!")

    assert PasswordCodec(n=2048).verify(encoded, "SecurePass123!") is False


def test_random_source_failure_raises_crypto_failure(fast_codec):
    with patch(
        "auth_service.app.services.password_codec.secrets.token_bytes",
        side_effect=NotImplementedError("no entropy"),
    ):
        with pytest.raises(CryptoFailure):
            fast_codec.hash("SecurePass123!")
