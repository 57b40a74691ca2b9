import hashlib


def hash_reset_token(token: str) -> str:
    """SHA-256 hex digest under which a reset token is stored"""
    return hashlib.sha256(token.encode()).hexdigest()
