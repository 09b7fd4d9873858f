"""In-memory key derivation and cipher wrappers."""

from .main import pwcrypt


def derive_key(password: str | bytes):
    return pwcrypt.derive_key(password)


def encrypt_bytes(plaintext: bytes, key: bytes, reporter=None):
    return pwcrypt.encrypt_bytes(plaintext, key, reporter=reporter)


def decrypt_bytes(ciphertext: bytes, key: bytes, reporter=None):
    return pwcrypt.decrypt_bytes(ciphertext, key, reporter=reporter)


def encrypt_with_password(plaintext: bytes, password: str | bytes, reporter=None):
    return pwcrypt.encrypt_bytes(plaintext, pwcrypt.derive_key(password), reporter=reporter)


def decrypt_with_password(ciphertext: bytes, password: str | bytes, reporter=None):
    return pwcrypt.decrypt_bytes(ciphertext, pwcrypt.derive_key(password), reporter=reporter)


__all__ = [
    "decrypt_bytes",
    "decrypt_with_password",
    "derive_key",
    "encrypt_bytes",
    "encrypt_with_password",
]
