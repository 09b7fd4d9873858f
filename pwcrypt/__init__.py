"""
PWCRYPT - password-based AES-256-CBC file encryption

Keys come from PBKDF2-HMAC-SHA1 over a fixed salt; every encryption draws a
fresh 16-byte IV and stores it in front of the ciphertext:

    encrypted_file := IV (16 bytes) || AES-256-CBC ciphertext (PKCS#7 padded)

There is no header, version tag or authentication tag. A failed padding
check on decryption is the only hint of a wrong password or a damaged file.
"""

from .main import *
from .api_bytes import (
    decrypt_bytes,
    decrypt_with_password,
    derive_key,
    encrypt_bytes,
    encrypt_with_password,
)
from .api_files import decrypt_file, encrypt_file, process_file, Reporter
from .version import __version__

UsageError = pwcrypt.UsageError
FormatError = pwcrypt.FormatError
IntegrityError = pwcrypt.IntegrityError
CryptoFatalError = pwcrypt.CryptoFatalError

KEY_LEN = pwcrypt.KEY_LEN
IV_LEN = pwcrypt.IV_LEN
KDF_SALT = pwcrypt.KDF_SALT
KDF_ITERATIONS = pwcrypt.KDF_ITERATIONS
