"""File-oriented convenience wrappers."""

from .main import pwcrypt


def encrypt_file(input_path: str, output_path: str, password: str, reporter=None):
    return pwcrypt.encrypt_file(input_path, output_path, password, reporter=reporter)


def decrypt_file(input_path: str, output_path: str, password: str, reporter=None):
    return pwcrypt.decrypt_file(input_path, output_path, password, reporter=reporter)


def process_file(
    input_path: str,
    output_path: str,
    password: str,
    decrypt: bool = False,
    silent: bool = False,
):
    return pwcrypt.process_file(
        input_path,
        output_path,
        password,
        decrypt=decrypt,
        silent=silent,
    )


Reporter = pwcrypt._Reporter


__all__ = [
    "decrypt_file",
    "encrypt_file",
    "process_file",
    "Reporter",
]
