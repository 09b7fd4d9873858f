# PWCRYPT FILE CIPHER ->

import os as _os_module


class pwcrypt:
    import sys
    import os
    import pathlib
    import shutil
    import tempfile
    import typing
    import warnings
    import colorama
    from cryptography.hazmat.primitives import hashes, padding
    from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
    from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC
    from cryptography.exceptions import InternalError, UnsupportedAlgorithm

    @staticmethod
    def _env_int(name: str) -> "pwcrypt.typing.Optional[int]":
        value = _os_module.getenv(name)
        if not value:
            return None
        try:
            parsed = int(value)
        except (TypeError, ValueError):
            return None
        if parsed <= 0:
            return None
        return parsed

    ENGINE_VERSION = "1.2.0"
    KEY_LEN = 32  # AES-256
    IV_LEN = 16
    BLOCK_SIZE = 16
    # Salt, iteration count and hash are part of the file format: changing
    # any of them changes every key.
    KDF_SALT = b"12345678"
    KDF_ITERATIONS = 10_000
    MAX_INPUT_BYTES = 2 * 1024 * 1024 * 1024
    _MAX_INPUT_BYTES_ENV = _env_int("PWCRYPT_MAX_INPUT_BYTES")
    if _MAX_INPUT_BYTES_ENV is not None:
        MAX_INPUT_BYTES = _MAX_INPUT_BYTES_ENV
    QUIET_DEFAULT = os.getenv("PWCRYPT_QUIET", "0") == "1"
    ENABLE_COLOR = os.getenv("PWCRYPT_COLOR", "1") == "1"
    USAGE = "Usage: {prog} [-e | -d] -i <inputfile> -o <outputfile> -p <password>"
    _CRYPTO_LIBRARY_ERRORS = (InternalError, UnsupportedAlgorithm)

    class UsageError(ValueError):
        """Missing, conflicting or empty command-line arguments."""

    class FormatError(ValueError):
        """Input cannot be an IV followed by whole cipher blocks."""

    class IntegrityError(ValueError):
        """Padding check failed after decryption.

        CBC carries no authentication tag, so this is the only signal for a
        wrong password or a corrupted/tampered file, and it cannot tell the
        two apart.
        """

    class CryptoFatalError(RuntimeError):
        """The cryptographic primitive itself failed. Never retried."""

    class _Reporter:
        """Single sink for pipeline diagnostics and failures.

        Diagnostics (IV dumps, completion lines) go to ``stream`` and are
        dropped in quiet mode; failures always go to ``err_stream``.
        """

        def __init__(self, stream=None, err_stream=None, *, quiet=None, color=None):
            self.stream = stream or pwcrypt.sys.stdout
            self.err_stream = err_stream or pwcrypt.sys.stderr
            self.quiet = pwcrypt.QUIET_DEFAULT if quiet is None else bool(quiet)
            use_color = pwcrypt.ENABLE_COLOR if color is None else bool(color)
            self._out_colors = use_color and self._isatty(self.stream)
            self._err_colors = use_color and self._isatty(self.err_stream)
            if self._out_colors or self._err_colors:
                pwcrypt.colorama.just_fix_windows_console()

        @staticmethod
        def _isatty(stream) -> bool:
            return bool(getattr(stream, "isatty", lambda: False)())

        @staticmethod
        def _write(stream, line: str) -> None:
            stream.write(line + "\n")
            stream.flush()

        def info(self, message: str) -> None:
            if self.quiet:
                return
            self._write(self.stream, message)

        def iv(self, label: str, iv: bytes) -> None:
            self.info(f"{label} IV: {pwcrypt.format_iv(iv)}")

        def success(self, operation: str) -> None:
            if self.quiet:
                return
            message = f"Operation {operation} completed successfully!"
            if self._out_colors:
                message = f"{pwcrypt.colorama.Fore.GREEN}{message}{pwcrypt.colorama.Style.RESET_ALL}"
            self._write(self.stream, message)

        def usage(self, prog: str) -> None:
            self._write(self.stream, pwcrypt.USAGE.format(prog=prog))

        def error(self, message: str) -> None:
            if self._err_colors:
                message = f"{pwcrypt.colorama.Fore.RED}{message}{pwcrypt.colorama.Style.RESET_ALL}"
            self._write(self.err_stream, message)

        def failure(self, exc: BaseException) -> None:
            self.error(pwcrypt.describe_failure(exc))

    @staticmethod
    def format_iv(iv: bytes) -> str:
        return " ".join(f"{b:x}" for b in iv)

    @staticmethod
    def describe_failure(exc: BaseException) -> str:
        if isinstance(exc, pwcrypt.CryptoFatalError):
            return f"Fatal cryptographic error: {exc}"
        if isinstance(exc, pwcrypt.UsageError):
            return f"Usage error: {exc}"
        if isinstance(exc, pwcrypt.FormatError):
            return f"Invalid encrypted input: {exc}"
        if isinstance(exc, pwcrypt.IntegrityError):
            return f"Decryption failed: {exc}"
        if isinstance(exc, OSError):
            target = exc.filename if exc.filename is not None else ""
            reason = exc.strerror or str(exc)
            return f"Cannot open file: {target} ({reason})" if target else f"I/O error: {reason}"
        return f"Error: {exc}"

    @staticmethod
    def _human_readable_size(num_bytes: int) -> str:
        units = ["B", "KiB", "MiB", "GiB", "TiB"]
        value = float(num_bytes)
        for unit in units:
            if value < 1024.0 or unit == units[-1]:
                return f"{value:.2f} {unit}"
            value /= 1024.0

    @staticmethod
    def _coerce_password_bytes(
        password: "pwcrypt.typing.Union[str, bytes, bytearray, memoryview]"
    ) -> bytes:
        if isinstance(password, str):
            return password.encode("utf-8")
        if isinstance(password, (bytes, bytearray, memoryview)):
            return bytes(password)
        raise TypeError(f"Unsupported password type: {type(password)!r}")

    @staticmethod
    def _coerce_buffer(data, label: str) -> bytes:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"{label} must be bytes, not {type(data).__name__}")
        return bytes(data)

    @staticmethod
    def _check_key(key) -> bytes:
        key = pwcrypt._coerce_buffer(key, "key")
        if len(key) != pwcrypt.KEY_LEN:
            raise pwcrypt.CryptoFatalError(
                f"AES-256 requires a {pwcrypt.KEY_LEN}-byte key, got {len(key)} bytes"
            )
        return key

    @staticmethod
    def derive_key(
        password: "pwcrypt.typing.Union[str, bytes, bytearray, memoryview]"
    ) -> bytes:
        """Derive the 32-byte AES key for ``password``.

        PBKDF2-HMAC-SHA1 over the fixed salt, so the same password always
        yields the same key. Empty passwords are not rejected here; the file
        layer and the CLI refuse them before calling.
        """
        pw = pwcrypt._coerce_password_bytes(password)
        try:
            kdf = pwcrypt.PBKDF2HMAC(
                algorithm=pwcrypt.hashes.SHA1(),
                length=pwcrypt.KEY_LEN,
                salt=pwcrypt.KDF_SALT,
                iterations=pwcrypt.KDF_ITERATIONS
            )
            key = kdf.derive(pw)
        except pwcrypt._CRYPTO_LIBRARY_ERRORS + (ValueError,) as exc:
            raise pwcrypt.CryptoFatalError(f"key derivation failed: {exc}") from exc
        if len(key) != pwcrypt.KEY_LEN:
            raise pwcrypt.CryptoFatalError("key derivation returned a short key")
        return key

    @staticmethod
    def encrypt_bytes(
        plaintext: bytes,
        key: bytes,
        *,
        reporter: "pwcrypt.typing.Optional[pwcrypt._Reporter]" = None
    ) -> bytes:
        """Encrypt ``plaintext`` under ``key`` and return ``IV || ciphertext``.

        A fresh IV is drawn from ``os.urandom`` on every call. PKCS#7 always
        adds padding, so the ciphertext part is at least one block even for
        empty input.
        """
        data = pwcrypt._coerce_buffer(plaintext, "plaintext")
        key = pwcrypt._check_key(key)
        try:
            iv = pwcrypt.os.urandom(pwcrypt.IV_LEN)
        except (OSError, NotImplementedError) as exc:
            raise pwcrypt.CryptoFatalError(f"secure random source unavailable: {exc}") from exc
        if reporter is not None:
            reporter.iv("Generated", iv)
        try:
            padder = pwcrypt.padding.PKCS7(pwcrypt.BLOCK_SIZE * 8).padder()
            padded = padder.update(data) + padder.finalize()
            encryptor = pwcrypt.Cipher(
                pwcrypt.algorithms.AES(key),
                pwcrypt.modes.CBC(iv)
            ).encryptor()
            ciphertext = encryptor.update(padded) + encryptor.finalize()
        except pwcrypt._CRYPTO_LIBRARY_ERRORS + (ValueError,) as exc:
            raise pwcrypt.CryptoFatalError(f"encryption failed: {exc}") from exc
        return iv + ciphertext

    @staticmethod
    def decrypt_bytes(
        ciphertext: bytes,
        key: bytes,
        *,
        reporter: "pwcrypt.typing.Optional[pwcrypt._Reporter]" = None
    ) -> bytes:
        """Split the IV off ``ciphertext``, decrypt the rest and unpad it.

        Raises FormatError before touching the cipher when the input cannot
        be an IV plus whole blocks, and IntegrityError when the padding is
        malformed after decryption.
        """
        blob = pwcrypt._coerce_buffer(ciphertext, "ciphertext")
        key = pwcrypt._check_key(key)
        if len(blob) < pwcrypt.IV_LEN:
            raise pwcrypt.FormatError(
                f"input is {len(blob)} bytes, too short to contain a {pwcrypt.IV_LEN}-byte IV"
            )
        iv = blob[:pwcrypt.IV_LEN]
        payload = blob[pwcrypt.IV_LEN:]
        if not payload or len(payload) % pwcrypt.BLOCK_SIZE:
            raise pwcrypt.FormatError(
                f"encrypted payload is {len(payload)} bytes, expected a positive "
                f"multiple of {pwcrypt.BLOCK_SIZE}"
            )
        if reporter is not None:
            reporter.iv("Extracted", iv)
        try:
            decryptor = pwcrypt.Cipher(
                pwcrypt.algorithms.AES(key),
                pwcrypt.modes.CBC(iv)
            ).decryptor()
            padded = decryptor.update(payload) + decryptor.finalize()
        except pwcrypt._CRYPTO_LIBRARY_ERRORS + (ValueError,) as exc:
            raise pwcrypt.CryptoFatalError(f"decryption failed: {exc}") from exc
        unpadder = pwcrypt.padding.PKCS7(pwcrypt.BLOCK_SIZE * 8).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            raise pwcrypt.IntegrityError(
                "padding check failed; wrong password or corrupted ciphertext"
            ) from exc

    @staticmethod
    def _normalize_path(path_like: "pwcrypt.typing.Union[str, pwcrypt.pathlib.Path]") -> "pwcrypt.pathlib.Path":
        if isinstance(path_like, pwcrypt.pathlib.Path):
            path = path_like
        else:
            path = pwcrypt.pathlib.Path(str(path_like))
        path = path.expanduser()
        try:
            return path.resolve(strict=False)
        except OSError:
            return path

    @staticmethod
    def _ensure_existing_file(path: "pwcrypt.pathlib.Path") -> None:
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(2, "No such file", str(path))

    @staticmethod
    def _ensure_size_limit(path: "pwcrypt.pathlib.Path", max_bytes: int = None) -> None:
        limit = max_bytes or pwcrypt.MAX_INPUT_BYTES
        size = path.stat().st_size
        if size > limit:
            human_size = pwcrypt._human_readable_size(size)
            human_limit = pwcrypt._human_readable_size(limit)
            raise ValueError(
                f"{path.name} is {human_size}, exceeding the {human_limit} input limit"
            )

    @staticmethod
    def _read_input(path: "pwcrypt.pathlib.Path") -> bytes:
        pwcrypt._ensure_existing_file(path)
        pwcrypt._ensure_size_limit(path)
        with open(path, "rb") as handle:
            return handle.read()

    @staticmethod
    def _write_output(path: "pwcrypt.pathlib.Path", data: bytes) -> None:
        # The target is replaced only after the sibling temp file holds the full output.
        tmp_path = None
        try:
            with pwcrypt.tempfile.NamedTemporaryFile(
                'w+b', dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as handle:
                tmp_path = handle.name
                handle.write(data)
                handle.flush()
                pwcrypt.os.fsync(handle.fileno())
            if path.exists():
                pwcrypt.shutil.copymode(path, tmp_path)
            pwcrypt.os.replace(tmp_path, path)
            tmp_path = None
        except OSError as exc:
            raise OSError(exc.errno, exc.strerror or str(exc), str(path)) from exc
        finally:
            if tmp_path is not None:
                try:
                    pwcrypt.os.remove(tmp_path)
                except FileNotFoundError:
                    pass

    @staticmethod
    def _transform_file(
        input_path,
        output_path,
        password: str,
        *,
        decrypt: bool,
        reporter: "pwcrypt.typing.Optional[pwcrypt._Reporter]" = None
    ) -> "pwcrypt.pathlib.Path":
        if not password:
            raise pwcrypt.UsageError("Password required")
        src = pwcrypt._normalize_path(input_path)
        dst = pwcrypt._normalize_path(output_path)
        data = pwcrypt._read_input(src)
        key = pwcrypt.derive_key(password)
        if decrypt:
            result = pwcrypt.decrypt_bytes(data, key, reporter=reporter)
        else:
            result = pwcrypt.encrypt_bytes(data, key, reporter=reporter)
        if src == dst:
            pwcrypt.warnings.warn(
                f"{src.name}: output path is the input path; rewriting it in place",
                RuntimeWarning,
                stacklevel=3
            )
        pwcrypt._write_output(dst, result)
        return dst

    @staticmethod
    def encrypt_file(
        input_path,
        output_path,
        password: str,
        *,
        reporter: "pwcrypt.typing.Optional[pwcrypt._Reporter]" = None
    ) -> "pwcrypt.pathlib.Path":
        """Encrypt ``input_path`` into ``output_path`` (``IV || ciphertext``)."""
        return pwcrypt._transform_file(
            input_path, output_path, password, decrypt=False, reporter=reporter
        )

    @staticmethod
    def decrypt_file(
        input_path,
        output_path,
        password: str,
        *,
        reporter: "pwcrypt.typing.Optional[pwcrypt._Reporter]" = None
    ) -> "pwcrypt.pathlib.Path":
        """Decrypt a file written by ``encrypt_file``.

        Nothing is written to ``output_path`` when the input is malformed or
        the padding check fails.
        """
        return pwcrypt._transform_file(
            input_path, output_path, password, decrypt=True, reporter=reporter
        )

    @staticmethod
    def process_file(
        input_path,
        output_path,
        password: str,
        decrypt: bool = False,
        silent: bool = False
    ) -> str:
        reporter = pwcrypt._Reporter(quiet=True if silent else None)
        try:
            if decrypt:
                pwcrypt.decrypt_file(input_path, output_path, password, reporter=reporter)
            else:
                pwcrypt.encrypt_file(input_path, output_path, password, reporter=reporter)
        except (ValueError, OSError) as exc:
            if not silent:
                reporter.failure(exc)
            return "FAIL!"
        return "SUCCESS!"


def cli(argv=None) -> int:
    import argparse

    class _ArgumentParser(argparse.ArgumentParser):
        def error(self, message):
            raise pwcrypt.UsageError(message)

    parser = _ArgumentParser(
        prog="pwcrypt",
        description="Encrypt or decrypt a file with AES-256-CBC and a password-derived key"
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-e", "--encrypt",
        dest="mode",
        action="store_const",
        const="encrypt",
        help="Encrypt the input file"
    )
    mode.add_argument(
        "-d", "--decrypt",
        dest="mode",
        action="store_const",
        const="decrypt",
        help="Decrypt the input file"
    )
    parser.add_argument(
        "-i", "--input",
        dest="input_path",
        required=True,
        help="Input file path"
    )
    parser.add_argument(
        "-o", "--output",
        dest="output_path",
        required=True,
        help="Output file path"
    )
    parser.add_argument(
        "-p", "--password",
        required=True,
        help="Password the key is derived from"
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not print the IV or the completion message"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {pwcrypt.ENGINE_VERSION}"
    )

    reporter = pwcrypt._Reporter()
    try:
        args = parser.parse_args(argv)
        if not args.input_path or not args.output_path:
            raise pwcrypt.UsageError("input and output paths must not be empty")
        if not args.password:
            raise pwcrypt.UsageError("password must not be empty")
    except pwcrypt.UsageError as exc:
        reporter.failure(exc)
        reporter.usage(parser.prog)
        return 1

    if args.quiet:
        reporter.quiet = True
    # argv bytes that are not valid UTF-8 arrive as surrogate escapes; undo that.
    password = pwcrypt.os.fsencode(args.password)
    operation = "encryption" if args.mode == "encrypt" else "decryption"
    try:
        if args.mode == "encrypt":
            pwcrypt.encrypt_file(args.input_path, args.output_path, password, reporter=reporter)
        else:
            pwcrypt.decrypt_file(args.input_path, args.output_path, password, reporter=reporter)
    except (pwcrypt.CryptoFatalError, ValueError, OSError) as exc:
        reporter.failure(exc)
        return 1

    reporter.success(operation)
    return 0


def main(argv=None) -> int:
    return cli(argv)


__all__ = ["pwcrypt", "cli", "main"]


if __name__ == "__main__":
    raise SystemExit(main())
