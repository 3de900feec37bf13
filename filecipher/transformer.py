"""
Content transformation: passphrase encryption and decryption.

Ciphertext is the OpenSSL-compatible text blob:

    base64( b"Salted__" + salt(8) + AES-256-CBC(PKCS#7(plaintext)) )

with the key and IV derived from the passphrase and salt by
EVP_BytesToKey. The salt travels inside the blob, so decryption only
needs the passphrase.

No integrity check is applied. Decrypting with the wrong passphrase
returns garbled (possibly empty) text instead of raising.

This module is intentionally dumb about CLI arguments and output
path defaults.
"""

from __future__ import annotations

import base64
from pathlib import Path
from typing import Callable, Optional

from Crypto.Cipher import AES
from Crypto.Random import get_random_bytes
from Crypto.Util.Padding import pad

from .config import (
    AES_IV_SIZE,
    AES_KEY_SIZE,
    SALT_HEADER,
    SALT_SIZE,
    TEXT_ENCODING,
)
from .utils import evp_bytes_to_key, read_text, strip_padding, write_text


class Transformer:
    def __init__(self, key: str):
        self.key = key

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt text under a fresh random salt.
        Returns the base64 ciphertext blob.
        """

        salt = get_random_bytes(SALT_SIZE)
        cipher = self._cipher(salt)
        ciphertext = cipher.encrypt(pad(plaintext.encode(TEXT_ENCODING), AES.block_size))

        return base64.b64encode(SALT_HEADER + salt + ciphertext).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        """
        Reverse encrypt() for the same key.

        Raises:
            ValueError: if the blob is not valid base64, lacks the salt
                header, or is not a whole number of AES blocks
        """

        raw = base64.b64decode(ciphertext)

        if not raw.startswith(SALT_HEADER):
            raise ValueError("Ciphertext is missing the salt header")

        salt = raw[len(SALT_HEADER):len(SALT_HEADER) + SALT_SIZE]
        body = raw[len(SALT_HEADER) + SALT_SIZE:]

        if len(salt) != SALT_SIZE or len(body) % AES.block_size:
            raise ValueError("Ciphertext is truncated")

        payload = strip_padding(self._cipher(salt).decrypt(body))

        return payload.decode(TEXT_ENCODING, errors="replace")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _cipher(self, salt: bytes):
        key, iv = evp_bytes_to_key(
            self.key.encode(TEXT_ENCODING), salt, AES_KEY_SIZE, AES_IV_SIZE
        )
        return AES.new(key, AES.MODE_CBC, iv=iv)


# ---------------------------------------------------------------------------
# Convenience functions
# ---------------------------------------------------------------------------


def encrypt_text(plaintext: str, key: str) -> str:
    return Transformer(key).encrypt(plaintext)


def decrypt_text(ciphertext: str, key: str) -> str:
    return Transformer(key).decrypt(ciphertext)


def _transform_file(
    transform: Callable[[str], str],
    input_path: str | Path,
    output_path: str | Path,
    log: Optional[Callable[[str], None]] = None,
) -> None:
    log = log or (lambda msg: None)

    log(f"Reading {input_path}")
    content = read_text(input_path)

    log("Transforming content")
    result = transform(content)

    log(f"Writing {output_path}")
    write_text(output_path, result)


def encrypt_file(
    input_path: str | Path,
    key: str,
    output_path: str | Path,
    log: Optional[Callable[[str], None]] = None,
) -> None:
    """
    Read a text file, encrypt it and write the blob to output_path.

    Args:
        log: optional callback receiving one message per step
    """
    _transform_file(Transformer(key).encrypt, input_path, output_path, log)


def decrypt_file(
    input_path: str | Path,
    key: str,
    output_path: str | Path,
    log: Optional[Callable[[str], None]] = None,
) -> None:
    """Read a ciphertext blob, decrypt it and write the text to output_path."""
    _transform_file(Transformer(key).decrypt, input_path, output_path, log)
