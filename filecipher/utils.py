"""
Shared utility helpers.

This module contains the whole-file text I/O used by the transformer
and the passphrase key derivation. Nothing here knows about CLI
arguments or output path defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Tuple

from Crypto.Hash import MD5

from .config import TEXT_ENCODING


# ---------------------------------------------------------------------------
# Key derivation
# ---------------------------------------------------------------------------


def evp_bytes_to_key(passphrase: bytes, salt: bytes, key_len: int, iv_len: int) -> Tuple[bytes, bytes]:
    """
    Derive a key and IV the way OpenSSL's EVP_BytesToKey does
    (MD5, one iteration).
    """
    derived = b""
    block = b""
    while len(derived) < key_len + iv_len:
        block = MD5.new(block + passphrase + salt).digest()
        derived += block
    return derived[:key_len], derived[key_len:key_len + iv_len]


# ---------------------------------------------------------------------------
# Byte helpers
# ---------------------------------------------------------------------------


def strip_padding(data: bytes) -> bytes:
    """
    Drop PKCS#7 padding without validating it.

    The pad length is taken from the last byte as-is, so a wrong key
    yields garbage (or nothing) rather than an error.
    """
    if not data:
        return data
    return data[: max(len(data) - data[-1], 0)]


# ---------------------------------------------------------------------------
# Filesystem helpers
# ---------------------------------------------------------------------------


def read_text(path: str | Path) -> str:
    """
    Read a whole file as UTF-8 text, keeping newlines untouched.

    Undecodable bytes become U+FFFD instead of failing the read.
    """
    with Path(path).open("r", encoding=TEXT_ENCODING, errors="replace", newline="") as fh:
        return fh.read()


def write_text(path: str | Path, content: str) -> None:
    """Create or overwrite a file with the given text."""
    with Path(path).open("w", encoding=TEXT_ENCODING, newline="") as fh:
        fh.write(content)
