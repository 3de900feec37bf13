"""
filecipher

Encrypt or decrypt a single text file with a passphrase, using the
OpenSSL-compatible salted AES-256-CBC text format.
"""

__version__ = "0.1.0"

from .config import DEFAULT_KEY
from .transformer import (
    Transformer,
    encrypt_text,
    decrypt_text,
    encrypt_file,
    decrypt_file,
)
from .utils import read_text, write_text

__all__ = [
    "DEFAULT_KEY",
    "Transformer",
    "encrypt_text",
    "decrypt_text",
    "encrypt_file",
    "decrypt_file",
    "read_text",
    "write_text",
]
