"""
Global constants and defaults.

This module is responsible for:
- Defining the default passphrase and output suffixes
- Defining the ciphertext format parameters

Nothing in this file should depend on:
- the filesystem
- CLI arguments

If something here changes, previously written ciphertext may no
longer decrypt.
"""

from __future__ import annotations

from typing import Final

# ---------------------------------------------------------------------------
# Tool versioning
# ---------------------------------------------------------------------------

TOOL_VERSION: Final[str] = "0.1.0"

# ---------------------------------------------------------------------------
# Default behavior
# ---------------------------------------------------------------------------

DEFAULT_KEY: Final[str] = "mySecretKey"
ENCRYPTED_SUFFIX: Final[str] = ".enc"
DECRYPTED_SUFFIX: Final[str] = ".txt"
TEXT_ENCODING: Final[str] = "utf-8"

# ---------------------------------------------------------------------------
# Ciphertext format (OpenSSL "Salted__" / EVP_BytesToKey, AES-256-CBC)
# ---------------------------------------------------------------------------

SALT_HEADER: Final[bytes] = b"Salted__"
SALT_SIZE: Final[int] = 8
AES_KEY_SIZE: Final[int] = 32
AES_IV_SIZE: Final[int] = 16
