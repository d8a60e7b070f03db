"""
TIDDLERCRYPT - password protection for a single tiddler

This module provides easy-to-use functions for encrypting and decrypting the
content of one tiddler inside a TiddlyWiki-style document. Everything outside
that tiddler is left byte-for-byte unchanged.
"""

from .main import *
from .errors import (
    ChecksumMismatchError,
    FormatError,
    HexDecodeError,
    InvalidOperationError,
    MissingTagError,
    PasswordUnavailableError,
    StructuralFormatError,
    TiddlerCryptError,
)
from .version import __version__

# ============================================================================
# TEXT FUNCTIONS (String → Encrypted String)
# ============================================================================

def tea_encrypt(plaintext: str, password: str):
    """
    Encrypt text with TEA into an escaped ciphertext string.

    Args:
        plaintext: Text to encrypt (any Unicode)
        password: Password; only the first 16 UTF-16 code units form the key

    Returns:
        Ciphertext as a string of single-byte characters with control
        characters escaped as !<code>!

    Note:
        - Empty input returns an empty string
        - No integrity check; use encrypt_content() for checksummed blocks
    """
    return tiddlercrypt.TEAencrypt(plaintext, password)


def tea_decrypt(ciphertext: str, password: str):
    """
    Decrypt an escaped TEA ciphertext string produced by tea_encrypt().

    Args:
        ciphertext: Escaped ciphertext
        password: Password used for encryption

    Returns:
        Recovered text (garbage for a wrong password unless percent-decoding fails)
    """
    return tiddlercrypt.TEAdecrypt(ciphertext, password)


def encrypt_content(plaintext: str, password: str):
    """
    Build the Encrypted(<SHA1>) content block stored inside a tiddler.

    Args:
        plaintext: Tiddler text; surrounding whitespace is trimmed
        password: Password; only the first 16 UTF-16 code units form the key

    Returns:
        "Encrypted(<40 uppercase hex>)" + newline + 64-column hex blob
    """
    return tiddlercrypt.encrypt_content(plaintext, password)


def decrypt_content(content: str, password: str):
    """
    Decrypt an Encrypted(<SHA1>) content block and verify its checksum.

    Args:
        content: Content block produced by encrypt_content()
        password: Password used for encryption

    Returns:
        Original trimmed plaintext

    Raises:
        FormatError: Content is not an Encrypted(...) block
        HexDecodeError: Hex payload is malformed
        ChecksumMismatchError: Wrong password or corrupted ciphertext
    """
    return tiddlercrypt.decrypt_content(content, password)


# ============================================================================
# DOCUMENT FUNCTIONS (Document → Document)
# ============================================================================

def encrypt_document(text: str, name: str, password):
    """
    Encrypt the tiddler tagged Encrypt(name) and retag it Decrypt(name).

    Args:
        text: Whole document text
        name: Name inside the Encrypt(...) tag
        password: Password string, or a zero-argument callable returning one

    Returns:
        New document text
    """
    return tiddlercrypt.transform_document(text, "encrypt", name, password)


def decrypt_document(text: str, name: str, password):
    """
    Decrypt the tiddler tagged Decrypt(name) and retag it Encrypt(name).

    Args:
        text: Whole document text
        name: Name inside the Decrypt(...) tag
        password: Password string, or a zero-argument callable returning one

    Returns:
        New document text
    """
    return tiddlercrypt.transform_document(text, "decrypt", name, password)


# ============================================================================
# FILE FUNCTIONS
# ============================================================================

from .api_files import decrypt_file, encrypt_file, transform_file
