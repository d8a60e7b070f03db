"""
Exception types raised by tiddlercrypt.

Every failure aborts the whole operation before anything is written, so the
CLI can print the message and exit without touching the document.
"""

from __future__ import annotations


class TiddlerCryptError(ValueError):
    """Base class for every classified tiddlercrypt failure."""


class StructuralFormatError(TiddlerCryptError):
    """Raised when the document or the encrypted content has the wrong shape."""


FormatError = StructuralFormatError


class HexDecodeError(StructuralFormatError):
    """Raised when the hex payload has odd length or non-hex characters."""


class MissingTagError(TiddlerCryptError):
    """Raised when the tiddler lacks the Encrypt(name)/Decrypt(name) tag."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Tiddler does not have the tag '{tag}'.")
        self.tag = tag


class ChecksumMismatchError(TiddlerCryptError):
    """Raised when the decrypted text does not match its embedded SHA-1."""


class InvalidOperationError(TiddlerCryptError):
    def __init__(self, action: str) -> None:
        super().__init__(f"Invalid action '{action}'. Use \"encrypt\" or \"decrypt\".")
        self.action = action


class PasswordUnavailableError(TiddlerCryptError):
    """Raised when no password could be obtained for the operation."""


__all__ = [
    "ChecksumMismatchError",
    "FormatError",
    "HexDecodeError",
    "InvalidOperationError",
    "MissingTagError",
    "PasswordUnavailableError",
    "StructuralFormatError",
    "TiddlerCryptError",
]
