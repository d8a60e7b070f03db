"""String/content-block convenience wrappers."""

from .main import tiddlercrypt


def tea_encrypt(plaintext: str, password: str):
    return tiddlercrypt.TEAencrypt(plaintext, password)


def tea_decrypt(ciphertext: str, password: str):
    return tiddlercrypt.TEAdecrypt(ciphertext, password)


def encrypt_content(plaintext: str, password: str):
    return tiddlercrypt.encrypt_content(plaintext, password)


def decrypt_content(content: str, password: str):
    return tiddlercrypt.decrypt_content(content, password)


def hex_sha1(text: str):
    return tiddlercrypt.hex_sha1(text)


def encrypt_document(text: str, name: str, password):
    return tiddlercrypt.transform_document(text, "encrypt", name, password)


def decrypt_document(text: str, name: str, password):
    return tiddlercrypt.transform_document(text, "decrypt", name, password)


__all__ = [
    "decrypt_content",
    "decrypt_document",
    "encrypt_content",
    "encrypt_document",
    "hex_sha1",
    "tea_decrypt",
    "tea_encrypt",
]
