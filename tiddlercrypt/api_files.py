"""File-oriented convenience wrappers."""

from .main import tiddlercrypt


def encrypt_file(
    path: str,
    name: str,
    password,
    output: str | None = None,
    silent: bool = False,
):
    return tiddlercrypt.transform_file(
        path,
        "encrypt",
        name,
        password,
        output=output,
        silent=silent,
    )


def decrypt_file(
    path: str,
    name: str,
    password,
    output: str | None = None,
    silent: bool = False,
):
    return tiddlercrypt.transform_file(
        path,
        "decrypt",
        name,
        password,
        output=output,
        silent=silent,
    )


def transform_file(
    path: str,
    action: str,
    name: str,
    password,
    output: str | None = None,
    silent: bool = False,
):
    return tiddlercrypt.transform_file(
        path,
        action,
        name,
        password,
        output=output,
        silent=silent,
    )


__all__ = ["decrypt_file", "encrypt_file", "transform_file"]
