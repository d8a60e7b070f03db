# TIDDLERCRYPT ENCRYPTION ENGINE ->

import os as _os_module
import re as _re_module
import warnings as _warnings_module

from .document import TiddlerDocument
from .errors import (
    ChecksumMismatchError,
    InvalidOperationError,
    MissingTagError,
    PasswordUnavailableError,
    StructuralFormatError,
    HexDecodeError,
    TiddlerCryptError,
)


class tiddlercrypt:
    import enum
    import getpass
    import hmac as stdlib_hmac
    import pathlib
    import stat
    import sys
    import tempfile
    import typing
    import urllib.parse
    re = _re_module
    import numpy as np
    from cryptography.hazmat.primitives import hashes

    ENGINE_VERSION = "1.0.0"

    # TEA
    DELTA = 0x9E3779B9
    MASK32 = 0xFFFFFFFF
    KEY_CHARS = 16
    KEY_WORDS = 4
    MIN_WORDS = 2

    # Wire format
    HEX_LINE_WIDTH = 64
    ENCRYPTED_HEADER = "Encrypted({checksum})"
    # encodeURIComponent leaves these unescaped besides alphanumerics
    URI_SAFE = "-_.!~*'()"
    _CTRL_PATTERN = _re_module.compile("[\x00\t\n\x0b\x0c\r\xa0'\"!]")
    _UNESC_PATTERN = _re_module.compile(r"![0-9][0-9]?[0-9]?!")
    _WHITESPACE_PATTERN = _re_module.compile(r"\s+")
    _HEX_PATTERN = _re_module.compile(r"[0-9a-fA-F]*")
    _ENCRYPTED_PATTERN = _re_module.compile(r"Encrypted\(([^\n]*?)\)(?:\n([\s\S]*))?\Z")

    ACTIONS = ("encrypt", "decrypt")

    class TransformState(enum.Enum):
        IDLE = "idle"
        TAG_VALIDATED = "tag-validated"
        TRANSFORMED = "transformed"
        CHECKSUM_VERIFIED = "checksum-verified"
        SPLICED = "spliced"
        DONE = "done"
        FAILED = "failed"

    class TransformResult(typing.NamedTuple):
        tags: tuple
        content: str
        state: "tiddlercrypt.TransformState"

    @staticmethod
    def _env_flag(name: str) -> bool:
        value = _os_module.getenv(name)
        if not value:
            return False
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}

    @staticmethod
    def _trace(
            op: str,
            state: "tiddlercrypt.TransformState",
            silent: bool = False,
            **fields
    ) -> "tiddlercrypt.TransformState":
        if silent or not tiddlercrypt._env_flag("TIDDLERCRYPT_TRACE"):
            return state
        detail = "".join(f" {key}={value}" for key, value in fields.items())
        print(f"[tiddlercrypt.trace] op={op} state={state.value}{detail}", file=tiddlercrypt.sys.stderr)
        return state

    @staticmethod
    def _warn(message: str) -> None:
        _warnings_module.warn(message, RuntimeWarning, stacklevel=3)

    # WORD PACKING
    @staticmethod
    def str_to_longs(data: "tiddlercrypt.typing.Union[str, bytes, bytearray]") -> "list[int]":
        """Pack bytes (or character codes) into little-endian 32-bit words.

        A short tail is zero-extended and at least two words are returned.
        Text outside Latin-1 is packed by UTF-16 code unit.
        """
        if isinstance(data, str):
            try:
                data = data.encode("latin-1")
            except UnicodeEncodeError:
                return tiddlercrypt._pack_units(tiddlercrypt._utf16_units(data))
        raw = bytes(data)
        raw += b"\0" * (-len(raw) % 4)
        words = tiddlercrypt.np.frombuffer(raw, dtype="<u4").tolist()
        if len(words) < tiddlercrypt.MIN_WORDS:
            words.extend([0] * (tiddlercrypt.MIN_WORDS - len(words)))
        return words

    @staticmethod
    def _utf16_units(text: str) -> "tiddlercrypt.np.ndarray":
        return tiddlercrypt.np.frombuffer(text.encode("utf-16-le", "surrogatepass"), dtype="<u2")

    @staticmethod
    def _pack_units(units: "tiddlercrypt.np.ndarray") -> "list[int]":
        # Units above 0xFF overlap the next byte lane; the sum wraps at 2^32.
        np = tiddlercrypt.np
        units = units.astype(np.uint64)
        units = np.concatenate([units, np.zeros(-len(units) % 4, dtype=np.uint64)])
        lanes = units.reshape(-1, 4) << np.array([0, 8, 16, 24], dtype=np.uint64)
        words = (lanes.sum(axis=1) & np.uint64(tiddlercrypt.MASK32)).tolist()
        if len(words) < tiddlercrypt.MIN_WORDS:
            words.extend([0] * (tiddlercrypt.MIN_WORDS - len(words)))
        return words

    @staticmethod
    def longs_to_str(words: "tiddlercrypt.typing.Sequence[int]") -> bytes:
        return tiddlercrypt.np.asarray(list(words), dtype="<u4").tobytes()

    # CONTROL CHARACTER ESCAPING
    @staticmethod
    def esc_ctrl_ch(text: str) -> str:
        return tiddlercrypt._CTRL_PATTERN.sub(lambda m: f"!{ord(m.group(0))}!", text)

    @staticmethod
    def unesc_ctrl_ch(text: str) -> str:
        return tiddlercrypt._UNESC_PATTERN.sub(lambda m: chr(int(m.group(0)[1:-1])), text)

    # TEA BLOCK CIPHER
    @staticmethod
    def password_key(password: "tiddlercrypt.typing.Union[str, bytes]") -> "list[int]":
        """Only the first 16 UTF-16 code units of the password form the 128-bit key.

        Characters outside the Basic Multilingual Plane count as two units, so
        an emoji straddling the limit is cut after its high surrogate.
        """
        if isinstance(password, (bytes, bytearray, memoryview)):
            password = bytes(password).decode("utf-8")
        units = tiddlercrypt._utf16_units(password)
        if units.size == 0:
            tiddlercrypt._warn("Empty password: the TEA key is all zero words")
            return [0] * tiddlercrypt.KEY_WORDS
        if units.size > tiddlercrypt.KEY_CHARS:
            tiddlercrypt._warn(
                f"Password is longer than {tiddlercrypt.KEY_CHARS} characters; only the first "
                f"{tiddlercrypt.KEY_CHARS} are used"
            )
        words = tiddlercrypt._pack_units(units[:tiddlercrypt.KEY_CHARS])
        words.extend([0] * tiddlercrypt.KEY_WORDS)
        return words[:tiddlercrypt.KEY_WORDS]

    @staticmethod
    def _mx(total: int, y: int, z: int, p: int, e: int, key: "tiddlercrypt.typing.Sequence[int]") -> int:
        mask = tiddlercrypt.MASK32
        left = ((z >> 5) ^ ((y << 2) & mask)) + ((y >> 3) ^ ((z << 4) & mask))
        right = (total ^ y) + (key[(p ^ e) & 3] ^ z)
        return (left ^ right) & mask

    @staticmethod
    def _rounds(n: int) -> int:
        return 6 + 52 // n

    @staticmethod
    def tea_encrypt_longs(words: "tiddlercrypt.typing.Sequence[int]", key: "tiddlercrypt.typing.Sequence[int]") -> "list[int]":
        v = list(words)
        if not v:
            return v
        if len(v) < tiddlercrypt.MIN_WORDS:
            v.extend([0] * (tiddlercrypt.MIN_WORDS - len(v)))
        n = len(v)
        mask = tiddlercrypt.MASK32
        mx = tiddlercrypt._mx
        z = v[n - 1]
        total = 0
        for _ in range(tiddlercrypt._rounds(n)):
            total = (total + tiddlercrypt.DELTA) & mask
            e = (total >> 2) & 3
            for p in range(n):
                y = v[(p + 1) % n]
                v[p] = (v[p] + mx(total, y, z, p, e, key)) & mask
                z = v[p]
        return v

    @staticmethod
    def tea_decrypt_longs(words: "tiddlercrypt.typing.Sequence[int]", key: "tiddlercrypt.typing.Sequence[int]") -> "list[int]":
        v = list(words)
        if not v:
            return v
        if len(v) < tiddlercrypt.MIN_WORDS:
            v.extend([0] * (tiddlercrypt.MIN_WORDS - len(v)))
        n = len(v)
        mask = tiddlercrypt.MASK32
        mx = tiddlercrypt._mx
        rounds = tiddlercrypt._rounds(n)
        y = v[0]
        total = (rounds * tiddlercrypt.DELTA) & mask
        # Count passes instead of testing total != 0: the masked sum may hit zero early.
        for _ in range(rounds):
            e = (total >> 2) & 3
            for p in range(n - 1, -1, -1):
                z = v[p - 1] if p > 0 else v[n - 1]
                v[p] = (v[p] - mx(total, y, z, p, e, key)) & mask
                y = v[p]
            total = (total - tiddlercrypt.DELTA) & mask
        return v

    @staticmethod
    def _uri_encode(text: str) -> str:
        return tiddlercrypt.urllib.parse.quote(text, safe=tiddlercrypt.URI_SAFE).replace("%20", " ")

    @staticmethod
    def _uri_decode(raw: bytes) -> str:
        return tiddlercrypt.urllib.parse.unquote(raw.decode("latin-1"), encoding="utf-8", errors="strict")

    @staticmethod
    def TEAencrypt(plaintext: str, password: "tiddlercrypt.typing.Union[str, bytes]") -> str:
        """Encrypt text into its escaped single-byte ciphertext string."""
        if len(plaintext) == 0:
            return ""
        v = tiddlercrypt.str_to_longs(tiddlercrypt._uri_encode(plaintext))
        k = tiddlercrypt.password_key(password)
        ciphertext = tiddlercrypt.longs_to_str(tiddlercrypt.tea_encrypt_longs(v, k))
        return tiddlercrypt.esc_ctrl_ch(ciphertext.decode("latin-1"))

    @staticmethod
    def TEAdecrypt(ciphertext: str, password: "tiddlercrypt.typing.Union[str, bytes]") -> str:
        if len(ciphertext) == 0:
            return ""
        v = tiddlercrypt.str_to_longs(tiddlercrypt.unesc_ctrl_ch(ciphertext))
        k = tiddlercrypt.password_key(password)
        plain = tiddlercrypt.longs_to_str(tiddlercrypt.tea_decrypt_longs(v, k)).rstrip(b"\0")
        try:
            return tiddlercrypt._uri_decode(plain)
        except UnicodeDecodeError as exc:
            raise ChecksumMismatchError("Checksum mismatch. Decryption failed or wrong password.") from exc

    # HEX
    @staticmethod
    def string_to_hex(data: "tiddlercrypt.typing.Union[str, bytes]") -> str:
        if isinstance(data, str):
            data = data.encode("latin-1")
        hexed = bytes(data).hex()
        width = tiddlercrypt.HEX_LINE_WIDTH
        return "\n".join(hexed[i:i + width] for i in range(0, len(hexed), width))

    @staticmethod
    def hex_to_string(blob: str) -> bytes:
        sanitized = tiddlercrypt._WHITESPACE_PATTERN.sub("", blob)
        if len(sanitized) % 2:
            raise HexDecodeError(
                f"Encrypted payload has an odd number of hex digits ({len(sanitized)})."
            )
        if tiddlercrypt._HEX_PATTERN.fullmatch(sanitized) is None:
            raise HexDecodeError("Encrypted payload contains non-hex characters.")
        return bytes.fromhex(sanitized)

    # CHECKSUM
    @staticmethod
    def hex_sha1(text: "tiddlercrypt.typing.Union[str, bytes]") -> str:
        if isinstance(text, str):
            text = text.encode("utf-8")
        digest = tiddlercrypt.hashes.Hash(tiddlercrypt.hashes.SHA1())
        digest.update(bytes(text))
        return digest.finalize().hex().upper()

    # CONTENT BLOCKS
    @staticmethod
    def encrypt_content(plaintext: str, password: "tiddlercrypt.typing.Union[str, bytes]") -> str:
        original = plaintext.strip()
        checksum = tiddlercrypt.hex_sha1(original)
        hex_text = tiddlercrypt.string_to_hex(tiddlercrypt.TEAencrypt(original, password))
        return tiddlercrypt.ENCRYPTED_HEADER.format(checksum=checksum) + "\n" + hex_text

    @staticmethod
    def parse_content(content: str) -> "tuple[str, str]":
        match = tiddlercrypt._ENCRYPTED_PATTERN.match(content.strip())
        if match is None:
            raise StructuralFormatError("Encrypted content is not in the expected format.")
        return match.group(1), match.group(2) or ""

    @staticmethod
    def decrypt_content(content: str, password: "tiddlercrypt.typing.Union[str, bytes]") -> str:
        checksum, hex_text = tiddlercrypt.parse_content(content)
        ciphertext = tiddlercrypt.hex_to_string(hex_text).decode("latin-1")
        plaintext = tiddlercrypt.TEAdecrypt(ciphertext, password)
        actual = tiddlercrypt.hex_sha1(plaintext)
        if not tiddlercrypt.stdlib_hmac.compare_digest(checksum.encode("utf-8"), actual.encode("utf-8")):
            raise ChecksumMismatchError("Checksum mismatch. Decryption failed or wrong password.")
        return plaintext

    # TIDDLER TRANSFORMS
    @staticmethod
    def encrypt_tag(name: str) -> str:
        return f"Encrypt({name})"

    @staticmethod
    def decrypt_tag(name: str) -> str:
        return f"Decrypt({name})"

    @staticmethod
    def _swap_tag(tags: "tiddlercrypt.typing.Iterable[str]", old: str, new: str) -> tuple:
        return tuple(new if tag == old else tag for tag in tags)

    @staticmethod
    def _obtain_password(password) -> "tiddlercrypt.typing.Union[str, bytes]":
        # A callable defers the prompt until the document has been validated.
        if callable(password):
            password = password()
        if password is None:
            raise PasswordUnavailableError("No password provided.")
        return password

    @staticmethod
    def encrypt_tiddler(tags, content: str, name: str, password, silent: bool = False) -> "tiddlercrypt.TransformResult":
        state = tiddlercrypt.TransformState
        trace = tiddlercrypt._trace
        trace("encrypt", state.IDLE, silent, tiddler=name)
        try:
            encrypt_tag = tiddlercrypt.encrypt_tag(name)
            if encrypt_tag not in tags:
                raise MissingTagError(encrypt_tag)
            trace("encrypt", state.TAG_VALIDATED, silent, tag=encrypt_tag)
            new_content = tiddlercrypt.encrypt_content(content, tiddlercrypt._obtain_password(password))
            trace("encrypt", state.TRANSFORMED, silent, chars=len(new_content))
            new_tags = tiddlercrypt._swap_tag(tags, encrypt_tag, tiddlercrypt.decrypt_tag(name))
        except Exception as exc:
            trace("encrypt", state.FAILED, silent, reason=type(exc).__name__)
            raise
        return tiddlercrypt.TransformResult(new_tags, new_content, state.TRANSFORMED)

    @staticmethod
    def decrypt_tiddler(tags, content: str, name: str, password, silent: bool = False) -> "tiddlercrypt.TransformResult":
        state = tiddlercrypt.TransformState
        trace = tiddlercrypt._trace
        trace("decrypt", state.IDLE, silent, tiddler=name)
        try:
            decrypt_tag = tiddlercrypt.decrypt_tag(name)
            if decrypt_tag not in tags:
                raise MissingTagError(decrypt_tag)
            trace("decrypt", state.TAG_VALIDATED, silent, tag=decrypt_tag)
            # Shape errors surface before the password is requested.
            tiddlercrypt.parse_content(content)
            plaintext = tiddlercrypt.decrypt_content(content, tiddlercrypt._obtain_password(password))
            trace("decrypt", state.TRANSFORMED, silent, chars=len(plaintext))
            trace("decrypt", state.CHECKSUM_VERIFIED, silent)
            new_tags = tiddlercrypt._swap_tag(tags, decrypt_tag, tiddlercrypt.encrypt_tag(name))
        except Exception as exc:
            trace("decrypt", state.FAILED, silent, reason=type(exc).__name__)
            raise
        return tiddlercrypt.TransformResult(new_tags, plaintext, state.CHECKSUM_VERIFIED)

    @staticmethod
    def _splice_ready_state(action: str) -> "tiddlercrypt.TransformState":
        if action == "decrypt":
            return tiddlercrypt.TransformState.CHECKSUM_VERIFIED
        return tiddlercrypt.TransformState.TRANSFORMED

    @staticmethod
    def transform_document(text: str, action: str, name: str, password, silent: bool = False) -> str:
        """Encrypt or decrypt the tiddler in ``text`` and return the new document.

        ``password`` may be a string, bytes or a zero-argument callable; the
        callable is only invoked once the document structure and tag are valid.
        A result is spliced only when it reached its final transform state
        (``TRANSFORMED`` for encrypt, ``CHECKSUM_VERIFIED`` for decrypt).
        """
        if action not in tiddlercrypt.ACTIONS:
            raise InvalidOperationError(str(action))
        document = TiddlerDocument.extract(text)
        if action == "encrypt":
            result = tiddlercrypt.encrypt_tiddler(document.tags, document.content, name, password, silent)
        else:
            result = tiddlercrypt.decrypt_tiddler(document.tags, document.content, name, password, silent)
        expected = tiddlercrypt._splice_ready_state(action)
        if result.state is not expected:
            tiddlercrypt._trace(action, tiddlercrypt.TransformState.FAILED, silent, reason="incomplete")
            raise TiddlerCryptError(
                f"Refusing to write: {action} stopped at state '{result.state.value}' "
                f"instead of '{expected.value}'."
            )
        output = document.splice(result.tags, result.content)
        tiddlercrypt._trace(action, tiddlercrypt.TransformState.SPLICED, silent, tags=len(result.tags))
        tiddlercrypt._trace(action, tiddlercrypt.TransformState.DONE, silent)
        return output

    # FILES & PASSWORDS
    @staticmethod
    def _normalize_path(path_like: "tiddlercrypt.typing.Union[str, tiddlercrypt.pathlib.Path]") -> "tiddlercrypt.pathlib.Path":
        if isinstance(path_like, tiddlercrypt.pathlib.Path):
            path = path_like
        else:
            path = tiddlercrypt.pathlib.Path(str(path_like))
        path = path.expanduser()
        try:
            return path.resolve(strict=False)
        except OSError:
            return path

    @staticmethod
    def _ensure_existing_file(path: "tiddlercrypt.pathlib.Path") -> None:
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")

    @staticmethod
    def read_password_file(path: "tiddlercrypt.typing.Union[str, tiddlercrypt.pathlib.Path]") -> str:
        """Return the first line of ``path`` (empty string for an empty file)."""
        source = tiddlercrypt._normalize_path(path)
        lines = source.read_text(encoding="utf-8").splitlines()
        return lines[0] if lines else ""

    @staticmethod
    def prompt_password(name: str) -> str:
        if tiddlercrypt._env_flag("TIDDLERCRYPT_NONINTERACTIVE"):
            raise PasswordUnavailableError(
                "Password required: pass -p/--password or --password-file when TIDDLERCRYPT_NONINTERACTIVE=1"
            )
        try:
            return tiddlercrypt.getpass.getpass(f"Enter password for '{name}': ")
        except EOFError as exc:
            raise PasswordUnavailableError("Password prompt was closed before a password was entered.") from exc

    @staticmethod
    def _write_atomic(target: "tiddlercrypt.pathlib.Path", text: str) -> None:
        tmp_path = None
        try:
            with tiddlercrypt.tempfile.NamedTemporaryFile(
                    "w",
                    encoding="utf-8",
                    newline="",
                    dir=target.parent,
                    prefix=f".{target.name}.",
                    suffix=".tmp",
                    delete=False
            ) as handle:
                tmp_path = handle.name
                handle.write(text)
            if target.exists():
                _os_module.chmod(tmp_path, tiddlercrypt.stat.S_IMODE(target.stat().st_mode))
            _os_module.replace(tmp_path, target)
        except BaseException:
            if tmp_path is not None:
                tiddlercrypt.pathlib.Path(tmp_path).unlink(missing_ok=True)
            raise

    @staticmethod
    def transform_file(
            path: "tiddlercrypt.typing.Union[str, tiddlercrypt.pathlib.Path]",
            action: str,
            name: str,
            password,
            output: "tiddlercrypt.typing.Optional[tiddlercrypt.typing.Union[str, tiddlercrypt.pathlib.Path]]" = None,
            silent: bool = False
    ) -> "tiddlercrypt.pathlib.Path":
        source = tiddlercrypt._normalize_path(path)
        tiddlercrypt._ensure_existing_file(source)
        target = tiddlercrypt._normalize_path(output) if output else source
        # newline="" keeps CRLF documents byte-identical outside the tiddler.
        with open(source, "r", encoding="utf-8", newline="") as handle:
            text = handle.read()
        new_text = tiddlercrypt.transform_document(text, action, name, password, silent)
        tiddlercrypt._write_atomic(target, new_text)
        return target


def _cli_config_path() -> "tiddlercrypt.pathlib.Path":
    override = _os_module.getenv("TIDDLERCRYPT_CLI_CONFIG")
    if override:
        return tiddlercrypt.pathlib.Path(override).expanduser()
    for env_name in ("XDG_CONFIG_HOME", "APPDATA"):
        base = _os_module.getenv(env_name)
        if base:
            return tiddlercrypt.pathlib.Path(base) / "tiddlercrypt" / "cli.conf"
    return tiddlercrypt.pathlib.Path("~/.config/tiddlercrypt/cli.conf").expanduser()


def _cli_settings() -> "dict[str, str]":
    """Read ``key = value`` lines from the CLI config; ``#`` starts a comment."""
    try:
        text = _cli_config_path().read_text(encoding="utf-8")
    except OSError:
        return {}
    settings = {}
    for line in text.splitlines():
        line = line.split("#", 1)[0]
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        settings[key.strip().lower()] = value.strip().lower()
    return settings


def _cli_plain_mode() -> bool:
    if _os_module.getenv("TIDDLERCRYPT_CLI_PLAIN") or _os_module.getenv("NO_COLOR"):
        return True
    style = (_os_module.getenv("TIDDLERCRYPT_CLI_STYLE") or "").strip().lower()
    if style:
        return style in {"plain", "boring", "0", "false", "off"}
    settings = _cli_settings()
    if settings.get("plain") in {"1", "true", "yes", "on"}:
        return True
    return settings.get("style") == "plain"


class _CliReporter:
    """Status lines for the CLI: results on stdout, cautions and failures on stderr."""

    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"

    def __init__(self, plain: bool):
        self.plain = plain
        if not plain:
            try:
                import colorama
                colorama.just_fix_windows_console()
            except ImportError:
                pass  # Colorama is optional

    def _paint(self, msg: str, color: str, emoji: str) -> str:
        if self.plain:
            return msg
        return f"\033[1m{color}{emoji} {msg}\033[0m"

    def done(self, action: str, path) -> None:
        print(self._paint(f"Successfully {action}ed file: {path}", self.GREEN, "✅"))

    def caution(self, msg: str) -> None:
        print(self._paint(msg, self.YELLOW, "⚠️"), file=tiddlercrypt.sys.stderr)

    def failed(self, msg: str) -> None:
        print(self._paint(msg, self.RED, "❌"), file=tiddlercrypt.sys.stderr)


def _run_command(args, password):
    if args.command == "encrypt-text":
        return tiddlercrypt.encrypt_content(args.text, tiddlercrypt._obtain_password(password))
    if args.command == "decrypt-text":
        return tiddlercrypt.decrypt_content(args.block, tiddlercrypt._obtain_password(password))
    return tiddlercrypt.transform_file(args.file, args.command, args.name, password, output=args.output)


def _add_password_options(sub) -> None:
    group = sub.add_mutually_exclusive_group()
    group.add_argument("-p", "--password", default=None, help="Password text (prompted when omitted)")
    group.add_argument("--password-file", default=None, help="Read the password from the first line of this file")


def cli(argv=None) -> int:
    import argparse

    reporter = _CliReporter(_cli_plain_mode())

    parser = argparse.ArgumentParser(prog="tiddlercrypt", description="Encrypt or decrypt a single tiddler with TEA")
    subparsers = parser.add_subparsers(dest="command", required=True)

    action_help = {
        "encrypt": "Encrypt the tiddler tagged Encrypt(NAME) and retag it Decrypt(NAME)",
        "decrypt": "Decrypt the tiddler tagged Decrypt(NAME) and retag it Encrypt(NAME)",
    }
    for action in tiddlercrypt.ACTIONS:
        sub = subparsers.add_parser(action, help=action_help[action])
        sub.add_argument("file", help="Path of the tiddler document")
        sub.add_argument("name", help="Name used inside the Encrypt(NAME)/Decrypt(NAME) tag")
        _add_password_options(sub)
        sub.add_argument("-o", "--output", default=None, help="Write the result here instead of in place")

    enc_text = subparsers.add_parser("encrypt-text", help="Encrypt text into an Encrypted(...) content block")
    enc_text.add_argument("text", help="Plaintext")
    _add_password_options(enc_text)

    dec_text = subparsers.add_parser("decrypt-text", help="Decrypt an Encrypted(...) content block back to text")
    dec_text.add_argument("block", help="Encrypted content block")
    _add_password_options(dec_text)

    args = parser.parse_args(argv)

    if args.password_file is not None:
        try:
            password = tiddlercrypt.read_password_file(args.password_file)
        except (OSError, UnicodeDecodeError) as exc:
            reason = getattr(exc, "strerror", None) or type(exc).__name__
            reporter.failed(f"Could not read password file {args.password_file}: {reason}")
            return 1
    elif args.password is not None:
        password = args.password
    else:
        prompt_name = getattr(args, "name", "text")

        def password():
            return tiddlercrypt.prompt_password(prompt_name)

    text_command = args.command.endswith("-text")
    with _warnings_module.catch_warnings(record=True) as caught:
        _warnings_module.simplefilter("always", RuntimeWarning)
        try:
            outcome = _run_command(args, password)
        except (TiddlerCryptError, OSError) as exc:
            outcome = exc
    for entry in caught:
        reporter.caution(str(entry.message))

    if isinstance(outcome, Exception):
        label = f"{args.command} failed" if text_command else "An error occurred"
        reporter.failed(f"{label}: {outcome}")
        return 1
    if text_command:
        print(outcome)
    else:
        reporter.done(args.command, outcome)
    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


__all__ = ["cli", "main", "tiddlercrypt"]


if __name__ == "__main__":
    raise SystemExit(main())
