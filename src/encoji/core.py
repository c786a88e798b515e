"""
Core smuggling implementation.

This module contains the embed/extract transforms that hide bytes behind a
carrier character as variation selectors, and the Smuggler class that
applies one of them to every line of a byte stream.
"""

import io
import logging
import sys
from typing import BinaryIO, Optional

from .config import SmugglerConfig
from .selectors import NotAVariationSelector, byte_to_selector, selector_to_byte

logger = logging.getLogger("encoji.core")

# Written for every codepoint that does not decode to a payload byte
FALLBACK_BYTE = 0x0A

# Unicode White_Space; unlike str.strip() this keeps the separators U+001C..U+001F
WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


class EmptyInputError(ValueError):
    """Raised when a required string argument is empty."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} cannot be empty")


def embed(carrier: str, payload: bytes) -> str:
    """Hide ``payload`` after the first character of ``carrier``.

    Args:
        carrier: Visible text; only its first character gets the hidden suffix
        payload: Bytes to hide, one variation selector per byte

    Returns:
        First carrier character, the encoded run, then the rest of the carrier

    Raises:
        EmptyInputError: If ``carrier`` or ``payload`` is empty
    """
    if not carrier:
        raise EmptyInputError("carrier")
    if not payload:
        raise EmptyInputError("payload")

    parts = [carrier[0]]
    parts.extend(byte_to_selector(b) for b in payload)
    parts.append(carrier[1:])
    logger.debug(f"Embedded {len(payload)} bytes after U+{ord(carrier[0]):04X}")
    return "".join(parts)


def _extract_raw(text: str) -> bytearray:
    buf = bytearray()
    for ch in text:
        try:
            buf.append(selector_to_byte(ch))
        except NotAVariationSelector:
            buf.append(FALLBACK_BYTE)
    return buf


def _trim_space(raw: bytes) -> bytes:
    # Undecodable bytes become lone surrogates, which never count as space
    text = raw.decode("utf-8", errors="surrogateescape")
    return text.strip(WHITESPACE).encode("utf-8", errors="surrogateescape")


def extract_bytes(text: str) -> bytes:
    """Recover hidden bytes from ``text``.

    Every codepoint is reverse-mapped, carrier characters included. Anything
    that is not a variation selector becomes a newline, and the result is
    trimmed of surrounding whitespace. Bytes that are not valid UTF-8 are
    returned untouched.

    Raises:
        EmptyInputError: If ``text`` is empty
    """
    if not text:
        raise EmptyInputError("text")
    raw = _extract_raw(text)
    logger.debug(f"Scanned {len(text)} codepoints from input")
    return _trim_space(bytes(raw))


def extract(text: str) -> str:
    """Recover the hidden payload from ``text`` as a string.

    Same as :func:`extract_bytes`, with the result decoded as UTF-8
    (invalid sequences replaced).

    Raises:
        EmptyInputError: If ``text`` is empty
    """
    return extract_bytes(text).decode("utf-8", errors="replace")


class Smuggler:
    """Applies embed or extract to each line of a byte stream."""

    def __init__(
        self,
        config: Optional[SmugglerConfig] = None,
        stdin: Optional[BinaryIO] = None,
        stdout: Optional[BinaryIO] = None,
    ):
        """Initialize the smuggler.

        Args:
            config: Mode and payload. If None, decodes with an empty payload
            stdin: Binary line source. Ignored when ``config.input_text`` is set
            stdout: Binary destination for result lines
        """
        self.config = config if config is not None else SmugglerConfig()
        self.stdin = stdin
        self.stdout = stdout
        self.logger = logger

    def encode_text(self, target: str) -> str:
        """Embed the configured payload into ``target``."""
        if not target:
            raise EmptyInputError("target")
        if not self.config.payload:
            raise EmptyInputError("payload")
        return embed(target, self.config.payload)

    def decode_text(self, target: str) -> bytes:
        """Extract the raw hidden payload from ``target``."""
        if not target:
            raise EmptyInputError("target")
        return extract_bytes(target)

    def _source(self) -> BinaryIO:
        if self.config.input_text is not None:
            return io.BytesIO(self.config.input_text.encode("utf-8", errors="surrogateescape"))
        return self.stdin if self.stdin is not None else sys.stdin.buffer

    def _transform(self, line: bytes) -> bytes:
        target = line.decode("utf-8", errors="surrogateescape")
        if self.config.encode:
            return self.encode_text(target).encode("utf-8", errors="surrogateescape")
        return self.decode_text(target)

    def run(self) -> int:
        """Process every input line in order.

        Lines end at ``\\n`` only; one ``\\r`` before it is dropped.

        Returns:
            Number of lines written

        Raises:
            EmptyInputError: On the first empty line or missing payload
        """
        out = self.stdout if self.stdout is not None else sys.stdout.buffer
        mode = "encode" if self.config.encode else "decode"
        self.logger.debug(f"Starting {mode} run")

        count = 0
        for line in self._source():
            if line.endswith(b"\n"):
                line = line[:-1]
            if line.endswith(b"\r"):
                line = line[:-1]
            out.write(self._transform(line) + b"\n")
            count += 1

        out.flush()
        self.logger.debug(f"Processed {count} lines")
        return count
