"""
Configuration management for encoji.

This module contains the configuration class that selects the smuggler mode,
holds the payload to embed and the optional inline input text.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence


class ConfigError(ValueError):
    """Base class for invalid smuggler configuration."""


class MissingModeError(ConfigError):
    """Neither encode nor decode mode was requested."""


class ConflictingModeError(ConfigError):
    """More than one mode was requested at once."""


class MissingPayloadError(ConfigError):
    """Encode mode was requested with an empty payload text."""


class PayloadFileError(ConfigError):
    """The payload file could not be read."""


@dataclass
class SmugglerConfig:
    """Configuration object for a Smuggler run."""

    # True embeds the payload into each input line, False extracts from it
    encode: bool = False

    # Bytes hidden after the carrier character in encode mode
    payload: bytes = b""

    # Replaces stdin as the line source when set
    input_text: Optional[str] = None

    @classmethod
    def from_flags(
        cls,
        encode_text: Optional[str] = None,
        encode_file: Optional[str] = None,
        decode: bool = False,
        args: Sequence[str] = (),
    ) -> "SmugglerConfig":
        """Build a validated config from command-line style flags.

        Args:
            encode_text: Literal payload text, encoded as UTF-8
            encode_file: Path of a file whose raw bytes are the payload
            decode: Extract hidden payloads instead of embedding one
            args: Positional words used as input instead of stdin

        Returns:
            The validated configuration

        Raises:
            MissingModeError: No mode was given
            ConflictingModeError: More than one mode was given
            MissingPayloadError: ``encode_text`` was given but empty
            PayloadFileError: ``encode_file`` could not be read
        """
        modes = sum([encode_text is not None, encode_file is not None, bool(decode)])
        if modes == 0:
            raise MissingModeError("one of encode text, encode file or decode is required")
        if modes > 1:
            raise ConflictingModeError("too many modes provided")

        payload = b""
        if encode_text is not None:
            if encode_text == "":
                raise MissingPayloadError("text to encode cannot be empty")
            payload = encode_text.encode("utf-8")
        elif encode_file is not None:
            try:
                payload = Path(encode_file).read_bytes()
            except OSError as e:
                raise PayloadFileError(f"cannot read {encode_file}: {e.strerror or e}") from e

        input_text = " ".join(args) if args else None
        return cls(encode=not decode, payload=payload, input_text=input_text)
