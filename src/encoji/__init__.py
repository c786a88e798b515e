"""
Smuggle bytes inside text with unicode variation selectors.

Each payload byte becomes one invisible variation selector appended after a
visible carrier character, and can be recovered from the text later.
"""

__version__ = "0.1.2"

from .config import SmugglerConfig
from .core import EmptyInputError, Smuggler, embed, extract, extract_bytes
from .selectors import NotAVariationSelector, byte_to_selector, selector_to_byte

__all__ = [
    "EmptyInputError",
    "NotAVariationSelector",
    "Smuggler",
    "SmugglerConfig",
    "byte_to_selector",
    "embed",
    "extract",
    "extract_bytes",
    "selector_to_byte",
]
