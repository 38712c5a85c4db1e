"""Short, stable, sortable IDs from unix timestamps."""

__version__ = "0.1.0"

from core.errors import ClockUnavailable, LexicoidDecodeError, LexicoidError, TimestampOutOfRange
from lexicoid.alphabet import ALPHABET, check_alphabet
from lexicoid.encoder import (
    LENGTH,
    WINDOW_BITS,
    LexicoidEncoder,
    decode,
    encode,
    encode_compact,
    encode_now,
)
from lexicoid.types import Lexicoid

__all__ = [
    "ALPHABET",
    "LENGTH",
    "WINDOW_BITS",
    "Lexicoid",
    "LexicoidEncoder",
    "check_alphabet",
    "decode",
    "encode",
    "encode_compact",
    "encode_now",
    "ClockUnavailable",
    "LexicoidDecodeError",
    "LexicoidError",
    "TimestampOutOfRange",
]
