"""
Timestamp encoder.

Fixed layout: the timestamp's low 32 bits as 4 big-endian bytes, base32
encoded without padding over the order-preserving alphabet. That is 7
symbols (35 bits, the last 3 always zero), most significant first, so
string order is timestamp order for every value below 2**32. Larger values
alias: the high bits are dropped.

Compact layout: the minimal big-endian byte string of the full value, same
base32 treatment. Never aliases, but its length varies with the value.
"""

import base64
import numbers
import struct

from config import EncoderConfig
from core.errors import ClockUnavailable, LexicoidDecodeError, TimestampOutOfRange
from internal.logging import get_logger
from lexicoid.alphabet import FROM_LEXICOID, SYMBOLS, TO_LEXICOID
from lexicoid.types import Lexicoid
from utils.clock import U64_MAX, now_seconds, system_clock

WINDOW_BITS = 32
WINDOW_MASK = (1 << WINDOW_BITS) - 1
LENGTH = 7

# Encoded length -> payload bytes, for 1 to 8 bytes
_PAYLOAD_BYTES = {(8 * n + 4) // 5: n for n in range(1, 9)}


def _b32(raw):
    return base64.b32encode(raw).decode("ascii").rstrip("=").translate(TO_LEXICOID)


def _check_timestamp(timestamp):
    if isinstance(timestamp, bool) or not isinstance(timestamp, numbers.Integral):
        raise TypeError(f"Timestamp must be an integer, got {type(timestamp).__name__}")
    timestamp = int(timestamp)
    if not 0 <= timestamp <= U64_MAX:
        raise TimestampOutOfRange(f"Timestamp {timestamp} is not an unsigned 64-bit value", value=timestamp)
    return timestamp


def encode(timestamp):
    """Encode seconds since epoch as a 7-symbol lexicoid.

    Total on unsigned 64-bit input. Timestamps of 2**32 and above (after
    2106-02-07) wrap around and share IDs with earlier seconds.
    """
    seconds = _check_timestamp(timestamp)
    return Lexicoid(_b32(struct.pack(">I", seconds & WINDOW_MASK)))


def encode_compact(timestamp):
    """Encode seconds since epoch using as few symbols as the value needs."""
    seconds = _check_timestamp(timestamp)
    raw = seconds.to_bytes(max(1, (seconds.bit_length() + 7) // 8), "big")
    return Lexicoid(_b32(raw))


def encode_now(clock=None):
    """Encode the current time read from ``clock`` (default: system clock)."""
    return encode(now_seconds(clock))


def decode(value):
    """Recover the seconds encoded in a fixed or compact lexicoid.

    Raises LexicoidDecodeError for foreign symbols, impossible lengths,
    non-zero pad bits and compact IDs padded with leading zero bytes.
    """
    if not isinstance(value, str):
        raise TypeError(f"Lexicoid must be a string, got {type(value).__name__}")
    value = str(value)
    if len(value) not in _PAYLOAD_BYTES:
        raise LexicoidDecodeError(f"Invalid lexicoid length {len(value)}", value=value)
    foreign = sorted(set(value) - SYMBOLS)
    if foreign:
        raise LexicoidDecodeError(f"Invalid lexicoid symbols {''.join(foreign)!r}", value=value)

    padded = value.translate(FROM_LEXICOID) + "=" * (-len(value) % 8)
    raw = base64.b32decode(padded)
    if _b32(raw) != value:
        raise LexicoidDecodeError("Non-canonical lexicoid: pad bits are set", value=value)
    # Leading zero bytes only occur in the fixed layout
    if len(value) != LENGTH and len(raw) > 1 and raw[0] == 0:
        raise LexicoidDecodeError("Non-canonical lexicoid: leading zero byte", value=value)
    return int.from_bytes(raw, "big")


class LexicoidEncoder:
    """Encoder bound to a layout, a clock and a logger."""

    def __init__(self, config=None, clock=None, logger=None):
        self.config = config or EncoderConfig()
        self._clock = clock or system_clock
        self._log = logger or get_logger()

    @property
    def layout(self):
        return self.config.layout

    def encode(self, timestamp):
        if self.layout == "compact":
            return encode_compact(timestamp)
        seconds = _check_timestamp(timestamp)
        if seconds > WINDOW_MASK:
            self._log.warn("Timestamp outside fixed window, high bits dropped",
                           seconds=seconds, window_bits=WINDOW_BITS)
        return encode(seconds)

    def now(self):
        try:
            seconds = now_seconds(self._clock)
        except ClockUnavailable as exc:
            self._log.error("Clock read failed", error=exc, error_id=exc.error_id, **exc.context)
            raise
        self._log.debug("Clock read", seconds=seconds)
        return self.encode(seconds)

    def decode(self, value):
        return decode(value)
