from datetime import datetime, timezone


class Lexicoid(str):
    """A lexicographically sortable identifier generated from a unix timestamp.

    Behaves as the plain string it wraps. Ordering puts shorter IDs first and
    compares equal-length IDs character by character, which keeps compact
    (variable-length) IDs in timestamp order too. Fixed-length IDs order
    exactly as plain strings.
    """

    __slots__ = ()

    def __lt__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        if len(self) != len(other):
            return len(self) < len(other)
        return str.__lt__(self, other)

    def __le__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        if len(self) != len(other):
            return len(self) < len(other)
        return str.__le__(self, other)

    def __gt__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        if len(self) != len(other):
            return len(self) > len(other)
        return str.__gt__(self, other)

    def __ge__(self, other):
        if not isinstance(other, str):
            return NotImplemented
        if len(self) != len(other):
            return len(self) > len(other)
        return str.__ge__(self, other)

    def __repr__(self):
        return f"Lexicoid({str.__repr__(self)})"

    @property
    def timestamp(self):
        """Seconds since epoch this ID encodes (modulo the fixed window for fixed-layout IDs)."""
        from lexicoid.encoder import decode
        return decode(self)

    def to_datetime(self):
        return datetime.fromtimestamp(self.timestamp, tz=timezone.utc)
