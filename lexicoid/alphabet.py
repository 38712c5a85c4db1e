"""
Order-preserving base32 alphabet.

Digits 2-7 followed by lowercase a-z: 32 symbols whose ASCII order matches
their index, so comparing encoded strings compares the encoded bits.
"""

ALPHABET = "234567abcdefghijklmnopqrstuvwxyz"

# RFC 4648 base32, as produced by base64.b32encode
RFC4648_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"


def check_alphabet(alphabet):
    """Raise ValueError unless ``alphabet`` is 32 distinct symbols in ascending order."""
    if len(alphabet) != 32:
        raise ValueError(f"Alphabet must have 32 symbols, got {len(alphabet)}")
    if len(set(alphabet)) != 32:
        raise ValueError("Alphabet symbols must be distinct")
    for index in range(1, 32):
        if alphabet[index - 1] >= alphabet[index]:
            raise ValueError(
                f"Alphabet is not order-preserving at index {index}: "
                f"{alphabet[index - 1]!r} >= {alphabet[index]!r}"
            )
    return alphabet


check_alphabet(ALPHABET)

SYMBOLS = frozenset(ALPHABET)
TO_LEXICOID = str.maketrans(RFC4648_ALPHABET, ALPHABET)
FROM_LEXICOID = str.maketrans(ALPHABET, RFC4648_ALPHABET)
