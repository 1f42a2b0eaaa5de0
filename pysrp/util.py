import os

ENCODING = "utf-8"


def long_to_bytes(n):
    """
    Convert a ``long int`` to ``bytes``

    The result is the minimal big-endian representation, so ``0``
    becomes ``b""``.

    :param n: Long Integer
    :type n: int

    :return: ``long int`` in ``bytes`` format.
    :rtype: bytes
    """
    if n < 0:
        raise ValueError("Cannot serialize a negative integer")
    return n.to_bytes((n.bit_length() + 7) // 8, byteorder="big")


def bytes_to_long(s):
    # Bytes should be interpreted from left to right, hence the byteorder
    return int.from_bytes(s, byteorder="big")


def to_bytes(value):
    """Return ``value`` as bytes, encoding ``str`` as UTF-8."""
    if isinstance(value, str):
        return value.encode(ENCODING)
    return bytes(value)


def to_long(value):
    """Accept an ``int`` or big-endian ``bytes`` and return an ``int``."""
    if isinstance(value, int):
        return value
    return bytes_to_long(value)


def minimal_hex(data) -> str:
    """Hex encode ``data`` in upper case, dropping leading zero bytes."""
    return long_to_bytes(bytes_to_long(data)).hex().upper()


def random_bytes(count) -> bytes:
    """Return ``count`` bytes from the OS cryptographically secure source."""
    return os.urandom(count)
