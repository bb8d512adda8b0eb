"""Hex rendering of raw byte buffers."""

from typing import Optional, Union

ByteBuffer = Union[bytes, bytearray, memoryview]


def hex_to_str(data: ByteBuffer, length: Optional[int] = None) -> str:
    """
    Render bytes as a lowercase hex string, two digits per byte.

    No separators and no "0x" prefix; every byte becomes exactly two
    zero-padded digits, so the result has `2 * length` characters.

    Args:
        data: Buffer to render.
        length: Number of leading bytes to render; defaults to the whole buffer.

    Returns:
        Lowercase hex text ("" for zero bytes).

    Raises:
        ValueError: If length is negative or larger than the buffer.
    """
    # tobytes() flattens strided views and multi-byte formats into raw bytes
    raw = memoryview(data).tobytes()
    if length is None:
        length = len(raw)
    if length < 0:
        raise ValueError(f"length must be non-negative, got: {length}")
    if length > len(raw):
        raise ValueError(f"length {length} exceeds buffer size {len(raw)}")
    return raw[:length].hex()
