"""
Byte-order (endianness) conversion for fixed-width wire integers.

**Conceptual**: PostgreSQL's wire protocol sends every multi-byte integer in
network byte order (big-endian). A decoder running on a little-endian host
has to reverse the bytes of each int16/int32/int64 it reads; on a big-endian
host the value is already correct. These helpers hide that decision.

**Functionally**:
- `swap2`, `swap4`, `swap8` take a signed 16/32/64-bit value and a direction
  flag and return the converted value. The value is passed and returned by
  value; there is no output buffer.
- If the host order already equals the target order the value comes back
  unchanged; otherwise its two's-complement bytes are reversed and
  reinterpreted as a signed integer of the same width.
- Converting to network order and back (or the other way round) always
  yields the original value, on either host order.
- `host_order` defaults to `sys.byteorder` and can be overridden so both
  code paths are testable on any machine.
- `swap_array` does the same for whole numpy integer arrays.
"""

import struct
import sys
from typing import Literal

import numpy as np

HostOrder = Literal["little", "big"]

NETWORK_ORDER: HostOrder = "big"

# width in bytes -> struct format character for a signed integer
_SIGNED_FORMATS = {2: "h", 4: "i", 8: "q"}


def _check_host_order(host_order: HostOrder) -> None:
    if host_order not in ("little", "big"):
        raise ValueError(f"host_order must be 'little' or 'big', got: {host_order!r}")


def _needs_swap(host_order: HostOrder) -> bool:
    # Converting in either direction only changes anything when host != network.
    _check_host_order(host_order)
    return host_order != NETWORK_ORDER


def swap(value: int, width: int, to_network: bool, host_order: HostOrder = sys.byteorder) -> int:
    """
    Convert a signed fixed-width integer between host and network byte order.

    Args:
        value: Signed integer that fits in `width` bytes.
        width: Integer width in bytes (2, 4 or 8).
        to_network: True for host -> network, False for network -> host.
        host_order: Native byte order of the host ("little" or "big").

    Returns:
        The converted value, as a signed integer of the same width.

    Raises:
        TypeError: If value is not an integer.
        ValueError: If width is unsupported, host_order is unknown, or value
                    does not fit in a signed `width`-byte integer.
    """
    if width not in _SIGNED_FORMATS:
        raise ValueError(f"width must be one of {sorted(_SIGNED_FORMATS)}, got: {width}")

    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"value must be an integer, got {type(value).__name__}")
    value = int(value)

    bits = width * 8
    lower, upper = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not lower <= value <= upper:
        raise ValueError(f"value {value} out of range for int{bits} [{lower}, {upper}]")

    if not _needs_swap(host_order):
        return value

    fmt = _SIGNED_FORMATS[width]
    # Pack with one byte order and read back with the other: a full byte reversal.
    return struct.unpack("<" + fmt, struct.pack(">" + fmt, value))[0]


def swap2(value: int, to_network: bool, host_order: HostOrder = sys.byteorder) -> int:
    """Byte-order conversion for a signed 16-bit value."""
    return swap(value, 2, to_network, host_order)


def swap4(value: int, to_network: bool, host_order: HostOrder = sys.byteorder) -> int:
    """Byte-order conversion for a signed 32-bit value."""
    return swap(value, 4, to_network, host_order)


def swap8(value: int, to_network: bool, host_order: HostOrder = sys.byteorder) -> int:
    """Byte-order conversion for a signed 64-bit value."""
    return swap(value, 8, to_network, host_order)


def hton(value: int, width: int, host_order: HostOrder = sys.byteorder) -> int:
    """Host to network order; shorthand for `swap(value, width, True)`."""
    return swap(value, width, True, host_order)


def ntoh(value: int, width: int, host_order: HostOrder = sys.byteorder) -> int:
    """Network to host order; shorthand for `swap(value, width, False)`."""
    return swap(value, width, False, host_order)


def swap_array(values: np.ndarray, to_network: bool, host_order: HostOrder = sys.byteorder) -> np.ndarray:
    """
    Vectorised byte-order conversion for a numpy integer array.

    **Conceptual**: A decoder that has read a column of wire integers into a
    numpy array can convert all of them at once instead of calling `swap4`
    per element. Element-wise the result matches `swap(x, itemsize, ...)`.

    The input array is never modified; a new array with the same dtype and
    shape is returned.

    Args:
        values: Array with an integer dtype of itemsize 2, 4 or 8.
        to_network: True for host -> network, False for network -> host.
        host_order: Native byte order of the host ("little" or "big").

    Returns:
        New array holding the converted values.

    Raises:
        ValueError: For a non-integer dtype or an unsupported itemsize.
    """
    arr = np.asarray(values)
    if not np.issubdtype(arr.dtype, np.integer):
        raise ValueError(f"swap_array needs an integer array, got dtype {arr.dtype}")
    if arr.dtype.itemsize not in _SIGNED_FORMATS:
        raise ValueError(
            f"itemsize must be one of {sorted(_SIGNED_FORMATS)}, got: {arr.dtype.itemsize}"
        )

    if not _needs_swap(host_order):
        return arr.copy()
    return arr.byteswap()
