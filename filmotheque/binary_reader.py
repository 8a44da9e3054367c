"""Reading the variable-size integers and strings of the binary film file."""

from __future__ import annotations

from typing import BinaryIO

__all__ = ["FormatError", "read_uint_variable", "read_string"]

_BASE_HEADER = 0xA0
_SIZES = {
    _BASE_HEADER + 0: 1,
    _BASE_HEADER + 1: 2,
    _BASE_HEADER + 2: 4,
}


class FormatError(ValueError):
    """The binary data does not have the expected layout or ends too early."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise FormatError(
            f"unexpected end of data: wanted {size} bytes, got {len(data)}"
        )
    return data


def read_uint_variable(stream: BinaryIO) -> int:
    """Read an unsigned integer preceded by a header byte giving its width."""
    header = _read_exact(stream, 1)[0]
    try:
        size = _SIZES[header]
    except KeyError:
        raise FormatError(
            f"expected a variable-size integer header, found byte 0x{header:02X}"
        ) from None
    return int.from_bytes(_read_exact(stream, size), "little")


def read_string(stream: BinaryIO) -> str:
    """Read a string whose byte length is given by a variable-size integer."""
    data = _read_exact(stream, read_uint_variable(stream))
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return data.decode("latin-1")