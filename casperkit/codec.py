"""Hex, little-endian integer and string encodings plus small text helpers."""

from __future__ import annotations

import binascii
import re
from datetime import datetime, timedelta, timezone
from os import PathLike
from typing import Iterable, Union

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?([Zz]|[+-]\d{2}:\d{2})"
)


def hex_encode(data: bytes) -> str:
    """Lower-case hex of ``data``."""
    return bytes(data).hex()


def hex_decode(text: str) -> bytes:
    """Bytes of a hex string; raises ValueError on malformed input."""
    try:
        return binascii.unhexlify(text)
    except (binascii.Error, TypeError) as exc:
        raise ValueError(f"Invalid hex string: {text!r}") from exc


def _pack(value: int, size: int, signed: bool, kind: str) -> bytes:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{kind} value must be an int")
    try:
        return value.to_bytes(size, "little", signed=signed)
    except OverflowError:
        raise ValueError(f"{value} does not fit in {kind}") from None


def _unpack(text: str, size: int, signed: bool, kind: str) -> int:
    data = hex_decode(text)
    if len(data) != size:
        raise ValueError(f"{kind} needs {size} bytes, got {len(data)}")
    return int.from_bytes(data, "little", signed=signed)


def _string_bytes(value: str) -> bytes:
    data = value.encode("utf-8")
    return _pack(len(data), 4, False, "u32") + data


def bool_encode(value: bool) -> str:
    """Single byte 01 for true, 00 for false, as hex."""
    return hex_encode(bytes([1 if value else 0]))


def bool_decode(text: str) -> bool:
    data = hex_decode(text)
    if data == b"\x01":
        return True
    if data == b"\x00":
        return False
    raise ValueError(f"Invalid bool encoding: {text!r}")


def i32_encode(value: int) -> str:
    return hex_encode(_pack(value, 4, True, "i32"))


def i32_decode(text: str) -> int:
    return _unpack(text, 4, True, "i32")


def i64_encode(value: int) -> str:
    return hex_encode(_pack(value, 8, True, "i64"))


def i64_decode(text: str) -> int:
    return _unpack(text, 8, True, "i64")


def u8_encode(value: int) -> str:
    return hex_encode(_pack(value, 1, False, "u8"))


def u8_decode(text: str) -> int:
    return _unpack(text, 1, False, "u8")


def u32_encode(value: int) -> str:
    return hex_encode(_pack(value, 4, False, "u32"))


def u32_decode(text: str) -> int:
    return _unpack(text, 4, False, "u32")


def u64_encode(value: int) -> str:
    return hex_encode(_pack(value, 8, False, "u64"))


def u64_decode(text: str) -> int:
    return _unpack(text, 8, False, "u64")


def string_encode(value: str) -> str:
    """UTF-8 bytes prefixed with their u32 little-endian length, as hex."""
    return hex_encode(_string_bytes(value))


def string_decode(text: str) -> str:
    data = hex_decode(text)
    if len(data) < 4:
        raise ValueError("String encoding is missing its length prefix")
    length = int.from_bytes(data[:4], "little")
    body = data[4:]
    if len(body) != length:
        raise ValueError(f"String length prefix says {length} bytes, got {len(body)}")
    return body.decode("utf-8")


def str_to_timestamp(text: str) -> int:
    """Milliseconds since the epoch of an RFC 3339 time such as ``2021-04-21T14:19:15.361Z``."""
    match = _RFC3339.fullmatch(text.strip())
    if match is None:
        raise ValueError(f"Invalid RFC 3339 timestamp: {text!r}")
    year, month, day, hour, minute, second = (int(part) for part in match.groups()[:6])
    fraction, zone = match.group(7), match.group(8)
    if zone in ("Z", "z"):
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        offset = timedelta(hours=int(zone[1:3]), minutes=int(zone[4:6]))
        tz = timezone(sign * offset)
    moment = datetime(year, month, day, hour, minute, second, tzinfo=tz)
    delta = moment - _EPOCH
    millis = int(((fraction or "") + "000")[:3])
    total = (delta.days * 86_400 + delta.seconds) * 1000 + millis
    if total < 0:
        raise ValueError(f"Timestamp before the epoch: {text!r}")
    return total


def time_to_rfc3339(timestamp: int) -> str:
    """RFC 3339 UTC text of a time in whole seconds since the epoch."""
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def to_lower(text: str) -> str:
    return text.lower()


def starts_with(text: str, prefix: str) -> bool:
    return text.startswith(prefix)


def split_string(text: str, delim: str) -> list[str]:
    if not delim:
        raise ValueError("Delimiter must not be empty")
    return text.split(delim)


def string_to_hex(text: str) -> str:
    return hex_encode(text.encode("utf-8"))


def hex_to_string(text: str) -> str:
    return hex_decode(text).decode("utf-8")


def hex_str_to_uint32(text: str) -> int:
    """Numeric value of a hex string, which must fit in 32 unsigned bits."""
    try:
        value = int(text, 16)
    except ValueError:
        raise ValueError(f"Invalid hex number: {text!r}") from None
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"{text!r} does not fit in u32")
    return value


def file_exists(path: Union[str, PathLike]) -> bool:
    """True if ``path`` names a file that can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


class ByteWriter:
    """Accumulates serialized values into a byte string."""

    def __init__(self, initial: bytes = b"") -> None:
        self._buffer = bytearray(initial)

    def write_int(self, value: int) -> None:
        self._buffer += _pack(value, 4, True, "i32")

    def write_uint(self, value: int) -> None:
        self._buffer += _pack(value, 4, False, "u32")

    def write_ulong(self, value: int) -> None:
        self._buffer += _pack(value, 8, False, "u64")

    def write_byte(self, value: int) -> None:
        self._buffer += _pack(value, 1, False, "u8")

    def write_bytes(self, value: Union[bytes, bytearray, Iterable[int]]) -> None:
        self._buffer += bytes(value)

    def write_string(self, value: str) -> None:
        self._buffer += _string_bytes(value)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)