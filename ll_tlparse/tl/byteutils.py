# Copyright (C) 2017-2018 (nikat) https://github.com/nikat/mtproto2json
# Copyright (C) 2020-2025 (andrew) https://github.com/andrew-ld/LL-mtproto

# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.

# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


import base64
import functools

from ll_tlparse.tl.tl_deserialization_error import TlDeserializationError

__all__ = (
    "NativeByteReader",
    "base64encode",
    "base64decode",
    "pack_binary_string",
    "unpack_binary_string",
    "cons_number_to_int",
    "short_hex_int",
)


class NativeByteReader:
    """
    Strict cursor over an immutable buffer.

    A read that would go past the end raises `TlDeserializationError` and leaves
    `offset` where the failed read started, so `offset` is the error position.
    """

    __slots__ = ("buffer", "offset")

    buffer: bytes
    offset: int

    def __init__(self, buffer: bytes):
        self.buffer = buffer
        self.offset = 0

    def __call__(self, n: int) -> bytes:
        current_offset = self.offset

        if n == -1:
            n = len(self.buffer) - current_offset

        result_end = current_offset + n

        if result_end > len(self.buffer):
            raise TlDeserializationError("Not enough data to read")

        self.offset = result_end

        return self.buffer[current_offset:result_end]

    def remaining(self) -> int:
        return len(self.buffer) - self.offset


def base64encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def base64decode(data: str) -> bytes:
    return base64.b64decode(data, validate=True)


def _unpack_binary_string_header(reader: NativeByteReader) -> tuple[int, int]:
    str_len = reader(1)[0]

    if str_len > 0xFE:
        raise TlDeserializationError("Length equal to 255 in string")

    elif str_len == 0xFE:
        str_len = int.from_bytes(reader(3), "little", signed=False)
        padding_len = (-str_len) % 4

    else:
        padding_len = (3 - str_len) % 4

    return str_len, padding_len


def unpack_binary_string(reader: NativeByteReader) -> bytes:
    str_len, padding_len = _unpack_binary_string_header(reader)
    string = reader(str_len)
    reader(padding_len)
    return string


def pack_binary_string(data: bytes) -> bytes:
    length = len(data)

    if length < 254:
        padding = b"\x00" * ((3 - length) % 4)
        return length.to_bytes(1, "little", signed=False) + data + padding

    elif length <= 0xFFFFFF:
        padding = b"\x00" * ((-length) % 4)
        return b"\xfe" + length.to_bytes(3, "little", signed=False) + data + padding

    else:
        raise OverflowError("String too long")


def cons_number_to_int(cons_number: bytes) -> int:
    return int.from_bytes(cons_number, "little", signed=False)


@functools.lru_cache()
def short_hex_int(value: int) -> str:
    return f"0x{value & 0xFFFFFFFF:08x}"
