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


import binascii

from ll_tlparse.decoder.invalid_input_error import InvalidInputError

__all__ = ("hex_to_bytes", "bytes_to_hex")


_hex_digits = frozenset("0123456789abcdefABCDEF")


def hex_to_bytes(text: str) -> bytes:
    if len(text) % 2 != 0:
        raise InvalidInputError("Hex string must have even length")

    for position in range(len(text) // 2):
        pair = text[position * 2:position * 2 + 2]

        if pair[0] not in _hex_digits or pair[1] not in _hex_digits:
            raise InvalidInputError(f"Invalid hex string at position {position * 2}", position)

    return binascii.unhexlify(text)


def bytes_to_hex(data: bytes) -> str:
    return binascii.hexlify(data).decode("ascii")
