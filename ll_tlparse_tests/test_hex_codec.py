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



import pytest

from ll_tlparse import InvalidInputError, InvalidParameterError, TlDecoder, TlParseInputError, bytes_to_hex, hex_to_bytes


def test_hex_to_bytes_lower_and_upper_case() -> None:
    assert hex_to_bytes("00ff10") == b"\x00\xff\x10"
    assert hex_to_bytes("ABcd") == b"\xab\xcd"
    assert hex_to_bytes("") == b""


@pytest.mark.parametrize("text", ["00ff10", "ABcdEF", "0123456789abcdef", ""])
def test_round_trip_is_lowercase(text: str) -> None:
    assert bytes_to_hex(hex_to_bytes(text)) == text.lower()


def test_odd_length_is_rejected() -> None:
    with pytest.raises(InvalidInputError) as exc_info:
        hex_to_bytes("abc")

    assert exc_info.value.message == "Hex string must have even length"
    assert exc_info.value.position is None


@pytest.mark.parametrize(
    ("text", "position"),
    [
        ("00zz", 1),
        ("0x00", 0),
        (" 1", 0),
        ("+1", 0),
        ("aabbccg0", 3),
    ]
)
def test_invalid_pair_reports_byte_offset(text: str, position: int) -> None:
    with pytest.raises(InvalidInputError) as exc_info:
        hex_to_bytes(text)

    assert exc_info.value.position == position
    assert str(exc_info.value) == f"Invalid hex string at position {position * 2}"


def test_decode_hex_rejects_odd_length_before_decoding(decoder: TlDecoder) -> None:
    with pytest.raises(InvalidInputError):
        decoder.decode_hex("abc")


def test_hex_is_validated_before_schema_name(decoder: TlDecoder) -> None:
    with pytest.raises(InvalidInputError):
        decoder.decode_hex_with_schema("abc", "bogus")


def test_invalid_schema_name(decoder: TlDecoder) -> None:
    with pytest.raises(InvalidParameterError) as exc_info:
        decoder.decode_hex_with_schema("00", "bogus")

    assert str(exc_info.value) == "Invalid schema: bogus. Must be one of: telegram_api, td_api, mtproto_api, auto"
    assert isinstance(exc_info.value, TlParseInputError)
