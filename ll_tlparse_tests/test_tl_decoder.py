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

from ll_tlparse import InvalidInputError, InvalidParameterError, SchemaTag, TlDecoder
from ll_tlparse_tests.helpers import PEER_USER_42


def test_version(decoder: TlDecoder) -> None:
    version = decoder.version()

    assert version["name"] == "ll_tlparse"
    assert version["version"] == "1.0.0"
    assert version["supported_schemas"] == ["telegram_api", "td_api", "mtproto_api"]
    assert version["layers"] == {"telegram_api": 160, "td_api": None, "mtproto_api": None}
    assert "gzip_decompression" in version["features"]


def test_list_sample_constructors() -> None:
    text = TlDecoder.list_sample_constructors()

    assert text.startswith("Common telegram_api constructors (subset):\n\nUser/Chat types:\n")
    assert "  0x1f2b3476 - updateNewMessage\n" in text
    assert "  0x3072cfa1 - gzip_packed\n" in text
    assert text.endswith("Use identify_constructor() to identify any constructor.\n")


def test_encode(decoder: TlDecoder) -> None:
    assert decoder.encode({"_cons": "peerUser", "user_id": 42}, SchemaTag.TELEGRAM_API) == PEER_USER_42
    assert decoder.encode({"_cons": "peerUser", "user_id": 42}, SchemaTag.TELEGRAM_API, boxed=False) == PEER_USER_42[4:]


def test_encoded_user_decodes_back(decoder: TlDecoder) -> None:
    body = {"_cons": "userStatusOffline", "was_online": 1700000000}
    buffer = decoder.encode(body, SchemaTag.TELEGRAM_API)

    assert decoder.decode_telegram_api(buffer) == {"@type": "userStatusOffline", "was_online": 1700000000}
    assert decoder.identify_constructor(buffer).startswith("telegram_api::userStatusOffline (0x")


@pytest.mark.parametrize("schema", ["telegram_api", "auto"])
def test_decode_hex_with_schema(decoder: TlDecoder, schema: str) -> None:
    result = decoder.decode_hex_with_schema(PEER_USER_42.hex(), schema)

    if schema == "auto":
        assert result == {"@schema": "telegram_api", "data": {"@type": "peerUser", "user_id": "42"}}
    else:
        assert result == {"@type": "peerUser", "user_id": "42"}


def test_decode_hex_is_auto(decoder: TlDecoder) -> None:
    assert decoder.decode_hex(PEER_USER_42.hex().upper()) == decoder.decode_auto(PEER_USER_42)


def test_parse_schema_name() -> None:
    assert TlDecoder.parse_schema_name("td_api") is SchemaTag.TD_API

    with pytest.raises(InvalidParameterError) as error:
        TlDecoder.parse_schema_name("auto")

    assert error.value.message == "Invalid schema: auto. Must be one of: telegram_api, td_api, mtproto_api, auto"


def test_invalid_hex_position(decoder: TlDecoder) -> None:
    with pytest.raises(InvalidInputError) as error:
        decoder.decode_hex("00zz")

    assert error.value.position == 1


def test_parse_schema_name_without_auto() -> None:
    with pytest.raises(InvalidParameterError) as error:
        TlDecoder.parse_schema_name("auto", allow_auto=False)

    assert error.value.message == "Invalid schema: auto. Must be one of: telegram_api, td_api, mtproto_api"
