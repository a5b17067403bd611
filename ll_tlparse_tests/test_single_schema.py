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
import struct

from ll_tlparse import DecoderConfig, SchemaTag, TlDecoder
from ll_tlparse.decoder import ENVELOPE_CONSTRUCTOR_ID
from ll_tlparse.tl import pack_binary_string
from ll_tlparse_tests.helpers import PEER_USER_42, mtproto_bytes, pack_envelope, td_bytes


def test_decode_telegram_api(decoder: TlDecoder) -> None:
    assert decoder.decode_telegram_api(PEER_USER_42) == {"@type": "peerUser", "user_id": "42"}


def test_envelope_transparency(decoder: TlDecoder) -> None:
    assert decoder.decode_telegram_api(pack_envelope(PEER_USER_42)) == {"@type": "peerUser", "user_id": "42"}


def test_envelope_retry_can_be_disabled() -> None:
    decoder = TlDecoder(config=DecoderConfig(allow_envelope_retry=False))
    buffer = pack_envelope(PEER_USER_42)
    result = decoder.decode_telegram_api(buffer)

    assert result["@type"] == "parse_error"
    assert result["error"] == "Unknown constructor 0x3072cfa1"
    assert result["error_pos"] == 4
    assert result["data_size"] == len(buffer)


def test_double_envelope_reports_inner_failure(decoder: TlDecoder) -> None:
    inner = pack_envelope(PEER_USER_42)
    result = decoder.decode_telegram_api(pack_envelope(inner))

    assert result == {
        "@type": "parse_error",
        "error": "Unknown constructor 0x3072cfa1",
        "error_pos": 4,
        "data_size": len(inner),
        "data_preview": base64.b64encode(inner[:64]).decode(),
    }


def test_corrupt_envelope_reports_outer_failure(decoder: TlDecoder) -> None:
    buffer = struct.pack("<I", ENVELOPE_CONSTRUCTOR_ID) + pack_binary_string(b"garbage")
    result = decoder.decode_telegram_api(buffer)

    assert result == {
        "@type": "parse_error",
        "error": "Unknown constructor 0x3072cfa1",
        "error_pos": 4,
        "data_size": len(buffer),
        "data_preview": base64.b64encode(buffer).decode(),
    }


def test_empty_buffer(decoder: TlDecoder) -> None:
    assert decoder.decode_telegram_api(b"") == {
        "@type": "parse_error",
        "error": "Not enough data to read",
        "error_pos": 0,
        "data_size": 0,
    }


def test_preview_is_bounded(decoder: TlDecoder) -> None:
    result = decoder.decode_telegram_api(b"\xff" * 200)

    assert list(result) == ["@type", "error", "error_pos", "data_size", "data_preview"]
    assert result["data_size"] == 200
    assert base64.b64decode(result["data_preview"]) == b"\xff" * 64


def test_preview_size_is_configurable() -> None:
    result = TlDecoder(config=DecoderConfig(telegram_preview_size=16)).decode_telegram_api(b"\xff" * 200)
    assert base64.b64decode(result["data_preview"]) == b"\xff" * 16


def test_td_api_and_mtproto_api_errors_have_no_size(decoder: TlDecoder) -> None:
    assert decoder.decode_td_api(b"\x00" * 4) == {"@type": "parse_error", "error": "Unknown constructor 0x00000000", "error_pos": 4}
    assert decoder.decode_mtproto_api(b"") == {"@type": "parse_error", "error": "Not enough data to read", "error_pos": 0}


def test_td_api_does_not_unwrap_envelopes(decoder: TlDecoder) -> None:
    buffer = pack_envelope(td_bytes({"_cons": "ok"}))
    assert decoder.decode_td_api(buffer) == {"@type": "parse_error", "error": "Unknown constructor 0x3072cfa1", "error_pos": 4}


def test_decode_by_tag(decoder: TlDecoder) -> None:
    buffer = mtproto_bytes({"_cons": "msgs_ack", "msg_ids": [1, 2]})

    assert decoder.decode(buffer, SchemaTag.MTPROTO_API) == {"@type": "msgs_ack", "msg_ids": ["1", "2"]}
    assert decoder.decode(buffer, SchemaTag.MTPROTO_API) == decoder.decode_mtproto_api(buffer)
    assert decoder.decode(PEER_USER_42, SchemaTag.TELEGRAM_API) == decoder.decode_telegram_api(PEER_USER_42)


def test_buffer_like_inputs(decoder: TlDecoder) -> None:
    assert decoder.decode_telegram_api(bytearray(PEER_USER_42)) == {"@type": "peerUser", "user_id": "42"}
    assert decoder.decode_telegram_api(memoryview(PEER_USER_42)) == {"@type": "peerUser", "user_id": "42"}


def test_internal_fault_becomes_exception_report(custom_decoder: TlDecoder) -> None:
    buffer = struct.pack("<Ii", 1, 5)

    assert custom_decoder.decode_telegram_api(buffer)["@type"] == "exception"
    assert custom_decoder.decode_mtproto_api(buffer) == {"@type": "broken", "value": 5}


def test_td_api_and_mtproto_api_faults_become_exception_reports(custom_decoder: TlDecoder) -> None:
    buffer = struct.pack("<Ii", 0xdead, 5)

    for result in (custom_decoder.decode_td_api(buffer), custom_decoder.decode_mtproto_api(buffer)):
        assert list(result) == ["@type", "message"]
        assert result["@type"] == "exception"
        assert "missingType" in result["message"]

    assert custom_decoder.decode(buffer, SchemaTag.TD_API)["@type"] == "exception"
