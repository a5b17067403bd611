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

from ll_tlparse import DecoderConfig, SchemaRegistry, SchemaTag, TlDecoder
from ll_tlparse.decoder import DiagnosticReport, DispatchResult, SchemaDispatcher
from ll_tlparse_tests.helpers import PEER_USER_42, mtproto_bytes, pack_envelope, td_bytes


def test_telegram_api_buffer(decoder: TlDecoder) -> None:
    assert decoder.decode_auto(PEER_USER_42) == {
        "@schema": "telegram_api",
        "data": decoder.decode_telegram_api(PEER_USER_42),
    }


def test_td_api_buffer(decoder: TlDecoder) -> None:
    buffer = td_bytes({"_cons": "messageSenderUser", "user_id": 7})

    assert decoder.decode_auto(buffer) == {"@schema": "td_api", "data": decoder.decode_td_api(buffer)}
    assert decoder.decode_auto(buffer)["data"] == {"@type": "messageSenderUser", "user_id": 7}


def test_mtproto_api_buffer(decoder: TlDecoder) -> None:
    buffer = mtproto_bytes({"_cons": "pong", "msg_id": 1, "ping_id": 2})

    assert decoder.decode_auto(buffer) == {"@schema": "mtproto_api", "data": decoder.decode_mtproto_api(buffer)}


def test_envelope_is_not_unwrapped(decoder: TlDecoder) -> None:
    buffer = pack_envelope(PEER_USER_42)
    result = decoder.decode_auto(buffer)

    assert result == {
        "@type": "unknown_schema",
        "constructor_id": "0x3072cfa1",
        "data_size": len(buffer),
        "data_preview": base64.b64encode(buffer[:32]).decode(),
    }


def test_unknown_schema_preview_is_bounded(decoder: TlDecoder) -> None:
    buffer = b"\xff" * 100
    result = decoder.decode_auto(buffer)

    assert result["constructor_id"] == "0xffffffff"
    assert result["data_size"] == 100
    assert base64.b64decode(result["data_preview"]) == b"\xff" * 32
    assert list(result) == ["@type", "constructor_id", "data_size", "data_preview"]


def test_short_buffers_have_no_constructor_id(decoder: TlDecoder) -> None:
    assert decoder.decode_auto(b"\x01\x02") == {
        "@type": "unknown_schema",
        "data_size": 2,
        "data_preview": base64.b64encode(b"\x01\x02").decode(),
    }

    assert decoder.decode_auto(b"") == {"@type": "unknown_schema", "data_size": 0}


def test_first_match_wins(custom_registry: SchemaRegistry) -> None:
    dispatcher = SchemaDispatcher(custom_registry, DecoderConfig())
    result = dispatcher.dispatch(struct.pack("<Ii", 0xabcd, 5))

    assert isinstance(result, DispatchResult)
    assert result.tag is SchemaTag.TELEGRAM_API
    assert result.value == {"@type": "shared", "value": 5}


def test_dispatch_report(custom_registry: SchemaRegistry) -> None:
    dispatcher = SchemaDispatcher(custom_registry, DecoderConfig(auto_preview_size=2))
    result = dispatcher.dispatch(b"\x00\x00\x00\x00\x01")

    assert isinstance(result, DiagnosticReport)
    assert result.report_type == DiagnosticReport.UNKNOWN_SCHEMA
    assert result.get("data_preview") == base64.b64encode(b"\x00\x00").decode()


def test_internal_fault_becomes_exception_report(custom_decoder: TlDecoder) -> None:
    result = custom_decoder.decode_auto(struct.pack("<Ii", 1, 5))

    assert result["@type"] == "exception"
    assert isinstance(result["message"], str) and result["message"]
