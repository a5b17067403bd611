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



import gzip
import struct

import pytest

from ll_tlparse.decoder import ENVELOPE_CONSTRUCTOR_ID, DecoderConfig, EnvelopeCodec
from ll_tlparse.tl import pack_binary_string
from ll_tlparse_tests.helpers import PEER_USER_42, pack_envelope


_SENTINEL = struct.pack("<I", ENVELOPE_CONSTRUCTOR_ID)


@pytest.fixture
def codec() -> EnvelopeCodec:
    return EnvelopeCodec(DecoderConfig())


def test_decompress_multiple_chunks(codec: EnvelopeCodec) -> None:
    data = bytes(range(256)) * 80
    assert codec.decompress(gzip.compress(data)) == data


def test_decompress_with_tiny_chunks() -> None:
    data = b"telegram " * 1000
    assert EnvelopeCodec(DecoderConfig(decompress_chunk_size=7)).decompress(gzip.compress(data)) == data


def test_decompress_failures_are_empty(codec: EnvelopeCodec) -> None:
    compressed = gzip.compress(b"payload " * 100)

    assert codec.decompress(compressed[:-8]) == b""
    assert codec.decompress(compressed[:10]) == b""
    assert codec.decompress(b"not gzip at all") == b""
    assert codec.decompress(b"") == b""
    assert codec.decompress(gzip.compress(b"")) == b""


def test_decompress_is_bounded() -> None:
    codec = EnvelopeCodec(DecoderConfig(max_decompressed_size=1000, decompress_chunk_size=256))

    assert codec.decompress(gzip.compress(b"\x00" * 5000)) == b""
    assert codec.decompress(gzip.compress(b"\x00" * 1000)) == b"\x00" * 1000


def test_is_envelope() -> None:
    assert EnvelopeCodec.is_envelope(_SENTINEL)
    assert not EnvelopeCodec.is_envelope(_SENTINEL[:3])
    assert not EnvelopeCodec.is_envelope(PEER_USER_42)


def test_unwrap(codec: EnvelopeCodec) -> None:
    assert codec.unwrap(pack_envelope(PEER_USER_42)) == PEER_USER_42
    assert codec.unwrap(PEER_USER_42) == b""
    assert codec.unwrap(_SENTINEL + b"\x10") == b""
    assert codec.unwrap(_SENTINEL + pack_binary_string(b"")) == b""
    assert codec.unwrap(_SENTINEL + pack_binary_string(b"garbage")) == b""
