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


import logging
import zlib

from ll_tlparse.decoder.decoder_config import DecoderConfig
from ll_tlparse.tl.byteutils import NativeByteReader, cons_number_to_int, unpack_binary_string
from ll_tlparse.tl.tl_deserialization_error import TlDeserializationError

__all__ = ("EnvelopeCodec", "ENVELOPE_CONSTRUCTOR_ID")


ENVELOPE_CONSTRUCTOR_ID = 0x3072CFA1


class EnvelopeCodec:
    """
    `gzip_packed#3072cfa1 packed_data:bytes`

    Every failure is reported as an empty result.
    """

    __slots__ = ("_chunk_size", "_max_size")

    _chunk_size: int
    _max_size: int

    def __init__(self, config: DecoderConfig):
        self._chunk_size = config.decompress_chunk_size
        self._max_size = config.max_decompressed_size

    @staticmethod
    def is_envelope(buffer: bytes) -> bool:
        return len(buffer) >= 4 and cons_number_to_int(buffer[:4]) == ENVELOPE_CONSTRUCTOR_ID

    def decompress(self, data: bytes) -> bytes:
        decompressor = zlib.decompressobj(16 + zlib.MAX_WBITS)
        output = bytearray()
        pending = data

        try:
            while not decompressor.eof:
                chunk = decompressor.decompress(pending, self._chunk_size)

                if not chunk and len(decompressor.unconsumed_tail) == len(pending):
                    logging.debug("gzip stream stalled after %d bytes of output", len(output))
                    return b""

                pending = decompressor.unconsumed_tail
                output += chunk

                if len(output) > self._max_size:
                    logging.debug("gzip stream exceeds %d bytes", self._max_size)
                    return b""

        except zlib.error as decompress_error:
            logging.debug("gzip stream is corrupt: %s", decompress_error)
            return b""

        return bytes(output)

    def unwrap(self, buffer: bytes) -> bytes:
        if not self.is_envelope(buffer):
            return b""

        reader = NativeByteReader(buffer[4:])

        try:
            packed_data = unpack_binary_string(reader)
        except TlDeserializationError as parse_error:
            logging.debug("unable to read gzip_packed payload: %s", parse_error.message)
            return b""

        if not packed_data:
            return b""

        return self.decompress(packed_data)
