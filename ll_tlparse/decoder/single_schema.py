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
import traceback

from ll_tlparse.decoder.decoder_config import DecoderConfig
from ll_tlparse.decoder.diagnostic import DiagnosticReport, build_exception, build_parse_error
from ll_tlparse.decoder.envelope import EnvelopeCodec
from ll_tlparse.decoder.parse_attempt import ParseAttempt
from ll_tlparse.decoder.schema_registry import SchemaRegistry
from ll_tlparse.decoder.schema_tag import SchemaTag
from ll_tlparse.typed import JsonObject

__all__ = ("SingleSchemaDecoder",)


class SingleSchemaDecoder:
    __slots__ = ("_registry", "_config", "_envelope")

    _registry: SchemaRegistry
    _config: DecoderConfig
    _envelope: EnvelopeCodec

    def __init__(self, registry: SchemaRegistry, config: DecoderConfig):
        self._registry = registry
        self._config = config
        self._envelope = EnvelopeCodec(config)

    def decode(self, buffer: bytes, tag: SchemaTag) -> JsonObject | DiagnosticReport:
        match tag:
            case SchemaTag.TELEGRAM_API:
                return self.decode_telegram_api(buffer)

            case SchemaTag.TD_API:
                return self.decode_td_api(buffer)

            case SchemaTag.MTPROTO_API:
                return self.decode_mtproto_api(buffer)

            case _:
                raise TypeError(f"Unknown schema tag {tag!r}")

    def decode_telegram_api(self, buffer: bytes, allow_envelope_retry: bool | None = None) -> JsonObject | DiagnosticReport:
        if allow_envelope_retry is None:
            allow_envelope_retry = self._config.allow_envelope_retry

        try:
            return self._decode_telegram_api(buffer, allow_envelope_retry)
        except Exception as error:
            logging.error("failure while decoding telegram_api buffer: %s", traceback.format_exc())
            return build_exception(error)

    def _decode_telegram_api(self, buffer: bytes, allow_envelope_retry: bool) -> JsonObject | DiagnosticReport:
        attempt = ParseAttempt.run(SchemaTag.TELEGRAM_API, self._registry.get(SchemaTag.TELEGRAM_API), buffer)

        if attempt.success:
            return attempt.render()

        if allow_envelope_retry and self._envelope.is_envelope(buffer):
            payload = self._envelope.unwrap(buffer)

            if payload:
                logging.debug("retrying telegram_api with %d bytes of gzip_packed payload", len(payload))
                return self._decode_telegram_api(payload, False)

        return build_parse_error(
            str(attempt.error),
            int(attempt.error_pos or 0),
            buffer,
            self._config.telegram_preview_size
        )

    def decode_td_api(self, buffer: bytes) -> JsonObject | DiagnosticReport:
        return self._decode_plain(SchemaTag.TD_API, buffer)

    def decode_mtproto_api(self, buffer: bytes) -> JsonObject | DiagnosticReport:
        return self._decode_plain(SchemaTag.MTPROTO_API, buffer)

    def _decode_plain(self, tag: SchemaTag, buffer: bytes) -> JsonObject | DiagnosticReport:
        try:
            attempt = ParseAttempt.run(tag, self._registry.get(tag), buffer)

            if attempt.success:
                return attempt.render()

            return build_parse_error(str(attempt.error), int(attempt.error_pos or 0))
        except Exception as error:
            logging.error("failure while decoding %s buffer: %s", tag, traceback.format_exc())
            return build_exception(error)
