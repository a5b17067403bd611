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

from ll_tlparse.constants import EXTENSION_NAME, FEATURES, VERSION, DefaultSchemas
from ll_tlparse.decoder.decoder_config import DecoderConfig
from ll_tlparse.decoder.diagnostic import DiagnosticReport, build_exception
from ll_tlparse.decoder.dispatcher import SchemaDispatcher
from ll_tlparse.decoder.hex_codec import hex_to_bytes
from ll_tlparse.decoder.identifier import ConstructorIdentifier
from ll_tlparse.decoder.invalid_parameter_error import InvalidParameterError
from ll_tlparse.decoder.samples import list_sample_constructors
from ll_tlparse.decoder.schema_registry import SchemaRegistry
from ll_tlparse.decoder.schema_tag import AUTO_SCHEMA_NAME, SchemaTag
from ll_tlparse.decoder.single_schema import SingleSchemaDecoder
from ll_tlparse.tl.tl import TlBodyData
from ll_tlparse.typed import JsonObject, JsonValue, RawBuffer

__all__ = ("TlDecoder",)


def _to_bytes(buffer: RawBuffer) -> bytes:
    return buffer if isinstance(buffer, bytes) else bytes(buffer)


def _as_json(result: JsonObject | DiagnosticReport) -> JsonObject:
    return result.as_json() if isinstance(result, DiagnosticReport) else result


class TlDecoder:
    """
    Decodes telegram_api, td_api and mtproto_api buffers into JSON objects.

    Structural failures are returned as `parse_error`, `unknown_schema` or
    `exception` objects. Only malformed requests (bad hex text, unknown schema
    names) raise, with a `TlParseInputError` subclass.
    """

    __slots__ = ("_registry", "_config", "_single_schema", "_dispatcher", "_identifier")

    _registry: SchemaRegistry
    _config: DecoderConfig
    _single_schema: SingleSchemaDecoder
    _dispatcher: SchemaDispatcher
    _identifier: ConstructorIdentifier

    def __init__(self, schemas: SchemaRegistry | None = None, config: DecoderConfig | None = None):
        self._registry = DefaultSchemas.REGISTRY if schemas is None else schemas
        self._config = DecoderConfig() if config is None else config
        self._single_schema = SingleSchemaDecoder(self._registry, self._config)
        self._dispatcher = SchemaDispatcher(self._registry, self._config)
        self._identifier = ConstructorIdentifier(self._registry)

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry

    @property
    def config(self) -> DecoderConfig:
        return self._config

    def decode(self, buffer: RawBuffer, tag: SchemaTag) -> JsonObject:
        return _as_json(self._single_schema.decode(_to_bytes(buffer), tag))

    def decode_telegram_api(self, buffer: RawBuffer) -> JsonObject:
        return _as_json(self._single_schema.decode_telegram_api(_to_bytes(buffer)))

    def decode_td_api(self, buffer: RawBuffer) -> JsonObject:
        return _as_json(self._single_schema.decode_td_api(_to_bytes(buffer)))

    def decode_mtproto_api(self, buffer: RawBuffer) -> JsonObject:
        return _as_json(self._single_schema.decode_mtproto_api(_to_bytes(buffer)))

    def decode_auto(self, buffer: RawBuffer) -> JsonObject:
        try:
            return self._dispatcher.dispatch(_to_bytes(buffer)).as_json()
        except Exception as error:
            logging.error("failure while auto decoding buffer: %s", traceback.format_exc())
            return build_exception(error).as_json()

    def decode_hex(self, text: str) -> JsonObject:
        return self.decode_auto(hex_to_bytes(text))

    def decode_hex_with_schema(self, text: str, schema: str) -> JsonObject:
        buffer = hex_to_bytes(text)

        if schema == AUTO_SCHEMA_NAME:
            return self.decode_auto(buffer)

        return self.decode(buffer, self.parse_schema_name(schema))

    @staticmethod
    def parse_schema_name(schema: str, allow_auto: bool = True) -> SchemaTag:
        try:
            return SchemaTag.from_name(schema)
        except ValueError as value_error:
            valid_names = SchemaTag.names() + ((AUTO_SCHEMA_NAME,) if allow_auto else ())
            raise InvalidParameterError(f"Invalid schema: {schema}. Must be one of: {', '.join(valid_names)}") from value_error

    def identify_constructor(self, buffer: RawBuffer) -> str:
        return self._identifier.identify(_to_bytes(buffer))

    @staticmethod
    def list_sample_constructors() -> str:
        return list_sample_constructors()

    def version(self) -> JsonObject:
        supported_schemas: list[JsonValue] = [tag.value for tag in SchemaTag]
        features: list[JsonValue] = list(FEATURES)
        layers: dict[str, JsonValue] = dict(self._registry.layers())

        return {
            "name": EXTENSION_NAME,
            "version": VERSION,
            "supported_schemas": supported_schemas,
            "layers": layers,
            "features": features,
        }

    def encode(self, body: TlBodyData, tag: SchemaTag, boxed: bool = True) -> bytes:
        schema = self._registry.get(tag)
        value = schema.boxed(body) if boxed else schema.bare(body)
        return value.get_flat_bytes()
