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

from ll_tlparse.decoder.decoder_config import DecoderConfig
from ll_tlparse.decoder.diagnostic import DiagnosticReport, build_unknown_schema
from ll_tlparse.decoder.parse_attempt import ParseAttempt
from ll_tlparse.decoder.schema_registry import SchemaRegistry
from ll_tlparse.decoder.schema_tag import SchemaTag
from ll_tlparse.typed import JsonObject

__all__ = ("SchemaDispatcher", "DispatchResult")


class DispatchResult:
    __slots__ = ("tag", "value")

    tag: SchemaTag
    value: JsonObject

    def __init__(self, tag: SchemaTag, value: JsonObject):
        self.tag = tag
        self.value = value

    def __repr__(self) -> str:
        return f"DispatchResult({self.tag}, {self.value!r})"

    def as_json(self) -> JsonObject:
        return {"@schema": self.tag.value, "data": self.value}


class SchemaDispatcher:
    __slots__ = ("_registry", "_config")

    _registry: SchemaRegistry
    _config: DecoderConfig

    def __init__(self, registry: SchemaRegistry, config: DecoderConfig):
        self._registry = registry
        self._config = config

    def dispatch(self, buffer: bytes) -> DispatchResult | DiagnosticReport:
        for tag, schema in self._registry:
            attempt = ParseAttempt.run(tag, schema, buffer)

            if attempt.success:
                logging.debug("buffer of %d bytes decoded as %s", len(buffer), tag)
                return DispatchResult(tag, attempt.render())

        return build_unknown_schema(buffer, self._config.auto_preview_size)
