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

from ll_tlparse.decoder.schema_tag import SchemaTag
from ll_tlparse.tl.byteutils import NativeByteReader
from ll_tlparse.tl.tl import Schema, TlBodyData
from ll_tlparse.tl.tl_deserialization_error import TlDeserializationError
from ll_tlparse.typed import JsonObject

__all__ = ("ParseAttempt",)


class ParseAttempt:
    """
    Outcome of fetching one buffer against one schema.

    Exactly one of `value` and `error` is set.
    """

    __slots__ = ("tag", "schema", "value", "error", "error_pos")

    tag: SchemaTag
    schema: Schema
    value: TlBodyData | None
    error: str | None
    error_pos: int | None

    def __init__(
            self,
            tag: SchemaTag,
            schema: Schema,
            value: TlBodyData | None,
            error: str | None,
            error_pos: int | None
    ):
        self.tag = tag
        self.schema = schema
        self.value = value
        self.error = error
        self.error_pos = error_pos

    @property
    def success(self) -> bool:
        return self.value is not None

    def render(self) -> JsonObject:
        if self.value is None:
            raise RuntimeError(f"Cannot render a failed {self.tag} attempt")

        return self.schema.to_json(self.value)

    def __repr__(self) -> str:
        if self.value is not None:
            return f"ParseAttempt({self.tag}, {self.value.get('_cons')!r})"
        else:
            return f"ParseAttempt({self.tag}, error={self.error!r}, error_pos={self.error_pos!r})"

    @staticmethod
    def run(tag: SchemaTag, schema: Schema, buffer: bytes) -> "ParseAttempt":
        reader = NativeByteReader(buffer)

        try:
            value = schema.fetch(reader)
        except TlDeserializationError as parse_error:
            logging.debug("%s attempt failed at %d: %s", tag, reader.offset, parse_error.message)
            return ParseAttempt(tag, schema, None, parse_error.message, reader.offset)

        return ParseAttempt(tag, schema, value, None, None)
