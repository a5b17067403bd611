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


import typing

from ll_tlparse.tl.byteutils import base64encode, cons_number_to_int, short_hex_int
from ll_tlparse.typed import JsonObject, JsonValue

__all__ = ("DiagnosticReport", "build_parse_error", "build_unknown_schema", "build_exception")


class DiagnosticReport:
    __slots__ = ("report_type", "fields")

    PARSE_ERROR: typing.Final = "parse_error"
    UNKNOWN_SCHEMA: typing.Final = "unknown_schema"
    EXCEPTION: typing.Final = "exception"

    report_type: typing.Final[str]
    fields: typing.Final[tuple[tuple[str, JsonValue], ...]]

    def __init__(self, report_type: str, fields: tuple[tuple[str, JsonValue], ...]):
        self.report_type = report_type
        self.fields = fields

    def __eq__(self, other: typing.Any) -> bool:
        if isinstance(other, DiagnosticReport):
            return self.report_type == other.report_type and self.fields == other.fields
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.report_type, self.fields))

    def __repr__(self) -> str:
        return f"DiagnosticReport({self.report_type!r}, {dict(self.fields)!r})"

    def get(self, key: str) -> JsonValue:
        return dict(self.fields).get(key)

    def as_json(self) -> JsonObject:
        result: JsonObject = {"@type": self.report_type}
        result.update(self.fields)
        return result


def _size_fields(buffer: bytes, preview_size: int) -> list[tuple[str, JsonValue]]:
    fields: list[tuple[str, JsonValue]] = [("data_size", len(buffer))]

    if buffer:
        fields.append(("data_preview", base64encode(buffer[:preview_size])))

    return fields


def build_parse_error(error: str, error_pos: int, buffer: bytes | None = None, preview_size: int = 64) -> DiagnosticReport:
    fields: list[tuple[str, JsonValue]] = [("error", error), ("error_pos", error_pos)]

    if buffer is not None:
        fields.extend(_size_fields(buffer, preview_size))

    return DiagnosticReport(DiagnosticReport.PARSE_ERROR, tuple(fields))


def build_unknown_schema(buffer: bytes, preview_size: int = 32) -> DiagnosticReport:
    fields: list[tuple[str, JsonValue]] = []

    if len(buffer) >= 4:
        fields.append(("constructor_id", short_hex_int(cons_number_to_int(buffer[:4]))))

    fields.extend(_size_fields(buffer, preview_size))

    return DiagnosticReport(DiagnosticReport.UNKNOWN_SCHEMA, tuple(fields))


def build_exception(error: BaseException) -> DiagnosticReport:
    return DiagnosticReport(DiagnosticReport.EXCEPTION, (("message", str(error) or type(error).__name__),))
