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


import os.path
import typing

from ll_tlparse.decoder.schema_tag import SchemaTag
from ll_tlparse.tl.tl import Schema

__all__ = ("SchemaRegistry",)


class SchemaRegistry:
    __slots__ = ("_schemas",)

    _schemas: typing.Final[dict[SchemaTag, Schema]]

    def __init__(self, schemas: dict[SchemaTag, Schema]):
        missing = [tag.value for tag in SchemaTag if tag not in schemas]

        if missing:
            raise ValueError(f"Missing schemas: {', '.join(missing)}")

        self._schemas = {tag: schemas[tag] for tag in SchemaTag}

    def __iter__(self) -> typing.Iterator[tuple[SchemaTag, Schema]]:
        return iter(self._schemas.items())

    def __repr__(self) -> str:
        return f"SchemaRegistry({', '.join(f'{tag}: {len(schema.constructors)}' for tag, schema in self)})"

    def get(self, tag: SchemaTag) -> Schema:
        return self._schemas[tag]

    def layers(self) -> dict[str, int | None]:
        return {tag.value: schema.layer for tag, schema in self}

    @staticmethod
    def _get_schema(*raw_schemas: str) -> Schema:
        result = Schema()

        for raw_schema in raw_schemas:
            result.extend_from_raw_schema(raw_schema)

        return result

    @staticmethod
    def from_raw(*, telegram_api: str, td_api: str, mtproto_api: str) -> "SchemaRegistry":
        return SchemaRegistry({
            SchemaTag.TELEGRAM_API: SchemaRegistry._get_schema(telegram_api),
            SchemaTag.TD_API: SchemaRegistry._get_schema(td_api),
            SchemaTag.MTPROTO_API: SchemaRegistry._get_schema(mtproto_api),
        })

    @staticmethod
    def from_directory(resources_path: str) -> "SchemaRegistry":
        raw_schemas: dict[str, str] = {}

        for tag in SchemaTag:
            with open(os.path.join(resources_path, f"{tag.value}.tl"), encoding="utf-8") as schema_file:
                raw_schemas[tag.value] = schema_file.read()

        return SchemaRegistry.from_raw(**raw_schemas)
