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

from ll_tlparse.decoder.parse_attempt import ParseAttempt
from ll_tlparse.decoder.schema_registry import SchemaRegistry
from ll_tlparse.tl.byteutils import cons_number_to_int

__all__ = ("ConstructorIdentifier",)


class ConstructorIdentifier:
    __slots__ = ("_registry",)

    _registry: SchemaRegistry

    def __init__(self, registry: SchemaRegistry):
        self._registry = registry

    def identify(self, buffer: bytes) -> str:
        if len(buffer) < 4:
            return "Data too short (< 4 bytes)"

        constructor_id = cons_number_to_int(buffer[:4])

        for tag, schema in self._registry:
            # noinspection PyBroadException
            try:
                attempt = ParseAttempt.run(tag, schema, buffer)

                if not attempt.success:
                    continue

                rendered = attempt.render()
            except Exception:
                logging.error("failure while identifying %s constructor: %s", tag, traceback.format_exc())
                continue

            type_name = rendered.get("@type")

            if isinstance(type_name, str) and type_name:
                return f"{tag.value}::{type_name} (0x{constructor_id:08x})"

        return f"unknown (0x{constructor_id:08x})"
