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

from ll_tlparse.decoder.schema_registry import SchemaRegistry
from ll_tlparse.decoder.schema_tag import SchemaTag

__all__ = ("VERSION", "EXTENSION_NAME", "FEATURES", "RESOURCES_PATH", "DefaultSchemas")


VERSION = "1.0.0"

EXTENSION_NAME = "ll_tlparse"

FEATURES = (
    "auto_schema_detection",
    "gzip_decompression",
    "hex_input",
    "constructor_identification",
    "multi_schema_support",
    "tl_encoding",
)

RESOURCES_PATH = os.path.join(os.path.dirname(__file__), "resources", "tl")

_default_registry = SchemaRegistry.from_directory(RESOURCES_PATH)


class DefaultSchemas:
    __slots__ = ()

    REGISTRY = _default_registry

    TELEGRAM_API = _default_registry.get(SchemaTag.TELEGRAM_API)
    TD_API = _default_registry.get(SchemaTag.TD_API)
    MTPROTO_API = _default_registry.get(SchemaTag.MTPROTO_API)
