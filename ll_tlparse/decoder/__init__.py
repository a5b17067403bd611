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


from ll_tlparse.decoder.decoder_config import DecoderConfig
from ll_tlparse.decoder.diagnostic import DiagnosticReport, build_exception, build_parse_error, build_unknown_schema
from ll_tlparse.decoder.dispatcher import DispatchResult, SchemaDispatcher
from ll_tlparse.decoder.envelope import ENVELOPE_CONSTRUCTOR_ID, EnvelopeCodec
from ll_tlparse.decoder.hex_codec import bytes_to_hex, hex_to_bytes
from ll_tlparse.decoder.identifier import ConstructorIdentifier
from ll_tlparse.decoder.invalid_input_error import InvalidInputError
from ll_tlparse.decoder.invalid_parameter_error import InvalidParameterError
from ll_tlparse.decoder.parse_attempt import ParseAttempt
from ll_tlparse.decoder.samples import list_sample_constructors
from ll_tlparse.decoder.schema_registry import SchemaRegistry
from ll_tlparse.decoder.schema_tag import AUTO_SCHEMA_NAME, SchemaTag
from ll_tlparse.decoder.single_schema import SingleSchemaDecoder
from ll_tlparse.decoder.tl_parse_input_error import TlParseInputError

__all__ = (
    "DecoderConfig",
    "DiagnosticReport",
    "build_exception",
    "build_parse_error",
    "build_unknown_schema",
    "DispatchResult",
    "SchemaDispatcher",
    "ENVELOPE_CONSTRUCTOR_ID",
    "EnvelopeCodec",
    "bytes_to_hex",
    "hex_to_bytes",
    "ConstructorIdentifier",
    "InvalidInputError",
    "InvalidParameterError",
    "ParseAttempt",
    "list_sample_constructors",
    "SchemaRegistry",
    "AUTO_SCHEMA_NAME",
    "SchemaTag",
    "SingleSchemaDecoder",
    "TlParseInputError",
)
