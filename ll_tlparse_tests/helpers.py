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



import gzip

from ll_tlparse.constants import DefaultSchemas
from ll_tlparse.decoder.envelope import ENVELOPE_CONSTRUCTOR_ID
from ll_tlparse.tl.byteutils import pack_binary_string
from ll_tlparse.tl.tl import TlBodyData

__all__ = ("pack_envelope", "telegram_bytes", "td_bytes", "mtproto_bytes", "PEER_USER_42", "TELEGRAM_RAW", "TD_RAW", "MTPROTO_RAW")


def pack_envelope(payload: bytes) -> bytes:
    return ENVELOPE_CONSTRUCTOR_ID.to_bytes(4, "little", signed=False) + pack_binary_string(gzip.compress(payload))


def telegram_bytes(body: TlBodyData) -> bytes:
    return DefaultSchemas.TELEGRAM_API.boxed(body).get_flat_bytes()


def td_bytes(body: TlBodyData) -> bytes:
    return DefaultSchemas.TD_API.boxed(body).get_flat_bytes()


def mtproto_bytes(body: TlBodyData) -> bytes:
    return DefaultSchemas.MTPROTO_API.boxed(body).get_flat_bytes()


PEER_USER_42 = bytes.fromhex("221751592a00000000000000")

TELEGRAM_RAW = """
boolFalse#bc799737 = Bool;
boolTrue#997275b5 = Bool;
shared#0000abcd value:int = Shared;
broken#00000001 value:missingType = Broken;
"""

TD_RAW = """
boolFalse = Bool;
boolTrue = Bool;
shared#0000abcd value:int = Shared;
tdOnly#0000beef value:int53 = TdOnly;
tdBroken#0000dead value:missingType = TdBroken;
"""

MTPROTO_RAW = """
broken#00000001 value:int = Broken;
mtBroken#0000dead value:missingType = MtBroken;
"""
