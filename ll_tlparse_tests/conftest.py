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



import pytest

from ll_tlparse import DecoderConfig, SchemaRegistry, TlDecoder
from ll_tlparse_tests.helpers import MTPROTO_RAW, TD_RAW, TELEGRAM_RAW


@pytest.fixture
def decoder() -> TlDecoder:
    return TlDecoder()


@pytest.fixture
def custom_registry() -> SchemaRegistry:
    return SchemaRegistry.from_raw(telegram_api=TELEGRAM_RAW, td_api=TD_RAW, mtproto_api=MTPROTO_RAW)


@pytest.fixture
def custom_decoder(custom_registry: SchemaRegistry) -> TlDecoder:
    return TlDecoder(custom_registry, DecoderConfig())
