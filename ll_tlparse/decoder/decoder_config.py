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


__all__ = ("DecoderConfig",)


class DecoderConfig:
    __slots__ = (
        "telegram_preview_size",
        "auto_preview_size",
        "decompress_chunk_size",
        "max_decompressed_size",
        "allow_envelope_retry"
    )

    telegram_preview_size: int
    auto_preview_size: int
    decompress_chunk_size: int
    max_decompressed_size: int
    allow_envelope_retry: bool

    def __init__(
            self,
            *,
            telegram_preview_size: int = 64,
            auto_preview_size: int = 32,
            decompress_chunk_size: int = 4096,
            max_decompressed_size: int = 64 * 1024 * 1024,
            allow_envelope_retry: bool = True
    ):
        if telegram_preview_size < 0 or auto_preview_size < 0:
            raise ValueError("Preview sizes must not be negative")

        if decompress_chunk_size <= 0:
            raise ValueError(f"Invalid decompress chunk size {decompress_chunk_size!r}")

        if max_decompressed_size <= 0:
            raise ValueError(f"Invalid max decompressed size {max_decompressed_size!r}")

        self.telegram_preview_size = telegram_preview_size
        self.auto_preview_size = auto_preview_size
        self.decompress_chunk_size = decompress_chunk_size
        self.max_decompressed_size = max_decompressed_size
        self.allow_envelope_retry = allow_envelope_retry

    def __repr__(self) -> str:
        return (
            f"DecoderConfig(telegram_preview_size={self.telegram_preview_size}, "
            f"auto_preview_size={self.auto_preview_size}, "
            f"decompress_chunk_size={self.decompress_chunk_size}, "
            f"max_decompressed_size={self.max_decompressed_size}, "
            f"allow_envelope_retry={self.allow_envelope_retry})"
        )
