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


__all__ = ("SAMPLE_CONSTRUCTORS", "list_sample_constructors")


SAMPLE_CONSTRUCTORS: tuple[tuple[str, tuple[tuple[int, str], ...]], ...] = (
    ("User/Chat types", (
        (0x50ab6179, "userEmpty"),
        (0x020b1422, "user"),
        (0x3e11acec, "userProfilePhotoEmpty"),
        (0x80f50a21, "userProfilePhoto"),
        (0x09db1bc6, "userStatusEmpty"),
        (0x066afa37, "userStatusOnline"),
        (0x008c703f, "userStatusOffline"),
        (0x29fccb83, "chatEmpty"),
        (0xc69f59e1, "chat"),
        (0xab65ea03, "chatForbidden"),
        (0x7bff875a, "channel"),
        (0xc7d38976, "channelForbidden"),
    )),
    ("Message types", (
        (0x83e5de54, "messageEmpty"),
        (0xe1ba5797, "message"),
        (0xbe7e8ef3, "messageService"),
    )),
    ("Media types", (
        (0x3ded6320, "messageMediaEmpty"),
        (0x695b0f8f, "messageMediaPhoto"),
        (0x56e0d474, "messageMediaGeo"),
        (0xb8c12661, "messageMediaContact"),
        (0xc52d939d, "messageMediaDocument"),
    )),
    ("Update types", (
        (0x1f2b3476, "updateNewMessage"),
        (0x62ba04d9, "updateMessageID"),
        (0xd17f3a90, "updateDeleteMessages"),
        (0xb67cb1ed, "updateUserTyping"),
        (0x40f04453, "updateChatUserTyping"),
        (0x55f65e94, "updateChatParticipants"),
        (0x07761198, "updateUserStatus"),
        (0x8e5e9873, "updateUserName"),
    )),
    ("Auth types", (
        (0x05162463, "resPQ"),
        (0xf35c6d01, "rpc_result"),
        (0x2144ca19, "rpc_error"),
    )),
    ("Container types", (
        (0x1cb5c415, "vector"),
        (0x3072cfa1, "gzip_packed"),
        (0x73f1f8dc, "msg_container"),
    )),
)


def list_sample_constructors() -> str:
    lines = ["Common telegram_api constructors (subset):", ""]

    for section, constructors in SAMPLE_CONSTRUCTORS:
        lines.append(f"{section}:")
        lines.extend(f"  0x{number:08x} - {name}" for number, name in constructors)
        lines.append("")

    lines.append("Note: TDLib supports ALL telegram_api constructors (1000+ types).")
    lines.append("This is just a small sample. Use identify_constructor() to identify any constructor.")

    return "\n".join(lines) + "\n"
