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


import argparse
import json
import logging
import sys
import typing

from ll_tlparse.decoder.hex_codec import bytes_to_hex, hex_to_bytes
from ll_tlparse.decoder.schema_registry import SchemaRegistry
from ll_tlparse.decoder.schema_tag import AUTO_SCHEMA_NAME
from ll_tlparse.decoder.tl_parse_input_error import TlParseInputError
from ll_tlparse.tl_decoder import TlDecoder
from ll_tlparse.typed import JsonValue

__all__ = ("main",)


_INPUT_ERROR_EXIT_CODE = 2


def _read_input(args: argparse.Namespace) -> bytes:
    if args.hex is not None:
        return hex_to_bytes(args.hex)

    if args.file is not None:
        with open(args.file, "rb") as input_file:
            return input_file.read()

    return sys.stdin.buffer.read()


def _print_json(value: JsonValue, indent: int | None) -> None:
    print(json.dumps(value, indent=indent, ensure_ascii=False))


def _command_decode(decoder: TlDecoder, args: argparse.Namespace) -> int:
    if args.hex is not None:
        result = decoder.decode_hex_with_schema(args.hex, args.schema)
    elif args.schema == AUTO_SCHEMA_NAME:
        result = decoder.decode_auto(_read_input(args))
    else:
        tag = decoder.parse_schema_name(args.schema)
        result = decoder.decode(_read_input(args), tag)

    _print_json(result, args.indent)
    return 0


def _command_identify(decoder: TlDecoder, args: argparse.Namespace) -> int:
    print(decoder.identify_constructor(_read_input(args)))
    return 0


def _command_constructors(decoder: TlDecoder, _: argparse.Namespace) -> int:
    sys.stdout.write(decoder.list_sample_constructors())
    return 0


def _command_version(decoder: TlDecoder, args: argparse.Namespace) -> int:
    _print_json(decoder.version(), args.indent)
    return 0


def _command_encode(decoder: TlDecoder, args: argparse.Namespace) -> int:
    tag = decoder.parse_schema_name(args.schema, allow_auto=False)

    if args.json is not None:
        raw_body = args.json
    elif args.file is not None:
        with open(args.file, encoding="utf-8") as input_file:
            raw_body = input_file.read()
    else:
        raw_body = sys.stdin.read()

    try:
        body = json.loads(raw_body)

        if not isinstance(body, dict):
            raise TypeError(f"Expected a JSON object, found `{type(body).__name__}`")

        encoded = decoder.encode(body, tag, boxed=not args.bare)
    except (TypeError, ValueError, OverflowError, NotImplementedError) as encode_error:
        print(f"unable to encode: {encode_error}", file=sys.stderr)
        return _INPUT_ERROR_EXIT_CODE

    print(bytes_to_hex(encoded))
    return 0


def _add_input_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--hex", type=str, default=None, help="Input as a hex string.")
    group.add_argument("--file", type=str, default=None, help="Read raw input bytes from a file.")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ll-tlparse", description="Decode Telegram TL buffers into JSON.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--schema-dir", type=str, default=None, help="Directory with telegram_api.tl, td_api.tl and mtproto_api.tl.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser("decode", help="Decode a buffer, reading stdin when no input is given.")
    decode_parser.add_argument("--schema", type=str, default=AUTO_SCHEMA_NAME, help="telegram_api, td_api, mtproto_api or auto.")
    decode_parser.add_argument("--indent", type=int, default=2, help="JSON indentation.")
    _add_input_arguments(decode_parser)
    decode_parser.set_defaults(handler=_command_decode)

    identify_parser = subparsers.add_parser("identify", help="Identify the constructor of a buffer.")
    _add_input_arguments(identify_parser)
    identify_parser.set_defaults(handler=_command_identify)

    constructors_parser = subparsers.add_parser("constructors", help="List common telegram_api constructors.")
    constructors_parser.set_defaults(handler=_command_constructors)

    version_parser = subparsers.add_parser("version", help="Show version and capabilities.")
    version_parser.add_argument("--indent", type=int, default=2, help="JSON indentation.")
    version_parser.set_defaults(handler=_command_version)

    encode_parser = subparsers.add_parser("encode", help="Serialize a JSON object and print it as hex.")
    encode_parser.add_argument("--schema", type=str, default="telegram_api", help="telegram_api, td_api or mtproto_api.")
    encode_parser.add_argument("--bare", action="store_true", help="Omit the constructor number.")
    encode_input = encode_parser.add_mutually_exclusive_group()
    encode_input.add_argument("--json", type=str, default=None, help="Object to encode, e.g. '{\"_cons\": \"peerUser\", \"user_id\": 42}'.")
    encode_input.add_argument("--file", type=str, default=None, help="Read the JSON object from a file.")
    encode_parser.set_defaults(handler=_command_encode)

    return parser


def main(argv: typing.Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig()

    if args.verbose:
        logging.getLogger().setLevel(level=logging.DEBUG)

    try:
        registry = None if args.schema_dir is None else SchemaRegistry.from_directory(args.schema_dir)
    except (OSError, SyntaxError) as schema_error:
        print(f"unable to load schemas: {schema_error}", file=sys.stderr)
        return _INPUT_ERROR_EXIT_CODE

    decoder = TlDecoder(registry)

    try:
        return typing.cast(int, args.handler(decoder, args))
    except TlParseInputError as input_error:
        print(input_error.message, file=sys.stderr)
        return _INPUT_ERROR_EXIT_CODE
    except OSError as read_error:
        print(f"unable to read input: {read_error}", file=sys.stderr)
        return _INPUT_ERROR_EXIT_CODE


if __name__ == "__main__":
    sys.exit(main())
