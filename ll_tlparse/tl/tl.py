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


import binascii
import functools
import re
import struct
import sys
import typing

from ll_tlparse.tl.byteutils import NativeByteReader, base64decode, base64encode, pack_binary_string, unpack_binary_string
from ll_tlparse.tl.tl_deserialization_error import TlDeserializationError
from ll_tlparse.typed import JsonObject, JsonValue

__all__ = (
    "Schema",
    "Value",
    "Parameter",
    "Constructor",
    "TlBodyData",
    "TlBodyDataValue",
    "compute_constructor_number",
    "VECTOR_CONSTRUCTOR_NUMBER",
    "BOOL_TRUE_CONSTRUCTOR_NUMBER",
    "BOOL_FALSE_CONSTRUCTOR_NUMBER",
)


def _normalize_combinator(definition: str) -> str:
    definition = definition.strip().rstrip(";")
    definition = definition.replace("{", "").replace("}", "")
    definition = definition.replace("<", " ").replace(">", "")
    return " ".join(definition.split())


@functools.lru_cache()
def compute_constructor_number(definition: str) -> int:
    """
    CRC32 of a combinator written without an explicit `#number`,
    e.g. `boolFalse = Bool;` gives 0xbc799737.
    """
    return binascii.crc32(_normalize_combinator(definition).encode("utf-8"))


VECTOR_CONSTRUCTOR_NUMBER: typing.Final[int] = compute_constructor_number("vector {t:Type} # [ t ] = Vector t;")
BOOL_TRUE_CONSTRUCTOR_NUMBER: typing.Final[int] = compute_constructor_number("boolTrue = Bool;")
BOOL_FALSE_CONSTRUCTOR_NUMBER: typing.Final[int] = compute_constructor_number("boolFalse = Bool;")

_VECTOR_NUMBER_BYTES = VECTOR_CONSTRUCTOR_NUMBER.to_bytes(4, "little", signed=False)
_BOOL_TRUE_NUMBER_BYTES = BOOL_TRUE_CONSTRUCTOR_NUMBER.to_bytes(4, "little", signed=False)
_BOOL_FALSE_NUMBER_BYTES = BOOL_FALSE_CONSTRUCTOR_NUMBER.to_bytes(4, "little", signed=False)


_primitives = frozenset(
    (
        "int",
        "uint",
        "int32",
        "int53",
        "long",
        "ulong",
        "int64",
        "int128",
        "int256",
        "double",
        "string",
        "bytes",
        "rawobject",
        "flags",
    )
)

_json_number_primitives = frozenset(("int", "uint", "int32", "int53"))

_json_string_primitives = frozenset(("long", "ulong", "int64"))

_json_base64_primitives = frozenset(("bytes", "int128", "int256", "rawobject"))

_schemaRE = re.compile(
    r"^(?P<empty>$)"
    r"|(?P<comment>//.*)"
    r"|(?P<typessection>---types---)"
    r"|(?P<functionssection>---functions---)"
    r"|(?P<vector>vector(#1cb5c415)? \{t:Type} # \[ t ] = Vector t;)"
    r"|(?P<cons>(?P<name>[a-zA-Z\d._]+)(#(?P<number>[a-f\d]{1,8}))?"
    r"(?P<xtype> \{X:Type})?"
    r"(?P<parameters>.*?)"
    r"(?(xtype) query:!X = X| = (?P<type>[a-zA-Z\d._<>]+));)"
    r"$"
)

_builtinRE = re.compile(
    r"^(?P<name>[a-z][a-zA-Z\d]*)( \?| \d+\*\[ \w+ ])? = [A-Z][a-zA-Z\d]*;$"
)

_parameterRE = re.compile(
    r"^(?P<name>\w+):"
    r"(flags(?P<flag_name>\d+)?\.(?P<flag_number>\d+)\?)?"
    r"(?P<type>[a-zA-Z\d._<>]+)$"
)

_flagRE = re.compile(
    r"^flags(?P<flag_name>\d+)?:#$"
)

_layerRE = re.compile(
    r"^// LAYER (?P<layer>\d+)$"
)

_vectorTypeRE = re.compile(
    r"^(?P<vector>[vV]ector)<(?P<element_type>.+)>$"
)


def _is_boxed_type_name(type_name: str) -> bool:
    return type_name.rsplit(".", 1)[-1][:1].isupper()


class Schema:
    __slots__ = ("constructors", "types", "cons_numbers", "function_numbers", "layer")

    constructors: typing.Final[dict[str, "Constructor"]]
    types: typing.Final[dict[str, set["Constructor"]]]
    cons_numbers: typing.Final[dict[bytes, "Constructor"]]
    function_numbers: typing.Final[dict[bytes, "Constructor"]]
    layer: int | None

    def __init__(self) -> None:
        self.constructors = dict()
        self.types = dict()
        self.cons_numbers = dict()
        self.function_numbers = dict()
        self.layer = None

    def __repr__(self) -> str:
        return "\n".join(repr(cons) for cons in self.constructors.values())

    def extend_from_raw_schema(self, schema: str) -> None:
        is_function = False

        for schema_line in schema.split("\n"):
            schema_line = schema_line.strip()

            if schema_line == "---types---":
                is_function = False

            if schema_line == "---functions---":
                is_function = True

            self._parse_line(schema_line, is_function)

    @staticmethod
    def _parse_token(regex: re.Pattern[str], s: str) -> None | dict[str, str]:
        match = regex.match(s)

        if not match:
            return None
        else:
            return {k: v for k, v in match.groupdict().items() if v is not None}

    @staticmethod
    def _build_type_parameter(pname: str, ptype: str, **kwargs: typing.Any) -> "Parameter":
        vector_parsed = Schema._parse_token(_vectorTypeRE, ptype)

        if vector_parsed is None:
            if ptype in _primitives or ptype == "true":
                is_boxed = False
            else:
                is_boxed = _is_boxed_type_name(ptype)

            return Parameter(pname=pname, ptype=sys.intern(ptype), is_boxed=is_boxed, **kwargs)

        element_parameter = Schema._build_type_parameter(
            f"<element of vector `{pname}`>",
            vector_parsed["element_type"]
        )

        return Parameter(
            pname=pname,
            ptype=sys.intern(ptype),
            is_boxed=vector_parsed["vector"] == "Vector",
            is_vector=True,
            element_parameter=element_parameter,
            **kwargs
        )

    def _parse_line(self, line: str, is_function: bool) -> None:
        builtin_parsed = self._parse_token(_builtinRE, line)

        if builtin_parsed and builtin_parsed["name"] in _primitives:
            return

        cons_parsed = self._parse_token(_schemaRE, line)

        if not cons_parsed:
            raise SyntaxError(f"Error in schema: `{line}`")

        if "cons" not in cons_parsed:
            layer_parsed = self._parse_token(_layerRE, line)

            if layer_parsed and "layer" in layer_parsed:
                self.layer = int(layer_parsed["layer"])

            return

        parameter_tokens: list[str] = cons_parsed["parameters"].split()
        parameters = []

        if "number" in cons_parsed:
            cons_number_int = int(cons_parsed["number"], base=16)
        else:
            cons_number_int = compute_constructor_number(line)

        cons_number = cons_number_int.to_bytes(4, "little", signed=False)

        for parameter_token in parameter_tokens:
            flag_parsed = self._parse_token(_flagRE, parameter_token)

            if flag_parsed is not None:
                parameters.append(
                    Parameter(
                        pname=parameter_token[:-2],
                        ptype="flags",
                        is_boxed=False,
                        is_flag=True,
                        flag_name=int(flag_parsed.get("flag_name", 0))
                    )
                )
                continue

            parameter_parsed = self._parse_token(_parameterRE, parameter_token)

            if parameter_parsed is None:
                raise SyntaxError(f"Error in parameter `{parameter_token}` of `{line}`")

            flag_number = int(parameter_parsed["flag_number"]) if "flag_number" in parameter_parsed else None

            parameters.append(
                self._build_type_parameter(
                    sys.intern(parameter_parsed["name"]),
                    parameter_parsed["type"],
                    flag_number=flag_number,
                    flag_name=int(parameter_parsed.get("flag_name", 0)) if flag_number is not None else None
                )
            )

        if "xtype" in cons_parsed:
            parameters.append(Parameter(pname="query", ptype="rawobject", is_boxed=False))

        ptype = None if "xtype" in cons_parsed else cons_parsed["type"]

        cons = Constructor(
            schema=self,
            ptype=ptype,
            name=sys.intern(cons_parsed["name"]),
            number=cons_number,
            parameters=tuple(parameters),
            flags=set(p.flag_name for p in parameters if p.is_flag and p.flag_name is not None) or None,
            is_function=is_function
        )

        self.constructors[cons.name] = cons

        if is_function:
            self.function_numbers[cons_number] = cons
        else:
            self.cons_numbers[cons_number] = cons

            if ptype is not None:
                self.types.setdefault(ptype, set()).add(cons)

    def fetch(self, reader: NativeByteReader) -> "TlBodyData":
        """
        Reads one boxed type constructor from `reader`.

        Function constructors are never matched, trailing bytes are left unread.
        """
        cons_number = reader(4)
        cons = self.cons_numbers.get(cons_number, None)

        if cons is None:
            raise TlDeserializationError(f"Unknown constructor 0x{int.from_bytes(cons_number, 'little'):08x}")

        return cons.deserialize_bare_data(reader)

    def deserialize_primitive(self, reader: NativeByteReader, parameter: "Parameter") -> "TlBodyDataValue":
        match parameter.type:
            case "int" | "int32":
                return int.from_bytes(reader(4), "little", signed=True)

            case "uint":
                return int.from_bytes(reader(4), "little", signed=False)

            case "long" | "int53" | "int64":
                return int.from_bytes(reader(8), "little", signed=True)

            case "ulong":
                return int.from_bytes(reader(8), "little", signed=False)

            case "int128":
                return reader(16)

            case "int256":
                return reader(32)

            case "double":
                return typing.cast(float, struct.unpack(b"<d", reader(8))[0])

            case "string":
                try:
                    return unpack_binary_string(reader).decode("utf-8")
                except UnicodeDecodeError as unicode_error:
                    raise TlDeserializationError("Strings must be encoded in UTF-8") from unicode_error

            case "bytes":
                return unpack_binary_string(reader)

            case "rawobject":
                return reader(-1)

            case "flags":
                raise TypeError(f"Cannot deserialize flags directly {parameter!r}")

            case _:
                raise TypeError(f"Unknown primitive type {parameter!r}")

    def _deserialize_vector(self, reader: NativeByteReader, parameter: "Parameter") -> list["TlBodyDataValue"]:
        element_parameter = parameter.element_parameter

        if element_parameter is None:
            raise TypeError(f"Unknown vector parameter type {parameter!r}")

        count = int.from_bytes(reader(4), "little", signed=True)

        if count < 0 or count > reader.remaining() // 4:
            raise TlDeserializationError(f"Wrong vector length {count:d}")

        return [self.deserialize(reader, element_parameter) for _ in range(count)]

    def deserialize(self, reader: NativeByteReader, parameter: "Parameter") -> "TlBodyDataValue":
        if parameter.type == "true":
            return True

        if parameter.is_primitive:
            return self.deserialize_primitive(reader, parameter)

        if parameter.is_vector:
            if parameter.is_boxed:
                cons_number = reader(4)

                if cons_number != _VECTOR_NUMBER_BYTES:
                    raise TlDeserializationError(f"Wrong vector constructor 0x{int.from_bytes(cons_number, 'little'):08x}")

            return self._deserialize_vector(reader, parameter)

        if parameter.type == "Bool":
            cons_number = reader(4)

            if cons_number == _BOOL_TRUE_NUMBER_BYTES:
                return True

            if cons_number == _BOOL_FALSE_NUMBER_BYTES:
                return False

            raise TlDeserializationError("Wrong Bool constructor")

        if parameter.is_boxed:
            cons = self.cons_numbers.get(cons_number := reader(4), None)

            if cons is None:
                raise TlDeserializationError(f"Unknown constructor 0x{int.from_bytes(cons_number, 'little'):08x}")

            if parameter.type != "Object" and cons not in self.types.get(typing.cast(str, parameter.type), ()):
                raise TlDeserializationError(f"Wrong constructor {cons.name} for type {parameter.type}")

            return cons.deserialize_bare_data(reader)

        parameter_type = parameter.type

        if parameter_type is None:
            raise TypeError(f"Unknown type for bare constructor {parameter!r}")

        cons = self.constructors.get(parameter_type, None)

        if not cons:
            raise TypeError(f"Unknown constructor in parameter `{parameter!r}`")

        return cons.deserialize_bare_data(reader)

    def to_json(self, body: "TlBodyData") -> JsonObject:
        cons = self.constructors.get(typing.cast(str, body["_cons"]), None)

        if cons is None:
            raise TypeError(f"Constructor `{body['_cons']}` not present in schema.")

        result: JsonObject = {"@type": cons.name}

        for parameter in cons.parameters:
            if parameter.is_flag:
                continue

            value = body.get(parameter.name)

            if value is None:
                continue

            result[parameter.name] = self.value_to_json(parameter, value)

        return result

    def value_to_json(self, parameter: "Parameter", value: "TlBodyDataValue") -> JsonValue:
        if parameter.is_vector:
            element_parameter = typing.cast(Parameter, parameter.element_parameter)
            return [self.value_to_json(element_parameter, element) for element in typing.cast(list[TlBodyDataValue], value)]

        if isinstance(value, bool):
            return value

        if isinstance(value, dict):
            return self.to_json(value)

        match parameter.type:
            case ptype if ptype in _json_number_primitives:
                return typing.cast(int, value)

            case ptype if ptype in _json_string_primitives:
                return str(value)

            case ptype if ptype in _json_base64_primitives:
                return base64encode(typing.cast(bytes, value))

            case "double":
                return float(typing.cast(float, value))

            case "string":
                return typing.cast(str, value)

            case _:
                raise TypeError(f"Cannot render `{value!r}` as `{parameter!r}`")

    def serialize(self, boxed: bool, cons_name: str, body: "TlBodyData") -> "Value":
        if cons := self.constructors.get(cons_name, None):
            return cons.serialize(boxed, body)
        else:
            raise NotImplementedError(f"Constructor `{cons_name}` not present in schema.")

    def bare(self, body: "TlBodyData") -> "Value":
        return self.serialize(False, _extract_cons_name(body), body)

    def boxed(self, body: "TlBodyData") -> "Value":
        return self.serialize(True, _extract_cons_name(body), body)


def _extract_cons_name(body: "TlBodyData") -> str:
    cons_name = body.get("_cons", body.get("@type"))

    if not isinstance(cons_name, str):
        raise TypeError(f"Missing constructor name in `{body!r}`")

    return cons_name


class Flags:
    __slots__ = ("_flags",)

    _flags: int

    def __init__(self) -> None:
        self._flags = 0

    def add_flag(self, flag: int) -> None:
        self._flags |= 1 << flag

    def get_flat_bytes(self) -> bytes:
        return self._flags.to_bytes(4, "little", signed=False)


class Value:
    __slots__ = ("cons", "boxed", "flags", "buffers")

    cons: typing.Final["Constructor"]
    boxed: typing.Final[bool]
    buffers: typing.Final[list["bytes | Flags"]]
    flags: typing.Final[dict[int, Flags] | None]

    def __init__(self, cons: "Constructor", boxed: bool = False):
        self.cons = cons
        self.boxed = boxed
        self.flags = dict((flag_name, Flags()) for flag_name in cons.flags) if cons.flags else None
        self.buffers = [cons.number] if boxed else []

    def set_flag(self, flag_number: int, flag_name: int) -> None:
        if (flags := self.flags) is None:
            raise TypeError(f"Tried to set flag for a flagless Value `{self.cons!r}`")
        else:
            flags[flag_name].add_flag(flag_number)

    def append_serializable_flag(self, flag_name: int) -> None:
        if (flags := self.flags) is None:
            raise TypeError(f"Tried to append flag to data for a flagless Value `{self.cons!r}`")
        else:
            self.buffers.append(flags[flag_name])

    def append_serialized_tl(self, data: typing.Union["Value", bytes]) -> None:
        if isinstance(data, bytes):
            self.buffers.append(data)
        else:
            self.buffers.extend(data.buffers)

    def __repr__(self) -> str:
        return f'{"boxed" if self.boxed else "bare"}({self.cons!r})'

    def get_flat_bytes(self) -> bytes:
        return b"".join(map(lambda k: k.get_flat_bytes() if isinstance(k, Flags) else k, self.buffers))


class Parameter:
    __slots__ = ("name", "type", "flag_number", "is_vector", "is_boxed", "element_parameter", "is_flag", "flag_name", "is_primitive", "required")

    name: typing.Final[str]
    type: typing.Final[str | None]
    flag_number: typing.Final[int | None]
    flag_name: typing.Final[int | None]
    is_vector: typing.Final[bool]
    is_boxed: typing.Final[bool]
    is_flag: typing.Final[bool]
    element_parameter: typing.Final["Parameter | None"]
    is_primitive: typing.Final[bool]
    required: typing.Final[bool]

    def __init__(
            self,
            pname: str,
            ptype: str | None,
            is_boxed: bool,
            flag_number: int | None = None,
            is_vector: bool = False,
            is_flag: bool = False,
            flag_name: int | None = None,
            element_parameter: "Parameter | None" = None,
    ):
        self.name = pname
        self.type = ptype
        self.flag_number = flag_number
        self.is_vector = is_vector
        self.is_boxed = is_boxed
        self.element_parameter = element_parameter
        self.is_flag = is_flag
        self.flag_name = flag_name
        self.is_primitive = ptype in _primitives
        self.required = flag_number is None

    def __repr__(self) -> str:
        if self.flag_number is not None:
            return f"{self.name}:flags{self.flag_name or ''}.{self.flag_number:d}?{self.type}"
        else:
            return f"{self.name}:{self.type}"


class Constructor:
    __slots__ = (
        "schema",
        "ptype",
        "name",
        "number",
        "parameters",
        "flags",
        "is_function",
        "flags_check_table",
        "deserialization_default_dict"
    )

    schema: typing.Final[Schema]
    ptype: typing.Final[str | None]
    name: typing.Final[str]
    number: typing.Final[bytes]
    flags: typing.Final[frozenset[int] | None]
    parameters: typing.Final[tuple[Parameter, ...]]
    is_function: typing.Final[bool]
    flags_check_table: typing.Final[tuple[tuple[int, int, frozenset[str], int], ...]]
    deserialization_default_dict: typing.Final["TlBodyData"]

    def __init__(
            self,
            schema: Schema,
            ptype: str | None,
            name: str,
            number: bytes,
            parameters: tuple[Parameter, ...],
            flags: set[int] | None,
            is_function: bool
    ):
        self.schema = schema
        self.name = name
        self.number = number
        self.ptype = ptype
        self.parameters = parameters
        self.flags = None if flags is None else frozenset(flags)
        self.is_function = is_function
        self.flags_check_table = self._generate_flags_check_table(parameters)
        self.deserialization_default_dict = self._generate_deserialization_default_dict(parameters, name)

    @property
    def number_int(self) -> int:
        return int.from_bytes(self.number, "little", signed=False)

    @staticmethod
    def _generate_deserialization_default_dict(parameters: tuple[Parameter, ...], name: str) -> "TlBodyData":
        elements: list[tuple[str, TlBodyDataValue]] = []
        elements.extend((p.name, None) for p in parameters if not p.is_flag)
        elements.append(("_cons", name))
        return dict(elements)

    @staticmethod
    def _generate_flags_check_table(parameters: tuple[Parameter, ...]) -> tuple[tuple[int, int, frozenset[str], int], ...]:
        table: dict[tuple[int, int], set[str]] = dict()

        for parameter in parameters:
            if parameter.flag_number is not None and parameter.flag_name is not None and parameter.type != "true":
                table.setdefault((parameter.flag_name, parameter.flag_number), set()).add(parameter.name)

        return tuple((k[0], k[1], frozenset(v), len(v)) for k, v in table.items())

    def __repr__(self) -> str:
        return f"{self.name}#{self.number_int:08x} {' '.join(repr(p) for p in self.parameters)} = {self.ptype};"

    def _serialize_argument(self, data: Value, parameter: Parameter, argument: "TlBodyDataValue") -> None:
        if parameter.type == "true":
            if argument and parameter.flag_number is not None and parameter.flag_name is not None:
                data.set_flag(parameter.flag_number, parameter.flag_name)

            return

        if parameter.flag_number is not None and parameter.flag_name is not None:
            data.set_flag(parameter.flag_number, parameter.flag_name)

        if parameter.is_vector:
            if parameter.is_boxed:
                data.append_serialized_tl(_VECTOR_NUMBER_BYTES)

            if not isinstance(argument, list):
                raise TypeError(f"Expected a list for parameter `{parameter!r}` but found `{argument!r}`")

            data.append_serialized_tl(len(argument).to_bytes(4, "little", signed=False))

            element_parameter = parameter.element_parameter

            if element_parameter is None:
                raise TypeError(f"Unknown vector parameter type {parameter!r}")

            for element_argument in argument:
                self._serialize_argument(data, element_parameter, element_argument)

            return

        if parameter.type == "Bool":
            if not isinstance(argument, bool):
                raise TypeError(f"Expected a bool for parameter `{parameter!r}` but found `{argument!r}`")

            data.append_serialized_tl(_BOOL_TRUE_NUMBER_BYTES if argument else _BOOL_FALSE_NUMBER_BYTES)
            return

        if parameter.is_primitive:
            data.append_serialized_tl(self._serialize_primitive(parameter, argument))
            return

        if not isinstance(argument, dict):
            raise TypeError(f"For parameter {parameter!r} expected an object, but found `{argument!r}`")

        cons_name = _extract_cons_name(argument)
        cons = self.schema.constructors.get(cons_name, None)

        if cons is None:
            raise TypeError(f"Constructor `{cons_name}` not present in schema.")

        if parameter.is_boxed:
            if parameter.type != "Object" and cons.ptype != parameter.type:
                raise TypeError(f"type mismatch, constructor `{cons.name}` not in type `{parameter.type}`")
        elif cons.name != parameter.type:
            raise TypeError(f"wrong constructor, expected `{parameter.type}` found `{cons.name}`")

        data.append_serialized_tl(cons.serialize(parameter.is_boxed, argument))

    @staticmethod
    def _serialize_primitive(parameter: Parameter, argument: "TlBodyDataValue") -> bytes:
        if isinstance(argument, str) and parameter.type in ("long", "ulong", "int53", "int64"):
            argument = int(argument)

        if isinstance(argument, str) and parameter.type in _json_base64_primitives:
            argument = base64decode(argument)

        if isinstance(argument, str):
            argument = argument.encode("utf-8")

        if isinstance(argument, bool):
            raise TypeError(f"Cannot serialize python bool `{argument!r}` as `{parameter!r}`")

        if isinstance(argument, int):
            match parameter.type:
                case "int" | "int32":
                    return argument.to_bytes(4, "little", signed=True)

                case "uint":
                    return argument.to_bytes(4, "little", signed=False)

                case "long" | "int53" | "int64":
                    return argument.to_bytes(8, "little", signed=True)

                case "ulong":
                    return argument.to_bytes(8, "little", signed=False)

                case "double":
                    return struct.pack(b"<d", float(argument))

                case _:
                    raise TypeError(f"Cannot serialize python integer `{argument!r}` as `{parameter!r}`")

        if isinstance(argument, float):
            if parameter.type != "double":
                raise TypeError(f"Cannot serialize python float `{argument!r}` as `{parameter!r}`")

            return struct.pack(b"<d", argument)

        if isinstance(argument, bytes):
            match parameter.type:
                case "int128" if len(argument) == 16:
                    return argument

                case "int256" if len(argument) == 32:
                    return argument

                case "rawobject":
                    return argument

                case "string" | "bytes":
                    return pack_binary_string(argument)

                case _:
                    raise TypeError(f"Cannot serialize python bytes `{argument!r}` as `{parameter!r}`")

        raise TypeError(f"Unknown primitive type `{parameter!r}` `{argument!r}`")

    def serialize(self, boxed: bool, body: "TlBodyData") -> Value:
        for flag_name, flag_number, parameters, parameters_len in self.flags_check_table:
            present = {p for p in parameters if body.get(p) is not None}

            if len(present) == 0 or len(present) == parameters_len:
                continue

            raise TypeError(f"Missing parameters `{parameters - present!r}` in `{self.name}` for flag `flags{flag_name or ''}.{flag_number}`")

        data = Value(self, boxed=boxed)

        for parameter in self.parameters:
            if parameter.is_flag:
                flag_name = parameter.flag_name

                if flag_name is None:
                    raise TypeError(f"Unknown flag name for parameter `{parameter!r}`")

                data.append_serializable_flag(flag_name)

            else:
                argument = body.get(parameter.name)

                if argument is None:
                    if parameter.required and parameter.type != "true":
                        raise TypeError(f"required `{parameter}` is missing in `{self.name}`")
                else:
                    self._serialize_argument(data, parameter, argument)

        return data

    def deserialize_bare_data(self, reader: NativeByteReader) -> "TlBodyData":
        fields = self.deserialization_default_dict.copy()
        flags: dict[int, int] = {}

        for parameter in self.parameters:
            if parameter.is_flag:
                flags[typing.cast(int, parameter.flag_name)] = int.from_bytes(reader(4), "little", signed=False)

            elif parameter.required:
                fields[parameter.name] = self.schema.deserialize(reader, parameter)

            else:
                flag_word = flags.get(typing.cast(int, parameter.flag_name), None)

                if flag_word is None:
                    raise TypeError(f"Flag word read after parameter `{parameter!r}` in `{self.name}`")

                if flag_word & (1 << typing.cast(int, parameter.flag_number)):
                    fields[parameter.name] = self.schema.deserialize(reader, parameter)

        return fields


TlBodyDataValue = typing.Union[
    bytes,
    str,
    int,
    float,
    bool,
    typing.List['TlBodyDataValue'],
    typing.Dict[str, 'TlBodyDataValue'],
    'TlBodyData',
    None,
    Value
]

TlBodyData = typing.Dict[str, TlBodyDataValue]
