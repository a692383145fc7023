"""Type-system and document definitions for GraphQL schemas and queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar


@dataclass(frozen=True, order=False)
class Location:
    """A line/column position in a GraphQL source text."""

    line: int = 0
    column: int = 0

    def before(self, other: Location) -> bool:
        """Return True if this location comes before ``other``."""
        return self.line < other.line or (
            self.line == other.line and self.column < other.column
        )

    def __str__(self) -> str:
        return f"({self.line}:{self.column})"


class QueryError(Exception):
    """An error found while parsing, validating or executing a query."""

    def __init__(
        self,
        message: str,
        locations: list[Location] | None = None,
        rule: str = "",
        path: list[Any] | None = None,
        resolver_error: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.locations = list(locations) if locations else []
        self.rule = rule
        self.path = list(path) if path else []
        self.resolver_error = resolver_error

    def __str__(self) -> str:
        text = "graphql: " + self.message
        for loc in self.locations:
            text += f" (line {loc.line}, column {loc.column})"
        return text

    def __repr__(self) -> str:
        return (
            f"QueryError(message={self.message!r}, locations={self.locations!r}, "
            f"rule={self.rule!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryError):
            return NotImplemented
        return (
            self.message == other.message
            and self.locations == other.locations
            and self.rule == other.rule
            and self.path == other.path
        )

    __hash__ = Exception.__hash__


@dataclass(frozen=True)
class Ident:
    """A name together with the place it was written."""

    name: str
    loc: Location = Location()


# --------------------------------------------------------------------------
# Literal values
# --------------------------------------------------------------------------


class LiteralKind(Enum):
    """Lexical kind of a primitive literal."""

    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    IDENT = "Ident"


_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}
_HEX_WIDTH = {"x": 2, "u": 4, "U": 8}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _unquote(text: str) -> str:
    if len(text) < 2 or text[0] != text[-1]:
        raise ValueError(f"invalid string literal: {text}")
    quote, body = text[0], text[1:-1]
    if quote == "`":
        if "`" in body:
            raise ValueError(f"invalid string literal: {text}")
        return body.replace("\r", "")
    if quote != '"':
        raise ValueError(f"invalid string literal: {text}")

    out: list[str] = []
    pos = 0
    while pos < len(body):
        ch = body[pos]
        if ch in ('"', "\n"):
            raise ValueError(f"invalid string literal: {text}")
        if ch != "\\":
            out.append(ch)
            pos += 1
            continue
        pos += 1
        if pos >= len(body):
            raise ValueError(f"invalid string literal: {text}")
        esc = body[pos]
        if esc in _SIMPLE_ESCAPES:
            out.append(_SIMPLE_ESCAPES[esc])
            pos += 1
        elif esc in _HEX_WIDTH:
            width = _HEX_WIDTH[esc]
            digits = body[pos + 1 : pos + 1 + width]
            if len(digits) != width or not set(digits) <= _HEX_DIGITS:
                raise ValueError(f"invalid string literal: {text}")
            code = int(digits, 16)
            if code > 0x10FFFF:
                raise ValueError(f"invalid string literal: {text}")
            out.append(chr(code))
            pos += 1 + width
        elif esc in "01234567":
            digits = body[pos : pos + 3]
            if len(digits) != 3 or not set(digits) <= set("01234567"):
                raise ValueError(f"invalid string literal: {text}")
            code = int(digits, 8)
            if code > 255:
                raise ValueError(f"invalid string literal: {text}")
            out.append(chr(code))
            pos += 3
        else:
            raise ValueError(f"invalid string literal: {text}")
    return "".join(out)


_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass(eq=False)
class PrimitiveValue:
    """An Int, Float, String, Boolean or enum literal."""

    type: LiteralKind
    text: str
    loc: Location = Location()

    def deserialize(self, variables: dict[str, Any] | None = None) -> Any:
        """Convert the literal text into a Python value."""
        if self.type is LiteralKind.INT:
            value = int(self.text, 10)
            if not _INT32_MIN <= value <= _INT32_MAX:
                raise ValueError(f"value out of range: {self.text}")
            return value
        if self.type is LiteralKind.FLOAT:
            return float(self.text)
        if self.type is LiteralKind.STRING:
            return _unquote(self.text)
        if self.type is LiteralKind.IDENT:
            if self.text == "true":
                return True
            if self.text == "false":
                return False
            return self.text
        raise ValueError("invalid literal value")

    def __str__(self) -> str:
        return self.text


@dataclass(eq=False)
class ListValue:
    """A literal list."""

    values: list[Value] = field(default_factory=list)
    loc: Location = Location()

    def deserialize(self, variables: dict[str, Any] | None = None) -> list[Any]:
        """Deserialize every entry."""
        return [entry.deserialize(variables) for entry in self.values]

    def __str__(self) -> str:
        return "[" + ", ".join(str(entry) for entry in self.values) + "]"


@dataclass(eq=False)
class ObjectField:
    """A name/value pair inside a literal object."""

    name: Ident
    value: Value


@dataclass(eq=False)
class ObjectValue:
    """A literal input object."""

    fields: list[ObjectField] = field(default_factory=list)
    loc: Location = Location()

    def deserialize(self, variables: dict[str, Any] | None = None) -> dict[str, Any]:
        """Deserialize every field into a dictionary."""
        return {f.name.name: f.value.deserialize(variables) for f in self.fields}

    def __str__(self) -> str:
        return "{" + ", ".join(f"{f.name.name}: {f.value}" for f in self.fields) + "}"


@dataclass(eq=False)
class NullValue:
    """The literal ``null``."""

    loc: Location = Location()
    literal: ClassVar[str] = "null"
    python_value: ClassVar[Any] = None

    def deserialize(self, variables: dict[str, Any] | None = None) -> Any:
        """The Python value of ``null``, which is None whatever the variables."""
        return self.python_value

    def __str__(self) -> str:
        return self.literal


@dataclass(eq=False)
class Variable:
    """A reference to an operation variable."""

    name: str
    loc: Location = Location()

    def deserialize(self, variables: dict[str, Any] | None = None) -> Any:
        """Look the variable up in ``variables``; missing means None."""
        return (variables or {}).get(self.name)

    def __str__(self) -> str:
        return "$" + self.name


Value = PrimitiveValue | ListValue | ObjectValue | NullValue | Variable


# --------------------------------------------------------------------------
# Arguments and directives
# --------------------------------------------------------------------------


@dataclass(eq=False)
class Argument:
    """An argument passed to a field or directive."""

    name: Ident
    value: Value


class ArgumentList(list):
    """Arguments given at a use site."""

    def get(self, name: str) -> Value | None:
        """Return the value of the argument ``name``, or None if absent."""
        return next((arg.value for arg in self if arg.name.name == name), None)

    def must_get(self, name: str) -> Value:
        """Return the value of the argument ``name``; raise KeyError if absent."""
        value = self.get(name)
        if value is None:
            raise KeyError("argument not found")
        return value


class ArgumentsDefinition(list):
    """Declared input values of a field, directive or input object."""

    def get(self, name: str) -> InputValueDefinition | None:
        """Return the definition named ``name``, or None."""
        return next((v for v in self if v.name.name == name), None)


@dataclass(eq=False)
class Directive:
    """A directive applied somewhere in a document."""

    name: Ident
    arguments: ArgumentList = field(default_factory=ArgumentList)


@dataclass(eq=False)
class DirectiveDefinition:
    """A directive declared by the schema."""

    name: str
    description: str = ""
    locations: list[str] = field(default_factory=list)
    arguments: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    loc: Location = Location()


class DirectiveList(list):
    """Directives applied at one location."""

    def get(self, name: str) -> Directive | None:
        """Return the directive named ``name``, or None."""
        return next((d for d in self if d.name.name == name), None)


# --------------------------------------------------------------------------
# Types
# --------------------------------------------------------------------------


class NamedType:
    """Base for types that carry a name and a description."""

    kind: ClassVar[str] = ""
    name: str
    description: str

    @property
    def type_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


_UNRESOLVED_MESSAGE = "TypeName needs to be resolved to actual type"


@dataclass(eq=False)
class TypeName:
    """An unresolved reference to a named type."""

    name: str
    loc: Location = Location()

    def _unresolved(self, what: str) -> str:
        raise TypeError(_UNRESOLVED_MESSAGE, what, self.name)

    @property
    def kind(self) -> str:
        return self._unresolved("kind")

    def __str__(self) -> str:
        return self._unresolved("str")


@dataclass(eq=False)
class List:
    """A list wrapping type, such as ``[Foo]``."""

    of_type: Any
    kind: ClassVar[str] = "LIST"

    def __str__(self) -> str:
        return "[" + str(self.of_type) + "]"


@dataclass(eq=False)
class NonNull:
    """A non-null wrapping type, such as ``Foo!``."""

    of_type: Any
    kind: ClassVar[str] = "NON_NULL"

    def __str__(self) -> str:
        return str(self.of_type) + "!"


@dataclass(eq=False)
class ScalarTypeDefinition(NamedType):
    """A leaf type holding a primitive value."""

    name: str
    description: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()
    kind: ClassVar[str] = "SCALAR"

    __str__ = NamedType.__str__


@dataclass(eq=False)
class EnumValueDefinition:
    """One of the values of an enum type."""

    enum_value: str
    directives: DirectiveList = field(default_factory=DirectiveList)
    description: str = ""
    loc: Location = Location()


@dataclass(eq=False)
class EnumTypeDefinition(NamedType):
    """A leaf type with a fixed set of values."""

    name: str
    enum_values_definition: list[EnumValueDefinition] = field(default_factory=list)
    description: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()
    kind: ClassVar[str] = "ENUM"

    __str__ = NamedType.__str__


@dataclass(eq=False)
class InputValueDefinition:
    """An argument or input field declaration."""

    name: Ident
    type: Any = None
    default: Value | None = None
    description: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()
    type_loc: Location = Location()


@dataclass(eq=False)
class InputObject(NamedType):
    """An input object type."""

    name: str
    description: str = ""
    values: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()
    kind: ClassVar[str] = "INPUT_OBJECT"

    __str__ = NamedType.__str__


@dataclass(eq=False)
class FieldDefinition:
    """A field declared on an object or interface type."""

    name: str
    arguments: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    type: Any = None
    directives: DirectiveList = field(default_factory=DirectiveList)
    description: str = ""
    loc: Location = Location()


class FieldsDefinition(list):
    """The fields of an object or interface type."""

    def get(self, name: str) -> FieldDefinition | None:
        """Return the field named ``name``, or None."""
        return next((f for f in self if f.name == name), None)

    def names(self) -> list[str]:
        """Return the field names in declaration order."""
        return [f.name for f in self]


@dataclass(eq=False)
class InterfaceTypeDefinition(NamedType):
    """An interface type."""

    name: str
    possible_types: list[ObjectTypeDefinition] = field(default_factory=list)
    fields: FieldsDefinition = field(default_factory=FieldsDefinition)
    description: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()
    kind: ClassVar[str] = "INTERFACE"

    __str__ = NamedType.__str__


@dataclass(eq=False)
class ObjectTypeDefinition(NamedType):
    """An object type."""

    name: str
    interfaces: list[InterfaceTypeDefinition] = field(default_factory=list)
    fields: FieldsDefinition = field(default_factory=FieldsDefinition)
    description: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    interface_names: list[str] = field(default_factory=list)
    loc: Location = Location()
    kind: ClassVar[str] = "OBJECT"

    __str__ = NamedType.__str__


@dataclass(eq=False)
class Union(NamedType):
    """A union of object types."""

    name: str
    union_member_types: list[ObjectTypeDefinition] = field(default_factory=list)
    description: str = ""
    directives: DirectiveList = field(default_factory=DirectiveList)
    type_names: list[str] = field(default_factory=list)
    loc: Location = Location()
    kind: ClassVar[str] = "UNION"

    __str__ = NamedType.__str__


@dataclass(eq=False)
class Extension:
    """An extension of an existing named type."""

    type: NamedType
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class Schema:
    """A GraphQL type system: types, directives and root operation types."""

    root_types: dict[str, NamedType] = field(default_factory=dict)
    types: dict[str, NamedType] = field(default_factory=dict)
    directives: dict[str, DirectiveDefinition] = field(default_factory=dict)
    use_field_resolvers: bool = False
    entry_point_names: dict[str, str] = field(default_factory=dict)
    objects: list[ObjectTypeDefinition] = field(default_factory=list)
    unions: list[Union] = field(default_factory=list)
    enums: list[EnumTypeDefinition] = field(default_factory=list)
    extensions: list[Extension] = field(default_factory=list)

    def resolve(self, name: str) -> NamedType | None:
        """Return the named type ``name``, or None if the schema lacks it."""
        return self.types.get(name)


# --------------------------------------------------------------------------
# Executable documents
# --------------------------------------------------------------------------


@dataclass(eq=False)
class Field:
    """A field selected in a query."""

    alias: Ident
    name: Ident
    arguments: ArgumentList = field(default_factory=ArgumentList)
    directives: DirectiveList = field(default_factory=DirectiveList)
    selection_set: list | None = None
    selection_set_loc: Location = Location()


@dataclass(eq=False)
class Fragment:
    """A type condition with its selections."""

    on: TypeName = field(default_factory=lambda: TypeName(""))
    selections: list = field(default_factory=list)


@dataclass(eq=False)
class InlineFragment(Fragment):
    """An inline fragment inside a selection set."""

    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class FragmentDefinition(Fragment):
    """A named fragment declared in a document."""

    name: Ident = field(default_factory=lambda: Ident(""))
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


@dataclass(eq=False)
class FragmentSpread:
    """A ``...name`` spread of a named fragment."""

    name: Ident
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


Selection = Field | InlineFragment | FragmentSpread


class FragmentList(list):
    """The fragment definitions of a document."""

    def get(self, name: str) -> FragmentDefinition | None:
        """Return the fragment named ``name``, or None."""
        return next((f for f in self if f.name.name == name), None)


class OperationType(str, Enum):
    """The kind of an operation."""

    QUERY = "QUERY"
    MUTATION = "MUTATION"
    SUBSCRIPTION = "SUBSCRIPTION"


@dataclass(eq=False)
class OperationDefinition:
    """A query, mutation or subscription in a document."""

    type: OperationType
    name: Ident = field(default_factory=lambda: Ident(""))
    vars: ArgumentsDefinition = field(default_factory=ArgumentsDefinition)
    selections: list = field(default_factory=list)
    directives: DirectiveList = field(default_factory=DirectiveList)
    loc: Location = Location()


class OperationList(list):
    """The operations of a document."""

    def get(self, name: str) -> OperationDefinition | None:
        """Return the operation named ``name``, or None."""
        return next((op for op in self if op.name.name == name), None)


@dataclass(eq=False)
class ExecutableDefinition:
    """A parsed document: its operations and fragments."""

    operations: OperationList = field(default_factory=OperationList)
    fragments: FragmentList = field(default_factory=FragmentList)