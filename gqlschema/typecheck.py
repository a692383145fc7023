"""Predicates and helpers on schema types used while validating documents."""

from __future__ import annotations

from typing import Any

from . import definitions as defs

_COMPOSITE = (defs.ObjectTypeDefinition, defs.InterfaceTypeDefinition, defs.Union)
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def resolve_type(schema: defs.Schema, t: Any) -> Any:
    """Replace type-name references in ``t`` by the schema's types.

    Raises QueryError when a referenced name is not in the schema.
    """
    if t is None:
        return None
    if isinstance(t, defs.TypeName):
        resolved = schema.resolve(t.name)
        if resolved is None:
            raise defs.QueryError(
                f'Unknown type "{t.name}".', [t.loc], rule="KnownTypeNames"
            )
        return resolved
    if isinstance(t, defs.List):
        return defs.List(resolve_type(schema, t.of_type))
    if isinstance(t, defs.NonNull):
        return defs.NonNull(resolve_type(schema, t.of_type))
    return t


def can_be_fragment(t: Any) -> bool:
    """True for object, interface and union types."""
    return isinstance(t, _COMPOSITE)


def can_be_input(t: Any) -> bool:
    """True if ``t`` may be used as the type of a variable."""
    if isinstance(t, (defs.InputObject, defs.ScalarTypeDefinition, defs.EnumTypeDefinition)):
        return True
    if isinstance(t, (defs.List, defs.NonNull)):
        return can_be_input(t.of_type)
    return False


def has_subfields(t: Any) -> bool:
    """True if a field of type ``t`` needs a selection set."""
    if isinstance(t, _COMPOSITE):
        return True
    if isinstance(t, (defs.List, defs.NonNull)):
        return has_subfields(t.of_type)
    return False


def is_leaf(t: Any) -> bool:
    """True for scalar and enum types."""
    return isinstance(t, (defs.ScalarTypeDefinition, defs.EnumTypeDefinition))


def is_null(value: Any) -> bool:
    """True if ``value`` is the literal ``null``."""
    return isinstance(value, defs.NullValue)


def types_compatible(a: Any, b: Any) -> bool:
    """True if two fields of these types may be merged into one response key."""
    a_list, b_list = isinstance(a, defs.List), isinstance(b, defs.List)
    if a_list or b_list:
        return a_list and b_list and types_compatible(a.of_type, b.of_type)

    a_nn, b_nn = isinstance(a, defs.NonNull), isinstance(b, defs.NonNull)
    if a_nn or b_nn:
        return a_nn and b_nn and types_compatible(a.of_type, b.of_type)

    if is_leaf(a) or is_leaf(b):
        return a is b
    return True


def type_can_be_used_as(t: Any, as_type: Any) -> bool:
    """True if a variable of type ``t`` may be passed where ``as_type`` is expected."""
    t_nn = isinstance(t, defs.NonNull)
    if t_nn:
        t = t.of_type

    if isinstance(as_type, defs.NonNull):
        as_type = as_type.of_type
        if not t_nn:
            return False

    if t is as_type:
        return True

    if isinstance(t, defs.List) and isinstance(as_type, defs.List):
        return type_can_be_used_as(t.of_type, as_type.of_type)
    return False


def unwrap_type(t: Any) -> defs.NamedType | None:
    """Strip list and non-null wrappers, returning the named type inside."""
    while t is not None:
        if isinstance(t, defs.NamedType):
            return t
        if isinstance(t, (defs.List, defs.NonNull)):
            t = t.of_type
            continue
        raise TypeError(f"cannot unwrap {type(t).__name__}")
    return None


def possible_types(t: Any) -> list[defs.ObjectTypeDefinition]:
    """The object types a value of type ``t`` may have at run time."""
    if isinstance(t, defs.ObjectTypeDefinition):
        return [t]
    if isinstance(t, defs.InterfaceTypeDefinition):
        return list(t.possible_types)
    if isinstance(t, defs.Union):
        return list(t.union_member_types)
    return []


def compatible(a: Any, b: Any) -> bool:
    """True if some object type is possible for both ``a`` and ``b``."""
    b_types = possible_types(b)
    return any(pa is pb for pa in possible_types(a) for pb in b_types)


def fields_of(t: Any) -> defs.FieldsDefinition:
    """The fields of an object or interface type; empty for other types."""
    if isinstance(t, (defs.ObjectTypeDefinition, defs.InterfaceTypeDefinition)):
        return t.fields
    return defs.FieldsDefinition()


def validate_basic_literal(value: defs.PrimitiveValue, t: Any) -> bool:
    """True if the primitive literal ``value`` fits the scalar or enum type ``t``."""
    kind = value.type
    if isinstance(t, defs.ScalarTypeDefinition):
        if t.name == "Int":
            if kind is not defs.LiteralKind.INT:
                return False
            number = float(value.text)
            return _INT32_MIN <= number <= _INT32_MAX
        if t.name == "Float":
            return kind in (defs.LiteralKind.INT, defs.LiteralKind.FLOAT)
        if t.name == "String":
            return kind is defs.LiteralKind.STRING
        if t.name == "Boolean":
            return kind is defs.LiteralKind.IDENT and value.text in ("true", "false")
        if t.name == "ID":
            return kind in (defs.LiteralKind.INT, defs.LiteralKind.STRING)
        return True

    if isinstance(t, defs.EnumTypeDefinition):
        if kind is not defs.LiteralKind.IDENT:
            return False
        return any(option.enum_value == value.text for option in t.enum_values_definition)

    return False


def _deep_equal(a: Any, b: Any) -> bool:
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(_deep_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict):
        return a.keys() == b.keys() and all(_deep_equal(a[k], b[k]) for k in a)
    return a == b


def arguments_conflict(a: defs.ArgumentList, b: defs.ArgumentList) -> bool:
    """True if two argument lists differ in names or literal values."""
    if len(a) != len(b):
        return True
    for arg in a:
        other = b.get(arg.name.name)
        if other is None:
            return True
        if not _deep_equal(arg.value.deserialize(None), other.deserialize(None)):
            return True
    return False