# gqlschema

Building blocks for GraphQL tooling, with no outside dependencies:

- `gqlschema.definitions`: an object model of the GraphQL type system
  (`Schema`, `ObjectTypeDefinition`, `InterfaceTypeDefinition`, `Union`,
  `EnumTypeDefinition`, `InputObject`, `ScalarTypeDefinition`, `List`,
  `NonNull`, ...) and of query documents (`ExecutableDefinition`,
  `OperationDefinition`, `Field`, `InlineFragment`, `FragmentSpread`, ...),
  literal values with `deserialize`, and `QueryError`.
- `gqlschema.typecheck`: predicates and helpers on those types, such as
  `resolve_type`, `unwrap_type`, `can_be_input`, `has_subfields`,
  `types_compatible`, `type_can_be_used_as`, `validate_basic_literal` and
  `arguments_conflict`.
- `gqlschema.suggestion`: edit distance and "Did you mean" hints.
- `gqlschema.scalars`: the `Time` input scalar and the nullable wrappers
  `NullString`, `NullBool`, `NullInt`, `NullFloat` and `NullTime`.
- `gqlschema.relay`: Relay-style global ID encoding.
- `gqlschema.panics`: `DefaultLogger`, which logs unexpected errors.

## Installation

```
pip install gqlschema
```

## The type model

```python
from gqlschema.definitions import (
    FieldDefinition, FieldsDefinition, List, NonNull,
    ObjectTypeDefinition, ScalarTypeDefinition, Schema,
)
from gqlschema.typecheck import has_subfields, unwrap_type

string = ScalarTypeDefinition("String")
character = ObjectTypeDefinition(
    "Character", fields=FieldsDefinition([FieldDefinition("name", type=NonNull(string))])
)
schema = Schema(types={"String": string, "Character": character},
                root_types={"query": character})

assert schema.resolve("Character") is character
assert str(NonNull(List(character))) == "[Character]!"
assert unwrap_type(NonNull(List(character))) is character
assert has_subfields(List(character)) and not has_subfields(string)
```

`resolve_type(schema, t)` replaces `TypeName` references with the schema's
types and raises `QueryError` (rule `KnownTypeNames`) for an unknown name.
`str(QueryError(...))` reads `graphql: <message> (line L, column C)`.

## Suggestions

```python
from gqlschema.suggestion import levenshtein_distance, make_suggestion

assert levenshtein_distance("nme", "name") == 1
assert make_suggestion("Did you mean", ["name", "names"], "nme") == ' Did you mean "name"?'
```

`make_suggestion` returns an empty string when no option is close enough.

## Input scalars

A nullable wrapper records whether a value was supplied at all (`is_set`),
separately from whether that value was `null`:

```python
from gqlschema.scalars import NullInt, Time

n = NullInt()
n.unmarshal_graphql(None)
assert n.is_set and n.value is None

t = Time()
t.unmarshal_graphql("2021-04-20T12:03:23Z")
assert t.marshal_json() == '"2021-04-20T12:03:23Z"'
```

Input of the wrong type raises `TypeError`; an `Int` outside the 32-bit
range or with a fractional part, and malformed RFC 3339 text, raise
`ValueError`. `Time` also accepts a `datetime`, bytes, or Unix seconds.

## Relay IDs

```python
from gqlschema.relay import marshal_id, unmarshal_kind, unmarshal_spec

node_id = marshal_id("Human", 1000)
assert unmarshal_kind(node_id) == "Human"
assert unmarshal_spec(node_id) == 1000
```

`unmarshal_kind` returns `""` for a malformed ID; `unmarshal_spec` raises
`ValueError`. `marshal_id` raises `TypeError` if the spec cannot be
encoded as JSON.

## Logging

`DefaultLogger().log_panic(context, value)` writes the value, the current
stack and the context at error level to the `gqlschema.panics` logger.

## What this package does not do

It does not parse GraphQL schema or query text, so the model objects are
built in code. It has no complete document validator, no query execution,
no introspection layer, no tracing, and no HTTP handler; `typecheck` and
`suggestion` supply the checks such a validator would be built from.

## Running the tests

```
pip install -e ".[test]"
pytest
```