from datetime import datetime, timedelta, timezone

import pytest

from gqlschema.scalars import NullBool, NullFloat, NullInt, NullString, NullTime, Time

REF = datetime(2021, 4, 20, 12, 3, 23, tzinfo=timezone.utc)


def test_time_implements_graphql_type():
    gt = Time()
    assert gt.implements_graphql_type("foobar") is False
    assert gt.implements_graphql_type("Time") is True


def test_time_marshal_json():
    assert Time(REF).marshal_json() == '"2021-04-20T12:03:23Z"'


def test_time_marshal_json_fraction_and_offset():
    value = REF.replace(microsecond=500000)
    assert Time(value).marshal_json() == '"2021-04-20T12:03:23.5Z"'
    shifted = REF.astimezone(timezone(timedelta(hours=2)))
    assert Time(shifted).marshal_json() == '"2021-04-20T14:03:23+02:00"'


@pytest.mark.parametrize(
    "value",
    [
        REF,
        "2021-04-20T12:03:23Z",
        b"2021-04-20T12:03:23Z",
        int(REF.timestamp()),
        float(REF.timestamp()),
    ],
    ids=["datetime", "string", "bytes", "int", "float"],
)
def test_time_unmarshal(value):
    gt = Time()
    gt.unmarshal_graphql(value)
    assert gt.value == REF


def test_time_unmarshal_boolean():
    with pytest.raises(TypeError) as info:
        Time().unmarshal_graphql(True)
    assert str(info.value) == "wrong type for Time: bool"


def test_time_unmarshal_invalid_format():
    with pytest.raises(ValueError) as info:
        Time().unmarshal_graphql("Tue Apr 20 12:03:23 2021")
    assert str(info.value) == (
        'parsing time "Tue Apr 20 12:03:23 2021" as "2006-01-02T15:04:05Z07:00": '
        'cannot parse "Tue Apr 20 12:03:23 2021" as "2006"'
    )


def test_time_unmarshal_offset_and_fraction():
    gt = Time()
    gt.unmarshal_graphql("2021-04-20T14:03:23.250+02:00")
    assert gt.value == REF.replace(microsecond=250000)


def test_time_round_trip():
    original = Time(REF.replace(microsecond=123456))
    parsed = Time()
    parsed.unmarshal_graphql(original.marshal_json().strip('"'))
    assert parsed.value == original.value


@pytest.mark.parametrize(
    "text",
    [
        "2021-13-20T12:03:23Z",
        "2021-02-30T12:03:23Z",
        "2021-04-20T12:03:23Zextra",
        "2021-04-20 12:03:23Z",
    ],
)
def test_time_rejects_bad_text(text):
    with pytest.raises(ValueError):
        Time().unmarshal_graphql(text)


def test_null_int_implements():
    assert NullInt().implements_graphql_type("Int") is True
    assert NullInt().implements_graphql_type("Float") is False


@pytest.mark.parametrize(
    "value, message",
    [
        (True, "wrong type for Int: bool"),
        (float(2**31), "not a 32-bit integer"),
        (float(-(2**31) - 1), "not a 32-bit integer"),
        (1234.6, "not a 32-bit integer"),
    ],
    ids=["boolean", "out of range (+)", "out of range (-)", "non-integer"],
)
def test_null_int_invalid(value, message):
    with pytest.raises((TypeError, ValueError)) as info:
        NullInt().unmarshal_graphql(value)
    assert str(info.value) == message


@pytest.mark.parametrize("value", [1234, 1234.0], ids=["int32", "float64"])
def test_null_int_valid(value):
    gt = NullInt()
    gt.unmarshal_graphql(value)
    assert gt.value == 1234
    assert gt.is_set is True


def test_null_int_null_is_set():
    gt = NullInt()
    gt.unmarshal_graphql(None)
    assert gt.is_set is True
    assert gt.value is None


def test_null_float_invalid():
    with pytest.raises(TypeError) as info:
        NullFloat().unmarshal_graphql(True)
    assert str(info.value) == "wrong type for Float: bool"


@pytest.mark.parametrize("value", [1234, 1234.0], ids=["int", "float64"])
def test_null_float_valid(value):
    gt = NullFloat()
    gt.unmarshal_graphql(value)
    assert gt.value == 1234.0
    assert isinstance(gt.value, float)


def test_null_string():
    gt = NullString()
    assert gt.is_set is False
    gt.unmarshal_graphql("hello")
    assert (gt.value, gt.is_set) == ("hello", True)
    with pytest.raises(TypeError) as info:
        NullString().unmarshal_graphql(5)
    assert str(info.value) == "wrong type for String: int"
    assert NullString().implements_graphql_type("String") is True


def test_null_bool():
    gt = NullBool()
    gt.unmarshal_graphql(False)
    assert (gt.value, gt.is_set) == (False, True)
    with pytest.raises(TypeError) as info:
        NullBool().unmarshal_graphql("yes")
    assert str(info.value) == "wrong type for Boolean: str"
    assert NullBool().implements_graphql_type("Boolean") is True


def test_null_time():
    gt = NullTime()
    gt.unmarshal_graphql("2021-04-20T12:03:23Z")
    assert gt.is_set is True
    assert gt.value.value == REF
    empty = NullTime()
    empty.unmarshal_graphql(None)
    assert (empty.value, empty.is_set) == (None, True)
    with pytest.raises(TypeError):
        NullTime().unmarshal_graphql([1])
    assert NullTime().implements_graphql_type("Time") is True