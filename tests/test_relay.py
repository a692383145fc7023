import base64

import pytest

from gqlschema.relay import marshal_id, unmarshal_kind, unmarshal_spec


def test_marshal_id_wire_format():
    assert marshal_id("Human", 1000) == "SHVtYW46MTAwMA=="


@pytest.mark.parametrize(
    "kind, spec",
    [
        ("Human", 1000),
        ("Droid", "2001"),
        ("Ship", {"faction": 1, "id": [3, 4]}),
        ("Empty", None),
    ],
)
def test_round_trip(kind, spec):
    id_ = marshal_id(kind, spec)
    assert unmarshal_kind(id_) == kind
    assert unmarshal_spec(id_) == spec


def test_html_characters_are_escaped():
    id_ = marshal_id("K", "<a&b>")
    raw = base64.urlsafe_b64decode(id_)
    assert b"<" not in raw and b">" not in raw and b"&" not in raw
    assert unmarshal_spec(id_) == "<a&b>"


def test_marshal_id_rejects_unencodable_spec():
    with pytest.raises(TypeError):
        marshal_id("Bad", object())


def test_unmarshal_kind_of_invalid_base64():
    assert unmarshal_kind("!!!") == ""


def test_unmarshal_kind_without_separator():
    assert unmarshal_kind("YWJj") == ""


def test_unmarshal_spec_without_separator():
    with pytest.raises(ValueError, match="invalid graphql.ID"):
        unmarshal_spec("YWJj")


def test_unmarshal_spec_of_invalid_base64():
    with pytest.raises(ValueError):
        unmarshal_spec("!!!")


def test_standard_alphabet_is_rejected():
    id_ = marshal_id("K", "\u00fe\u00ff")
    standard = id_.replace("-", "+").replace("_", "/")
    assert unmarshal_kind(id_) == "K"
    if standard != id_:
        assert unmarshal_kind(standard) == ""
    with pytest.raises(ValueError):
        unmarshal_spec("YW+6MQ==")