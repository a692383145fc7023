"""Relay-style global IDs: a kind and a JSON spec, base64url encoded."""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any

_JSON_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _encode_json(spec: Any) -> str:
    text = json.dumps(
        spec, ensure_ascii=False, separators=(",", ":"), sort_keys=True, allow_nan=False
    )
    for char, escape in _JSON_ESCAPES.items():
        text = text.replace(char, escape)
    return text


def _decode(id: str) -> bytes:
    if "+" in id or "/" in id:
        raise ValueError("illegal base64 data in ID")
    try:
        return base64.b64decode(id, altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"illegal base64 data in ID: {exc}") from exc


def marshal_id(kind: str, spec: Any) -> str:
    """Encode ``kind`` and the JSON form of ``spec`` as an opaque ID."""
    try:
        payload = _encode_json(spec)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"marshal_id: {exc}") from exc
    raw = (kind + ":" + payload).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii")


def unmarshal_kind(id: str) -> str:
    """Return the kind encoded in ``id``, or an empty string if it is malformed."""
    try:
        raw = _decode(id)
    except ValueError:
        return ""
    kind, sep, _ = raw.partition(b":")
    if not sep:
        return ""
    return kind.decode("utf-8", "replace")


def unmarshal_spec(id: str) -> Any:
    """Return the JSON spec encoded in ``id``; raise ValueError if malformed."""
    raw = _decode(id)
    _, sep, payload = raw.partition(b":")
    if not sep:
        raise ValueError("invalid graphql.ID")
    return json.loads(payload.decode("utf-8"))