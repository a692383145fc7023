"""'Did you mean' suggestions built from edit distance."""

from __future__ import annotations

from collections.abc import Iterable

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _quote(text: str) -> str:
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif not ch.isprintable():
            code = ord(ch)
            if code < 0x80:
                parts.append(f"\\x{code:02x}")
            elif code <= 0xFFFF:
                parts.append(f"\\u{code:04x}")
            else:
                parts.append(f"\\U{code:08x}")
        else:
            parts.append(ch)
    return '"' + "".join(parts) + '"'


def levenshtein_distance(s1: str, s2: str) -> int:
    """Return the number of single-character edits turning ``s1`` into ``s2``."""
    column = list(range(len(s1) + 1))
    for x, rx in enumerate(s2):
        column[0] = x + 1
        last_diag = x
        for y, ry in enumerate(s1):
            old_diag = column[y + 1]
            if rx != ry:
                last_diag += 1
            column[y + 1] = min(column[y + 1] + 1, column[y] + 1, last_diag)
            last_diag = old_diag
    return column[len(s1)]


def make_suggestion(prefix: str, options: Iterable[str], input: str) -> str:
    """Return ``" <prefix> "a", or "b"?"`` for options close to ``input``, else ``""``."""
    distances: dict[str, int] = {}
    selected: list[str] = []
    for option in options:
        distance = levenshtein_distance(input, option)
        threshold = max(len(input) // 2, len(option) // 2, 1)
        if distance < threshold:
            selected.append(option)
            distances[option] = distance

    if not selected:
        return ""
    selected.sort(key=lambda option: distances[option])

    parts = [_quote(option) for option in selected]
    if len(parts) > 1:
        parts[-1] = "or " + parts[-1]
    return f" {prefix} {', '.join(parts)}?"