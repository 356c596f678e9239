"""Decoders for the loosely typed scalars found in lsblk JSON.

Depending on the util-linux version, lsblk reports flags as JSON booleans,
as ``"0"``/``"1"`` strings or as bare integers, and sizes as integers or as
decimal strings. The decoders below normalize those encodings and raise
MalformedScalar for anything else. They never log.
"""
import re
from typing import Any, Optional, Tuple

from blockview.core.errors import MalformedScalar
from blockview.core.units import INT64_MAX, INT64_MIN
from blockview.models.device import Quantity

_INT_RE = re.compile(r"[+-]?[0-9]+")
_JSON_NUMBER_RE = re.compile(r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def _parse_int64(text: str, key: Optional[str], raw: Any) -> int:
    if not _INT_RE.fullmatch(text):
        raise MalformedScalar(key, raw, "not a base-10 integer")
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        raise MalformedScalar(key, raw, "integer out of int64 range")
    return value


def decode_tribool(raw: Any, key: Optional[str] = None) -> bool:
    """Decode a flag reported as true/false, "0"/"1" or an integer.

    Literal words are checked first; anything else must parse as a base-10
    integer and is true when greater than zero. None (absent or null) is
    false.
    """
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        raw_text = str(raw)
    elif isinstance(raw, str):
        raw_text = raw
    else:
        raise MalformedScalar(key, raw, "expected a boolean or integer token")

    token = raw_text.lower().strip('"')
    if token == "true":
        return True
    if token == "false":
        return False
    return _parse_int64(token, key, raw) > 0


def decode_quantity(raw: Any, key: Optional[str] = None) -> Quantity:
    """Decode a byte count reported as an integer or a decimal string."""
    if raw is None or raw == "":
        return Quantity.zero()
    if isinstance(raw, bool):
        raise MalformedScalar(key, raw, "expected an integer byte count")
    if isinstance(raw, int):
        return Quantity.from_int(_parse_int64(str(raw), key, raw), str(raw))
    if isinstance(raw, str):
        return Quantity.from_int(_parse_int64(raw, key, raw), raw)
    raise MalformedScalar(key, raw, "expected an integer byte count")


def decode_text(raw: Any, key: Optional[str] = None) -> str:
    """Decode a free-text column. Numbers are rendered, null becomes ''."""
    if raw is None:
        return ""
    if isinstance(raw, str):
        return raw
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        return str(raw)
    raise MalformedScalar(key, raw, "expected text")


def decode_number_text(raw: Any, key: Optional[str] = None) -> str:
    """Decode a numeric column, keeping it as text (e.g. ra, phy-sec)."""
    if raw is None or raw == "":
        return ""
    if isinstance(raw, bool):
        raise MalformedScalar(key, raw, "expected a number")
    if isinstance(raw, (int, float)):
        return str(raw)
    if isinstance(raw, str) and _JSON_NUMBER_RE.fullmatch(raw):
        return raw
    raise MalformedScalar(key, raw, "expected a number")


def decode_text_list(raw: Any, key: Optional[str] = None) -> Tuple[str, ...]:
    """Decode a list of text values such as ``mountpoints``; nulls are dropped."""
    if raw is None:
        return ()
    if not isinstance(raw, list):
        raise MalformedScalar(key, raw, "expected a list")
    return tuple(decode_text(item, key) for item in raw if item is not None)
