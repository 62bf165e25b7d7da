"""
Core normalization logic.

Responsibilities:
- raw bytes -> text (encoding detection) -> generic JSON value
- shape detection, tried in a fixed order:
    1. [{"key": ..., "value": ...}, ...]
    2. [{"Key": ..., "Value": ...}, ...]
    3. {"<key>": "<value>", ...}
- folding entries into the canonical mapping (keys uppercased, last write wins)

Decoding is all-or-nothing: either the whole document matches one shape or a
DecodeError describing every attempt is raised.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple

from charset_normalizer import from_bytes
from pydantic import StrictStr, TypeAdapter, ValidationError

from .models import CapitalizedKeyValueEntry, KeyValueEntry

logger = logging.getLogger(__name__)

Localization = Mapping[str, str]


class Entry(NamedTuple):
    key: str
    value: str


class DecodedDocument(NamedTuple):
    shape: str
    entries: List[Entry]
    encoding: Optional[str] = None


class DecodeError(ValueError):
    """
    Raised when a document matches none of the accepted shapes.

    ``attempts`` keeps one ``(shape, ValidationError)`` pair per shape that was
    tried, in the order they were tried.
    """

    def __init__(self, attempts: Iterable[Tuple[str, ValidationError]]):
        self.attempts = list(attempts)
        summary = ", ".join(f"{shape} ({exc.error_count()} errors)" for shape, exc in self.attempts)
        super().__init__(f"document matches none of the accepted shapes: {summary}")

    def __reduce__(self):
        return (self.__class__, (self.attempts,))

    def errors(self) -> List[Dict[str, Any]]:
        items = []
        for shape, exc in self.attempts:
            for err in exc.errors(include_url=False):
                items.append({
                    "shape": shape,
                    "type": err["type"],
                    "loc": list(err["loc"]),
                    "msg": err["msg"],
                })
        return items


def _from_pairs(items: List[KeyValueEntry]) -> List[Entry]:
    return [Entry(item.key, item.value) for item in items]


def _from_capitalized_pairs(items: List[CapitalizedKeyValueEntry]) -> List[Entry]:
    return [Entry(item.Key, item.Value) for item in items]


def _from_properties(props: Dict[str, str]) -> List[Entry]:
    return [Entry(key, value) for key, value in props.items()]


# Order matters: shapes 1 and 2 are close enough that an ambiguous document
# must always resolve to the lowercase one.
SHAPES: Tuple[Tuple[str, TypeAdapter, Callable[[Any], List[Entry]]], ...] = (
    ("key/value", TypeAdapter(List[KeyValueEntry]), _from_pairs),
    ("Key/Value", TypeAdapter(List[CapitalizedKeyValueEntry]), _from_capitalized_pairs),
    ("object", TypeAdapter(Dict[StrictStr, StrictStr]), _from_properties),
)

_JSON = TypeAdapter(Any)


def _fold(entries: Iterable[Tuple[str, str]]) -> Localization:
    acc: Dict[str, str] = {}
    for key, value in entries:
        acc[key.upper()] = value
    return MappingProxyType(acc)


EMPTY: Localization = _fold(())


def decode_entries(value: Any) -> DecodedDocument:
    """
    Match a parsed JSON value against the accepted shapes, first success wins.
    """
    attempts = []
    for shape, adapter, to_entries in SHAPES:
        try:
            parsed = adapter.validate_python(value)
        except ValidationError as exc:
            attempts.append((shape, exc))
            continue
        entries = to_entries(parsed)
        logger.debug("matched shape %s with %d entries", shape, len(entries))
        return DecodedDocument(shape, entries)

    logger.debug("no shape matched after %d attempts", len(attempts))
    raise DecodeError(attempts)


def decode(value: Any) -> Localization:
    """Decode a parsed JSON value into a canonical mapping."""
    return _fold(decode_entries(value).entries)


def from_entries(entries: Iterable[Entry]) -> Localization:
    return _fold(entries)


def from_mapping(mapping: Mapping[str, str]) -> Localization:
    """
    Re-key an existing mapping. Collisions resolve in the source's iteration
    order, later keys winning.
    """
    return _fold(mapping.items())


def _bytes_to_text(raw: bytes) -> Tuple[str, str]:
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    # utf-8 decoding keeps the BOM, which is not valid JSON
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    try:
        text = raw.decode(decode_used)
    except (UnicodeDecodeError, LookupError) as exc:
        logger.debug("could not decode as %s: %s", decode_used, exc)
        error = ValidationError.from_exception_data(
            "encoding", [{"type": "string_unicode", "loc": (), "input": raw[:64]}]
        )
        raise DecodeError([("encoding", error)]) from exc

    return text, decode_used


def decode_bytes(raw: bytes) -> DecodedDocument:
    """
    Decode a raw translation file: detect its encoding, parse JSON, match a shape.

    Undecodable bytes and invalid JSON are reported as a DecodeError with a
    single ``encoding`` or ``json`` attempt.
    """
    text, encoding = _bytes_to_text(raw)
    try:
        value = _JSON.validate_json(text)
    except ValidationError as exc:
        raise DecodeError([("json", exc)]) from exc

    document = decode_entries(value)
    return document._replace(encoding=encoding)
