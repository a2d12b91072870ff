"""
Card dataset decoder.

The dataset is a single JSON array of card printing objects
(card-flattened.json). Decoding is strict about that shape and lenient
about everything else: unknown keys are dropped and loosely typed values
are normalized by CardRecord.
"""

import json
import re
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from fabcatalog.config import cache_path
from fabcatalog.models.card import CardRecord
from fabcatalog.models.failure import DecodeError

_CARD_LIST = TypeAdapter(list[CardRecord])

# json.loads joins valid surrogate pairs, so any surrogate left in a string is
# an unpaired \uD800-\uDFFF escape and cannot be written as UTF-8.
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _replace_lone_surrogates(value: Any) -> Any:
    """Replace unpaired surrogates with U+FFFD throughout a decoded JSON value."""
    if isinstance(value, str):
        return _LONE_SURROGATE.sub("\ufffd", value)
    if isinstance(value, list):
        return [_replace_lone_surrogates(item) for item in value]
    if isinstance(value, dict):
        return {
            _replace_lone_surrogates(key): _replace_lone_surrogates(item)
            for key, item in value.items()
        }
    return value


def _describe(error: ValidationError) -> str:
    """Summarize the first validation error as 'card <index>: <field>: <msg>'."""
    first = error.errors()[0]
    loc = list(first["loc"])
    prefix = ""
    if loc and isinstance(loc[0], int):
        prefix = f"card {loc.pop(0)}: "
    field = ".".join(str(part) for part in loc)
    if field:
        prefix += f"{field}: "
    extra = error.error_count() - 1
    suffix = f" (and {extra} more)" if extra else ""
    return f"{prefix}{first['msg']}{suffix}"


def decode_cards(raw: bytes) -> list[CardRecord]:
    """
    Decode raw dataset bytes into card records.

    Unpaired surrogate escapes in strings are replaced with U+FFFD.

    Args:
        raw: UTF-8 JSON bytes

    Returns:
        Card records in source order

    Raises:
        DecodeError: If the bytes are not JSON, the root is not an array,
            or an element is not an object carrying id, name, foiling
            and edition
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise DecodeError(f"expected a JSON array of cards, got {type(data).__name__}")

    data = _replace_lone_surrogates(data)

    try:
        return _CARD_LIST.validate_python(data)
    except ValidationError as e:
        raise DecodeError(_describe(e)) from e


def load_cached_cards(locale_code: str, cards_dir: Path) -> list[CardRecord]:
    """
    Decode the cached dataset for a locale.

    Args:
        locale_code: Locale whose cache file to read
        cards_dir: Directory holding <locale>.json cache files

    Raises:
        DecodeError: If the cache file is missing, unreadable or malformed
    """
    path = cache_path(locale_code, cards_dir)

    if not path.exists():
        raise DecodeError(
            f"card dataset not found at {path}. Run with updates enabled (-u) first."
        )

    try:
        raw = path.read_bytes()
    except OSError as e:
        raise DecodeError(f"cannot read {path}: {e}") from e

    try:
        return decode_cards(raw)
    except DecodeError as e:
        raise DecodeError(f"{path}: {e}") from e
