"""Supported element kinds and their token parsers.

Each parser takes one raw token and returns the canonical label used both as
the grouping key and as the output label. Parsers raise ValueError with a
human-readable reason; the engine turns that into a ParseFailure.
"""

import re
from collections.abc import Callable
from datetime import date, datetime
from enum import Enum


class SupportedKind(str, Enum):
    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    CHARACTER = "character"
    BOOLEAN = "boolean"
    DATE = "date"


SUPPORTED_KIND_NAMES: tuple[str, ...] = tuple(k.value for k in SupportedKind)

# Names the first console/API release used for the same kinds.
KIND_ALIASES: dict[str, SupportedKind] = {
    "string": SupportedKind.TEXT,
    "double": SupportedKind.DECIMAL,
    "datetime": SupportedKind.DATE,
}

EXPECTED_FORMATS: dict[SupportedKind, str] = {
    SupportedKind.TEXT: "any text",
    SupportedKind.INTEGER: "a whole number such as 42 or -7",
    SupportedKind.DECIMAL: "a number such as 3.14 or -2",
    SupportedKind.CHARACTER: "any text",
    SupportedKind.BOOLEAN: "true/false, yes/no, or 1/0",
    SupportedKind.DATE: "MM/dd/yyyy or yyyy-MM-dd",
}


def resolve_kind(name: SupportedKind | str) -> SupportedKind | None:
    """Map a kind name (case-insensitive, aliases allowed) to a SupportedKind."""
    if isinstance(name, SupportedKind):
        return name
    key = name.strip().lower()
    try:
        return SupportedKind(key)
    except ValueError:
        return KIND_ALIASES.get(key)


# ---------------------------------------------------------------------------
# Per-kind parsers
# ---------------------------------------------------------------------------

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)

_TRUE_WORDS = frozenset({"true", "yes", "1"})
_FALSE_WORDS = frozenset({"false", "no", "0"})

# Time-of-day suffixes accepted after either date form; the time is dropped.
_TIME_SUFFIXES = ("", " %H:%M", " %H:%M:%S", " %I:%M %p", " %I:%M:%S %p")
_DATE_FORMATS = tuple(
    day + suffix for day in ("%m/%d/%Y", "%Y-%m-%d") for suffix in _TIME_SUFFIXES
)
_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}(?:[T ].*)?")


def parse_text(token: str) -> str:
    return token


def parse_integer(token: str) -> str:
    if not _INTEGER_RE.fullmatch(token):
        raise ValueError("not a base-10 integer")
    value = int(token)
    if not INT32_MIN <= value <= INT32_MAX:
        raise ValueError(f"outside the range {INT32_MIN}..{INT32_MAX}")
    return str(value)


def parse_decimal(token: str) -> str:
    if not _DECIMAL_RE.fullmatch(token):
        raise ValueError("not a decimal number")
    value = float(token)
    if value == 0.0:
        value = 0.0  # -0.0 and 0.0 are equal, give them one label
    return repr(value)


def parse_boolean(token: str) -> str:
    word = token.strip().lower()
    if word in _TRUE_WORDS:
        return "True"
    if word in _FALSE_WORDS:
        return "False"
    raise ValueError("not a boolean value")


def _parse_calendar_date(token: str) -> date:
    text = token.strip()
    if _ISO_DATE_RE.fullmatch(text):
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            pass  # 12-hour times and the like fall through to the formats below
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise ValueError("not a recognised date")


def parse_date(token: str) -> str:
    return _parse_calendar_date(token).isoformat()


PARSERS: dict[SupportedKind, Callable[[str], str]] = {
    SupportedKind.TEXT: parse_text,
    SupportedKind.INTEGER: parse_integer,
    SupportedKind.DECIMAL: parse_decimal,
    SupportedKind.CHARACTER: parse_text,
    SupportedKind.BOOLEAN: parse_boolean,
    SupportedKind.DATE: parse_date,
}
