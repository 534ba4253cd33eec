"""Typed counting engine.

Parses every raw token as the requested kind, then groups equal values by
their canonical label in first-seen order. Pure: no I/O, no shared state.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from itemcounter.counting.errors import CountError, EmptyInput, ParseFailure, UnsupportedKind
from itemcounter.counting.kinds import (
    EXPECTED_FORMATS,
    PARSERS,
    SUPPORTED_KIND_NAMES,
    SupportedKind,
    resolve_kind,
)

FrequencyTable = dict[str, int]


@dataclass(frozen=True)
class CountResult:
    """Either a frequency table or the single error that prevented one."""

    table: FrequencyTable | None = None
    error: CountError | None = None
    kind: SupportedKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def total(self) -> int:
        return sum(self.table.values()) if self.table else 0


def supported_kinds() -> list[str]:
    return list(SUPPORTED_KIND_NAMES)


def tokens_for(items: Sequence[str], kind: SupportedKind) -> list[str]:
    """Units to count: the items themselves, or the characters of their concatenation."""
    if kind is SupportedKind.CHARACTER:
        return list("".join(items))
    return list(items)


def group_labels(labels: Sequence[str]) -> FrequencyTable:
    table: FrequencyTable = {}
    for label in labels:
        table[label] = table.get(label, 0) + 1
    return table


def count(items: Sequence[str], kind: SupportedKind | str) -> CountResult:
    """Count occurrences of each distinct value of ``kind`` in ``items``.

    Empty input is reported before the kind is checked. The first token that
    fails to parse aborts the whole call; no partial table is returned.
    """
    if not items:
        return CountResult(error=EmptyInput())

    resolved = resolve_kind(kind)
    if resolved is None:
        return CountResult(error=UnsupportedKind(kind, SUPPORTED_KIND_NAMES))

    tokens = tokens_for(items, resolved)
    if not tokens:
        return CountResult(error=EmptyInput(), kind=resolved)

    parse = PARSERS[resolved]
    labels: list[str] = []
    for token in tokens:
        try:
            labels.append(parse(token))
        except ValueError as e:
            return CountResult(
                error=ParseFailure(
                    value=token,
                    kind=resolved.value,
                    reason=str(e),
                    expected=EXPECTED_FORMATS[resolved],
                ),
                kind=resolved,
            )

    return CountResult(table=group_labels(labels), kind=resolved)
