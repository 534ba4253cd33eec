"""Failure outcomes of a counting call.

These are values, not exceptions: the engine returns exactly one of them in
a CountResult when it cannot produce a frequency table.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmptyInput:
    """Nothing to count. Callers treat this as a non-fatal notice."""

    @property
    def message(self) -> str:
        return "No items provided for counting."


@dataclass(frozen=True)
class UnsupportedKind:
    requested: str
    supported: tuple[str, ...]

    @property
    def message(self) -> str:
        return (
            f"Unsupported data type: {self.requested}. "
            f"Supported types: {', '.join(self.supported)}"
        )


@dataclass(frozen=True)
class ParseFailure:
    value: str
    kind: str
    reason: str
    expected: str

    @property
    def message(self) -> str:
        return (
            f"'{self.value}' is not a valid {self.kind} value ({self.reason}). "
            f"Expected {self.expected}."
        )


CountError = EmptyInput | UnsupportedKind | ParseFailure
