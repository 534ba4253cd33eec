"""Typed counting engine and its HTTP adapter."""

from itemcounter.counting.engine import CountResult, count, supported_kinds
from itemcounter.counting.kinds import SupportedKind

__all__ = ["CountResult", "SupportedKind", "count", "supported_kinds"]
