"""Tokenizer for phrases such as ``5 km to mi`` or ``100 degrees celsius in f``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from .registry import DEGREE_PREFIXES


class IncompletePhraseError(ValueError):
    """Raised when a phrase ends before both units are read."""


@dataclass(frozen=True)
class ConversionRequest:
    """Quantity plus the lowercased source and destination unit names."""

    quantity: float
    source_name: str
    dest_name: str


class PhraseParser:
    """Splits ``<number> <unit> <separator> <unit>`` into a :class:`ConversionRequest`.

    A unit is one token, or two when the first token is ``degree`` or
    ``degrees``. The separator can be any single token.
    """

    def __init__(self, exit_token: str = "exit") -> None:
        self.exit_token = exit_token

    def is_exit(self, line: str) -> bool:
        tokens = line.split()
        return bool(tokens) and tokens[0] == self.exit_token

    def parse(self, line: str) -> ConversionRequest:
        tokens = iter(line.split())
        quantity = float(self._next(tokens, "quantity"))
        source_name = self._unit_name(tokens, "source unit")
        self._next(tokens, "separator")
        dest_name = self._unit_name(tokens, "destination unit")
        return ConversionRequest(quantity=quantity, source_name=source_name, dest_name=dest_name)

    # ------------------------------------------------------------------ helpers
    def _unit_name(self, tokens: Iterator[str], what: str) -> str:
        parts: List[str] = [self._next(tokens, what).lower()]
        if parts[0] in DEGREE_PREFIXES:
            parts.append(self._next(tokens, what).lower())
        return " ".join(parts)

    @staticmethod
    def _next(tokens: Iterator[str], what: str) -> str:
        try:
            return next(tokens)
        except StopIteration:
            raise IncompletePhraseError(f"Phrase ended before the {what}.") from None


def parse_phrase(line: str) -> ConversionRequest:
    return PhraseParser().parse(line)


__all__ = ["ConversionRequest", "IncompletePhraseError", "PhraseParser", "parse_phrase"]
