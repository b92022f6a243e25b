"""Interactive conversion session: read a phrase, convert, report one line."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .converter import convert
from .parser import PhraseParser
from .registry import DEFAULT_REGISTRY, UnitRegistry
from .units import IncompatibleUnitsError, UnitConversionError, UnitDefinition


logger = logging.getLogger(__name__)


@dataclass
class ConverterConfig:
    """Tunable session settings."""

    prompt: str = "Enter what you want to convert (or exit): "
    exit_token: str = "exit"
    unknown_placeholder: str = "???"
    representative_quantity: float = 2.0  # selects the plural form in error messages
    strict_registry: bool = False


@dataclass
class ConverterSession:
    """Runs one conversion per input line until the exit token or EOF."""

    config: ConverterConfig = field(default_factory=ConverterConfig)
    registry: Optional[UnitRegistry] = None

    def __post_init__(self) -> None:
        if self.registry is None:
            self.registry = UnitRegistry(strict=True) if self.config.strict_registry else DEFAULT_REGISTRY
        self.parser = PhraseParser(exit_token=self.config.exit_token)

    def handle(self, line: str) -> str | None:
        """Return the output line for *line*, or ``None`` when it is the exit token.

        Conversion failures become messages; a malformed phrase raises.
        """

        if self.parser.is_exit(line):
            return None
        request = self.parser.parse(line)
        source = self.registry.resolve(request.source_name)
        dest = self.registry.resolve(request.dest_name)
        if source is None or dest is None:
            logger.debug("Unresolved unit in %r.", line)
            return self.impossible_conversion(source, dest)

        try:
            converted = convert(request.quantity, source, dest)
        except IncompatibleUnitsError as exc:
            logger.debug("%s", exc)
            return self.impossible_conversion(source, dest)
        except UnitConversionError as exc:
            logger.debug("%s", exc)
            return str(exc)
        return (
            f"{request.quantity} {source.display(request.quantity)} "
            f"is {converted} {dest.display(converted)}"
        )

    def impossible_conversion(self, source: UnitDefinition | None, dest: UnitDefinition | None) -> str:
        return f"Conversion from {self._placeholder(source)} to {self._placeholder(dest)} is impossible"

    def _placeholder(self, unit: UnitDefinition | None) -> str:
        if unit is None:
            return self.config.unknown_placeholder
        return unit.display(self.config.representative_quantity)

    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        """Prompt and convert until exit; returns the number of phrases handled."""

        handled = 0
        while True:
            stdout.write(self.config.prompt)
            stdout.flush()
            line = stdin.readline()
            if not line:
                break
            if not line.strip():
                continue
            output = self.handle(line)
            if output is None:
                break
            stdout.write(output + "\n")
            handled += 1
        logger.info("Session ended after %d conversions.", handled)
        return handled


__all__ = ["ConverterConfig", "ConverterSession"]
