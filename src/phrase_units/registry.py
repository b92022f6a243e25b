"""Case-insensitive lookup from unit names to unit definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterable, List, Tuple

from .units import ALL_UNITS, DuplicateUnitNameError, UnitDefinition, UnitFamily, UnknownUnitError


logger = logging.getLogger(__name__)

# First token of the two-word temperature names ("degree Celsius", ...).
DEGREE_PREFIXES = frozenset({"degree", "degrees"})


class UnitRegistry:
    """Read-only index of every singular, plural and alias name."""

    def __init__(self, units: Iterable[UnitDefinition] = ALL_UNITS, *, strict: bool = False) -> None:
        self.units: Tuple[UnitDefinition, ...] = tuple(units)
        index: Dict[str, UnitDefinition] = {}
        for name, unit in self._flatten(self.units):
            previous = index.get(name)
            if previous is not None and previous is not unit:
                if strict:
                    raise DuplicateUnitNameError(name, previous, unit)
                logger.warning("Unit name %r of %s is overridden by %s.", name, previous.key, unit.key)
            index[name] = unit
        self._index: Mapping[str, UnitDefinition] = MappingProxyType(index)
        logger.debug("Registered %d names for %d units.", len(index), len(self.units))

    @staticmethod
    def _flatten(units: Iterable[UnitDefinition]) -> Iterable[Tuple[str, UnitDefinition]]:
        for unit in units:
            for name in unit.names:
                yield name.lower(), unit

    def resolve(self, name: str) -> UnitDefinition | None:
        """Return the unit called *name* (any case), or ``None``."""

        return self._index.get(name.lower())

    def require(self, name: str) -> UnitDefinition:
        unit = self.resolve(name)
        if unit is None:
            raise UnknownUnitError(name)
        return unit

    def names(self) -> List[str]:
        return sorted(self._index)

    def families(self) -> Dict[UnitFamily, List[UnitDefinition]]:
        grouped: Dict[UnitFamily, List[UnitDefinition]] = {}
        for unit in self.units:
            grouped.setdefault(unit.family, []).append(unit)
        return grouped

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._index

    def __len__(self) -> int:
        return len(self._index)


DEFAULT_REGISTRY = UnitRegistry()


def resolve(name: str) -> UnitDefinition | None:
    return DEFAULT_REGISTRY.resolve(name)


__all__ = ["DEGREE_PREFIXES", "DEFAULT_REGISTRY", "UnitRegistry", "resolve"]
