"""Validated conversion between units of the same family."""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from .units import (
    NON_NEGATIVE_FAMILIES,
    IncompatibleUnitsError,
    NegativeQuantityError,
    UnitDefinition,
)


logger = logging.getLogger(__name__)


def _check_compatible(source: UnitDefinition, dest: UnitDefinition) -> None:
    if source.family != dest.family:
        raise IncompatibleUnitsError(source, dest)


def convert(quantity: float, source: UnitDefinition, dest: UnitDefinition) -> float:
    """Convert *quantity* from *source* to *dest* through the family base unit.

    Raises :class:`IncompatibleUnitsError` across families and
    :class:`NegativeQuantityError` for negative lengths or weights.
    Temperatures may be negative.
    """

    _check_compatible(source, dest)
    if quantity < 0 and dest.family in NON_NEGATIVE_FAMILIES:
        raise NegativeQuantityError(dest.family)
    result = dest.from_base(source.to_base(quantity))
    logger.debug("Converted %r %s to %r %s.", quantity, source.key, result, dest.key)
    return float(result)


def convert_array(
    quantities: Iterable[float] | np.ndarray,
    source: UnitDefinition,
    dest: UnitDefinition,
) -> np.ndarray:
    """Vectorized :func:`convert`; rejects the whole batch if any length or weight is negative."""

    _check_compatible(source, dest)
    values = np.asarray(quantities, dtype=float)
    if dest.family in NON_NEGATIVE_FAMILIES and np.any(values < 0):
        raise NegativeQuantityError(dest.family)
    return dest.from_base(source.to_base(values))


__all__ = ["convert", "convert_array"]
