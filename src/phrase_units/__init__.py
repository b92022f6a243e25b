"""Phrase-driven unit conversion for lengths, weights and temperatures."""

from . import units
from .units import (
    UnitFamily,
    UnitDefinition,
    UnitConversionError,
    UnknownUnitError,
    IncompatibleUnitsError,
    NegativeQuantityError,
    DuplicateUnitNameError,
    ALL_UNITS,
)
from .registry import DEGREE_PREFIXES, UnitRegistry, resolve
from .converter import convert, convert_array
from .parser import ConversionRequest, IncompletePhraseError, PhraseParser, parse_phrase
from .session import ConverterConfig, ConverterSession

__all__ = [
    "UnitFamily",
    "UnitDefinition",
    "UnitConversionError",
    "UnknownUnitError",
    "IncompatibleUnitsError",
    "NegativeQuantityError",
    "DuplicateUnitNameError",
    "ALL_UNITS",
    "DEGREE_PREFIXES",
    "UnitRegistry",
    "resolve",
    "convert",
    "convert_array",
    "ConversionRequest",
    "IncompletePhraseError",
    "PhraseParser",
    "parse_phrase",
    "ConverterConfig",
    "ConverterSession",
    "units",
]
