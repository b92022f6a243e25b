"""Unit catalog: families, conversion laws and display names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Tuple


class UnitFamily(Enum):
    """Group of mutually convertible units."""

    LENGTH = "Length"
    WEIGHT = "Weight"
    TEMPERATURE = "Temperature"

    def __str__(self) -> str:
        return self.value


class UnitConversionError(ValueError):
    """Raised when a quantity cannot be converted."""


class UnknownUnitError(UnitConversionError):
    """Raised when a unit name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown unit '{name}'.")
        self.name = name


class IncompatibleUnitsError(UnitConversionError):
    """Raised when source and destination belong to different families."""

    def __init__(self, source: "UnitDefinition", dest: "UnitDefinition") -> None:
        super().__init__(
            f"Cannot convert different unit types: {source} ({source.family}) to {dest} ({dest.family})"
        )
        self.source = source
        self.dest = dest


class NegativeQuantityError(UnitConversionError):
    """Raised for negative lengths and weights."""

    def __init__(self, family: UnitFamily) -> None:
        super().__init__(f"{family} shouldn't be negative.")
        self.family = family


class DuplicateUnitNameError(UnitConversionError):
    """Raised by a strict registry when two units share a name."""

    def __init__(self, name: str, first: "UnitDefinition", second: "UnitDefinition") -> None:
        super().__init__(f"Name '{name}' is used by both {first.key} and {second.key}.")
        self.name = name


Law = Callable[[Any], Any]


@dataclass(frozen=True)
class UnitDefinition:
    """A single unit and its mapping to the family base unit."""

    key: str
    family: UnitFamily
    to_base: Law
    from_base: Law
    singular: str
    plural: str
    aliases: Tuple[str, ...] = ()

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.singular, self.plural, *self.aliases)

    def display(self, quantity: float) -> str:
        """Return the singular name for exactly one, the plural otherwise."""

        return self.singular if quantity == 1.0 else self.plural

    def __str__(self) -> str:
        return self.singular

    def __repr__(self) -> str:
        return f"UnitDefinition({self.key}, {self.family})"


def _linear(
    key: str,
    family: UnitFamily,
    factor: float,
    singular: str,
    plural: str,
    *aliases: str,
) -> UnitDefinition:
    return UnitDefinition(
        key=key,
        family=family,
        to_base=lambda x: x * factor,
        from_base=lambda x: x / factor,
        singular=singular,
        plural=plural,
        aliases=aliases,
    )


_LENGTH = UnitFamily.LENGTH
_WEIGHT = UnitFamily.WEIGHT
_TEMPERATURE = UnitFamily.TEMPERATURE

# length, base meter
METER = _linear("METER", _LENGTH, 1.0, "meter", "meters", "m")
KILOMETER = _linear("KILOMETER", _LENGTH, 1000.0, "kilometer", "kilometers", "km")
CENTIMETER = _linear("CENTIMETER", _LENGTH, 0.01, "centimeter", "centimeters", "cm")
MILLIMETER = _linear("MILLIMETER", _LENGTH, 0.001, "millimeter", "millimeters", "mm")
MILE = _linear("MILE", _LENGTH, 1609.35, "mile", "miles", "mi")
YARD = _linear("YARD", _LENGTH, 0.9144, "yard", "yards", "yd")
FOOT = _linear("FOOT", _LENGTH, 0.3048, "foot", "feet", "ft")
INCH = _linear("INCH", _LENGTH, 0.0254, "inch", "inches", "in")

# weight, base gram
GRAM = _linear("GRAM", _WEIGHT, 1.0, "gram", "grams", "g")
KILOGRAM = _linear("KILOGRAM", _WEIGHT, 1000.0, "kilogram", "kilograms", "kg")
MILLIGRAM = _linear("MILLIGRAM", _WEIGHT, 0.001, "milligram", "milligrams", "mg")
POUND = _linear("POUND", _WEIGHT, 453.592, "pound", "pounds", "lb")
OUNCE = _linear("OUNCE", _WEIGHT, 28.3495, "ounce", "ounces", "oz")

# temperature, base Kelvin
KELVIN = _linear("KELVIN", _TEMPERATURE, 1.0, "Kelvin", "Kelvins", "k")
CELSIUS = UnitDefinition(
    key="CELSIUS",
    family=_TEMPERATURE,
    to_base=lambda x: x + 273.15,
    from_base=lambda x: x - 273.15,
    singular="degree Celsius",
    plural="degrees Celsius",
    aliases=("dc", "c", "celsius"),
)
FAHRENHEIT = UnitDefinition(
    key="FAHRENHEIT",
    family=_TEMPERATURE,
    to_base=lambda x: (x + 459.67) * 5.0 / 9.0,
    from_base=lambda x: x * 9.0 / 5.0 - 459.67,
    singular="degree Fahrenheit",
    plural="degrees Fahrenheit",
    aliases=("df", "f", "fahrenheit"),
)

ALL_UNITS: Tuple[UnitDefinition, ...] = (
    METER,
    KILOMETER,
    CENTIMETER,
    MILLIMETER,
    MILE,
    YARD,
    FOOT,
    INCH,
    GRAM,
    KILOGRAM,
    MILLIGRAM,
    POUND,
    OUNCE,
    KELVIN,
    CELSIUS,
    FAHRENHEIT,
)

# Families where a negative quantity is meaningless.
NON_NEGATIVE_FAMILIES = frozenset({UnitFamily.LENGTH, UnitFamily.WEIGHT})


__all__ = [
    "UnitFamily",
    "UnitDefinition",
    "UnitConversionError",
    "UnknownUnitError",
    "IncompatibleUnitsError",
    "NegativeQuantityError",
    "DuplicateUnitNameError",
    "ALL_UNITS",
    "NON_NEGATIVE_FAMILIES",
    "METER",
    "KILOMETER",
    "CENTIMETER",
    "MILLIMETER",
    "MILE",
    "YARD",
    "FOOT",
    "INCH",
    "GRAM",
    "KILOGRAM",
    "MILLIGRAM",
    "POUND",
    "OUNCE",
    "KELVIN",
    "CELSIUS",
    "FAHRENHEIT",
]
