"""Storage sizes and unit conversions."""

from __future__ import annotations

import math
from enum import Enum
from typing import Self

import bitmath

from .exceptions import FractionalSizeError, InvalidSizeError

__all__ = ["Size", "SizeRoundingBehavior", "memory_to_bytes"]


def memory_to_bytes(memory: str) -> int:
    """Convert a string representation of memory to a number of bytes.

    Parameters
    ----------
    memory
        Amount of memory as a string.

    Returns
    -------
    int
        Equivalent number of bytes.

    Raises
    ------
    InvalidSizeError
        Raised if the input string is not a valid byte specification.
    """
    return int(Size.parse(memory).to_bytes())


class SizeRoundingBehavior(Enum):
    """How to handle sizes that are not whole numbers of the target unit."""

    FAIL = "fail"
    """Raise `~chartkit.exceptions.FractionalSizeError`."""

    FLOOR = "floor"
    """Round down to the nearest whole unit."""

    NONE = "none"
    """Return the fractional value unchanged."""


class Size:
    """An amount of storage.

    Sizes are built with one of the unit class methods, such as
    `Size.gibibytes`, or parsed from a string with `Size.parse`. They are
    immutable and compare equal if they represent the same number of bytes.

    Parameters
    ----------
    amount
        Underlying bitmath quantity.
    """

    def __init__(self, amount: bitmath.Bitmath) -> None:
        self._amount = amount

    @classmethod
    def from_bytes(cls, amount: float) -> Self:
        """Create a size from a number of bytes."""
        return cls(bitmath.Byte(amount))

    @classmethod
    def kibibytes(cls, amount: float) -> Self:
        """Create a size in kibibytes (1024 bytes)."""
        return cls(bitmath.KiB(amount))

    @classmethod
    def mebibytes(cls, amount: float) -> Self:
        """Create a size in mebibytes (1024 KiB)."""
        return cls(bitmath.MiB(amount))

    @classmethod
    def gibibytes(cls, amount: float) -> Self:
        """Create a size in gibibytes (1024 MiB)."""
        return cls(bitmath.GiB(amount))

    @classmethod
    def tebibytes(cls, amount: float) -> Self:
        """Create a size in tebibytes (1024 GiB)."""
        return cls(bitmath.TiB(amount))

    @classmethod
    def pebibytes(cls, amount: float) -> Self:
        """Create a size in pebibytes (1024 TiB)."""
        return cls(bitmath.PiB(amount))

    @classmethod
    def parse(cls, size: str) -> Self:
        """Parse a human-readable size.

        Both Kubernetes quantities (``20Gi``) and bitmath strings
        (``20GiB``) are accepted. Suffixes without an ``i`` are decimal
        units, and a bare number is a count of bytes.

        Parameters
        ----------
        size
            String representation of the size.

        Returns
        -------
        Size
            Corresponding size.

        Raises
        ------
        InvalidSizeError
            Raised if the string could not be parsed.
        """
        try:
            return cls(bitmath.parse_string_unsafe(size))
        except ValueError as e:
            raise InvalidSizeError(size) from e

    def to_bytes(self) -> float:
        """Return the size as a number of bytes."""
        return self._amount.bytes

    def to_kibibytes(
        self, rounding: SizeRoundingBehavior = SizeRoundingBehavior.FAIL
    ) -> float:
        """Return the size in kibibytes."""
        return self._round(self._amount.to_KiB().value, "KiB", rounding)

    def to_mebibytes(
        self, rounding: SizeRoundingBehavior = SizeRoundingBehavior.FAIL
    ) -> float:
        """Return the size in mebibytes."""
        return self._round(self._amount.to_MiB().value, "MiB", rounding)

    def to_gibibytes(
        self, rounding: SizeRoundingBehavior = SizeRoundingBehavior.FAIL
    ) -> float:
        """Return the size in gibibytes."""
        return self._round(self._amount.to_GiB().value, "GiB", rounding)

    def to_kubernetes(self) -> str:
        """Render the size as a Kubernetes quantity in mebibytes.

        Returns
        -------
        str
            Quantity such as ``20480Mi``.

        Raises
        ------
        FractionalSizeError
            Raised if the size is not a whole number of mebibytes.
        """
        return f"{self.to_mebibytes()}Mi"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Size):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        return f"Size({self._amount!r})"

    def _round(
        self, amount: float, unit: str, rounding: SizeRoundingBehavior
    ) -> float:
        match rounding:
            case SizeRoundingBehavior.FAIL:
                if not float(amount).is_integer():
                    raise FractionalSizeError(amount, unit)
                return int(amount)
            case SizeRoundingBehavior.FLOOR:
                return math.floor(amount)
            case SizeRoundingBehavior.NONE:
                return amount
