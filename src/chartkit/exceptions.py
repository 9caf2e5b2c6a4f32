"""Exceptions for chartkit."""

from __future__ import annotations

__all__ = [
    "DuplicateKeyError",
    "DuplicateVolumeError",
    "FractionalSizeError",
    "InvalidSizeError",
]


class DuplicateKeyError(ValueError):
    """A key was added to a ``ConfigMap`` that already contains it."""

    def __init__(self, configmap: str, key: str) -> None:
        msg = f'Key "{key}" already exists in ConfigMap {configmap}'
        super().__init__(msg)
        self.configmap = configmap
        self.key = key


class DuplicateVolumeError(ValueError):
    """Two volumes with the same name were placed in the same pod."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Duplicate volume name {name}")
        self.name = name


class FractionalSizeError(ValueError):
    """A size cannot be expressed as a whole number of the requested unit."""

    def __init__(self, amount: float, unit: str) -> None:
        msg = (
            f"Size of {amount} {unit} is not an integer. Use a rounding"
            " behavior other than FAIL to convert it."
        )
        super().__init__(msg)
        self.amount = amount
        self.unit = unit


class InvalidSizeError(ValueError):
    """A string could not be parsed as a storage size."""

    def __init__(self, size: str) -> None:
        super().__init__(f'Invalid size "{size}"')
        self.size = size
