"""Data types for interacting with Kubernetes."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

__all__ = [
    "ConfigMapReference",
    "EmptyDirMedium",
]


class ConfigMapReference(Protocol):
    """Protocol for objects that can back a ``configMap`` volume.

    The volume only needs the resolved name of the ``ConfigMap``, so anything
    with a ``name`` attribute, such as `~chartkit.configmap.ConfigMap`, can be
    mounted.
    """

    @property
    def name(self) -> str: ...


class EmptyDirMedium(Enum):
    """Storage medium backing an ``emptyDir`` volume."""

    DEFAULT = ""
    """Use the default storage medium of the node."""

    MEMORY = "Memory"
    """Use a RAM-backed filesystem (tmpfs)."""
