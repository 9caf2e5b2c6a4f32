"""Construction of Kubernetes pod volumes."""

from importlib.metadata import PackageNotFoundError, version

from .configmap import ConfigMap
from .models.kubernetes import ConfigMapReference, EmptyDirMedium
from .models.volumes import (
    ConfigMapVolumeOptions,
    EmptyDirVolumeOptions,
    KeyToPathOptions,
)
from .units import Size, SizeRoundingBehavior
from .volume import Volume

__all__ = [
    "ConfigMap",
    "ConfigMapReference",
    "ConfigMapVolumeOptions",
    "EmptyDirMedium",
    "EmptyDirVolumeOptions",
    "KeyToPathOptions",
    "Size",
    "SizeRoundingBehavior",
    "Volume",
    "__version__",
]


__version__: str
"""The application version string (PEP 440 / SemVer compatible)."""

try:
    __version__ = version(__name__)
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"
