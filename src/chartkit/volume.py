"""Volumes that can be mounted into the containers of a pod."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from kubernetes_asyncio.client import (
    V1ConfigMapVolumeSource,
    V1EmptyDirVolumeSource,
    V1KeyToPath,
    V1Volume,
)

from .constants import CONFIGMAP_VOLUME_PREFIX
from .models.kubernetes import ConfigMapReference, EmptyDirMedium
from .models.volumes import ConfigMapVolumeOptions, EmptyDirVolumeOptions
from .units import Size

__all__ = [
    "ConfigMapVolumeSource",
    "EmptyDirVolumeSource",
    "KeyToPath",
    "Volume",
]


@dataclass(frozen=True)
class KeyToPath:
    """Projection of one ``ConfigMap`` key to a file in the volume."""

    key: str
    """Key in the ``ConfigMap``."""

    path: str
    """Relative path of the file inside the volume."""

    mode: int | None = None
    """Permission bits of the file, or `None` to use the volume default."""

    def to_kubernetes(self) -> V1KeyToPath:
        return V1KeyToPath(key=self.key, path=self.path, mode=self.mode)


@dataclass(frozen=True)
class ConfigMapVolumeSource:
    """Volume populated from the keys of a ``ConfigMap``."""

    name: str
    """Name of the referenced ``ConfigMap``."""

    default_mode: int | None = None
    """Default permission bits of created files."""

    optional: bool | None = None
    """Whether the ``ConfigMap`` may be missing, or `None` if unset."""

    items: tuple[KeyToPath, ...] | None = None
    """Projected keys, sorted by key, or `None` to project every key."""

    def to_kubernetes(self) -> V1ConfigMapVolumeSource:
        items = None
        if self.items is not None:
            items = [i.to_kubernetes() for i in self.items]
        return V1ConfigMapVolumeSource(
            name=self.name,
            default_mode=self.default_mode,
            optional=self.optional,
            items=items,
        )


@dataclass(frozen=True)
class EmptyDirVolumeSource:
    """Temporary directory that shares the lifetime of the pod."""

    medium: EmptyDirMedium | None = None
    """Storage medium, or `None` if unset."""

    size_limit: Size | None = None
    """Maximum amount of local storage, or `None` if unlimited."""

    def to_kubernetes(self) -> V1EmptyDirVolumeSource:
        medium = None if self.medium is None else self.medium.value
        size_limit = None
        if self.size_limit is not None:
            size_limit = self.size_limit.to_kubernetes()
        return V1EmptyDirVolumeSource(medium=medium, size_limit=size_limit)


@dataclass(frozen=True)
class Volume:
    """A named volume in a pod specification.

    Volumes are created with one of the ``from_*`` class methods and are
    immutable afterwards. Each volume has exactly one source.
    """

    name: str
    """Name of the volume, unique within the pod."""

    source: ConfigMapVolumeSource | EmptyDirVolumeSource
    """Source of the volume contents."""

    @classmethod
    def from_configmap(
        cls,
        configmap: ConfigMapReference,
        options: ConfigMapVolumeOptions | None = None,
    ) -> Self:
        """Create a volume populated from a ``ConfigMap``.

        Parameters
        ----------
        configmap
            ``ConfigMap`` to mount. Only its name is used and it is not
            checked for existence.
        options
            Volume options. If the name is not set, the volume is named
            ``configmap-`` followed by the name of the ``ConfigMap``, so two
            unnamed volumes from the same source have the same name.

        Returns
        -------
        Volume
            Corresponding volume.
        """
        options = options or ConfigMapVolumeOptions()
        items = None
        if options.items is not None:
            items = tuple(
                KeyToPath(
                    key=k,
                    path=options.items[k].path,
                    mode=options.items[k].mode,
                )
                for k in sorted(options.items)
            )
        source = ConfigMapVolumeSource(
            name=configmap.name,
            default_mode=options.default_mode,
            optional=options.optional,
            items=items,
        )
        name = options.name
        if name is None:
            name = CONFIGMAP_VOLUME_PREFIX + configmap.name
        return cls(name=name, source=source)

    @classmethod
    def from_empty_dir(
        cls, name: str, options: EmptyDirVolumeOptions | None = None
    ) -> Self:
        """Create an empty directory volume.

        Parameters
        ----------
        name
            Name of the volume.
        options
            Volume options.

        Returns
        -------
        Volume
            Corresponding volume.
        """
        options = options or EmptyDirVolumeOptions()
        source = EmptyDirVolumeSource(
            medium=options.medium, size_limit=options.size_limit
        )
        return cls(name=name, source=source)

    def to_kubernetes(self) -> V1Volume:
        """Convert to the Kubernetes representation.

        Returns
        -------
        kubernetes_asyncio.client.V1Volume
            Corresponding volume for a pod spec.

        Raises
        ------
        FractionalSizeError
            Raised if the size limit is not a whole number of mebibytes.
        """
        match self.source:
            case ConfigMapVolumeSource() as source:
                return V1Volume(
                    name=self.name, config_map=source.to_kubernetes()
                )
            case EmptyDirVolumeSource() as source:
                return V1Volume(
                    name=self.name, empty_dir=source.to_kubernetes()
                )

    def serialize(self) -> dict[str, Any]:
        """Serialize the volume to its manifest form.

        Only the populated source is included, but every field of that
        source is present, with `None` for fields that were not set.

        Returns
        -------
        dict of str
            Volume as it appears in the ``volumes`` list of a pod spec.

        Raises
        ------
        FractionalSizeError
            Raised if the size limit is not a whole number of mebibytes.
        """
        match self.source:
            case ConfigMapVolumeSource() as source:
                key = "configMap"
            case EmptyDirVolumeSource() as source:
                key = "emptyDir"
        return {
            "name": self.name,
            key: source.to_kubernetes().to_dict(serialize=True),
        }
