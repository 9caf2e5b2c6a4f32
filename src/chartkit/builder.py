"""Construction of Kubernetes objects for volumes and volume mounts."""

from __future__ import annotations

from collections.abc import Iterable

from kubernetes_asyncio.client import V1Volume, V1VolumeMount
from structlog.stdlib import BoundLogger

from .config import (
    ConfigMapSourceConfig,
    EmptyDirSourceConfig,
    VolumeConfig,
    VolumeMountConfig,
)
from .configmap import ConfigMap
from .exceptions import DuplicateVolumeError
from .volume import Volume

__all__ = ["VolumeBuilder"]


class VolumeBuilder:
    """Construct volumes and volume mounts from configuration.

    Parameters
    ----------
    logger
        Logger to use.
    """

    def __init__(self, logger: BoundLogger) -> None:
        self._logger = logger

    def build_mounts(
        self, mounts: Iterable[VolumeMountConfig], prefix: str = ""
    ) -> list[V1VolumeMount]:
        """Construct volume mounts for configured volumes.

        Parameters
        ----------
        mounts
            Configured volume mounts.
        prefix
            Prefix to prepend to all mount paths, if given.

        Returns
        -------
        list of kubernetes_asyncio.client.V1VolumeMount
            List of volume mounts.
        """
        return [
            V1VolumeMount(
                name=m.volume_name,
                mount_path=prefix + m.container_path,
                sub_path=m.sub_path,
                read_only=m.read_only,
            )
            for m in mounts
        ]

    def build_volumes(self, volumes: Iterable[VolumeConfig]) -> list[Volume]:
        """Construct volumes from their configuration.

        Parameters
        ----------
        volumes
            Configured volumes.

        Returns
        -------
        list of Volume
            Volumes in the same order as the configuration.

        Raises
        ------
        DuplicateVolumeError
            Raised if two volumes end up with the same name.
        """
        results: list[Volume] = []
        seen = set()
        for spec in volumes:
            match spec.source:
                case ConfigMapSourceConfig() as source:
                    configmap = ConfigMap(source.config_map_name)
                    options = source.to_options(spec.name)
                    volume = Volume.from_configmap(configmap, options)
                case EmptyDirSourceConfig() as source:
                    volume = Volume.from_empty_dir(spec.volume_name, source)
            if volume.name in seen:
                raise DuplicateVolumeError(volume.name)
            seen.add(volume.name)
            self._logger.debug(
                "Built volume",
                volume=volume.name,
                source=type(volume.source).__name__,
            )
            results.append(volume)
        return results

    def build_kubernetes_volumes(
        self, volumes: Iterable[VolumeConfig]
    ) -> list[V1Volume]:
        """Construct Kubernetes ``V1Volume`` objects for configured volumes.

        Parameters
        ----------
        volumes
            Configured volumes.

        Returns
        -------
        list of kubernetes_asyncio.client.V1Volume
            List of Kubernetes ``V1Volume`` objects.

        Raises
        ------
        DuplicateVolumeError
            Raised if two volumes end up with the same name.
        """
        return [v.to_kubernetes() for v in self.build_volumes(volumes)]
