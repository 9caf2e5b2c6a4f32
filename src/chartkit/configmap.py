"""Construction of ``ConfigMap`` objects."""

from __future__ import annotations

from base64 import b64encode
from pathlib import Path

from kubernetes_asyncio.client import V1ConfigMap, V1ObjectMeta

from .exceptions import DuplicateKeyError

__all__ = ["ConfigMap"]


class ConfigMap:
    """A named bundle of configuration data.

    The name is used as given. Any volume built from this object refers to it
    by that name.

    Parameters
    ----------
    name
        Name of the ``ConfigMap`` object.
    data
        Initial UTF-8 data, keyed by file name.
    binary_data
        Initial binary data, keyed by file name.
    immutable
        Whether the object may not be changed once created. If `None`, the
        field is omitted.
    """

    def __init__(
        self,
        name: str,
        *,
        data: dict[str, str] | None = None,
        binary_data: dict[str, bytes] | None = None,
        immutable: bool | None = None,
    ) -> None:
        self._name = name
        self._data: dict[str, str] = {}
        self._binary_data: dict[str, bytes] = {}
        self._immutable = immutable
        for key, value in (data or {}).items():
            self.add_data(key, value)
        for key, binary in (binary_data or {}).items():
            self.add_binary_data(key, binary)

    @property
    def name(self) -> str:
        """Name of the ``ConfigMap``."""
        return self._name

    @property
    def data(self) -> dict[str, str]:
        """Copy of the UTF-8 data."""
        return dict(self._data)

    @property
    def binary_data(self) -> dict[str, bytes]:
        """Copy of the binary data."""
        return dict(self._binary_data)

    def add_data(self, key: str, value: str) -> None:
        """Add a UTF-8 data entry.

        Raises
        ------
        DuplicateKeyError
            Raised if the key is already present in either data map.
        """
        self._check_key(key)
        self._data[key] = value

    def add_binary_data(self, key: str, value: bytes) -> None:
        """Add a binary data entry.

        Raises
        ------
        DuplicateKeyError
            Raised if the key is already present in either data map.
        """
        self._check_key(key)
        self._binary_data[key] = value

    def add_file(self, path: Path, key: str | None = None) -> None:
        """Add the contents of a file.

        Files that decode as UTF-8 are stored as data, everything else as
        binary data.

        Parameters
        ----------
        path
            File to read.
        key
            Key under which to store the contents. Defaults to the base name
            of the file.
        """
        key = key or path.name
        contents = path.read_bytes()
        try:
            self.add_data(key, contents.decode())
        except UnicodeDecodeError:
            self.add_binary_data(key, contents)

    def to_kubernetes(self) -> V1ConfigMap:
        """Convert to the Kubernetes representation.

        Returns
        -------
        kubernetes_asyncio.client.V1ConfigMap
            Corresponding ``ConfigMap`` object.
        """
        binary_data = {
            k: b64encode(v).decode()
            for k, v in sorted(self._binary_data.items())
        }
        return V1ConfigMap(
            api_version="v1",
            kind="ConfigMap",
            metadata=V1ObjectMeta(name=self._name),
            data=dict(sorted(self._data.items())) or None,
            binary_data=binary_data or None,
            immutable=self._immutable,
        )

    def _check_key(self, key: str) -> None:
        if key in self._data or key in self._binary_data:
            raise DuplicateKeyError(self._name, key)
