"""Tests for building and serializing volumes."""

from __future__ import annotations

import pytest

from chartkit.configmap import ConfigMap
from chartkit.exceptions import FractionalSizeError
from chartkit.models.kubernetes import EmptyDirMedium
from chartkit.models.volumes import (
    ConfigMapVolumeOptions,
    EmptyDirVolumeOptions,
    KeyToPathOptions,
)
from chartkit.units import Size
from chartkit.volume import (
    ConfigMapVolumeSource,
    EmptyDirVolumeSource,
    KeyToPath,
    Volume,
)


def test_configmap_minimal(configmap: ConfigMap) -> None:
    vol = Volume.from_configmap(configmap)

    assert vol.serialize() == {
        "name": "configmap-test-my-config-map-configmap-d0fa5644",
        "configMap": {
            "defaultMode": None,
            "items": None,
            "name": "test-my-config-map-configmap-d0fa5644",
            "optional": None,
        },
    }


def test_configmap_custom_name(configmap: ConfigMap) -> None:
    vol = Volume.from_configmap(
        configmap, ConfigMapVolumeOptions(name="filesystem")
    )

    spec = vol.serialize()
    assert spec["name"] == "filesystem"
    assert spec["configMap"]["name"] == "test-my-config-map-configmap-d0fa5644"


def test_configmap_derived_name_is_stable() -> None:
    first = Volume.from_configmap(ConfigMap("settings"))
    second = Volume.from_configmap(ConfigMap("settings"))

    assert first.name == "configmap-settings"
    assert first == second


def test_configmap_default_mode(configmap: ConfigMap) -> None:
    vol = Volume.from_configmap(
        configmap, ConfigMapVolumeOptions(default_mode=0o777)
    )

    assert vol.serialize()["configMap"]["defaultMode"] == 0o777


def test_configmap_optional(configmap: ConfigMap) -> None:
    vol0 = Volume.from_configmap(configmap)
    vol1 = Volume.from_configmap(
        configmap, ConfigMapVolumeOptions(optional=True)
    )
    vol2 = Volume.from_configmap(
        configmap, ConfigMapVolumeOptions(optional=False)
    )

    assert vol0.serialize()["configMap"]["optional"] is None
    assert vol1.serialize()["configMap"]["optional"] is True
    assert vol2.serialize()["configMap"]["optional"] is False


def test_configmap_items(configmap: ConfigMap) -> None:
    options = ConfigMapVolumeOptions(
        items={
            "key1": KeyToPathOptions(path="path/to/key1"),
            "key2": KeyToPathOptions(path="path/key2", mode=0o100),
        }
    )
    vol = Volume.from_configmap(configmap, options)

    items = vol.serialize()["configMap"]["items"]
    assert items == [
        {"key": "key1", "mode": None, "path": "path/to/key1"},
        {"key": "key2", "mode": 0o100, "path": "path/key2"},
    ]


def test_configmap_items_sorted(configmap: ConfigMap) -> None:
    options = ConfigMapVolumeOptions(
        items={
            "key2": KeyToPathOptions(path="path2"),
            "key1": KeyToPathOptions(path="path1"),
        }
    )
    vol = Volume.from_configmap(configmap, options)

    assert vol.source == ConfigMapVolumeSource(
        name="test-my-config-map-configmap-d0fa5644",
        items=(
            KeyToPath(key="key1", path="path1"),
            KeyToPath(key="key2", path="path2"),
        ),
    )
    items = vol.serialize()["configMap"]["items"]
    assert items == [
        {"key": "key1", "mode": None, "path": "path1"},
        {"key": "key2", "mode": None, "path": "path2"},
    ]


def test_configmap_options_from_camel_case(configmap: ConfigMap) -> None:
    options = ConfigMapVolumeOptions.model_validate(
        {"defaultMode": 0o644, "items": {"a": {"path": "a.txt", "mode": 256}}}
    )
    vol = Volume.from_configmap(configmap, options)

    spec = vol.serialize()["configMap"]
    assert spec["defaultMode"] == 0o644
    assert spec["items"] == [{"key": "a", "mode": 256, "path": "a.txt"}]


def test_configmap_to_kubernetes(configmap: ConfigMap) -> None:
    options = ConfigMapVolumeOptions(
        name="config", items={"k": KeyToPathOptions(path="p")}
    )
    volume = Volume.from_configmap(configmap, options).to_kubernetes()

    assert volume.name == "config"
    assert volume.empty_dir is None
    assert volume.config_map.name == "test-my-config-map-configmap-d0fa5644"
    assert volume.config_map.items[0].key == "k"
    assert volume.config_map.items[0].path == "p"


def test_empty_dir_minimal() -> None:
    vol = Volume.from_empty_dir("main")

    assert vol.serialize() == {
        "name": "main",
        "emptyDir": {"medium": None, "sizeLimit": None},
    }


def test_empty_dir_default_medium() -> None:
    options = EmptyDirVolumeOptions(medium=EmptyDirMedium.DEFAULT)
    vol = Volume.from_empty_dir("main", options)

    assert vol.serialize()["emptyDir"]["medium"] == ""


def test_empty_dir_memory_medium() -> None:
    options = EmptyDirVolumeOptions(medium=EmptyDirMedium.MEMORY)
    vol = Volume.from_empty_dir("main", options)

    assert vol.serialize()["emptyDir"]["medium"] == "Memory"


def test_empty_dir_size_limit() -> None:
    options = EmptyDirVolumeOptions(size_limit=Size.gibibytes(20))
    vol = Volume.from_empty_dir("main", options)

    assert vol.source == EmptyDirVolumeSource(size_limit=Size.gibibytes(20))
    assert vol.serialize()["emptyDir"]["sizeLimit"] == "20480Mi"


def test_empty_dir_size_limit_string() -> None:
    options = EmptyDirVolumeOptions.model_validate(
        {"medium": "Memory", "sizeLimit": "512Mi"}
    )
    volume = Volume.from_empty_dir("scratch", options).to_kubernetes()

    assert volume.name == "scratch"
    assert volume.config_map is None
    assert volume.empty_dir.medium == "Memory"
    assert volume.empty_dir.size_limit == "512Mi"


def test_empty_dir_fractional_size() -> None:
    options = EmptyDirVolumeOptions(size_limit=Size.kibibytes(1536))
    vol = Volume.from_empty_dir("main", options)

    with pytest.raises(FractionalSizeError):
        vol.serialize()


def test_empty_dir_decimal_size_limit() -> None:
    options = EmptyDirVolumeOptions.model_validate({"sizeLimit": "1G"})
    vol = Volume.from_empty_dir("main", options)

    assert options.size_limit == Size.from_bytes(1000 * 1000 * 1000)
    with pytest.raises(FractionalSizeError):
        vol.serialize()

    options = EmptyDirVolumeOptions.model_validate({"sizeLimit": "1Gi"})
    vol = Volume.from_empty_dir("main", options)
    assert vol.serialize()["emptyDir"]["sizeLimit"] == "1024Mi"
