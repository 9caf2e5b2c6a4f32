"""Tests for ConfigMap objects."""

from __future__ import annotations

from pathlib import Path

import pytest

from chartkit.configmap import ConfigMap
from chartkit.exceptions import DuplicateKeyError


def test_to_kubernetes() -> None:
    configmap = ConfigMap(
        "app-settings",
        data={"b.conf": "b", "a.conf": "a"},
        binary_data={"blob": b"\x00\x01"},
        immutable=True,
    )

    result = configmap.to_kubernetes()
    assert result.kind == "ConfigMap"
    assert result.metadata.name == "app-settings"
    assert list(result.data) == ["a.conf", "b.conf"]
    assert result.binary_data == {"blob": "AAE="}
    assert result.immutable is True


def test_empty() -> None:
    result = ConfigMap("empty").to_kubernetes()

    assert result.data is None
    assert result.binary_data is None
    assert result.immutable is None


def test_duplicate_key() -> None:
    configmap = ConfigMap("app-settings", data={"key": "value"})

    with pytest.raises(DuplicateKeyError):
        configmap.add_data("key", "other")
    with pytest.raises(DuplicateKeyError):
        configmap.add_binary_data("key", b"other")
    assert configmap.data == {"key": "value"}


def test_add_file(tmp_path: Path) -> None:
    text = tmp_path / "settings.json"
    text.write_text('{"debug": true}\n')
    binary = tmp_path / "logo.bin"
    binary.write_bytes(b"\xff\xfe\x00")

    configmap = ConfigMap("app-settings")
    configmap.add_file(text)
    configmap.add_file(binary, key="logo")

    assert configmap.data == {"settings.json": '{"debug": true}\n'}
    assert configmap.binary_data == {"logo": b"\xff\xfe\x00"}
