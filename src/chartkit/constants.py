"""Global constants."""

from pathlib import Path

__all__ = [
    "CONFIGMAP_VOLUME_PREFIX",
    "CONFIG_FILE",
    "CONFIG_FILE_ENV_VAR",
    "ENV_PREFIX",
    "KUBERNETES_NAME_PATTERN",
    "ROOT_LOGGER",
]

CONFIGMAP_VOLUME_PREFIX = "configmap-"
"""Prefix of volume names derived from the name of a ``ConfigMap``."""

CONFIG_FILE = Path("/etc/chartkit/config.yaml")
"""Default path to the volume configuration."""

ENV_PREFIX = "CHARTKIT_"
"""Prefix for environment variables that override configuration settings."""

CONFIG_FILE_ENV_VAR = f"{ENV_PREFIX}CONFIG_FILE"
"""Environment variable that sets the configuration path for the CLI."""

KUBERNETES_NAME_PATTERN = "^[a-z0-9]([-a-z0-9]*[a-z0-9])?$"
"""Pattern matching valid Kubernetes volume names."""

ROOT_LOGGER = "chartkit"
"""Name of the root logger used by structlog."""
